"""GraphQL schema factory.

The Query class is defined in app.py; importing it lazily here avoids a
circular import between app and this module.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all integrated resolvers."""
    from app import Query

    return strawberry.Schema(query=Query)
