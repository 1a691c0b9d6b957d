"""Speaker GraphQL resolvers."""

from graphql_api.resolvers.speaker.queries import SpeakerQueries

__all__ = ["SpeakerQueries"]
