from __future__ import annotations

# Standard library
import datetime
import logging as _logging
from contextlib import asynccontextmanager
from typing import Final, Any

# Third-party
import strawberry
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

# Local application imports
from graphql_api.context import create_context
from graphql_api.resolvers.speaker.queries import SpeakerQueries
from infrastructure.config import get_app_version, get_log_level
from infrastructure.logging_config import configure_logging
from infrastructure.speaker.repository_factory import get_speaker_repository

# --- Logging configuration (stdlib + structlog) ---
configure_logging(get_log_level())

logger = _logging.getLogger("startup")

APP_VERSION = get_app_version()


@strawberry.type
class Query:
    @strawberry.field
    def server_time(self) -> str:
        now = datetime.datetime.now(datetime.timezone.utc)
        return now.strftime("%Y-%m-%dT%H:%M:%S.%fZ")

    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Speaker queries")  # type: ignore[misc]
    def speakers(self) -> SpeakerQueries:
        """Speaker queries.

        Example:
            query {
              speakers {
                findAll { firstName lastName seedNumber }
              }
            }
        """
        return SpeakerQueries()


from graphql_api.schema import create_schema  # noqa: E402

schema = create_schema()


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:
    """Application lifecycle: log startup/shutdown around request serving."""
    logger.info(
        "lifespan.ready",
        extra={"repository": type(_speaker_repository).__name__},
    )
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="Conference Speakers Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# Repository (explicit profile selection via factory)
# - SPEAKER_PROFILE: "dev" (default)
# - SPEAKER_SEED_NUMBER: explicit seed (default: random in [0, 100))
_speaker_repository = get_speaker_repository()


def get_graphql_context() -> Any:
    """Create GraphQL context with all dependencies."""
    return create_context(speaker_repository=_speaker_repository)


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
