"""Speaker domain GraphQL queries."""

from typing import List

import strawberry
from strawberry.types import Info

from application.speaker.queries.list_speakers import ListSpeakersQuery
from graphql_api.types_speaker import SpeakerType


@strawberry.type
class SpeakerQueries:
    """Speaker domain queries.

    Examples:
        query {
          speakers {
            findAll { firstName lastName seedNumber }
          }
        }
    """

    @strawberry.field(description="All speakers known to the active repository")
    async def find_all(self, info: Info) -> List[SpeakerType]:
        speaker_repository = info.context.get("speaker_repository")
        if not speaker_repository:
            raise RuntimeError("speaker_repository not found in context")

        query = ListSpeakersQuery(repository=speaker_repository)
        return [SpeakerType.from_entity(s) for s in query.execute()]
