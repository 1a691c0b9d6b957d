"""GraphQL types for Speaker domain."""

import strawberry

from domain.speaker.core.entities.speaker import Speaker


@strawberry.type
class SpeakerType:
    """Speaker GraphQL type.

    Examples:
        {
          "firstName": "Bryan",
          "lastName": "Smith",
          "seedNumber": 42.0
        }
    """

    first_name: str
    last_name: str
    seed_number: float

    @staticmethod
    def from_entity(speaker: Speaker) -> "SpeakerType":
        """Map domain entity to GraphQL type."""
        return SpeakerType(
            first_name=speaker.first_name,
            last_name=speaker.last_name,
            seed_number=speaker.seed_number,
        )
