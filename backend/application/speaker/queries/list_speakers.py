"""List speakers query."""

from dataclasses import dataclass
from typing import List

import structlog

from domain.speaker.core.entities.speaker import Speaker
from domain.speaker.core.ports.speaker_repository import ISpeakerRepository

logger = structlog.get_logger(__name__)


@dataclass
class ListSpeakersQuery:
    """Query to list all speakers.

    Read-only operation that delegates to the speaker repository.

    Examples:
        >>> query = ListSpeakersQuery(repository)
        >>> speakers = query.execute()
        >>> speakers[0].first_name
        'Bryan'
    """

    repository: ISpeakerRepository

    def execute(self) -> List[Speaker]:
        """Execute list speakers query.

        Returns:
            Speakers in repository order
        """
        speakers = self.repository.find_all()
        logger.debug("Speakers listed", count=len(speakers))
        return speakers
