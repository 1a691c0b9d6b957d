"""Speaker repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List

from domain.speaker.core.entities.speaker import Speaker


class ISpeakerRepository(ABC):
    """Repository interface for Speaker records.

    Implementations decide where speakers come from. The only
    implementation shipped today returns a fixed record and touches no
    data store.

    Examples:
        >>> class FixedSpeakerRepository(ISpeakerRepository):
        ...     def find_all(self) -> List[Speaker]:
        ...         return [Speaker("Ada", "Lovelace", 1.0)]
    """

    @abstractmethod
    def find_all(self) -> List[Speaker]:
        """List all speakers.

        Returns:
            Ordered list of Speaker records. The caller owns the list and
            its elements.
        """
        pass
