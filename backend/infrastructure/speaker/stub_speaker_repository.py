"""Stub speaker repository.

Returns a single hard-coded speaker without touching any data store.
Active under the "dev" repository profile.
"""

from typing import List

import structlog

from domain.speaker.core.entities.speaker import Speaker, validate_seed_number
from domain.speaker.core.ports.clock import IClock
from domain.speaker.core.ports.speaker_repository import ISpeakerRepository

logger = structlog.get_logger(__name__)

STUB_FIRST_NAME = "Bryan"
STUB_LAST_NAME = "Smith"


class StubSpeakerRepository(ISpeakerRepository):
    """Stub implementation of ISpeakerRepository.

    Both collaborators are supplied by the caller and fixed for the
    lifetime of the instance.

    Examples:
        >>> repo = StubSpeakerRepository(clock=SystemClock(), seed_number=42.0)
        >>> repo.find_all()
        [Speaker(first_name='Bryan', last_name='Smith', seed_number=42.0)]
    """

    def __init__(self, clock: IClock, seed_number: float) -> None:
        """Initialize repository.

        Args:
            clock: Time source read on every lookup (diagnostic only)
            seed_number: Value attached to every returned speaker

        Raises:
            ValueError: If clock is None
            InvalidSeedNumberError: If seed_number is not a finite number
        """
        if clock is None:
            raise ValueError("StubSpeakerRepository requires a clock")

        self._clock = clock
        self._seed_number = validate_seed_number(seed_number)

    @property
    def seed_number(self) -> float:
        return self._seed_number

    def find_all(self) -> List[Speaker]:
        """Return the single stub speaker.

        A new list and a new Speaker are built on every call.

        Returns:
            One-element list with Bryan Smith and the configured seed
        """
        speaker = Speaker(
            first_name=STUB_FIRST_NAME,
            last_name=STUB_LAST_NAME,
            seed_number=self._seed_number,
        )

        logger.info("cal", time=self._clock.now().isoformat())

        return [speaker]
