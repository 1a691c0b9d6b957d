"""Speaker repository factory with explicit profile selection.

The composing application picks a RepositoryProfile and passes it in;
nothing here matches profiles implicitly at runtime:
- "dev": StubSpeakerRepository (fixed record, no data store)

get_speaker_repository() is the composition-root helper that reads the
profile and seed from the environment (SPEAKER_PROFILE, SPEAKER_SEED_NUMBER).

Default profile: dev
"""

from enum import Enum
from typing import Optional

import structlog

from domain.speaker.core.ports.clock import IClock
from domain.speaker.core.ports.speaker_repository import ISpeakerRepository
from infrastructure.clock import SystemClock
from infrastructure.config import get_seed_number, get_speaker_profile
from infrastructure.speaker.seed import SeedFactory, random_seed_number
from infrastructure.speaker.stub_speaker_repository import StubSpeakerRepository

logger = structlog.get_logger(__name__)


class RepositoryProfile(str, Enum):
    """Profiles under which a speaker repository can be activated."""

    DEV = "dev"

    @classmethod
    def parse(cls, value: str) -> "RepositoryProfile":
        """Parse a profile name (case-insensitive).

        Accepts "mydevprofile" as a legacy alias of "dev".

        Raises:
            ValueError: If the name matches no profile
        """
        normalized = value.strip().lower()
        if normalized == "mydevprofile":
            return cls.DEV

        for profile in cls:
            if profile.value == normalized:
                return profile

        expected = ", ".join(f"'{p.value}'" for p in cls)
        raise ValueError(f"Invalid SPEAKER_PROFILE value: {value}. Expected {expected}")


def create_speaker_repository(
    profile: RepositoryProfile,
    clock: Optional[IClock] = None,
    seed_number: Optional[float] = None,
    seed_factory: SeedFactory = random_seed_number,
) -> ISpeakerRepository:
    """Create speaker repository for an explicit profile.

    Args:
        profile: Profile selected by the composing application
        clock: Time source (default: SystemClock)
        seed_number: Explicit seed; takes precedence over seed_factory
        seed_factory: Called once, here, when seed_number is None

    Returns:
        ISpeakerRepository: The repository active under the profile

    Raises:
        ValueError: If no repository is registered for the profile
        InvalidSeedNumberError: If the seed is not a finite number
    """
    if profile is RepositoryProfile.DEV:
        seed = seed_number if seed_number is not None else seed_factory()
        logger.debug(
            "Creating speaker repository",
            profile=profile.value,
            explicit_seed=seed_number is not None,
        )
        return StubSpeakerRepository(
            clock=clock if clock is not None else SystemClock(),
            seed_number=seed,
        )

    raise ValueError(f"No speaker repository registered for profile: {profile!r}")


# Singleton instance
_speaker_repository: Optional[ISpeakerRepository] = None


def get_speaker_repository() -> ISpeakerRepository:
    """Get singleton speaker repository built from environment configuration.

    Environment Variables:
        SPEAKER_PROFILE: "dev" (default: dev)
        SPEAKER_SEED_NUMBER: explicit seed (default: random in [0, 100))

    Returns:
        ISpeakerRepository: The singleton repository
    """
    global _speaker_repository

    if _speaker_repository is None:
        _speaker_repository = create_speaker_repository(
            profile=RepositoryProfile.parse(get_speaker_profile()),
            seed_number=get_seed_number(),
        )

    return _speaker_repository


def reset_speaker_repository() -> None:
    """Reset the singleton (for testing purposes)."""
    global _speaker_repository
    _speaker_repository = None
