"""Speaker domain exceptions."""

from domain.speaker.core.exceptions.speaker_errors import (
    InvalidSeedNumberError,
    SpeakerDomainError,
)

__all__ = ["SpeakerDomainError", "InvalidSeedNumberError"]
