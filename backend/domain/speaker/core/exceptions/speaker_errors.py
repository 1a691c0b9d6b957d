"""Speaker domain exceptions."""

from typing import Any


class SpeakerDomainError(Exception):
    """Base exception for Speaker domain errors."""

    pass


class InvalidSeedNumberError(SpeakerDomainError):
    """Seed number is not a usable finite number."""

    def __init__(self, value: Any, reason: str):
        """Initialize with invalid seed value and reason.

        Args:
            value: Rejected seed number
            reason: Reason why it's invalid
        """
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid seed number {value!r}: {reason}")
