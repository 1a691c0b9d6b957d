"""Speaker entity."""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any

from domain.speaker.core.exceptions.speaker_errors import InvalidSeedNumberError


def validate_seed_number(value: Any) -> float:
    """Check that a seed number is a finite real number.

    Args:
        value: Candidate seed number

    Returns:
        The seed as float (unchanged in value)

    Raises:
        InvalidSeedNumberError: If value is a bool, not numeric, NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidSeedNumberError(value, "must be a real number")
    if not math.isfinite(value):
        raise InvalidSeedNumberError(value, "must be finite")
    return float(value)


@dataclass
class Speaker:
    """Conference speaker record.

    Transient: created fresh for each lookup, never persisted and never
    retained by the repository that produced it. Equality is structural.

    Examples:
        >>> speaker = Speaker(first_name="Bryan", last_name="Smith", seed_number=42.0)
        >>> speaker.first_name
        'Bryan'
        >>> speaker == Speaker("Bryan", "Smith", 42.0)
        True
    """

    first_name: str
    last_name: str
    seed_number: float

    def __post_init__(self) -> None:
        """Validate seed number."""
        self.seed_number = validate_seed_number(self.seed_number)
