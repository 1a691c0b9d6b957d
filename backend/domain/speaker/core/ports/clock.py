"""Clock port (time source)."""

from datetime import datetime
from typing import Protocol


class IClock(Protocol):
    """Source of the current time.

    Injected wherever code needs "now", so tests can pin it.
    """

    def now(self) -> datetime:
        """Return the current time."""
        ...
