"""System clock adapter."""

from datetime import datetime, timezone


class SystemClock:
    """IClock implementation backed by the system clock (UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
