"""Clock implementations."""

from __future__ import annotations

from datetime import datetime, timezone


class SystemClock:
    """IClock backed by the system wall clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """IClock frozen at a single instant. Naive datetimes are read as UTC."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant.astimezone(timezone.utc)

    def now(self) -> datetime:
        return self._instant
