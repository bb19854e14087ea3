"""Time source for validations that depend on "now"."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FixedClock:
    """Always returns the same instant."""
    instant: datetime

    def now(self) -> datetime:
        return self.instant


SYSTEM_CLOCK: Clock = SystemClock()
