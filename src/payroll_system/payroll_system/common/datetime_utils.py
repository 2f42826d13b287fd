from __future__ import annotations

from datetime import date, datetime
from typing import Protocol


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time."""
    return datetime.now()


class Clock(Protocol):
    """Time source injected into calculators that depend on 'today'."""

    def now(self) -> datetime:
        raise NotImplementedError

    def today(self) -> date:
        raise NotImplementedError


class SystemClock:
    def now(self) -> datetime:
        return now_local()

    def today(self) -> date:
        return now_local().date()


class FixedClock:
    """Clock pinned to a single instant (tests, back-dated recalculations)."""

    def __init__(self, instant: datetime | date):
        if not isinstance(instant, datetime):
            instant = datetime.combine(instant, datetime.min.time())
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def today(self) -> date:
        return self._instant.date()
