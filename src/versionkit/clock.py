# SPDX-License-Identifier: MIT
"""Calendar sources used by CalVer calendar increments."""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Supplies the current calendar values."""

    def year(self) -> int:
        """Return the current year (e.g., 2023)."""
        ...

    def month(self) -> int:
        """Return the current month, 1-based."""
        ...

    def week(self) -> int:
        """Return the current ISO-8601 week number."""
        ...

    def day(self) -> int:
        """Return the current day of the month."""
        ...


class _DateClock:
    def _today(self) -> date:
        raise NotImplementedError

    def year(self) -> int:
        return self._today().year

    def month(self) -> int:
        return self._today().month

    def week(self) -> int:
        return self._today().isocalendar()[1]

    def day(self) -> int:
        return self._today().day


class SystemClock(_DateClock):
    """Clock backed by the system time.

    Args:
        tz: Time zone used to determine the current date, local time if None
    """

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self.tz = tz

    def _today(self) -> date:
        return datetime.now(self.tz).date()

    def __repr__(self) -> str:
        return f"SystemClock(tz={self.tz!r})"


class FixedClock(_DateClock):
    """Clock frozen at a given date, for tests and reproducible releases."""

    def __init__(self, when: date) -> None:
        if isinstance(when, datetime):
            when = when.date()
        self.when = when

    def _today(self) -> date:
        return self.when

    def __repr__(self) -> str:
        return f"FixedClock({self.when.isoformat()!r})"
