"""Reporting periods and the date ranges they resolve to.

All boundaries are computed in the timezone of the anchor instant, which
the application always supplies in UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from pos.domain.exceptions import ValidationError

_ONE_MICROSECOND = timedelta(microseconds=1)


class Period(Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @staticmethod
    def parse(value: Period | str) -> Period:
        if isinstance(value, Period):
            return value
        try:
            return Period(str(value).strip().lower())
        except ValueError as exc:
            choices = ", ".join(p.value for p in Period)
            raise ValidationError(
                f"Unknown period {value!r}; expected one of: {choices}"
            ) from exc


@dataclass(frozen=True)
class PeriodRange:
    """Inclusive ``[start, end]`` timestamp range."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValidationError(
                f"Range start {self.start.isoformat()} is after end {self.end.isoformat()}"
            )

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end

    @staticmethod
    def for_period(period: Period, now: datetime) -> PeriodRange:
        """Resolve *period* into the calendar range containing *now*.

        Weeks start on Monday. ``end`` is the last microsecond before the
        next period starts.
        """
        day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)

        if period is Period.DAILY:
            start = day_start
            next_start = start + timedelta(days=1)
        elif period is Period.WEEKLY:
            start = day_start - timedelta(days=day_start.weekday())
            next_start = start + timedelta(days=7)
        elif period is Period.MONTHLY:
            start = day_start.replace(day=1)
            if start.month == 12:
                next_start = start.replace(year=start.year + 1, month=1)
            else:
                next_start = start.replace(month=start.month + 1)
        else:
            raise ValidationError(f"Unsupported period: {period!r}")

        return PeriodRange(start=start, end=next_start - _ONE_MICROSECOND)
