"""Shift and break models.

All durations are whole minutes; hours are derived as ``minutes / 60`` in
Decimal so that no binary floating point enters the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum

MINUTE = timedelta(minutes=1)
MINUTES_PER_HOUR = Decimal(60)


class DayType(str, Enum):
    """Day category for penalty rate purposes."""

    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    def __str__(self) -> str:
        return self.value.capitalize()

    @property
    def is_weekend(self) -> bool:
        return self is not DayType.WEEKDAY


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from ``start`` to ``end`` (negative if reversed)."""
    return (end - start) // MINUTE


def minutes_to_hours(minutes: int) -> Decimal:
    return Decimal(minutes) / MINUTES_PER_HOUR


@dataclass(frozen=True)
class Break:
    """A break within a shift. Only unpaid breaks reduce worked hours."""

    start_time: datetime
    end_time: datetime
    is_paid: bool = False

    @property
    def duration_minutes(self) -> int:
        return minutes_between(self.start_time, self.end_time)

    def overlap_minutes(self, start: datetime, end: datetime) -> int:
        """Minutes of this break falling inside ``[start, end)``."""
        overlap_start = max(self.start_time, start)
        overlap_end = min(self.end_time, end)
        if overlap_end <= overlap_start:
            return 0
        return minutes_between(overlap_start, overlap_end)


@dataclass(frozen=True)
class Shift:
    """A worked shift. ``start_time``/``end_time`` may cross midnight."""

    id: str
    date: date
    start_time: datetime
    end_time: datetime
    breaks: tuple[Break, ...] = field(default_factory=tuple)

    @property
    def span_minutes(self) -> int:
        return minutes_between(self.start_time, self.end_time)

    @property
    def unpaid_break_minutes(self) -> int:
        return sum(b.duration_minutes for b in self.breaks if not b.is_paid)

    @property
    def worked_minutes(self) -> int:
        return self.span_minutes - self.unpaid_break_minutes

    @property
    def worked_hours(self) -> Decimal:
        """Span minus unpaid breaks, in hours."""
        return minutes_to_hours(self.worked_minutes)

    def unpaid_break_minutes_within(self, start: datetime, end: datetime) -> int:
        """Unpaid break minutes overlapping ``[start, end)``."""
        return sum(b.overlap_minutes(start, end) for b in self.breaks if not b.is_paid)
