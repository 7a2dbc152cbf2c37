"""Day classification and midnight segmentation of shifts.

Penalty rates depend on the calendar day each hour is worked, so a shift
that crosses midnight is split into one segment per day before pricing.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from decimal import Decimal

from award_engine.calculators.types import ZERO, format_decimal
from award_engine.models import AuditStep, DayType, Shift
from award_engine.models.shift import minutes_between, minutes_to_hours

SATURDAY = 5
SUNDAY = 6


def get_day_type(value: datetime) -> DayType:
    """Classify a timestamp as weekday, Saturday or Sunday."""
    weekday = value.weekday()
    if weekday == SATURDAY:
        return DayType.SATURDAY
    if weekday == SUNDAY:
        return DayType.SUNDAY
    return DayType.WEEKDAY


@dataclass(frozen=True)
class ShiftSegment:
    """The part of a shift falling on a single calendar day.

    ``minutes`` and ``hours`` exclude unpaid break time inside the segment.
    """

    start_time: datetime
    end_time: datetime
    day_type: DayType
    hours: Decimal
    minutes: int


def _next_midnight(value: datetime) -> datetime:
    return datetime.combine(value.date() + timedelta(days=1), time.min, tzinfo=value.tzinfo)


def segment_by_day(shift: Shift) -> list[ShiftSegment]:
    """Split a shift at every midnight it crosses.

    Segments are chronological and contiguous; each takes its day type from
    its own start time. Segments with no worked time are dropped, so a
    zero-length shift yields an empty list.

    The last segment takes the remainder of the shift's worked hours, so the
    segment hours add up to ``shift.worked_hours`` exactly even when a
    segment's minutes do not divide evenly into hours.
    """
    parts: list[tuple[datetime, datetime, int]] = []
    current_start = shift.start_time
    shift_end = shift.end_time

    while current_start < shift_end:
        if current_start.date() == shift_end.date():
            segment_end = shift_end
        else:
            segment_end = min(_next_midnight(current_start), shift_end)

        minutes = minutes_between(current_start, segment_end)
        minutes -= shift.unpaid_break_minutes_within(current_start, segment_end)
        if minutes > 0:
            parts.append((current_start, segment_end, minutes))
        current_start = segment_end

    segments: list[ShiftSegment] = []
    allotted = ZERO
    for index, (start, end, minutes) in enumerate(parts):
        if index == len(parts) - 1:
            hours = shift.worked_hours - allotted
        else:
            hours = minutes_to_hours(minutes)
        allotted += hours
        segments.append(
            ShiftSegment(
                start_time=start,
                end_time=end,
                day_type=get_day_type(start),
                hours=hours,
                minutes=minutes,
            )
        )

    return segments


def segmentation_audit_step(
    shift: Shift, segments: list[ShiftSegment], step_number: int
) -> AuditStep:
    """Audit record describing how a shift was split by day."""
    if not segments:
        reasoning = "Shift has no worked time - no segments produced"
    elif len(segments) == 1:
        reasoning = f"Shift is entirely within {segments[0].day_type} - no midnight crossing"
    else:
        parts = ", ".join(f"{s.day_type}: {format_decimal(s.hours)}h" for s in segments)
        reasoning = f"Shift crosses midnight: split into {len(segments)} segments ({parts})"

    return AuditStep(
        step_number=step_number,
        rule_id="shift_segmentation",
        rule_name="Shift Day Segmentation",
        clause_ref="23",
        input={
            "shift_id": shift.id,
            "start_time": shift.start_time.isoformat(),
            "end_time": shift.end_time.isoformat(),
            "worked_hours": format_decimal(shift.worked_hours),
        },
        output={
            "segment_count": len(segments),
            "segments": [
                {
                    "day_type": s.day_type.value,
                    "hours": format_decimal(s.hours),
                    "start_time": s.start_time.isoformat(),
                    "end_time": s.end_time.isoformat(),
                }
                for s in segments
            ],
        },
        reasoning=reasoning,
    )
