"""Daily overtime detection."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from award_engine.calculators.types import ZERO, format_decimal
from award_engine.models import AuditStep
from award_engine.rules import DEFAULT_DAILY_OVERTIME_THRESHOLD

DAILY_OVERTIME_CLAUSE = "22.1(c), 25.1"


@dataclass(frozen=True)
class DailyOvertimeDetection:
    """Split of a shift's worked hours into ordinary and overtime."""

    ordinary_hours: Decimal
    overtime_hours: Decimal
    audit_step: AuditStep


def detect_daily_overtime(
    worked_hours: Decimal,
    threshold: Decimal = DEFAULT_DAILY_OVERTIME_THRESHOLD,
    step_number: int = 1,
) -> DailyOvertimeDetection:
    """Split ``worked_hours`` at ``threshold``.

    ordinary = min(worked, threshold); overtime = max(0, worked - threshold).
    """
    ordinary_hours = min(worked_hours, threshold)
    overtime_hours = max(ZERO, worked_hours - threshold)

    worked = format_decimal(worked_hours)
    limit = format_decimal(threshold)
    if overtime_hours > ZERO:
        reasoning = (
            f"{worked} hours worked exceeds {limit} hour threshold by "
            f"{format_decimal(overtime_hours)} hours, triggering overtime"
        )
    elif worked_hours == threshold:
        reasoning = f"{worked} hours worked equals {limit} hour threshold, no overtime triggered"
    else:
        reasoning = f"{worked} hours worked is under {limit} hour threshold, no overtime triggered"

    audit_step = AuditStep(
        step_number=step_number,
        rule_id="daily_overtime_detection",
        rule_name="Daily Overtime Detection",
        clause_ref=DAILY_OVERTIME_CLAUSE,
        input={
            "worked_hours": worked,
            "threshold": limit,
        },
        output={
            "ordinary_hours": format_decimal(ordinary_hours),
            "overtime_hours": format_decimal(overtime_hours),
        },
        reasoning=reasoning,
    )

    return DailyOvertimeDetection(
        ordinary_hours=ordinary_hours,
        overtime_hours=overtime_hours,
        audit_step=audit_step,
    )
