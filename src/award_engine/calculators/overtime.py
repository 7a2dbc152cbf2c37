"""Overtime pay for hours beyond the daily threshold.

Weekday overtime is tiered: the first two hours at one multiplier, the rest
at a higher one. Weekend overtime is paid at a single flat multiplier.
Casual multipliers embed the 25% loading; the categories do not distinguish
casual from non-casual lines, only the rate differs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from award_engine.calculators.casual_loading import CASUAL_LOADING_MULTIPLIER
from award_engine.calculators.types import ZERO, format_decimal, format_percent
from award_engine.models import AuditStep, DayType, Employee, PayCategory, PayLine
from award_engine.rules import RuleTable

WEEKDAY_OT_TIER_1_HOURS = Decimal(2)


@dataclass
class OvertimeResult:
    """Zero or more overtime pay lines, one audit step per line."""

    pay_lines: list[PayLine] = field(default_factory=list)
    audit_steps: list[AuditStep] = field(default_factory=list)


def _rate_description(multiplier: Decimal, employee: Employee) -> str:
    if employee.is_casual:
        uncasual = multiplier / CASUAL_LOADING_MULTIPLIER
        return (
            f"{format_percent(multiplier)} ({format_percent(uncasual)} x "
            f"{format_decimal(CASUAL_LOADING_MULTIPLIER)} casual loading)"
        )
    return format_percent(multiplier)


def calculate_weekday_overtime(
    overtime_hours: Decimal,
    base_rate: Decimal,
    employee: Employee,
    rules: RuleTable,
    pay_date: date,
    shift_id: str,
    step_number: int,
) -> OvertimeResult:
    """Price weekday overtime in two tiers.

    Tier 1: min(overtime, 2h) -> Overtime150
    Tier 2: max(0, overtime - 2h) -> Overtime200
    """
    result = OvertimeResult()
    if overtime_hours <= ZERO:
        return result

    tier1_multiplier, tier2_multiplier = rules.get_weekday_overtime(employee.employment_type)
    clause_ref = rules.weekday_overtime.clause
    employment_type = employee.employment_type.value

    tier1_hours = min(overtime_hours, WEEKDAY_OT_TIER_1_HOURS)
    tier2_hours = max(ZERO, overtime_hours - WEEKDAY_OT_TIER_1_HOURS)

    tiers = [
        (
            "overtime_tier_1",
            "Weekday Overtime Tier 1",
            PayCategory.OVERTIME_150,
            tier1_hours,
            tier1_multiplier,
            f"First {format_decimal(tier1_hours)} hours of weekday overtime",
        ),
        (
            "overtime_tier_2",
            "Weekday Overtime Tier 2",
            PayCategory.OVERTIME_200,
            tier2_hours,
            tier2_multiplier,
            f"Overtime after first {format_decimal(WEEKDAY_OT_TIER_1_HOURS)} hours",
        ),
    ]

    for rule_id, rule_name, category, hours, multiplier, lead in tiers:
        if hours <= ZERO:
            continue
        rate = base_rate * multiplier
        amount = hours * rate

        result.audit_steps.append(
            AuditStep(
                step_number=step_number,
                rule_id=rule_id,
                rule_name=rule_name,
                clause_ref=clause_ref,
                input={
                    "shift_id": shift_id,
                    "hours": format_decimal(hours),
                    "base_rate": format_decimal(base_rate),
                    "employment_type": employment_type,
                },
                output={
                    "multiplier": format_decimal(multiplier),
                    "rate": format_decimal(rate),
                    "amount": format_decimal(amount),
                    "category": category.value,
                },
                reasoning=(
                    f"{lead} at {_rate_description(multiplier, employee)}: "
                    f"{format_decimal(hours)} hours x ${format_decimal(rate)} "
                    f"= ${format_decimal(amount)}"
                ),
            )
        )
        result.pay_lines.append(
            PayLine(
                date=pay_date,
                shift_id=shift_id,
                category=category,
                hours=hours,
                rate=rate,
                amount=amount,
                clause_ref=clause_ref,
            )
        )
        step_number += 1

    return result


def calculate_weekend_overtime(
    overtime_hours: Decimal,
    day_type: DayType,
    base_rate: Decimal,
    employee: Employee,
    rules: RuleTable,
    pay_date: date,
    shift_id: str,
    step_number: int,
) -> OvertimeResult:
    """Price Saturday/Sunday overtime at a flat multiplier.

    A weekday ``day_type`` or non-positive hours produce no line and no step.
    """
    result = OvertimeResult()
    if overtime_hours <= ZERO or not day_type.is_weekend:
        return result

    multiplier = rules.get_weekend_overtime(day_type, employee.employment_type)
    clause_ref = rules.weekend_overtime.clause
    rate = base_rate * multiplier
    amount = overtime_hours * rate
    day_name = str(day_type)
    hours = format_decimal(overtime_hours)

    result.audit_steps.append(
        AuditStep(
            step_number=step_number,
            rule_id="weekend_overtime",
            rule_name=f"{day_name} Overtime",
            clause_ref=clause_ref,
            input={
                "shift_id": shift_id,
                "hours": hours,
                "base_rate": format_decimal(base_rate),
                "employment_type": employee.employment_type.value,
                "day_type": day_type.value,
            },
            output={
                "multiplier": format_decimal(multiplier),
                "rate": format_decimal(rate),
                "amount": format_decimal(amount),
                "category": PayCategory.OVERTIME_200.value,
            },
            reasoning=(
                f"{day_name} overtime: {hours} hours at "
                f"{_rate_description(multiplier, employee)}: {hours} hours x "
                f"${format_decimal(rate)} = ${format_decimal(amount)}"
            ),
        )
    )
    result.pay_lines.append(
        PayLine(
            date=pay_date,
            shift_id=shift_id,
            category=PayCategory.OVERTIME_200,
            hours=overtime_hours,
            rate=rate,
            amount=amount,
            clause_ref=clause_ref,
        )
    )
    return result
