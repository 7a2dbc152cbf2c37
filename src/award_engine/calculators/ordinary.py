"""Weekday ordinary hours pay."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from award_engine.calculators.casual_loading import apply_casual_loading
from award_engine.calculators.types import format_decimal
from award_engine.models import AuditStep, Employee, PayCategory, PayLine

ORDINARY_HOURS_CLAUSE = "22.1"


@dataclass(frozen=True)
class OrdinaryPayResult:
    pay_line: PayLine
    audit_steps: list[AuditStep]


def calculate_ordinary_pay(
    hours: Decimal,
    base_rate: Decimal,
    employee: Employee,
    pay_date: date,
    shift_id: str,
    step_number: int,
) -> OrdinaryPayResult:
    """Price weekday ordinary hours.

    Emits two steps: the casual loading decision, then the pay line itself.
    """
    loading = apply_casual_loading(base_rate, employee, step_number)
    effective_rate = loading.loaded_rate
    amount = hours * effective_rate

    category = PayCategory.ORDINARY_CASUAL if employee.is_casual else PayCategory.ORDINARY
    if employee.is_casual:
        basis = f"casual with {loading.audit_step.output['multiplier']}x loading"
    else:
        basis = f"{employee.employment_type.value} employee at base rate"

    pay_step = AuditStep(
        step_number=step_number + 1,
        rule_id="weekday_ordinary",
        rule_name="Weekday Ordinary Time",
        clause_ref=ORDINARY_HOURS_CLAUSE,
        input={
            "shift_id": shift_id,
            "date": pay_date.isoformat(),
            "hours": format_decimal(hours),
            "base_rate": format_decimal(base_rate),
            "employment_type": employee.employment_type.value,
            "day_type": "weekday",
        },
        output={
            "effective_rate": format_decimal(effective_rate),
            "amount": format_decimal(amount),
            "category": category.value,
        },
        reasoning=(
            f"Weekday ordinary time: {format_decimal(hours)} hours x "
            f"${format_decimal(effective_rate)} = ${format_decimal(amount)} ({basis})"
        ),
    )

    pay_line = PayLine(
        date=pay_date,
        shift_id=shift_id,
        category=category,
        hours=hours,
        rate=effective_rate,
        amount=amount,
        clause_ref=ORDINARY_HOURS_CLAUSE,
    )
    return OrdinaryPayResult(pay_line=pay_line, audit_steps=[loading.audit_step, pay_step])
