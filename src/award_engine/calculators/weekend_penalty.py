"""Saturday and Sunday penalty rates for ordinary hours.

The multiplier applies directly to the base rate. For casual employees the
multiplier already embeds the 25% loading (e.g. Saturday casual 1.75, not
1.25 x 1.50), so casual loading is never stacked on top.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from award_engine.calculators.types import format_decimal
from award_engine.errors import CalculationError
from award_engine.models import AuditStep, DayType, Employee, PayCategory, PayLine
from award_engine.rules import RuleTable

SATURDAY_CASUAL_CLAUSE = "23.2(a)"
SUNDAY_CASUAL_CLAUSE = "23.2(b)"


@dataclass(frozen=True)
class PenaltyPayResult:
    pay_line: PayLine
    audit_step: AuditStep


def _category_and_clause(
    day_type: DayType, employee: Employee, rules: RuleTable
) -> tuple[PayCategory, str]:
    if day_type is DayType.SATURDAY:
        if employee.is_casual:
            return PayCategory.SATURDAY_CASUAL, SATURDAY_CASUAL_CLAUSE
        return PayCategory.SATURDAY, rules.saturday.clause
    if day_type is DayType.SUNDAY:
        if employee.is_casual:
            return PayCategory.SUNDAY_CASUAL, SUNDAY_CASUAL_CLAUSE
        return PayCategory.SUNDAY, rules.sunday.clause
    raise CalculationError(f"Weekend penalty requested for {day_type}")


def calculate_weekend_penalty(
    hours: Decimal,
    day_type: DayType,
    base_rate: Decimal,
    employee: Employee,
    rules: RuleTable,
    pay_date: date,
    shift_id: str,
    step_number: int,
) -> PenaltyPayResult:
    """Price Saturday or Sunday ordinary hours.

    Raises:
        CalculationError: If called with a weekday
    """
    category, clause_ref = _category_and_clause(day_type, employee, rules)
    multiplier = rules.get_penalty(day_type, employee.employment_type)
    effective_rate = base_rate * multiplier
    amount = hours * effective_rate
    day_name = str(day_type)

    audit_step = AuditStep(
        step_number=step_number,
        rule_id=f"{day_type.value}_penalty",
        rule_name=f"{day_name} Penalty Rate",
        clause_ref=clause_ref,
        input={
            "shift_id": shift_id,
            "date": pay_date.isoformat(),
            "hours": format_decimal(hours),
            "base_rate": format_decimal(base_rate),
            "employment_type": employee.employment_type.value,
            "day_type": day_type.value,
        },
        output={
            "multiplier": format_decimal(multiplier),
            "effective_rate": format_decimal(effective_rate),
            "amount": format_decimal(amount),
            "category": category.value,
        },
        reasoning=(
            f"{day_name} penalty: {format_decimal(hours)} hours x "
            f"${format_decimal(base_rate)} x {format_decimal(multiplier)} "
            f"= ${format_decimal(amount)}"
        ),
    )

    pay_line = PayLine(
        date=pay_date,
        shift_id=shift_id,
        category=category,
        hours=hours,
        rate=effective_rate,
        amount=amount,
        clause_ref=clause_ref,
    )
    return PenaltyPayResult(pay_line=pay_line, audit_step=audit_step)
