"""Laundry allowance (per shift, capped weekly)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from award_engine.calculators.types import format_decimal
from award_engine.models import AllowancePayment, AuditStep, Employee

LAUNDRY_ALLOWANCE_TAG = "laundry_allowance"
LAUNDRY_ALLOWANCE_CLAUSE = "15.2(b)"


@dataclass(frozen=True)
class AllowanceResult:
    """``allowance`` is None when the employee is not eligible."""

    allowance: AllowancePayment | None
    cap_applied: bool
    audit_step: AuditStep


def calculate_laundry_allowance(
    employee: Employee,
    shift_count: int,
    per_shift_rate: Decimal,
    weekly_cap: Decimal,
    step_number: int,
) -> AllowanceResult:
    """Compute the laundry allowance over all shifts in the calculation.

    amount = min(shift_count x per_shift_rate, weekly_cap). The cap flag is
    set only when the uncapped amount is strictly above the cap.
    """
    if not employee.has_tag(LAUNDRY_ALLOWANCE_TAG):
        return AllowanceResult(
            allowance=None,
            cap_applied=False,
            audit_step=AuditStep(
                step_number=step_number,
                rule_id="laundry_allowance",
                rule_name="Laundry Allowance",
                clause_ref=LAUNDRY_ALLOWANCE_CLAUSE,
                input={
                    "employee_id": employee.id,
                    "has_laundry_tag": False,
                    "num_shifts": shift_count,
                },
                output={
                    "eligible": False,
                    "amount": "0",
                },
                reasoning=(
                    f"Employee does not have '{LAUNDRY_ALLOWANCE_TAG}' tag - "
                    "not eligible for laundry allowance"
                ),
            ),
        )

    units = Decimal(shift_count)
    uncapped_amount = units * per_shift_rate
    cap_applied = uncapped_amount > weekly_cap
    amount = weekly_cap if cap_applied else uncapped_amount

    noun = "shift" if shift_count == 1 else "shifts"
    reasoning = (
        f"{shift_count} {noun} x ${format_decimal(per_shift_rate)} "
        f"= ${format_decimal(uncapped_amount)}"
    )
    if cap_applied:
        reasoning += (
            f", capped at weekly maximum ${format_decimal(weekly_cap)}: "
            f"${format_decimal(amount)}"
        )

    audit_step = AuditStep(
        step_number=step_number,
        rule_id="laundry_allowance",
        rule_name="Laundry Allowance",
        clause_ref=LAUNDRY_ALLOWANCE_CLAUSE,
        input={
            "employee_id": employee.id,
            "has_laundry_tag": True,
            "num_shifts": shift_count,
            "per_shift_rate": format_decimal(per_shift_rate),
            "weekly_cap": format_decimal(weekly_cap),
        },
        output={
            "eligible": True,
            "units": format_decimal(units),
            "uncapped_amount": format_decimal(uncapped_amount),
            "amount": format_decimal(amount),
            "cap_applied": cap_applied,
        },
        reasoning=reasoning,
    )

    allowance = AllowancePayment(
        allowance_type="laundry",
        description="Laundry Allowance",
        units=units,
        rate=per_shift_rate,
        amount=amount,
        clause_ref=LAUNDRY_ALLOWANCE_CLAUSE,
    )
    return AllowanceResult(allowance=allowance, cap_applied=cap_applied, audit_step=audit_step)
