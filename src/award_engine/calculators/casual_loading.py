"""Casual loading (25% uplift on the base rate for casual employees)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from award_engine.calculators.types import format_decimal
from award_engine.models import AuditStep, Employee

CASUAL_LOADING_MULTIPLIER = Decimal("1.25")
CASUAL_LOADING_CLAUSE = "10.4(b)"


@dataclass(frozen=True)
class CasualLoadingResult:
    loaded_rate: Decimal
    loading_applied: bool
    audit_step: AuditStep


def apply_casual_loading(
    base_rate: Decimal, employee: Employee, step_number: int
) -> CasualLoadingResult:
    """Apply casual loading when the employee is casual.

    Always emits one audit step, whether or not loading applies.
    """
    employment_type = employee.employment_type.value

    if not employee.is_casual:
        return CasualLoadingResult(
            loaded_rate=base_rate,
            loading_applied=False,
            audit_step=AuditStep(
                step_number=step_number,
                rule_id="casual_loading",
                rule_name="Casual Loading",
                clause_ref=CASUAL_LOADING_CLAUSE,
                input={
                    "base_rate": format_decimal(base_rate),
                    "employment_type": employment_type,
                },
                output={
                    "loaded_rate": format_decimal(base_rate),
                    "loading_applied": False,
                },
                reasoning=(
                    f"No casual loading applied - employee is {employment_type} "
                    f"(not casual), rate remains ${format_decimal(base_rate)}"
                ),
            ),
        )

    loaded_rate = base_rate * CASUAL_LOADING_MULTIPLIER
    return CasualLoadingResult(
        loaded_rate=loaded_rate,
        loading_applied=True,
        audit_step=AuditStep(
            step_number=step_number,
            rule_id="casual_loading",
            rule_name="Casual Loading",
            clause_ref=CASUAL_LOADING_CLAUSE,
            input={
                "base_rate": format_decimal(base_rate),
                "employment_type": employment_type,
            },
            output={
                "loaded_rate": format_decimal(loaded_rate),
                "loading_applied": True,
                "multiplier": format_decimal(CASUAL_LOADING_MULTIPLIER),
            },
            reasoning=(
                f"${format_decimal(base_rate)} x {format_decimal(CASUAL_LOADING_MULTIPLIER)} "
                f"= ${format_decimal(loaded_rate)}"
            ),
        ),
    )
