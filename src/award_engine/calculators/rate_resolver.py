"""Base rate resolution against the award rule table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from award_engine.models import AuditStep, Employee
from award_engine.rules import RuleTable

BASE_RATE_CLAUSE = "14.2"


@dataclass(frozen=True)
class BaseRateLookup:
    """A resolved base hourly rate and the audit step explaining it."""

    rate: Decimal
    source: str  # 'employee_override' or 'config'
    audit_step: AuditStep


class RateResolver:
    """Resolves an employee's base hourly rate.

    Rate selection priority:
    1. If the employee carries a rate override, use it
       (the classification is not looked up at all)
    2. Otherwise the classification must exist in the rule table
    3. Take the hourly rate from the most recent rate schedule effective
       on or before the reference date

    The engine calls this once per calculation, with the first shift's
    date as the reference date.
    """

    def __init__(self, rules: RuleTable):
        self.rules = rules

    def resolve(
        self,
        employee: Employee,
        effective_date: date,
        step_number: int,
    ) -> BaseRateLookup:
        """Resolve the base rate for an employee.

        Raises:
            ClassificationNotFoundError: If the classification is unknown
            RateNotFoundError: If no schedule defines a rate on that date
        """
        if employee.base_hourly_rate is not None:
            override = employee.base_hourly_rate
            return BaseRateLookup(
                rate=override,
                source="employee_override",
                audit_step=AuditStep(
                    step_number=step_number,
                    rule_id="base_rate_lookup",
                    rule_name="Base Rate Lookup",
                    clause_ref=BASE_RATE_CLAUSE,
                    input={
                        "classification_code": employee.classification_code,
                        "employee_override_rate": str(override),
                        "effective_date": effective_date.isoformat(),
                    },
                    output={
                        "rate": str(override),
                        "source": "employee_override",
                    },
                    reasoning=(
                        f"Using employee override rate ${override} "
                        "instead of classification lookup"
                    ),
                ),
            )

        self.rules.get_classification(employee.classification_code)
        classification_rate, schedule = self.rules.get_classification_rate(
            employee.classification_code, effective_date
        )
        rate = classification_rate.hourly

        return BaseRateLookup(
            rate=rate,
            source="config",
            audit_step=AuditStep(
                step_number=step_number,
                rule_id="base_rate_lookup",
                rule_name="Base Rate Lookup",
                clause_ref=BASE_RATE_CLAUSE,
                input={
                    "classification_code": employee.classification_code,
                    "effective_date": effective_date.isoformat(),
                },
                output={
                    "rate": str(rate),
                    "source": "config",
                    "rate_effective_date": schedule.effective_date.isoformat(),
                },
                reasoning=(
                    f"Looked up rate for classification '{employee.classification_code}' "
                    f"effective {schedule.effective_date}: ${rate}"
                ),
            ),
        )
