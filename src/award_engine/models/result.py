"""Calculation result models.

A result is assembled once per calculation and never mutated afterwards.
Amounts are exact ``hours * rate`` products; nothing here rounds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from award_engine.models.pay_period import PayPeriod


class PayCategory(str, Enum):
    """Pay line categories.

    Overtime categories do not distinguish casual from non-casual
    employees; the casual uplift is embedded in the line's rate.
    """

    ORDINARY = "ordinary"
    ORDINARY_CASUAL = "ordinary_casual"
    SATURDAY = "saturday"
    SATURDAY_CASUAL = "saturday_casual"
    SUNDAY = "sunday"
    SUNDAY_CASUAL = "sunday_casual"
    OVERTIME_150 = "overtime150"
    OVERTIME_200 = "overtime200"

    @property
    def is_ordinary(self) -> bool:
        return self in (PayCategory.ORDINARY, PayCategory.ORDINARY_CASUAL)

    @property
    def is_penalty(self) -> bool:
        return self in (
            PayCategory.SATURDAY,
            PayCategory.SATURDAY_CASUAL,
            PayCategory.SUNDAY,
            PayCategory.SUNDAY_CASUAL,
        )

    @property
    def is_overtime(self) -> bool:
        return self in (PayCategory.OVERTIME_150, PayCategory.OVERTIME_200)


@dataclass(frozen=True)
class PayLine:
    """One priced block of hours (amount = hours x rate)."""

    date: date
    shift_id: str
    category: PayCategory
    hours: Decimal
    rate: Decimal
    amount: Decimal
    clause_ref: str


@dataclass(frozen=True)
class AllowancePayment:
    """A capped per-unit allowance payment."""

    allowance_type: str
    description: str
    units: Decimal
    rate: Decimal
    amount: Decimal
    clause_ref: str


@dataclass(frozen=True)
class AuditStep:
    """A single rule application in the audit trace.

    ``input`` and ``output`` hold the quantities used by the step's formula,
    rendered as strings; ``reasoning`` restates the formula with its operands.
    """

    step_number: int
    rule_id: str
    rule_name: str
    clause_ref: str
    input: dict[str, Any]
    output: dict[str, Any]
    reasoning: str


@dataclass(frozen=True)
class AuditWarning:
    """A condition worth review that did not stop the calculation."""

    code: str
    message: str
    severity: str  # 'low', 'medium', 'high'


@dataclass
class AuditTrace:
    """Ordered audit steps plus warnings and elapsed time."""

    steps: list[AuditStep] = field(default_factory=list)
    warnings: list[AuditWarning] = field(default_factory=list)
    duration_us: int = 0


@dataclass(frozen=True)
class PayTotals:
    """Totals derived by summing pay lines and allowances."""

    gross_pay: Decimal
    ordinary_hours: Decimal
    overtime_hours: Decimal
    penalty_hours: Decimal
    allowances_total: Decimal


@dataclass
class CalculationResult:
    """Everything produced by one calculation."""

    calculation_id: UUID
    timestamp: datetime
    engine_version: str
    employee_id: str
    pay_period: PayPeriod
    pay_lines: list[PayLine]
    allowances: list[AllowancePayment]
    totals: PayTotals
    audit_trace: AuditTrace
