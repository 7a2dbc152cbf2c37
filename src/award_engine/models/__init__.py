"""Domain models for award calculations."""

from award_engine.models.employee import Employee, EmploymentType
from award_engine.models.pay_period import PayPeriod, PublicHoliday
from award_engine.models.result import (
    AllowancePayment,
    AuditStep,
    AuditTrace,
    AuditWarning,
    CalculationResult,
    PayCategory,
    PayLine,
    PayTotals,
)
from award_engine.models.shift import Break, DayType, Shift

__all__ = [
    "AllowancePayment",
    "AuditStep",
    "AuditTrace",
    "AuditWarning",
    "Break",
    "CalculationResult",
    "DayType",
    "Employee",
    "EmploymentType",
    "PayCategory",
    "PayLine",
    "PayPeriod",
    "PayTotals",
    "PublicHoliday",
    "Shift",
]
