"""Pydantic schemas for API request/response models."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from award_engine.models import (
    Break,
    Employee,
    EmploymentType,
    PayCategory,
    PayPeriod,
    PublicHoliday,
    Shift,
)


# ============================================================================
# Request schemas
# ============================================================================


class EmployeeRequest(BaseModel):
    """Employee details for a calculation."""

    id: str = Field(min_length=1)
    employment_type: EmploymentType
    classification_code: str = Field(min_length=1)
    date_of_birth: date
    employment_start_date: date
    base_hourly_rate: Decimal | None = None
    tags: list[str] = Field(default_factory=list)

    def to_domain(self) -> Employee:
        return Employee(
            id=self.id,
            employment_type=self.employment_type,
            classification_code=self.classification_code,
            date_of_birth=self.date_of_birth,
            employment_start_date=self.employment_start_date,
            base_hourly_rate=self.base_hourly_rate,
            tags=frozenset(self.tags),
        )


class PublicHolidayRequest(BaseModel):
    """Public holiday within the pay period."""

    date: date
    name: str
    region: str = "national"


class PayPeriodRequest(BaseModel):
    """Inclusive pay period date range."""

    start_date: date
    end_date: date
    public_holidays: list[PublicHolidayRequest] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_dates(self) -> "PayPeriodRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self

    def to_domain(self) -> PayPeriod:
        return PayPeriod(
            start_date=self.start_date,
            end_date=self.end_date,
            public_holidays=tuple(
                PublicHoliday(date=h.date, name=h.name, region=h.region)
                for h in self.public_holidays
            ),
        )


class BreakRequest(BaseModel):
    """Break within a shift."""

    start_time: datetime
    end_time: datetime
    is_paid: bool = False


class ShiftRequest(BaseModel):
    """A worked shift."""

    id: str = Field(min_length=1)
    date: date
    start_time: datetime
    end_time: datetime
    breaks: list[BreakRequest] = Field(default_factory=list)

    def to_domain(self) -> Shift:
        return Shift(
            id=self.id,
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
            breaks=tuple(
                Break(start_time=b.start_time, end_time=b.end_time, is_paid=b.is_paid)
                for b in self.breaks
            ),
        )


class CalculationRequest(BaseModel):
    """Schema for POST /calculate."""

    employee: EmployeeRequest
    pay_period: PayPeriodRequest
    shifts: list[ShiftRequest]


# ============================================================================
# Response schemas
# ============================================================================


class PublicHolidayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: date
    name: str
    region: str


class PayPeriodResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    start_date: date
    end_date: date
    public_holidays: list[PublicHolidayResponse]


class PayLineResponse(BaseModel):
    """Schema for a priced block of hours."""

    model_config = ConfigDict(from_attributes=True)

    date: date
    shift_id: str
    category: PayCategory
    hours: Decimal
    rate: Decimal
    amount: Decimal
    clause_ref: str


class AllowanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    allowance_type: str
    description: str
    units: Decimal
    rate: Decimal
    amount: Decimal
    clause_ref: str


class PayTotalsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    gross_pay: Decimal
    ordinary_hours: Decimal
    overtime_hours: Decimal
    penalty_hours: Decimal
    allowances_total: Decimal


class AuditStepResponse(BaseModel):
    """Schema for one rule application."""

    model_config = ConfigDict(from_attributes=True)

    step_number: int
    rule_id: str
    rule_name: str
    clause_ref: str
    input: dict[str, Any]
    output: dict[str, Any]
    reasoning: str


class AuditWarningResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    message: str
    severity: str


class AuditTraceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    steps: list[AuditStepResponse]
    warnings: list[AuditWarningResponse]
    duration_us: int


class CalculationResponse(BaseModel):
    """Schema for a complete calculation result."""

    model_config = ConfigDict(from_attributes=True)

    calculation_id: UUID
    timestamp: datetime
    engine_version: str
    employee_id: str
    pay_period: PayPeriodResponse
    pay_lines: list[PayLineResponse]
    allowances: list[AllowanceResponse]
    totals: PayTotalsResponse
    audit_trace: AuditTraceResponse


# ============================================================================
# Common schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error response."""

    code: str
    message: str
    details: Any | None = None
