"""Award calculation engine - main orchestrator."""

from __future__ import annotations

import hashlib
import json
import logging
import time
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Sequence
from uuid import UUID

from award_engine.calculators.allowance import (
    LAUNDRY_ALLOWANCE_TAG,
    calculate_laundry_allowance,
)
from award_engine.calculators.daily_overtime import detect_daily_overtime
from award_engine.calculators.day_type import (
    ShiftSegment,
    get_day_type,
    segment_by_day,
    segmentation_audit_step,
)
from award_engine.calculators.ordinary import calculate_ordinary_pay
from award_engine.calculators.overtime import (
    calculate_weekday_overtime,
    calculate_weekend_overtime,
)
from award_engine.calculators.rate_resolver import RateResolver
from award_engine.calculators.types import ZERO, format_decimal
from award_engine.calculators.weekend_penalty import calculate_weekend_penalty
from award_engine.config import get_settings
from award_engine.errors import CalculationError, InvalidEmployeeError, InvalidShiftError
from award_engine.models import (
    AllowancePayment,
    AuditStep,
    AuditTrace,
    AuditWarning,
    CalculationResult,
    DayType,
    Employee,
    PayLine,
    PayPeriod,
    PayTotals,
    Shift,
)
from award_engine.rules import RuleTable

logger = logging.getLogger(__name__)


class AwardEngine:
    """Main award calculation engine.

    Calculation pipeline (stable order per calculation):
    1) Validate employee and shifts
    2) Resolve the base rate once, using the first shift's date
    3) Per shift, in input order:
       a) Split at midnight into day segments
       b) Split worked hours into ordinary and overtime at the daily threshold
       c) Price ordinary hours segment by segment (weekday ordinary with
          casual loading, or Saturday/Sunday penalty)
       d) Price overtime by the day type of the shift's start
    4) Laundry allowance across all shifts
    5) Totals, derived only from pay lines and allowances

    The engine holds nothing but the immutable rule table, so a single
    instance can serve concurrent calculations.
    """

    def __init__(self, rules: RuleTable, engine_version: str | None = None):
        self.rules = rules
        self.rate_resolver = RateResolver(rules)
        self.engine_version = engine_version or get_settings().engine_version

    def calculate(
        self,
        employee: Employee,
        pay_period: PayPeriod,
        shifts: Sequence[Shift],
    ) -> CalculationResult:
        """Calculate pay for one employee over a set of shifts.

        Raises:
            InvalidEmployeeError: If the rate override is not positive
            InvalidShiftError: If a shift or break is inconsistent
            ClassificationNotFoundError: If the classification is unknown
            RateNotFoundError: If no rate is effective on the first shift date
            ConfigNotFoundError: If allowance rates are needed but missing
            CalculationError: If an internal invariant is violated
        """
        started_ns = time.perf_counter_ns()
        shifts = list(shifts)

        # 1) Validate before producing any step
        self._validate_employee(employee)
        for shift in shifts:
            self._validate_shift(shift)

        steps: list[AuditStep] = []
        warnings: list[AuditWarning] = []
        pay_lines: list[PayLine] = []
        allowances: list[AllowancePayment] = []

        # 2) Base rate, resolved once
        effective_date = shifts[0].date if shifts else pay_period.start_date
        lookup = self.rate_resolver.resolve(employee, effective_date, len(steps) + 1)
        base_rate = lookup.rate
        steps.append(lookup.audit_step)

        # 3) Shifts
        for shift in shifts:
            if not pay_period.contains_date(shift.date):
                warnings.append(
                    AuditWarning(
                        code="SHIFT_OUTSIDE_PAY_PERIOD",
                        message=(
                            f"Shift '{shift.id}' on {shift.date} is outside pay period "
                            f"{pay_period.start_date} to {pay_period.end_date}"
                        ),
                        severity="medium",
                    )
                )
            shift_lines, shift_steps, shift_warnings = self._calculate_shift(
                shift, employee, base_rate, len(steps) + 1
            )
            pay_lines.extend(shift_lines)
            steps.extend(shift_steps)
            warnings.extend(shift_warnings)

        # 4) Laundry allowance
        per_shift_rate = weekly_cap = ZERO
        if employee.has_tag(LAUNDRY_ALLOWANCE_TAG):
            per_shift_rate, weekly_cap = self.rules.get_allowance_rates(effective_date)
        allowance = calculate_laundry_allowance(
            employee, len(shifts), per_shift_rate, weekly_cap, len(steps) + 1
        )
        steps.append(allowance.audit_step)
        if allowance.allowance is not None:
            allowances.append(allowance.allowance)

        self._check_step_sequence(steps)

        # 5) Totals
        totals = self._calculate_totals(pay_lines, allowances)

        inputs_fingerprint = self._compute_inputs_fingerprint(
            self._canonical_inputs(employee, pay_period, shifts)
        )
        calculation_id = self._generate_calculation_id(
            employee.id,
            effective_date,
            inputs_fingerprint,
            self.rules.fingerprint,
        )

        duration_us = (time.perf_counter_ns() - started_ns) // 1000
        logger.info(
            "Calculated pay for employee %s: %d shifts, gross %s, %d steps in %dus",
            employee.id,
            len(shifts),
            format_decimal(totals.gross_pay),
            len(steps),
            duration_us,
        )

        return CalculationResult(
            calculation_id=calculation_id,
            timestamp=datetime.now(timezone.utc),
            engine_version=self.engine_version,
            employee_id=employee.id,
            pay_period=pay_period,
            pay_lines=pay_lines,
            allowances=allowances,
            totals=totals,
            audit_trace=AuditTrace(steps=steps, warnings=warnings, duration_us=duration_us),
        )

    def _calculate_shift(
        self,
        shift: Shift,
        employee: Employee,
        base_rate: Decimal,
        step_number: int,
    ) -> tuple[list[PayLine], list[AuditStep], list[AuditWarning]]:
        """Segment, split and price a single shift."""
        lines: list[PayLine] = []
        steps: list[AuditStep] = []
        warnings: list[AuditWarning] = []

        # a) Midnight segmentation
        segments = segment_by_day(shift)
        segment_minutes = sum(s.minutes for s in segments)
        if segment_minutes != shift.worked_minutes:
            raise CalculationError(
                f"Segments of shift '{shift.id}' cover {segment_minutes} minutes, "
                f"expected {shift.worked_minutes}"
            )
        segment_hours = sum((s.hours for s in segments), ZERO)
        if segments and segment_hours != shift.worked_hours:
            raise CalculationError(
                f"Segment hours of shift '{shift.id}' sum to {segment_hours}, "
                f"expected {shift.worked_hours}"
            )
        steps.append(segmentation_audit_step(shift, segments, step_number))
        step_number += 1

        # b) Daily overtime
        worked_hours = shift.worked_hours
        detection = detect_daily_overtime(
            worked_hours, self.rules.daily_threshold_hours, step_number
        )
        if detection.ordinary_hours + detection.overtime_hours != worked_hours:
            raise CalculationError(
                f"Ordinary and overtime hours of shift '{shift.id}' do not sum "
                f"to {format_decimal(worked_hours)}"
            )
        steps.append(detection.audit_step)
        step_number += 1

        # c) Ordinary hours, consumed in segment order
        remaining = detection.ordinary_hours
        overtime_segments: list[ShiftSegment] = []
        for segment in segments:
            hours = min(remaining, segment.hours)
            remaining -= hours
            if hours < segment.hours:
                overtime_segments.append(segment)
            if hours <= ZERO:
                continue

            pay_date = segment.start_time.date()
            if segment.day_type is DayType.WEEKDAY:
                ordinary = calculate_ordinary_pay(
                    hours, base_rate, employee, pay_date, shift.id, step_number
                )
                lines.append(ordinary.pay_line)
                steps.extend(ordinary.audit_steps)
                step_number += len(ordinary.audit_steps)
            else:
                penalty = calculate_weekend_penalty(
                    hours,
                    segment.day_type,
                    base_rate,
                    employee,
                    self.rules,
                    pay_date,
                    shift.id,
                    step_number,
                )
                lines.append(penalty.pay_line)
                steps.append(penalty.audit_step)
                step_number += 1

        # d) Overtime, priced by the day type the shift starts on
        if detection.overtime_hours > ZERO:
            shift_day_type = get_day_type(shift.start_time)
            if shift_day_type is DayType.WEEKDAY:
                overtime = calculate_weekday_overtime(
                    detection.overtime_hours,
                    base_rate,
                    employee,
                    self.rules,
                    shift.date,
                    shift.id,
                    step_number,
                )
            else:
                overtime = calculate_weekend_overtime(
                    detection.overtime_hours,
                    shift_day_type,
                    base_rate,
                    employee,
                    self.rules,
                    shift.date,
                    shift.id,
                    step_number,
                )
            lines.extend(overtime.pay_lines)
            steps.extend(overtime.audit_steps)

            worked_on = sorted(
                {s.day_type for s in overtime_segments if s.day_type is not shift_day_type},
                key=lambda d: d.value,
            )
            if worked_on:
                warnings.append(
                    AuditWarning(
                        code="OVERTIME_DAY_TYPE_MISMATCH",
                        message=(
                            f"Overtime for shift '{shift.id}' is priced as {shift_day_type} "
                            f"overtime but was worked on "
                            f"{', '.join(str(d) for d in worked_on)}"
                        ),
                        severity="low",
                    )
                )

        return lines, steps, warnings

    # === Validation ===

    def _validate_employee(self, employee: Employee) -> None:
        if employee.base_hourly_rate is not None and employee.base_hourly_rate <= ZERO:
            raise InvalidEmployeeError(
                "base_hourly_rate",
                f"must be positive, got {employee.base_hourly_rate}",
            )

    def _validate_shift(self, shift: Shift) -> None:
        aware = shift.start_time.tzinfo is not None
        timestamps = [shift.end_time]
        for brk in shift.breaks:
            timestamps.extend((brk.start_time, brk.end_time))
        if any((t.tzinfo is not None) != aware for t in timestamps):
            raise InvalidShiftError(shift.id, "mixed timezone-aware and naive timestamps")

        if shift.end_time < shift.start_time:
            raise InvalidShiftError(shift.id, "end time before start time")

        unpaid = []
        for index, brk in enumerate(shift.breaks):
            if brk.end_time < brk.start_time:
                raise InvalidShiftError(shift.id, f"break {index} ends before it starts")
            if brk.start_time < shift.start_time or brk.end_time > shift.end_time:
                raise InvalidShiftError(shift.id, f"break {index} is outside the shift")
            if not brk.is_paid:
                unpaid.append(brk)

        unpaid.sort(key=lambda b: b.start_time)
        for previous, current in zip(unpaid, unpaid[1:]):
            if current.start_time < previous.end_time:
                raise InvalidShiftError(shift.id, "unpaid breaks overlap")

        if shift.unpaid_break_minutes > shift.span_minutes:
            raise InvalidShiftError(shift.id, "unpaid breaks exceed shift duration")

    def _check_step_sequence(self, steps: list[AuditStep]) -> None:
        for index, step in enumerate(steps, start=1):
            if step.step_number != index:
                raise CalculationError(
                    f"Audit step '{step.rule_id}' numbered {step.step_number}, expected {index}"
                )

    # === Totals ===

    def _calculate_totals(
        self, pay_lines: list[PayLine], allowances: list[AllowancePayment]
    ) -> PayTotals:
        allowances_total = sum((a.amount for a in allowances), ZERO)
        return PayTotals(
            gross_pay=sum((line.amount for line in pay_lines), ZERO) + allowances_total,
            ordinary_hours=sum(
                (line.hours for line in pay_lines if line.category.is_ordinary), ZERO
            ),
            overtime_hours=sum(
                (line.hours for line in pay_lines if line.category.is_overtime), ZERO
            ),
            penalty_hours=sum(
                (line.hours for line in pay_lines if line.category.is_penalty), ZERO
            ),
            allowances_total=allowances_total,
        )

    # === Fingerprints ===

    def _canonical_inputs(
        self, employee: Employee, pay_period: PayPeriod, shifts: list[Shift]
    ) -> dict[str, Any]:
        return {
            "employee": {
                "id": employee.id,
                "employment_type": employee.employment_type.value,
                "classification_code": employee.classification_code,
                "base_hourly_rate": (
                    None if employee.base_hourly_rate is None else str(employee.base_hourly_rate)
                ),
                "tags": sorted(employee.tags),
            },
            "pay_period": {
                "start_date": pay_period.start_date.isoformat(),
                "end_date": pay_period.end_date.isoformat(),
            },
            "shifts": [
                {
                    "id": s.id,
                    "date": s.date.isoformat(),
                    "start_time": s.start_time.isoformat(),
                    "end_time": s.end_time.isoformat(),
                    "breaks": [
                        [b.start_time.isoformat(), b.end_time.isoformat(), b.is_paid]
                        for b in s.breaks
                    ],
                }
                for s in shifts
            ],
        }

    def _generate_calculation_id(
        self,
        employee_id: str,
        as_of_date: date,
        inputs_fingerprint: str,
        rules_fingerprint: str,
    ) -> UUID:
        """Generate deterministic calculation ID."""
        data = {
            "employee_id": employee_id,
            "as_of_date": str(as_of_date),
            "engine_version": self.engine_version,
            "inputs_fingerprint": inputs_fingerprint,
            "rules_fingerprint": rules_fingerprint,
        }
        json_str = json.dumps(data, sort_keys=True)
        hash_bytes = hashlib.sha256(json_str.encode()).digest()
        return UUID(bytes=hash_bytes[:16])

    def _compute_inputs_fingerprint(self, inputs_data: dict[str, Any]) -> str:
        """Compute fingerprint of all inputs used in calculation."""
        json_str = json.dumps(inputs_data, sort_keys=True)
        return hashlib.sha256(json_str.encode()).hexdigest()[:32]
