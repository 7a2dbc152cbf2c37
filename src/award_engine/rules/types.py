"""Rule table snapshot types.

A ``RuleTable`` is loaded once and shared by every calculation:
- Immutable after creation (frozen dataclasses, read-only mappings)
- Rate schedules kept sorted oldest first
- Lookups are pure; a missing entry raises instead of defaulting
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from functools import cached_property
from types import MappingProxyType
from typing import Any, Mapping

from award_engine.errors import (
    CalculationError,
    ClassificationNotFoundError,
    ConfigNotFoundError,
    RateNotFoundError,
)
from award_engine.models import DayType, EmploymentType

DEFAULT_DAILY_OVERTIME_THRESHOLD = Decimal(8)


@dataclass(frozen=True)
class AwardMetadata:
    """Identifying information for the award instrument."""

    code: str
    name: str
    version: str
    source_url: str


@dataclass(frozen=True)
class Classification:
    """An employee classification and the clause that defines it."""

    name: str
    description: str
    clause: str


@dataclass(frozen=True)
class ClassificationRate:
    weekly: Decimal
    hourly: Decimal


@dataclass(frozen=True)
class AllowanceRates:
    laundry_per_shift: Decimal
    laundry_per_week: Decimal


@dataclass(frozen=True)
class RateSchedule:
    """Classification rates and allowances effective from a date."""

    effective_date: date
    rates: Mapping[str, ClassificationRate]
    allowances: AllowanceRates

    def __post_init__(self) -> None:
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))


@dataclass(frozen=True)
class EmploymentRates:
    """A multiplier per employment type."""

    full_time: Decimal
    part_time: Decimal
    casual: Decimal

    def for_employment(self, employment_type: EmploymentType) -> Decimal:
        if employment_type is EmploymentType.FULL_TIME:
            return self.full_time
        if employment_type is EmploymentType.PART_TIME:
            return self.part_time
        if employment_type is EmploymentType.CASUAL:
            return self.casual
        raise CalculationError(f"Unknown employment type: {employment_type}")


@dataclass(frozen=True)
class PenaltyRates:
    """Day penalty multipliers, applied directly to the base rate."""

    clause: str
    rates: EmploymentRates


@dataclass(frozen=True)
class WeekdayOvertime:
    clause: str
    first_two_hours: EmploymentRates
    after_two_hours: EmploymentRates


@dataclass(frozen=True)
class WeekendOvertime:
    clause: str
    saturday: EmploymentRates
    sunday: EmploymentRates


@dataclass(frozen=True)
class RuleTable:
    """Immutable snapshot of an award's rules.

    Safe to share between threads: nothing here is mutated after
    ``__post_init__``.
    """

    award: AwardMetadata
    classifications: Mapping[str, Classification]
    rate_schedules: tuple[RateSchedule, ...]
    saturday: PenaltyRates
    sunday: PenaltyRates
    weekday_overtime: WeekdayOvertime
    weekend_overtime: WeekendOvertime
    daily_threshold_hours: Decimal = DEFAULT_DAILY_OVERTIME_THRESHOLD

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "classifications", MappingProxyType(dict(self.classifications))
        )
        object.__setattr__(
            self,
            "rate_schedules",
            tuple(sorted(self.rate_schedules, key=lambda s: s.effective_date)),
        )
        if self.daily_threshold_hours <= 0:
            raise ValueError("daily_threshold_hours must be positive")

    # === Lookups ===

    def get_classification(self, code: str) -> Classification:
        try:
            return self.classifications[code]
        except KeyError:
            raise ClassificationNotFoundError(code) from None

    def rate_schedule_for(self, as_of_date: date) -> RateSchedule | None:
        """Most recent schedule effective on or before ``as_of_date``."""
        for schedule in reversed(self.rate_schedules):
            if schedule.effective_date <= as_of_date:
                return schedule
        return None

    def get_classification_rate(
        self, code: str, as_of_date: date
    ) -> tuple[ClassificationRate, RateSchedule]:
        """Rates for ``code`` from the schedule effective on ``as_of_date``.

        Only the latest effective schedule is consulted; an older schedule
        defining the classification does not stand in for a newer one that
        omits it.
        """
        schedule = self.rate_schedule_for(as_of_date)
        if schedule is None or code not in schedule.rates:
            raise RateNotFoundError(code, as_of_date)
        return schedule.rates[code], schedule

    def get_hourly_rate(self, code: str, as_of_date: date) -> Decimal:
        rate, _ = self.get_classification_rate(code, as_of_date)
        return rate.hourly

    def get_weekly_rate(self, code: str, as_of_date: date) -> Decimal:
        rate, _ = self.get_classification_rate(code, as_of_date)
        return rate.weekly

    def get_penalty_rates(self, day_type: DayType) -> PenaltyRates:
        if day_type is DayType.SATURDAY:
            return self.saturday
        if day_type is DayType.SUNDAY:
            return self.sunday
        raise CalculationError(f"No penalty rates for day type: {day_type}")

    def get_penalty(self, day_type: DayType, employment_type: EmploymentType) -> Decimal:
        return self.get_penalty_rates(day_type).rates.for_employment(employment_type)

    def get_weekday_overtime(
        self, employment_type: EmploymentType
    ) -> tuple[Decimal, Decimal]:
        """(tier 1, tier 2) multipliers for weekday overtime."""
        return (
            self.weekday_overtime.first_two_hours.for_employment(employment_type),
            self.weekday_overtime.after_two_hours.for_employment(employment_type),
        )

    def get_weekend_overtime(
        self, day_type: DayType, employment_type: EmploymentType
    ) -> Decimal:
        if day_type is DayType.SATURDAY:
            return self.weekend_overtime.saturday.for_employment(employment_type)
        if day_type is DayType.SUNDAY:
            return self.weekend_overtime.sunday.for_employment(employment_type)
        raise CalculationError(f"No weekend overtime rates for day type: {day_type}")

    def get_allowance_rates(self, as_of_date: date) -> tuple[Decimal, Decimal]:
        """(per shift, weekly cap) laundry allowance rates."""
        schedule = self.rate_schedule_for(as_of_date)
        if schedule is None:
            raise ConfigNotFoundError(f"No rate configuration found for date {as_of_date}")
        return (
            schedule.allowances.laundry_per_shift,
            schedule.allowances.laundry_per_week,
        )

    # === Fingerprinting ===

    def to_canonical_dict(self) -> dict[str, Any]:
        """Return canonical dict for hashing (deterministic ordering)."""

        def rates(r: EmploymentRates) -> dict[str, str]:
            return {
                "full_time": str(r.full_time),
                "part_time": str(r.part_time),
                "casual": str(r.casual),
            }

        return {
            "award": {
                "code": self.award.code,
                "version": self.award.version,
            },
            "classifications": sorted(self.classifications),
            "rate_schedules": [
                {
                    "effective_date": s.effective_date.isoformat(),
                    "rates": {
                        code: {"weekly": str(r.weekly), "hourly": str(r.hourly)}
                        for code, r in s.rates.items()
                    },
                    "allowances": {
                        "laundry_per_shift": str(s.allowances.laundry_per_shift),
                        "laundry_per_week": str(s.allowances.laundry_per_week),
                    },
                }
                for s in self.rate_schedules
            ],
            "penalties": {
                "saturday": rates(self.saturday.rates),
                "sunday": rates(self.sunday.rates),
            },
            "overtime": {
                "daily_threshold_hours": str(self.daily_threshold_hours),
                "weekday": {
                    "first_two_hours": rates(self.weekday_overtime.first_two_hours),
                    "after_two_hours": rates(self.weekday_overtime.after_two_hours),
                },
                "weekend": {
                    "saturday": rates(self.weekend_overtime.saturday),
                    "sunday": rates(self.weekend_overtime.sunday),
                },
            },
        }

    @cached_property
    def fingerprint(self) -> str:
        json_str = json.dumps(self.to_canonical_dict(), sort_keys=True)
        return hashlib.sha256(json_str.encode()).hexdigest()[:32]
