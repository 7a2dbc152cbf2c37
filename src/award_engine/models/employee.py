"""Employee model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class EmploymentType(str, Enum):
    """Employment basis under the award."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CASUAL = "casual"


@dataclass(frozen=True)
class Employee:
    """An employee as presented to a single calculation.

    ``base_hourly_rate`` overrides the classification rate when set.
    ``tags`` drive allowance eligibility (e.g. ``laundry_allowance``).
    """

    id: str
    employment_type: EmploymentType
    classification_code: str
    date_of_birth: date
    employment_start_date: date
    base_hourly_rate: Decimal | None = None
    tags: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_casual(self) -> bool:
        return self.employment_type is EmploymentType.CASUAL

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
