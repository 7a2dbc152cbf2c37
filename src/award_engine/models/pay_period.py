"""Pay period and public holiday models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class PublicHoliday:
    """A public holiday falling within a pay period.

    Carried through to the result; holiday penalty rates are not priced.
    """

    date: date
    name: str
    region: str = "national"


@dataclass(frozen=True)
class PayPeriod:
    """Inclusive date range a calculation covers."""

    start_date: date
    end_date: date
    public_holidays: tuple[PublicHoliday, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")

    def contains_date(self, value: date) -> bool:
        return self.start_date <= value <= self.end_date
