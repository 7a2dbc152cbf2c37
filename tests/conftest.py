"""Pytest fixtures for award engine tests."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Callable

import pytest

from award_engine.calculators import AwardEngine
from award_engine.models import Break, Employee, EmploymentType, PayPeriod, Shift
from award_engine.rules import RuleTable, load_rule_table

TEST_ENGINE_VERSION = "1.0.0-test"

# Week of Monday 2025-07-14 to Sunday 2025-07-20
MONDAY = date(2025, 7, 14)
SUNDAY = date(2025, 7, 20)


@pytest.fixture(scope="session")
def rules() -> RuleTable:
    """Bundled MA000018 rule table."""
    return load_rule_table()


@pytest.fixture
def engine(rules: RuleTable) -> AwardEngine:
    return AwardEngine(rules, engine_version=TEST_ENGINE_VERSION)


@pytest.fixture
def pay_period() -> PayPeriod:
    return PayPeriod(start_date=MONDAY, end_date=SUNDAY)


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    """Factory for employees; defaults to a full-time Level 3 DCE."""

    def _make(
        employment_type: EmploymentType = EmploymentType.FULL_TIME,
        classification_code: str = "dce_level_3",
        base_hourly_rate: Decimal | None = None,
        tags: tuple[str, ...] = (),
        employee_id: str = "emp_001",
    ) -> Employee:
        return Employee(
            id=employee_id,
            employment_type=employment_type,
            classification_code=classification_code,
            date_of_birth=date(1985, 3, 15),
            employment_start_date=date(2020, 1, 6),
            base_hourly_rate=base_hourly_rate,
            tags=frozenset(tags),
        )

    return _make


@pytest.fixture
def make_shift() -> Callable[..., Shift]:
    """Factory for shifts from ISO timestamps.

    ``breaks`` is a sequence of ``(start, end)`` or ``(start, end, is_paid)``.
    """

    def _make(
        start: str,
        end: str,
        breaks: tuple[tuple, ...] = (),
        shift_id: str = "shift_001",
    ) -> Shift:
        start_time = datetime.fromisoformat(start)
        return Shift(
            id=shift_id,
            date=start_time.date(),
            start_time=start_time,
            end_time=datetime.fromisoformat(end),
            breaks=tuple(
                Break(
                    start_time=datetime.fromisoformat(b[0]),
                    end_time=datetime.fromisoformat(b[1]),
                    is_paid=b[2] if len(b) > 2 else False,
                )
                for b in breaks
            ),
        )

    return _make
