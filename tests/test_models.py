"""Tests for domain models and formatting helpers."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from award_engine.calculators.types import format_decimal, format_percent
from award_engine.models import (
    Break,
    EmploymentType,
    PayCategory,
    PayPeriod,
    PublicHoliday,
    Shift,
)


class TestShift:
    """Test worked time on shifts."""

    def test_worked_hours_excludes_unpaid_breaks_only(self):
        shift = Shift(
            id="s1",
            date=date(2025, 7, 14),
            start_time=datetime(2025, 7, 14, 9, 0),
            end_time=datetime(2025, 7, 14, 18, 0),
            breaks=(
                Break(datetime(2025, 7, 14, 12, 0), datetime(2025, 7, 14, 12, 45)),
                Break(datetime(2025, 7, 14, 15, 0), datetime(2025, 7, 14, 15, 15), is_paid=True),
            ),
        )

        assert shift.span_minutes == 540
        assert shift.unpaid_break_minutes == 45
        assert shift.worked_minutes == 495
        assert shift.worked_hours == Decimal("8.25")

    def test_break_overlap(self):
        brk = Break(datetime(2025, 7, 19, 23, 30), datetime(2025, 7, 20, 0, 30))

        assert brk.overlap_minutes(datetime(2025, 7, 19, 22, 0), datetime(2025, 7, 20, 0, 0)) == 30
        assert brk.overlap_minutes(datetime(2025, 7, 20, 1, 0), datetime(2025, 7, 20, 6, 0)) == 0


class TestPayPeriod:
    """Test pay period date helpers."""

    def test_contains_date_is_inclusive(self):
        period = PayPeriod(start_date=date(2025, 7, 14), end_date=date(2025, 7, 20))

        assert period.contains_date(date(2025, 7, 14))
        assert period.contains_date(date(2025, 7, 20))
        assert not period.contains_date(date(2025, 7, 21))

    def test_public_holidays(self):
        period = PayPeriod(
            start_date=date(2025, 12, 22),
            end_date=date(2025, 12, 28),
            public_holidays=(PublicHoliday(date(2025, 12, 25), "Christmas Day"),),
        )

        assert period.public_holidays[0].date == date(2025, 12, 25)
        assert period.public_holidays[0].region == "national"

    def test_end_before_start_rejected(self):
        with pytest.raises(ValueError):
            PayPeriod(start_date=date(2025, 7, 20), end_date=date(2025, 7, 19))


class TestPayCategory:
    def test_groups(self):
        assert PayCategory.ORDINARY_CASUAL.is_ordinary
        assert PayCategory.SUNDAY_CASUAL.is_penalty
        assert PayCategory.OVERTIME_150.is_overtime
        assert not PayCategory.SATURDAY.is_overtime

    def test_serialized_names(self):
        assert PayCategory.OVERTIME_200.value == "overtime200"
        assert EmploymentType.PART_TIME.value == "part_time"


class TestFormatting:
    """Test decimal rendering used in audit text."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("8.00", "8"),
            ("1E+1", "10"),
            ("228.3200", "228.32"),
            ("0.000", "0"),
            ("35.675", "35.675"),
        ],
    )
    def test_format_decimal(self, value, expected):
        assert format_decimal(Decimal(value)) == expected

    def test_format_percent(self):
        assert format_percent(Decimal("1.875")) == "187.5%"
        assert format_percent(Decimal("2.00")) == "200%"
