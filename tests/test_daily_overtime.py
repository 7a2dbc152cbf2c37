"""Tests for daily overtime detection."""

from decimal import Decimal

from award_engine.calculators.daily_overtime import detect_daily_overtime


class TestDetectDailyOvertime:
    """Test splitting worked hours at the daily threshold."""

    def test_under_threshold(self):
        detection = detect_daily_overtime(Decimal("7.5"))

        assert detection.ordinary_hours == Decimal("7.5")
        assert detection.overtime_hours == Decimal(0)
        assert "is under 8 hour threshold" in detection.audit_step.reasoning

    def test_exactly_at_threshold(self):
        """Exactly 8 hours is all ordinary time."""
        detection = detect_daily_overtime(Decimal(8))

        assert detection.ordinary_hours == Decimal(8)
        assert detection.overtime_hours == Decimal(0)
        assert "equals 8 hour threshold" in detection.audit_step.reasoning

    def test_over_threshold(self):
        detection = detect_daily_overtime(Decimal(12), step_number=3)

        assert detection.ordinary_hours == Decimal(8)
        assert detection.overtime_hours == Decimal(4)
        step = detection.audit_step
        assert step.step_number == 3
        assert step.rule_id == "daily_overtime_detection"
        assert step.clause_ref == "22.1(c), 25.1"
        assert step.output == {"ordinary_hours": "8", "overtime_hours": "4"}
        assert "exceeds 8 hour threshold by 4 hours" in step.reasoning

    def test_custom_threshold(self):
        detection = detect_daily_overtime(Decimal(10), threshold=Decimal("7.6"))

        assert detection.ordinary_hours == Decimal("7.6")
        assert detection.overtime_hours == Decimal("2.4")

    def test_zero_hours(self):
        detection = detect_daily_overtime(Decimal(0))

        assert detection.ordinary_hours == Decimal(0)
        assert detection.overtime_hours == Decimal(0)

    def test_hours_always_sum_to_worked(self):
        for worked in ("0", "0.25", "7.99", "8", "8.01", "10", "16.5", "24"):
            hours = Decimal(worked)
            detection = detect_daily_overtime(hours)
            assert detection.ordinary_hours + detection.overtime_hours == hours
            assert detection.ordinary_hours <= Decimal(8)
            assert detection.overtime_hours >= 0
