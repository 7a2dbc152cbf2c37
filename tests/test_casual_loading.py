"""Tests for casual loading."""

from decimal import Decimal

from award_engine.calculators.casual_loading import apply_casual_loading
from award_engine.models import EmploymentType


class TestApplyCasualLoading:
    """Test the 25% casual uplift."""

    def test_casual_gets_loading(self, make_employee):
        employee = make_employee(employment_type=EmploymentType.CASUAL)

        result = apply_casual_loading(Decimal("28.54"), employee, step_number=4)

        assert result.loading_applied is True
        assert result.loaded_rate == Decimal("35.675")
        assert result.audit_step.step_number == 4
        assert result.audit_step.clause_ref == "10.4(b)"
        assert result.audit_step.output["multiplier"] == "1.25"
        assert result.audit_step.reasoning == "$28.54 x 1.25 = $35.675"

    def test_full_time_unchanged(self, make_employee):
        result = apply_casual_loading(Decimal("28.54"), make_employee(), step_number=1)

        assert result.loading_applied is False
        assert result.loaded_rate == Decimal("28.54")
        assert result.audit_step.output["loading_applied"] is False
        assert "not casual" in result.audit_step.reasoning

    def test_part_time_unchanged(self, make_employee):
        employee = make_employee(employment_type=EmploymentType.PART_TIME)

        result = apply_casual_loading(Decimal("28.54"), employee, step_number=1)

        assert result.loading_applied is False
        assert result.loaded_rate == Decimal("28.54")
