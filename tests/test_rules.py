"""Tests for rule table loading and lookups."""

import json
import shutil
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from award_engine.errors import (
    ClassificationNotFoundError,
    ConfigNotFoundError,
    ConfigParseError,
    RateNotFoundError,
)
from award_engine.models import DayType, EmploymentType
from award_engine.rules import BUNDLED_AWARD_DIR, load_rule_table


@pytest.fixture
def award_dir(tmp_path: Path) -> Path:
    """Writable copy of the bundled award directory."""
    target = tmp_path / "ma000018"
    shutil.copytree(BUNDLED_AWARD_DIR, target)
    return target


class TestBundledRuleTable:
    """Test the bundled MA000018 rules."""

    def test_metadata(self, rules):
        assert rules.award.code == "MA000018"
        assert rules.award.name == "Aged Care Award 2010"

    def test_classification(self, rules):
        classification = rules.get_classification("dce_level_3")

        assert classification.clause == "14.2"

    def test_unknown_classification(self, rules):
        with pytest.raises(ClassificationNotFoundError):
            rules.get_classification("dce_level_9")

    def test_rates(self, rules):
        assert rules.get_hourly_rate("dce_level_3", date(2025, 7, 1)) == Decimal("28.54")
        assert rules.get_weekly_rate("dce_level_3", date(2025, 7, 1)) == Decimal("1084.70")

    def test_rates_are_decimal(self, rules):
        """JSON numbers are loaded as Decimal, never float."""
        rate = rules.get_hourly_rate("dce_level_1", date(2025, 8, 1))

        assert isinstance(rate, Decimal)
        assert isinstance(rules.get_penalty(DayType.SUNDAY, EmploymentType.CASUAL), Decimal)

    def test_rate_before_first_schedule(self, rules):
        with pytest.raises(RateNotFoundError):
            rules.get_hourly_rate("dce_level_3", date(2024, 12, 31))

    def test_penalties(self, rules):
        assert rules.get_penalty(DayType.SATURDAY, EmploymentType.FULL_TIME) == Decimal("1.50")
        assert rules.get_penalty(DayType.SATURDAY, EmploymentType.CASUAL) == Decimal("1.75")
        assert rules.get_penalty(DayType.SUNDAY, EmploymentType.PART_TIME) == Decimal("1.75")
        assert rules.get_penalty(DayType.SUNDAY, EmploymentType.CASUAL) == Decimal("2.00")

    def test_overtime(self, rules):
        assert rules.get_weekday_overtime(EmploymentType.CASUAL) == (
            Decimal("1.875"),
            Decimal("2.50"),
        )
        assert rules.get_weekend_overtime(
            DayType.SUNDAY, EmploymentType.FULL_TIME
        ) == Decimal("2.00")
        assert rules.daily_threshold_hours == Decimal(8)

    def test_allowance_rates(self, rules):
        assert rules.get_allowance_rates(date(2025, 7, 14)) == (
            Decimal("0.32"),
            Decimal("1.49"),
        )

    def test_allowance_rates_before_first_schedule(self, rules):
        with pytest.raises(ConfigNotFoundError):
            rules.get_allowance_rates(date(2025, 6, 30))

    def test_fingerprint_is_stable(self, rules):
        assert rules.fingerprint == load_rule_table().fingerprint
        assert len(rules.fingerprint) == 32


class TestRateSchedules:
    """Test effective-dated rate selection."""

    def test_latest_schedule_on_or_before_date(self, award_dir):
        """A newer schedule takes over from its effective date."""
        newer = json.loads((award_dir / "rates" / "2025-07-01.json").read_text())
        newer["effective_date"] = "2026-07-01"
        newer["rates"]["dce_level_3"]["hourly"] = 29.50
        (award_dir / "rates" / "2026-07-01.json").write_text(json.dumps(newer))

        rules = load_rule_table(award_dir)

        assert rules.get_hourly_rate("dce_level_3", date(2026, 6, 30)) == Decimal("28.54")
        assert rules.get_hourly_rate("dce_level_3", date(2026, 7, 1)) == Decimal("29.5")

    def test_missing_classification_in_latest_schedule(self, award_dir):
        """An older schedule does not stand in for a newer one that omits the code."""
        newer = json.loads((award_dir / "rates" / "2025-07-01.json").read_text())
        newer["effective_date"] = "2026-07-01"
        del newer["rates"]["dce_level_4"]
        (award_dir / "rates" / "2026-07-01.json").write_text(json.dumps(newer))

        rules = load_rule_table(award_dir)

        with pytest.raises(RateNotFoundError):
            rules.get_hourly_rate("dce_level_4", date(2026, 8, 1))


class TestLoaderErrors:
    """Test configuration error reporting."""

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigNotFoundError) as exc_info:
            load_rule_table(tmp_path / "nowhere")

        assert "award.json" in exc_info.value.path

    def test_missing_rates_directory(self, award_dir):
        shutil.rmtree(award_dir / "rates")

        with pytest.raises(ConfigNotFoundError):
            load_rule_table(award_dir)

    def test_empty_rates_directory(self, award_dir):
        for path in (award_dir / "rates").iterdir():
            path.unlink()

        with pytest.raises(ConfigNotFoundError) as exc_info:
            load_rule_table(award_dir)

        assert "no rate files found" in str(exc_info.value)

    def test_malformed_json(self, award_dir):
        (award_dir / "penalties.json").write_text("{not json")

        with pytest.raises(ConfigParseError) as exc_info:
            load_rule_table(award_dir)

        assert exc_info.value.path.endswith("penalties.json")

    def test_missing_key(self, award_dir):
        (award_dir / "award.json").write_text(json.dumps({"code": "MA000018"}))

        with pytest.raises(ConfigParseError) as exc_info:
            load_rule_table(award_dir)

        assert exc_info.value.path.endswith("award.json")
        assert "name" in exc_info.value.message
