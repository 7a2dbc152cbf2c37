"""Tests for the command line interface."""

import json
from decimal import Decimal

import pytest

from award_engine.cli import AwardCli

REQUEST = {
    "employee": {
        "id": "emp_042",
        "employment_type": "casual",
        "classification_code": "dce_level_3",
        "date_of_birth": "1990-11-02",
        "employment_start_date": "2023-02-13",
        "tags": ["laundry_allowance"],
    },
    "pay_period": {"start_date": "2025-07-14", "end_date": "2025-07-20"},
    "shifts": [
        {
            "id": "shift_sun",
            "date": "2025-07-20",
            "start_time": "2025-07-20T09:00:00",
            "end_time": "2025-07-20T17:00:00",
        }
    ],
}


@pytest.fixture
def request_file(tmp_path):
    path = tmp_path / "request.json"
    path.write_text(json.dumps(REQUEST))
    return path


class TestCalculateCommand:
    """Test award-engine calculate."""

    def test_prints_result(self, request_file, capsys):
        exit_code = AwardCli().run(["calculate", str(request_file)])

        assert exit_code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["employee_id"] == "emp_042"
        assert result["pay_lines"][0]["category"] == "sunday_casual"
        # 8h x $57.08 + $0.32 laundry
        assert Decimal(result["totals"]["gross_pay"]) == Decimal("456.96")

    def test_writes_output_file(self, request_file, tmp_path, capsys):
        output = tmp_path / "result.json"

        exit_code = AwardCli().run(["calculate", str(request_file), "--output", str(output)])

        assert exit_code == 0
        assert json.loads(output.read_text())["employee_id"] == "emp_042"
        assert "written to" in capsys.readouterr().out

    def test_missing_request_file(self, tmp_path, capsys):
        exit_code = AwardCli().run(["calculate", str(tmp_path / "missing.json")])

        assert exit_code == 1
        assert "cannot read" in capsys.readouterr().err

    def test_invalid_request(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"employee": {}}))

        exit_code = AwardCli().run(["calculate", str(path)])

        assert exit_code == 1
        assert "invalid request" in capsys.readouterr().err

    def test_engine_error_exit_code(self, tmp_path, capsys):
        request = json.loads(json.dumps(REQUEST))
        request["employee"]["classification_code"] = "dce_level_9"
        path = tmp_path / "unknown.json"
        path.write_text(json.dumps(request))

        exit_code = AwardCli().run(["calculate", str(path)])

        assert exit_code == 1
        assert "Classification not found: dce_level_9" in capsys.readouterr().err

    def test_missing_config_directory(self, request_file, tmp_path, capsys):
        exit_code = AwardCli().run(
            ["calculate", str(request_file), "--config", str(tmp_path / "nowhere")]
        )

        assert exit_code == 1
        assert "Configuration file not found" in capsys.readouterr().err


class TestShowRateCommand:
    """Test award-engine show-rate."""

    def test_shows_rate(self, capsys):
        exit_code = AwardCli().run(["show-rate", "dce_level_3", "2025-07-15"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["hourly"] == "28.54"
        assert output["effective_date"] == "2025-07-01"

    def test_rate_not_found(self, capsys):
        exit_code = AwardCli().run(["show-rate", "dce_level_3", "2024-01-01"])

        assert exit_code == 1
        assert "Rate not found" in capsys.readouterr().err


class TestNoCommand:
    def test_prints_help(self, capsys):
        assert AwardCli().run([]) == 1
        assert "usage" in capsys.readouterr().out
