"""Rule table loading from a directory of JSON files.

Directory layout::

    <award dir>/
        award.json              award metadata
        classifications.json    classification code -> name/description/clause
        penalties.json          weekend penalties and overtime multipliers
        rates/
            2025-07-01.json     rates and allowances effective from this date

Numbers are parsed straight into ``Decimal`` so rule values never pass
through binary floating point.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any

from award_engine.errors import ConfigNotFoundError, ConfigParseError
from award_engine.rules.types import (
    DEFAULT_DAILY_OVERTIME_THRESHOLD,
    AllowanceRates,
    AwardMetadata,
    Classification,
    ClassificationRate,
    EmploymentRates,
    PenaltyRates,
    RateSchedule,
    RuleTable,
    WeekdayOvertime,
    WeekendOvertime,
)

logger = logging.getLogger(__name__)

BUNDLED_AWARD_DIR = Path(__file__).resolve().parent.parent / "data" / "ma000018"


def load_rule_table(path: str | Path = BUNDLED_AWARD_DIR) -> RuleTable:
    """Load a rule table snapshot from ``path``.

    Raises:
        ConfigNotFoundError: If a required file or the rates directory is missing
        ConfigParseError: If a file is not valid JSON or lacks a required key
    """
    root = Path(path)

    award = _load_json(root / "award.json")
    classifications = _load_json(root / "classifications.json")
    penalties = _load_json(root / "penalties.json")
    schedules = _load_rate_schedules(root / "rates")

    table = _build(root, award, classifications, penalties, schedules)
    logger.info(
        "Loaded rule table %s (%s) from %s with %d rate schedule(s)",
        table.award.code,
        table.award.version,
        root,
        len(table.rate_schedules),
    )
    return table


def _load_json(path: Path) -> Any:
    if not path.is_file():
        raise ConfigNotFoundError(str(path))
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f, parse_float=Decimal, parse_int=Decimal)
    except json.JSONDecodeError as e:
        raise ConfigParseError(str(path), str(e)) from e


def _load_rate_schedules(rates_dir: Path) -> list[tuple[Path, Any]]:
    if not rates_dir.is_dir():
        raise ConfigNotFoundError(str(rates_dir))

    files = sorted(rates_dir.glob("*.json"))
    if not files:
        raise ConfigNotFoundError(f"{rates_dir} (no rate files found)")

    return [(p, _load_json(p)) for p in files]


def _build(
    root: Path,
    award: Any,
    classifications: Any,
    penalties: Any,
    schedules: list[tuple[Path, Any]],
) -> RuleTable:
    # Track which file a missing key belongs to for the error message
    current = root / "award.json"
    try:
        metadata = AwardMetadata(
            code=award["code"],
            name=award["name"],
            version=str(award["version"]),
            source_url=award["source_url"],
        )

        current = root / "classifications.json"
        classes = {
            code: Classification(
                name=c["name"],
                description=c.get("description", ""),
                clause=c["clause"],
            )
            for code, c in classifications["classifications"].items()
        }

        rate_schedules = []
        for current, data in schedules:
            rate_schedules.append(_rate_schedule(data))

        current = root / "penalties.json"
        penalty_section = penalties["penalties"]
        overtime_section = penalties["overtime"]
        weekday = overtime_section["weekday"]
        weekend = overtime_section["weekend"]

        return RuleTable(
            award=metadata,
            classifications=classes,
            rate_schedules=tuple(rate_schedules),
            saturday=_penalty_rates(penalty_section["saturday"]),
            sunday=_penalty_rates(penalty_section["sunday"]),
            weekday_overtime=WeekdayOvertime(
                clause=weekday["clause"],
                first_two_hours=_employment_rates(weekday["first_two_hours"]),
                after_two_hours=_employment_rates(weekday["after_two_hours"]),
            ),
            weekend_overtime=WeekendOvertime(
                clause=weekend["clause"],
                saturday=_employment_rates(weekend["saturday"]),
                sunday=_employment_rates(weekend["sunday"]),
            ),
            daily_threshold_hours=Decimal(
                overtime_section.get(
                    "daily_threshold_hours", DEFAULT_DAILY_OVERTIME_THRESHOLD
                )
            ),
        )
    except KeyError as e:
        raise ConfigParseError(str(current), f"missing field {e}") from e
    except (TypeError, ValueError, AttributeError) as e:
        raise ConfigParseError(str(current), str(e)) from e


def _rate_schedule(data: Any) -> RateSchedule:
    allowances = data["allowances"]
    return RateSchedule(
        effective_date=date.fromisoformat(data["effective_date"]),
        rates={
            code: ClassificationRate(weekly=r["weekly"], hourly=r["hourly"])
            for code, r in data["rates"].items()
        },
        allowances=AllowanceRates(
            laundry_per_shift=allowances["laundry_per_shift"],
            laundry_per_week=allowances["laundry_per_week"],
        ),
    )


def _employment_rates(data: Any) -> EmploymentRates:
    return EmploymentRates(
        full_time=data["full_time"],
        part_time=data["part_time"],
        casual=data["casual"],
    )


def _penalty_rates(data: Any) -> PenaltyRates:
    return PenaltyRates(clause=data["clause"], rates=_employment_rates(data))
