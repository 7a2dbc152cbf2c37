"""Award rule tables."""

from award_engine.rules.loader import BUNDLED_AWARD_DIR, load_rule_table
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

__all__ = [
    "BUNDLED_AWARD_DIR",
    "DEFAULT_DAILY_OVERTIME_THRESHOLD",
    "AllowanceRates",
    "AwardMetadata",
    "Classification",
    "ClassificationRate",
    "EmploymentRates",
    "PenaltyRates",
    "RateSchedule",
    "RuleTable",
    "WeekdayOvertime",
    "WeekendOvertime",
    "load_rule_table",
]
