"""Award calculation pipeline."""

from award_engine.calculators.allowance import AllowanceResult, calculate_laundry_allowance
from award_engine.calculators.casual_loading import CasualLoadingResult, apply_casual_loading
from award_engine.calculators.daily_overtime import DailyOvertimeDetection, detect_daily_overtime
from award_engine.calculators.day_type import ShiftSegment, get_day_type, segment_by_day
from award_engine.calculators.engine import AwardEngine
from award_engine.calculators.ordinary import OrdinaryPayResult, calculate_ordinary_pay
from award_engine.calculators.overtime import (
    OvertimeResult,
    calculate_weekday_overtime,
    calculate_weekend_overtime,
)
from award_engine.calculators.rate_resolver import BaseRateLookup, RateResolver
from award_engine.calculators.weekend_penalty import PenaltyPayResult, calculate_weekend_penalty

__all__ = [
    "AllowanceResult",
    "AwardEngine",
    "BaseRateLookup",
    "CasualLoadingResult",
    "DailyOvertimeDetection",
    "OrdinaryPayResult",
    "OvertimeResult",
    "PenaltyPayResult",
    "RateResolver",
    "ShiftSegment",
    "apply_casual_loading",
    "calculate_laundry_allowance",
    "calculate_ordinary_pay",
    "calculate_weekday_overtime",
    "calculate_weekend_overtime",
    "calculate_weekend_penalty",
    "detect_daily_overtime",
    "get_day_type",
    "segment_by_day",
]
