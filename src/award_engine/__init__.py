"""Award interpretation engine for the Aged Care Award (MA000018)."""

__version__ = "1.0.0"

from award_engine.calculators import AwardEngine  # noqa: E402
from award_engine.rules import RuleTable, load_rule_table  # noqa: E402

__all__ = ["AwardEngine", "RuleTable", "__version__", "load_rule_table"]
