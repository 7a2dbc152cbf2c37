#!/usr/bin/env python
"""Award Engine Minimal Example - Library-first demonstration.

This example shows how to use the engine as a library:
1. Load the bundled rule table (or your own directory)
2. Build the employee, pay period and shifts
3. Call AwardEngine.calculate directly
4. Walk the pay lines and the audit trace

This is NOT an HTTP service. See ``award-engine serve`` for that.

Usage:
    python main.py
    python main.py --config /path/to/award/dir --casual
"""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime

from award_engine import AwardEngine, load_rule_table
from award_engine.errors import EngineError
from award_engine.models import Employee, EmploymentType, PayPeriod, Shift
from award_engine.rules import BUNDLED_AWARD_DIR


def build_shifts() -> list[Shift]:
    """A weekday double shift and a Saturday night into Sunday."""
    return [
        Shift(
            id="mon_double",
            date=date(2025, 7, 14),
            start_time=datetime(2025, 7, 14, 7, 0),
            end_time=datetime(2025, 7, 14, 19, 0),
        ),
        Shift(
            id="sat_night",
            date=date(2025, 7, 19),
            start_time=datetime(2025, 7, 19, 22, 0),
            end_time=datetime(2025, 7, 20, 6, 0),
        ),
    ]


def run_demo(config_dir: str, casual: bool) -> None:
    rules = load_rule_table(config_dir)
    engine = AwardEngine(rules)

    employee = Employee(
        id="emp_demo",
        employment_type=EmploymentType.CASUAL if casual else EmploymentType.FULL_TIME,
        classification_code="dce_level_3",
        date_of_birth=date(1988, 5, 1),
        employment_start_date=date(2021, 9, 6),
        tags=frozenset({"laundry_allowance"}),
    )
    pay_period = PayPeriod(start_date=date(2025, 7, 14), end_date=date(2025, 7, 20))

    result = engine.calculate(employee, pay_period, build_shifts())

    print(f"Award: {rules.award.name} ({rules.award.code}, {rules.award.version})")
    print(f"Calculation {result.calculation_id}")
    print()
    print("Pay lines")
    print("-" * 60)
    for line in result.pay_lines:
        print(
            f"  {line.date}  {line.category.value:<16} {line.hours:>6} h "
            f"x ${line.rate:<8} = ${line.amount}  [{line.clause_ref}]"
        )
    for allowance in result.allowances:
        print(f"  {allowance.description:<28} ${allowance.amount}  [{allowance.clause_ref}]")
    print()
    print(f"Gross pay: ${result.totals.gross_pay}")
    print()
    print("Audit trace")
    print("-" * 60)
    for step in result.audit_trace.steps:
        print(f"  {step.step_number:>2}. [{step.clause_ref}] {step.reasoning}")
    for warning in result.audit_trace.warnings:
        print(f"  WARNING {warning.code}: {warning.message}")


def main() -> int:
    """Entry point."""
    parser = argparse.ArgumentParser(description="Award Engine Library Demonstration")
    parser.add_argument(
        "--config",
        default=str(BUNDLED_AWARD_DIR),
        help="Award rule table directory",
    )
    parser.add_argument(
        "--casual",
        action="store_true",
        help="Calculate for a casual employee",
    )
    args = parser.parse_args()

    try:
        run_demo(args.config, args.casual)
        return 0
    except EngineError as e:
        print(f"\nERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
