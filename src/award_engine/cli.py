"""Award engine command line interface.

Provides tools for:
- One-off calculations from a request file
- Rate lookups against a rule table
- Serving the HTTP API

Usage:
    award-engine calculate request.json --output result.json
    award-engine show-rate dce_level_3 2025-07-15
    award-engine serve --port 8000
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from award_engine.api.schemas import CalculationRequest, CalculationResponse
from award_engine.calculators import AwardEngine
from award_engine.config import configure_logging, get_settings
from award_engine.errors import EngineError
from award_engine.rules import RuleTable, load_rule_table


def parse_date(s: str) -> date:
    """Parse ISO date string."""
    return date.fromisoformat(s)


class AwardCli:
    """Award engine command line interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="award-engine",
            description="Award interpretation engine tools",
        )
        parser.add_argument(
            "--log-level",
            type=str.upper,
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            help="Log level (default: LOG_LEVEL or INFO)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # calculate command
        calculate = subparsers.add_parser(
            "calculate",
            help="Calculate pay for a request file",
        )
        calculate.add_argument(
            "request",
            type=Path,
            help="JSON file with employee, pay_period and shifts",
        )
        calculate.add_argument(
            "--config",
            type=Path,
            help="Award rule table directory (default: AWARD_CONFIG_PATH)",
        )
        calculate.add_argument(
            "--output",
            "-o",
            type=Path,
            help="Write the result here instead of stdout",
        )

        # show-rate command
        show_rate = subparsers.add_parser(
            "show-rate",
            help="Show the hourly rate for a classification on a date",
        )
        show_rate.add_argument(
            "classification",
            help="Classification code, e.g. dce_level_3",
        )
        show_rate.add_argument(
            "date",
            type=parse_date,
            help="Date the rate applies on (YYYY-MM-DD)",
        )
        show_rate.add_argument(
            "--config",
            type=Path,
            help="Award rule table directory (default: AWARD_CONFIG_PATH)",
        )

        # serve command
        serve = subparsers.add_parser(
            "serve",
            help="Run the HTTP API",
        )
        serve.add_argument(
            "--host",
            help="Bind address (default: HOST)",
        )
        serve.add_argument(
            "--port",
            type=int,
            help="Bind port (default: PORT)",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 1

        configure_logging(parsed.log_level)

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "calculate": self._cmd_calculate,
            "show-rate": self._cmd_show_rate,
            "serve": self._cmd_serve,
        }

        handler = handlers.get(parsed.command)
        if handler is None:
            print(f"Unknown command: {parsed.command}", file=sys.stderr)
            return 1

        try:
            return handler(parsed)
        except EngineError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    def _load_rules(self, config: Path | None) -> RuleTable:
        return load_rule_table(config or get_settings().award_config_path)

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Calculate pay from a request file."""
        try:
            raw = args.request.read_text()
        except OSError as e:
            print(f"Error: cannot read {args.request}: {e.strerror}", file=sys.stderr)
            return 1

        try:
            request = CalculationRequest.model_validate_json(raw)
        except ValidationError as e:
            print(f"Error: invalid request in {args.request}:\n{e}", file=sys.stderr)
            return 1

        engine = AwardEngine(self._load_rules(args.config))
        result = engine.calculate(
            employee=request.employee.to_domain(),
            pay_period=request.pay_period.to_domain(),
            shifts=[shift.to_domain() for shift in request.shifts],
        )
        output = CalculationResponse.model_validate(result).model_dump_json(indent=2)

        if args.output:
            args.output.write_text(output + "\n")
            print(
                f"Gross pay ${result.totals.gross_pay} for {result.employee_id} "
                f"written to {args.output}"
            )
        else:
            print(output)

        for warning in result.audit_trace.warnings:
            print(f"Warning [{warning.code}]: {warning.message}", file=sys.stderr)

        return 0

    def _cmd_show_rate(self, args: argparse.Namespace) -> int:
        """Show a classification's rates on a date."""
        rules = self._load_rules(args.config)
        classification = rules.get_classification(args.classification)
        rate, schedule = rules.get_classification_rate(args.classification, args.date)

        print(
            json.dumps(
                {
                    "classification": args.classification,
                    "name": classification.name,
                    "date": args.date.isoformat(),
                    "effective_date": schedule.effective_date.isoformat(),
                    "hourly": str(rate.hourly),
                    "weekly": str(rate.weekly),
                },
                indent=2,
            )
        )
        return 0

    def _cmd_serve(self, args: argparse.Namespace) -> int:
        """Run the API with uvicorn."""
        import uvicorn

        settings = get_settings()
        uvicorn.run(
            "award_engine.api.app:app",
            host=args.host or settings.HOST,
            port=args.port or settings.PORT,
            reload=settings.DEBUG,
        )
        return 0


def main() -> int:
    """CLI entry point."""
    cli = AwardCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
