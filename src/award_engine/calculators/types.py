"""Shared helpers for the calculation pipeline."""

from __future__ import annotations

from decimal import Decimal

ZERO = Decimal(0)
HUNDRED = Decimal(100)


def format_decimal(value: Decimal) -> str:
    """Render a Decimal without trailing zeros or exponent notation.

    ``Decimal("8.00")`` -> ``"8"``, ``Decimal("1E+1")`` -> ``"10"``.
    """
    normalized = value.normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")


def format_percent(multiplier: Decimal) -> str:
    """``Decimal("1.875")`` -> ``"187.5%"``."""
    return f"{format_decimal(multiplier * HUNDRED)}%"
