"""Small text helpers shared across the package."""

from __future__ import annotations

_WHITESPACE = " \t\n\r"


def format_fixed(value: float, precision: int = 2) -> str:
    """Render a number in fixed-point notation with the given number of decimals."""
    return f"{value:.{precision}f}"


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(_WHITESPACE)