"""
Utility helpers for formatting counts, percentages and labels (pt-BR).
"""

from __future__ import annotations

from typing import Optional

LABEL_MAX_LENGTH = 35
LABEL_CUT_LENGTH = 32


def format_number(value: Optional[float], decimals: int = 0) -> str:
    """Format with pt-BR separators: ``1234.5`` -> ``1.234,5``."""
    if value is None:
        return "–"
    try:
        formatted = f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"
    return formatted.replace(",", "_").replace(".", ",").replace("_", ".")


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "–"


def shorten_label(label: str) -> str:
    if len(label) > LABEL_MAX_LENGTH:
        return label[:LABEL_CUT_LENGTH] + "..."
    return label
