"""Currency and percentage text helpers shared by the normalizer and the API."""

from __future__ import annotations

import math
import re
from typing import Optional

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_ZEROS = re.compile(r"^0+(?=\d)")

_COMPACT_UNITS = ("", "K", "M", "B", "T")


def parse_number(raw: Optional[str]) -> Optional[float]:
    """
    Parse the leading numeric prefix of ``raw`` (``"12.5abc"`` -> 12.5).

    Commas count as decimal separators. Returns None for blank text, text
    without a numeric prefix, or a non-finite result.
    """
    if not raw or not raw.strip():
        return None
    match = _FLOAT_PREFIX.match(raw.replace(",", "."))
    if match is None:
        return None
    parsed = float(match.group(1))
    return parsed if math.isfinite(parsed) else None


def parse_currency_input(raw: str) -> float:
    value = parse_number(raw)
    return 0.0 if value is None else value


def format_currency(value: float, max_fraction: int = 0) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{max_fraction}f}"


def format_compact(value: float) -> str:
    """Short form for chart axes: ``1234`` -> ``"1.2K"``, ``2_500_000`` -> ``"2.5M"``."""
    sign = "-" if value < 0 else ""
    scaled = abs(value)
    unit = 0
    while unit < len(_COMPACT_UNITS) - 1 and round(scaled, 1) >= 1000:
        scaled /= 1000
        unit += 1
    text = f"{round(scaled, 1):.1f}".rstrip("0").rstrip(".")
    return f"{sign}{text}{_COMPACT_UNITS[unit]}"


def format_currency_input(raw: str) -> str:
    """Display form of sanitized amount text while it is being typed.

    The fractional part is kept exactly as typed so ``"1234."`` shows as
    ``"$1,234."``.
    """
    if not raw:
        return "$0"

    int_raw, sep, dec_part = raw.partition(".")
    int_part = _LEADING_ZEROS.sub("", int_raw) or "0"
    int_formatted = f"{int(int_part):,}" if int_part.isdigit() else "0"

    if sep:
        return f"${int_formatted}.{dec_part}"
    return f"${int_formatted}"


def format_percent(value: float, digits: int = 2) -> str:
    return f"{value:.{digits}f}%"
