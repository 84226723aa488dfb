"""Turn free-typed draft values into a safe, bounded SimulationParams.

Nothing in here raises on bad input. Malformed or empty text falls back to
the last committed value and out-of-range numbers are saturated at the
nearest bound, so these helpers can run on every keystroke.
"""

from __future__ import annotations

import re
from typing import Callable, List, Optional

from growthsim.core.formatting import parse_number
from growthsim.schemas.simulation import (
    APY_BOUNDS,
    CONTRIBUTION_BOUNDS,
    INITIAL_BOUNDS,
    YEARS_BOUNDS,
    NormalizationResult,
    SimulationParams,
)
from growthsim.utils.logging import get_logger

logger = get_logger(__name__)

_NON_DECIMAL = re.compile(r"[^0-9.]")
_NON_DIGIT = re.compile(r"[^0-9]")
_INT_PREFIX = re.compile(r"\s*([+-]?)0*(\d+)")

MAX_YEARS_DIGITS = 2
# anything with more digits saturates at the upper bound anyway
MAX_PARSED_DIGITS = 4
MAX_FRACTION_DIGITS = 2


def _clamp(value, low, high):
    return min(high, max(low, value))


def clamp_apy(value: float) -> float:
    return _clamp(value, *APY_BOUNDS)


def clamp_years(value: int) -> int:
    return _clamp(value, *YEARS_BOUNDS)


def clamp_contribution_amount(value: float) -> float:
    return _clamp(value, *CONTRIBUTION_BOUNDS)


def clamp_initial_amount(value: float) -> float:
    return _clamp(value, *INITIAL_BOUNDS)


# ---------------------------------------------------------------------------
# Text sanitizers
# ---------------------------------------------------------------------------


def _normalize_decimal_text(value: str) -> str:
    cleaned = _NON_DECIMAL.sub("", value.replace(",", "."))
    if not cleaned:
        return ""
    int_part, *rest = cleaned.split(".")
    # extra periods collapse into the fractional part
    dec_part = "".join(rest)[:MAX_FRACTION_DIGITS]
    return f"{int_part}.{dec_part}" if rest else int_part


def normalize_apy_input(value: str) -> str:
    """Sanitize a typed rate: ``"12,5%"`` -> ``"12.5"``, ``"12.345.6"`` -> ``"12.34"``."""
    return _normalize_decimal_text(value)


def normalize_amount_input(value: str) -> str:
    """Sanitize a typed currency amount, same rules as the rate field."""
    return _normalize_decimal_text(value)


def normalize_years_input(value: str) -> str:
    """Digits only, at most two of them."""
    return _NON_DIGIT.sub("", value)[:MAX_YEARS_DIGITS]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _parse_int(raw: str) -> Optional[int]:
    if not raw or not raw.strip():
        return None
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    sign, digits = match.groups()
    return int(sign + digits[:MAX_PARSED_DIGITS])


def parse_apy_input(raw: str, fallback: float) -> float:
    parsed = parse_number(raw)
    return fallback if parsed is None else clamp_apy(parsed)


def parse_years_input(raw: str, fallback: int) -> int:
    parsed = _parse_int(raw)
    return fallback if parsed is None else clamp_years(parsed)


def parse_initial_input(raw: str, fallback: float) -> float:
    parsed = parse_number(raw)
    return fallback if parsed is None else clamp_initial_amount(parsed)


def parse_contribution_input(raw: str, fallback: float) -> float:
    parsed = parse_number(raw)
    return fallback if parsed is None else clamp_contribution_amount(parsed)


# ---------------------------------------------------------------------------
# Commit
# ---------------------------------------------------------------------------


def _commit_field(
    name: str,
    parsed,
    fallback,
    clamp: Callable,
    clamped_fields: List[str],
):
    value = fallback if parsed is None else parsed
    bounded = clamp(value)
    if bounded != value:
        clamped_fields.append(name)
    return bounded


def commit_draft(
    draft: SimulationParams,
    committed: SimulationParams,
    apy_text: str,
    years_text: str,
    initial_text: str,
    amount_text: str,
) -> NormalizationResult:
    """
    Build the next committed params from a draft and its four text fields.

    Each numeric field is parsed independently, falling back to the
    corresponding committed value, then clamped. Mode and frequency are
    taken from the draft as-is. Clamped fields are reported for diagnostics
    only.
    """
    clamped_fields: List[str] = []

    apy = _commit_field("apy", parse_number(apy_text), committed.apy, clamp_apy, clamped_fields)
    years = _commit_field(
        "durationYears", _parse_int(years_text), committed.durationYears, clamp_years, clamped_fields
    )
    initial = _commit_field(
        "initialPrincipal",
        parse_number(initial_text),
        committed.initialPrincipal,
        clamp_initial_amount,
        clamped_fields,
    )
    amount = _commit_field(
        "contributionAmount",
        parse_number(amount_text),
        committed.contributionAmount,
        clamp_contribution_amount,
        clamped_fields,
    )

    if clamped_fields:
        logger.warning("Simulation params were clamped for safety: %s", ", ".join(clamped_fields))

    params = draft.model_copy(
        update={
            "apy": apy,
            "durationYears": years,
            "initialPrincipal": initial,
            "contributionAmount": amount,
        }
    )
    return NormalizationResult(params=params, clampedFields=clamped_fields)


def normalize_draft_to_params(
    draft: SimulationParams,
    committed: SimulationParams,
    apy_text: str,
    years_text: str,
    initial_text: str,
    amount_text: str,
) -> SimulationParams:
    """Same as :func:`commit_draft` but returns only the committed params."""
    return commit_draft(draft, committed, apy_text, years_text, initial_text, amount_text).params
