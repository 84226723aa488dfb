"""Editing rules for the on-screen keypad of the edit sheet."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict

from pydantic import BaseModel

from growthsim.core.formatting import format_currency_input
from growthsim.core.normalizer import (
    normalize_amount_input,
    normalize_apy_input,
    normalize_years_input,
)
from growthsim.schemas.simulation import SimulationParams

DELETE_KEY = "DEL"
DECIMAL_KEY = "."


class InputField(str, Enum):
    APY = "apy"
    YEARS = "years"
    INITIAL = "initial"
    AMOUNT = "amount"


_NORMALIZERS: Dict[InputField, Callable[[str], str]] = {
    InputField.APY: normalize_apy_input,
    InputField.YEARS: normalize_years_input,
    InputField.INITIAL: normalize_amount_input,
    InputField.AMOUNT: normalize_amount_input,
}


class DraftTexts(BaseModel):
    apyText: str
    yearsText: str
    initialText: str
    amountText: str


def display_text(value: str, field: InputField) -> str:
    """How the field text is shown while typing: amounts as currency, APY with a percent sign."""
    if field in (InputField.INITIAL, InputField.AMOUNT):
        return format_currency_input(value)
    if field == InputField.APY:
        return f"{value or '0'}%"
    return value


def apply_key(value: str, key: str, field: InputField) -> str:
    """Return the field text after pressing ``key`` (a digit, ``"."`` or ``"DEL"``)."""
    if key == DELETE_KEY:
        return value[:-1]
    if key == DECIMAL_KEY and (field == InputField.YEARS or DECIMAL_KEY in value):
        return value
    return _NORMALIZERS[field](f"{value}{key}")


def _plain_number(value: float) -> str:
    # 100.0 -> "100", 2.5 -> "2.5"
    if not math.isfinite(value):
        return "0"
    return f"{value:.2f}".rstrip("0").rstrip(".")


def draft_texts(params: SimulationParams) -> DraftTexts:
    """Seed texts shown when an edit session opens."""
    return DraftTexts(
        apyText=f"{params.apy:.2f}",
        yearsText=str(params.durationYears),
        initialText=_plain_number(params.initialPrincipal),
        amountText=_plain_number(params.contributionAmount),
    )
