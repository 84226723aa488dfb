"""Request and response bodies of the HTTP API."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from growthsim.core.keypad import DraftTexts, InputField
from growthsim.schemas.simulation import DEFAULT_PARAMS, SimulationParams


class PingResponse(BaseModel):
    message: str


class DefaultsResponse(BaseModel):
    params: SimulationParams
    texts: DraftTexts


class NormalizeRequest(BaseModel):
    """A draft being committed, with the raw text of its numeric fields."""

    model_config = ConfigDict(extra="forbid")

    draft: SimulationParams
    committed: SimulationParams = DEFAULT_PARAMS
    apyText: str = ""
    yearsText: str = ""
    initialText: str = ""
    amountText: str = ""


class NormalizeResponse(BaseModel):
    params: SimulationParams
    clampedFields: List[str]
    warnings: List[str] = []


class KeypadRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    value: str = ""
    key: str = Field(..., min_length=1)
    field: InputField


class KeypadResponse(BaseModel):
    value: str
    display: str
    number: float
