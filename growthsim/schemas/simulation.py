"""Data contracts for growth simulations."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

APY_BOUNDS = (0.0, 25.0)
YEARS_BOUNDS = (1, 50)
CONTRIBUTION_BOUNDS = (0.0, 1_000_000.0)
INITIAL_BOUNDS = (0.0, 10_000_000.0)

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12


class ContributionMode(str, Enum):
    RECURRING = "recurring"
    ONE_OFF = "oneOff"


class Frequency(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class SimulationParams(BaseModel):
    """Inputs of a single projection run.

    Ranges are deliberately not validated here: out-of-range numbers are
    saturated by the normalizer and again by the simulator.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    apy: float = Field(6.0, description="Annual percentage yield, in percent (6.0 == 6%).")
    durationYears: int = Field(30, description="Projection horizon in whole years.")
    initialPrincipal: float = Field(0.0, description="Balance at year 0.")
    contributionMode: ContributionMode = ContributionMode.RECURRING
    contributionAmount: float = Field(100.0, description="Amount per period, or the single one-off amount.")
    # only meaningful for recurring contributions
    frequency: Frequency = Frequency.WEEKLY


class YearPoint(BaseModel):
    """Cumulative state at a year boundary."""

    model_config = ConfigDict(frozen=True)

    yearIndex: int = Field(..., ge=0)
    totalAddedToDate: float
    interestEarnedToDate: float
    totalBalanceToDate: float


class NormalizationResult(BaseModel):
    params: SimulationParams
    clampedFields: List[str] = []

    @property
    def clamped(self) -> bool:
        return bool(self.clampedFields)


DEFAULT_PARAMS = SimulationParams()


class ProjectionSummary(BaseModel):
    """Headline figures and labels for a finished projection."""

    finalBalance: float
    compactBalance: str
    interestEarned: float
    totalAdded: float
    headline: str
    contributionLine: str
    durationLine: str
    apyLabel: str


class SimulationResponse(BaseModel):
    points: List[YearPoint]
    summary: ProjectionSummary
    selected: Optional[YearPoint] = None
