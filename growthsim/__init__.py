"""Savings growth projection engine."""

from growthsim.core.normalizer import normalize_draft_to_params
from growthsim.core.simulation import simulate_growth
from growthsim.schemas.simulation import (
    DEFAULT_PARAMS,
    ContributionMode,
    Frequency,
    SimulationParams,
    YearPoint,
)

__all__ = [
    "DEFAULT_PARAMS",
    "ContributionMode",
    "Frequency",
    "SimulationParams",
    "YearPoint",
    "normalize_draft_to_params",
    "simulate_growth",
]
