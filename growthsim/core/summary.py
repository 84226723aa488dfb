"""Presentation-ready figures derived from a projection."""

from __future__ import annotations

from typing import Sequence

from growthsim.core.formatting import format_compact, format_currency, format_percent
from growthsim.core.simulation import bounded_params
from growthsim.schemas.simulation import (
    ContributionMode,
    Frequency,
    ProjectionSummary,
    SimulationParams,
    YearPoint,
)

FREQUENCY_LABELS = {
    Frequency.WEEKLY: "Week",
    Frequency.MONTHLY: "Month",
}


def contribution_line(params: SimulationParams) -> str:
    amount = format_currency(params.contributionAmount)
    if params.contributionMode == ContributionMode.RECURRING:
        return f"{amount} Every {FREQUENCY_LABELS[params.frequency]}"
    return f"{amount} One-Off"


def point_for_year(points: Sequence[YearPoint], year: int) -> YearPoint:
    """Point for a selected year; selections past the end snap to the last point."""
    index = min(max(year, 0), len(points) - 1)
    return points[index]


def summarize(params: SimulationParams, points: Sequence[YearPoint]) -> ProjectionSummary:
    """Labels describe the bounded params the points were simulated with."""
    params = bounded_params(params)
    final = points[-1]
    return ProjectionSummary(
        finalBalance=final.totalBalanceToDate,
        compactBalance=format_compact(final.totalBalanceToDate),
        interestEarned=final.interestEarnedToDate,
        totalAdded=final.totalAddedToDate,
        headline=f"{format_currency(final.interestEarnedToDate)} Earned in {final.yearIndex} Years",
        contributionLine=contribution_line(params),
        durationLine=f"For {final.yearIndex} Years",
        apyLabel=f"{format_percent(params.apy, 2)} APY",
    )
