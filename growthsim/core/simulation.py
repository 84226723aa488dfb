"""Month-by-month compounding of a savings balance, reported per year."""

from __future__ import annotations

import math
from typing import List, Optional

from growthsim.core.normalizer import (
    clamp_apy,
    clamp_contribution_amount,
    clamp_initial_amount,
    clamp_years,
)
from growthsim.schemas.simulation import (
    DEFAULT_PARAMS,
    MONTHS_PER_YEAR,
    WEEKS_PER_YEAR,
    ContributionMode,
    Frequency,
    SimulationParams,
    YearPoint,
)


def safe_number(value: float, fallback: float = 0.0) -> float:
    return value if math.isfinite(value) else fallback


def to_monthly_contribution(amount: float, frequency: Frequency) -> float:
    """Average monthly equivalent of a per-period contribution."""
    if frequency == Frequency.WEEKLY:
        return amount * WEEKS_PER_YEAR / MONTHS_PER_YEAR
    return amount


def monthly_rate_for_apy(apy: float) -> float:
    """Monthly rate that compounds to ``apy`` percent over twelve months."""
    base = 1 + apy / 100
    rate = base ** (1 / MONTHS_PER_YEAR) - 1 if base >= 0 else math.nan
    return rate if math.isfinite(rate) else 0.0


def bounded_params(params: SimulationParams) -> SimulationParams:
    """
    Copy of ``params`` with every numeric field bounded.

    Non-finite numbers fall back to the baseline values and the horizon is
    rounded to whole years before clamping.
    """
    years = params.durationYears
    if isinstance(years, float):
        years = int(math.floor(safe_number(years, DEFAULT_PARAMS.durationYears) + 0.5))
    return params.model_copy(
        update={
            "durationYears": clamp_years(years),
            "apy": clamp_apy(safe_number(params.apy, DEFAULT_PARAMS.apy)),
            "contributionAmount": clamp_contribution_amount(
                safe_number(params.contributionAmount, DEFAULT_PARAMS.contributionAmount)
            ),
            "initialPrincipal": clamp_initial_amount(
                safe_number(params.initialPrincipal, DEFAULT_PARAMS.initialPrincipal)
            ),
        }
    )


def simulate_growth(params: Optional[SimulationParams] = None) -> List[YearPoint]:
    """
    Project the balance year by year over ``params.durationYears``.

    Order of operations (per month):
      1) Grow the balance by the monthly-equivalent rate.
      2) Add the recurring contribution (not grown this month).

    One-off contributions join the initial principal before month 1. The
    result always starts at year 0 and ends at ``durationYears``; if the
    balance stops being finite the loop halts and the final year is still
    reported, with non-finite figures shown as 0.
    """
    if params is None:
        params = DEFAULT_PARAMS

    # re-bound everything, callers are not trusted to have normalized
    params = bounded_params(params)
    duration_years = params.durationYears
    apy = params.apy
    contribution_amount = params.contributionAmount
    initial_principal = params.initialPrincipal

    total_months = duration_years * MONTHS_PER_YEAR
    monthly_rate = monthly_rate_for_apy(apy)

    is_recurring = params.contributionMode == ContributionMode.RECURRING
    monthly_contribution = (
        to_monthly_contribution(contribution_amount, params.frequency) if is_recurring else 0.0
    )
    one_off_amount = contribution_amount if params.contributionMode == ContributionMode.ONE_OFF else 0.0

    balance = initial_principal + one_off_amount
    total_added = initial_principal + one_off_amount

    points: List[YearPoint] = []

    def snapshot(year_index: int) -> None:
        interest_earned = balance - total_added
        points.append(
            YearPoint(
                yearIndex=year_index,
                totalAddedToDate=safe_number(total_added),
                interestEarnedToDate=safe_number(interest_earned),
                totalBalanceToDate=safe_number(balance),
            )
        )

    snapshot(0)

    for month in range(1, total_months + 1):
        balance *= 1 + monthly_rate
        if is_recurring:
            balance += monthly_contribution
            total_added += monthly_contribution
        if not (math.isfinite(balance) and math.isfinite(total_added)):
            break

        if month % MONTHS_PER_YEAR == 0:
            snapshot(month // MONTHS_PER_YEAR)

    if points[-1].yearIndex != duration_years:
        snapshot(duration_years)

    return points
