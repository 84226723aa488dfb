from __future__ import annotations

from growthsim.core.simulation import simulate_growth
from growthsim.core.summary import contribution_line, point_for_year, summarize
from growthsim.schemas.simulation import (
    DEFAULT_PARAMS,
    ContributionMode,
    Frequency,
    SimulationParams,
)


def test_contribution_line_per_mode():
    assert contribution_line(DEFAULT_PARAMS) == "$100 Every Week"
    assert contribution_line(SimulationParams(frequency=Frequency.MONTHLY, contributionAmount=1500)) == (
        "$1,500 Every Month"
    )
    assert contribution_line(
        SimulationParams(contributionMode=ContributionMode.ONE_OFF, contributionAmount=5000)
    ) == "$5,000 One-Off"


def test_summary_reflects_final_point():
    params = SimulationParams(
        apy=0.0,
        durationYears=2,
        initialPrincipal=1000.0,
        contributionAmount=100.0,
        frequency=Frequency.MONTHLY,
    )
    points = simulate_growth(params)

    summary = summarize(params, points)

    assert summary.finalBalance == points[-1].totalBalanceToDate == 3400.0
    assert summary.totalAdded == 3400.0
    assert summary.interestEarned == 0.0
    assert summary.headline == "$0 Earned in 2 Years"
    assert summary.durationLine == "For 2 Years"
    assert summary.apyLabel == "0.00% APY"


def test_point_for_year_snaps_to_last_point():
    points = simulate_growth(SimulationParams(durationYears=5))

    assert point_for_year(points, 3).yearIndex == 3
    assert point_for_year(points, 40).yearIndex == 5
    assert point_for_year(points, -1).yearIndex == 0


def test_summary_labels_use_bounded_params():
    params = SimulationParams(apy=40.0, contributionAmount=-500.0, durationYears=3)
    points = simulate_growth(params)

    summary = summarize(params, points)

    assert summary.apyLabel == "25.00% APY"
    assert summary.contributionLine == "$0 Every Week"
    assert summary.totalAdded == 0.0


def test_summary_compact_balance():
    params = SimulationParams(
        apy=0.0,
        durationYears=1,
        initialPrincipal=1_000_000.0,
        contributionMode=ContributionMode.ONE_OFF,
        contributionAmount=500_000.0,
    )

    assert summarize(params, simulate_growth(params)).compactBalance == "1.5M"
