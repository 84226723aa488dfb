from __future__ import annotations

import logging

import pytest

from growthsim.core.normalizer import (
    clamp_apy,
    clamp_contribution_amount,
    clamp_initial_amount,
    clamp_years,
    commit_draft,
    normalize_amount_input,
    normalize_apy_input,
    normalize_draft_to_params,
    normalize_years_input,
    parse_apy_input,
    parse_contribution_input,
    parse_initial_input,
    parse_years_input,
)
from growthsim.schemas.simulation import (
    DEFAULT_PARAMS,
    ContributionMode,
    Frequency,
    SimulationParams,
)

NORMALIZER_LOGGER = "growthsim.core.normalizer"


def test_clamps_saturate_at_bounds():
    assert clamp_apy(30) == 25
    assert clamp_apy(-5) == 0
    assert clamp_apy(4.25) == 4.25
    assert clamp_years(0) == 1
    assert clamp_years(99) == 50
    assert clamp_years(12) == 12
    assert clamp_contribution_amount(2_000_000) == 1_000_000
    assert clamp_contribution_amount(-1) == 0
    assert clamp_initial_amount(10_000_001) == 10_000_000
    assert clamp_initial_amount(-0.01) == 0


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.345.6", "12.34"),
        ("6,5", "6.5"),
        ("4.5%", "4.5"),
        ("abc", ""),
        ("", ""),
        ("12.", "12."),
        (".5", ".5"),
        ("1,234.56", "1.23"),
    ],
)
def test_rate_text_is_sanitized(raw, expected):
    assert normalize_apy_input(raw) == expected


def test_amount_text_uses_same_rules_as_rate():
    assert normalize_amount_input("$1 000.999") == "1000.99"
    assert normalize_amount_input("") == ""


def test_years_text_keeps_two_digits():
    assert normalize_years_input("abc123") == "12"
    assert normalize_years_input("7.5") == "75"
    assert normalize_years_input("yrs") == ""


def test_blank_or_garbage_falls_back():
    assert parse_apy_input("", fallback=6) == 6
    assert parse_apy_input("   ", fallback=6) == 6
    assert parse_apy_input("abc", fallback=6) == 6
    assert parse_years_input("", fallback=30) == 30
    assert parse_initial_input("x", fallback=250.0) == 250.0
    assert parse_contribution_input("", fallback=100.0) == 100.0


def test_non_finite_parse_falls_back():
    assert parse_apy_input("1e999", fallback=6) == 6
    assert parse_initial_input("Infinity", fallback=0.0) == 0.0


def test_parsed_values_are_clamped():
    assert parse_apy_input("40", fallback=6) == 25
    assert parse_apy_input("7,25", fallback=6) == 7.25
    assert parse_years_input("99", fallback=30) == 50
    assert parse_years_input("12abc", fallback=30) == 12
    assert parse_initial_input("20000000", fallback=0.0) == 10_000_000
    assert parse_contribution_input("250.5", fallback=100.0) == 250.5


def test_commit_uses_committed_values_for_blank_fields():
    committed = SimulationParams(apy=4.0, durationYears=10, initialPrincipal=500.0, contributionAmount=50.0)
    draft = committed.model_copy(update={"contributionMode": ContributionMode.ONE_OFF})

    params = normalize_draft_to_params(draft, committed, "", "", "", "")

    assert params.apy == 4.0
    assert params.durationYears == 10
    assert params.initialPrincipal == 500.0
    assert params.contributionAmount == 50.0
    assert params.contributionMode == ContributionMode.ONE_OFF


def test_commit_takes_mode_and_frequency_from_draft():
    draft = DEFAULT_PARAMS.model_copy(update={"frequency": Frequency.MONTHLY})

    result = commit_draft(draft, DEFAULT_PARAMS, "5.5", "20", "1000", "250")

    assert result.params == SimulationParams(
        apy=5.5,
        durationYears=20,
        initialPrincipal=1000.0,
        contributionMode=ContributionMode.RECURRING,
        contributionAmount=250.0,
        frequency=Frequency.MONTHLY,
    )
    assert result.clampedFields == []
    assert not result.clamped


def test_commit_flags_clamped_fields_and_logs_once(caplog):
    with caplog.at_level(logging.WARNING, logger=NORMALIZER_LOGGER):
        result = commit_draft(DEFAULT_PARAMS, DEFAULT_PARAMS, "30", "99", "", "abc")

    assert result.params.apy == 25
    assert result.params.durationYears == 50
    assert result.params.initialPrincipal == DEFAULT_PARAMS.initialPrincipal
    assert result.params.contributionAmount == DEFAULT_PARAMS.contributionAmount
    assert result.clampedFields == ["apy", "durationYears"]

    warnings = [record for record in caplog.records if record.name == NORMALIZER_LOGGER]
    assert len(warnings) == 1
    assert "apy, durationYears" in warnings[0].getMessage()


def test_commit_without_clamping_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger=NORMALIZER_LOGGER):
        commit_draft(DEFAULT_PARAMS, DEFAULT_PARAMS, "6.00", "30", "0", "100")

    assert not [record for record in caplog.records if record.name == NORMALIZER_LOGGER]


def test_commit_never_raises_on_malformed_text():
    result = commit_draft(DEFAULT_PARAMS, DEFAULT_PARAMS, "..", "-", "$", ",,,")
    assert result.params == DEFAULT_PARAMS


def test_years_text_with_thousands_of_digits_saturates():
    huge = "9" * 5000

    assert parse_years_input(huge, fallback=30) == 50
    assert parse_years_input("-" + huge, fallback=30) == 1
    assert parse_years_input("0" * 5000 + "7", fallback=30) == 7

    result = commit_draft(DEFAULT_PARAMS, DEFAULT_PARAMS, "", huge, "", "")
    assert result.params.durationYears == 50
    assert result.clampedFields == ["durationYears"]
