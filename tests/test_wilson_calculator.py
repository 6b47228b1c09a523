"""Unit tests for the Wilson × lobby-rank calculator."""

from __future__ import annotations

import pytest

from domain.ratings.common import RawMatch
from domain.ratings.wilson import WilsonCalculator, WilsonParameters, calculate_difficulty_mod


def _history(games: int, wins: int, *, rank: int | None = 50) -> list[RawMatch]:
    return [
        RawMatch(
            match_id=index + 1,
            player_slot=130,
            radiant_win=index >= wins,
            duration=1500,
            hero_id=1,
            start_time=1_700_000_000 + index * 600,
            kills=8,
            deaths=2,
            assists=0,
            average_rank=rank,
        )
        for index in range(games)
    ]


def test_difficulty_mod_is_linear_in_rank() -> None:
    params = WilsonParameters()
    assert calculate_difficulty_mod(0.0, params) == pytest.approx(0.7)
    assert calculate_difficulty_mod(50.0, params) == pytest.approx(1.325)
    assert calculate_difficulty_mod(80.0, params) == pytest.approx(1.7)
    assert calculate_difficulty_mod(95.0, params) == pytest.approx(1.7)


def test_small_history_is_provisional() -> None:
    breakdown = WilsonCalculator(WilsonParameters()).calculate(_history(10, 8))
    assert breakdown.provisional is True
    assert breakdown.rating == 3500
    assert breakdown.wins == 8


def test_winning_record_rates_above_base() -> None:
    breakdown = WilsonCalculator(WilsonParameters()).calculate(_history(100, 60))
    assert breakdown.algorithm == "wilson"
    assert breakdown.provisional is False
    assert breakdown.wins == 60
    assert breakdown.losses == 40
    assert breakdown.adjusted_win_rate == pytest.approx(0.5176, abs=1e-3)
    assert breakdown.maturity_penalty == 0.0
    assert breakdown.recency_multiplier == pytest.approx(1.0)
    assert 3500 < breakdown.rating < 3700


def test_rating_is_clamped_to_bounds() -> None:
    calculator = WilsonCalculator(WilsonParameters(skill_scale=100_000.0))
    assert calculator.calculate(_history(50, 50, rank=80)).rating == 7000
    assert calculator.calculate(_history(50, 0, rank=80)).rating == 500
