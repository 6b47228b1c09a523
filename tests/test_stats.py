"""Tests for leaderboard statistics."""

from __future__ import annotations

import pytest

from domain.ratings.common import ValidatedMatch
from domain.ratings.stats import best_hero, calculate_hero_stats, calculate_ranking_stats


def _validated(
    match_id: int,
    *,
    won: bool,
    hero_id: int = 1,
    rank: int | None = 50,
    kills: int = 8,
    deaths: int = 2,
) -> ValidatedMatch:
    return ValidatedMatch(
        match_id=match_id,
        hero_id=hero_id,
        won=won,
        duration=1500,
        start_time=1_700_000_000 + match_id * 600,
        kills=kills,
        deaths=deaths,
        average_rank=rank,
    )


def test_empty_history_has_zero_stats() -> None:
    stats = calculate_ranking_stats([])
    assert stats.winrate == 0.0
    assert stats.pro_games == 0
    assert stats.streak == 0


def test_ranking_stats() -> None:
    matches = [
        _validated(1, won=True, rank=70, kills=8, deaths=2),
        _validated(2, won=False, rank=65, kills=2, deaths=2),
        _validated(3, won=True, rank=40, kills=8, deaths=2),
        _validated(4, won=True, rank=None, kills=8, deaths=2),
    ]

    stats = calculate_ranking_stats(matches)

    assert stats.winrate == pytest.approx(75.0)
    assert stats.avg_kda == pytest.approx(3.25)
    assert stats.kda_variance == pytest.approx(1.6875, abs=0.01)
    assert stats.pro_games == 2
    assert stats.pro_winrate == pytest.approx(50.0)
    assert stats.pro_kda == pytest.approx(2.5)
    assert stats.streak == 2


def test_losing_streak_is_negative() -> None:
    matches = [_validated(1, won=True), _validated(2, won=False), _validated(3, won=False)]
    assert calculate_ranking_stats(matches).streak == -2


def test_hero_stats_sorted_by_games() -> None:
    matches = [
        _validated(1, won=True, hero_id=5),
        _validated(2, won=False, hero_id=5),
        _validated(3, won=True, hero_id=2),
        _validated(4, won=True, hero_id=9),
        _validated(5, won=True, hero_id=0),
    ]

    stats = calculate_hero_stats(matches)

    assert [stat.hero_id for stat in stats] == [5, 2, 9]
    assert stats[0].games == 2
    assert stats[0].winrate == pytest.approx(50.0)


def test_best_hero_requires_minimum_games() -> None:
    matches = [_validated(index, won=True, hero_id=7) for index in range(9)]
    assert best_hero(matches) is None
    assert best_hero(matches, min_games=5).hero_id == 7


def test_best_hero_prefers_volume_on_near_ties() -> None:
    matches = [_validated(index, won=index % 2 == 0, hero_id=3) for index in range(10)]
    matches += [_validated(100 + index, won=index % 2 == 0, hero_id=4) for index in range(20)]
    matches += [_validated(200 + index, won=index < 4, hero_id=8) for index in range(10)]

    best = best_hero(matches)

    assert best is not None
    assert best.hero_id == 4
    assert best.games == 20
