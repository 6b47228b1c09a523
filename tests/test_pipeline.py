"""Tests for player evaluation and the recalculation job."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from db import create_db_engine, create_session_factory
from domain.pipeline import evaluate_player, rate_players, recalculate_players
from domain.ratings.common import RawMatch
from domain.ratings.tmmr import TmmrCalculator, TmmrParameters, TmmrSystemConfig
from repositories.player_repository import PlayerRepository

AS_OF = datetime(2025, 1, 1)
AS_OF_TS = 1_735_689_600


def _history(games: int, wins: int, *, hero_id: int = 1) -> list[RawMatch]:
    return [
        RawMatch(
            match_id=index + 1,
            player_slot=0,
            radiant_win=index < wins,
            duration=1500,
            hero_id=hero_id,
            start_time=AS_OF_TS - (games - index) * 600,
            kills=8,
            deaths=2,
            assists=0,
            average_rank=50,
        )
        for index in range(games)
    ]


def _calculator() -> TmmrCalculator:
    return TmmrCalculator(TmmrParameters(), as_of_time=AS_OF)


def _system_config() -> TmmrSystemConfig:
    return TmmrSystemConfig(
        name="tmmr_test",
        description="test system",
        file_path=Path("default.toml"),
        parameters=TmmrParameters(),
    )


def test_evaluate_player_combines_breakdown_and_stats() -> None:
    matches = _history(40, 30) + [
        RawMatch(
            match_id=999,
            player_slot=0,
            radiant_win=True,
            duration=100,
            hero_id=1,
            start_time=AS_OF_TS,
        )
    ]

    evaluation = evaluate_player(matches, _calculator())

    assert evaluation.breakdown.games == 40
    assert evaluation.breakdown.total_matches == 41
    assert evaluation.ranking_stats.winrate == pytest.approx(75.0)
    assert len(evaluation.hero_stats) == 1
    assert evaluation.best_hero is not None
    assert evaluation.best_hero.hero_id == 1


def test_rate_players_is_keyed_by_sorted_account_id() -> None:
    calculator = _calculator()
    histories = {30: _history(40, 10), 10: _history(40, 30), 20: []}

    results = rate_players(histories, calculator)

    assert list(results) == [10, 20, 30]
    assert results[20].breakdown.provisional is True
    assert results[10].breakdown.rating > results[30].breakdown.rating
    assert results[10] == evaluate_player(histories[10], calculator)


def _seeded_session_factory():
    engine = create_db_engine("sqlite:///:memory:")
    repository = PlayerRepository()
    repository.ensure_schema(engine)
    session_factory = create_session_factory(engine)
    seed = evaluate_player(_history(40, 20), _calculator())
    with session_factory() as session:
        for account_id in (101, 102, 103):
            repository.save_evaluation(
                session,
                account_id=account_id,
                evaluation=seed,
                now=AS_OF - timedelta(days=1),
            )
        session.commit()
    return session_factory, repository


def test_recalculate_players_updates_and_skips() -> None:
    session_factory, repository = _seeded_session_factory()
    histories = {101: _history(60, 50), 102: None, 103: _history(60, 10)}
    lines: list[str] = []

    summary = recalculate_players(
        session_factory=session_factory,
        repository=repository,
        fetch_matches=histories.get,
        calculator=_calculator(),
        system_config=_system_config(),
        now=AS_OF,
        echo=lines.append,
    )

    assert summary.processed_players == 3
    assert summary.updated_players == 2
    assert summary.skipped_players == 1
    assert summary.system_name == "tmmr_test"
    assert lines[-1].startswith("completed")

    with session_factory() as session:
        improved = repository.get_player(session, 101)
        untouched = repository.get_player(session, 102)
        assert improved.games == 60
        assert improved.rating_system_id == summary.system_id
        assert improved.last_update == AS_OF
        assert untouched.games == 40
        assert untouched.rating_system_id is None


def test_recalculate_players_dry_run_writes_nothing() -> None:
    session_factory, repository = _seeded_session_factory()

    summary = recalculate_players(
        session_factory=session_factory,
        repository=repository,
        fetch_matches=lambda account_id: _history(60, 50),
        calculator=_calculator(),
        system_config=_system_config(),
        now=AS_OF,
        dry_run=True,
    )

    assert summary.dry_run is True
    assert summary.updated_players == 3
    with session_factory() as session:
        assert repository.get_player(session, 101).games == 40


def test_evaluate_player_stats_follow_calculator_match_filter() -> None:
    lenient = TmmrCalculator(TmmrParameters(min_duration_seconds=300), as_of_time=AS_OF)
    short_games = [replace(match, duration=400) for match in _history(40, 30)]

    strict_evaluation = evaluate_player(short_games, _calculator())
    lenient_evaluation = evaluate_player(short_games, lenient)

    assert strict_evaluation.breakdown.games == 0
    assert strict_evaluation.ranking_stats.winrate == 0.0
    assert lenient_evaluation.breakdown.games == 40
    assert lenient_evaluation.ranking_stats.winrate == pytest.approx(75.0)
    assert lenient.validate(short_games).games == 40
