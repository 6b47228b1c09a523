"""Player evaluation and batch recalculation over a rating strategy."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from domain.ratings.common import RatingBreakdown, RawMatch
from domain.ratings.config_base import BaseSystemConfig
from domain.ratings.protocol import RatingCalculator
from domain.ratings.stats import (
    HeroStat,
    RankingStats,
    best_hero,
    calculate_hero_stats,
    calculate_ranking_stats,
)

if TYPE_CHECKING:
    from repositories.player_repository import PlayerRepository

logger = logging.getLogger(__name__)

FetchMatchesFn = Callable[[int], Sequence[RawMatch] | None]


@dataclass(frozen=True)
class PlayerEvaluation:
    """Rating breakdown plus the leaderboard statistics stored alongside it."""

    breakdown: RatingBreakdown
    ranking_stats: RankingStats
    hero_stats: tuple[HeroStat, ...]
    best_hero: HeroStat | None


@dataclass(frozen=True)
class RecalculationSummary:
    """Outcome for one recalculation run."""

    algorithm: str
    system_name: str
    config_file: str
    system_id: int
    processed_players: int
    updated_players: int
    skipped_players: int
    dry_run: bool


def evaluate_player(matches: Sequence[RawMatch], calculator: RatingCalculator) -> PlayerEvaluation:
    """Rate one match history and derive its leaderboard statistics."""
    validation = calculator.validate(matches)
    return PlayerEvaluation(
        breakdown=calculator.calculate(matches),
        ranking_stats=calculate_ranking_stats(validation.matches),
        hero_stats=tuple(calculate_hero_stats(validation.matches)),
        best_hero=best_hero(validation.matches),
    )


def rate_players(
    histories: Mapping[int, Sequence[RawMatch]],
    calculator: RatingCalculator,
) -> dict[int, PlayerEvaluation]:
    """Evaluate many independent histories, keyed and ordered by account id."""
    return {
        account_id: evaluate_player(histories[account_id], calculator)
        for account_id in sorted(histories)
    }


def recalculate_players(
    *,
    session_factory,
    repository: PlayerRepository,
    fetch_matches: FetchMatchesFn,
    calculator: RatingCalculator,
    system_config: BaseSystemConfig,
    now: datetime | None = None,
    dry_run: bool = False,
    echo: Callable[[str], None] | None = None,
) -> RecalculationSummary:
    """Re-fetch and recompute every stored player, bypassing the update cooldown.

    ``fetch_matches`` returns ``None`` or an empty sequence when a history is
    unavailable; those players are skipped and keep their stored rating.
    """
    now = now or datetime.now(UTC).replace(tzinfo=None)
    updated_players = 0
    skipped_players = 0

    with session_factory() as session:
        system = repository.upsert_system(
            session,
            name=system_config.name,
            algorithm=calculator.algorithm,
            description=system_config.description,
            config_json=system_config.as_config_json(),
        )
        system_id = int(system.id)
        account_ids = repository.list_account_ids(session)

        try:
            for index, account_id in enumerate(account_ids, start=1):
                matches = fetch_matches(account_id)
                if not matches:
                    skipped_players += 1
                    logger.info("account_id=%s skipped: no matches", account_id)
                    continue

                evaluation = evaluate_player(matches, calculator)
                repository.save_evaluation(
                    session,
                    account_id=account_id,
                    evaluation=evaluation,
                    system_id=system_id,
                    now=now,
                    force=True,
                )
                updated_players += 1
                logger.info(
                    "account_id=%s rating=%s tier=%s provisional=%s",
                    account_id,
                    evaluation.breakdown.rating,
                    evaluation.breakdown.tier,
                    evaluation.breakdown.provisional,
                )
                if echo is not None:
                    echo(
                        f"[{index}/{len(account_ids)}] account_id={account_id} "
                        f"rating={evaluation.breakdown.rating} "
                        f"tier={evaluation.breakdown.tier} "
                        f"games={evaluation.breakdown.games}"
                    )

            if dry_run:
                session.rollback()
            else:
                session.commit()
        except Exception:
            session.rollback()
            raise

    if echo is not None:
        echo(
            f"{'[dry-run] ' if dry_run else ''}completed "
            f"config={system_config.file_path.name} "
            f"algorithm={calculator.algorithm} "
            f"system={system_config.name} "
            f"system_id={system_id} "
            f"processed_players={len(account_ids)} "
            f"updated_players={updated_players} "
            f"skipped_players={skipped_players}"
        )

    return RecalculationSummary(
        algorithm=calculator.algorithm,
        system_name=system_config.name,
        config_file=system_config.file_path.name,
        system_id=system_id,
        processed_players=len(account_ids),
        updated_players=updated_players,
        skipped_players=skipped_players,
        dry_run=dry_run,
    )


__all__ = [
    "PlayerEvaluation",
    "RecalculationSummary",
    "evaluate_player",
    "rate_players",
    "recalculate_players",
]
