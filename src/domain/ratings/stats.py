"""Leaderboard statistics derived from validated matches."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from domain.ratings.common import ValidatedMatch

PRO_RANK_THRESHOLD = 60
MIN_BEST_HERO_GAMES = 10


@dataclass(frozen=True)
class RankingStats:
    """Secondary leaderboard metrics; win rates are percentages."""

    winrate: float
    avg_kda: float
    kda_variance: float
    pro_games: int
    pro_winrate: float
    pro_kda: float
    streak: int


@dataclass(frozen=True)
class HeroStat:
    hero_id: int
    games: int
    wins: int
    winrate: float
    avg_kda: float


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def _variance(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    mean = _mean(values)
    return sum((value - mean) ** 2 for value in values) / len(values)


def _current_streak(matches: Sequence[ValidatedMatch]) -> int:
    """Signed length of the latest run: +3 is three wins in a row, -2 two losses."""
    streak = 0
    for match in matches:
        if match.won:
            streak = streak + 1 if streak > 0 else 1
        else:
            streak = streak - 1 if streak < 0 else -1
    return streak


def calculate_ranking_stats(
    matches: Sequence[ValidatedMatch],
    *,
    pro_rank_threshold: int = PRO_RANK_THRESHOLD,
) -> RankingStats:
    """Overall and high-lobby statistics; ``matches`` are in chronological order."""
    if not matches:
        return RankingStats(
            winrate=0.0,
            avg_kda=0.0,
            kda_variance=0.0,
            pro_games=0,
            pro_winrate=0.0,
            pro_kda=0.0,
            streak=0,
        )

    kdas = [match.kda for match in matches]
    wins = sum(1 for match in matches if match.won)

    pro_matches = [
        match
        for match in matches
        if match.average_rank is not None and match.average_rank >= pro_rank_threshold
    ]
    pro_games = len(pro_matches)
    pro_winrate = 0.0
    pro_kda = 0.0
    if pro_games > 0:
        pro_wins = sum(1 for match in pro_matches if match.won)
        pro_winrate = pro_wins / pro_games * 100.0
        pro_kda = _mean([match.kda for match in pro_matches])

    return RankingStats(
        winrate=round(wins / len(matches) * 100.0, 2),
        avg_kda=round(_mean(kdas), 2),
        kda_variance=round(_variance(kdas), 2),
        pro_games=pro_games,
        pro_winrate=round(pro_winrate, 2),
        pro_kda=round(pro_kda, 2),
        streak=_current_streak(matches),
    )


def calculate_hero_stats(
    matches: Sequence[ValidatedMatch],
    *,
    min_games: int = 1,
) -> list[HeroStat]:
    """Per-hero totals, most played first (ties by hero id)."""
    grouped: dict[int, list[ValidatedMatch]] = {}
    for match in matches:
        if not match.hero_id:
            continue
        grouped.setdefault(match.hero_id, []).append(match)

    stats: list[HeroStat] = []
    for hero_id, hero_matches in grouped.items():
        games = len(hero_matches)
        if games < min_games:
            continue
        wins = sum(1 for match in hero_matches if match.won)
        stats.append(
            HeroStat(
                hero_id=hero_id,
                games=games,
                wins=wins,
                winrate=round(wins / games * 100.0, 2),
                avg_kda=round(_mean([match.kda for match in hero_matches]), 2),
            )
        )

    stats.sort(key=lambda stat: (-stat.games, stat.hero_id))
    return stats


def best_hero(
    matches: Sequence[ValidatedMatch],
    *,
    min_games: int = MIN_BEST_HERO_GAMES,
) -> HeroStat | None:
    """Highest win-rate hero with enough games; near-equal win rates prefer volume."""
    candidates = calculate_hero_stats(matches, min_games=min_games)
    if not candidates:
        return None

    best = candidates[0]
    for stat in candidates[1:]:
        if abs(stat.winrate - best.winrate) < 0.1:
            if stat.games > best.games:
                best = stat
        elif stat.winrate > best.winrate:
            best = stat
    return best


__all__ = [
    "HeroStat",
    "MIN_BEST_HERO_GAMES",
    "PRO_RANK_THRESHOLD",
    "RankingStats",
    "best_hero",
    "calculate_hero_stats",
    "calculate_ranking_stats",
]
