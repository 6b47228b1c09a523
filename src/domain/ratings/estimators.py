"""Statistical building blocks shared by the rating strategies."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from math import sqrt

from domain.ratings.common import ValidatedMatch
from domain.ratings.hero_roles import normalize_kda

SECONDS_PER_DAY = 86_400.0


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


def wilson_lower_bound(wins: float, total: float, z: float) -> float:
    """Lower bound of the Wilson score interval for ``wins / total``.

    ``total`` may be a weighted quantity. With no games the neutral prior
    0.5 is returned.
    """
    if wins < 0.0 or total < 0.0:
        raise ValueError(f"wins and total must be >= 0 (wins={wins}, total={total})")
    if total <= 0.0:
        return 0.5
    if wins > total * (1.0 + 1e-12):
        raise ValueError(f"wins={wins} cannot exceed total={total}")

    phat = min(wins / total, 1.0)
    z_squared = z * z
    center = phat + z_squared / (2.0 * total)
    spread = z * sqrt((phat * (1.0 - phat) + z_squared / (4.0 * total)) / total)
    lower_bound = (center - spread) / (1.0 + z_squared / total)
    return clamp(lower_bound, 0.0, phat)


def difficulty_multiplier(
    rank: float | None,
    *,
    center: float = 50.0,
    growth_base: float = 1.02,
    rank_floor: float = 10.0,
    rank_ceiling: float = 85.0,
) -> float:
    """Per-win multiplier for the lobby's average rank; neutral without data."""
    if rank is None:
        return 1.0
    bounded_rank = clamp(float(rank), rank_floor, rank_ceiling)
    return growth_base ** (bounded_rank - center)


def weighted_win_total(
    matches: Sequence[ValidatedMatch],
    *,
    center: float = 50.0,
    growth_base: float = 1.02,
    rank_floor: float = 10.0,
    rank_ceiling: float = 85.0,
    solo_win_weight: float = 1.0,
    party_win_weight: float = 1.0,
) -> float:
    """Sum of difficulty multipliers over won matches; losses are not scaled.

    Each win is further scaled by ``solo_win_weight`` or ``party_win_weight``
    depending on whether it was queued alone.
    """
    return sum(
        difficulty_multiplier(
            match.average_rank,
            center=center,
            growth_base=growth_base,
            rank_floor=rank_floor,
            rank_ceiling=rank_ceiling,
        )
        * (solo_win_weight if match.is_solo else party_win_weight)
        for match in matches
        if match.won
    )


def recency_weight(age_days: float, half_life_days: float = 180.0) -> float:
    if half_life_days <= 0.0:
        return 1.0
    return 0.5 ** (max(age_days, 0.0) / half_life_days)


def mean_recency_weight(
    matches: Sequence[ValidatedMatch],
    *,
    as_of_time: datetime,
    half_life_days: float = 180.0,
) -> float:
    if not matches:
        return 1.0
    total_weight = 0.0
    for match in matches:
        age_days = (as_of_time - match.event_time).total_seconds() / SECONDS_PER_DAY
        total_weight += recency_weight(age_days, half_life_days)
    return total_weight / len(matches)


def recency_multiplier(mean_weight: float, min_multiplier: float = 0.0) -> float:
    """Blend the mean decay weight toward one; ``min_multiplier`` is the floor."""
    return min_multiplier + ((1.0 - min_multiplier) * clamp(mean_weight, 0.0, 1.0))


def maturity_penalty(games: int, *, threshold: int = 200, max_penalty: float = 300.0) -> float:
    """Linear rating penalty that vanishes once ``games`` reaches ``threshold``."""
    if games < 0:
        raise ValueError(f"games must be >= 0, got {games}")
    if threshold <= 0:
        return 0.0
    return max(0.0, (threshold - games) / threshold * max_penalty)


def average_rank(matches: Sequence[ValidatedMatch], default: float = 50.0) -> float:
    ranks = [match.average_rank for match in matches if match.average_rank is not None]
    if not ranks:
        return default
    return sum(ranks) / len(ranks)


def average_kda(matches: Sequence[ValidatedMatch], default: float = 0.0) -> float:
    if not matches:
        return default
    return sum(match.kda for match in matches) / len(matches)


def hero_normalized_kda(matches: Sequence[ValidatedMatch]) -> float:
    """Mean KDA relative to each hero's role baseline; 1.0 is role-average."""
    if not matches:
        return 1.0
    return sum(normalize_kda(match.kda, match.hero_id) for match in matches) / len(matches)


__all__ = [
    "average_kda",
    "average_rank",
    "clamp",
    "difficulty_multiplier",
    "hero_normalized_kda",
    "maturity_penalty",
    "mean_recency_weight",
    "recency_multiplier",
    "recency_weight",
    "weighted_win_total",
    "wilson_lower_bound",
]
