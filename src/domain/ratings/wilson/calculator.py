"""Wilson win rate scaled by a linear lobby-rank modifier."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from domain.ratings.breakdown_mixin import BreakdownMixin
from domain.ratings.common import RatingBreakdown, RawMatch
from domain.ratings.estimators import average_rank, clamp, wilson_lower_bound
from domain.ratings.tiers import DEFAULT_TIER_TABLE, TierThresholdTable


@dataclass(frozen=True)
class WilsonParameters:
    base_rating: float = 3500.0
    min_rating: float = 500.0
    max_rating: float = 7000.0
    skill_scale: float = 4000.0
    wilson_z: float = 1.65
    difficulty_floor: float = 0.7
    difficulty_span: float = 1.0
    max_rank: float = 80.0
    default_average_rank: float = 50.0
    calibration_games: int = 30
    min_duration_seconds: int = 480
    max_leaver_status: int = 1


def calculate_difficulty_mod(avg_rank: float, params: WilsonParameters) -> float:
    """``floor + rank/max_rank * span``; rank 50 of 80 gives 1.325 with defaults."""
    bounded_rank = clamp(avg_rank, 0.0, params.max_rank)
    return params.difficulty_floor + (bounded_rank / params.max_rank) * params.difficulty_span


class WilsonCalculator(BreakdownMixin):
    """Unweighted Wilson win rate times lobby difficulty, no maturity or recency terms."""

    algorithm = "wilson"

    def __init__(
        self,
        params: WilsonParameters,
        *,
        tier_table: TierThresholdTable = DEFAULT_TIER_TABLE,
    ) -> None:
        self.params = params
        self.tier_table = tier_table

    def calculate(self, matches: Sequence[RawMatch]) -> RatingBreakdown:
        validation = self.validate(matches)
        wins = validation.wins
        games = validation.games

        wilson_win_rate = wilson_lower_bound(wins, games, self.params.wilson_z)
        avg_rank = average_rank(validation.matches, default=self.params.default_average_rank)
        difficulty_mod = calculate_difficulty_mod(avg_rank, self.params)

        provisional = games < self.params.calibration_games
        if provisional:
            rating = int(round(self.params.base_rating))
        else:
            raw_rating = self.params.base_rating + (
                (wilson_win_rate - 0.5) * self.params.skill_scale * difficulty_mod
            )
            rating = int(
                round(clamp(raw_rating, self.params.min_rating, self.params.max_rating))
            )

        return self._build_breakdown(
            validation,
            adjusted_win_rate=wilson_win_rate,
            weighted_wins=float(wins),
            average_rank=avg_rank,
            maturity_penalty=0.0,
            recency_multiplier=1.0,
            difficulty_multiplier=difficulty_mod,
            rating=rating,
            provisional=provisional,
        )
