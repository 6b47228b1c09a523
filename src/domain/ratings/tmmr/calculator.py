"""TMMR composite rating: weighted wins, role-normalised KDA, lobby rank, maturity."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from domain.ratings.breakdown_mixin import BreakdownMixin
from domain.ratings.common import RatingBreakdown, RawMatch
from domain.ratings.estimators import (
    average_rank,
    clamp,
    hero_normalized_kda,
    maturity_penalty,
    mean_recency_weight,
    recency_multiplier,
    weighted_win_total,
    wilson_lower_bound,
)
from domain.ratings.tiers import DEFAULT_TIER_TABLE, TierThresholdTable


@dataclass(frozen=True)
class TmmrParameters:
    base_rating: float = 3500.0
    min_rating: float = 500.0
    max_rating: float = 9500.0
    performance_scale: float = 4000.0
    wilson_z: float = 1.0
    rank_center: float = 50.0
    rank_growth_base: float = 1.02
    rank_floor: float = 10.0
    rank_ceiling: float = 85.0
    default_average_rank: float = 50.0
    kda_weight: float = 300.0
    rank_weight: float = 300.0
    half_life_days: float = 180.0
    recency_min_multiplier: float = 0.7
    maturity_threshold: int = 200
    maturity_max_penalty: float = 300.0
    calibration_games: int = 30
    min_duration_seconds: int = 480
    max_leaver_status: int = 1
    solo_win_weight: float = 1.0
    party_win_weight: float = 1.0


class TmmrCalculator(BreakdownMixin):
    """Stateless full-history TMMR calculator.

    ``as_of_time`` anchors the recency decay and is fixed at construction, so
    calling :meth:`calculate` twice on the same matches gives identical output.
    """

    algorithm = "tmmr"

    def __init__(
        self,
        params: TmmrParameters,
        *,
        as_of_time: datetime | None = None,
        tier_table: TierThresholdTable = DEFAULT_TIER_TABLE,
    ) -> None:
        self.params = params
        self.as_of_time = as_of_time or datetime.now(UTC).replace(tzinfo=None)
        self.tier_table = tier_table

    def _difficulty_kwargs(self) -> dict[str, float]:
        return {
            "center": self.params.rank_center,
            "growth_base": self.params.rank_growth_base,
            "rank_floor": self.params.rank_floor,
            "rank_ceiling": self.params.rank_ceiling,
        }

    def _kda_points(self, normalized_kda: float) -> float:
        return clamp(normalized_kda - 1.0, -1.0, 1.0) * self.params.kda_weight

    def _rank_points(self, avg_rank: float) -> float:
        if self.params.rank_center <= 0.0:
            return 0.0
        deviation = (avg_rank - self.params.rank_center) / self.params.rank_center
        return clamp(deviation, -1.0, 1.0) * self.params.rank_weight

    def compose(
        self,
        *,
        adjusted_win_rate: float,
        normalized_kda: float,
        avg_rank: float,
        recency: float,
        penalty: float,
    ) -> int:
        """Combine the components into a clamped integer rating."""
        performance = (adjusted_win_rate - 0.5) * self.params.performance_scale
        deviation = performance + self._kda_points(normalized_kda) + self._rank_points(avg_rank)
        raw_rating = self.params.base_rating + (deviation * recency) - penalty
        return int(round(clamp(raw_rating, self.params.min_rating, self.params.max_rating)))

    def calculate(self, matches: Sequence[RawMatch]) -> RatingBreakdown:
        validation = self.validate(matches)
        validated = validation.matches
        wins = validation.wins
        losses = validation.losses

        weighted_wins = weighted_win_total(
            validated,
            solo_win_weight=self.params.solo_win_weight,
            party_win_weight=self.params.party_win_weight,
            **self._difficulty_kwargs(),
        )
        adjusted_win_rate = wilson_lower_bound(
            weighted_wins,
            weighted_wins + losses,
            self.params.wilson_z,
        )
        avg_rank = average_rank(validated, default=self.params.default_average_rank)
        normalized_kda = hero_normalized_kda(validated)
        recency = recency_multiplier(
            mean_recency_weight(
                validated,
                as_of_time=self.as_of_time,
                half_life_days=self.params.half_life_days,
            ),
            self.params.recency_min_multiplier,
        )
        penalty = maturity_penalty(
            validation.games,
            threshold=self.params.maturity_threshold,
            max_penalty=self.params.maturity_max_penalty,
        )
        difficulty = weighted_wins / wins if wins > 0 else 1.0

        provisional = validation.games < self.params.calibration_games
        if provisional:
            rating = int(round(self.params.base_rating))
        else:
            rating = self.compose(
                adjusted_win_rate=adjusted_win_rate,
                normalized_kda=normalized_kda,
                avg_rank=avg_rank,
                recency=recency,
                penalty=penalty,
            )

        return self._build_breakdown(
            validation,
            adjusted_win_rate=adjusted_win_rate,
            weighted_wins=weighted_wins,
            average_rank=avg_rank,
            maturity_penalty=penalty,
            recency_multiplier=recency,
            difficulty_multiplier=difficulty,
            rating=rating,
            provisional=provisional,
        )
