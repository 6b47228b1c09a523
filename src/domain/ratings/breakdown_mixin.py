"""Shared helpers for strategies that assemble a RatingBreakdown."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from domain.ratings.common import RatingBreakdown, RawMatch, ValidationResult
from domain.ratings.estimators import average_kda, hero_normalized_kda
from domain.ratings.tiers import DEFAULT_TIER_TABLE, TierThresholdTable
from domain.ratings.validation import validate_matches


class BreakdownMixin:
    """Mixin providing raw win rate and breakdown assembly.

    Subclasses set ``algorithm`` and ``params`` (with ``min_duration_seconds``
    and ``max_leaver_status``) and may override ``tier_table``.
    """

    algorithm: str
    params: Any
    tier_table: TierThresholdTable = DEFAULT_TIER_TABLE

    def validate(self, matches: Iterable[RawMatch]) -> ValidationResult:
        """Apply this strategy's match filter."""
        return validate_matches(
            matches,
            min_duration_seconds=self.params.min_duration_seconds,
            max_leaver_status=self.params.max_leaver_status,
        )

    @staticmethod
    def _raw_win_rate(validation: ValidationResult) -> float:
        if validation.games == 0:
            return 0.5
        return validation.wins / validation.games

    def _build_breakdown(
        self,
        validation: ValidationResult,
        *,
        adjusted_win_rate: float,
        weighted_wins: float,
        average_rank: float,
        maturity_penalty: float,
        recency_multiplier: float,
        difficulty_multiplier: float,
        rating: int,
        provisional: bool,
    ) -> RatingBreakdown:
        wins = validation.wins
        return RatingBreakdown(
            algorithm=self.algorithm,
            games=validation.games,
            wins=wins,
            losses=validation.games - wins,
            raw_win_rate=self._raw_win_rate(validation),
            adjusted_win_rate=adjusted_win_rate,
            weighted_wins=weighted_wins,
            average_rank=average_rank,
            average_kda=average_kda(validation.matches),
            hero_normalized_kda=hero_normalized_kda(validation.matches),
            maturity_penalty=maturity_penalty,
            recency_multiplier=recency_multiplier,
            difficulty_multiplier=difficulty_multiplier,
            rating=rating,
            provisional=provisional,
            tier=self.tier_table.classify(rating).key,
            total_matches=validation.original_count,
        )
