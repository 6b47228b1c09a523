"""Shared types for rating strategies."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any

KDA_ASSIST_WEIGHT = 0.7


def match_kda(kills: int, deaths: int, assists: int) -> float:
    """Assist-weighted KDA with deaths floored at one."""
    return (kills + assists * KDA_ASSIST_WEIGHT) / max(1, deaths)


@dataclass(frozen=True)
class RawMatch:
    """One participation record as supplied by the match-history provider."""

    match_id: int
    player_slot: int
    radiant_win: bool
    duration: int
    hero_id: int
    start_time: int
    kills: int | None = None
    deaths: int | None = None
    assists: int | None = None
    average_rank: int | None = None
    leaver_status: int | None = None
    party_size: int | None = None


@dataclass(frozen=True)
class ValidatedMatch:
    """Canonical match payload consumed by rating calculators."""

    match_id: int
    hero_id: int
    won: bool
    duration: int
    start_time: int
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    average_rank: int | None = None
    party_size: int = 1

    @property
    def event_time(self) -> datetime:
        return datetime.fromtimestamp(self.start_time, UTC).replace(tzinfo=None)

    @property
    def kda(self) -> float:
        return match_kda(self.kills, self.deaths, self.assists)

    @property
    def is_solo(self) -> bool:
        return self.party_size <= 1


@dataclass(frozen=True)
class ValidationResult:
    """Validated matches plus discard diagnostics."""

    matches: tuple[ValidatedMatch, ...]
    original_count: int
    discarded_short: int = 0
    discarded_leaver: int = 0

    @property
    def games(self) -> int:
        return len(self.matches)

    @property
    def wins(self) -> int:
        return sum(1 for match in self.matches if match.won)

    @property
    def losses(self) -> int:
        return self.games - self.wins


@dataclass(frozen=True)
class RatingBreakdown:
    """Every intermediate value behind one player's rating."""

    algorithm: str
    games: int
    wins: int
    losses: int
    raw_win_rate: float
    adjusted_win_rate: float
    weighted_wins: float
    average_rank: float
    average_kda: float
    hero_normalized_kda: float
    maturity_penalty: float
    recency_multiplier: float
    difficulty_multiplier: float
    rating: int
    provisional: bool
    tier: str
    total_matches: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = [
    "KDA_ASSIST_WEIGHT",
    "RatingBreakdown",
    "RawMatch",
    "ValidatedMatch",
    "ValidationResult",
    "match_kda",
]
