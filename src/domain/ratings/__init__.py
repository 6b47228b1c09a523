"""Rating-strategy domain modules."""

from domain.ratings.common import (
    RatingBreakdown,
    RawMatch,
    ValidatedMatch,
    ValidationResult,
)
from domain.ratings.protocol import RatingCalculator
from domain.ratings.tiers import TierLabel, classify_tier

__all__ = [
    "RatingBreakdown",
    "RatingCalculator",
    "RawMatch",
    "TierLabel",
    "ValidatedMatch",
    "ValidationResult",
    "classify_tier",
]
