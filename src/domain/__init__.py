"""TMMR domain modules."""

from domain.ratings.common import RatingBreakdown, RawMatch
from domain.ratings.protocol import RatingCalculator

__all__ = ["RatingBreakdown", "RatingCalculator", "RawMatch"]
