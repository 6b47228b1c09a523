"""Shared protocol for rating strategies."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from domain.ratings.common import RatingBreakdown, RawMatch, ValidationResult


@runtime_checkable
class RatingCalculator(Protocol):
    """Contract every rating strategy satisfies: full history in, breakdown out.

    ``validate`` exposes the match filter ``calculate`` applies, so callers can
    derive statistics from exactly the matches that were rated.
    """

    algorithm: str

    def validate(self, matches: Iterable[RawMatch]) -> ValidationResult: ...

    def calculate(self, matches: Sequence[RawMatch]) -> RatingBreakdown: ...


__all__ = ["RatingCalculator"]
