"""Raw match parsing and validity filtering."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from domain.ratings.common import RawMatch, ValidatedMatch, ValidationResult

logger = logging.getLogger(__name__)

MIN_DURATION_SECONDS = 480
MAX_LEAVER_STATUS = 1
RADIANT_SLOT_LIMIT = 128
# 9999-12-31T23:59:59Z, the last second a naive datetime can hold
MAX_START_TIME = 253_402_300_799


def _as_int(value: Any, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _as_optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _as_timestamp(value: Any) -> int:
    """Unix seconds, or 0 when outside the range a datetime can represent."""
    timestamp = _as_int(value)
    if not 0 <= timestamp <= MAX_START_TIME:
        return 0
    return timestamp


def parse_raw_match(payload: Mapping[str, Any]) -> RawMatch:
    """Build a RawMatch from a provider payload, defaulting malformed fields."""
    return RawMatch(
        match_id=_as_int(payload.get("match_id")),
        player_slot=_as_int(payload.get("player_slot")),
        radiant_win=bool(payload.get("radiant_win", False)),
        duration=_as_int(payload.get("duration")),
        hero_id=_as_int(payload.get("hero_id")),
        start_time=_as_int(payload.get("start_time")),
        kills=_as_int(payload.get("kills")),
        deaths=_as_int(payload.get("deaths")),
        assists=_as_int(payload.get("assists")),
        average_rank=_as_optional_int(payload.get("average_rank")),
        leaver_status=_as_optional_int(payload.get("leaver_status")),
        party_size=_as_optional_int(payload.get("party_size")),
    )


def infer_win(player_slot: int, radiant_win: bool) -> bool:
    """Slots below 128 are on the Radiant side."""
    is_radiant = player_slot < RADIANT_SLOT_LIMIT
    return is_radiant == bool(radiant_win)


def is_valid_match(
    match: RawMatch,
    *,
    min_duration_seconds: int = MIN_DURATION_SECONDS,
    max_leaver_status: int = MAX_LEAVER_STATUS,
) -> bool:
    if _as_int(match.duration) < min_duration_seconds:
        return False
    leaver_status = _as_optional_int(match.leaver_status)
    if leaver_status is not None and leaver_status > max_leaver_status:
        return False
    return True


def to_validated_match(match: RawMatch) -> ValidatedMatch:
    average_rank = _as_optional_int(match.average_rank)
    party_size = _as_optional_int(match.party_size)
    return ValidatedMatch(
        match_id=_as_int(match.match_id),
        hero_id=_as_int(match.hero_id),
        won=infer_win(_as_int(match.player_slot), match.radiant_win),
        duration=_as_int(match.duration),
        start_time=_as_timestamp(match.start_time),
        kills=max(0, _as_int(match.kills)),
        deaths=max(0, _as_int(match.deaths)),
        assists=max(0, _as_int(match.assists)),
        average_rank=average_rank if average_rank is not None and average_rank > 0 else None,
        party_size=party_size if party_size is not None and party_size >= 1 else 1,
    )


def validate_matches(
    matches: Iterable[RawMatch],
    *,
    min_duration_seconds: int = MIN_DURATION_SECONDS,
    max_leaver_status: int = MAX_LEAVER_STATUS,
) -> ValidationResult:
    """Drop remade and abandoned games and derive the win flag.

    The surviving matches are sorted by ``(start_time, match_id)`` so that
    every downstream aggregate is independent of the provider's ordering.
    """
    original_count = 0
    discarded_short = 0
    discarded_leaver = 0
    validated: list[ValidatedMatch] = []

    for match in matches:
        original_count += 1
        if _as_int(match.duration) < min_duration_seconds:
            discarded_short += 1
            continue
        if not is_valid_match(
            match,
            min_duration_seconds=min_duration_seconds,
            max_leaver_status=max_leaver_status,
        ):
            discarded_leaver += 1
            continue
        validated.append(to_validated_match(match))

    validated.sort(key=lambda item: (item.start_time, item.match_id))
    if discarded_short or discarded_leaver:
        logger.debug(
            "validated=%d original=%d discarded_short=%d discarded_leaver=%d",
            len(validated),
            original_count,
            discarded_short,
            discarded_leaver,
        )

    return ValidationResult(
        matches=tuple(validated),
        original_count=original_count,
        discarded_short=discarded_short,
        discarded_leaver=discarded_leaver,
    )


__all__ = [
    "MAX_LEAVER_STATUS",
    "MAX_START_TIME",
    "MIN_DURATION_SECONDS",
    "infer_win",
    "is_valid_match",
    "parse_raw_match",
    "to_validated_match",
    "validate_matches",
]
