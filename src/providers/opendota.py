"""OpenDota HTTP client for player profiles and Turbo match histories."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from domain.ratings.common import RawMatch
from domain.ratings.validation import parse_raw_match

logger = logging.getLogger(__name__)

OPENDOTA_API_URL = "https://api.opendota.com/api"
GAME_MODE_TURBO = 23
STEAM_ID64_OFFSET = 76561197960265728
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class PlayerProfile:
    account_id: int
    name: str
    avatar: str
    steam_id: str | None = None


def steam_id64_to_32(steam_id: str | int) -> int:
    """Convert a 64-bit Steam id to the 32-bit account id OpenDota expects.

    Values shorter than 12 digits are already account ids and pass through.
    """
    text = str(steam_id).strip()
    if not text.isdigit():
        raise ValueError(f"Steam id must be numeric, got {steam_id!r}")
    if len(text) < 12:
        return int(text)
    return int(text) - STEAM_ID64_OFFSET


class OpenDotaClient:
    """Thin wrapper over the public OpenDota API.

    HTTP failures propagate as ``requests`` exceptions.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        base_url: str = OPENDOTA_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("GET %s params=%s", url, params)
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_player_profile(self, account_id: int) -> PlayerProfile | None:
        """Profile for ``account_id``; None when the account is unknown or private."""
        payload = self._get_json(f"players/{account_id}")
        profile = payload.get("profile") if isinstance(payload, dict) else None
        if not profile:
            logger.info("account_id=%s has no public profile", account_id)
            return None
        return PlayerProfile(
            account_id=int(profile.get("account_id") or account_id),
            name=str(profile.get("personaname") or ""),
            avatar=str(profile.get("avatarfull") or ""),
            steam_id=profile.get("steamid"),
        )

    def get_turbo_matches(self, account_id: int) -> list[RawMatch]:
        """Full Turbo match history, including non-significant matches."""
        payload = self._get_json(
            f"players/{account_id}/matches",
            params={"game_mode": GAME_MODE_TURBO, "significant": 0},
        )
        if not isinstance(payload, list):
            logger.warning(
                "account_id=%s unexpected matches payload type=%s",
                account_id,
                type(payload).__name__,
            )
            return []
        matches = [parse_raw_match(item) for item in payload if isinstance(item, dict)]
        logger.info("account_id=%s fetched turbo_matches=%s", account_id, len(matches))
        return matches


__all__ = [
    "GAME_MODE_TURBO",
    "OPENDOTA_API_URL",
    "OpenDotaClient",
    "PlayerProfile",
    "steam_id64_to_32",
]
