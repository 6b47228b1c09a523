"""Database repository helpers."""

from repositories.player_repository import (
    UPDATE_COOLDOWN_DAYS,
    PlayerRepository,
    ProfileLockedError,
)

__all__ = ["PlayerRepository", "ProfileLockedError", "UPDATE_COOLDOWN_DAYS"]
