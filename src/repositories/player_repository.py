"""Persistence for player ratings and rating-system metadata."""

from __future__ import annotations

from dataclasses import asdict
from datetime import UTC, datetime, timedelta
from math import ceil
from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from domain.pipeline import PlayerEvaluation
from models.player import Player
from models.rating_system import RatingSystem

UPDATE_COOLDOWN_DAYS = 7


class ProfileLockedError(RuntimeError):
    """Raised when a profile is saved again inside its update cooldown."""

    def __init__(self, account_id: int, remaining_days: int) -> None:
        super().__init__(
            f"account_id={account_id} is locked for another {remaining_days} day(s)"
        )
        self.account_id = account_id
        self.remaining_days = remaining_days


def _utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class PlayerRepository:
    """Reusable persistence operations for stored player ratings."""

    def __init__(self, *, cooldown_days: int = UPDATE_COOLDOWN_DAYS) -> None:
        if cooldown_days < 0:
            raise ValueError("cooldown_days must be >= 0")
        self.cooldown_days = cooldown_days

    def ensure_schema(self, engine: Engine) -> None:
        """Create required tables and indexes when missing."""
        with engine.begin() as connection:
            RatingSystem.__table__.create(bind=connection, checkfirst=True)
            Player.__table__.create(bind=connection, checkfirst=True)

    def upsert_system(
        self,
        session: Session,
        *,
        name: str,
        algorithm: str,
        description: str | None,
        config_json: dict[str, Any],
    ) -> RatingSystem:
        """Create or update the system metadata row."""
        system = session.execute(
            select(RatingSystem).where(RatingSystem.name == name)
        ).scalar_one_or_none()
        if system is None:
            system = RatingSystem(
                name=name,
                algorithm=algorithm,
                description=description,
                config_json=config_json,
            )
            session.add(system)
        else:
            system.algorithm = algorithm
            system.description = description
            system.config_json = config_json
            system.updated_at = _utcnow()
        session.flush()
        return system

    def get_player(self, session: Session, account_id: int) -> Player | None:
        return session.execute(
            select(Player).where(Player.account_id == account_id)
        ).scalar_one_or_none()

    def list_account_ids(self, session: Session) -> list[int]:
        return list(session.scalars(select(Player.account_id).order_by(Player.account_id)))

    def remaining_lock_days(self, player: Player | None, *, now: datetime | None = None) -> int:
        """Whole days left before ``player`` may be recomputed; 0 when unlocked."""
        if player is None or self.cooldown_days == 0:
            return 0
        now = now or _utcnow()
        unlock_time = player.last_update + timedelta(days=self.cooldown_days)
        remaining_seconds = (unlock_time - now).total_seconds()
        if remaining_seconds <= 0:
            return 0
        return int(ceil(remaining_seconds / 86_400.0))

    def save_evaluation(
        self,
        session: Session,
        *,
        account_id: int,
        evaluation: PlayerEvaluation,
        system_id: int | None = None,
        name: str | None = None,
        avatar: str | None = None,
        now: datetime | None = None,
        force: bool = False,
    ) -> Player:
        """Insert or update the player's stored rating.

        Raises ProfileLockedError inside the cooldown window unless ``force``.
        """
        now = now or _utcnow()
        player = self.get_player(session, account_id)
        if not force:
            remaining_days = self.remaining_lock_days(player, now=now)
            if remaining_days > 0:
                raise ProfileLockedError(account_id, remaining_days)

        if player is None:
            player = Player(account_id=account_id, name=name or "", avatar=avatar or "")
            session.add(player)
        else:
            if name is not None:
                player.name = name
            if avatar is not None:
                player.avatar = avatar
            player.updated_at = now

        breakdown = evaluation.breakdown
        player.rating_system_id = system_id
        player.rating = breakdown.rating
        player.tier = breakdown.tier
        player.provisional = breakdown.provisional
        player.wins = breakdown.wins
        player.losses = breakdown.losses
        player.games = breakdown.games
        player.breakdown_json = breakdown.as_dict()

        stats = evaluation.ranking_stats
        player.winrate = stats.winrate
        player.avg_kda = stats.avg_kda
        player.kda_variance = stats.kda_variance
        player.pro_games = stats.pro_games
        player.pro_winrate = stats.pro_winrate
        player.pro_kda = stats.pro_kda
        player.streak = stats.streak

        best = evaluation.best_hero
        player.best_hero_id = best.hero_id if best is not None else 0
        player.best_hero_games = best.games if best is not None else 0
        player.best_hero_winrate = best.winrate if best is not None else 0.0
        player.hero_stats_json = [asdict(stat) for stat in evaluation.hero_stats]

        player.last_update = now
        session.flush()
        return player

    def top_players(
        self,
        session: Session,
        *,
        system_id: int | None = None,
        limit: int = 100,
        include_provisional: bool = False,
    ) -> list[Player]:
        """Highest ratings first; ties favour more games, then lower account id."""
        if limit <= 0:
            raise ValueError("limit must be greater than 0")
        statement = select(Player)
        if system_id is not None:
            statement = statement.where(Player.rating_system_id == system_id)
        if not include_provisional:
            statement = statement.where(Player.provisional.is_(False))
        statement = statement.order_by(
            Player.rating.desc(),
            Player.games.desc(),
            Player.account_id.asc(),
        ).limit(limit)
        return list(session.scalars(statement))


__all__ = ["PlayerRepository", "ProfileLockedError", "UPDATE_COOLDOWN_DAYS"]
