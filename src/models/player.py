"""players table model."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, JSONPayload
from models.mixins import TimestampMixin


class Player(TimestampMixin, Base):
    """Latest stored rating for one account."""

    __tablename__ = "players"
    __table_args__ = (
        CheckConstraint("wins + losses = games", name="ck_players_games"),
        CheckConstraint("games >= 0", name="ck_players_games_non_negative"),
        Index("idx_players_system_rating", "rating_system_id", "rating"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    account_id: Mapped[int] = mapped_column(BigInteger, nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False, default="")
    avatar: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    rating_system_id: Mapped[int | None] = mapped_column(
        ForeignKey("rating_systems.id"),
        nullable=True,
    )

    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    tier: Mapped[str] = mapped_column(String(32), nullable=False)
    provisional: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    wins: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    losses: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    games: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    breakdown_json: Mapped[dict[str, Any]] = mapped_column(JSONPayload, nullable=False)

    winrate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    avg_kda: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    kda_variance: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    pro_games: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    pro_winrate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    pro_kda: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    best_hero_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    best_hero_games: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    best_hero_winrate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    hero_stats_json: Mapped[list[dict[str, Any]]] = mapped_column(JSONPayload, nullable=False)

    last_update: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
