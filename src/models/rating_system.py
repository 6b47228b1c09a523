"""rating_systems table model."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base
from models.mixins import RatingSystemMixin


class RatingSystem(RatingSystemMixin, Base):
    """Configuration metadata for one rating strategy revision."""

    __tablename__ = "rating_systems"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    algorithm: Mapped[str] = mapped_column(String(32), nullable=False)
