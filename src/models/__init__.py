"""ORM models."""

from models.base import Base
from models.player import Player
from models.rating_system import RatingSystem

__all__ = ["Base", "Player", "RatingSystem"]
