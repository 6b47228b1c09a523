"""Declarative base for ORM models."""

from __future__ import annotations

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase

JSONPayload = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    pass
