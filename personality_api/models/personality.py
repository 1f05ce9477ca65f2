"""Personality ORM — persists a named biography record.

Invariants:
    - id is a store-generated integer primary key, never reused after deletion
    - name is unique (store-level constraint backs the service-level probe)
    - name <= 100 chars, history is non-nullable text
    - created_at set on insert; updated_at set on insert and refreshed on every save

Design Decisions:
    - BigInteger on PostgreSQL (ids are unsigned 32-bit at the HTTP boundary, int4 would overflow)
    - INTEGER + AUTOINCREMENT on SQLite: plain rowid tables hand out a deleted max id again
    - Timestamps assigned by SQLAlchemy at flush: populated on the instance without a refresh
"""

from datetime import datetime, timezone

from sqlalchemy import (
    BigInteger, DateTime, Integer, String, Text, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from personality_api.core.domain_types import NAME_MAX_LENGTH
from personality_api.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Personality(Base):
    """Personality entity: a name and its history."""
    __tablename__ = "personalities"
    __table_args__ = (
        UniqueConstraint("name", name="uq_personalities_name"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=False,
    )
    history: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"Personality(id={self.id!r}, name={self.name!r})"
