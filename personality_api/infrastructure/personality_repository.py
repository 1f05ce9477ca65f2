"""Personality Repository — SQLAlchemy gateway for the personalities table.

Invariants:
    - Every write commits before returning (one statement, one transaction)
    - find_by_id raises RecordNotFoundError on no rows (typed not-found outcome)
    - A unique-constraint violation rolls back and raises DuplicateRecordError
    - find_all orders by id ascending explicitly

Design Decisions:
    - Catches only IntegrityError here: every other SQLAlchemy failure propagates to
      DatabaseSessionManager.session(), which maps it to DatabaseError
    - update() touches updated_at itself: a save with no changed columns still refreshes it
"""

import logging
from typing import Sequence

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError, NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from personality_api.core.domain_types import PersonalityId
from personality_api.core.errors import DuplicateRecordError, RecordNotFoundError
from personality_api.models.personality import Personality, utcnow

logger = logging.getLogger(__name__)


class SQLAlchemyPersonalityRepository:
    """PersonalityRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, personality: Personality) -> Personality:
        self.db.add(personality)
        await self._commit()
        return personality

    async def find_all(self) -> Sequence[Personality]:
        result = await self.db.execute(
            select(Personality).order_by(Personality.id.asc()),
        )
        return result.scalars().all()

    async def find_by_id(self, personality_id: PersonalityId) -> Personality:
        result = await self.db.execute(
            select(Personality).where(Personality.id == personality_id),
        )
        try:
            return result.scalar_one()
        except NoResultFound:
            raise RecordNotFoundError(personality_id) from None

    async def update(self, personality: Personality) -> Personality:
        personality.updated_at = utcnow()
        await self._commit()
        return personality

    async def delete(self, personality_id: PersonalityId) -> None:
        await self.db.execute(
            delete(Personality).where(Personality.id == personality_id),
        )
        await self.db.commit()

    async def exists_by_name(self, name: str) -> bool:
        result = await self.db.execute(
            select(exists().where(Personality.name == name)),
        )
        return bool(result.scalar())

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Unique constraint rejected write: {e.orig}")
            raise DuplicateRecordError(str(e.orig)) from e
