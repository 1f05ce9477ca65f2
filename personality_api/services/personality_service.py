"""Personality Service — business rules between the route handlers and the repository.

Invariants:
    - Names are unique: probed before every write, store constraint is the final arbiter
    - id == 0 is rejected with InvalidIdError before any store access
    - Partial update: a falsy name/history leaves the stored value untouched
    - On a name conflict during update, no field of the record is changed
    - get_all returns projections ascending by id, whatever order the store yields
    - Gateway outcomes (RecordNotFoundError, DuplicateRecordError) never escape this module

Design Decisions:
    - Depends on the PersonalityRepository Protocol, not on SQLAlchemy: fakes swap in for tests
    - Name probe runs before the history change is applied, so a conflict leaves the
      in-session instance untouched as well as the row
"""

import logging

from personality_api.core.domain_types import PersonalityId
from personality_api.core.errors import (
    DuplicateRecordError,
    InvalidIdError,
    PersonalityAlreadyExistsError,
    PersonalityNotFoundError,
    RecordNotFoundError,
)
from personality_api.core.repository_protocols import PersonalityRepository
from personality_api.models.personality import Personality
from personality_api.schemas.personality import PersonalityResponse

logger = logging.getLogger(__name__)


class PersonalityService:
    """CRUD use cases for personalities."""

    def __init__(self, repository: PersonalityRepository):
        self.repository = repository

    async def create(self, name: str, history: str) -> PersonalityResponse:
        """Persist a new personality. Fails if the name is taken."""
        if await self.repository.exists_by_name(name):
            raise PersonalityAlreadyExistsError(name)

        try:
            personality = await self.repository.create(
                Personality(name=name, history=history),
            )
        except DuplicateRecordError:
            raise PersonalityAlreadyExistsError(name) from None

        logger.info(
            f"Personality created: {personality.id}",
            extra={"personality_id": personality.id},
        )
        return to_response(personality)

    async def get_all(self) -> list[PersonalityResponse]:
        personalities = await self.repository.find_all()
        return [
            to_response(p) for p in sorted(personalities, key=lambda p: p.id)
        ]

    async def get_by_id(self, personality_id: PersonalityId) -> PersonalityResponse:
        return to_response(await self._find_or_raise(personality_id))

    async def update(
        self,
        personality_id: PersonalityId,
        name: str | None = None,
        history: str | None = None,
    ) -> PersonalityResponse:
        """Apply a partial update. Empty fields are left unchanged."""
        personality = await self._find_or_raise(personality_id)

        if name and name != personality.name:
            if await self.repository.exists_by_name(name):
                raise PersonalityAlreadyExistsError(name)
            personality.name = name
        if history:
            personality.history = history

        try:
            personality = await self.repository.update(personality)
        except DuplicateRecordError:
            raise PersonalityAlreadyExistsError(name or "") from None

        logger.info(
            f"Personality updated: {personality_id}",
            extra={"personality_id": personality_id},
        )
        return to_response(personality)

    async def delete(self, personality_id: PersonalityId) -> None:
        """Hard-delete a personality."""
        await self._find_or_raise(personality_id)
        await self.repository.delete(personality_id)
        logger.info(
            f"Personality deleted: {personality_id}",
            extra={"personality_id": personality_id},
        )

    async def _find_or_raise(self, personality_id: PersonalityId) -> Personality:
        if not personality_id:
            raise InvalidIdError()
        try:
            return await self.repository.find_by_id(personality_id)
        except RecordNotFoundError:
            raise PersonalityNotFoundError(personality_id) from None


def to_response(personality: Personality) -> PersonalityResponse:
    """Project a stored personality onto its public shape."""
    return PersonalityResponse.model_validate(personality)
