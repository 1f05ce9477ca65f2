"""Route Dependencies — per-request wiring of session → repository → service.

Invariants:
    - One AsyncSession per request (from get_db), shared by repository and service
    - Routes receive a ready PersonalityService and never touch the session directly

Design Decisions:
    - FastAPI Depends chain over a container: overriding get_db in tests swaps the store
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from personality_api.infrastructure.database import get_db
from personality_api.infrastructure.personality_repository import (
    SQLAlchemyPersonalityRepository,
)
from personality_api.services.personality_service import PersonalityService


def get_personality_repository(
    db: AsyncSession = Depends(get_db),
) -> SQLAlchemyPersonalityRepository:
    return SQLAlchemyPersonalityRepository(db)


def get_personality_service(
    repository: SQLAlchemyPersonalityRepository = Depends(get_personality_repository),
) -> PersonalityService:
    return PersonalityService(repository)
