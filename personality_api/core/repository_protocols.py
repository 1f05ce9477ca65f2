"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Service code NEVER imports a concrete store — dependency arrows point inward only
    - find_by_id raises RecordNotFoundError when no row matches (never returns None)
    - create/update raise DuplicateRecordError when the store's unique constraint fires
    - find_all returns rows ascending by id

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Protocol, Sequence

from personality_api.core.domain_types import PersonalityId
from personality_api.models.personality import Personality


class PersonalityRepository(Protocol):
    """Contract for personality persistence — implemented by infrastructure."""
    async def create(self, personality: Personality) -> Personality: ...
    async def find_all(self) -> Sequence[Personality]: ...
    async def find_by_id(self, personality_id: PersonalityId) -> Personality: ...
    async def update(self, personality: Personality) -> Personality: ...
    async def delete(self, personality_id: PersonalityId) -> None: ...
    async def exists_by_name(self, name: str) -> bool: ...
