"""Service test fixtures — in-memory repository fake.

Invariants:
    - Fake honours the PersonalityRepository contract: RecordNotFoundError on missing ids,
      DuplicateRecordError on a name collision, ids never reused
    - find_all yields rows in REVERSE id order: the service must not trust store order

Design Decisions:
    - Fake over mock: the service is exercised against real contract behaviour
    - `fail_unique_on_write` simulates a concurrent writer slipping past exists_by_name
"""

import pytest

from personality_api.core.errors import DuplicateRecordError, RecordNotFoundError
from personality_api.models.personality import Personality, utcnow
from personality_api.services.personality_service import PersonalityService


class InMemoryPersonalityRepository:
    """PersonalityRepository fake backed by a dict."""

    def __init__(self):
        self.rows: dict[int, Personality] = {}
        self.next_id = 1
        self.fail_unique_on_write = False
        self.writes = 0

    async def create(self, personality: Personality) -> Personality:
        self._check_unique(personality)
        personality.id = self.next_id
        personality.created_at = personality.updated_at = utcnow()
        self.rows[personality.id] = personality
        self.next_id += 1
        self.writes += 1
        return personality

    async def find_all(self) -> list[Personality]:
        return [self.rows[k] for k in sorted(self.rows, reverse=True)]

    async def find_by_id(self, personality_id: int) -> Personality:
        if personality_id not in self.rows:
            raise RecordNotFoundError(personality_id)
        return self.rows[personality_id]

    async def update(self, personality: Personality) -> Personality:
        self._check_unique(personality)
        personality.updated_at = utcnow()
        self.rows[personality.id] = personality
        self.writes += 1
        return personality

    async def delete(self, personality_id: int) -> None:
        self.rows.pop(personality_id, None)
        self.writes += 1

    async def exists_by_name(self, name: str) -> bool:
        return any(p.name == name for p in self.rows.values())

    def _check_unique(self, personality: Personality) -> None:
        if self.fail_unique_on_write:
            raise DuplicateRecordError("uq_personalities_name")
        for row in self.rows.values():
            if row.name == personality.name and row is not personality:
                raise DuplicateRecordError("uq_personalities_name")


@pytest.fixture
def fake_repo():
    return InMemoryPersonalityRepository()


@pytest.fixture
def service(fake_repo):
    return PersonalityService(fake_repo)
