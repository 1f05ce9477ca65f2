"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Personality is the only entity

Design Decisions:
    - Models imported here so Base.metadata is populated for create_all and alembic
"""

from personality_api.models.personality import Personality  # noqa: F401
