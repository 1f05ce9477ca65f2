"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PersonalityId wraps a store-generated positive int, never set from client input
    - 0 is never a valid PersonalityId (rejected by the service as InvalidIdError)
    - Path identifiers are unsigned 32-bit: anything above MAX_PERSONALITY_ID is malformed

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PersonalityId = NewType("PersonalityId", int)

MAX_PERSONALITY_ID = 2**32 - 1


# ─── Field Bounds ────────────────────────────────────────────────

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100
HISTORY_MIN_LENGTH = 10
HISTORY_MAX_LENGTH = 5000
