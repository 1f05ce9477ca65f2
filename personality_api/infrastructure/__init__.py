"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store-specific failures are translated before leaving this layer

Design Decisions:
    - Repository implementations live here; their contracts live in core/
"""
