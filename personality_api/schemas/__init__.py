"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas describe the wire format at the system boundary
    - Domain rules are enforced in core/, not in schema validators

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
