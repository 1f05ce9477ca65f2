"""Core Layer — domain types, errors, validation rules and repository contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validation functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell
"""
