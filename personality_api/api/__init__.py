"""API Layer — FastAPI routes, middleware, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON in the shared envelope on error

Design Decisions:
    - Thin routes delegate to services
"""
