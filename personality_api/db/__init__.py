"""Database Infrastructure — declarative Base and standalone async session factory.

Invariants:
    - Single async engine per process for the app (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests and local runs
"""
