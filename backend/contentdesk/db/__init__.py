"""Database Infrastructure — SQLAlchemy declarative Base and shared columns.

Invariants:
    - All sessions are async (AsyncSession), created by infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
