"""Database Infrastructure — async session factory and SQLAlchemy Base.

Invariants:
    - All sessions are async (AsyncSession)
    - Engines are created by their owner (lifespan, tests, scripts), never at import
"""
