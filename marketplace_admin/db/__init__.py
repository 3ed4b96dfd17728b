"""Database Infrastructure — SQLAlchemy Base for the document table.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)
    - All sessions are async (AsyncSession)
"""
