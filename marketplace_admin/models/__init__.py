"""ORM Models — SQLAlchemy declarative models backing the document store.

Invariants:
    - All models inherit from Base (db/base.py)
    - Imported here so Base.metadata is populated before create_all / autogenerate
"""

from marketplace_admin.models.document import Document  # noqa: F401
