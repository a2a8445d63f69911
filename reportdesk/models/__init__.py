"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User owns Reports; every report belongs to exactly one user

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from reportdesk.models.user import User  # noqa: F401
from reportdesk.models.report import Report  # noqa: F401
