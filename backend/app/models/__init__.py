"""ORM Models — SQLAlchemy declarative models for the tables the procedures operate on.

Invariants:
    - All models inherit from Base (db/base.py)
    - The application never writes through these models: the stored procedures do.
      They exist for migrations and schema-level constraints

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any mapper configuration runs
"""

from app.models.category import Category  # noqa: F401
from app.models.task import Task  # noqa: F401
from app.models.task_category import TaskCategory  # noqa: F401
