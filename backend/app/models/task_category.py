"""TaskCategory ORM — many-to-many junction between tasks and categories.

Invariants:
    - (id_task, id_category) is the primary key: one association per pair
    - id_account denormalized: procedures filter by tenant without joining task
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class TaskCategory(Base):
    __tablename__ = "task_category"

    id_task: Mapped[int] = mapped_column(
        ForeignKey("task.id_task", ondelete="CASCADE"), primary_key=True,
    )
    id_category: Mapped[int] = mapped_column(
        ForeignKey("category.id_category", ondelete="CASCADE"), primary_key=True,
    )
    id_account: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    task: Mapped["Task"] = relationship("Task", back_populates="category_links")
    category: Mapped["Category"] = relationship(
        "Category", back_populates="task_links",
    )
