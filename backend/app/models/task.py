"""Task ORM — persists a user's task.

Invariants:
    - priority in 0..2, status in 0..3, estimated_time NULL or 5..1440 (CHECK)
    - recurrence_config is the JSON text the API validated, stored verbatim
"""

from datetime import date, datetime, timezone

from sqlalchemy import (
    Boolean, CheckConstraint, Date, DateTime, Integer, SmallInteger, String, Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.domain_types import TaskPriority, TaskStatus
from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    __tablename__ = "task"
    __table_args__ = (
        CheckConstraint("priority BETWEEN 0 AND 2", name="priority"),
        CheckConstraint("status BETWEEN 0 AND 3", name="status"),
        CheckConstraint(
            "estimated_time IS NULL OR estimated_time BETWEEN 5 AND 1440",
            name="estimated_time",
        ),
    )

    id_task: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id_account: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    id_user: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    priority: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, default=int(TaskPriority.MEDIUM),
    )
    estimated_time: Mapped[int | None] = mapped_column(Integer, nullable=True)
    recurrence_config: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, default=int(TaskStatus.PENDING),
    )
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    date_modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    category_links: Mapped[list["TaskCategory"]] = relationship(
        "TaskCategory", back_populates="task",
        cascade="all, delete-orphan",
    )
