"""Category ORM — the table behind the category hierarchy.

Invariants:
    - level is 0, 1 or 2 (CHECK); level = parent.level + 1 is maintained by spCategoryCreate
    - name unique per account among non-deleted rows (partial unique index)
    - Soft delete only: deleted rows stay for history, associations are removed
    - is_default rows are never deleted (enforced by spCategoryDelete)

Design Decisions:
    - node stores the materialized path ("/1/4/") next to id_parent: subtree reads
      without recursive CTEs
    - Self-referential relationship for parent/children (same shape as a taxonomy tree)
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean, CheckConstraint, DateTime, ForeignKey, Index, Integer, SmallInteger,
    String, text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.domain_types import DEFAULT_CATEGORY_COLOR
from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Category(Base):
    """A node in the per-account category tree."""
    __tablename__ = "category"
    __table_args__ = (
        CheckConstraint("level BETWEEN 0 AND 2", name="level"),
        Index(
            "uq_category_account_name", "id_account", "name",
            unique=True,
            postgresql_where=text("NOT deleted"),
            sqlite_where=text("deleted = 0"),
        ),
    )

    id_category: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id_account: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    id_user: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    color: Mapped[str] = mapped_column(
        String(7), nullable=False, default=DEFAULT_CATEGORY_COLOR,
    )
    icon: Mapped[str | None] = mapped_column(String(50), nullable=True)
    id_parent: Mapped[int | None] = mapped_column(
        ForeignKey("category.id_category"), nullable=True,
    )
    node: Mapped[str | None] = mapped_column(String(255), nullable=True)
    level: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    is_default: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    date_modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    parent: Mapped[Optional["Category"]] = relationship(
        "Category", remote_side=[id_category], back_populates="children",
    )
    children: Mapped[list["Category"]] = relationship(
        "Category", back_populates="parent",
    )
    task_links: Mapped[list["TaskCategory"]] = relationship(
        "TaskCategory", back_populates="category",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Category(id={self.id_category}, name='{self.name}', level={self.level})>"
