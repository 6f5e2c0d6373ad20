"""Initial schema — category, task, task_category and the procedure schema.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

The spCategory*/spTask*/spTaskCategory* procedures are provisioned by the
database team into the "functional" schema created here; they are not part
of this migration history.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("CREATE SCHEMA IF NOT EXISTS functional")

    op.create_table(
        "category",
        sa.Column("id_category", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("id_account", sa.Integer, nullable=False),
        sa.Column("id_user", sa.Integer, nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("color", sa.String(7), nullable=False, server_default="#3498db"),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("id_parent", sa.Integer, sa.ForeignKey("category.id_category"), nullable=True),
        sa.Column("node", sa.String(255), nullable=True),
        sa.Column("level", sa.SmallInteger, nullable=False, server_default="0"),
        sa.Column("is_default", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("deleted", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("date_created", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("date_modified", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("level BETWEEN 0 AND 2", name="ck_category_level"),
    )
    op.create_index("ix_category_id_account", "category", ["id_account"])
    op.create_index(
        "uq_category_account_name", "category", ["id_account", "name"],
        unique=True, postgresql_where=sa.text("NOT deleted"),
    )

    op.create_table(
        "task",
        sa.Column("id_task", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("id_account", sa.Integer, nullable=False),
        sa.Column("id_user", sa.Integer, nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.String(1000), nullable=True),
        sa.Column("due_date", sa.Date, nullable=True),
        sa.Column("priority", sa.SmallInteger, nullable=False, server_default="1"),
        sa.Column("estimated_time", sa.Integer, nullable=True),
        sa.Column("recurrence_config", sa.Text, nullable=True),
        sa.Column("status", sa.SmallInteger, nullable=False, server_default="0"),
        sa.Column("deleted", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("date_created", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("date_modified", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("priority BETWEEN 0 AND 2", name="ck_task_priority"),
        sa.CheckConstraint("status BETWEEN 0 AND 3", name="ck_task_status"),
        sa.CheckConstraint(
            "estimated_time IS NULL OR estimated_time BETWEEN 5 AND 1440",
            name="ck_task_estimated_time",
        ),
    )
    op.create_index("ix_task_id_account", "task", ["id_account"])

    op.create_table(
        "task_category",
        sa.Column(
            "id_task", sa.Integer,
            sa.ForeignKey("task.id_task", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "id_category", sa.Integer,
            sa.ForeignKey("category.id_category", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column("id_account", sa.Integer, nullable=False),
        sa.Column("date_created", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_task_category_id_account", "task_category", ["id_account"])


def downgrade() -> None:
    op.drop_table("task_category")
    op.drop_table("task")
    op.drop_index("uq_category_account_name", table_name="category")
    op.drop_table("category")
    op.execute("DROP SCHEMA IF EXISTS functional")
