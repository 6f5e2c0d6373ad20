"""Task-Category Schemas — association payloads and the per-task category item."""

from pydantic import Field

from app.schemas.common import CamelModel


class TaskCategoryAssociate(CamelModel):
    id_task: int = Field(gt=0)
    id_category: int = Field(gt=0)


class TaskCategoryResult(CamelModel):
    """Identifiers echoed back by associate/remove."""
    id_task: int
    id_category: int


class TaskCategoryItem(CamelModel):
    """Category attached to a task."""
    id_category: int
    name: str
    color: str
    icon: str | None = None
