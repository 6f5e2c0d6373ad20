"""Category Client APIs — /category and /task-category from the consumer side.

Invariants:
    - create() sends the default color when none is given; empty icon/parent become null
    - update() sends the id in both path and body (the path wins server-side)
    - available_parents() mirrors the parent picker: level < 2, never the edited category
    - palette() and icons() offer the preset choices; neither restricts what create() sends
"""

from app.client.http import ApiTransport
from app.core.category_hierarchy import (
    CategoryNode, build_category_tree, eligible_parents,
)
from app.core.domain_types import (
    CATEGORY_COLORS, CATEGORY_ICONS, DEFAULT_CATEGORY_COLOR,
)
from app.schemas.category import Category, CategoryResult
from app.schemas.task_category import TaskCategoryItem, TaskCategoryResult


class CategoryApi:
    def __init__(self, transport: ApiTransport):
        self._transport = transport

    async def list_categories(self) -> list[Category]:
        data = await self._transport.request("GET", "/category")
        return [Category.model_validate(item) for item in data]

    async def get(self, id_category: int) -> Category:
        data = await self._transport.request("GET", f"/category/{id_category}")
        return Category.model_validate(data)

    async def create(
        self,
        name: str,
        color: str | None = None,
        icon: str | None = None,
        id_parent: int | None = None,
    ) -> CategoryResult:
        data = await self._transport.request("POST", "/category", json={
            "name": name,
            "color": color or DEFAULT_CATEGORY_COLOR,
            "icon": icon or None,
            "idParent": id_parent or None,
        })
        return CategoryResult.model_validate(data)

    async def update(
        self, id_category: int, name: str, color: str, icon: str | None = None,
    ) -> CategoryResult:
        data = await self._transport.request(
            "PUT", f"/category/{id_category}",
            json={
                "id": id_category,
                "name": name,
                "color": color,
                "icon": icon or None,
            },
        )
        return CategoryResult.model_validate(data)

    async def delete(self, id_category: int) -> CategoryResult:
        data = await self._transport.request("DELETE", f"/category/{id_category}")
        return CategoryResult.model_validate(data)

    async def available_parents(
        self, editing_id: int | None = None,
    ) -> list[Category]:
        """Categories that can take a child, for a create/edit form."""
        return eligible_parents(await self.list_categories(), editing_id)

    async def tree(self) -> list[CategoryNode[Category]]:
        return build_category_tree(await self.list_categories())

    @staticmethod
    def palette() -> list[str]:
        """Preset colors for the category form; the default color comes first."""
        return [DEFAULT_CATEGORY_COLOR] + [
            c for c in CATEGORY_COLORS if c != DEFAULT_CATEGORY_COLOR
        ]

    @staticmethod
    def icons() -> list[str]:
        """Suggested icon names. Free-form icons are accepted as well."""
        return list(CATEGORY_ICONS)


class TaskCategoryApi:
    def __init__(self, transport: ApiTransport):
        self._transport = transport

    async def list_task_categories(self, id_task: int) -> list[TaskCategoryItem]:
        data = await self._transport.request("GET", f"/task-category/{id_task}")
        return [TaskCategoryItem.model_validate(item) for item in data]

    async def associate(self, id_task: int, id_category: int) -> TaskCategoryResult:
        data = await self._transport.request("POST", "/task-category", json={
            "idTask": id_task,
            "idCategory": id_category,
        })
        return TaskCategoryResult.model_validate(data)

    async def remove(self, id_task: int, id_category: int) -> TaskCategoryResult:
        data = await self._transport.request(
            "DELETE", f"/task-category/{id_task}/{id_category}",
        )
        return TaskCategoryResult.model_validate(data)
