"""TaskTree API Client — typed async access to the internal REST API.

Usage:
    async with TaskTreeClient("http://localhost:8000/api/v1/internal") as api:
        created = await api.categories.create("Projects", icon="work")
        await api.task_categories.associate(id_task, created.id_category)

Design Decisions:
    - One httpx.AsyncClient per TaskTreeClient, closed by the async context manager
    - Resource APIs grouped like the UI's domain services (categories, task_categories, tasks)
"""

import httpx

from app.client.categories import CategoryApi, TaskCategoryApi
from app.client.http import DEFAULT_BASE_URL, ApiClientError, ApiTransport
from app.client.tasks import TaskApi

__all__ = ["TaskTreeClient", "ApiClientError"]


class TaskTreeClient:
    """Entry point bundling the resource APIs over one HTTP connection pool."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport,
        )
        api = ApiTransport(self._http)
        self.categories = CategoryApi(api)
        self.task_categories = TaskCategoryApi(api)
        self.tasks = TaskApi(api)

    async def close(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "TaskTreeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
