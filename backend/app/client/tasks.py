"""Task Client API — POST /task from the consumer side."""

from datetime import date

from app.client.http import ApiTransport
from app.core.domain_types import TaskPriority
from app.schemas.task import RecurrenceConfig, TaskCreateResult


class TaskApi:
    def __init__(self, transport: ApiTransport):
        self._transport = transport

    async def create(
        self,
        title: str,
        description: str | None = None,
        due_date: date | None = None,
        priority: TaskPriority = TaskPriority.MEDIUM,
        estimated_time: int | None = None,
        recurrence: RecurrenceConfig | None = None,
    ) -> TaskCreateResult:
        """Create a task; recurrence is sent as the JSON string the API stores."""
        data = await self._transport.request("POST", "/task", json={
            "title": title,
            "description": description or None,
            "dueDate": due_date.isoformat() if due_date else None,
            "priority": int(priority),
            "estimatedTime": estimated_time or None,
            "recurrenceConfig": (
                recurrence.model_dump_json() if recurrence else None
            ),
        })
        return TaskCreateResult.model_validate(data)
