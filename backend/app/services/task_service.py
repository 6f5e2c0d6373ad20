"""Task Service — forwards task creation to spTaskCreate."""

from datetime import date

from app.core.domain_types import AccountId, TaskPriority, UserId
from app.core.repository_protocols import ProcedureStore
from app.schemas.task import TaskCreateResult

SP_TASK_CREATE = "spTaskCreate"


async def task_create(
    store: ProcedureStore,
    *,
    id_account: AccountId,
    id_user: UserId,
    title: str,
    description: str | None,
    due_date: date | None,
    priority: TaskPriority,
    estimated_time: int | None,
    recurrence_config: str | None,
) -> TaskCreateResult:
    """Create a task. Past due dates are rejected by the procedure (dueDateInPast)."""
    row = await store.fetch_one(SP_TASK_CREATE, {
        "idAccount": id_account,
        "idUser": id_user,
        "title": title,
        "description": description,
        "dueDate": due_date,
        "priority": int(priority),
        "estimatedTime": estimated_time,
        "recurrenceConfig": recurrence_config,
    })
    return TaskCreateResult.model_validate(row)
