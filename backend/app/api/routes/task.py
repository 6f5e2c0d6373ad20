"""Task Routes — task creation.

Invariants:
    - POST /task requires TASK/CREATE
    - priority defaults to Medium when omitted (schema default)
"""

from fastapi import APIRouter, Depends, status

from app.api.security import Credential, require_permission
from app.core.domain_types import Permission, Securable
from app.core.repository_protocols import ProcedureStore
from app.infrastructure.procedure_store import get_procedure_store
from app.schemas.common import SuccessEnvelope, success_response
from app.schemas.task import TaskCreate, TaskCreateResult
from app.services import task_service

router = APIRouter(prefix="/task", tags=["task"])


@router.post(
    "", response_model=SuccessEnvelope[TaskCreateResult],
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate,
    credential: Credential = Depends(
        require_permission(Securable.TASK, Permission.CREATE),
    ),
    store: ProcedureStore = Depends(get_procedure_store),
):
    """Create a task with optional due date, estimate and recurrence."""
    result = await task_service.task_create(
        store,
        id_account=credential.id_account,
        id_user=credential.id_user,
        title=body.title,
        description=body.description,
        due_date=body.due_date,
        priority=body.priority,
        estimated_time=body.estimated_time,
        recurrence_config=body.recurrence_config,
    )
    return success_response(result)
