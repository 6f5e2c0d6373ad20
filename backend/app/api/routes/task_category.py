"""Task-Category Routes — attach, detach and list a task's categories.

Invariants:
    - All three operations are guarded by the TASK securable
      (READ for listing, UPDATE for associate/remove: the task is what changes)
    - Both ids in DELETE come from the path
"""

from fastapi import APIRouter, Depends, Path, status

from app.api.security import Credential, require_permission
from app.core.domain_types import CategoryId, Permission, Securable, TaskId
from app.core.repository_protocols import ProcedureStore
from app.infrastructure.procedure_store import get_procedure_store
from app.schemas.common import SuccessEnvelope, success_response
from app.schemas.task_category import (
    TaskCategoryAssociate, TaskCategoryItem, TaskCategoryResult,
)
from app.services import task_category_service

router = APIRouter(prefix="/task-category", tags=["task-category"])


@router.get("/{idTask}", response_model=SuccessEnvelope[list[TaskCategoryItem]])
async def list_task_categories(
    id_task: int = Path(gt=0, alias="idTask"),
    credential: Credential = Depends(
        require_permission(Securable.TASK, Permission.READ),
    ),
    store: ProcedureStore = Depends(get_procedure_store),
):
    items = await task_category_service.task_category_list(
        store, id_account=credential.id_account, id_task=TaskId(id_task),
    )
    return success_response(items)


@router.post(
    "", response_model=SuccessEnvelope[TaskCategoryResult],
    status_code=status.HTTP_201_CREATED,
)
async def associate_task_category(
    body: TaskCategoryAssociate,
    credential: Credential = Depends(
        require_permission(Securable.TASK, Permission.UPDATE),
    ),
    store: ProcedureStore = Depends(get_procedure_store),
):
    result = await task_category_service.task_category_associate(
        store,
        id_account=credential.id_account,
        id_task=TaskId(body.id_task),
        id_category=CategoryId(body.id_category),
    )
    return success_response(result)


@router.delete(
    "/{idTask}/{idCategory}",
    response_model=SuccessEnvelope[TaskCategoryResult],
)
async def remove_task_category(
    id_task: int = Path(gt=0, alias="idTask"),
    id_category: int = Path(gt=0, alias="idCategory"),
    credential: Credential = Depends(
        require_permission(Securable.TASK, Permission.UPDATE),
    ),
    store: ProcedureStore = Depends(get_procedure_store),
):
    result = await task_category_service.task_category_remove(
        store,
        id_account=credential.id_account,
        id_task=TaskId(id_task),
        id_category=CategoryId(id_category),
    )
    return success_response(result)
