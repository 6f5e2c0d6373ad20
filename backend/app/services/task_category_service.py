"""Task-Category Service — association procedures between tasks and categories.

Invariants:
    - (task, category) is unique: a second associate fails with taskCategoryAlreadyAssociated
    - Removing a missing association fails with taskCategoryAssociationDoesntExist
    - Category task counts are maintained by the procedures, never here
"""

from app.core.domain_types import AccountId, CategoryId, TaskId
from app.core.repository_protocols import ProcedureStore
from app.schemas.task_category import TaskCategoryItem, TaskCategoryResult

SP_TASK_CATEGORY_ASSOCIATE = "spTaskCategoryAssociate"
SP_TASK_CATEGORY_REMOVE = "spTaskCategoryRemove"
SP_TASK_CATEGORY_LIST = "spTaskCategoryList"


async def task_category_associate(
    store: ProcedureStore,
    *,
    id_account: AccountId,
    id_task: TaskId,
    id_category: CategoryId,
) -> TaskCategoryResult:
    row = await store.fetch_one(SP_TASK_CATEGORY_ASSOCIATE, {
        "idAccount": id_account,
        "idTask": id_task,
        "idCategory": id_category,
    })
    return TaskCategoryResult.model_validate(row)


async def task_category_remove(
    store: ProcedureStore,
    *,
    id_account: AccountId,
    id_task: TaskId,
    id_category: CategoryId,
) -> TaskCategoryResult:
    row = await store.fetch_one(SP_TASK_CATEGORY_REMOVE, {
        "idAccount": id_account,
        "idTask": id_task,
        "idCategory": id_category,
    })
    return TaskCategoryResult.model_validate(row)


async def task_category_list(
    store: ProcedureStore, *, id_account: AccountId, id_task: TaskId,
) -> list[TaskCategoryItem]:
    """Categories currently attached to a task."""
    rows = await store.fetch_all(SP_TASK_CATEGORY_LIST, {
        "idAccount": id_account,
        "idTask": id_task,
    })
    return [TaskCategoryItem.model_validate(row) for row in rows]
