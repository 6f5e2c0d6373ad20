"""Category Service — forwards category operations to the spCategory* procedures.

Invariants:
    - Every call is scoped by account id (tenant isolation lives in the procedures)
    - Create/update/delete return the single identifier row; list returns every row
    - Uniqueness, depth limit, default-category protection and association cascade
      are enforced by the procedures, surfaced here as BusinessRuleError

Design Decisions:
    - Plain async functions over a class: no state beyond the injected store
"""

from app.core.domain_types import AccountId, CategoryId, UserId
from app.core.repository_protocols import ProcedureStore
from app.schemas.category import Category, CategoryResult

SP_CATEGORY_CREATE = "spCategoryCreate"
SP_CATEGORY_LIST = "spCategoryList"
SP_CATEGORY_GET = "spCategoryGet"
SP_CATEGORY_UPDATE = "spCategoryUpdate"
SP_CATEGORY_DELETE = "spCategoryDelete"


async def category_create(
    store: ProcedureStore,
    *,
    id_account: AccountId,
    id_user: UserId,
    name: str,
    color: str,
    icon: str | None,
    id_parent: CategoryId | None,
) -> CategoryResult:
    """Create a category, optionally under a parent."""
    row = await store.fetch_one(SP_CATEGORY_CREATE, {
        "idAccount": id_account,
        "idUser": id_user,
        "name": name,
        "color": color,
        "icon": icon,
        "idParent": id_parent,
    })
    return CategoryResult.model_validate(row)


async def category_list(
    store: ProcedureStore, *, id_account: AccountId,
) -> list[Category]:
    """All non-deleted categories of the account with level and task count."""
    rows = await store.fetch_all(SP_CATEGORY_LIST, {"idAccount": id_account})
    return [Category.model_validate(row) for row in rows]


async def category_get(
    store: ProcedureStore, *, id_account: AccountId, id_category: CategoryId,
) -> Category:
    row = await store.fetch_one(SP_CATEGORY_GET, {
        "idAccount": id_account,
        "idCategory": id_category,
    })
    return Category.model_validate(row)


async def category_update(
    store: ProcedureStore,
    *,
    id_account: AccountId,
    id_category: CategoryId,
    name: str,
    color: str,
    icon: str | None,
) -> CategoryResult:
    """Rename/recolor a category. The parent is not changeable."""
    row = await store.fetch_one(SP_CATEGORY_UPDATE, {
        "idAccount": id_account,
        "idCategory": id_category,
        "name": name,
        "color": color,
        "icon": icon,
    })
    return CategoryResult.model_validate(row)


async def category_delete(
    store: ProcedureStore, *, id_account: AccountId, id_category: CategoryId,
) -> CategoryResult:
    """Soft-delete a category and drop its task associations."""
    row = await store.fetch_one(SP_CATEGORY_DELETE, {
        "idAccount": id_account,
        "idCategory": id_category,
    })
    return CategoryResult.model_validate(row)
