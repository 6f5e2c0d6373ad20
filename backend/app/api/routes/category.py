"""Category Routes — CRUD over the category hierarchy.

Invariants:
    - Every handler checks CATEGORY/<permission> before touching the store
    - POST applies the default color (#3498db) when none is given
    - PUT takes the category id from the path, never from the body
    - DELETE is a soft delete; default categories are refused by the store
      (cannotDeleteDefaultCategory)

Design Decisions:
    - Thin handlers: validate → service → envelope (ADR: impureim sandwich)
    - Path ids validated as positive ints; failures become 400 via the validation handler
"""

import logging

from fastapi import APIRouter, Depends, Path, status

from app.api.security import Credential, require_permission
from app.core.domain_types import (
    CategoryId, DEFAULT_CATEGORY_COLOR, Permission, Securable,
)
from app.core.repository_protocols import ProcedureStore
from app.infrastructure.procedure_store import get_procedure_store
from app.schemas.category import (
    Category, CategoryCreate, CategoryResult, CategoryUpdate,
)
from app.schemas.common import SuccessEnvelope, success_response
from app.services import category_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/category", tags=["category"])


@router.get("", response_model=SuccessEnvelope[list[Category]])
async def list_categories(
    credential: Credential = Depends(
        require_permission(Securable.CATEGORY, Permission.READ),
    ),
    store: ProcedureStore = Depends(get_procedure_store),
):
    """All categories of the account with hierarchy level and task counts."""
    categories = await category_service.category_list(
        store, id_account=credential.id_account,
    )
    return success_response(categories)


@router.post(
    "", response_model=SuccessEnvelope[CategoryResult],
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreate,
    credential: Credential = Depends(
        require_permission(Securable.CATEGORY, Permission.CREATE),
    ),
    store: ProcedureStore = Depends(get_procedure_store),
):
    """Create a category, optionally as a child of idParent."""
    result = await category_service.category_create(
        store,
        id_account=credential.id_account,
        id_user=credential.id_user,
        name=body.name,
        color=body.color or DEFAULT_CATEGORY_COLOR,
        icon=body.icon,
        id_parent=CategoryId(body.id_parent) if body.id_parent else None,
    )
    logger.info(
        f"Category {result.id_category} created",
        extra={"account_id": credential.id_account},
    )
    return success_response(result)


@router.get("/{id}", response_model=SuccessEnvelope[Category])
async def get_category(
    id: int = Path(gt=0),
    credential: Credential = Depends(
        require_permission(Securable.CATEGORY, Permission.READ),
    ),
    store: ProcedureStore = Depends(get_procedure_store),
):
    category = await category_service.category_get(
        store, id_account=credential.id_account, id_category=CategoryId(id),
    )
    return success_response(category)


@router.put("/{id}", response_model=SuccessEnvelope[CategoryResult])
async def update_category(
    body: CategoryUpdate,
    id: int = Path(gt=0),
    credential: Credential = Depends(
        require_permission(Securable.CATEGORY, Permission.UPDATE),
    ),
    store: ProcedureStore = Depends(get_procedure_store),
):
    """Update name, color and icon."""
    result = await category_service.category_update(
        store,
        id_account=credential.id_account,
        id_category=CategoryId(id),
        name=body.name,
        color=body.color,
        icon=body.icon,
    )
    return success_response(result)


@router.delete("/{id}", response_model=SuccessEnvelope[CategoryResult])
async def delete_category(
    id: int = Path(gt=0),
    credential: Credential = Depends(
        require_permission(Securable.CATEGORY, Permission.DELETE),
    ),
    store: ProcedureStore = Depends(get_procedure_store),
):
    """Soft-delete the category and remove its task associations."""
    result = await category_service.category_delete(
        store, id_account=credential.id_account, id_category=CategoryId(id),
    )
    logger.info(
        f"Category {id} deleted",
        extra={"account_id": credential.id_account},
    )
    return success_response(result)
