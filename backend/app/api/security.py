"""Permission Checks — per-operation securable/permission dependency.

Invariants:
    - Every internal route declares exactly one (securable, permission) pair
    - A route body runs only after its permission check passed
    - The returned Credential is the only source of account/user ids for services

Design Decisions:
    - Dependency factory over decorator: FastAPI resolves it per request and
      documents it in OpenAPI
    - Grants read from Settings (Depends(get_settings)) so tests override them
"""

import logging
from dataclasses import dataclass

from fastapi import Depends

from app.config import Settings, get_settings
from app.core.domain_types import AccountId, Permission, Securable, UserId
from app.core.errors import PermissionDeniedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    """Who the request acts as."""
    id_account: AccountId
    id_user: UserId


def require_permission(securable: Securable, permission: Permission):
    """Build a dependency that checks the grant and yields the Credential."""

    async def check_permission(
        settings: Settings = Depends(get_settings),
    ) -> Credential:
        granted = settings.permissions.get(securable.value, [])
        if permission.value not in granted:
            logger.warning(
                f"Permission denied: {permission.value} on {securable.value}",
                extra={
                    "securable": securable.value,
                    "permission": permission.value,
                    "account_id": settings.internal_account_id,
                },
            )
            raise PermissionDeniedError(securable.value, permission.value)
        return Credential(
            id_account=AccountId(settings.internal_account_id),
            id_user=UserId(settings.internal_user_id),
        )

    return check_permission
