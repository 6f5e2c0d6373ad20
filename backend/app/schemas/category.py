"""Category Schemas — request validation and response shapes for /category.

Invariants:
    - name: trimmed, 2-50 chars, non-empty
    - color: #RRGGBB; optional on create (default applied by the route), required on update
    - icon: optional, <= 50 chars, empty string normalized to None
    - idParent: optional positive int; 0 normalized to None
    - update never carries a parent: the hierarchy position is fixed at creation

Design Decisions:
    - Field constraints for lengths/patterns, field_validator for normalization only
    - Response models tolerate extra procedure columns (ignored) so the store can grow
"""

from datetime import datetime

from pydantic import Field, field_validator

from app.core.domain_types import HEX_COLOR_PATTERN
from app.schemas.common import CamelModel, blank_to_none


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v


class CategoryCreate(CamelModel):
    """Category creation payload."""
    name: str = Field(min_length=2, max_length=50)
    color: str | None = Field(None, pattern=HEX_COLOR_PATTERN)
    icon: str | None = Field(None, max_length=50)
    id_parent: int | None = Field(None, ge=0)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return _strip_required(v) if isinstance(v, str) else v

    @field_validator("icon")
    @classmethod
    def normalize_icon(cls, v: str | None) -> str | None:
        return blank_to_none(v)

    @field_validator("id_parent")
    @classmethod
    def normalize_parent(cls, v: int | None) -> int | None:
        return v or None


class CategoryUpdate(CamelModel):
    """Category update payload. The category id comes from the path."""
    name: str = Field(min_length=2, max_length=50)
    color: str = Field(pattern=HEX_COLOR_PATTERN)
    icon: str | None = Field(None, max_length=50)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return _strip_required(v) if isinstance(v, str) else v

    @field_validator("icon")
    @classmethod
    def normalize_icon(cls, v: str | None) -> str | None:
        return blank_to_none(v)


class CategoryResult(CamelModel):
    """Identifier returned by create/update/delete."""
    id_category: int


class Category(CamelModel):
    """Category list/detail item with hierarchy and aggregate task count."""
    id_category: int
    name: str
    color: str
    icon: str | None = None
    id_parent: int | None = None
    level: int = 0
    is_default: bool = False
    task_count: int = 0
    date_created: datetime | None = None
    date_modified: datetime | None = None
