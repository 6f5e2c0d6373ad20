"""Common Schemas — camelCase base model and the success envelope.

Invariants:
    - Every API field is camelCase on the wire, snake_case in Python
    - Success responses are always {success: true, data, metadata: {timestamp}}

Design Decisions:
    - alias_generator over per-field aliases: one rule for the whole API surface
    - Generic envelope so response_model documents the data shape per endpoint
"""

from datetime import datetime, timezone
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for API payloads — accepts camelCase or snake_case, emits camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseMetadata(BaseModel):
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SuccessEnvelope(BaseModel, Generic[T]):
    """Uniform success wrapper."""
    success: Literal[True] = True
    data: T
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)


def success_response(data: T) -> SuccessEnvelope[T]:
    return SuccessEnvelope(data=data)


def blank_to_none(v: str | None) -> str | None:
    """Strip optional free text; empty or whitespace-only becomes None."""
    if v is None:
        return None
    return v.strip() or None
