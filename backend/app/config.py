"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): one Settings per process
    - database_url always uses an async driver (postgresql:// rewritten to +asyncpg)
    - permissions keys are Securable names, values are Permission names (upper-cased,
      unknown names rejected at startup)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env support
    - Defaults work with docker-compose out of the box
    - The internal API acts as one configured account/user (ADR: no auth service yet);
      grants default to full CRUD on every securable
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.domain_types import Permission, Securable


def _full_access() -> dict[str, list[str]]:
    return {s.value: [p.value for p in Permission] for s in Securable}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "postgresql+asyncpg://tasktree:tasktree@db:5432/tasktree"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    procedure_schema: str = "functional"

    # HTTP
    api_prefix: str = "/api/v1/internal"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Credential & grants
    internal_account_id: int = 1
    internal_user_id: int = 1
    permissions: dict[str, list[str]] = _full_access()

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v):
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("permissions")
    @classmethod
    def known_grants_only(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        securables = {s.value for s in Securable}
        kinds = {p.value for p in Permission}
        grants: dict[str, list[str]] = {}
        for securable, granted in v.items():
            key = securable.upper()
            if key not in securables:
                raise ValueError(f"unknown securable: {securable}")
            values = [g.upper() for g in granted]
            unknown = set(values) - kinds
            if unknown:
                raise ValueError(f"unknown permission(s) for {key}: {sorted(unknown)}")
            grants[key] = values
        return grants


@lru_cache
def get_settings() -> Settings:
    return Settings()
