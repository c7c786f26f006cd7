"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, aidctl.toml only contains overrides.
An empty or missing file yields a fully usable configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from aidctl.domain.generator import DEFAULT_MAX_ATTEMPTS

DatabaseType = Literal["sqlite", "postgresql", "mysql"]


class IdsConfig(BaseModel):
    """[ids] section."""

    model_config = {"frozen": True}

    max_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1)
    seed: int | None = None


class DatabaseConfig(BaseModel):
    """[database] section.

    SQLite only needs ``path`` (relative paths resolve against the project
    root). Server databases need ``host``, ``port`` and ``database``.
    """

    model_config = {"frozen": True}

    type: DatabaseType = "sqlite"
    path: str | None = "data/aidctl.db"
    host: str | None = None
    port: int | None = None
    username: str | None = None
    password: str | None = None
    database: str | None = None
    ssl: bool = False

    @model_validator(mode="after")
    def _check_connection_fields(self) -> DatabaseConfig:
        if self.type == "sqlite":
            if not self.path:
                msg = "sqlite database requires 'path'"
                raise ValueError(msg)
            return self
        missing = [name for name in ("host", "port", "database") if not getattr(self, name)]
        if missing:
            msg = f"{self.type} database requires {', '.join(repr(m) for m in missing)}"
            raise ValueError(msg)
        return self


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    root: str = "storage"
    subdirs: tuple[str, ...] = ("database", "logs", "config", "backups")


# --- Top-level config ---


class AidConfig(BaseModel):
    """Root configuration model matching aidctl.toml structure."""

    model_config = {"frozen": True}

    ids: IdsConfig = Field(default_factory=IdsConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
