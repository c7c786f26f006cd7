"""DatabaseService — inspect and initialize the configured database."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from aidctl.infrastructure.database import (
    build_url,
    init_database,
    is_in_data_dir,
    resolve_sqlite_path,
)
from aidctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from aidctl.config.settings import AidSettings


class DatabaseService:
    """Reports connection details and creates SQLite databases."""

    def __init__(self, settings: AidSettings) -> None:
        self._settings = settings

    def info(self) -> ServiceResult:
        """Describe the configured connection. Passwords are masked."""
        config = self._settings.database
        root = self._settings.project_root
        url = build_url(config, root)
        data: dict[str, Any] = {
            "type": config.type,
            "url": url.render_as_string(hide_password=True),
        }
        warnings: list[str] = []
        if config.type == "sqlite":
            path = resolve_sqlite_path(config, root)
            data["path"] = str(path)
            data["exists"] = path.is_file()
            if not is_in_data_dir(path):
                warnings.append("Database path should be in a data/ directory")
        return ServiceResult(ok=True, op="db_info", data=data, warnings=warnings)

    def init(self) -> ServiceResult:
        """Create the SQLite database file if it does not exist."""
        config = self._settings.database
        if config.type != "sqlite":
            return ServiceResult(
                ok=False,
                op="db_init",
                error=ServiceError(
                    code="UNSUPPORTED",
                    message=f"db init only manages sqlite databases, not {config.type}",
                ),
            )
        try:
            path = init_database(config, self._settings.project_root)
        except (OSError, SQLAlchemyError) as exc:
            return ServiceResult(
                ok=False,
                op="db_init",
                error=ServiceError(code="DB_INIT_FAILED", message=str(exc)),
            )
        warnings: list[str] = []
        if not is_in_data_dir(path):
            warnings.append("Database path should be in a data/ directory")
        return ServiceResult(ok=True, op="db_init", data={"path": str(path)}, warnings=warnings)
