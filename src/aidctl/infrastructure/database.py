"""Database connection resolution.

Turns a ``[database]`` config section into a SQLAlchemy URL and, for
SQLite, an engine with WAL mode enabled. SQLite files live under the
project's ``data/`` directory by default; relative paths resolve
against the project root.

SQLAlchemy Core (not ORM) is used: aidctl only needs connection
handling, not session management.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, Engine

if TYPE_CHECKING:
    from aidctl.config.models import DatabaseConfig

DATA_DIR = "data"


def resolve_sqlite_path(config: DatabaseConfig, project_root: Path) -> Path:
    """Absolute path of the SQLite database file.

    Raises:
        ValueError: If *config* is not a SQLite configuration.
    """
    if config.type != "sqlite" or not config.path:
        msg = "Database path is only available for SQLite databases"
        raise ValueError(msg)
    path = Path(config.path)
    if not path.is_absolute():
        path = project_root / path
    return path


def is_in_data_dir(path: Path) -> bool:
    """Return True if *path* sits somewhere beneath a ``data/`` directory."""
    return DATA_DIR in path.parent.parts


def build_url(config: DatabaseConfig, project_root: Path) -> URL:
    """Build the SQLAlchemy URL for *config*."""
    if config.type == "sqlite":
        return URL.create("sqlite", database=str(resolve_sqlite_path(config, project_root)))

    query: dict[str, str] = {}
    if config.ssl:
        query = {"sslmode": "require"} if config.type == "postgresql" else {"ssl": "true"}
    return URL.create(
        config.type,
        username=config.username,
        password=config.password,
        host=config.host,
        port=config.port,
        database=config.database,
        query=query,
    )


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(URL.create("sqlite", database=str(db_path)), echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(config: DatabaseConfig, project_root: Path) -> Path:
    """Create the SQLite database file and its parent directory.

    Idempotent — safe to call on an existing database. Returns the
    database path.
    """
    db_path = resolve_sqlite_path(config, project_root)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    finally:
        engine.dispose()
    return db_path
