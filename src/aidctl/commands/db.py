"""Command group: database configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aidctl.commands._base import AidGroup

if TYPE_CHECKING:
    from aidctl.commands._context import AppContext


@click.group(
    cls=AidGroup,
    examples="""\
  aidctl db info
  aidctl --json db info
  aidctl db init""",
)
def db() -> None:
    """Inspect and initialize the configured database."""


@db.command(examples="  aidctl db info")
@click.pass_obj
def info(app: AppContext) -> None:
    """Show the connection URL (password masked)."""
    from aidctl.services.database import DatabaseService

    app.emit(DatabaseService(app.settings).info())


@db.command(examples="  aidctl db init")
@click.pass_obj
def init(app: AppContext) -> None:
    """Create the SQLite database file."""
    from aidctl.services.database import DatabaseService

    app.emit(DatabaseService(app.settings).init())
