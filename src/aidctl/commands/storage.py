"""Command: create storage directories."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aidctl.commands._base import AidCommand

if TYPE_CHECKING:
    from aidctl.commands._context import AppContext


@click.command(
    "init-storage",
    cls=AidCommand,
    examples="""\
  aidctl init-storage
  AIDCTL_STORAGE__ROOT=/srv/aid aidctl init-storage""",
)
@click.pass_obj
def init_storage(app: AppContext) -> None:
    """Create the storage root and its subdirectories."""
    from aidctl.services.storage import StorageService

    app.emit(StorageService(app.settings).init_storage())
