"""Subcommand modules for aidctl.

Provides register_commands() which uses deferred imports to keep
``aidctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from aidctl.commands.db import db

    cli.add_command(db)

    # --- Standalone commands ---
    from aidctl.commands.generate import document, generate, goal
    from aidctl.commands.lookup import describe, prefixes, validate
    from aidctl.commands.storage import init_storage

    cli.add_command(generate)
    cli.add_command(goal)
    cli.add_command(document)
    cli.add_command(validate)
    cli.add_command(describe)
    cli.add_command(prefixes)
    cli.add_command(init_storage)
