"""Commands: validate identifiers and browse the prefix registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aidctl.commands._base import AidCommand

if TYPE_CHECKING:
    from aidctl.commands._context import AppContext


@click.command(
    cls=AidCommand,
    examples="""\
  aidctl validate g-a1b2c3
  aidctl --json validate g-a1b2c3 G-a1b2c3 a-d4e5f6""",
)
@click.argument("aids", nargs=-1, required=True)
@click.pass_obj
def validate(app: AppContext, aids: tuple[str, ...]) -> None:
    """Check AIDS for well-formedness. Exits 1 if any is malformed."""
    from aidctl.services.ids import IdService

    app.emit(IdService(app.generator).validate(aids))


@click.command(cls=AidCommand, examples="  aidctl describe G")
@click.argument("letter")
@click.pass_obj
def describe(app: AppContext, letter: str) -> None:
    """Show the entity type registered for LETTER."""
    from aidctl.services.ids import IdService

    app.emit(IdService(app.generator).describe(letter))


@click.command(cls=AidCommand, examples="  aidctl prefixes\n  aidctl --json prefixes")
@click.pass_obj
def prefixes(app: AppContext) -> None:
    """List every registered prefix and its entity type."""
    from aidctl.services.ids import IdService

    app.emit(IdService(app.generator).list_prefixes())
