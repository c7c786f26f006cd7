"""Commands: mint new AIDs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aidctl.commands._base import AidCommand

if TYPE_CHECKING:
    from aidctl.commands._context import AppContext


@click.command(
    cls=AidCommand,
    examples="""\
  aidctl generate G --title "Ship v1"
  aidctl generate P --title "Widget" --kind product --status active
  aidctl -q generate T --title "Draft" -n 5""",
)
@click.argument("prefix")
@click.option("--title", required=True, help="Title of the entity being created.")
@click.option("--kind", default="entity", show_default=True, help="Entity type tag.")
@click.option("--status", default="new", show_default=True, help="Entity status tag.")
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of identifiers to issue.",
)
@click.pass_obj
def generate(
    app: AppContext,
    prefix: str,
    title: str,
    kind: str,
    status: str,
    count: int,
) -> None:
    """Issue new identifiers for PREFIX (a registered uppercase letter)."""
    from aidctl.services.ids import IdService

    svc = IdService(app.generator)
    app.emit(svc.generate(prefix, title, kind=kind, status=status, count=count))


@click.command(cls=AidCommand, examples='  aidctl goal "Launch the beta"')
@click.argument("title")
@click.pass_obj
def goal(app: AppContext, title: str) -> None:
    """Issue a goal identifier (prefix G)."""
    from aidctl.services.ids import IdService

    app.emit(IdService(app.generator).generate_goal(title))


@click.command(cls=AidCommand, examples='  aidctl document "Quarterly report"')
@click.argument("title")
@click.pass_obj
def document(app: AppContext, title: str) -> None:
    """Issue a document identifier (prefix A)."""
    from aidctl.services.ids import IdService

    app.emit(IdService(app.generator).generate_document(title))
