"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from aidctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from aidctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Generated identifiers print one per line so they can be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    ids = result.data.get("ids")
    if ids:
        return "\n".join(ids)
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="aid.ok")
    op = Text(f"  {result.op}", style="aid.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="aid.key")
    if key in ("id", "ids"):
        v = Text(str(value), style="aid.id")
    elif key == "prefix":
        v = Text(str(value), style="aid.prefix")
    elif key in ("path", "root"):
        v = Text(str(value), style="aid.path")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="aid.error")
    op = Text(f"  {result.op}", style="aid.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if result.op == "validate" and result.data.get("items"):
        console.print(_validation_table(result.data["items"]))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Identifier renderers ──────────────────────────────────────────────


def _render_generated(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render generate / generate_goal / generate_document results."""
    _status_line(console, result)
    d = result.data
    ids = d.get("ids") or [d["id"]]
    for key in ("prefix", "description", "title"):
        if key in d:
            _field(console, key, d[key])
    for aid in ids:
        _field(console, "id", aid)
    if verbose:
        _render_meta(console, result)


def _validation_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="aid.id", no_wrap=True)
    table.add_column("Valid")
    table.add_column("Prefix", style="aid.prefix")
    table.add_column("Entity Type")
    for item in items:
        valid = bool(item.get("valid"))
        table.add_row(
            str(item.get("id", "")),
            Text("yes", style="aid.valid") if valid else Text("no", style="aid.invalid"),
            str(item.get("prefix") or ""),
            str(item.get("description") or ""),
        )
    return table


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    console.print(_validation_table(result.data.get("items", [])))
    if verbose:
        _render_meta(console, result)


def _render_prefixes(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the registry as a two-column table."""
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Prefix", style="aid.prefix", no_wrap=True)
    table.add_column("Entity Type")
    for item in result.data.get("items", []):
        table.add_row(str(item["prefix"]), str(item["description"]))
    console.print(table)


# ── Storage / database renderers ──────────────────────────────────────


def _render_init_storage(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "root", d.get("root", ""))
    created = d.get("created", [])
    existing = d.get("existing", [])
    _field(console, "created", len(created))
    _field(console, "existing", len(existing))
    if verbose:
        for path in created:
            console.print(f"    + {path}")
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Identifiers
    "generate": _render_generated,
    "generate_goal": _render_generated,
    "generate_document": _render_generated,
    "validate": _render_validate,
    "list_prefixes": _render_prefixes,
    "describe": _render_generic,
    # Storage / database
    "init_storage": _render_init_storage,
    "db_info": _render_generic,
    "db_init": _render_generic,
}
