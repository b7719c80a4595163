"""Human-readable rendering of ServiceResult, one layout per operation.

A layout is a list of ``key: value`` fields followed by an optional table
of ``data["items"]``. Operations without a layout print every data key.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, NamedTuple

from rich.table import Table
from rich.text import Text

from socialctl.output.console import render_text

if TYPE_CHECKING:
    from rich.console import Console

    from socialctl.services.result import ServiceResult


class Column(NamedTuple):
    header: str
    key: str
    style: str | None = None
    verbose_only: bool = False


class Layout(NamedTuple):
    fields: tuple[str, ...] = ()
    columns: tuple[Column, ...] = ()
    # Printed instead of the table when there are no items; None prints nothing.
    empty: str | None = None


_USER = Layout(fields=("user_str_id", "display_name", "email", "status", "created_at"))
_EDGE = Layout(fields=("status", "user1_str_id", "user2_str_id", "created_at"))
_NEIGHBORS = Layout(
    fields=("user_id", "count"),
    columns=(Column("ID", "id", "social.id"), Column("Display Name", "display_name", "social.name")),
)

LAYOUTS: dict[str, Layout] = {
    "register_user": _USER,
    "get_user": _USER,
    "list_users": Layout(
        columns=(
            Column("ID", "user_str_id", "social.id"),
            Column("Display Name", "display_name", "social.name"),
            Column("Email", "email"),
            Column("Created", "created_at", "dim", verbose_only=True),
        ),
        empty="No users.",
    ),
    "connect": _EDGE,
    "disconnect": _EDGE,
    "list_connections": Layout(
        columns=(
            Column("User 1", "user1_str_id", "social.id"),
            Column("Name 1", "user1_display_name", "social.name"),
            Column("User 2", "user2_str_id", "social.id"),
            Column("Name 2", "user2_display_name", "social.name"),
            Column("Created", "created_at", "dim"),
        ),
        empty="No connections.",
    ),
    "degree": Layout(fields=("from_user_id", "to_user_id", "degree", "message")),
    "friends": _NEIGHBORS,
    "friends_of_friends": _NEIGHBORS,
}

_VALUE_STYLES = {"display_name": "social.name", "degree": "social.degree"}


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a terminal; plain text when stdout is not a TTY."""

    def draw(console: Console) -> None:
        if not result.ok:
            _draw_error(console, result, verbose=verbose)
            return
        console.print(Text.assemble(("OK", "social.ok"), "  ", (result.op, "social.op")))
        layout = LAYOUTS.get(result.op)
        if layout is None:
            for key, value in result.data.items():
                _draw_field(console, key, value)
        else:
            _draw_layout(console, layout, result.data, verbose=verbose)
        if verbose and result.meta:
            _draw_meta(console, result.meta)

    return render_text(draw).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One value per line for ``--quiet``: ids, the degree, or a status word."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(ident for ident in map(_identity, items) if ident)
    if "degree" in result.data:
        return str(result.data["degree"])
    return f"OK: {result.op}"


def _identity(item: Any) -> str:
    if not isinstance(item, dict):
        return ""
    if "user1_str_id" in item:
        return f"{item['user1_str_id']}-{item['user2_str_id']}"
    return str(item.get("user_str_id") or item.get("id") or "")


def _draw_field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    if key == "id" or key.endswith("_id"):
        style = "social.id"
    else:
        style = _VALUE_STYLES.get(key, "")
    console.print(Text.assemble((f"  {key}: ", "social.key"), (str(value), style)))


def _draw_layout(
    console: Console, layout: Layout, data: dict[str, Any], *, verbose: bool
) -> None:
    for key in layout.fields:
        if data.get(key) is not None:
            _draw_field(console, key, data[key])
    if not layout.columns:
        return

    items = data.get("items") or []
    if not items:
        if layout.empty:
            console.print(f"  {layout.empty}")
        return

    columns = [c for c in layout.columns if verbose or not c.verbose_only]
    table = Table(pad_edge=False)
    for column in columns:
        table.add_column(column.header, style=column.style, no_wrap=column.style == "social.id")
    for item in items:
        table.add_row(*(str(item.get(c.key) or "") for c in columns))
    console.print(table)


def _draw_error(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    err = result.error
    console.print(
        Text.assemble(
            ("ERROR", "social.error"),
            "  ",
            (result.op, "social.op"),
            " — ",
            err.message if err else "Unknown error",
        )
    )
    if verbose and err:
        console.print(Text(f"  code: {err.code} ({err.status})", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for key, value in err.detail.items():
                console.print(f"    {key}: {value}", markup=False)


def _draw_meta(console: Console, meta: dict[str, Any]) -> None:
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in meta.items():
        if key == "telemetry":
            _draw_span(console, value, depth=1)
        else:
            console.print(f"    {key}: {value}", markup=False)


def _draw_span(console: Console, span: dict[str, Any], *, depth: int) -> None:
    """Span tree, one line per span; slow spans are highlighted."""
    duration = float(span.get("duration_ms", 0.0))
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = Text("    " * depth)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _draw_span(console, child, depth=depth + 1)
