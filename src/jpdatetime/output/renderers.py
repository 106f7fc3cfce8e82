"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from jpdatetime.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from jpdatetime.services.result import ServiceResult


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


_QUIET_KEYS: dict[str, str] = {
    "show": "date_time_string",
    "shift": "result",
    "compare": "days_diff",
    "new_year": "date",
}


def render_quiet(result: ServiceResult) -> str:
    """Render only the primary value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item) for item in items)

    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in result.data:
        return _plain(result.data[key])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _plain(value: Any) -> str:
    """Render a scalar the way a shell user expects (null, true, false)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "jpdt.ok"), (f"  {result.op}", "jpdt.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="jpdt.key")
    if isinstance(value, bool):
        v = Text(_plain(value), style="jpdt.true" if value else "jpdt.false")
    elif key in ("date", "result"):
        v = Text(str(value), style="jpdt.date")
    else:
        v = Text(_plain(value))
    console.print(Text.assemble(k, v))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="jpdt.error")
    op = Text(f"  {result.op}", style="jpdt.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the format catalogue as a two-column table."""
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Format", style="jpdt.key", no_wrap=True)
    table.add_column("Value", style="jpdt.date")
    for key, value in result.data.items():
        if key == "instant" and not verbose:
            continue
        table.add_row(key, str(value))
    console.print(table)


def _render_slots(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the slot list, one per line."""
    _status_line(console, result)
    _field(console, "date", result.data.get("date", ""))
    for slot in result.data.get("items", []):
        console.print(Text(f"  {slot}", style="jpdt.slot"))
    console.print(f"\n{result.data.get('count', 0)} slots")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line plus one field per data key."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS = {
    "show": _render_show,
    "slots": _render_slots,
}
