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

from staffctl.domain.employee import COLUMN_HEADERS
from staffctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from staffctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    salary_decimals: int = 2,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, salary_decimals=salary_decimals)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)
    if result.op == "count":
        return str(result.data.get("count", 0))
    if result.op == "add":
        return str(result.data.get("id", ""))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="staff.ok")
    op = Text(f"  {result.op}", style="staff.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="staff.key")
    if key == "id":
        v = Text(str(value), style="staff.id")
    elif key == "path":
        v = Text(str(value), style="staff.path")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _format_salary(value: Any, decimals: int) -> str:
    if isinstance(value, (int, float)):
        return f"{float(value):.{decimals}f}"
    return str(value)


def employee_table(rows: list[dict[str, Any]], *, salary_decimals: int = 2) -> Table:
    """Build a Rich Table with one row per employee record."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for key, header in COLUMN_HEADERS.items():
        if key == "id":
            table.add_column(header, style="staff.id", no_wrap=True, justify="right")
        elif key in ("age", "basic_salary"):
            style = "staff.money" if key == "basic_salary" else ""
            table.add_column(header, style=style, justify="right")
        else:
            table.add_column(header)

    for row in rows:
        cells: list[str] = []
        for key in COLUMN_HEADERS:
            value = row.get(key, "")
            if key == "basic_salary":
                cells.append(_format_salary(value, salary_decimals))
            else:
                cells.append(str(value))
        table.add_row(*cells)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="staff.error")
    op = Text(f"  {result.op}", style="staff.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, **kwargs: Any) -> None:
    """Render add/delete results."""
    _status_line(console, result)
    _field(console, "id", result.data.get("id", ""))
    record = result.data.get("record") or {}
    name = " ".join(str(record.get(k, "")) for k in ("first_name", "last_name")).strip()
    if name:
        _field(console, "name", name)


def _render_modify(result: ServiceResult, console: Console, **kwargs: Any) -> None:
    """Render a modify report: what changed, what was rejected."""
    _status_line(console, result)
    _field(console, "id", result.data.get("id", ""))
    changed = result.data.get("fields_changed", [])
    _field(console, "fields_changed", ", ".join(changed) if changed else "(none)")
    for rejected in result.data.get("fields_rejected", []):
        console.print(
            f"  [staff.warning]rejected[/staff.warning] {rejected['field']}: "
            f"{rejected['message']}"
        )


# ── Query renderers ───────────────────────────────────────────────────


def _render_single(
    result: ServiceResult,
    console: Console,
    *,
    salary_decimals: int = 2,
    **kwargs: Any,
) -> None:
    console.print(employee_table([result.data], salary_decimals=salary_decimals))


def _render_records(
    result: ServiceResult,
    console: Console,
    *,
    salary_decimals: int = 2,
    **kwargs: Any,
) -> None:
    """Render search or list results as a table."""
    items = result.data.get("items", [])
    if not items:
        empty = "No matching records found." if result.op == "search" else "No records found."
        console.print(empty)
        return
    heading = "Search Results:" if result.op == "search" else "All Employee Records:"
    console.print(Text(heading, style="bold"))
    console.print(employee_table(items, salary_decimals=salary_decimals))
    console.print(f"\n{result.data.get('count', len(items))} records")


def _render_count(result: ServiceResult, console: Console, **kwargs: Any) -> None:
    console.print(f"Total number of records: {result.data.get('count', 0)}")


def _render_storage(result: ServiceResult, console: Console, **kwargs: Any) -> None:
    """Render load/save results."""
    _status_line(console, result)
    _field(console, "path", result.data.get("path", ""))
    _field(console, "count", result.data.get("count", 0))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, **kwargs: Any) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "add": _render_mutation,
    "delete": _render_mutation,
    "modify": _render_modify,
    # Queries
    "get": _render_single,
    "search": _render_records,
    "list": _render_records,
    "count": _render_count,
    # Storage
    "load": _render_storage,
    "save": _render_storage,
}
