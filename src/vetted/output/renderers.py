"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from vetted.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from vetted.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "vetted.ok"), (f"  {result.op}", "vetted.op")))


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(Text.assemble((f"  {key}: ", "vetted.key"), (str(value), "vetted.value")))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "vetted.error"), (f"  {result.op}", "vetted.op"), f" - {msg}")
    )

    for error_id in err.detail.get("errors", []) if err else []:
        console.print(Text(f"  - {error_id}", style="vetted.error_id"))

    invalid = result.data.get("invalid")
    if invalid:
        _render_batch_table(result, console)

    if verbose:
        _render_meta(console, result)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_person(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.get("person", {}).items():
        _field(console, key, value)


def _render_batch_table(result: ServiceResult, console: Console) -> None:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Result")
    table.add_column("Detail")

    rows: list[tuple[int, Text, str]] = []
    for item in result.data.get("valid", []):
        rows.append((item["index"], Text("valid", style="vetted.ok"), json.dumps(item["person"])))
    for item in result.data.get("invalid", []):
        rows.append((item["index"], Text("invalid", style="vetted.error"), ", ".join(item["errors"])))

    for index, label, detail in sorted(rows, key=lambda r: r[0]):
        table.add_row(str(index), label, Text(detail))
    console.print(table)


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _render_batch_table(result, console)
    if verbose:
        _render_meta(console, result)


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Field")
    table.add_column("Kind")
    table.add_column("Bounds")
    table.add_column("Error")
    for rule in result.data.get("rules", []):
        if rule["kind"] == "length":
            bounds = f"[{rule['min_length']}, {rule['max_length']}]"
        else:
            bounds = f"[{rule['minimum']}, {rule['maximum']}]"
        table.add_row(rule["name"], rule["kind"], Text(bounds), rule["error"])
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate_person": _render_person,
    "validate_batch": _render_batch,
    "rules": _render_rules,
}
