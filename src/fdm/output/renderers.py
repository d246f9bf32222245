"""Human-readable rendering of ServiceResult.

Each operation registers a renderer in ``_OP_RENDERERS`` keyed by
``result.op``; anything unregistered is printed as plain key/value lines.
Failures always go through :func:`_render_error`.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from fdm.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from fdm.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Draw *result* with the renderer for its op and return the text."""
    console = create_console()
    if not result.ok:
        _render_error(result, console)
    else:
        _OP_RENDERERS.get(result.op, _render_generic)(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line: ``OK: <op>`` or ``ERROR: <op>: <message>``."""
    if result.ok:
        return f"OK: {result.op}"
    message = result.error.message if result.error else "unknown error"
    return f"ERROR: {result.op}: {message}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="fdm.ok"), Text(f"  {result.op}", style="fdm.op"), sep="")


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="fdm.key"), Text(str(value), style=style), sep="")


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_validate(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "tag", result.data.get("tag"), "fdm.tag")
    _field(console, "value", result.data.get("value"))
    rules = result.data.get("rules") or []
    _field(console, "rules", ", ".join(rules), "fdm.rule")


def _render_variant(console: Console, variant: Any, indent: int = 2) -> None:
    prefix = " " * indent
    if not isinstance(variant, dict):
        console.print(f"{prefix}{variant}")
        return
    name = variant.get("variant", "?")
    console.print(Text(f"{prefix}{name}", style="fdm.variant"))
    for key, value in variant.items():
        if key == "variant":
            continue
        if isinstance(value, dict) and "variant" in value:
            console.print(Text(f"{prefix}  {key}:", style="fdm.key"))
            _render_variant(console, value, indent + 4)
        else:
            console.print(Text(f"{prefix}  {key}: ", style="fdm.key"), Text(str(value)), sep="")


def _render_classify(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "model", result.data.get("model"))
    _render_variant(console, result.data.get("variant"))


def _render_build_person(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _render_variant(console, result.data.get("person"))
    _field(console, "marks", ", ".join(result.data.get("marks", [])), "fdm.mark")


def _render_list_constructors(result: ServiceResult, console: Console) -> None:
    table = Table(title="Smart constructors", show_lines=False)
    table.add_column("Tag", style="fdm.tag")
    table.add_column("Rules", style="fdm.rule")
    table.add_column("Description")
    for item in result.data.get("items", []):
        table.add_row(item["tag"], ", ".join(item["rules"]), item["description"])
    console.print(table)


def _render_error(result: ServiceResult, console: Console) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(Text("ERROR", style="fdm.error"), Text(f"  {result.op}", style="fdm.op"), sep="")
    console.print(Text(f"  {message}"))
    if error is not None:
        _field(console, "code", error.code)
        for key, value in error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "validate": _render_validate,
    "classify": _render_classify,
    "build_person": _render_build_person,
    "list_constructors": _render_list_constructors,
}
