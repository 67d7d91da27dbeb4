"""Render ServiceResult for humans or machines.

JSON mode prints the result envelope with sorted keys; human mode uses
Rich for a status line followed by the payload; quiet mode prints one
line.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from recipekit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from recipekit.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _render_value(console: Console, key: str, value: Any, indent: int) -> None:
    pad = "  " * indent
    if isinstance(value, dict):
        console.print(Text(f"{pad}{key}:", style="rk.key"))
        for sub_key in sorted(value):
            _render_value(console, sub_key, value[sub_key], indent + 1)
    elif isinstance(value, list):
        console.print(Text(f"{pad}{key}:", style="rk.key"))
        for item in value:
            rendered = json.dumps(item, ensure_ascii=False) if isinstance(item, (dict, list)) else item
            console.print(f"{pad}  - {rendered}", markup=False)
    else:
        console.print(Text(f"{pad}{key}: ", style="rk.key"), Text(str(value)), sep="")


def render_human(result: ServiceResult, *, verbose: bool = False) -> str:
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="rk.ok"), Text(result.op, style="rk.op"))
        for key in sorted(result.data):
            _render_value(console, key, result.data[key], indent=1)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            Text("ERROR", style="rk.error"), Text(result.op, style="rk.op"), Text(message)
        )
        if verbose and result.error and result.error.detail:
            for key in sorted(result.error.detail):
                _render_value(console, key, result.error.detail[key], indent=1)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    if result.ok:
        return f"OK: {result.op}"
    message = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op}: {message}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the human renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return json.dumps(result.model_dump(mode="json"), indent=2, sort_keys=True, ensure_ascii=False)
    if settings.quiet:
        return render_quiet(result)
    return render_human(result, verbose=settings.verbose)
