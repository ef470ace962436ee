"""Output formatting for request results.

Supports a rich key/value table for terminals and JSON for scripting.
"""

import json
from io import StringIO
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from ...models.response import ResponseResult


def format_result(result: ResponseResult, fmt: str = "table", no_color: bool = False) -> None:
    """Print a result to stdout in the requested format."""
    if fmt == "json":
        text = _format_json(result.model_dump(mode="json"))
    else:
        text = _format_table(result, no_color=no_color)
    click.echo(text)


def _format_json(data: Any) -> str:
    return json.dumps(data, indent=2, default=str)


def _format_table(result: ResponseResult, no_color: bool = False) -> str:
    table = Table(show_header=True, header_style="bold")
    table.add_column("field")
    table.add_column("value")

    table.add_row("success", str(result.success).lower())
    table.add_row("status_code", str(result.status_code))
    table.add_row("elapsed_seconds", f"{result.elapsed_seconds:.3f}")
    if result.error_message:
        table.add_row("error", result.error_message)
    for name, value in result.headers.items():
        table.add_row(f"header:{name}", value)
    table.add_row("body", result.body)

    buffer = StringIO()
    console = Console(file=buffer, force_terminal=not no_color, width=120)
    console.print(table)
    return buffer.getvalue()
