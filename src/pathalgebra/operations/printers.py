"""
Human-readable output formatting.

Centralizes all CLI output formatting so commands stay thin. Plain results go
to stdout through typer; tables and errors are rendered with Rich.
"""
from __future__ import annotations

import typer
from typing import Iterable, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..segments import CURRENT, PARENT, ROOT

_console = Console()
_err_console = Console(stderr=True)

def print_paths(paths: Iterable[str]) -> None:
    """Print one path per line."""
    for path in paths:
        typer.echo(path)

def print_bool(value: bool) -> None:
    typer.echo("true" if value else "false")

def print_ordering(a: str, b: str, result: int) -> None:
    """
    Print a comparison result as ``a < b``, ``a = b`` or ``a > b``.
    
    Args:
        a: Left operand
        b: Right operand
        result: -1, 0 or 1
    """
    symbol = {-1: "<", 0: "=", 1: ">"}[result]
    typer.echo(f"{a} {symbol} {b}")

def segment_kind(seg: str) -> str:
    """Logical kind of a segment: root, current, parent or name."""
    if seg == ROOT:
        return "root"
    if seg == CURRENT:
        return "current"
    if seg == PARENT:
        return "parent"
    return "name"

def print_segments(path: str, segments: List[str]) -> None:
    """
    Print the segments of a path as a table.
    
    Args:
        path: Path the segments came from (used as the table title)
        segments: Segment list
    """
    if not segments:
        _console.print(f"[bold]{escape(repr(path))}[/] has no segments")
        return
    
    table = Table(title=path)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Segment", style="yellow")
    
    for idx, seg in enumerate(segments):
        table.add_row(str(idx), segment_kind(seg), seg)
    
    _console.print(table)

def print_error(exc: BaseException) -> None:
    """Print an error message to stderr."""
    _err_console.print(f"[bold red]Error:[/] {escape(str(exc))}", highlight=False)
