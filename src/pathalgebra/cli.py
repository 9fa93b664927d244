"""
pathalgebra CLI

Thin Typer commands over the path algebra:
- normalize: Normalize paths
- relative: Express a path relative to another
- is-parent: Ancestor test between two paths
- parent: Normalized parent of a path
- expand: Absolute, normalized, ~-expanded path
- segments: Show the segments of a path
- sort: Sort paths in natural filename order
- collate: Compare two strings in natural order
"""
from __future__ import annotations

import logging
import sys
import typer
from typing import List, Optional

from .absolute import expand as _expand
from .cli_context import CLIContext
from .collate import collate as _collate
from .models import load_sort_spec
from .operations import run_and_exit
from .operations.printers import (
    print_bool, print_ordering, print_paths, print_segments
)
from .ordering import sort_filenames
from .relative import is_parent as _is_parent, make_relative, parent as _parent
from .segments import normalize as _normalize, normalize_segments, segment

app = typer.Typer(name="pathalgebra", help="pathalgebra CLI")

@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging")
) -> None:
    """Path normalization, relative paths and natural filename ordering."""
    if verbose:
        level = logging.DEBUG
    else:
        level = run_and_exit(lambda: CLIContext.from_env().settings.log_level_value)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

@app.command()
def normalize(
    paths: List[str] = typer.Argument(..., help="Paths to normalize")
) -> None:
    """Normalize paths by resolving '.' and '..' segments."""

    def _run() -> None:
        print_paths(_normalize(path) for path in paths)

    run_and_exit(_run)

@app.command()
def relative(
    path: str = typer.Argument(..., help="Path to express"),
    to: Optional[str] = typer.Option(None, "--to", help="Reference directory (default: current directory)")
) -> None:
    """Express a path relative to a reference directory."""

    def _run() -> None:
        print_paths([make_relative(path, to)])

    run_and_exit(_run)

@app.command("is-parent")
def is_parent(
    p1: str = typer.Argument(..., help="Candidate ancestor"),
    p2: str = typer.Argument(..., help="Candidate descendant")
) -> None:
    """Check whether P1 is (or could be) an ancestor of P2; exits 1 when not."""
    result = run_and_exit(lambda: _is_parent(p1, p2))
    print_bool(result)
    if not result:
        raise typer.Exit(code=1)

@app.command()
def parent(
    path: str = typer.Argument(..., help="Path whose parent to show")
) -> None:
    """Show the normalized parent directory of a path."""

    def _run() -> None:
        print_paths([_parent(path)])

    run_and_exit(_run)

@app.command()
def expand(
    path: str = typer.Argument(..., help="Path to expand"),
    from_dir: str = typer.Option(".", "--from", help="Base directory for relative paths")
) -> None:
    """Expand '~', anchor to a base directory and normalize."""

    def _run() -> None:
        print_paths([_expand(path, from_dir)])

    run_and_exit(_run)

@app.command()
def segments(
    path: str = typer.Argument(..., help="Path to split"),
    normalized: bool = typer.Option(False, "--normalized", help="Normalize before showing")
) -> None:
    """Show the segments of a path."""

    def _run() -> None:
        segs = segment(path)
        if normalized:
            segs = normalize_segments(segs)
        print_segments(path, segs)

    run_and_exit(_run)

@app.command()
def sort(
    paths: Optional[List[str]] = typer.Argument(None, help="Paths to sort (default: read lines from stdin)"),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Sort in descending order"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML file with extension_groups")
) -> None:
    """Sort paths in natural filename order, keeping related extensions together."""

    def _run() -> None:
        if config is not None:
            table = load_sort_spec(config).to_table()
        else:
            table = CLIContext.from_env().extension_table

        items = paths if paths else [line.rstrip("\n") for line in sys.stdin if line.strip()]
        print_paths(sort_filenames(items, table, reverse=reverse))

    run_and_exit(_run)

@app.command()
def collate(
    a: str = typer.Argument(..., help="Left string"),
    b: str = typer.Argument(..., help="Right string")
) -> None:
    """Compare two strings in natural order."""

    def _run() -> None:
        print_ordering(a, b, _collate(a, b))

    run_and_exit(_run)

def main() -> None:
    """CLI entry point."""
    app()

if __name__ == "__main__":
    main()
