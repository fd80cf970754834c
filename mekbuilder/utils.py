"""Shared helpers for mekbuilder.

Provides the Rich consoles every component prints through, small print
helpers, and JSON file loading.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

# Progress and usage go to stdout, errors to stderr.  Soft wrapping keeps long
# paths on a single line; emoji codes such as ``:name:`` are printed literally.
console = Console(soft_wrap=True, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Unlike a typed loader this returns whatever top-level value the document
    holds; callers decide which shapes they accept.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_info(message: str) -> None:
    """Print a plain progress line."""
    console.print(escape(message))


def print_status(label: str, path: str | Path, *, created: bool) -> None:
    """Print a create/skip decision, e.g. ``Created directory: /tmp/x/Libs``.

    Args:
        label: ``"directory"`` or ``"file"``.
        path: The path the decision was made for.
        created: ``True`` if the path was created, ``False`` if it was left
            untouched because it already existed.
    """
    target = escape(str(path))
    if created:
        console.print(f"[green]Created {label}:[/green] {target}")
    else:
        console.print(f"[dim]{label.capitalize()} already exists:[/dim] {target}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error line to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
