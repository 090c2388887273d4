"""Shared utility functions for entity scaffolding.

Provides JSON/YAML document loading and the Rich-based console helpers used
for progress reporting.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Document I/O
# ---------------------------------------------------------------------------


def load_document(path: str | Path) -> Any:
    """Load and parse a JSON or YAML file.

    The format is chosen from the suffix: ``.yaml``/``.yml`` are parsed as
    YAML, everything else as JSON.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If a JSON file is malformed.
        yaml.YAMLError: If a YAML file is malformed.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(raw)
    return json.loads(raw)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_notice(message: str, target: Console | None = None) -> None:
    """Print a plain progress line without markup or wrapping.

    Paths routinely contain ``[`` and run past the terminal width, so the
    text is escaped and soft-wrapped.
    """
    (target or console).print(escape(message), soft_wrap=True, highlight=False)


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
