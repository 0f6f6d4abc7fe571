from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcom_document.cli.utils import fail, load_gedcom
from gedcom_document.core.exceptions import ParseExecutionError

console = Console()

ROWS = (
    ("Individuals", "individuals"),
    ("Families", "families"),
    ("Sources", "sources"),
    ("Repositories", "repositories"),
    ("Notes", "notes"),
    ("Media Objects", "multimedia"),
    ("Submitters", "submitters"),
    ("Submissions", "submissions"),
)


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Fail on unknown tags instead of skipping them (default: from config)",
    ),
    show_diagnostics: bool = typer.Option(
        False,
        "--diagnostics",
        "-d",
        help="List every diagnostic after the table",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    try:
        document = load_gedcom(gedcom, strict=strict, verbose=verbose)
    except ParseExecutionError as exc:
        fail(exc)

    counts = document.counts()

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    for label, key in ROWS:
        table.add_row(label, str(counts[key]))
    table.add_row("Diagnostics", str(len(document.diagnostics)))

    console.print(table)

    if show_diagnostics:
        for diagnostic in document.diagnostics:
            console.print(f"{diagnostic.kind.value}: {diagnostic}", markup=False, highlight=False)
