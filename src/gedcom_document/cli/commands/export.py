from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_document.cli.utils import fail, load_gedcom, write_json
from gedcom_document.core.exceptions import ParseExecutionError
from gedcom_document.exporter import build_document_dict

console = Console()


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Fail on unknown tags instead of skipping them (default: from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export GEDCOM data to JSON (stdout by default).
    """
    try:
        document = load_gedcom(gedcom, strict=strict, verbose=verbose)
    except ParseExecutionError as exc:
        fail(exc)

    if verbose:
        console.log("Exporting JSON")

    write_json(build_document_dict(document), out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
