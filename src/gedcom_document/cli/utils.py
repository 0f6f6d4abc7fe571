
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional

import typer
from rich.console import Console

from gedcom_document.core.exceptions import GedcomError, ParseExecutionError
from gedcom_document.parser_core import GedcomParser
from gedcom_document.records.entities import GedcomDocument

console = Console()
err_console = Console(stderr=True)


def load_gedcom(path: Path, *, strict: Optional[bool] = None, verbose: bool = False) -> GedcomDocument:
    """
    Read and parse a GEDCOM file.

    Fatal parse errors are re-raised as ParseExecutionError so commands can
    report them uniformly.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()
    try:
        document = GedcomParser(strict=strict).parse_file(path)
    except GedcomError as exc:
        raise ParseExecutionError(f"{path}: {exc}") from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return document


def fail(exc: Exception) -> NoReturn:
    """Print a fatal error and exit with status 1."""
    err_console.print(f"[bold red]Error:[/bold red] {exc}", markup=True, highlight=False)
    raise typer.Exit(code=1)


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        typer.echo(payload)
