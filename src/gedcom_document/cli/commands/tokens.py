from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_document.cli.utils import fail
from gedcom_document.core.exceptions import GedcomError
from gedcom_document.loader.file_loader import load_file
from gedcom_document.loader.tokenizer import Tokenizer


def tokens_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Stop after this many tokens",
    ),
):
    """
    Dump the token stream, one "line: token" per row.
    """
    tokenizer = Tokenizer(load_file(gedcom))
    count = 0

    try:
        tokenizer.advance()
        while not tokenizer.is_finished():
            if limit is not None and count >= limit:
                break
            typer.echo(f"{tokenizer.line:>5}: {tokenizer.current_token}")
            count += 1
            tokenizer.advance()
    except GedcomError as exc:
        fail(exc)
