
from __future__ import annotations

import typer

from gedcom_document.cli.commands.export import export_command
from gedcom_document.cli.commands.stats import stats_command
from gedcom_document.cli.commands.tokens import tokens_command

app = typer.Typer(
    name="gedcom",
    help="GEDCOM parser, inspector, and exporter",
    add_completion=False,
)

app.command("export")(export_command)
app.command("stats")(stats_command)
app.command("tokens")(tokens_command)


def main():
    app()


if __name__ == "__main__":
    main()
