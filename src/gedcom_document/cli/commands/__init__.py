"""
CLI command modules for gedcom_document.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_document.cli.commands.export import export_command
from gedcom_document.cli.commands.stats import stats_command
from gedcom_document.cli.commands.tokens import tokens_command

__all__ = [
    "export_command",
    "stats_command",
    "tokens_command",
]
