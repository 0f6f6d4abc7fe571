"""
Error taxonomy shared by the loader, the record builders and the CLI.
"""

from gedcom_document.core.diagnostics import Diagnostic, DiagnosticKind
from gedcom_document.core.exceptions import (
    GedcomError,
    GedcomStructureError,
    GedcomSyntaxError,
    ParseExecutionError,
)

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "GedcomError",
    "GedcomStructureError",
    "GedcomSyntaxError",
    "ParseExecutionError",
]
