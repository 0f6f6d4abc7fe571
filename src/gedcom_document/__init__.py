"""
gedcom_document: parse GEDCOM files into typed, in-memory documents.

    from gedcom_document import parse_file

    document = parse_file("family.ged")
    print(document.counts())
"""

from __future__ import annotations

from gedcom_document.core import (
    Diagnostic,
    DiagnosticKind,
    GedcomError,
    GedcomStructureError,
    GedcomSyntaxError,
)
from gedcom_document.parser_core import GedcomParser, parse, parse_file
from gedcom_document.records.entities import GedcomDocument

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "GedcomDocument",
    "GedcomError",
    "GedcomParser",
    "GedcomStructureError",
    "GedcomSyntaxError",
    "parse",
    "parse_file",
]
