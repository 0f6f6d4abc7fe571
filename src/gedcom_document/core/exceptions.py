from __future__ import annotations

from typing import Optional


class GedcomError(Exception):
    """Base class for fatal GEDCOM parsing failures."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        self.message = message
        super().__init__(f"line {line}: {message}" if line is not None else message)


class GedcomSyntaxError(GedcomError, ValueError):
    """Raised when a token is requested in a lexer state that forbids it."""


class GedcomStructureError(GedcomError):
    """Raised when hierarchical structure rules are violated."""


class ParseExecutionError(Exception):
    """Raised when a parse driven from the CLI or pipeline fails."""
