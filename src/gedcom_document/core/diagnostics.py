from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DiagnosticKind(str, Enum):
    UNKNOWN_TAG = "unknown_tag"
    UNKNOWN_RECORD = "unknown_record"
    INVALID_VALUE = "invalid_value"
    DUPLICATE = "duplicate"
    MISSING_TRAILER = "missing_trailer"


@dataclass(frozen=True)
class Diagnostic:
    """
    A recoverable condition met while parsing.

    Attributes:
        kind: What went wrong.
        line: 1-based physical line number the parser was on.
        message: Human readable description.
        tag: The tag involved, if any.
        context: Name of the structure being parsed, e.g. "Individual".
    """
    kind: DiagnosticKind
    line: int
    message: str
    tag: Optional[str] = None
    context: Optional[str] = None

    def __str__(self) -> str:
        return f"line {self.line}: {self.message}"
