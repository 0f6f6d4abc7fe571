# src/gedcom_document/loader/value_reconstructor.py

"""
Value Reconstructor: line values and CONT / CONC continuation.

Rules (GEDCOM 5.5.1):
    - CONT: Append a newline + the text.
            Always produces a new line in the logical output.

    - CONC: Append the text to the current line. With ConcPolicy.DIRECT
            nothing is inserted; with ConcPolicy.SPACED a single space is.

Examples:
    1 NOTE Line o
    2 CONC ne and more
    2 CONT Second line
        → "Line one and more\nSecond line"   (DIRECT)

Leading whitespace of a value is dropped by the tokenizer, so a CONC line
cannot start with a space; under DIRECT, split words mid-word.

Every caller names the CONC policy of the field it is filling.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from gedcom_document.core.exceptions import GedcomStructureError
from gedcom_document.loader.subset_parser import (
    UserDefinedData,
    parse_subset,
    report_dropped_custom,
)
from gedcom_document.loader.tokenizer import Tokenizer, TokenKind

CONTINUATION_TAGS = frozenset({"CONT", "CONC"})


class ConcPolicy(Enum):
    DIRECT = "direct"
    SPACED = "spaced"


def take_line_value(tokenizer: Tokenizer) -> str:
    """
    Advance past the current tag and return its required line value.

    Leaves the tokenizer on the token following the value.
    """
    tag = tokenizer.current_token
    tokenizer.advance()

    token = tokenizer.current_token
    if token.kind is not TokenKind.LINE_VALUE:
        raise GedcomStructureError(
            f"Expected LineValue after {tag}, found {token}",
            line=tokenizer.line,
        )
    tokenizer.advance()
    return token.text


def take_optional_value(tokenizer: Tokenizer) -> Optional[str]:
    """Advance past the current tag and its line value, if it has one."""
    tokenizer.advance()

    token = tokenizer.current_token
    if token.kind is not TokenKind.LINE_VALUE:
        return None
    tokenizer.advance()
    return token.text


class ContinuedText:
    """
    Accumulates a value and its CONT/CONC continuation lines.

    Builders whose structure carries other children besides the
    continuation lines (ADDR, NOTE, TEXT ...) call ``handle`` first from
    their own tag handler. Constructing it consumes the owner's line value
    unless ``take_value`` is False.
    """

    def __init__(self, tokenizer: Tokenizer, conc: ConcPolicy, *, take_value: bool = True) -> None:
        self.tokenizer = tokenizer
        self.conc = conc
        self.parts: List[str] = []
        self.has_value = False

        if take_value:
            first = take_optional_value(tokenizer)
            if first is not None:
                self.parts.append(first)
                self.has_value = True

    def handle(self, tag: str) -> bool:
        if tag == "CONT":
            self.parts.append("\n")
        elif tag == "CONC":
            if self.conc is ConcPolicy.SPACED:
                self.parts.append(" ")
        else:
            return False

        value = take_optional_value(self.tokenizer)
        if value:
            self.parts.append(value)
        self.has_value = True
        return True

    @property
    def text(self) -> Optional[str]:
        """The joined text, or None when neither the line nor a continuation had one."""
        if not self.has_value:
            return None
        return "".join(self.parts)


def take_continued_text(
    tokenizer: Tokenizer,
    level: int,
    conc: ConcPolicy,
    *,
    user_defined: Optional[List[UserDefinedData]] = None,
    context: str = "text",
) -> str:
    """
    Return the value of the current line joined with its continuation lines.

    Stops at the first Level token <= ``level``. Standard child tags other
    than CONT/CONC are skipped with a diagnostic; user-defined children are
    appended to ``user_defined`` when a list is given.
    """
    text = ContinuedText(tokenizer, conc)

    def handle(tag: str, line_level: int) -> bool:
        return text.handle(tag)

    custom = parse_subset(tokenizer, level, handle, context=context)
    if user_defined is not None:
        user_defined.extend(custom)
    else:
        report_dropped_custom(tokenizer, custom, context)

    return text.text or ""
