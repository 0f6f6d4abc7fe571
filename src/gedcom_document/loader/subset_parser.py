# src/gedcom_document/loader/subset_parser.py

"""
Generic level-bounded parsing loop shared by every record builder.

A record at level N owns every following line with a level greater than N.
``parse_subset`` walks those lines, hands each recognized standard tag to a
builder-supplied callback, captures ``_``-prefixed tags verbatim, and skips
the whole subtree of any standard tag the callback does not know. It returns
with the tokenizer sitting on the first Level token <= N (or at end of input)
without consuming it, so the caller can continue with its own siblings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from gedcom_document.core.diagnostics import Diagnostic, DiagnosticKind
from gedcom_document.core.exceptions import GedcomStructureError
from gedcom_document.loader.tokenizer import Tokenizer, TokenKind
from gedcom_document.logging import get_logger

log = get_logger(__name__)

# handler(tag, line_level) -> True when the tag was recognized and consumed.
TagHandler = Callable[[str, int], bool]


@dataclass(slots=True)
class UserDefinedData:
    """
    Lossless capture of a user-defined (``_``-prefixed) tag.

    Children are captured recursively, whatever their tags, so vendor
    extensions survive even when nothing models them.
    """
    tag: str
    value: Optional[str] = None
    children: List["UserDefinedData"] = field(default_factory=list)

    def find_first(self, tag: str) -> Optional["UserDefinedData"]:
        """Return the first direct child with this tag, or None."""
        for child in self.children:
            if child.tag == tag:
                return child
        return None


# ---------------------------------------------------------------------------
# Diagnostics / recovery
# ---------------------------------------------------------------------------

def report(
    tokenizer: Tokenizer,
    kind: DiagnosticKind,
    message: str,
    *,
    tag: Optional[str] = None,
    context: Optional[str] = None,
) -> Diagnostic:
    """Record a recoverable condition on the tokenizer and log it."""
    diagnostic = Diagnostic(
        kind=kind,
        line=tokenizer.line,
        message=message,
        tag=tag,
        context=context,
    )
    tokenizer.diagnostics.append(diagnostic)
    log.warning("%s", diagnostic)
    return diagnostic


def skip_block(tokenizer: Tokenizer, level: int) -> int:
    """
    Discard tokens until a Level token <= ``level`` (or end of input).

    Returns the number of nested lines that were skipped.
    """
    skipped = 0
    while not tokenizer.is_finished():
        token = tokenizer.current_token
        if token.is_level(at_most=level):
            break
        if token.is_level():
            skipped += 1
        tokenizer.advance()
    return skipped


def skip_unrecognized(tokenizer: Tokenizer, tag: str, line_level: int, context: str) -> None:
    """
    Recovery path for a standard tag a builder does not handle: drop the
    tag's whole subtree and keep parsing with its next sibling.
    """
    if tokenizer.strict:
        raise GedcomStructureError(f"Unhandled {context} tag: {tag}", line=tokenizer.line)

    report(
        tokenizer,
        DiagnosticKind.UNKNOWN_TAG,
        f"Skipping unhandled {context} tag {tag}",
        tag=tag,
        context=context,
    )
    skip_block(tokenizer, line_level)


def report_dropped_custom(
    tokenizer: Tokenizer,
    custom_data: List[UserDefinedData],
    context: str,
) -> None:
    """Report user-defined tags found under a structure that cannot hold them."""
    for data in custom_data:
        report(
            tokenizer,
            DiagnosticKind.UNKNOWN_TAG,
            f"Dropping user-defined tag {data.tag} inside {context}",
            tag=data.tag,
            context=context,
        )


def skip_duplicate(tokenizer: Tokenizer, tag: str, line_level: int, context: str) -> None:
    """Keep the first occurrence of a single-valued tag and drop the repeat."""
    report(
        tokenizer,
        DiagnosticKind.DUPLICATE,
        f"Ignoring repeated {context} tag {tag}",
        tag=tag,
        context=context,
    )
    skip_block(tokenizer, line_level)


# ---------------------------------------------------------------------------
# Custom tags
# ---------------------------------------------------------------------------

def parse_custom_tag(tokenizer: Tokenizer, level: int) -> UserDefinedData:
    """
    Capture the tag under the cursor, its value and its nested lines.

    ``level`` is the depth of the line holding the tag. Returns with the
    tokenizer on the first Level token <= ``level``.
    """
    node = UserDefinedData(tag=tokenizer.current_token.text)
    tokenizer.advance()

    if tokenizer.current_token.kind is TokenKind.LINE_VALUE:
        node.value = tokenizer.current_token.text
        tokenizer.advance()

    while tokenizer.current_token.is_level() and tokenizer.current_token.depth > level:
        child_level = tokenizer.current_token.depth
        tokenizer.advance()

        current = tokenizer.current_token
        if current.kind not in (TokenKind.TAG, TokenKind.CUSTOM_TAG):
            raise GedcomStructureError(
                f"Expected a tag inside {node.tag}, found {current}",
                line=tokenizer.line,
            )
        node.children.append(parse_custom_tag(tokenizer, child_level))

    return node


# ---------------------------------------------------------------------------
# Generic subset loop
# ---------------------------------------------------------------------------

def parse_subset(
    tokenizer: Tokenizer,
    level: int,
    handler: TagHandler,
    *,
    context: str = "record",
) -> List[UserDefinedData]:
    """
    Parse the children of the structure at ``level``.

    Args:
        tokenizer: Positioned just past the owner's own tag/value.
        level: Depth of the owning structure.
        handler: Called with (tag, depth of the tag's line) for each standard
            child tag. It consumes what it recognizes and returns True, or
            returns False without consuming anything.
        context: Name of the owner, used in diagnostics.

    Returns:
        The user-defined tags found among the direct children.

    A handler that reads only a leaf value (``take_line_value``) leaves any
    lines nested under that leaf in the stream. This loop then treats them
    as children of the owner, so "1 CHIL @I1@ / 2 NOTE x" gives the family
    a note. Handlers that expect nested lines parse them with their own
    ``parse_subset`` call.
    """
    custom_data: List[UserDefinedData] = []

    while True:
        token = tokenizer.current_token

        if token.kind is TokenKind.LEVEL:
            if token.depth <= level:
                break
            tokenizer.advance()
            continue

        if token.kind is TokenKind.EOF:
            break

        line_level = tokenizer.current_level
        if token.kind is TokenKind.TAG:
            if not handler(token.text, line_level):
                skip_unrecognized(tokenizer, token.text, line_level, context)
        elif token.kind is TokenKind.CUSTOM_TAG:
            custom_data.append(parse_custom_tag(tokenizer, line_level))
        else:
            raise GedcomStructureError(
                f"Unhandled {context} token: {token}",
                line=tokenizer.line,
            )

    return custom_data
