# src/gedcom_document/records/build_document.py

"""
Document assembler.

Reads level-0 lines one at a time, hands each record to the builder for its
tag and stops at TRLR:

    expect level 0 -> optional pointer -> tag -> dispatch

Builders return with the tokenizer on the next level-0 line, so the loop
never has to look inside a record.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from gedcom_document.core.diagnostics import DiagnosticKind
from gedcom_document.core.exceptions import GedcomStructureError
from gedcom_document.loader.subset_parser import parse_custom_tag, report, skip_block
from gedcom_document.loader.tokenizer import Tokenizer, TokenKind
from gedcom_document.logging import get_logger
from gedcom_document.records.build_family import build_family
from gedcom_document.records.build_header import build_header
from gedcom_document.records.build_individual import build_individual
from gedcom_document.records.build_media_object import build_multimedia_record
from gedcom_document.records.build_note import build_note
from gedcom_document.records.build_repository import build_repository
from gedcom_document.records.build_source import build_source
from gedcom_document.records.build_submission import build_submission
from gedcom_document.records.build_submitter import build_submitter
from gedcom_document.records.entities import GedcomDocument

log = get_logger(__name__)

ROOT_LEVEL = 0
TRAILER_TAG = "TRLR"

# tag -> (builder, document collection)
RecordBuilder = Callable[[Tokenizer, int, Optional[str]], object]

RECORD_BUILDERS: Dict[str, tuple[RecordBuilder, str]] = {
    "INDI": (build_individual, "individuals"),
    "FAM": (build_family, "families"),
    "SOUR": (build_source, "sources"),
    "REPO": (build_repository, "repositories"),
    "SUBM": (build_submitter, "submitters"),
    "SUBN": (build_submission, "submissions"),
    "OBJE": (build_multimedia_record, "multimedia"),
    "NOTE": (build_note, "notes"),
}


def parse_document(tokenizer: Tokenizer) -> GedcomDocument:
    """
    Parse a whole GEDCOM stream into a GedcomDocument.

    Raises:
        GedcomSyntaxError: on a lexical error.
        GedcomStructureError: when a record does not start at level 0, a
            required value is missing, or (strict mode) on any recoverable
            condition that strict parsing refuses.
    """
    document = GedcomDocument()

    if tokenizer.current_token.kind is TokenKind.NONE:
        tokenizer.advance()

    while True:
        token = tokenizer.current_token

        if token.kind is TokenKind.EOF:
            _missing_trailer(tokenizer)
            break

        # expect level
        if not token.is_level():
            raise GedcomStructureError(
                f"Expected a level 0 record, found {token}",
                line=tokenizer.line,
            )
        if token.depth != ROOT_LEVEL:
            raise GedcomStructureError(
                f"Top-level record must start at level 0, found {token}",
                line=tokenizer.line,
            )
        tokenizer.advance()

        # optional pointer
        xref: Optional[str] = None
        if tokenizer.current_token.kind is TokenKind.POINTER:
            xref = tokenizer.current_token.text
            tokenizer.advance()

        # tag + dispatch
        token = tokenizer.current_token
        if token.kind is TokenKind.CUSTOM_TAG:
            document.custom_data.append(parse_custom_tag(tokenizer, ROOT_LEVEL))
            continue
        if token.kind is not TokenKind.TAG:
            raise GedcomStructureError(
                f"Expected a record tag, found {token}",
                line=tokenizer.line,
            )

        tag = token.text
        if tag == TRAILER_TAG:
            log.debug("Reached %s at %s", TRAILER_TAG, tokenizer.debug_location())
            break

        if tag == "HEAD":
            document.header = build_header(tokenizer, ROOT_LEVEL)
        elif tag in RECORD_BUILDERS:
            builder, collection = RECORD_BUILDERS[tag]
            getattr(document, collection).append(builder(tokenizer, ROOT_LEVEL, xref))
        else:
            _skip_record(tokenizer, tag)

    document.diagnostics = list(tokenizer.diagnostics)
    log.info(
        "Parsed document: %s (%d diagnostics)",
        document.counts(),
        len(document.diagnostics),
    )
    return document


def _skip_record(tokenizer: Tokenizer, tag: str) -> None:
    if tokenizer.strict:
        raise GedcomStructureError(f"Unhandled top-level tag: {tag}", line=tokenizer.line)

    report(
        tokenizer,
        DiagnosticKind.UNKNOWN_RECORD,
        f"Skipping unhandled top-level record {tag}",
        tag=tag,
        context="Document",
    )
    skip_block(tokenizer, ROOT_LEVEL)


def _missing_trailer(tokenizer: Tokenizer) -> None:
    if tokenizer.strict:
        raise GedcomStructureError(
            f"Input ended without {TRAILER_TAG}",
            line=tokenizer.line,
        )
    report(
        tokenizer,
        DiagnosticKind.MISSING_TRAILER,
        f"Input ended without {TRAILER_TAG}",
        tag=TRAILER_TAG,
        context="Document",
    )
