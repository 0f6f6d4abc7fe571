"""
NOTE, source citations and CHAN.

These three reference each other (a note cites sources, a citation carries
notes, a change date carries a note), so they live together.
"""

from __future__ import annotations

from typing import Optional

from gedcom_document.loader.subset_parser import parse_subset
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import (
    ConcPolicy,
    ContinuedText,
    take_continued_text,
    take_line_value,
    take_optional_value,
)
from gedcom_document.records.build_common import (
    build_date,
    build_multimedia_link,
    build_translation,
    build_user_reference,
)
from gedcom_document.records.entities import (
    ChangeDate,
    Note,
    SourceCitation,
    SourceCitationData,
)


def build_note(tokenizer: Tokenizer, level: int, xref: Optional[str] = None) -> Note:
    """
    Parse a NOTE, inline or as a level-0 record.

    The value and its CONT/CONC lines become ``Note.value``; a pointer value
    ("1 NOTE @N1@") is kept as-is.
    """
    note = Note(xref=xref)
    text = ContinuedText(tokenizer, ConcPolicy.DIRECT)

    def handle(tag: str, line_level: int) -> bool:
        if text.handle(tag):
            return True
        if tag == "MIME":
            note.mime = take_line_value(tokenizer)
        elif tag == "TRAN":
            note.translation = build_translation(tokenizer, line_level)
        elif tag == "SOUR":
            note.citations.append(build_source_citation(tokenizer, line_level))
        elif tag == "LANG":
            note.language = take_line_value(tokenizer)
        elif tag == "REFN":
            note.user_reference_numbers.append(build_user_reference(tokenizer, line_level))
        elif tag == "RIN":
            note.automated_record_id = take_line_value(tokenizer)
        elif tag == "CHAN":
            note.change_date = build_change_date(tokenizer, line_level)
        else:
            return False
        return True

    note.custom_data = parse_subset(tokenizer, level, handle, context="Note")
    note.value = text.text
    return note


def build_source_citation(tokenizer: Tokenizer, level: int) -> SourceCitation:
    """
    SOUR inside another structure.

    Usually "n SOUR @S1@"; a free-text source description (with CONT/CONC)
    is accepted in the same slot.
    """
    citation = SourceCitation()
    text = ContinuedText(tokenizer, ConcPolicy.DIRECT)

    def handle(tag: str, line_level: int) -> bool:
        if text.handle(tag):
            return True
        if tag == "PAGE":
            citation.page = take_line_value(tokenizer)
        elif tag == "DATA":
            citation.data = build_citation_data(tokenizer, line_level)
        elif tag == "QUAY":
            citation.quality = take_line_value(tokenizer)
        elif tag == "NOTE":
            citation.notes.append(build_note(tokenizer, line_level))
        elif tag == "OBJE":
            citation.multimedia.append(build_multimedia_link(tokenizer, line_level))
        else:
            return False
        return True

    citation.custom_data = parse_subset(tokenizer, level, handle, context="SourceCitation")
    citation.xref = text.text or ""
    return citation


def build_citation_data(tokenizer: Tokenizer, level: int) -> SourceCitationData:
    data = SourceCitationData()
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "DATE":
            data.date = build_date(tokenizer, line_level)
        elif tag == "TEXT":
            data.text = take_continued_text(
                tokenizer, line_level, ConcPolicy.DIRECT, context="SourceCitationData.TEXT"
            )
        else:
            return False
        return True

    data.custom_data = parse_subset(tokenizer, level, handle, context="SourceCitationData")
    return data


def build_change_date(tokenizer: Tokenizer, level: int) -> ChangeDate:
    change = ChangeDate()
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "DATE":
            change.date = build_date(tokenizer, line_level)
        elif tag == "NOTE":
            change.note = build_note(tokenizer, line_level)
        else:
            return False
        return True

    change.custom_data = parse_subset(tokenizer, level, handle, context="ChangeDate")
    return change
