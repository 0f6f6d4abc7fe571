from __future__ import annotations

from typing import Optional

from gedcom_document.loader.subset_parser import parse_subset, report_dropped_custom
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import (
    ConcPolicy,
    take_continued_text,
    take_line_value,
    take_optional_value,
)
from gedcom_document.records.build_common import build_multimedia_link, build_user_reference
from gedcom_document.records.build_note import build_change_date, build_note
from gedcom_document.records.entities import RecordedEvent, RepoCitation, Source, SourceData


def _text(tokenizer: Tokenizer, level: int, context: str) -> str:
    return take_continued_text(tokenizer, level, ConcPolicy.DIRECT, context=context)


def build_source(tokenizer: Tokenizer, level: int, xref: Optional[str] = None) -> Source:
    """
    Parse a SOUR record.

    TITL, AUTH, PUBL and TEXT may run over several lines; their CONT/CONC
    lines are joined.
    """
    source = Source(xref=xref)
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "DATA":
            source.data = build_source_data(tokenizer, line_level)
        elif tag == "ABBR":
            source.abbreviation = _text(tokenizer, line_level, "Source.ABBR")
        elif tag == "TITL":
            source.title = _text(tokenizer, line_level, "Source.TITL")
        elif tag == "AUTH":
            source.author = _text(tokenizer, line_level, "Source.AUTH")
        elif tag == "PUBL":
            source.publication_facts = _text(tokenizer, line_level, "Source.PUBL")
        elif tag == "TEXT":
            source.text = _text(tokenizer, line_level, "Source.TEXT")
        elif tag == "REPO":
            source.repo_citations.append(build_repo_citation(tokenizer, line_level))
        elif tag == "NOTE":
            source.notes.append(build_note(tokenizer, line_level))
        elif tag == "OBJE":
            source.multimedia.append(build_multimedia_link(tokenizer, line_level))
        elif tag == "CHAN":
            source.change_date = build_change_date(tokenizer, line_level)
        elif tag == "RIN":
            source.automated_record_id = take_line_value(tokenizer)
        elif tag == "REFN":
            source.user_reference_numbers.append(build_user_reference(tokenizer, line_level))
        else:
            return False
        return True

    source.custom_data = parse_subset(tokenizer, level, handle, context="Source")
    return source


def build_source_data(tokenizer: Tokenizer, level: int) -> SourceData:
    data = SourceData()
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "EVEN":
            data.events.append(build_recorded_event(tokenizer, line_level))
        elif tag == "AGNC":
            data.agency = take_line_value(tokenizer)
        elif tag == "NOTE":
            data.notes.append(build_note(tokenizer, line_level))
        else:
            return False
        return True

    data.custom_data = parse_subset(tokenizer, level, handle, context="SourceData")
    return data


def build_recorded_event(tokenizer: Tokenizer, level: int) -> RecordedEvent:
    """SOUR.DATA.EVEN: "2 EVEN BIRT, DEAT" with DATE (period) and PLAC."""
    event = RecordedEvent(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "DATE":
            event.date = take_line_value(tokenizer)
        elif tag == "PLAC":
            event.place = take_line_value(tokenizer)
        else:
            return False
        return True

    event.custom_data = parse_subset(tokenizer, level, handle, context="RecordedEvent")
    return event


def build_repo_citation(tokenizer: Tokenizer, level: int) -> RepoCitation:
    citation = RepoCitation(xref=take_optional_value(tokenizer) or "")

    def handle(tag: str, line_level: int) -> bool:
        if tag == "CALN":
            citation.call_number = take_line_value(tokenizer)
            _build_call_number(tokenizer, line_level, citation)
        elif tag == "NOTE":
            citation.notes.append(build_note(tokenizer, line_level))
        else:
            return False
        return True

    citation.custom_data = parse_subset(tokenizer, level, handle, context="RepoCitation")
    return citation


def _build_call_number(tokenizer: Tokenizer, level: int, citation: RepoCitation) -> None:
    """CALN children: "n+1 MEDI Book"."""

    def handle(tag: str, line_level: int) -> bool:
        if tag == "MEDI":
            citation.media_type = take_line_value(tokenizer)
            return True
        return False

    custom = parse_subset(tokenizer, level, handle, context="RepoCitation.CALN")
    report_dropped_custom(tokenizer, custom, "RepoCitation.CALN")
