"""
Event and attribute details shared by individuals and families.
"""

from __future__ import annotations

from gedcom_document.core.diagnostics import DiagnosticKind
from gedcom_document.loader.subset_parser import (
    parse_subset,
    report,
    report_dropped_custom,
    skip_block,
)
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import (
    ConcPolicy,
    ContinuedText,
    take_line_value,
    take_optional_value,
)
from gedcom_document.records.build_common import (
    build_address,
    build_date,
    build_multimedia_link,
)
from gedcom_document.records.build_note import build_note, build_source_citation
from gedcom_document.records.entities import Event, Place

INDIVIDUAL_EVENT_TAGS = frozenset({
    "ADOP", "BIRT", "BAPM", "BARM", "BASM", "BLES", "BURI", "CENS",
    "CHR", "CHRA", "CONF", "CREM", "DEAT", "EMIG", "FCOM", "GRAD",
    "IMMI", "NATU", "ORDN", "RETI", "PROB", "WILL", "EVEN",
})

FAMILY_EVENT_TAGS = frozenset({
    "ANUL", "CENS", "DIV", "DIVF", "ENGA", "MARB", "MARC",
    "MARR", "MARL", "MARS", "RESI", "EVEN",
})

INDIVIDUAL_ATTRIBUTE_TAGS = frozenset({
    "CAST", "DSCR", "EDUC", "IDNO", "NATI", "NCHI", "NMR",
    "OCCU", "PROP", "RELI", "RESI", "SSN", "TITL", "FACT",
})


def build_place(tokenizer: Tokenizer, level: int) -> Place:
    place = Place(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "FORM":
            place.form = take_line_value(tokenizer)
        elif tag == "NOTE":
            place.notes.append(build_note(tokenizer, line_level))
        else:
            return False
        return True

    place.custom_data = parse_subset(tokenizer, level, handle, context="Place")
    return place


def _build_spouse_age(tokenizer: Tokenizer, level: int) -> str | None:
    """HUSB / WIFE inside a family event: "n HUSB" / "n+1 AGE 42y"."""
    ages = []
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "AGE":
            ages.append(take_line_value(tokenizer))
            return True
        return False

    custom = parse_subset(tokenizer, level, handle, context="EventSpouse")
    report_dropped_custom(tokenizer, custom, "EventSpouse")
    return ages[0] if ages else None


def _build_event_family(tokenizer: Tokenizer, level: int, event: Event) -> None:
    """FAMC inside BIRT/CHR/ADOP; ADOP says which parent adopted (HUSB, WIFE, BOTH)."""

    def handle(tag: str, line_level: int) -> bool:
        if tag == "ADOP":
            event.adopted_by = take_line_value(tokenizer)
            return True
        return False

    custom = parse_subset(tokenizer, level, handle, context="EventFamily")
    report_dropped_custom(tokenizer, custom, "EventFamily")


def build_event(tokenizer: Tokenizer, level: int) -> Event:
    """
    Parse an event or attribute structure (BIRT, MARR, OCCU, ...).

    The value is kept as given ("Y" for asserted events, the descriptor for
    attributes); CONT/CONC lines extend it.
    """
    event = Event(tag=tokenizer.current_token.text)
    text = ContinuedText(tokenizer, ConcPolicy.DIRECT)

    def handle(tag: str, line_level: int) -> bool:
        if text.handle(tag):
            return True
        if tag == "DATE":
            event.date = build_date(tokenizer, line_level)
        elif tag == "TIME":
            # TIME belongs under DATE
            report(
                tokenizer,
                DiagnosticKind.INVALID_VALUE,
                f"TIME outside DATE in {event.tag}",
                tag=tag,
                context="Event",
            )
            skip_block(tokenizer, line_level)
        elif tag == "PLAC":
            event.place = build_place(tokenizer, line_level)
        elif tag == "ADDR":
            event.address = build_address(tokenizer, line_level)
        elif tag == "TYPE":
            event.event_type = take_line_value(tokenizer)
        elif tag == "CAUS":
            event.cause = take_line_value(tokenizer)
        elif tag == "AGE":
            event.age = take_line_value(tokenizer)
        elif tag == "AGNC":
            event.agency = take_line_value(tokenizer)
        elif tag == "HUSB":
            event.husband_age = _build_spouse_age(tokenizer, line_level)
        elif tag == "WIFE":
            event.wife_age = _build_spouse_age(tokenizer, line_level)
        elif tag == "FAMC":
            event.family_xref = take_optional_value(tokenizer)
            _build_event_family(tokenizer, line_level, event)
        elif tag == "NOTE":
            event.notes.append(build_note(tokenizer, line_level))
        elif tag == "SOUR":
            event.citations.append(build_source_citation(tokenizer, line_level))
        elif tag == "OBJE":
            event.multimedia.append(build_multimedia_link(tokenizer, line_level))
        else:
            return False
        return True

    event.custom_data = parse_subset(tokenizer, level, handle, context=f"Event {event.tag}")
    event.value = text.text
    return event
