from __future__ import annotations

from typing import Optional

from gedcom_document.core.diagnostics import DiagnosticKind
from gedcom_document.loader.subset_parser import parse_subset, report, report_dropped_custom
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import take_line_value, take_optional_value
from gedcom_document.logging import get_logger
from gedcom_document.records.build_common import build_multimedia_link, build_user_reference
from gedcom_document.records.build_event import (
    INDIVIDUAL_ATTRIBUTE_TAGS,
    INDIVIDUAL_EVENT_TAGS,
    build_event,
)
from gedcom_document.records.build_note import (
    build_change_date,
    build_note,
    build_source_citation,
)
from gedcom_document.records.entities import (
    FamilyLink,
    Gender,
    Individual,
    Name,
    Pedigree,
    Relation,
)

log = get_logger(__name__)

FAMILY_LINK_RELATIONS = {
    "FAMC": Relation.CHILD,
    "FAMS": Relation.SPOUSE,
}


def build_individual(tokenizer: Tokenizer, level: int, xref: Optional[str] = None) -> Individual:
    """
    Parse an INDI record.

    Events (BIRT, DEAT, ...) land in ``events``, attributes (OCCU, RESI, ...)
    in ``attributes``. FAMC/FAMS links are de-duplicated by family pointer.
    """
    individual = Individual(xref=xref)
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "NAME":
            individual.names.append(build_name(tokenizer, line_level))
        elif tag == "SEX":
            individual.sex = parse_gender(tokenizer, line_level)
        elif tag in INDIVIDUAL_EVENT_TAGS:
            individual.events.append(build_event(tokenizer, line_level))
        elif tag in INDIVIDUAL_ATTRIBUTE_TAGS:
            individual.attributes.append(build_event(tokenizer, line_level))
        elif tag in FAMILY_LINK_RELATIONS:
            link = build_family_link(tokenizer, line_level)
            if not individual.add_family(link):
                log.debug("Ignoring repeated family link %s on %s", link.xref, individual.xref)
        elif tag == "SOUR":
            individual.citations.append(build_source_citation(tokenizer, line_level))
        elif tag == "NOTE":
            individual.notes.append(build_note(tokenizer, line_level))
        elif tag == "OBJE":
            individual.multimedia.append(build_multimedia_link(tokenizer, line_level))
        elif tag == "CHAN":
            individual.change_date = build_change_date(tokenizer, line_level)
        elif tag == "RIN":
            individual.automated_record_id = take_line_value(tokenizer)
        elif tag == "REFN":
            individual.user_reference_numbers.append(build_user_reference(tokenizer, line_level))
        else:
            return False
        return True

    individual.custom_data = parse_subset(tokenizer, level, handle, context="Individual")
    return individual


def build_name(tokenizer: Tokenizer, level: int) -> Name:
    name = Name(value=take_optional_value(tokenizer))

    def handle(tag: str, line_level: int) -> bool:
        if tag == "GIVN":
            name.given = take_line_value(tokenizer)
        elif tag == "SURN":
            name.surname = take_line_value(tokenizer)
        elif tag == "NPFX":
            name.prefix = take_line_value(tokenizer)
        elif tag == "SPFX":
            name.surname_prefix = take_line_value(tokenizer)
        elif tag == "NSFX":
            name.suffix = take_line_value(tokenizer)
        elif tag == "NICK":
            name.nickname = take_line_value(tokenizer)
        elif tag == "TYPE":
            name.name_type = take_line_value(tokenizer)
        elif tag == "SOUR":
            name.citations.append(build_source_citation(tokenizer, line_level))
        elif tag == "NOTE":
            name.notes.append(build_note(tokenizer, line_level))
        else:
            return False
        return True

    name.custom_data = parse_subset(tokenizer, level, handle, context="Name")
    return name


def parse_gender(tokenizer: Tokenizer, level: int) -> Gender:
    """SEX value; anything but M/F/N/U is reported and read as unknown."""
    value = take_optional_value(tokenizer)
    custom = parse_subset(tokenizer, level, lambda tag, line_level: False, context="Gender")
    report_dropped_custom(tokenizer, custom, "Gender")

    try:
        return Gender((value or "").strip().upper())
    except ValueError:
        report(
            tokenizer,
            DiagnosticKind.INVALID_VALUE,
            f"Unknown SEX value {value!r}",
            tag="SEX",
            context="Individual",
        )
        return Gender.UNKNOWN


def build_family_link(tokenizer: Tokenizer, level: int) -> FamilyLink:
    relation = FAMILY_LINK_RELATIONS[tokenizer.current_token.text]
    link = FamilyLink(xref=take_optional_value(tokenizer) or "", relation=relation)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "PEDI":
            link.pedigree = _parse_pedigree(tokenizer, take_line_value(tokenizer))
        elif tag == "NOTE":
            link.notes.append(build_note(tokenizer, line_level))
        else:
            return False
        return True

    link.custom_data = parse_subset(tokenizer, level, handle, context="FamilyLink")
    return link


def _parse_pedigree(tokenizer: Tokenizer, text: str) -> Optional[Pedigree]:
    try:
        return Pedigree(text.strip().lower())
    except ValueError:
        report(
            tokenizer,
            DiagnosticKind.INVALID_VALUE,
            f"Unknown pedigree {text!r}",
            tag="PEDI",
            context="FamilyLink",
        )
        return None
