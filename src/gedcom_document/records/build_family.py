from __future__ import annotations

from typing import Optional

from gedcom_document.core.diagnostics import DiagnosticKind
from gedcom_document.loader.subset_parser import parse_subset, report, skip_duplicate
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import take_line_value, take_optional_value
from gedcom_document.records.build_common import build_multimedia_link, build_user_reference
from gedcom_document.records.build_event import FAMILY_EVENT_TAGS, build_event
from gedcom_document.records.build_note import (
    build_change_date,
    build_note,
    build_source_citation,
)
from gedcom_document.records.entities import Family


def build_family(tokenizer: Tokenizer, level: int, xref: Optional[str] = None) -> Family:
    """
    Parse a FAM record.

    HUSB and WIFE fill ``individual1`` / ``individual2``; a second HUSB or
    WIFE is reported and dropped.
    """
    family = Family(xref=xref)
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "HUSB":
            if family.individual1 is not None:
                skip_duplicate(tokenizer, tag, line_level, "Family")
            else:
                family.individual1 = take_line_value(tokenizer)
        elif tag == "WIFE":
            if family.individual2 is not None:
                skip_duplicate(tokenizer, tag, line_level, "Family")
            else:
                family.individual2 = take_line_value(tokenizer)
        elif tag == "CHIL":
            family.children.append(take_line_value(tokenizer))
        elif tag == "NCHI":
            family.num_children = _parse_count(tokenizer, take_line_value(tokenizer))
        elif tag in FAMILY_EVENT_TAGS:
            family.events.append(build_event(tokenizer, line_level))
        elif tag == "SOUR":
            family.citations.append(build_source_citation(tokenizer, line_level))
        elif tag == "NOTE":
            family.notes.append(build_note(tokenizer, line_level))
        elif tag == "OBJE":
            family.multimedia.append(build_multimedia_link(tokenizer, line_level))
        elif tag == "CHAN":
            family.change_date = build_change_date(tokenizer, line_level)
        elif tag == "RIN":
            family.automated_record_id = take_line_value(tokenizer)
        elif tag == "REFN":
            family.user_reference_numbers.append(build_user_reference(tokenizer, line_level))
        else:
            return False
        return True

    family.custom_data = parse_subset(tokenizer, level, handle, context="Family")
    return family


def _parse_count(tokenizer: Tokenizer, text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        report(
            tokenizer,
            DiagnosticKind.INVALID_VALUE,
            f"NCHI is not a number: {text!r}",
            tag="NCHI",
            context="Family",
        )
        return None
