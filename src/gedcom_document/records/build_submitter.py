from __future__ import annotations

from typing import Optional

from gedcom_document.loader.subset_parser import parse_subset
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import take_line_value, take_optional_value
from gedcom_document.records.build_common import build_address, build_multimedia_link
from gedcom_document.records.build_note import build_change_date, build_note
from gedcom_document.records.entities import Submitter


def build_submitter(tokenizer: Tokenizer, level: int, xref: Optional[str] = None) -> Submitter:
    """SUBM record: who contributed the data in the file."""
    submitter = Submitter(xref=xref)
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "NAME":
            submitter.name = take_line_value(tokenizer)
        elif tag == "ADDR":
            submitter.address = build_address(tokenizer, line_level)
        elif tag == "PHON":
            submitter.phone = take_line_value(tokenizer)
        elif tag == "EMAIL":
            submitter.email = take_line_value(tokenizer)
        elif tag == "LANG":
            submitter.language = take_line_value(tokenizer)
        elif tag == "OBJE":
            submitter.multimedia.append(build_multimedia_link(tokenizer, line_level))
        elif tag == "NOTE":
            submitter.notes.append(build_note(tokenizer, line_level))
        elif tag == "CHAN":
            submitter.change_date = build_change_date(tokenizer, line_level)
        elif tag == "RIN":
            submitter.automated_record_id = take_line_value(tokenizer)
        else:
            return False
        return True

    submitter.custom_data = parse_subset(tokenizer, level, handle, context="Submitter")
    return submitter
