from __future__ import annotations

from typing import Optional

from gedcom_document.loader.subset_parser import parse_subset
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import take_line_value, take_optional_value
from gedcom_document.records.build_common import build_address
from gedcom_document.records.build_note import build_change_date, build_note
from gedcom_document.records.entities import Repository


def build_repository(tokenizer: Tokenizer, level: int, xref: Optional[str] = None) -> Repository:
    repository = Repository(xref=xref)
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "NAME":
            repository.name = take_line_value(tokenizer)
        elif tag == "ADDR":
            repository.address = build_address(tokenizer, line_level)
        elif tag == "PHON":
            repository.phone = take_line_value(tokenizer)
        elif tag == "EMAIL":
            repository.email = take_line_value(tokenizer)
        elif tag == "WWW":
            repository.website = take_line_value(tokenizer)
        elif tag == "NOTE":
            repository.notes.append(build_note(tokenizer, line_level))
        elif tag == "CHAN":
            repository.change_date = build_change_date(tokenizer, line_level)
        elif tag == "RIN":
            repository.automated_record_id = take_line_value(tokenizer)
        else:
            return False
        return True

    repository.custom_data = parse_subset(tokenizer, level, handle, context="Repository")
    return repository
