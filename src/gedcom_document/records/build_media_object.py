from __future__ import annotations

from typing import Optional

from gedcom_document.loader.subset_parser import parse_subset
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import take_line_value, take_optional_value
from gedcom_document.records.build_common import (
    build_file_refn,
    build_multimedia_format,
    build_user_reference,
)
from gedcom_document.records.build_note import (
    build_change_date,
    build_note,
    build_source_citation,
)
from gedcom_document.records.entities import MultimediaRecord


def build_multimedia_record(
    tokenizer: Tokenizer,
    level: int,
    xref: Optional[str] = None,
) -> MultimediaRecord:
    """
    Level-0 OBJE record.

    GEDCOM 5.5.1 allows several FILE lines per record; all are kept in file
    order and ``MultimediaRecord.file`` returns the first.
    """
    record = MultimediaRecord(xref=xref)
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "FILE":
            record.files.append(build_file_refn(tokenizer, line_level))
        elif tag == "FORM":
            record.form = build_multimedia_format(tokenizer, line_level)
        elif tag == "TITL":
            record.title = take_line_value(tokenizer)
        elif tag == "REFN":
            record.user_reference_numbers.append(build_user_reference(tokenizer, line_level))
        elif tag == "RIN":
            record.automated_record_id = take_line_value(tokenizer)
        elif tag == "SOUR":
            record.citations.append(build_source_citation(tokenizer, line_level))
        elif tag == "NOTE":
            record.notes.append(build_note(tokenizer, line_level))
        elif tag == "CHAN":
            record.change_date = build_change_date(tokenizer, line_level)
        else:
            return False
        return True

    record.custom_data = parse_subset(tokenizer, level, handle, context="Multimedia")
    return record
