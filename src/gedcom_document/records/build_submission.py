from __future__ import annotations

from typing import Optional

from gedcom_document.loader.subset_parser import parse_subset
from gedcom_document.loader.tokenizer import Tokenizer
from gedcom_document.loader.value_reconstructor import take_line_value, take_optional_value
from gedcom_document.records.build_common import build_date
from gedcom_document.records.build_note import build_change_date, build_note
from gedcom_document.records.entities import ChangeDate, Submission


def build_submission(tokenizer: Tokenizer, level: int, xref: Optional[str] = None) -> Submission:
    """
    SUBN record.

    Some exporters write a bare "1 DATE" instead of "1 CHAN / 2 DATE"; both
    end up in ``change_date``.
    """
    submission = Submission(xref=xref)
    take_optional_value(tokenizer)

    def handle(tag: str, line_level: int) -> bool:
        if tag == "ANCE":
            submission.generations_of_ancestors = take_line_value(tokenizer)
        elif tag == "DESC":
            submission.generations_of_descendants = take_line_value(tokenizer)
        elif tag == "FAMF":
            submission.name_of_family_file = take_line_value(tokenizer)
        elif tag == "TEMP":
            submission.temple_code = take_line_value(tokenizer)
        elif tag == "ORDI":
            submission.ordinance_process_flag = take_line_value(tokenizer)
        elif tag == "SUBM":
            submission.submitter_link = take_line_value(tokenizer)
        elif tag == "RIN":
            submission.automated_record_id = take_line_value(tokenizer)
        elif tag == "NOTE":
            submission.note = build_note(tokenizer, line_level)
        elif tag == "CHAN":
            submission.change_date = build_change_date(tokenizer, line_level)
        elif tag == "DATE":
            submission.change_date = ChangeDate(date=build_date(tokenizer, line_level))
        else:
            return False
        return True

    submission.custom_data = parse_subset(tokenizer, level, handle, context="Submission")
    return submission
