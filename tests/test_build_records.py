from __future__ import annotations

from gedcom_document.loader import Token, Tokenizer
from gedcom_document.records.build_repository import build_repository
from gedcom_document.records.build_submission import build_submission
from gedcom_document.records.build_submitter import build_submitter


def on_record(text: str):
    tokenizer = Tokenizer(text)
    tokenizer.advance()
    tokenizer.advance()
    xref = tokenizer.current_token.text
    tokenizer.advance()
    return tokenizer, xref


def test_build_repository() -> None:
    tokenizer, xref = on_record(
        "0 @R1@ REPO\n"
        "1 NAME Springfield Library\n"
        "1 ADDR 5 Library Lane\n"
        "2 ADR1 5 Library Lane\n"
        "2 CITY Springfield\n"
        "2 STAE Ohio\n"
        "2 POST 45501\n"
        "2 CTRY USA\n"
        "1 PHON 555-0102\n"
        "1 EMAIL desk@library.example.org\n"
        "1 WWW https://library.example.org\n"
        "1 NOTE Open weekdays\n"
        "1 RIN 11\n"
        "1 CHAN\n"
        "2 DATE 3 MAR 2003\n"
        "0 TRLR"
    )
    repository = build_repository(tokenizer, 0, xref)

    assert repository.xref == "@R1@"
    assert repository.name == "Springfield Library"
    address = repository.address
    assert address.value == "5 Library Lane"
    assert (address.adr1, address.city, address.state, address.post, address.country) == (
        "5 Library Lane",
        "Springfield",
        "Ohio",
        "45501",
        "USA",
    )
    assert repository.phone == "555-0102"
    assert repository.email == "desk@library.example.org"
    assert repository.website == "https://library.example.org"
    assert repository.notes[0].value == "Open weekdays"
    assert repository.automated_record_id == "11"
    assert repository.change_date.date.value == "3 MAR 2003"
    assert tokenizer.diagnostics == []
    assert tokenizer.current_token == Token.level(0)


def test_build_submitter() -> None:
    tokenizer, xref = on_record(
        "0 @U1@ SUBM\n"
        "1 NAME Jane Submitter\n"
        "1 ADDR 1 Archive Road\n"
        "2 CONT Springfield\n"
        "1 PHON 555-0101\n"
        "1 EMAIL jane@example.org\n"
        "1 LANG English\n"
        "1 OBJE @M1@\n"
        "1 NOTE Volunteer\n"
        "1 RIN 1\n"
        "1 _EMPLOYER Library\n"
        "0 TRLR"
    )
    submitter = build_submitter(tokenizer, 0, xref)

    assert submitter.xref == "@U1@"
    assert submitter.name == "Jane Submitter"
    assert submitter.address.value == "1 Archive Road\nSpringfield"
    assert submitter.phone == "555-0101"
    assert submitter.email == "jane@example.org"
    assert submitter.language == "English"
    assert submitter.multimedia[0].xref == "@M1@"
    assert submitter.notes[0].value == "Volunteer"
    assert submitter.automated_record_id == "1"
    assert submitter.custom_data[0].tag == "_EMPLOYER"
    assert tokenizer.diagnostics == []


def test_build_submission() -> None:
    tokenizer, xref = on_record(
        "0 @SUB1@ SUBN\n"
        "1 SUBM @U1@\n"
        "1 FAMF smith.ged\n"
        "1 TEMP SLAKE\n"
        "1 ANCE 3\n"
        "1 DESC 2\n"
        "1 ORDI yes\n"
        "1 RIN 8\n"
        "1 NOTE For the archive\n"
        "1 DATE 4 APR 2004\n"
        "0 TRLR"
    )
    submission = build_submission(tokenizer, 0, xref)

    assert submission.xref == "@SUB1@"
    assert submission.submitter_link == "@U1@"
    assert submission.name_of_family_file == "smith.ged"
    assert submission.temple_code == "SLAKE"
    assert submission.generations_of_ancestors == "3"
    assert submission.generations_of_descendants == "2"
    assert submission.ordinance_process_flag == "yes"
    assert submission.automated_record_id == "8"
    assert submission.note.value == "For the archive"
    assert submission.change_date.date.value == "4 APR 2004"
    assert tokenizer.diagnostics == []
