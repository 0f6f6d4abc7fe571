from __future__ import annotations

from gedcom_document.loader import Token, Tokenizer
from gedcom_document.records.build_source import build_source


def build(text: str):
    tokenizer = Tokenizer(text)
    tokenizer.advance()
    tokenizer.advance()
    xref = tokenizer.current_token.text
    tokenizer.advance()
    return build_source(tokenizer, 0, xref), tokenizer


def test_build_source_fields() -> None:
    source, tokenizer = build(
        "0 @S1@ SOUR\n"
        "1 DATA\n"
        "2 EVEN BIRT, DEAT\n"
        "3 DATE FROM 1890 TO 1950\n"
        "3 PLAC Springfield\n"
        "2 AGNC Parish office\n"
        "2 NOTE Data note\n"
        "1 ABBR Parish Reg.\n"
        "1 TITL Springfield Parish Register\n"
        "2 CONC , 1890-1950\n"
        "1 AUTH Parish of\n"
        "2 CONT Springfield\n"
        "1 PUBL Springfield Press\n"
        "1 TEXT Baptisms\n"
        "2 CONT and burials\n"
        "1 REPO @R1@\n"
        "2 CALN 929.3\n"
        "3 MEDI Book\n"
        "2 NOTE Shelf 4\n"
        "1 NOTE Source note\n"
        "1 OBJE @M1@\n"
        "1 RIN 5\n"
        "1 REFN S-1\n"
        "1 CHAN\n"
        "2 DATE 1 JAN 2000\n"
        "1 _MEDI Microfilm\n"
        "0 TRLR"
    )

    assert source.xref == "@S1@"
    event = source.data.events[0]
    assert (event.value, event.date, event.place) == (
        "BIRT, DEAT",
        "FROM 1890 TO 1950",
        "Springfield",
    )
    assert source.data.agency == "Parish office"
    assert source.data.notes[0].value == "Data note"
    assert source.abbreviation == "Parish Reg."
    assert source.title == "Springfield Parish Register, 1890-1950"
    assert source.author == "Parish of\nSpringfield"
    assert source.publication_facts == "Springfield Press"
    assert source.text == "Baptisms\nand burials"
    repo = source.repo_citations[0]
    assert (repo.xref, repo.call_number, repo.media_type) == ("@R1@", "929.3", "Book")
    assert repo.notes[0].value == "Shelf 4"
    assert source.notes[0].value == "Source note"
    assert source.multimedia[0].xref == "@M1@"
    assert source.automated_record_id == "5"
    assert source.user_reference_numbers[0].value == "S-1"
    assert source.change_date.date.value == "1 JAN 2000"
    assert source.custom_data[0].value == "Microfilm"
    assert tokenizer.diagnostics == []
    assert tokenizer.current_token == Token.level(0)


def test_custom_tag_inside_title_is_reported() -> None:
    source, tokenizer = build("0 @S1@ SOUR\n1 TITL Register\n2 _LANG la\n0 TRLR")

    assert source.title == "Register"
    assert [d.tag for d in tokenizer.diagnostics] == ["_LANG"]


def test_custom_tags_in_data_and_call_number() -> None:
    source, tokenizer = build(
        "0 @S1@ SOUR\n"
        "1 DATA\n"
        "2 _QUALITY high\n"
        "2 EVEN BIRT\n"
        "3 _RANGE 1890-1900\n"
        "1 REPO @R1@\n"
        "2 CALN 12\n"
        "3 _SHELF B\n"
        "0 TRLR"
    )

    assert source.data.custom_data[0].tag == "_QUALITY"
    assert source.data.events[0].custom_data[0].value == "1890-1900"
    assert source.repo_citations[0].call_number == "12"
    assert [(d.kind.value, d.tag, d.context) for d in tokenizer.diagnostics] == [
        ("unknown_tag", "_SHELF", "RepoCitation.CALN"),
    ]


def test_unknown_tag_under_call_number_is_reported() -> None:
    source, tokenizer = build("0 @S1@ SOUR\n1 REPO @R1@\n2 CALN 12\n3 SHELF B\n2 NOTE n\n0 TRLR")

    assert source.repo_citations[0].notes[0].value == "n"
    assert [d.tag for d in tokenizer.diagnostics] == ["SHELF"]
