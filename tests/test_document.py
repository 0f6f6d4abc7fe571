# tests/test_document.py

from __future__ import annotations

import pytest

from gedcom_document import (
    DiagnosticKind,
    GedcomParser,
    GedcomStructureError,
    GedcomSyntaxError,
    parse,
    parse_file,
)
from gedcom_document.records import Gender, Pedigree, Relation
from gedcom_document.utils import mock_file_path


def test_scenario_a_header_version() -> None:
    document = parse("0 HEAD\n1 GEDC\n2 VERS 5.5\n0 TRLR")

    assert document.header is not None
    assert document.header.gedcom.version == "5.5"
    assert document.diagnostics == []


def test_scenario_b_individual_with_xref_and_name() -> None:
    document = parse("0 HEAD\n0 @P1@ INDI\n1 NAME Jane /Doe/\n0 TRLR")

    assert len(document.individuals) == 1
    individual = document.individuals[0]
    assert individual.xref == "@P1@"
    assert individual.name.value == "Jane /Doe/"


def test_scenario_c_note_continuation() -> None:
    document = parse(
        "0 HEAD\n"
        "0 @I1@ INDI\n"
        "1 NOTE line one\n"
        "2 CONT line two\n"
        "2 CONT line three\n"
        "0 TRLR\n"
    )

    assert document.individuals[0].notes[0].value == "line one\nline two\nline three"


def test_scenario_d_unknown_top_level_record_is_skipped() -> None:
    document = parse(
        "0 HEAD\n"
        "0 @Z1@ ZZZZ\n"
        "1 NAME hidden\n"
        "2 GIVN hidden\n"
        "0 @I1@ INDI\n"
        "1 NAME Jane /Doe/\n"
        "0 TRLR\n"
    )

    assert document.counts() == {
        "submitters": 0,
        "submissions": 0,
        "individuals": 1,
        "families": 0,
        "repositories": 0,
        "sources": 0,
        "multimedia": 0,
        "notes": 0,
    }
    assert [(d.kind, d.tag, d.line) for d in document.diagnostics] == [
        (DiagnosticKind.UNKNOWN_RECORD, "ZZZZ", 2),
    ]


def test_unknown_tag_inside_record_keeps_other_fields() -> None:
    document = parse(
        "0 @I1@ INDI\n"
        "1 FOO bar\n"
        "2 DEEP x\n"
        "3 DEEPER y\n"
        "1 NAME Jane /Doe/\n"
        "1 SEX F\n"
        "0 TRLR"
    )

    individual = document.individuals[0]
    assert individual.name.value == "Jane /Doe/"
    assert individual.sex is Gender.FEMALE
    assert [d.tag for d in document.diagnostics] == ["FOO"]


def test_custom_tags_are_never_dropped() -> None:
    document = parse(
        "0 HEAD\n"
        "1 _HDR yes\n"
        "0 @I1@ INDI\n"
        "1 _UID 1234\n"
        "1 NAME A /B/\n"
        "2 _ALT C /D/\n"
        "0 _PLAC Springfield\n"
        "1 _LATI N39.9\n"
        "0 TRLR"
    )

    assert [(c.tag, c.value) for c in document.header.custom_data] == [("_HDR", "yes")]
    individual = document.individuals[0]
    assert [(c.tag, c.value) for c in individual.custom_data] == [("_UID", "1234")]
    assert [(c.tag, c.value) for c in individual.name.custom_data] == [("_ALT", "C /D/")]
    assert len(document.custom_data) == 1
    place = document.custom_data[0]
    assert (place.tag, place.value) == ("_PLAC", "Springfield")
    assert place.find_first("_LATI").value == "N39.9"


def test_shared_note_record() -> None:
    document = parse("0 @N1@ NOTE First\n1 CONC  part\n1 CONT second\n0 TRLR")

    note = document.notes[0]
    assert note.xref == "@N1@"
    assert note.value == "Firstpart\nsecond"


def test_missing_trailer_is_recorded() -> None:
    document = parse("0 HEAD\n1 CHAR UTF-8\n")

    assert document.header.encoding.value == "UTF-8"
    assert [d.kind for d in document.diagnostics] == [DiagnosticKind.MISSING_TRAILER]


def test_missing_trailer_is_fatal_in_strict_mode() -> None:
    with pytest.raises(GedcomStructureError):
        parse("0 HEAD\n1 CHAR UTF-8\n", strict=True)


def test_unknown_record_is_fatal_in_strict_mode() -> None:
    with pytest.raises(GedcomStructureError) as excinfo:
        parse("0 HEAD\n0 @Z1@ ZZZZ\n0 TRLR", strict=True)
    assert excinfo.value.line == 2


def test_record_must_start_at_level_zero() -> None:
    with pytest.raises(GedcomStructureError) as excinfo:
        parse("1 HEAD\n0 TRLR")
    assert excinfo.value.line == 1


def test_value_in_record_position_is_structural_error() -> None:
    with pytest.raises(GedcomStructureError):
        parse("0 HEAD\n0 @I1@\n0 TRLR")


def test_missing_required_value_is_fatal() -> None:
    with pytest.raises(GedcomStructureError) as excinfo:
        parse("0 @I1@ INDI\n1 RIN\n0 TRLR")
    assert excinfo.value.line == 3


def test_lexical_error_aborts_parse() -> None:
    with pytest.raises(GedcomSyntaxError) as excinfo:
        parse("0 HEAD\n1 CHAR UTF-8\nCHAR\n0 TRLR")
    assert excinfo.value.line == 3


def test_lines_after_trailer_are_ignored() -> None:
    document = parse("0 HEAD\n0 TRLR\n0 @I1@ INDI\n")
    assert document.individuals == []
    assert document.diagnostics == []


def test_parser_uses_config_strict_flag_unless_overridden() -> None:
    lenient = GedcomParser(strict=False)
    document = lenient.parse("0 @I1@ INDI\n1 FOO bar\n0 TRLR")
    assert lenient.document is document
    assert len(document.diagnostics) == 1

    with pytest.raises(GedcomStructureError):
        GedcomParser(strict=True).parse("0 @I1@ INDI\n1 FOO bar\n0 TRLR")


def test_parse_mock_file() -> None:
    document = parse_file(mock_file_path("simple.ged"))

    assert document.diagnostics == []
    assert document.counts() == {
        "submitters": 1,
        "submissions": 0,
        "individuals": 3,
        "families": 1,
        "repositories": 1,
        "sources": 1,
        "multimedia": 1,
        "notes": 1,
    }

    father, mother, child = document.individuals
    assert father.xref == "@FATHER@"
    assert father.name.given == "John"
    assert father.notes[0].value == "John was born at home.\nHe was the eldest of four."
    assert mother.sex is Gender.FEMALE
    assert child.families[0].relation is Relation.CHILD
    assert child.families[0].pedigree is Pedigree.BIRTH

    family = document.families[0]
    assert (family.individual1, family.individual2) == ("@FATHER@", "@MOTHER@")
    assert family.children == ["@CHILD@"]

    assert document.header.submitter_tag == "@SUBMITTER@"
    assert document.submitters[0].xref == "@SUBMITTER@"
    assert document.notes[0].value == "A shared note\nspanning two lines."


def test_custom_tags_under_date_and_gedc_survive_a_full_parse() -> None:
    document = parse(
        "0 HEAD\n"
        "1 GEDC\n"
        "2 VERS 5.5.1\n"
        "2 _VENDOR x\n"
        "0 @I1@ INDI\n"
        "1 BIRT\n"
        "2 DATE 1 JAN 1900\n"
        "3 _SORT 19000101\n"
        "0 TRLR"
    )

    assert document.header.gedcom.custom_data[0].tag == "_VENDOR"
    assert document.individuals[0].events[0].date.custom_data[0].value == "19000101"
    assert document.diagnostics == []
