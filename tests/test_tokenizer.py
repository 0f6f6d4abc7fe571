# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_document.core.exceptions import GedcomSyntaxError
from gedcom_document.loader import Token, Tokenizer, TokenKind, iter_tokens, load_file
from gedcom_document.loader.tokenizer import EOF_TOKEN, NONE_TOKEN
from gedcom_document.utils import mock_file_path


def test_initial_token_is_none() -> None:
    tokenizer = Tokenizer("0 HEAD")
    assert tokenizer.current_token == NONE_TOKEN
    assert not tokenizer.is_finished()


def test_head_line() -> None:
    assert list(iter_tokens("0 HEAD")) == [Token.level(0), Token.tag("HEAD")]


def test_scenario_a_token_stream() -> None:
    tokens = list(iter_tokens("0 HEAD\n1 GEDC\n2 VERS 5.5\n0 TRLR"))
    assert tokens == [
        Token.level(0),
        Token.tag("HEAD"),
        Token.level(1),
        Token.tag("GEDC"),
        Token.level(2),
        Token.tag("VERS"),
        Token.line_value("5.5"),
        Token.level(0),
        Token.tag("TRLR"),
    ]


def test_pointer_then_tag() -> None:
    tokens = list(iter_tokens("0 @I1@ INDI\n1 NAME Jane /Doe/\n"))
    assert tokens == [
        Token.level(0),
        Token.pointer("@I1@"),
        Token.tag("INDI"),
        Token.level(1),
        Token.tag("NAME"),
        Token.line_value("Jane /Doe/"),
    ]


def test_custom_tags_after_level_and_pointer() -> None:
    tokens = list(iter_tokens("1 _MILT Army\n0 @X1@ _LOC\n"))
    assert tokens[1] == Token.custom_tag("_MILT")
    assert tokens[2] == Token.line_value("Army")
    assert tokens[4] == Token.pointer("@X1@")
    assert tokens[5] == Token.custom_tag("_LOC")


def test_value_keeps_inner_and_trailing_spaces() -> None:
    tokens = list(iter_tokens("1 NOTE   two  words  \n"))
    assert tokens[-1] == Token.line_value("two  words  ")


def test_whitespace_only_remainder_is_no_value() -> None:
    tokens = list(iter_tokens("1 BIRT   \n2 DATE 1900"))
    assert tokens == [
        Token.level(1),
        Token.tag("BIRT"),
        Token.level(2),
        Token.tag("DATE"),
        Token.line_value("1900"),
    ]


@pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
def test_line_endings(newline: str) -> None:
    text = newline.join(["0 HEAD", "1 CHAR UTF-8", "0 TRLR"]) + newline
    tokens = list(iter_tokens(text))
    assert Token.line_value("UTF-8") in tokens
    assert tokens[-1] == Token.tag("TRLR")
    assert all("\r" not in token.text for token in tokens)


def test_zero_width_spaces_are_whitespace() -> None:
    tokens = list(iter_tokens("\ufeff0 HEAD\n1 NAME\u200b John"))
    assert tokens[0] == Token.level(0)
    assert tokens[-1] == Token.line_value("John")


def test_blank_lines_are_skipped_but_counted() -> None:
    tokenizer = Tokenizer("0 HEAD\n\n   \n1 CHAR ANSEL")
    tokenizer.advance()
    assert tokenizer.line == 1
    tokenizer.advance()
    tokenizer.advance()
    assert tokenizer.current_token == Token.level(1)
    assert tokenizer.line == 4
    assert tokenizer.debug_location() == "line 4"


def test_current_level_tracks_line_depth() -> None:
    tokenizer = Tokenizer("0 @I1@ INDI\n12 NAME x")
    tokenizer.advance()
    tokenizer.advance()
    assert tokenizer.current_token.kind is TokenKind.POINTER
    assert tokenizer.current_level == 0
    tokenizer.advance()
    tokenizer.advance()
    assert tokenizer.current_token == Token.level(12)
    assert tokenizer.current_level == 12


def test_end_of_input_is_idempotent() -> None:
    tokenizer = Tokenizer("0 TRLR")
    for _ in range(5):
        tokenizer.advance()
    assert tokenizer.is_finished()
    assert tokenizer.current_token == EOF_TOKEN


def test_take_token_returns_discarded_token() -> None:
    tokenizer = Tokenizer("0 HEAD")
    tokenizer.advance()
    assert tokenizer.take_token() == Token.level(0)
    assert tokenizer.current_token == Token.tag("HEAD")


def test_empty_input_is_immediately_finished() -> None:
    assert list(iter_tokens("")) == []
    assert list(iter_tokens("\n\n")) == []


def test_accepts_iterable_of_chunks() -> None:
    chunks = ["0 HE", "AD\n1 CH", "AR UTF-8\n"]
    assert list(iter_tokens(chunks)) == list(iter_tokens("".join(chunks)))


def test_missing_level_number_raises() -> None:
    with pytest.raises(GedcomSyntaxError) as excinfo:
        list(iter_tokens("0 HEAD\nX CHAR UTF-8"))
    assert excinfo.value.line == 2
    assert "line 2" in str(excinfo.value)


def test_syntax_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        list(iter_tokens("HEAD"))


def test_token_str() -> None:
    assert str(Token.level(2)) == "Level(2)"
    assert str(Token.tag("HEAD")) == "Tag('HEAD')"
    assert str(EOF_TOKEN) == "EndOfInput"


def test_tokenize_mock_file() -> None:
    tokens = list(iter_tokens(load_file(mock_file_path("simple.ged"))))

    assert tokens, "Expected at least one token from mock GEDCOM file"
    assert tokens[:2] == [Token.level(0), Token.tag("HEAD")]
    assert tokens[-1] == Token.tag("TRLR")
