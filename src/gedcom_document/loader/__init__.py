# src/gedcom_document/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_document.loader import (
        Token,
        TokenKind,
        Tokenizer,
        iter_tokens,
        parse_subset,
        take_line_value,
        take_continued_text,
        load_file,
    )
"""

from __future__ import annotations

from .file_loader import load_file
from .file_locator import resolve_input_path
from .subset_parser import (
    UserDefinedData,
    parse_custom_tag,
    parse_subset,
    skip_block,
    skip_unrecognized,
)
from .tokenizer import EOF_TOKEN, NONE_TOKEN, Token, Tokenizer, TokenKind, iter_tokens
from .value_reconstructor import (
    ConcPolicy,
    ContinuedText,
    take_continued_text,
    take_line_value,
    take_optional_value,
)

__all__ = [
    "ConcPolicy",
    "ContinuedText",
    "EOF_TOKEN",
    "NONE_TOKEN",
    "Token",
    "TokenKind",
    "Tokenizer",
    "UserDefinedData",
    "iter_tokens",
    "load_file",
    "parse_custom_tag",
    "parse_subset",
    "resolve_input_path",
    "skip_block",
    "skip_unrecognized",
    "take_continued_text",
    "take_line_value",
    "take_optional_value",
]
