# src/gedcom_document/loader/tokenizer.py

"""
Character-level GEDCOM tokenizer.

Each physical line is lexed into the token group

    Level [Pointer] (Tag | CustomTag) [LineValue]

with a single token of lookahead. The tokenizer never buffers the input: it
pulls one character at a time from the source and decides what the next
lexeme must be from the kind of the token it produced last.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import chain
from typing import Iterable, Iterator, List, Union

from gedcom_document.core.diagnostics import Diagnostic
from gedcom_document.core.exceptions import GedcomSyntaxError

POINTER_MARKER = "@"
CUSTOM_TAG_MARKER = "_"

# U+FEFF (byte order mark / zero width no-break space) and U+200B.
ZERO_WIDTH_SPACES = frozenset({"\ufeff", "\u200b"})
LINE_BREAKS = frozenset({"\r", "\n"})
DIGITS = frozenset("0123456789")

# Returned by the character source once it is exhausted.
END_OF_INPUT = ""

Source = Union[str, Iterable[str]]


class TokenKind(Enum):
    NONE = "None"
    LEVEL = "Level"
    POINTER = "Pointer"
    TAG = "Tag"
    CUSTOM_TAG = "CustomTag"
    LINE_VALUE = "LineValue"
    EOF = "EndOfInput"


@dataclass(frozen=True)
class Token:
    """
    A single lexeme.

    Attributes:
        kind: Which variant of the token union this is.
        text: Tag name, pointer, or line value (empty for Level/EOF/None).
        depth: Nesting depth for Level tokens, -1 otherwise.
    """
    kind: TokenKind
    text: str = ""
    depth: int = -1

    @classmethod
    def level(cls, depth: int) -> "Token":
        return cls(TokenKind.LEVEL, depth=depth)

    @classmethod
    def pointer(cls, xref: str) -> "Token":
        return cls(TokenKind.POINTER, text=xref)

    @classmethod
    def tag(cls, name: str) -> "Token":
        return cls(TokenKind.TAG, text=name)

    @classmethod
    def custom_tag(cls, name: str) -> "Token":
        return cls(TokenKind.CUSTOM_TAG, text=name)

    @classmethod
    def line_value(cls, text: str) -> "Token":
        return cls(TokenKind.LINE_VALUE, text=text)

    def is_level(self, at_most: int | None = None) -> bool:
        """True for a Level token, optionally only when its depth <= at_most."""
        if self.kind is not TokenKind.LEVEL:
            return False
        return at_most is None or self.depth <= at_most

    def __str__(self) -> str:
        if self.kind is TokenKind.LEVEL:
            return f"Level({self.depth})"
        if self.kind in (TokenKind.NONE, TokenKind.EOF):
            return self.kind.value
        return f"{self.kind.value}({self.text!r})"


NONE_TOKEN = Token(TokenKind.NONE)
EOF_TOKEN = Token(TokenKind.EOF)


class Tokenizer:
    """
    Stateful single-lookahead tokenizer.

    The same instance is threaded through every record builder of a parse,
    so it also carries the parse-wide state those builders share: the
    collected recoverable ``diagnostics`` and the ``strict`` flag.

    Args:
        source: The GEDCOM text, or any iterable of text chunks such as an
            open text file.
        strict: Treat unknown standard tags as fatal instead of skipping them.
    """

    def __init__(self, source: Source, *, strict: bool = False) -> None:
        self._chars: Iterator[str] = chain.from_iterable(source)
        # Pretend a line just ended so the first advance() lexes a level.
        self.current_char: str = "\n"
        self.current_token: Token = NONE_TOKEN
        self.current_level: int = -1
        self.line: int = 0
        self.strict = strict
        self.diagnostics: List[Diagnostic] = []

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<Tokenizer {self.debug_location()} {self.current_token}>"

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def is_finished(self) -> bool:
        return self.current_token.kind is TokenKind.EOF

    def debug_location(self) -> str:
        return f"line {self.line}"

    def advance(self) -> None:
        """Discard the current token and lex the next one."""
        if self.current_char == END_OF_INPUT:
            self.current_token = EOF_TOKEN
            return

        # The level number is at the start of each line.
        if self.current_char in LINE_BREAKS:
            self._start_line()
            return

        self._skip_whitespace()

        # Tag or pointer followed only by trailing whitespace.
        if self.current_char == END_OF_INPUT or self.current_char in LINE_BREAKS:
            self.advance()
            return

        previous = self.current_token.kind
        if previous is TokenKind.LEVEL:
            if self.current_char == POINTER_MARKER:
                self.current_token = Token.pointer(self._extract_word())
            else:
                self.current_token = self._extract_tag()
        elif previous is TokenKind.POINTER:
            self.current_token = self._extract_tag()
        elif previous in (TokenKind.TAG, TokenKind.CUSTOM_TAG):
            self.current_token = Token.line_value(self._extract_value())
        else:
            raise GedcomSyntaxError(
                f"Tokenization error: unexpected {self.current_char!r} after {previous.value}",
                line=self.line,
            )

    def take_token(self) -> Token:
        """Like advance(), but return the token being discarded."""
        token = self.current_token
        self.advance()
        return token

    # ------------------------------------------------------------------ #
    # Lexing helpers
    # ------------------------------------------------------------------ #

    def _next_char(self) -> None:
        self.current_char = next(self._chars, END_OF_INPUT)

    def _start_line(self) -> None:
        """Consume a line terminator (and any blank lines) and lex the level."""
        while True:
            if self.current_char == "\r":
                self._next_char()
            if self.current_char == "\n":
                self._next_char()
            self.line += 1

            self._skip_whitespace()
            if self.current_char == END_OF_INPUT:
                self.current_token = EOF_TOKEN
                return
            if self.current_char not in LINE_BREAKS:
                break

        depth = self._extract_number()
        self.current_level = depth
        self.current_token = Token.level(depth)

    def _extract_number(self) -> int:
        digits: List[str] = []
        while self.current_char in DIGITS:
            digits.append(self.current_char)
            self._next_char()

        if not digits:
            raise GedcomSyntaxError(
                f"Expected a level number, found {self.current_char!r}",
                line=self.line,
            )
        return int("".join(digits))

    def _extract_tag(self) -> Token:
        word = self._extract_word()
        if word.startswith(CUSTOM_TAG_MARKER):
            return Token.custom_tag(word)
        return Token.tag(word)

    def _extract_word(self) -> str:
        letters: List[str] = []
        while self.current_char != END_OF_INPUT and not self._is_space(self.current_char):
            letters.append(self.current_char)
            self._next_char()
        return "".join(letters)

    def _extract_value(self) -> str:
        letters: List[str] = []
        while self.current_char != END_OF_INPUT and self.current_char not in LINE_BREAKS:
            letters.append(self.current_char)
            self._next_char()
        return "".join(letters)

    def _skip_whitespace(self) -> None:
        while (
            self.current_char != END_OF_INPUT
            and self.current_char not in LINE_BREAKS
            and self._is_space(self.current_char)
        ):
            self._next_char()

    @staticmethod
    def _is_space(char: str) -> bool:
        return char.isspace() or char in ZERO_WIDTH_SPACES


def iter_tokens(source: Source) -> Iterator[Token]:
    """
    Yield every token of ``source`` up to (not including) end of input.

    Useful for inspection; the parsers drive a Tokenizer directly.
    """
    tokenizer = Tokenizer(source)
    tokenizer.advance()
    while not tokenizer.is_finished():
        yield tokenizer.current_token
        tokenizer.advance()
