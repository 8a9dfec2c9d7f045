"""Line-buffered tokenizer for configuration file text."""

from __future__ import annotations

import io
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, TextIO

from pgconf.errors import ScannerFaultError

__all__ = ["TokenKind", "Token", "Tokenizer", "tokenize"]


class TokenKind(str, Enum):
    """Lexical categories produced by the Tokenizer."""

    IDENTIFIER = "identifier"
    QUALIFIED_IDENTIFIER = "qualified_identifier"
    STRING = "string"
    INTEGER = "integer"
    REAL = "real"
    UNQUOTED_STRING = "unquoted_string"
    EQUALS = "equals"
    EOL = "eol"
    ERROR = "error"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    """A lexical unit and the line it was read on."""

    kind: TokenKind
    text: str
    line: int


# Every non-ASCII character counts as a letter, which mirrors treating
# high bytes as identifier characters. Surrogate escapes fall in this range.
_LETTER = r"A-Za-z_\x80-\U0010ffff"
_ID = rf"[{_LETTER}][{_LETTER}0-9]*"

# Order matters: on equal match length the earlier rule wins.
_RULES: list[tuple[TokenKind | None, re.Pattern[str]]] = [
    (TokenKind.EOL, re.compile(r"\n")),
    (None, re.compile(r"[ \t\r]+")),
    (None, re.compile(r"#.*")),
    (TokenKind.IDENTIFIER, re.compile(_ID)),
    (TokenKind.QUALIFIED_IDENTIFIER, re.compile(rf"{_ID}\.{_ID}")),
    (TokenKind.STRING, re.compile(r"'(?:[^'\\\n]|\\.|'')*'")),
    (TokenKind.UNQUOTED_STRING, re.compile(rf"[{_LETTER}][{_LETTER}0-9\-._:/]*")),
    (TokenKind.INTEGER, re.compile(r"[-+]?(?:0x[0-9A-Fa-f]+|[0-9]+)[A-Za-z]*")),
    (TokenKind.REAL, re.compile(r"[-+]?[0-9]*\.[0-9]+(?:[Ee][-+]?[0-9]+)?")),
    (TokenKind.EQUALS, re.compile(r"=")),
]


class Tokenizer:
    """Produces tokens lazily from a text stream, one physical line at a time.

    ``lineno`` is the line currently being scanned; it advances exactly once
    per EOL token handed out. Reading failures and oversized tokens raise
    ScannerFaultError so the caller can abandon just this stream.
    """

    def __init__(self, stream: TextIO, max_token_length: int = 1024 * 1024) -> None:
        self._stream = stream
        self._max_token_length = max_token_length
        self._buffer = ""
        self._pos = 0
        self._lines_read = 0
        self._exhausted = False
        self.lineno = 1

    @property
    def lines_read(self) -> int:
        """Number of physical lines pulled from the stream so far."""
        return self._lines_read

    def _fill(self) -> bool:
        if self._exhausted:
            return False
        try:
            line = self._stream.readline()
        except (OSError, MemoryError) as e:
            raise ScannerFaultError(f"could not read configuration text: {e}", cause=e) from e
        if not line:
            self._exhausted = True
            return False
        self._buffer = line
        self._pos = 0
        self._lines_read += 1
        return True

    def _match(self) -> tuple[TokenKind | None, int]:
        best_kind: TokenKind | None = TokenKind.ERROR
        best_len = 0
        for kind, pattern in _RULES:
            m = pattern.match(self._buffer, self._pos)
            if m is not None and m.end() - self._pos > best_len:
                best_kind = kind
                best_len = m.end() - self._pos
        if best_len == 0:
            return TokenKind.ERROR, 1
        return best_kind, best_len

    def next_token(self) -> Token:
        """Return the next token, or an EOF token once input is exhausted."""
        while True:
            if self._pos >= len(self._buffer) and not self._fill():
                return Token(TokenKind.EOF, "", max(self._lines_read, 1))

            kind, length = self._match()
            if kind is None:
                self._pos += length
                continue
            if length > self._max_token_length:
                raise ScannerFaultError(f"token exceeds maximum length of {self._max_token_length} characters")
            text = self._buffer[self._pos : self._pos + length]
            self._pos += length

            token = Token(kind, text, self.lineno)
            if kind is TokenKind.EOL:
                self.lineno += 1
            return token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.kind is TokenKind.EOF:
                return
            yield token


def tokenize(text: str) -> list[Token]:
    """Tokenize a string, returning every token before EOF."""
    return list(Tokenizer(io.StringIO(text)))
