"""Tests for unescape_quoted_string()."""

from __future__ import annotations

import pytest

from pgconf.parser.literals import unescape_quoted_string
from pgconf.parser.tokenizer import TokenKind, tokenize


class TestUnescape:
    def test_mixed_escape_octal_and_doubled_quote(self) -> None:
        assert unescape_quoted_string(r"'a\tb\041c'''") == "a\tb!c'"

    def test_plain(self) -> None:
        assert unescape_quoted_string("'hello world'") == "hello world"

    def test_empty(self) -> None:
        assert unescape_quoted_string("''") == ""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (r"'\b'", "\b"),
            (r"'\f'", "\f"),
            (r"'\n'", "\n"),
            (r"'\r'", "\r"),
            (r"'\t'", "\t"),
        ],
    )
    def test_control_escapes(self, raw: str, expected: str) -> None:
        assert unescape_quoted_string(raw) == expected

    def test_octal_stops_after_three_digits(self) -> None:
        assert unescape_quoted_string(r"'\1011'") == "A1"

    def test_short_octal(self) -> None:
        assert unescape_quoted_string(r"'\7x'") == "\x07x"

    def test_octal_stops_at_non_octal_digit(self) -> None:
        assert unescape_quoted_string(r"'\18'") == "\x018"

    def test_octal_sequence_decodes_as_utf8(self) -> None:
        assert unescape_quoted_string(r"'caf\303\251'") == "café"

    def test_octal_sequence_uses_given_encoding(self) -> None:
        assert unescape_quoted_string(r"'\351t\351'", encoding="latin-1") == "été"

    def test_invalid_octal_bytes_are_surrogate_escaped(self) -> None:
        value = unescape_quoted_string(r"'\377'")
        assert value == "\udcff"
        assert value.encode("utf-8", errors="surrogateescape") == b"\xff"

    def test_octal_masked_to_byte(self) -> None:
        assert unescape_quoted_string(r"'\777'", encoding="latin-1") == "\xff"

    def test_other_escape_splits_octal_runs(self) -> None:
        assert unescape_quoted_string(r"'\303\n\251'") == "\udcc3\n\udca9"

    def test_other_escape_is_literal(self) -> None:
        assert unescape_quoted_string(r"'\q\\\''") == "q\\'"

    def test_doubled_quotes_collapse(self) -> None:
        assert unescape_quoted_string("'it''s'") == "it's"

    @pytest.mark.parametrize("raw", ["", "'", "abc", "'abc", "abc'"])
    def test_not_quoted_raises(self, raw: str) -> None:
        with pytest.raises(ValueError):
            unescape_quoted_string(raw)

    def test_decodes_tokenizer_output(self) -> None:
        tok = tokenize(r"'C:\\data\\pg'")[0]
        assert tok.kind is TokenKind.STRING
        assert unescape_quoted_string(tok.text) == r"C:\data\pg"
