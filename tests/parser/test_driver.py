"""Tests for ConfigFileParser line parsing and error recovery."""

from __future__ import annotations

import io

import pytest

from pgconf.config import LoaderSettings
from pgconf.errors import InvalidConfigItemError
from pgconf.parser.driver import ConfigFileParser
from pgconf.parser.types import ParseContext
from pgconf.store import ConfigEntry

PATH = "/virtual/main.conf"


def parse(text: str, settings: LoaderSettings | None = None, base_dir: str | None = None):
    entries: list[ConfigEntry] = []
    parser = ConfigFileParser(sink=entries.append, settings=settings)
    ok = parser.parse_stream(io.StringIO(text), PATH, ParseContext(base_dir=base_dir))
    return ok, [(e.name, e.value) for e in entries], parser


# === Well-formed lines ===


class TestWellFormedLines:
    def test_equals_is_optional(self) -> None:
        _, with_eq, _ = parse("name = 'value'\n")
        _, without_eq, _ = parse("name 'value'\n")
        assert with_eq == without_eq == [("name", "value")]

    def test_all_value_kinds(self) -> None:
        ok, pairs, parser = parse(
            "a = on\n"
            "b = 'quoted \\'x\\''\n"
            "c = 64MB\n"
            "d = 0.5\n"
            "e = en_US.UTF-8\n"
        )
        assert ok is True
        assert pairs == [
            ("a", "on"),
            ("b", "quoted 'x'"),
            ("c", "64MB"),
            ("d", "0.5"),
            ("e", "en_US.UTF-8"),
        ]
        assert parser.errors == []

    def test_octal_escapes_use_loader_encoding(self) -> None:
        _, utf8, _ = parse("name = '\\303\\251'\n")
        _, latin1, _ = parse("name = '\\351'\n", settings=LoaderSettings(encoding="latin-1"))
        assert utf8 == latin1 == [("name", "é")]

    def test_qualified_name(self) -> None:
        _, pairs, _ = parse("auto_explain.log_min_duration = 250ms\n")
        assert pairs == [("auto_explain.log_min_duration", "250ms")]

    def test_name_case_preserved(self) -> None:
        _, pairs, _ = parse("Work_Mem = 4MB\n")
        assert pairs == [("Work_Mem", "4MB")]

    def test_blank_and_comment_lines_skipped(self) -> None:
        ok, pairs, _ = parse("\n# comment\n   \nx = 1\n\n")
        assert ok is True
        assert pairs == [("x", "1")]

    def test_last_line_without_newline(self) -> None:
        ok, pairs, _ = parse("x = 1\ny = 2")
        assert ok is True
        assert pairs == [("x", "1"), ("y", "2")]

    def test_duplicates_all_reach_sink(self) -> None:
        _, pairs, _ = parse("x = 1\nx = 2\n")
        assert pairs == [("x", "1"), ("x", "2")]

    def test_source_file_and_line(self) -> None:
        entries: list[ConfigEntry] = []
        parser = ConfigFileParser(sink=entries.append)
        parser.parse_stream(io.StringIO("\n\nx = 1\ny = 2"), PATH, ParseContext())
        assert [(e.source_file, e.source_line) for e in entries] == [(PATH, 3), (PATH, 4)]

    def test_directives_stored_without_base_dir(self) -> None:
        ok, pairs, _ = parse("include 'other.conf'\n")
        assert ok is True
        assert pairs == [("include", "other.conf")]


# === Syntax errors ===


class TestSyntaxErrors:
    def test_missing_name(self) -> None:
        ok, pairs, parser = parse("= 5\n")
        assert ok is False
        assert pairs == []
        assert parser.errors == [f'syntax error in file "{PATH}" line 1, near token "="']

    def test_missing_value_reports_end_of_line(self) -> None:
        _, _, parser = parse("a = 1\nname =\n")
        assert parser.errors == [f'syntax error in file "{PATH}" line 2, near end of line']

    def test_missing_value_at_eof(self) -> None:
        _, _, parser = parse("a = 1\nname =")
        assert parser.errors == [f'syntax error in file "{PATH}" line 2, near end of line']

    def test_trailing_garbage(self) -> None:
        _, _, parser = parse("name = value extra\n")
        assert parser.errors == [f'syntax error in file "{PATH}" line 1, near token "extra"']

    def test_real_with_trailing_dot(self) -> None:
        ok, pairs, parser = parse("x = 2.\n")
        assert ok is False
        assert pairs == []
        assert parser.errors == [f'syntax error in file "{PATH}" line 1, near token "."']

    def test_double_equals(self) -> None:
        _, _, parser = parse("a = 1\nb = = 2\nc = 3\n")
        assert parser.errors == [f'syntax error in file "{PATH}" line 2, near token "="']

    def test_resync_keeps_following_lines(self) -> None:
        ok, pairs, parser = parse("a = 1\n@bad line here\nb = 2\n")
        assert ok is False
        assert pairs == [("a", "1"), ("b", "2")]
        assert len(parser.errors) == 1

    def test_error_on_last_line_without_newline(self) -> None:
        ok, pairs, parser = parse("a = 1\nb = 2 3")
        assert ok is False
        assert pairs == [("a", "1")]
        assert parser.errors == [f'syntax error in file "{PATH}" line 2, near token "3"']

    def test_too_many_errors_abandons_file(self) -> None:
        text = "bad = = line\n" * 150 + "late = 1\n"
        ok, pairs, parser = parse(text)
        assert ok is False
        syntax = [e for e in parser.errors if e.startswith("syntax error")]
        assert len(syntax) == 100
        assert parser.errors[-1] == f'too many syntax errors found, abandoning file "{PATH}"'
        assert pairs == []

    def test_error_cap_is_configurable(self) -> None:
        text = "= 1\n" * 10 + "late = 1\n"
        _, pairs, parser = parse(text, settings=LoaderSettings(max_syntax_errors=3))
        assert len(parser.errors) == 4
        assert pairs == []


# === Item handler failures ===


class TestItemHandler:
    def test_invalid_item_is_reported_and_parsing_continues(self) -> None:
        seen: list[str] = []

        def handler(entry: ConfigEntry) -> None:
            if entry.name == "port":
                raise InvalidConfigItemError(entry.name, entry.value, "not a valid port")
            seen.append(entry.name)

        parser = ConfigFileParser(sink=handler)
        ok = parser.parse_stream(io.StringIO("a = 1\nport = x\nb = 2\n"), PATH, ParseContext())
        assert ok is False
        assert seen == ["a", "b"]
        assert parser.errors == [
            f'invalid value for parameter "port": "x": not a valid port in file "{PATH}" line 2'
        ]

    def test_other_exceptions_propagate(self) -> None:
        def handler(entry: ConfigEntry) -> None:
            raise RuntimeError("boom")

        parser = ConfigFileParser(sink=handler)
        with pytest.raises(RuntimeError, match="boom"):
            parser.parse_stream(io.StringIO("a = 1\n"), PATH, ParseContext())


# === Scanner faults ===


class TestScannerFault:
    def test_fault_abandons_stream_with_location(self) -> None:
        text = "a = 1\nb = 2\nc = " + "x" * 50 + "\nd = 4\n"
        ok, pairs, parser = parse(text, settings=LoaderSettings(max_token_length=20))
        assert ok is False
        assert pairs == [("a", "1"), ("b", "2")]
        assert len(parser.errors) == 1
        assert parser.errors[0].startswith("token exceeds maximum length")
        assert parser.errors[0].endswith(f'at file "{PATH}" line 3')

    def test_long_comment_does_not_fault(self) -> None:
        ok, pairs, parser = parse("# " + "c" * 40 + "\na = 1\n", settings=LoaderSettings(max_token_length=16))
        assert ok is True
        assert pairs == [("a", "1")]
        assert parser.errors == []
