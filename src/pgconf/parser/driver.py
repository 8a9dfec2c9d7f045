"""Line parser and include resolution for configuration files."""

from __future__ import annotations

import logging
from typing import TextIO

from pgconf.config import LoaderSettings
from pgconf.errors import (
    BlankLocationError,
    ConfigFileError,
    ConfigFileOpenError,
    ConfigSyntaxError,
    IncludeDepthExceededError,
    IncludeRecursionError,
    InvalidConfigItemError,
    ScannerFaultError,
    TooManySyntaxErrorsError,
)
from pgconf.include.paths import canonicalize, is_blank, resolve_location
from pgconf.include.scanner import scan_conf_dir
from pgconf.parser.literals import unescape_quoted_string
from pgconf.parser.tokenizer import Token, Tokenizer, TokenKind
from pgconf.parser.types import INCLUDE, INCLUDE_DIR, INCLUDE_IF_EXISTS, ParseContext
from pgconf.store import ConfigEntry, ItemHandler

logger = logging.getLogger(__name__)

__all__ = ["ConfigFileParser"]

_NAME_KINDS = frozenset({TokenKind.IDENTIFIER, TokenKind.QUALIFIED_IDENTIFIER})
_VALUE_KINDS = frozenset(
    {
        TokenKind.IDENTIFIER,
        TokenKind.STRING,
        TokenKind.INTEGER,
        TokenKind.REAL,
        TokenKind.UNQUOTED_STRING,
    }
)
_END_KINDS = frozenset({TokenKind.EOL, TokenKind.EOF})


class ConfigFileParser:
    """Parses configuration files, following include directives.

    One instance holds the state of one traversal: the item sink, the
    settings, and the error and warning lists every nested file appends to.
    Each file is parsed with its own Tokenizer, so line numbers never leak
    between files.
    """

    def __init__(self, sink: ItemHandler, settings: LoaderSettings | None = None) -> None:
        self._sink = sink
        self.settings = settings or LoaderSettings()
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def _record_error(self, error: ConfigFileError) -> None:
        self.errors.append(error.message)
        logger.error("%s", error.message)

    def _record_warning(self, message: str) -> None:
        self.warnings.append(message)
        logger.warning("%s", message)

    # --- files and directories ---

    def _check_target(self, location: str, ctx: ParseContext) -> str:
        if is_blank(location):
            raise BlankLocationError(location=location or "")
        if ctx.depth > self.settings.max_include_depth:
            raise IncludeDepthExceededError(
                location=location, depth=ctx.depth, max_depth=self.settings.max_include_depth
            )
        path = resolve_location(location, calling_file=ctx.calling_file, base_dir=ctx.base_dir)
        if ctx.calling_file is not None and path == canonicalize(ctx.calling_file):
            raise IncludeRecursionError(path=path)
        return path

    def parse_file(self, location: str, ctx: ParseContext) -> bool:
        """Parse one file; returns False if it or anything it includes failed.

        With ``ctx.strict`` unset, a file that cannot be opened only adds a
        warning and counts as success.
        """
        try:
            path = self._check_target(location, ctx)
        except ConfigFileError as e:
            self._record_error(e)
            return False

        try:
            stream = open(path, encoding=self.settings.encoding, errors="surrogateescape", newline="\n")
        except OSError as e:
            if ctx.strict:
                self._record_error(ConfigFileOpenError(path=path, reason=e.strerror or str(e), cause=e))
                return False
            self._record_warning(f'skipping missing configuration file "{path}"')
            return True

        logger.debug("Parsing %s at depth %d", path, ctx.depth)
        with stream:
            return self.parse_stream(stream, path, ctx)

    def parse_directory(self, location: str, ctx: ParseContext) -> bool:
        """Parse every file an ``include_dir`` target holds, in sorted order."""
        try:
            files = scan_conf_dir(
                location,
                calling_file=ctx.calling_file,
                base_dir=ctx.base_dir,
                suffix=self.settings.conf_suffix,
            )
        except ConfigFileError as e:
            self._record_error(e)
            return False

        ok = True
        for path in files:
            if not self.parse_file(path, ctx):
                ok = False
        return ok

    # --- lines ---

    def parse_stream(self, stream: TextIO, path: str, ctx: ParseContext) -> bool:
        """Parse an open text stream named ``path``.

        A scanner fault abandons only this stream and is reported with the
        line it happened on.
        """
        tokenizer = Tokenizer(stream, max_token_length=self.settings.max_token_length)
        try:
            return self._parse_lines(tokenizer, path, ctx)
        except ScannerFaultError as e:
            self._record_error(e.at(path, tokenizer.lineno))
            return False

    def _parse_lines(self, tokenizer: Tokenizer, path: str, ctx: ParseContext) -> bool:
        ok = True
        error_count = 0

        while True:
            token = tokenizer.next_token()
            if token.kind is TokenKind.EOF:
                break
            if token.kind is TokenKind.EOL:
                continue

            pair, last = self._read_line(tokenizer, token)
            if pair is None:
                ok = False
                error_count += 1
                near = None if last.kind in _END_KINDS else last.text
                self._record_error(ConfigSyntaxError(path=path, line=last.line, near=near))
                if error_count >= self.settings.max_syntax_errors:
                    self._record_error(TooManySyntaxErrorsError(path=path, count=error_count))
                    break
                while last.kind not in _END_KINDS:
                    last = tokenizer.next_token()
                if last.kind is TokenKind.EOF:
                    break
                continue

            name, value = pair
            if not self._dispatch(name, value, path, last.line, ctx):
                ok = False
            if last.kind is TokenKind.EOF:
                break

        return ok

    def _read_line(self, tokenizer: Tokenizer, first: Token) -> tuple[tuple[str, str] | None, Token]:
        """Read ``NAME [=] VALUE`` up to the end of the line.

        Returns the pair and the terminating token, or None and the token
        that broke the grammar.
        """
        if first.kind not in _NAME_KINDS:
            return None, first
        name = first.text

        token = tokenizer.next_token()
        if token.kind is TokenKind.EQUALS:
            token = tokenizer.next_token()
        if token.kind not in _VALUE_KINDS:
            return None, token
        if token.kind is TokenKind.STRING:
            value = unescape_quoted_string(token.text, self.settings.encoding)
        else:
            value = token.text

        token = tokenizer.next_token()
        if token.kind not in _END_KINDS:
            return None, token
        return (name, value), token

    def _dispatch(self, name: str, value: str, path: str, line: int, ctx: ParseContext) -> bool:
        if ctx.directives_enabled:
            directive = name.lower()
            if directive == INCLUDE_DIR:
                return self.parse_directory(value, ctx.descend(path))
            if directive == INCLUDE_IF_EXISTS:
                return self.parse_file(value, ctx.descend(path, strict=False))
            if directive == INCLUDE:
                return self.parse_file(value, ctx.descend(path))

        entry = ConfigEntry(name=name, value=value, source_file=path, source_line=line)
        try:
            self._sink(entry)
        except InvalidConfigItemError as e:
            self.errors.append(f'{e.message} in file "{path}" line {line}')
            logger.error('%s in file "%s" line %d', e.message, path, line)
            return False
        return True
