"""pgconf parser -- tokenizer, literal decoding and the line/include driver.

Example usage::

    from pgconf.parser import ConfigFileParser, ParseContext

    parser = ConfigFileParser(sink=print)
    ok = parser.parse_file("postgresql.conf", ParseContext(base_dir="/etc/db"))
"""

from __future__ import annotations

from pgconf.parser.driver import ConfigFileParser
from pgconf.parser.literals import unescape_quoted_string
from pgconf.parser.tokenizer import Token, Tokenizer, TokenKind, tokenize
from pgconf.parser.types import INCLUDE, INCLUDE_DIR, INCLUDE_IF_EXISTS, ParseContext

__all__ = [
    "ConfigFileParser",
    "ParseContext",
    "Token",
    "TokenKind",
    "Tokenizer",
    "tokenize",
    "unescape_quoted_string",
    "INCLUDE",
    "INCLUDE_DIR",
    "INCLUDE_IF_EXISTS",
]
