"""pgconf - loader for include-aware ``key = value`` configuration files."""

from __future__ import annotations

# Entry points
from pgconf.loader import RawLoadResult, ValidatedLoadResult, load_raw, load_validated

# Sinks
from pgconf.store import ConfigEntry, ItemHandler, OrderedKeyValueStore

# Config
from pgconf.config import Config, LoaderSettings

# Parser
from pgconf.parser import ConfigFileParser, ParseContext, Token, TokenKind, Tokenizer, unescape_quoted_string

# Include resolution
from pgconf.include import resolve_location, scan_conf_dir

# Errors
from pgconf.errors import (
    BlankLocationError,
    ConfigError,
    ConfigFileError,
    ConfigFileOpenError,
    ConfigNotFoundError,
    ConfigSyntaxError,
    DirectoryOpenError,
    DirectoryStatError,
    ErrorCodes,
    IncludeDepthExceededError,
    IncludeRecursionError,
    InvalidConfigItemError,
    ScannerFaultError,
    TooManySyntaxErrorsError,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "load_raw",
    "load_validated",
    "RawLoadResult",
    "ValidatedLoadResult",
    # Sinks
    "ConfigEntry",
    "ItemHandler",
    "OrderedKeyValueStore",
    # Config
    "Config",
    "LoaderSettings",
    # Parser
    "ConfigFileParser",
    "ParseContext",
    "Token",
    "TokenKind",
    "Tokenizer",
    "unescape_quoted_string",
    # Include resolution
    "resolve_location",
    "scan_conf_dir",
    # Errors
    "ErrorCodes",
    "ConfigFileError",
    "ConfigError",
    "ConfigNotFoundError",
    "BlankLocationError",
    "IncludeDepthExceededError",
    "IncludeRecursionError",
    "ConfigFileOpenError",
    "ConfigSyntaxError",
    "TooManySyntaxErrorsError",
    "DirectoryOpenError",
    "DirectoryStatError",
    "ScannerFaultError",
    "InvalidConfigItemError",
]
