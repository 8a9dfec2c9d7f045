"""Loader settings and their YAML-backed accessor."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pgconf.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "LoaderSettings", "MAX_INCLUDE_DEPTH", "MAX_SYNTAX_ERRORS"]

MAX_INCLUDE_DEPTH = 10
MAX_SYNTAX_ERRORS = 100


class LoaderSettings(BaseModel):
    """Tunable limits and behaviour for a configuration load.

    Attributes:
        max_include_depth: Deepest include nesting accepted. May be lowered,
            never raised past MAX_INCLUDE_DEPTH.
        max_syntax_errors: Syntax errors tolerated in one file before the
            rest of it is abandoned.
        max_token_length: Longest single token the tokenizer will build.
        encoding: Text encoding used to read configuration files.
        case_sensitive_keys: Whether the raw store treats names differing
            only in case as distinct.
        conf_suffix: File suffix that include_dir picks up.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_include_depth: int = Field(default=MAX_INCLUDE_DEPTH, ge=0, le=MAX_INCLUDE_DEPTH)
    max_syntax_errors: int = Field(default=MAX_SYNTAX_ERRORS, ge=1)
    max_token_length: int = Field(default=1024 * 1024, ge=1)
    encoding: str = "utf-8"
    case_sensitive_keys: bool = True
    conf_suffix: str = Field(default=".conf", min_length=2, pattern=r"^\.")


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load settings from a YAML file.

        An empty file yields an empty Config.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigNotFoundError(config_path=str(path))

        content = path.read_text(encoding="utf-8")
        try:
            parsed = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in settings file: {path}", cause=e) from e

        if parsed is None:
            return cls()
        if not isinstance(parsed, dict):
            raise ConfigError(message=f"Settings file must be a YAML mapping: {path}")
        return cls(parsed)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def loader_settings(self) -> LoaderSettings:
        """Validate the ``loader`` section into LoaderSettings."""
        section = self.get("loader", {})
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigError(message="'loader' section must be a mapping")
        try:
            return LoaderSettings.model_validate(section)
        except ValidationError as e:
            raise ConfigError(message=f"Invalid loader settings: {e}", cause=e) from e
