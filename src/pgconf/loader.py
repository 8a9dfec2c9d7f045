"""Top-level entry points: load_raw and load_validated."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from pgconf.config import LoaderSettings
from pgconf.parser.driver import ConfigFileParser
from pgconf.parser.types import ParseContext
from pgconf.store import ItemHandler, OrderedKeyValueStore

logger = logging.getLogger(__name__)

__all__ = ["RawLoadResult", "ValidatedLoadResult", "load_raw", "load_validated"]


@dataclass
class ValidatedLoadResult:
    """Outcome of load_validated; unpacks as ``(success, errors, warnings)``."""

    success: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        return iter((self.success, self.errors, self.warnings))


@dataclass
class RawLoadResult:
    """Outcome of load_raw; unpacks as ``(success, store, errors, warnings)``."""

    success: bool
    store: OrderedKeyValueStore
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        return iter((self.success, self.store, self.errors, self.warnings))


def load_validated(
    config_file: str,
    base_dir: str | None,
    handler: ItemHandler,
    settings: LoaderSettings | None = None,
) -> ValidatedLoadResult:
    """Parse ``config_file`` and hand every name/value pair to ``handler``.

    Include directives are followed whenever ``base_dir`` is given. The
    handler may raise InvalidConfigItemError to reject a pair; the rejection
    is reported and parsing continues.
    """
    parser = ConfigFileParser(sink=handler, settings=settings)
    ok = parser.parse_file(config_file, ParseContext(base_dir=base_dir))
    logger.info(
        "Loaded %s: success=%s errors=%d warnings=%d", config_file, ok, len(parser.errors), len(parser.warnings)
    )
    return ValidatedLoadResult(success=ok, errors=parser.errors, warnings=parser.warnings)


def load_raw(
    config_file: str,
    base_dir: str | None,
    settings: LoaderSettings | None = None,
) -> RawLoadResult:
    """Parse ``config_file`` into one ordered store.

    Pairs from included files are merged in processing order; a later pair
    with the same name replaces the earlier value in place.
    """
    settings = settings or LoaderSettings()
    store = OrderedKeyValueStore(case_sensitive=settings.case_sensitive_keys)
    result = load_validated(config_file, base_dir, store.add, settings=settings)
    return RawLoadResult(success=result.success, store=store, errors=result.errors, warnings=result.warnings)
