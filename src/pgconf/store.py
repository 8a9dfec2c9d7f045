"""Result sinks: ConfigEntry, OrderedKeyValueStore and the item handler type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

__all__ = ["ConfigEntry", "OrderedKeyValueStore", "ItemHandler"]


@dataclass
class ConfigEntry:
    """One parsed ``name = value`` pair.

    Attributes:
        name: Parameter name, case preserved as written.
        value: Decoded value text.
        source_file: Canonical path of the file the pair was read from.
        source_line: Line the pair ended on.
    """

    name: str
    value: str
    source_file: str | None = None
    source_line: int | None = None


ItemHandler = Callable[[ConfigEntry], None]


class OrderedKeyValueStore:
    """Ordered name/value store where names are logically unique.

    ``replace_or_set`` overwrites an existing entry in place, so insertion
    order is kept for every name.
    """

    def __init__(self, case_sensitive: bool = True) -> None:
        self._case_sensitive = case_sensitive
        self._entries: list[ConfigEntry] = []
        self._index: dict[str, int] = {}

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def _key(self, name: str) -> str:
        return name if self._case_sensitive else name.casefold()

    def replace_or_set(
        self,
        name: str,
        value: str,
        source_file: str | None = None,
        source_line: int | None = None,
    ) -> ConfigEntry:
        """Overwrite the value of ``name`` in place, or append a new entry."""
        key = self._key(name)
        pos = self._index.get(key)
        if pos is not None:
            entry = self._entries[pos]
            entry.value = value
            entry.source_file = source_file
            entry.source_line = source_line
            return entry

        entry = ConfigEntry(name=name, value=value, source_file=source_file, source_line=source_line)
        self._index[key] = len(self._entries)
        self._entries.append(entry)
        return entry

    def add(self, entry: ConfigEntry) -> None:
        """Item-handler adapter around replace_or_set."""
        self.replace_or_set(entry.name, entry.value, entry.source_file, entry.source_line)

    def get(self, name: str, default: str | None = None) -> str | None:
        pos = self._index.get(self._key(name))
        if pos is None:
            return default
        return self._entries[pos].value

    def entry(self, name: str) -> ConfigEntry | None:
        pos = self._index.get(self._key(name))
        return None if pos is None else self._entries[pos]

    def names(self) -> list[str]:
        return [e.name for e in self._entries]

    def to_dict(self) -> dict[str, str]:
        return {e.name: e.value for e in self._entries}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._index

    def __iter__(self) -> Iterator[ConfigEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"OrderedKeyValueStore({self.to_dict()!r})"
