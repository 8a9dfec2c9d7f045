"""Parser state carried through include recursion."""

from __future__ import annotations

from dataclasses import dataclass, replace

__all__ = ["ParseContext", "INCLUDE", "INCLUDE_IF_EXISTS", "INCLUDE_DIR"]

INCLUDE = "include"
INCLUDE_IF_EXISTS = "include_if_exists"
INCLUDE_DIR = "include_dir"


@dataclass(frozen=True)
class ParseContext:
    """Where a file or directory is being processed from.

    Attributes:
        base_dir: Directory relative locations resolve against when there is
            no calling file. Directives are only honoured when it is set.
        calling_file: Canonical path of the file whose line issued this
            include, None for the top-level file.
        depth: 0 for the top-level file, one more per include hop.
        strict: Whether failing to open the target is an error.
    """

    base_dir: str | None = None
    calling_file: str | None = None
    depth: int = 0
    strict: bool = True

    @property
    def directives_enabled(self) -> bool:
        return self.base_dir is not None

    def descend(self, calling_file: str, strict: bool = True) -> ParseContext:
        """Context for a target included from ``calling_file``."""
        return replace(self, calling_file=calling_file, depth=self.depth + 1, strict=strict)
