"""Include target path resolution."""

from __future__ import annotations

import os

__all__ = ["canonicalize", "is_blank", "resolve_location"]

_BLANK_CHARS = " \t\r\n"


def is_blank(location: str | None) -> bool:
    """True for None, empty, or whitespace-only locations."""
    return location is None or location.strip(_BLANK_CHARS) == ""


def canonicalize(path: str) -> str:
    """Lexically normalise a path: no ``.``/``..`` segments, one separator style.

    Symlinks are not resolved, so the result names the path as written.
    """
    path = os.path.normpath(path)
    if os.altsep:
        path = path.replace(os.altsep, os.sep)
    # POSIX normpath keeps exactly two leading slashes
    if os.name == "posix" and path.startswith("//"):
        path = path[1:]
    return path


def resolve_location(
    location: str,
    calling_file: str | None = None,
    base_dir: str | None = None,
) -> str:
    """Compute the canonical location of an include target.

    Absolute locations are kept; relative ones are joined to the directory
    of ``calling_file`` when known, otherwise to ``base_dir``; with neither,
    the location is only canonicalised.
    """
    if os.path.isabs(location):
        return canonicalize(location)
    if calling_file:
        return canonicalize(os.path.join(os.path.dirname(calling_file), location))
    if base_dir:
        return canonicalize(os.path.join(base_dir, location))
    return canonicalize(location)
