"""Include target resolution and directory discovery."""

from __future__ import annotations

from pgconf.include.paths import canonicalize, is_blank, resolve_location
from pgconf.include.scanner import scan_conf_dir

__all__ = [
    "canonicalize",
    "is_blank",
    "resolve_location",
    "scan_conf_dir",
]
