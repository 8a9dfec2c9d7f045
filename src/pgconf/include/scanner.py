"""Directory scanner for ``include_dir`` targets."""

from __future__ import annotations

import logging
import os
import stat

from pgconf.errors import BlankLocationError, DirectoryOpenError, DirectoryStatError
from pgconf.include.paths import canonicalize, is_blank, resolve_location

logger = logging.getLogger(__name__)

__all__ = ["scan_conf_dir"]


def _is_candidate(name: str, suffix: str) -> bool:
    if len(name) < len(suffix) + 1:
        return False
    if name.startswith("."):
        return False
    return name.endswith(suffix)


def scan_conf_dir(
    directory: str,
    calling_file: str | None = None,
    base_dir: str | None = None,
    suffix: str = ".conf",
) -> list[str]:
    """List the configuration files of an include directory, in processing order.

    Only regular entries named ``<something><suffix>`` that do not start
    with a dot are kept. The result is sorted by the byte order of the full
    path so that every platform processes files in the same order.

    Raises:
        BlankLocationError: If ``directory`` is empty or whitespace.
        DirectoryOpenError: If the directory cannot be listed.
        DirectoryStatError: If an entry cannot be inspected; the scan is
            abandoned, including entries not yet looked at.
    """
    if is_blank(directory):
        raise BlankLocationError(location=directory or "", kind="directory")

    resolved = resolve_location(directory, calling_file=calling_file, base_dir=base_dir)

    try:
        with os.scandir(resolved) as it:
            names = [entry.name for entry in it]
    except OSError as e:
        raise DirectoryOpenError(directory=resolved, reason=e.strerror or str(e), cause=e) from e

    results: list[str] = []
    for name in names:
        if not _is_candidate(name, suffix):
            continue

        path = canonicalize(os.path.join(resolved, name))
        try:
            st = os.stat(path)
        except OSError as e:
            raise DirectoryStatError(path=path, reason=e.strerror or str(e), cause=e) from e

        if stat.S_ISDIR(st.st_mode):
            logger.debug("Skipping directory %s in %s", name, resolved)
            continue
        results.append(path)

    results.sort(key=os.fsencode)
    logger.debug("Found %d configuration files in %s", len(results), resolved)
    return results
