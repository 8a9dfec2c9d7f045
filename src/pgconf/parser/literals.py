"""Decoding of single-quoted string literals."""

from __future__ import annotations

__all__ = ["unescape_quoted_string"]

_SIMPLE_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_OCTAL_DIGITS = "01234567"


def unescape_quoted_string(raw: str, encoding: str = "utf-8") -> str:
    """Decode the raw text of a STRING token, quotes included.

    Backslash escapes ``\\b \\f \\n \\r \\t`` map to control characters,
    ``\\ooo`` (one to three octal digits) to that byte value, and any other
    escaped character to itself. A doubled quote collapses to one.

    Consecutive octal escapes form one byte sequence, decoded with
    ``encoding`` so that ``'\\303\\251'`` yields ``é`` under UTF-8. Bytes the
    encoding rejects are kept as surrogate escapes, the same policy used
    when reading configuration files.

    Raises:
        ValueError: If ``raw`` is not delimited by single quotes.
    """
    if len(raw) < 2 or raw[0] != "'" or raw[-1] != "'":
        raise ValueError(f"not a quoted string literal: {raw!r}")

    body = raw[1:-1]
    out: list[str] = []
    pending = bytearray()

    def flush() -> None:
        if pending:
            out.append(pending.decode(encoding, errors="surrogateescape"))
            pending.clear()

    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch == "\\" and i + 1 < n and body[i + 1] in _OCTAL_DIGITS:
            i += 1
            k = 0
            value = 0
            while k < 3 and i + k < n and body[i + k] in _OCTAL_DIGITS:
                value = (value << 3) + int(body[i + k])
                k += 1
            i += k
            pending.append(value & 0xFF)
            continue

        flush()
        if ch == "\\" and i + 1 < n:
            i += 1
            esc = body[i]
            out.append(_SIMPLE_ESCAPES.get(esc, esc))
        elif ch == "'" and i + 1 < n and body[i + 1] == "'":
            out.append("'")
            i += 1
        else:
            out.append(ch)
        i += 1
    flush()
    return "".join(out)
