"""Reader for ``key.properties`` files (Java ``.properties`` syntax)."""

from __future__ import annotations

import re
from pathlib import Path

from apksign.core.result import Err, Ok, Result

from .errors import PropertiesUnreadable, SigningError

__all__ = ["parse_properties", "load_properties"]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_BLANK = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dict.

    Supports comments (``#``/``!``), ``=``/``:``/whitespace separators,
    backslash line continuations and the usual escapes including ``\\uXXXX``.
    Later duplicate keys win.

    Raises:
        ValueError: On a malformed ``\\uXXXX`` escape.
    """
    out: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        out[_unescape(key)] = _unescape(value)
    return out


def load_properties(path: Path) -> Result[dict[str, str], SigningError]:
    """Read and parse a properties file.

    Java's ``Properties.load(InputStream)`` always decodes ISO-8859-1. This
    reads UTF-8 first and falls back to ISO-8859-1, so ASCII and Latin-1
    files match Java while UTF-8 files (common for hand-edited
    key.properties) keep their non-ASCII characters intact.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        return Err(PropertiesUnreadable(path=path, reason=e.strerror or str(e)))

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        text = raw.decode("latin-1")

    try:
        return Ok(parse_properties(text))
    except ValueError as e:
        return Err(PropertiesUnreadable(path=path, reason=str(e)))


def _logical_lines(text: str) -> list[str]:
    lines: list[str] = []
    pending: str | None = None

    for physical in _LINE_BREAK.split(text):
        stripped = physical.lstrip(_BLANK)
        if pending is None:
            if not stripped or stripped[0] in "#!":
                continue
            current = stripped
        else:
            current = pending + stripped

        if _ends_with_continuation(current):
            pending = current[:-1]
            continue

        pending = None
        if current:
            lines.append(current)

    if pending:
        lines.append(pending)
    return lines


def _ends_with_continuation(line: str) -> bool:
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    i = 0
    n = len(line)
    while i < n:
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in _SEPARATORS or c in _BLANK:
            break
        i += 1

    key = line[:i]
    j = i
    while j < n and line[j] in _BLANK:
        j += 1
    if j < n and line[j] in _SEPARATORS:
        j += 1
        while j < n and line[j] in _BLANK:
            j += 1
    return key, line[j:]


def _unescape(s: str) -> str:
    if "\\" not in s:
        return s

    out: list[str] = []
    i = 0
    n = len(s)
    while i < n:
        c = s[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue
        if i + 1 >= n:
            break
        nxt = s[i + 1]
        if nxt == "u":
            digits = s[i + 2 : i + 6]
            if len(digits) != 4 or not all(d in "0123456789abcdefABCDEF" for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)
