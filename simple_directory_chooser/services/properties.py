"""Parser for key-value properties files.

Registries and icon set descriptors use the classic ``.properties``
format:
- lines end at ``\\n``, ``\\r`` or ``\\r\\n`` only
- ``#`` and ``!`` start comment lines
- keys end at the first unescaped ``=``, ``:`` or whitespace
- a trailing backslash continues the logical line on the next line
- ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` escapes are decoded
"""

import re

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def load_properties(data: bytes) -> dict[str, str]:
    """Parse raw properties content.

    Args:
        data: File content, UTF-8 (latin-1 is accepted as a fallback)

    Returns:
        Mapping of keys to values, later duplicates win

    Raises:
        ValueError: If a unicode escape is malformed
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = data.decode("latin-1")
    return parse_properties(text)


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dictionary.

    Args:
        text: Properties file content

    Returns:
        Mapping of keys to values, later duplicates win
    """
    result: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_line(line)
        result[_unescape(key)] = _unescape(value)
    return result


def _logical_lines(text: str):
    """Yield logical lines with comments dropped and continuations joined."""
    pending: str | None = None
    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue
        if _continues(line):
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending:
        yield pending


def _continues(line: str) -> bool:
    """Check for an odd number of trailing backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _split_line(line: str) -> tuple[str, str]:
    """Split a logical line into its raw key and raw value."""
    i = 0
    while i < len(line):
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in _SEPARATORS or c in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(value: str) -> str:
    """Decode backslash escapes."""
    if "\\" not in value:
        return value

    out = []
    i = 0
    while i < len(value):
        c = value[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue

        i += 1
        if i >= len(value):
            break
        c = value[i]
        if c == "u":
            digits = value[i + 1 : i + 5]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            out.append(chr(int(digits, 16)))
            i += 5
            continue
        out.append(_ESCAPES.get(c, c))
        i += 1

    return "".join(out)
