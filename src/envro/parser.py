from __future__ import annotations

from envro.errors import ParseError

_QUOTE = '"'
_ESCAPED_QUOTE = '\\"'


def _unquote(raw_value: str, line: str) -> str:
    if not raw_value.startswith(_QUOTE):
        return raw_value
    if len(raw_value) < 2 or not raw_value.endswith(_QUOTE):
        raise ParseError(line)
    return raw_value[1:-1].replace(_ESCAPED_QUOTE, _QUOTE)


def parse_line(raw_line: str) -> tuple[str, str] | None:
    """Parse a single line into ``(key, value)``.

    Blank lines and full-line ``#`` comments return ``None``. Anything else
    must look like ``KEY=VALUE``; the line is split on the first ``=`` so
    values may contain further ``=`` characters. Raises ``ParseError`` with
    the trimmed line when the line is malformed.
    """
    line = raw_line.strip()
    if not line or line.startswith("#"):
        return None

    key, sep, raw_value = line.partition("=")
    if not sep or not key or not raw_value:
        raise ParseError(line)

    return key, _unquote(raw_value, line)


def parse(content: str) -> dict[str, str]:
    """Parse .env file content into a mapping.

    The first invalid line aborts the whole parse. Later duplicates of a key
    overwrite earlier ones.
    """
    table: dict[str, str] = {}
    # "\r" of CRLF endings is removed by the per-line strip.
    for raw_line in content.split("\n"):
        entry = parse_line(raw_line)
        if entry is None:
            continue
        key, value = entry
        table[key] = value
    return table
