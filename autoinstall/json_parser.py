"""Lenient JSON parsing for Babel configuration files.

Babel accepts .babelrc files that are not strict JSON: they may carry
// line comments, /* block */ comments and trailing commas. This module
blanks those out so the result can go through json.loads().

Stripped characters are replaced with spaces (newlines are kept) so that
line/column positions in decode errors still point into the original file.
"""

import json
from typing import Any, Final

from .errors import ConfigError

_NORMAL: Final[int] = 0
_IN_STRING: Final[int] = 1
_LINE_COMMENT: Final[int] = 2
_BLOCK_COMMENT: Final[int] = 3


def _blank(text: str) -> str:
    return "".join("\n" if c == "\n" else " " for c in text)


def _next_significant(text: str, start: int) -> str:
    """Return the next character after start that is not whitespace or a comment."""
    i, n = start, len(text)
    while i < n:
        if text[i] in " \t\r\n":
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = n if end == -1 else end + 2
        else:
            return text[i]
    return ""


def strip_jsonish(text: str) -> str:
    """Convert JSON-ish text into strict JSON.

    Examples:
        >>> strip_jsonish('{"presets": ["react",]}')
        '{"presets": ["react" ]}'

        >>> json.loads(strip_jsonish('{"a": 1 /* note */}'))
        {'a': 1}

        >>> json.loads(strip_jsonish('{"url": "http://x//y"} // trailing'))
        {'url': 'http://x//y'}
    """
    out: list[str] = []
    state = _NORMAL
    i, n = 0, len(text)

    while i < n:
        char = text[i]

        if state == _IN_STRING:
            out.append(char)
            if char == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if char == '"':
                state = _NORMAL
            i += 1
        elif state == _LINE_COMMENT:
            if char == "\n":
                out.append(char)
                state = _NORMAL
            else:
                out.append(" ")
            i += 1
        elif state == _BLOCK_COMMENT:
            if text.startswith("*/", i):
                out.append("  ")
                state = _NORMAL
                i += 2
            else:
                out.append(_blank(char))
                i += 1
        elif char == '"':
            out.append(char)
            state = _IN_STRING
            i += 1
        elif text.startswith("//", i):
            out.append("  ")
            state = _LINE_COMMENT
            i += 2
        elif text.startswith("/*", i):
            out.append("  ")
            state = _BLOCK_COMMENT
            i += 2
        elif char == "," and _next_significant(text, i + 1) in ("]", "}"):
            out.append(" ")
            i += 1
        else:
            out.append(char)
            i += 1

    return "".join(out)


def load_jsonish(text: str, source: str = "<string>") -> Any:
    """Parse JSON-ish text, raising ConfigError with a caret on failure."""
    try:
        return json.loads(strip_jsonish(text))
    except json.JSONDecodeError as e:
        lines = text.splitlines()
        context = ""
        if 0 < e.lineno <= len(lines):
            context = f"\n  {lines[e.lineno - 1]}\n  {' ' * (e.colno - 1)}^"
        raise ConfigError(
            f"Invalid JSON in {source} at line {e.lineno}, column {e.colno}: {e.msg}{context}"
        ) from e


__all__ = ["strip_jsonish", "load_jsonish"]
