"""Escape-sequence decoding for Key and Value text.

Localization documents may spell control and non-ASCII characters with
C-style escapes so translators can edit them in plain text editors:

    \\n \\r \\f \\t \\v \\b \\\\   control characters and backslash
    \\xH .. \\xHHHH              1 to 4 hex digits (greedy)
    \\uHHHH                     exactly 4 hex digits
    \\UHHHHHHHH                 exactly 8 hex digits

Any other backslash sequence is left untouched.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

__all__ = ["unescape"]

_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "f": "\f",
    "t": "\t",
    "v": "\v",
    "b": "\b",
    "\\": "\\",
}

_ESCAPE_PATTERN = re.compile(
    r"\\([nrftvb\\]|x[0-9A-Fa-f]{1,4}|u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{8})"
)

_MAX_CODE_POINT = 0x10FFFF


def _replace(match: re.Match[str]) -> str:
    payload = match.group(1)
    simple = _SIMPLE_ESCAPES.get(payload)
    if simple is not None:
        return simple

    code_point = int(payload[1:], 16)
    # \U allows 8 digits; anything past the Unicode range stays as written
    if code_point > _MAX_CODE_POINT:
        return match.group(0)
    return chr(code_point)


def unescape(text: str) -> str:
    """Replace escape sequences in text with the characters they denote.

    Args:
        text: Raw element text from a localization document

    Returns:
        Decoded text

    Example:
        >>> unescape(r"line1\\nline2")
        'line1\\nline2'
        >>> unescape(r"\\x41\\u00e9")
        'Aé'
        >>> unescape(r"keep \\q as is")
        'keep \\\\q as is'
    """
    if "\\" not in text:
        return text
    return _ESCAPE_PATTERN.sub(_replace, text)
