"""
Unescaping of C-style escaped byte strings.

Raw tensor content in text-format files is written as a string literal where
bytes that are not printable ASCII are escaped, either as a three digit octal
code (eg. `\\001`) or as one of the common single character escapes.
"""

import re

# Byte values of the recognized single character escapes.
UNESCAPE_STR_TO_BYTE = {
    "t": 9,
    "n": 10,
    "r": 13,
    "'": 39,
    '"': 34,
    "\\": 92,
}

# The octal alternative comes first, so it wins when both could match at the
# same position.
_CUNESCAPE = re.compile(r"(\\[0-7]{3})|(\\[tnr'\"\\])")


def _replace_escape(match: re.Match) -> str:
    octal, char = match.groups()
    if octal:
        return chr(int(octal[1:], 8))
    return chr(UNESCAPE_STR_TO_BYTE[char[1]])


def unescape(text: str) -> str:
    """
    Replace C-style escape sequences in `text` with the characters they encode.

    Recognized escapes are a backslash followed by exactly three octal digits
    and `\\t`, `\\n`, `\\r`, `\\'`, `\\"` and `\\\\`. Each is replaced by the
    character whose code point is the encoded byte value. Anything else,
    including a backslash which does not start a recognized escape, is kept
    as-is.
    """
    if "\\" not in text:
        return text
    return _CUNESCAPE.sub(_replace_escape, text)


def unescape_bytes(text: str) -> bytes:
    """
    Unescape `text` and return the byte values it encodes.

    Characters are converted to bytes by taking their code point modulo 256.
    """
    return bytes(ord(c) & 0xFF for c in unescape(text))
