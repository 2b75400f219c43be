"""Shell rendering: turns resolved values into text a shell can consume.

Strings pass through two stages: ``decode_literal`` unescapes shell-style
quoting found in the text, then ``quote_shell`` re-quotes the raw result so a
POSIX shell reads it back as exactly one literal word.
"""

from __future__ import annotations

import math
import shlex
import string
from datetime import datetime, timedelta

from .values import Value, VArray, VBool, VDatetime, VFloat, VInteger, VString, VTable, is_atomic


_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "v": "\v",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "e": "\x1b",
    "E": "\x1b",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "$": "$",
    "`": "`",
    " ": " ",
}


# ---------------------------------------------------------------------------
# Stage 1: decode
# ---------------------------------------------------------------------------

def _decode_unicode(text: str, i: int) -> tuple[str, int] | None:
    """Decode ``{XXXX}`` starting at text[i]; return (char, next index)."""
    if i >= len(text) or text[i] != "{":
        return None
    end = text.find("}", i + 1)
    if end == -1:
        return None
    digits = text[i + 1:end]
    if not 1 <= len(digits) <= 6 or not all(ch in string.hexdigits for ch in digits):
        return None
    code = int(digits, 16)
    # surrogates and values past U+10FFFF are not characters
    if 0xD800 <= code <= 0xDFFF or code > 0x10FFFF:
        return None
    return chr(code), end + 1


def _closing_quote(text: str, i: int, quote: str) -> int:
    """Index of the quote closing a section opened just before text[i], or -1."""
    if quote == "'":
        return text.find("'", i)
    j = i
    while j < len(text):
        if text[j] == "\\":
            j += 2
        elif text[j] == '"':
            return j
        else:
            j += 1
    return -1


def _decode_double(text: str, out: list[str]) -> None:
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        i += 1
        if c != "\\" or i >= n:
            out.append(c)
            continue
        nxt = text[i]
        if nxt in _ESCAPES:
            out.append(_ESCAPES[nxt])
            i += 1
            continue
        decoded = _decode_unicode(text, i + 1) if nxt == "u" else None
        if decoded is not None:
            out.append(decoded[0])
            i = decoded[1]
        else:
            out.append(c)


def decode_literal(text: str) -> str:
    """Unescape shell-style quoting in *text*.

    Outside quotes every character is literal.  ``'...'`` is literal too,
    ``"..."`` honours backslash escapes; the quote characters themselves are
    dropped.  A quote with no matching close is an ordinary character, so
    ``it's`` decodes to itself.  Never raises: unknown escapes are kept
    verbatim.
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        end = _closing_quote(text, i + 1, c) if c in ("'", '"') else -1
        if end == -1:
            out.append(c)
            i += 1
            continue
        body = text[i + 1:end]
        if c == "'":
            out.append(body)
        else:
            _decode_double(body, out)
        i = end + 1
    return "".join(out)


# ---------------------------------------------------------------------------
# Stage 2: encode
# ---------------------------------------------------------------------------

def quote_shell(text: str) -> str:
    """Quote *text* for a POSIX shell, leaving safe words bare."""
    return shlex.quote(text)


# ---------------------------------------------------------------------------
# Atoms
# ---------------------------------------------------------------------------

def _fmt_float(v: float) -> str:
    if math.isnan(v):
        return "nan"
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    return repr(v)


def _fmt_datetime(v) -> str:
    text = v.isoformat()
    if isinstance(v, datetime) and v.utcoffset() == timedelta(0):
        return text[:-len("+00:00")] + "Z"
    return text


def fmt_atom(value: Value) -> str:
    """Render a single scalar without quoting context or newline."""
    if isinstance(value, VString):
        return quote_shell(decode_literal(value.value))
    if isinstance(value, VBool):
        return "true" if value.value else "false"
    if isinstance(value, VInteger):
        return str(value.value)
    if isinstance(value, VFloat):
        return _fmt_float(value.value)
    if isinstance(value, VDatetime):
        return _fmt_datetime(value.value)
    raise TypeError(f"not a scalar: {type(value).__name__}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def fmt_bash(value: Value) -> str:
    """Render a resolved value for the shell.

    - VArray: scalar items joined by spaces; nested arrays/tables skipped
    - VTable: ``[key]=value`` pairs for scalar entries; composites skipped
    - VInteger: digits plus a trailing newline (only when it is the result itself)
    - other scalars: ``fmt_atom``
    """
    if isinstance(value, VArray):
        return " ".join(fmt_atom(item) for item in value.items if is_atomic(item))

    if isinstance(value, VTable):
        return " ".join(
            f"[{quote_shell(decode_literal(key))}]={fmt_atom(item)}"
            for key, item in value.entries.items()
            if is_atomic(item)
        )

    if isinstance(value, VInteger):
        return f"{value.value}\n"

    return fmt_atom(value)
