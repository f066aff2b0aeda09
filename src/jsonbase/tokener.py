"""Reader: turns JSON source text into JSONObject / JSONArray values.

The grammar is lenient in the JSON.org tradition: keys may be unquoted,
strings may use single quotes, ``=``/``=>`` may separate keys from values,
``;`` may separate entries, and trailing separators are allowed.
"""

from __future__ import annotations

import math
import re
from logging import getLogger

from .coercion import FAILED, LONG_BITS, parse_double, parse_integer
from .errors import JSONError, Reason
from .values import NULL, Value, value_to_string

logger = getLogger(__name__)

_STOP_CHARS = ',:]}/\\"[{;=#'
_SIMPLE_ESCAPES = {"b": "\b", "t": "\t", "n": "\n", "f": "\f", "r": "\r"}
_HEX4_RE = re.compile(r"^[0-9a-fA-F]{4}$")


def string_to_value(text: str) -> Value:
    """Convert an unquoted token to a value.

    - ``true``/``false``/``null`` in any case -> bool / NULL
    - a number (double when it has ``.``, ``e`` or ``E``) -> int / float
    - anything else stays a string, as do numbers that do not fit
    """
    if text == "":
        return text
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return NULL
    first = text[0]
    if first.isdigit() or first in ".-+":
        if "." in text or "e" in text or "E" in text:
            number = parse_double(text)
            if number is not FAILED and math.isfinite(number):
                return number
        else:
            number = parse_integer(text, LONG_BITS)
            if number is not FAILED:
                return number
    return text


class JSONTokener:
    """Character cursor over JSON source text."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.index = 0

    # -- Cursor -----------------------------------------------------------

    def more(self) -> bool:
        return self.index < len(self.source)

    def next(self) -> str:
        """Return the next character, ``""`` past the end of input."""
        c = self.source[self.index] if self.more() else ""
        self.index += 1
        return c

    def back(self) -> None:
        if self.index <= 0:
            raise self.syntax_error("Stepping back two steps is not supported")
        self.index -= 1

    def next_clean(self) -> str:
        """Return the next character that is not whitespace (``<= " "``)."""
        while True:
            c = self.next()
            if c == "" or c > " ":
                return c

    def syntax_error(self, message: str) -> JSONError:
        offset = min(self.index, len(self.source))
        line = self.source.count("\n", 0, offset) + 1
        character = offset - self.source.rfind("\n", 0, offset)
        text = f"{message} at {offset} [character {character} line {line}]"
        logger.debug("syntax error: %s", text)
        return JSONError(text, Reason.SYNTAX)

    # -- Values -----------------------------------------------------------

    def next_string(self, quote: str) -> str:
        """Read a string up to the closing *quote*; the opening quote is consumed."""
        out: list[str] = []
        while True:
            c = self.next()
            if c in ("", "\n", "\r"):
                raise self.syntax_error("Unterminated string")
            if c == quote:
                return "".join(out)
            if c != "\\":
                out.append(c)
                continue
            c = self.next()
            if c in _SIMPLE_ESCAPES:
                out.append(_SIMPLE_ESCAPES[c])
            elif c == "u":
                out.append(self._next_code_unit())
            elif c in ('"', "'", "\\", "/"):
                out.append(c)
            else:
                raise self.syntax_error("Illegal escape.")

    def _next_code_unit(self) -> str:
        unit = self._read_hex4()
        if 0xD800 <= unit < 0xDC00 and self.source.startswith("\\u", self.index):
            mark = self.index
            self.index += 2
            low = self._read_hex4()
            if 0xDC00 <= low < 0xE000:
                return chr(0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00))
            self.index = mark
        return chr(unit)

    def _read_hex4(self) -> int:
        digits = self.source[self.index:self.index + 4]
        if not _HEX4_RE.match(digits):
            raise self.syntax_error("Illegal escape.")
        self.index += 4
        return int(digits, 16)

    def next_value(self) -> Value:
        """Read the next value: object, array, string or unquoted token."""
        from .jsonarray import JSONArray
        from .jsonobject import JSONObject

        c = self.next_clean()
        if c in ('"', "'"):
            return self.next_string(c)
        if c == "{":
            self.back()
            return self.read_object(JSONObject())
        if c == "[":
            self.back()
            return self.read_array(JSONArray())

        chars: list[str] = []
        while c != "" and c >= " " and c not in _STOP_CHARS:
            chars.append(c)
            c = self.next()
        self.back()
        text = "".join(chars).strip()
        if not text:
            raise self.syntax_error("Missing value")
        return string_to_value(text)

    # -- Containers -------------------------------------------------------

    def read_object(self, target):
        """Fill *target* (a JSONObject) from ``{...}`` text and return it."""
        if self.next_clean() != "{":
            raise self.syntax_error("A JSONObject text must begin with '{'")
        while True:
            c = self.next_clean()
            if c == "":
                raise self.syntax_error("A JSONObject text must end with '}'")
            if c == "}":
                return target
            self.back()
            key = value_to_string(self.next_value())

            c = self.next_clean()
            if c == "=":
                if self.next() != ">":
                    self.back()
            elif c != ":":
                raise self.syntax_error("Expected a ':' after a key")
            target.put_once(key, self.next_value())

            c = self.next_clean()
            if c in (";", ","):
                if self.next_clean() == "}":
                    return target
                self.back()
            elif c == "}":
                return target
            else:
                raise self.syntax_error("Expected a ',' or '}'")

    def read_array(self, target):
        """Fill *target* (a JSONArray) from ``[...]`` text and return it."""
        if self.next_clean() != "[":
            raise self.syntax_error("A JSONArray text must start with '['")
        if self.next_clean() == "]":
            return target
        self.back()
        while True:
            if self.next_clean() == ",":
                self.back()
                target.append(NULL)
            else:
                self.back()
                target.append(self.next_value())
            c = self.next_clean()
            if c == ",":
                if self.next_clean() == "]":
                    return target
                self.back()
            elif c == "]":
                return target
            else:
                raise self.syntax_error("Expected a ',' or ']'")
