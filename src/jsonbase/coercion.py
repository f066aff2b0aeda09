"""Coercions shared by the typed accessors of both containers.

Each ``to_*`` function returns the converted value, or ``FAILED`` when the
value cannot be converted. ``get*`` accessors turn ``FAILED`` into a
``WrongTypeError``; ``opt*`` accessors turn it into their default.
"""

from __future__ import annotations

import math
import re

from .values import Value, ValueKind, kind_of

INT_BITS = 32
LONG_BITS = 64

BOOLEAN = "boolean"
INT = "int"
LONG = "long"
DOUBLE = "double"
STRING = "string"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DOUBLE_RE = re.compile(
    r"[+-]?(NaN|Infinity|([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?[fFdD]?)"
)


class _Failed:
    """Singleton marking a conversion that did not succeed."""

    _instance: "_Failed | None" = None

    def __new__(cls) -> "_Failed":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FAILED"

    def __bool__(self) -> bool:
        return False


FAILED = _Failed()


# ---------------------------------------------------------------------------
# Width conversion
# ---------------------------------------------------------------------------

def narrow(number: int | float, bits: int) -> int:
    """Convert a number to a signed integer of *bits* width.

    Integers wrap (two's complement); floats truncate toward zero,
    saturate at the range bounds, and NaN becomes 0.
    """
    lo = -(1 << (bits - 1))
    hi = (1 << (bits - 1)) - 1
    if isinstance(number, float):
        if math.isnan(number):
            return 0
        if number >= hi:
            return hi
        if number <= lo:
            return lo
        return int(number)
    return ((number - lo) % (1 << bits)) + lo


def widen(number: int | float) -> float:
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


# ---------------------------------------------------------------------------
# String grammars
# ---------------------------------------------------------------------------

def parse_integer(text: str, bits: int) -> int | _Failed:
    if not _INTEGER_RE.fullmatch(text):
        return FAILED
    # more significant digits than the widest value of the range
    if len(text.lstrip("+-").lstrip("0")) > len(str(1 << (bits - 1))):
        return FAILED
    number = int(text)
    if not -(1 << (bits - 1)) <= number < (1 << (bits - 1)):
        return FAILED
    return number


def parse_double(text: str) -> float | _Failed:
    text = text.strip()
    if not _DOUBLE_RE.fullmatch(text):
        return FAILED
    if text[-1] in "fFdD":
        text = text[:-1]
    try:
        return float(text)
    except ValueError:
        return FAILED


# ---------------------------------------------------------------------------
# Coercions
# ---------------------------------------------------------------------------

def to_boolean(value: Value) -> bool | _Failed:
    kind = kind_of(value)
    if kind is ValueKind.BOOLEAN:
        return value
    if kind is ValueKind.STRING:
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return FAILED


def _to_integer(value: Value, bits: int) -> int | _Failed:
    kind = kind_of(value)
    if kind in (ValueKind.INTEGER, ValueKind.DOUBLE):
        return narrow(value, bits)
    if kind is ValueKind.STRING:
        return parse_integer(value, bits)
    return FAILED


def to_int(value: Value) -> int | _Failed:
    return _to_integer(value, INT_BITS)


def to_long(value: Value) -> int | _Failed:
    return _to_integer(value, LONG_BITS)


def to_double(value: Value) -> float | _Failed:
    kind = kind_of(value)
    if kind in (ValueKind.INTEGER, ValueKind.DOUBLE):
        return widen(value)
    if kind is ValueKind.STRING:
        return parse_double(value)
    return FAILED


def to_string(value: Value) -> str | _Failed:
    if kind_of(value) is ValueKind.STRING:
        return value
    return FAILED
