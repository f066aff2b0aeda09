"""Value model for jsonbase: the null sentinel, value kinds and stringification."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Union

from .errors import JSONError, Reason, invalid_argument

if TYPE_CHECKING:
    from .jsonarray import JSONArray
    from .jsonobject import JSONObject


class _Null:
    """Singleton for an explicit JSON ``null``.

    Distinct from ``None``, which containers use to report that nothing
    was found at an index and which is never stored.
    """

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __copy__(self) -> "_Null":
        return self

    def __deepcopy__(self, memo: dict) -> "_Null":
        return self

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("NULL is immutable")

    def __repr__(self) -> str:
        return "NULL"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


NULL = _Null()

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

Value = Union[_Null, bool, int, float, str, "JSONObject", "JSONArray"]


class ValueKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "int"
    DOUBLE = "double"
    STRING = "string"
    OBJECT = "JSONObject"
    ARRAY = "JSONArray"


def kind_of(value: object) -> ValueKind:
    """Classify a stored value.

    ``bool`` is tested before ``int``: a Boolean is never a number here.
    """
    from .jsonarray import JSONArray
    from .jsonobject import JSONObject

    if value is NULL:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.DOUBLE
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, JSONObject):
        return ValueKind.OBJECT
    if isinstance(value, JSONArray):
        return ValueKind.ARRAY
    raise invalid_argument(f"Not a JSON value: {type(value).__name__}.")


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Stringification
# ---------------------------------------------------------------------------

def number_to_string(number: int | float | None) -> str:
    """Produce the JSON text of a number.

    Integral floats lose their fraction (``10.0`` -> ``"10"``); other
    floats keep the shortest decimal that reads back to the same value.
    """
    if number is None:
        raise invalid_argument("Null pointer")
    if not is_number(number):
        raise invalid_argument(f"Not a number: {type(number).__name__}.")
    check_finite(number)
    if isinstance(number, int):
        try:
            return str(number)
        except ValueError as exc:
            raise invalid_argument("Integer too large to write.") from exc
    text = repr(number)
    if "." in text and "e" not in text and "E" not in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text = text[:-1]
    return text


def value_to_string(value: Value) -> str:
    """Canonical string form of a stored value (strings are returned as-is)."""
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind in (ValueKind.INTEGER, ValueKind.DOUBLE):
        return number_to_string(value)
    return str(value)


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------

def check_finite(number: int | float) -> None:
    if isinstance(number, float) and (math.isnan(number) or math.isinf(number)):
        raise invalid_argument("JSON does not allow non-finite numbers.")


def check_long(number: int) -> None:
    if not LONG_MIN <= number <= LONG_MAX:
        raise invalid_argument("JSON integers must fit in 64 bits.")


def wrap(value: object) -> Value:
    """Normalize *value* for storage in a container.

    - storable values pass through (non-finite floats and integers
      outside the 64-bit range are rejected)
    - ``Mapping`` -> JSONObject, ``list``/``tuple`` -> JSONArray
    - ``None`` and anything else -> InvalidArgument
    """
    from .jsonarray import JSONArray
    from .jsonobject import JSONObject

    if value is None:
        raise invalid_argument("Null value; use NULL for JSON null.")
    if isinstance(value, Mapping) and not isinstance(value, JSONObject):
        return JSONObject(value)
    if isinstance(value, (list, tuple)):
        return JSONArray(value)
    try:
        kind = kind_of(value)
    except JSONError as exc:
        raise JSONError(
            f"Cannot store a {type(value).__name__} in a JSON container.",
            Reason.INVALID_ARGUMENT,
        ) from exc
    if kind is ValueKind.DOUBLE:
        check_finite(value)
    elif kind is ValueKind.INTEGER:
        check_long(value)
    return value


def unwrap(value: Value) -> object:
    """Convert a stored value to plain Python data (``NULL`` -> ``None``)."""
    from .jsonarray import JSONArray
    from .jsonobject import JSONObject

    if value is NULL:
        return None
    if isinstance(value, JSONObject):
        return value.to_dict()
    if isinstance(value, JSONArray):
        return value.to_list()
    return value


def similar(left: Value, right: Value) -> bool:
    """Structural equality; numbers compare by value across int and float."""
    lkind, rkind = kind_of(left), kind_of(right)
    if is_number(left) and is_number(right):
        return left == right
    if lkind is not rkind:
        return False
    if lkind in (ValueKind.OBJECT, ValueKind.ARRAY):
        return left.similar(right)
    return left == right
