"""jsonbase — JSON objects and arrays with typed get/opt accessors."""

from .base import JSONBase
from .errors import JSONError, Reason, WrongTypeError
from .jsonarray import JSONArray
from .jsonobject import JSONObject
from .tokener import JSONTokener
from .values import NULL, Value, ValueKind, kind_of, number_to_string
from .writer import quote

__all__ = [
    "JSONBase",
    "JSONObject",
    "JSONArray",
    "JSONTokener",
    "JSONError",
    "WrongTypeError",
    "Reason",
    "NULL",
    "Value",
    "ValueKind",
    "kind_of",
    "number_to_string",
    "quote",
]
