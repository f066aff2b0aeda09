"""Accessor layer shared by JSONObject and JSONArray."""

from __future__ import annotations

import io
import math
from abc import ABC, abstractmethod
from logging import getLogger
from typing import IO, TYPE_CHECKING, Generic, TypeVar

from . import coercion
from .coercion import FAILED
from .errors import JSONError, Reason, WrongTypeError, not_found
from .values import NULL, Value, kind_of, value_to_string

if TYPE_CHECKING:
    from .jsonarray import JSONArray
    from .jsonobject import JSONObject

K = TypeVar("K", str, int)

logger = getLogger(__name__)


class JSONBase(ABC, Generic[K]):
    """Typed retrieval over a key- or index-addressed store of JSON values.

    The *index* is a key for JSONObject and an offset for JSONArray.
    Subclasses supply ``opt`` (raw lookup) and ``write_indented`` (raw
    serialization); everything else is built on those two.

    ``get*`` accessors raise ``JSONError`` when the value is missing or
    cannot be converted. ``opt*`` accessors never raise and return a
    default instead.
    """

    # -- Delegated --------------------------------------------------------

    @abstractmethod
    def opt(self, index: K) -> Value | None:
        """Return the value at *index*, ``None`` if there is none.

        An explicit JSON null comes back as ``NULL``, not ``None``.
        """

    @abstractmethod
    def write_indented(
        self, writer: IO[str], indent_factor: int, indent: int
    ) -> IO[str]:
        """Write this container as JSON text, *indent* spaces deep."""

    # -- Strict accessors -------------------------------------------------

    def get(self, index: K) -> Value:
        if index is None:
            raise JSONError("Null key/index.", Reason.NOT_FOUND)
        value = self.opt(index)
        if value is None:
            raise not_found(type(self).__name__, index)
        return value

    def get_boolean(self, index: K) -> bool:
        """Return a bool; the strings ``"true"``/``"false"`` (any case) convert."""
        return self._convert(index, coercion.to_boolean, coercion.BOOLEAN)

    def get_int(self, index: K) -> int:
        """Return a 32-bit integer from a number or a numeric string."""
        return self._convert(index, coercion.to_int, coercion.INT)

    def get_long(self, index: K) -> int:
        """Return a 64-bit integer from a number or a numeric string."""
        return self._convert(index, coercion.to_long, coercion.LONG)

    def get_double(self, index: K) -> float:
        return self._convert(index, coercion.to_double, coercion.DOUBLE)

    def get_string(self, index: K) -> str:
        """Return a stored string.

        Unlike ``opt_string``, other value types are rejected rather than
        stringified.
        """
        return self._convert(index, coercion.to_string, coercion.STRING)

    def get_json_object(self, index: K) -> JSONObject:
        from .jsonobject import JSONObject
        value = self.get(index)
        if isinstance(value, JSONObject):
            return value
        raise self._wrong_type(index, "JSONObject", value)

    def get_json_array(self, index: K) -> JSONArray:
        from .jsonarray import JSONArray
        value = self.get(index)
        if isinstance(value, JSONArray):
            return value
        raise self._wrong_type(index, "JSONArray", value)

    def is_null(self, index: K) -> bool:
        """True when *index* is absent or holds ``NULL``; ``opt`` tells them apart."""
        value = self.opt(index)
        return value is None or value is NULL

    # -- Optional accessors -----------------------------------------------

    def opt_boolean(self, index: K, default: bool = False) -> bool:
        return self._convert_or(index, coercion.to_boolean, default)

    def opt_int(self, index: K, default: int = 0) -> int:
        return self._convert_or(index, coercion.to_int, default)

    def opt_long(self, index: K, default: int = 0) -> int:
        return self._convert_or(index, coercion.to_long, default)

    def opt_double(self, index: K, default: float = math.nan) -> float:
        return self._convert_or(index, coercion.to_double, default)

    def opt_json_object(self, index: K) -> JSONObject | None:
        from .jsonobject import JSONObject
        value = self.opt(index)
        return value if isinstance(value, JSONObject) else None

    def opt_json_array(self, index: K) -> JSONArray | None:
        from .jsonarray import JSONArray
        value = self.opt(index)
        return value if isinstance(value, JSONArray) else None

    def opt_string(self, index: K, default: str = "") -> str:
        """Return the value at *index* as a string, or *default*.

        *default* is returned when *index* is absent or holds ``NULL``.
        Any other value is converted to its JSON string form, so numbers,
        booleans and containers never fall back to *default* here, unlike
        ``get_string`` which only accepts strings.
        """
        value = self.opt(index)
        if value is None or value is NULL:
            return default
        return value_to_string(value)

    # -- Serialization ----------------------------------------------------

    def to_pretty_string(self, indent_factor: int) -> str:
        """Make a pretty-printed JSON text. The structure must be acyclic."""
        buffer = io.StringIO()
        self.write_indented(buffer, indent_factor, 0)
        return buffer.getvalue()

    def write(self, writer: IO[str]) -> IO[str]:
        """Write compact JSON text (no added whitespace) and return *writer*."""
        return self.write_indented(writer, 0, 0)

    def __str__(self) -> str:
        return self.to_pretty_string(0)

    # -- Helpers ----------------------------------------------------------

    def _convert(self, index: K, convert, expected: str):
        value = self.get(index)
        result = convert(value)
        if result is FAILED:
            raise self._wrong_type(index, expected, value)
        return result

    def _convert_or(self, index: K, convert, default):
        value = self.opt(index)
        if value is None:
            return default
        result = convert(value)
        if result is FAILED:
            logger.debug("%s[%r] not convertible, using default", type(self).__name__, index)
            return default
        return result

    def _wrong_type(self, index: K, expected: str, value: Value) -> WrongTypeError:
        return WrongTypeError(type(self).__name__, index, expected, kind_of(value).value)
