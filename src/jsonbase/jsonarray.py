"""JSONArray: an ordered sequence of values addressed by 0-based offset."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import IO, TYPE_CHECKING

from .base import JSONBase
from .errors import JSONError, Reason, invalid_argument
from .tokener import JSONTokener
from .values import NULL, Value, similar, unwrap, value_to_string, wrap
from .writer import quote, write_entries

if TYPE_CHECKING:
    from .jsonobject import JSONObject


class JSONArray(JSONBase[int]):
    """Ordered JSON values; built empty, from JSON text, or from an iterable."""

    def __init__(self, source: str | Iterable[object] | None = None) -> None:
        self._items: list[Value] = []
        if source is None:
            return
        if isinstance(source, str):
            JSONTokener(source).read_array(self)
        elif isinstance(source, Iterable):
            for item in source:
                self.append(item)
        else:
            raise invalid_argument(
                f"Cannot build a JSONArray from a {type(source).__name__}."
            )

    # -- Lookup -----------------------------------------------------------

    def opt(self, index: int) -> Value | None:
        # bool is an int subclass but never an offset
        if not isinstance(index, int) or isinstance(index, bool):
            return None
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Value]:
        return iter(list(self._items))

    # -- Mutation ---------------------------------------------------------

    def append(self, value: object) -> JSONArray:
        """Append *value*; ``None`` is stored as ``NULL``."""
        self._items.append(NULL if value is None else wrap(value))
        return self

    def put(self, index: int, value: object) -> JSONArray:
        """Replace the value at *index*, padding with ``NULL`` past the end."""
        if not isinstance(index, int) or isinstance(index, bool):
            raise invalid_argument(
                f"JSONArray index must be an int, not {type(index).__name__}."
            )
        if index < 0:
            raise JSONError(f"JSONArray[{index}] not found.", Reason.NOT_FOUND)
        stored = NULL if value is None else wrap(value)
        if index < len(self._items):
            self._items[index] = stored
            return self
        while index > len(self._items):
            self._items.append(NULL)
        self._items.append(stored)
        return self

    def remove(self, index: int) -> Value | None:
        value = self.opt(index)
        if value is not None:
            del self._items[index]
        return value

    # -- Conversion -------------------------------------------------------

    def join(self, separator: str) -> str:
        """Join the JSON texts of the values; strings are quoted."""
        return separator.join(
            quote(item) if isinstance(item, str) else value_to_string(item)
            for item in self._items
        )

    def to_json_object(self, names: JSONArray | None) -> JSONObject | None:
        """Pair each name in *names* with the value at the same offset."""
        from .jsonobject import JSONObject
        if names is None or not names.length() or not self.length():
            return None
        result = JSONObject()
        for i, name in enumerate(names):
            result.put(value_to_string(name), self.opt(i))
        return result

    def to_list(self) -> list[object]:
        return [unwrap(item) for item in self._items]

    def similar(self, other: object) -> bool:
        if not isinstance(other, JSONArray):
            return False
        if len(self._items) != len(other._items):
            return False
        return all(similar(a, b) for a, b in zip(self._items, other._items))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (list, tuple)):
            try:
                other = JSONArray(other)
            except JSONError:
                return False
        if not isinstance(other, JSONArray):
            return NotImplemented
        return self.similar(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"JSONArray({self})"

    def write_indented(
        self, writer: IO[str], indent_factor: int, indent: int
    ) -> IO[str]:
        return write_entries(
            writer, [(None, item) for item in self._items], "[]", indent_factor, indent
        )
