"""JSONObject: an insertion-ordered collection of key/value pairs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import IO, TYPE_CHECKING

from .base import JSONBase
from .coercion import LONG_BITS, narrow
from .errors import JSONError, WrongTypeError, invalid_argument
from .tokener import JSONTokener
from .values import Value, ValueKind, kind_of, similar, unwrap, wrap
from .writer import write_entries

if TYPE_CHECKING:
    from .jsonarray import JSONArray


class JSONObject(JSONBase[str]):
    """String keys mapped to JSON values, kept in insertion order.

    Usage::

        obj = JSONObject('{"a": "x", "b": 12, "c": {"d": true}}')
        obj.get_int("b")                           # -> 12
        obj.get_json_object("c").get_boolean("d")  # -> True
        obj.opt_int("z", 20)                       # -> 20

    The constructor accepts JSON source text, a mapping, or another
    JSONObject together with the names of the keys to copy (all keys when
    *names* is omitted; names missing from the source are skipped).
    """

    def __init__(
        self,
        source: str | Mapping[str, object] | JSONObject | None = None,
        names: Iterable[str] | None = None,
    ) -> None:
        self._entries: dict[str, Value] = {}
        if source is None:
            return
        if isinstance(source, JSONObject):
            for name in source.keys() if names is None else names:
                self.put_opt(name, source.opt(name))
        elif isinstance(source, str):
            JSONTokener(source).read_object(self)
        elif isinstance(source, Mapping):
            for key, value in source.items():
                if value is not None:
                    self.put(str(key), value)
        else:
            raise invalid_argument(
                f"Cannot build a JSONObject from a {type(source).__name__}."
            )

    # -- Lookup -----------------------------------------------------------

    def opt(self, key: str) -> Value | None:
        if not isinstance(key, str):
            return None
        return self._entries.get(key)

    def has(self, key: str) -> bool:
        return isinstance(key, str) and key in self._entries

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def keys(self) -> list[str]:
        return list(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def length(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def names(self) -> JSONArray | None:
        """Return the keys as a JSONArray, ``None`` when there are none."""
        from .jsonarray import JSONArray
        if not self._entries:
            return None
        return JSONArray(self._entries.keys())

    @staticmethod
    def get_names(obj: JSONObject) -> list[str] | None:
        if not obj.length():
            return None
        return obj.keys()

    # -- Mutation ---------------------------------------------------------

    def put(self, key: str, value: object) -> JSONObject:
        """Store *value* under *key*; a ``None`` value removes the key.

        Plain dicts and lists are stored as JSONObject / JSONArray, which
        still compare equal to the originals.
        """
        if key is None:
            raise invalid_argument("Null key.")
        if not isinstance(key, str):
            raise invalid_argument(f"Key must be a string, not {type(key).__name__}.")
        if value is None:
            self.remove(key)
        else:
            self._entries[key] = wrap(value)
        return self

    def put_once(self, key: str, value: object) -> JSONObject:
        if key is not None and value is not None:
            if key in self._entries:
                raise invalid_argument(f'Duplicate key "{key}"')
            self.put(key, value)
        return self

    def put_opt(self, key: str | None, value: object) -> JSONObject:
        if key is not None and value is not None:
            self.put(key, value)
        return self

    def remove(self, key: str) -> Value | None:
        return self._entries.pop(key, None)

    def increment(self, key: str) -> JSONObject:
        """Add one to the number at *key*, or store ``1`` if there is none.

        Integers stay integers (wrapping at the 64-bit bounds) and floats
        stay floats.
        """
        value = self.opt(key)
        if value is None:
            return self.put(key, 1)
        kind = kind_of(value)
        if kind is ValueKind.INTEGER:
            return self.put(key, narrow(value + 1, LONG_BITS))
        if kind is ValueKind.DOUBLE:
            return self.put(key, value + 1.0)
        raise WrongTypeError(type(self).__name__, key, "number", kind.value)

    def accumulate(self, key: str, value: object) -> JSONObject:
        """Put *value*, turning the entry into a JSONArray once a key repeats."""
        from .jsonarray import JSONArray
        current = self.opt(key)
        if current is None:
            if isinstance(value, JSONArray):
                value = JSONArray().append(value)
            return self.put(key, value)
        if isinstance(current, JSONArray):
            current.append(value)
            return self
        return self.put(key, JSONArray().append(current).append(value))

    # -- Conversion -------------------------------------------------------

    def to_dict(self) -> dict[str, object]:
        return {key: unwrap(value) for key, value in self._entries.items()}

    def similar(self, other: object) -> bool:
        if not isinstance(other, JSONObject):
            return False
        if set(self._entries) != set(other._entries):
            return False
        return all(
            similar(value, other._entries[key]) for key, value in self._entries.items()
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping) and not isinstance(other, JSONObject):
            try:
                other = JSONObject(other)
            except JSONError:
                return False
        if not isinstance(other, JSONObject):
            return NotImplemented
        return self.similar(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"JSONObject({self})"

    def write_indented(
        self, writer: IO[str], indent_factor: int, indent: int
    ) -> IO[str]:
        return write_entries(
            writer, list(self._entries.items()), "{}", indent_factor, indent
        )

