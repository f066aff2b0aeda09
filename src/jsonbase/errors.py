"""Error taxonomy for jsonbase."""

from __future__ import annotations

from enum import Enum


class Reason(Enum):
    NOT_FOUND = "not found"
    WRONG_TYPE = "wrong type"
    INVALID_ARGUMENT = "invalid argument"
    SYNTAX = "syntax"


class JSONError(Exception):
    """Raised by containers and the reader when things are amiss.

    ``reason`` tells callers which kind of failure occurred; the message
    carries the container kind and index where one applies.
    """

    def __init__(self, message: str, reason: Reason) -> None:
        super().__init__(message)
        self.reason = reason


class WrongTypeError(JSONError):
    """A stored value exists but cannot be converted to the requested type.

    The diagnostic fields are kept in a fixed order: container kind,
    index, expected type, actual type.
    """

    def __init__(
        self, container: str, index: object, expected: str, actual: str
    ) -> None:
        super().__init__(
            f"{container}[{format_index(index)}] is not a {expected}, it is a {actual}.",
            Reason.WRONG_TYPE,
        )
        self.container = container
        self.index = index
        self.expected = expected
        self.actual = actual


def format_index(index: object) -> str:
    """Render a key quoted and an array offset bare."""
    if isinstance(index, str):
        from .writer import quote
        return quote(index)
    return str(index)


def not_found(container: str, index: object) -> JSONError:
    return JSONError(f"{container}[{format_index(index)}] not found.", Reason.NOT_FOUND)


def invalid_argument(message: str) -> JSONError:
    return JSONError(message, Reason.INVALID_ARGUMENT)
