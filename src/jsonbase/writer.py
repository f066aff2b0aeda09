"""JSON text output shared by JSONObject and JSONArray."""

from __future__ import annotations

from typing import IO

from .values import NULL, Value, ValueKind, kind_of, number_to_string

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _needs_unicode_escape(c: str) -> bool:
    return c < " " or "\u0080" <= c < "\u00a0" or "\u2000" <= c < "\u2100"


def quote(text: str) -> str:
    """Return *text* as a double-quoted JSON string literal.

    ``</`` is written as ``<\\/`` so the output can be embedded in HTML.
    """
    out = ['"']
    previous = ""
    for c in text:
        if c in _ESCAPES:
            out.append(_ESCAPES[c])
        elif c == "/" and previous == "<":
            out.append("\\/")
        elif _needs_unicode_escape(c):
            out.append(f"\\u{ord(c):04x}")
        else:
            out.append(c)
        previous = c
    out.append('"')
    return "".join(out)


def indent(writer: IO[str], width: int) -> None:
    if width > 0:
        writer.write(" " * width)


def write_value(
    writer: IO[str], value: Value | None, indent_factor: int, indent_width: int
) -> IO[str]:
    """Write one value; containers recurse with the same indentation settings."""
    if value is None or value is NULL:
        writer.write("null")
        return writer
    kind = kind_of(value)
    if kind in (ValueKind.OBJECT, ValueKind.ARRAY):
        value.write_indented(writer, indent_factor, indent_width)
    elif kind is ValueKind.BOOLEAN:
        writer.write("true" if value else "false")
    elif kind in (ValueKind.INTEGER, ValueKind.DOUBLE):
        writer.write(number_to_string(value))
    else:
        writer.write(quote(value))
    return writer


def write_entries(
    writer: IO[str],
    entries: list[tuple[str | None, Value]],
    brackets: str,
    indent_factor: int,
    indent_width: int,
) -> IO[str]:
    """Write a container body.

    *entries* pairs each value with its quoted-key prefix (``None`` for
    array elements). With ``indent_factor > 0`` every entry goes on its own
    line and the closing bracket on a line of its own.
    """
    opening, closing = brackets
    writer.write(opening)
    if not entries:
        writer.write(closing)
        return writer
    pretty = indent_factor > 0
    inner = indent_width + indent_factor
    for position, (key, value) in enumerate(entries):
        if position:
            writer.write(",")
        if pretty:
            writer.write("\n")
            indent(writer, inner)
        if key is not None:
            writer.write(quote(key))
            writer.write(": " if pretty else ":")
        write_value(writer, value, indent_factor, inner)
    if pretty:
        writer.write("\n")
        indent(writer, indent_width)
    writer.write(closing)
    return writer
