"""A small printf-style formatter with the conversions ``c d i u x X s p %``."""

from __future__ import annotations

import operator
import re
import sys
from typing import IO, Any, Iterator

_FORMAT_PIECE = re.compile(r"%(?P<spec>[cdiuxXsp%])|(?P<lone>%)|(?P<text>[^%]+)")

_INT32 = 1 << 32
_ULONG_MASK = (1 << 64) - 1


def _to_int32(value: int) -> int:
    value &= _INT32 - 1
    return value - _INT32 if value >= 1 << 31 else value


def _as_integer(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"%{spec} requires an integer, not {type(value).__name__}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c requires a single character")
            return value
        return chr(_as_integer(value, spec) & 0xFF)
    if spec in "di":
        return str(_to_int32(_as_integer(value, spec)))
    if spec == "u":
        return str(_as_integer(value, spec) % _INT32)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "x":
        return format(_as_integer(value, spec) % _INT32, "x")
    if spec == "X":
        return format(_as_integer(value, spec) % _INT32, "X")
    # spec == "p"
    address = 0 if value is None else _as_integer(value, spec) & _ULONG_MASK
    return "0x" + format(address, "x")


def _render(fmt: str, args: tuple[Any, ...]) -> tuple[str, int]:
    """Return the formatted text and the character count the formatter reports.

    A ``%`` that does not start a known conversion is dropped from the output
    but still counted.
    """
    pieces: list[str] = []
    count = 0
    remaining = iter(args)
    for match in _FORMAT_PIECE.finditer(fmt):
        if match.group("spec") is not None:
            piece = _convert(match.group("spec"), remaining)
            pieces.append(piece)
            count += len(piece)
        elif match.group("lone") is not None:
            count += 1
        else:
            text = match.group("text")
            pieces.append(text)
            count += len(text)
    return "".join(pieces), count


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    return _render(fmt, args)[0]


def printf(fmt: str, *args: Any, file: IO[str] | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default) and return its count."""
    text, count = _render(fmt, args)
    (sys.stdout if file is None else file).write(text)
    return count