"""Splitting map lines and parsing the numbers in their cells."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def parse_int(text: str) -> int:
    """Parse a leading decimal integer as atoi does; 0 if there are no digits."""
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    result = 0
    for char in body:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
    return _to_int32(result * sign)


def _digit_value(char: str) -> int:
    lowered = char.lower()
    if "a" <= lowered <= "f":
        return ord(lowered) - ord("a") + 10
    # Anything else is read as if it were a decimal digit.
    return ord(char) - ord("0")


def parse_hex(text: str) -> int:
    """Parse a colour such as ``0xFF0000``.

    Leading ``0`` and ``x`` characters are skipped; every following character
    is taken as a digit, wrapping to 32 bits.
    """
    result = 0
    for char in text.lstrip("0x"):
        result = result * 16 + _digit_value(char)
    return _to_int32(result)


def parse_cell(text: str) -> tuple[int, int | None]:
    """Parse a ``z`` or ``z,color`` cell into its height and optional colour."""
    parts = split_words(text, ",")
    if not parts:
        raise ValueError(f"empty map cell: {text!r}")
    color = parse_hex(parts[1]) if len(parts) > 1 else None
    return parse_int(parts[0]), color