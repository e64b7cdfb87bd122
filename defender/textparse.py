"""Helpers for reading weapon description files and formatting numbers."""

from __future__ import annotations

import os

READ_LIMIT = 4000


def get_number(text: str) -> int:
    """Read a signed integer from the start of ``text``.

    Any run of leading ``+``/``-`` signs is accepted, each ``-`` flipping the
    sign. Digits are read until the first non-digit; no digits gives 0.
    """
    sign = 1
    rest = text
    while rest and rest[0] in "+-":
        if rest[0] == "-":
            sign = -sign
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return sign * value


def format_number(nb: float) -> str:
    """Render a number as decimal text, truncating any fractional part."""
    return str(int(nb))


def first_line(text: str) -> str:
    """Return the text before the first newline."""
    return text.partition("\n")[0]


def line_at(index: int, text: str) -> str:
    """Return line ``index`` (counted from 0) of ``text``.

    Raises IndexError when the text does not have that many lines.
    """
    lines = text.split("\n")
    if index < 0 or index >= len(lines):
        raise IndexError(f"line {index} is out of range")
    return lines[index]


def read_file(path: str | os.PathLike[str]) -> str:
    """Read at most the first 4000 bytes of a file as text."""
    with open(path, "rb") as handle:
        data = handle.read(READ_LIMIT)
    return data.decode("utf-8", errors="replace")