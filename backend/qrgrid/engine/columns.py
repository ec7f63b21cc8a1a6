"""Spreadsheet-style column names, bijective base-26 over A–Z.

0 → "A", 25 → "Z", 26 → "AA", 701 → "ZZ", 702 → "AAA". There is no zero
digit, so every non-negative integer has exactly one label and label order
(shorter first, then lexicographic) matches integer order.
"""

from __future__ import annotations

import math
import numbers

from qrgrid.engine.errors import InvalidIndex, InvalidLength

_ALPHABET_SIZE = 26
_FIRST_LETTER = ord("A")


def column_name(index: int) -> str:
    """Label for a 0-based column index."""
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise InvalidIndex(f"Column index must be an integer, got {index!r}")
    if index < 0:
        raise InvalidIndex(f"Column index must be >= 0, got {index}")

    n = int(index) + 1
    letters: list[str] = []
    while n > 0:
        n -= 1
        letters.append(chr(_FIRST_LETTER + n % _ALPHABET_SIZE))
        n //= _ALPHABET_SIZE
    return "".join(reversed(letters))


def column_index(label: str) -> int:
    """Inverse of column_name: "A" → 0, "AA" → 26."""
    if not label or not all("A" <= ch <= "Z" for ch in label):
        raise InvalidIndex(f"Not a column label: {label!r}")

    n = 0
    for ch in label:
        n = n * _ALPHABET_SIZE + (ord(ch) - _FIRST_LETTER + 1)
    return n - 1


def generate_column_names(length: int | float) -> list[str]:
    """First `length` labels, in order."""
    if isinstance(length, bool) or not isinstance(length, numbers.Real):
        raise InvalidLength(f"length must be a number, got {length!r}")
    if not math.isfinite(length) or length < 0:
        raise InvalidLength(f"length must be a non-negative finite number, got {length}")
    if length != int(length):
        raise InvalidLength(f"length must be a whole number, got {length}")

    return [column_name(i) for i in range(int(length))]
