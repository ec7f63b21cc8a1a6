"""QR matrix provider — content + error-correction level → ModuleMatrix.

Symbol encoding is delegated to segno. Any object with a matching
encode() can stand in for it (tests use fixed matrices).
"""

from __future__ import annotations

import logging
from typing import Protocol

import segno

from qrgrid.engine.errors import EncodingError, InvalidLevel
from qrgrid.engine.matrix import ModuleMatrix

logger = logging.getLogger(__name__)

LEVELS = ("L", "M", "Q", "H")


class MatrixProvider(Protocol):
    def encode(self, content: str, level: str) -> ModuleMatrix: ...


def normalize_level(level: str) -> str:
    """Upper-case and validate an error-correction level."""
    value = str(level).strip().upper()
    if value not in LEVELS:
        raise InvalidLevel(f"Error-correction level must be one of {', '.join(LEVELS)}, got {level!r}")
    return value


class SegnoProvider:
    """Full-size QR symbols (never Micro QR) at exactly the requested level."""

    def encode(self, content: str, level: str = "L") -> ModuleMatrix:
        ecl = normalize_level(level)
        if not content:
            raise EncodingError("Content must not be empty")

        try:
            qr = segno.make_qr(content, error=ecl, boost_error=False)
        except segno.DataOverflowError as e:
            raise EncodingError(f"Content does not fit in a QR symbol at level {ecl}: {e}") from e

        # segno's matrix is row-major and excludes the quiet zone
        matrix = ModuleMatrix.from_rows([[bool(v) for v in row] for row in qr.matrix])
        logger.debug("Encoded %d chars at %s → version %s, %dx%d", len(content), ecl, qr.version, matrix.size, matrix.size)
        return matrix


_default_provider = SegnoProvider()


def get_provider() -> MatrixProvider:
    return _default_provider
