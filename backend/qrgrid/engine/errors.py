"""Engine exceptions. All are input/programmer errors, raised synchronously."""

from __future__ import annotations


class QrGridError(ValueError):
    """Base class for every error raised by the grid engine."""


class InvalidIndex(QrGridError):
    """A column index below zero (or a label that is not A–Z) was requested."""


class InvalidLength(QrGridError):
    """A label count that is negative, non-finite or fractional was requested."""


class MalformedMatrix(QrGridError):
    """The module matrix is not square or its rows have inconsistent lengths."""


class InvalidLevel(QrGridError):
    """Error-correction level outside L/M/Q/H."""


class EncodingError(QrGridError):
    """The provider could not encode the content (empty, or too long for any version)."""
