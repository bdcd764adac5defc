"""
Error kinds raised by the point codecs.

Every error derives from `GeoPointError` (a `ValueError`) so callers can catch the
whole family at once, or a specific kind when they need to tell a bad payload
apart from a bad header.
"""

from __future__ import annotations


class GeoPointError(ValueError):
    """Base class for all point/codec errors."""


class InvalidTypeError(GeoPointError, TypeError):
    """The binary decoder received something that is not a byte sequence."""


class InvalidLengthError(GeoPointError):
    """A binary record is not exactly 25 bytes (or has a bad header)."""


class InvalidHeaderError(InvalidLengthError):
    """A 25-byte binary record whose marker or geometry-type byte is wrong."""


class InvalidGeometryError(GeoPointError):
    """Absent or non-point geometry, or a malformed GeoJSON structure."""


class InvalidPointError(InvalidGeometryError):
    """A point that cannot be written to the binary record."""


class ParseError(GeoPointError):
    """The JSON payload is not syntactically valid."""
