"""
Fixed-width binary record for a point column.

Layout (25 bytes):
- byte 0: order/flag marker, always 0
- byte 1: geometry type tag, 1 = point
- bytes 2..8: reserved, written as zero, ignored on read
- bytes 9..16: longitude, little-endian 64-bit integer
- bytes 17..24: latitude, little-endian 64-bit integer

Coordinates are stored as integers, not IEEE-754 bit patterns: encoding truncates
toward zero and decoding turns the integer value back into a float. Only
integer-valued coordinates survive a round trip. Existing stored data depends on
this exact layout, so it must stay byte-for-byte compatible.
"""

from __future__ import annotations

import logging
import math
import struct
from typing import Any

from geopoint.core.errors import (
    InvalidHeaderError,
    InvalidLengthError,
    InvalidPointError,
    InvalidTypeError,
)
from geopoint.core.geo import POINT_KIND, Geometry, Point

logger = logging.getLogger(__name__)

RECORD_SIZE = 25
BYTE_ORDER_MARKER = 0
POINT_TYPE_TAG = 1

LON_SLICE = slice(9, 17)
LAT_SLICE = slice(17, 25)

_INT64 = struct.Struct("<q")
_UINT64 = struct.Struct("<Q")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _int_from_slot(slot: bytes) -> int:
    # Read unsigned, then reinterpret as two's complement.
    (raw,) = _UINT64.unpack(slot)
    return raw - 2**64 if raw > _INT64_MAX else raw


def _slot_from_float(value: float, *, axis: str) -> bytes:
    if not math.isfinite(value):
        raise InvalidPointError(f"Cannot store non-finite {axis}={value!r} in a binary point record")
    whole = math.trunc(value)
    if not _INT64_MIN <= whole <= _INT64_MAX:
        raise InvalidPointError(f"{axis}={value!r} does not fit a 64-bit point slot")
    if whole != value:
        logger.debug("Discarding fractional part of %s=%r (stored as %d)", axis, value, whole)
    return _INT64.pack(whole)


def decode_point(data: Any) -> Point:
    """Decode a 25-byte record into a fresh `Point`."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        logger.debug("Rejected binary point payload of type %s", type(data).__name__)
        raise InvalidTypeError(f"Cannot decode point from {type(data).__name__}; expected bytes")

    b = bytes(data)
    if len(b) != RECORD_SIZE:
        logger.debug("Rejected binary point payload of %d bytes", len(b))
        raise InvalidLengthError(f"Invalid point record: expected {RECORD_SIZE} bytes, got {len(b)}")
    if b[0] != BYTE_ORDER_MARKER or b[1] != POINT_TYPE_TAG:
        logger.debug("Rejected binary point header %02x %02x", b[0], b[1])
        raise InvalidHeaderError(
            f"Invalid point record header: marker={b[0]} type={b[1]} "
            f"(expected {BYTE_ORDER_MARKER} and {POINT_TYPE_TAG})"
        )

    lon = _int_from_slot(b[LON_SLICE])
    lat = _int_from_slot(b[LAT_SLICE])
    return Point(lon=float(lon), lat=float(lat))


def encode_point(point: Geometry | None) -> bytes:
    """Encode a point as a 25-byte record (coordinates truncated toward zero)."""
    if point is None:
        raise InvalidPointError("Cannot encode an absent point")
    if point.kind() != POINT_KIND:
        raise InvalidPointError(f"Cannot encode geometry of kind {point.kind()!r} as a point")

    lon, lat = point.coordinates()
    data = bytearray(RECORD_SIZE)
    data[0] = BYTE_ORDER_MARKER
    data[1] = POINT_TYPE_TAG
    data[LON_SLICE] = _slot_from_float(lon, axis="lon")
    data[LAT_SLICE] = _slot_from_float(lat, axis="lat")
    return bytes(data)
