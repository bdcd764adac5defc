"""
GeoJSON codec for points.

Unlike the binary record, this path keeps full float precision, so
`decode_point(encode_point(p)) == p` for every finite point.

Coordinates are always written as floats, so an integer-valued point encodes
as `[10.0,20.0]` rather than `[10,20]`. Both forms decode to the same point.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from pydantic import ValidationError

from geopoint.core.errors import InvalidGeometryError, InvalidTypeError, ParseError
from geopoint.core.geo import POINT_KIND, Geometry, Point
from geopoint.domain.models import GeoJSONPoint

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> float:
    # Python accepts NaN/Infinity literals; JSON does not.
    raise ParseError(f"Invalid JSON: unexpected constant {name}")


def to_geojson(point: Geometry | None) -> dict[str, Any]:
    """Return the GeoJSON mapping for a point."""
    if point is None:
        raise InvalidGeometryError("Invalid GeoJSON Point: point is absent")
    if point.kind() != POINT_KIND:
        raise InvalidGeometryError(f"Invalid GeoJSON Point: geometry kind is {point.kind()!r}")

    try:
        model = GeoJSONPoint(type="Point", coordinates=point.coordinates())
    except ValidationError as e:
        raise InvalidGeometryError(f"Invalid GeoJSON Point: {e.errors()[0]['msg']}") from e
    if not model.is_finite():
        raise InvalidGeometryError(f"Invalid GeoJSON Point: non-finite coordinates {model.coordinates!r}")
    return model.model_dump(mode="json")


def from_geojson(obj: Mapping[str, Any]) -> Point:
    """Build a point from an already-parsed GeoJSON mapping."""
    try:
        model = GeoJSONPoint.model_validate(obj, strict=True)
    except ValidationError as e:
        logger.debug("Rejected GeoJSON point payload: %s", e.errors())
        raise InvalidGeometryError(f"Invalid GeoJSON Point: {e.errors()[0]['msg']}") from e
    if not model.is_finite():
        raise InvalidGeometryError(f"Invalid GeoJSON Point: non-finite coordinates {model.coordinates!r}")
    return model.to_point()


def encode_point(point: Geometry | None) -> str:
    """Serialize a point as compact GeoJSON text."""
    return json.dumps(to_geojson(point), separators=(",", ":"), allow_nan=False)


def decode_point(data: str | bytes | bytearray) -> Point:
    """Parse GeoJSON text into a fresh `Point`."""
    if not isinstance(data, (str, bytes, bytearray)):
        raise InvalidTypeError(f"Cannot decode GeoJSON from {type(data).__name__}; expected str or bytes")

    try:
        obj = json.loads(data, parse_constant=_reject_constant)
    except ParseError:
        raise
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"Invalid JSON: {e.reason}") from e
    except (ValueError, RecursionError) as e:
        # Oversized integer literals and runaway nesting.
        raise ParseError(f"Invalid JSON: {e}") from e
    return from_geojson(obj)
