"""
geopoint: a longitude/latitude point value with distance helpers and codecs.

- `geopoint.core.geo`: `Point`, planar and great-circle distances
- `geopoint.codecs.binary`: fixed 25-byte column record
- `geopoint.codecs.geojson`: GeoJSON `Point` text
- `geopoint.db.types`: SQLAlchemy column type over the binary record
"""

from __future__ import annotations

from geopoint.core.errors import (
    GeoPointError,
    InvalidGeometryError,
    InvalidHeaderError,
    InvalidLengthError,
    InvalidPointError,
    InvalidTypeError,
    ParseError,
)
from geopoint.core.geo import (
    DEG_TO_KM,
    EARTH_RADIUS_KM,
    Geometry,
    MaybePoint,
    Point,
    great_circle_distance,
    parse_point,
    planar_approx_distance,
)

__all__ = [
    "DEG_TO_KM",
    "EARTH_RADIUS_KM",
    "GeoPointError",
    "Geometry",
    "InvalidGeometryError",
    "InvalidHeaderError",
    "InvalidLengthError",
    "InvalidPointError",
    "InvalidTypeError",
    "MaybePoint",
    "ParseError",
    "Point",
    "great_circle_distance",
    "parse_point",
    "planar_approx_distance",
]
