from __future__ import annotations

"""
Point value type and distance helpers.

We keep a tiny geometry layer here instead of depending on a full GIS stack:
only points are modelled, and "no point yet" is plain `None`.
"""

from dataclasses import dataclass
from math import atan2, cos, radians, sin, sqrt
from typing import Optional, Protocol, Sequence, runtime_checkable

DEG_TO_KM = 111.0
EARTH_RADIUS_KM = 6371.0

POINT_KIND = "Point"


@runtime_checkable
class Geometry(Protocol):
    """Minimal typed-geometry capability consumed by the codecs."""

    def kind(self) -> str: ...

    def coordinates(self) -> list[float]: ...


@dataclass(frozen=True)
class Point:
    """A longitude/latitude pair in decimal degrees.

    Ranges are not enforced: out-of-range values are carried through unchanged.
    """

    lon: float
    lat: float

    def __post_init__(self) -> None:
        # Normalize ints (and numpy scalars etc.) so equality and encoding see plain floats.
        object.__setattr__(self, "lon", float(self.lon))
        object.__setattr__(self, "lat", float(self.lat))

    @classmethod
    def from_coordinates(cls, coords: Sequence[float]) -> "Point":
        """Build a point from a `[lon, lat]` sequence."""
        if len(coords) != 2:
            raise ValueError(f"Expected 2 coordinates, got {len(coords)}")
        return cls(lon=coords[0], lat=coords[1])

    def kind(self) -> str:
        return POINT_KIND

    def coordinates(self) -> list[float]:
        return [self.lon, self.lat]

    def straight_line_distance(self, other: Optional["Point"]) -> float:
        return planar_approx_distance(self, other)

    def distance(self, other: Optional["Point"]) -> float:
        return great_circle_distance(self, other)


MaybePoint = Optional[Point]


def parse_point(longitude: float, latitude: float) -> Point:
    """Construct a point; never validates ranges."""
    return Point(lon=longitude, lat=latitude)


def planar_approx_distance(a: MaybePoint, b: MaybePoint) -> float:
    """Flat-grid distance in km: degree delta scaled by 111 km/degree.

    Ignores the narrowing of longitude degrees away from the equator.
    Returns 0.0 when either point is absent.
    """
    if a is None or b is None:
        return 0.0

    dx = b.lon - a.lon
    dy = b.lat - a.lat
    return sqrt(dx * dx + dy * dy) * DEG_TO_KM


def great_circle_distance(a: MaybePoint, b: MaybePoint) -> float:
    """Compute Haversine great-circle distance in km between two points.

    Returns 0.0 when either point is absent.
    """
    if a is None or b is None:
        return 0.0

    lat1 = radians(a.lat)
    lon1 = radians(a.lon)
    lat2 = radians(b.lat)
    lon2 = radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding can push h a hair outside [0, 1] near antipodes.
    h = min(1.0, max(0.0, h))
    return EARTH_RADIUS_KM * 2 * atan2(sqrt(h), sqrt(1 - h))
