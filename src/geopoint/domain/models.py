"""
Domain models (Pydantic).

`GeoJSONPoint` is the JSON-facing contract for a point: the JSON codec validates
payloads with it, and API layers can embed it directly in their own request and
response models.
"""

from __future__ import annotations

import math
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, field_validator

from geopoint.core.geo import Point

Coordinate = Union[StrictInt, StrictFloat]


class GeoJSONPoint(BaseModel):
    """A GeoJSON `Point` geometry: `{"type": "Point", "coordinates": [lon, lat]}`."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["Point"]
    coordinates: list[Coordinate]

    @field_validator("coordinates")
    @classmethod
    def _validate_pair(cls, coords: list[Coordinate]) -> list[float]:
        if len(coords) != 2:
            raise ValueError(f"Point coordinates must have exactly 2 elements, got {len(coords)}")
        try:
            return [float(c) for c in coords]
        except OverflowError as e:
            raise ValueError("Point coordinates must fit a 64-bit float") from e

    def is_finite(self) -> bool:
        return all(math.isfinite(c) for c in self.coordinates)

    @classmethod
    def from_point(cls, point: Point) -> "GeoJSONPoint":
        return cls(type="Point", coordinates=point.coordinates())

    def to_point(self) -> Point:
        return Point.from_coordinates(self.coordinates)
