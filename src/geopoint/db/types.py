# geopoint/db/types.py
from __future__ import annotations

from typing import Any

from sqlalchemy.types import LargeBinary, TypeDecorator

from geopoint.codecs import binary
from geopoint.core.geo import Point


class PointType(TypeDecorator):
    """Point column stored as the 25-byte binary record.

    NULL maps to `None` in both directions. Coordinates are truncated to integers
    on write (see `geopoint.codecs.binary`).
    """

    impl = LargeBinary
    cache_ok = True

    def process_bind_param(self, value: Point | None, dialect: Any) -> bytes | None:
        if value is None:
            return None
        return binary.encode_point(value)

    def process_result_value(self, value: Any, dialect: Any) -> Point | None:
        if value is None:
            return None
        return binary.decode_point(value)

    @property
    def python_type(self) -> type:
        return Point
