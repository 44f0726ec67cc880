"""Coordinate systems supported by the generator.

Two systems are available:
- GEOGRAPHIC: EPSG:4326 longitude/latitude in degrees
- PROJECTED_MERCATOR: EPSG:3857 spherical Web Mercator in meters
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pyproj import CRS

from ..errors import InvalidArgumentError

# Half the width of the Web Mercator square (meters), R * pi rounded to cm.
MERCATOR_EXTENT_M = 20037508.34


@dataclass(frozen=True)
class Bounds:
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    # Slack allowed on every edge when checking membership.
    tolerance: float = 1e-9

    def contains(self, x: float, y: float) -> bool:
        tol = self.tolerance
        return (
            self.min_x - tol <= x <= self.max_x + tol
            and self.min_y - tol <= y <= self.max_y + tol
        )


GEOGRAPHIC_BOUNDS = Bounds(min_x=-180.0, max_x=180.0, min_y=-90.0, max_y=90.0)

MERCATOR_BOUNDS = Bounds(
    min_x=-MERCATOR_EXTENT_M,
    max_x=MERCATOR_EXTENT_M,
    min_y=-MERCATOR_EXTENT_M,
    max_y=MERCATOR_EXTENT_M,
    tolerance=0.01,
)


class CoordinateSystem(Enum):
    GEOGRAPHIC = 4326
    PROJECTED_MERCATOR = 3857

    @property
    def epsg(self) -> int:
        return int(self.value)

    def bounds(self) -> Bounds:
        """Legal output domain for coordinates in this system."""
        if self is CoordinateSystem.PROJECTED_MERCATOR:
            return MERCATOR_BOUNDS
        return GEOGRAPHIC_BOUNDS

    def to_pyproj(self) -> CRS:
        return CRS.from_epsg(self.epsg)


_ALIASES = {
    "wgs84": CoordinateSystem.GEOGRAPHIC,
    "4326": CoordinateSystem.GEOGRAPHIC,
    "epsg:4326": CoordinateSystem.GEOGRAPHIC,
    "webmercator": CoordinateSystem.PROJECTED_MERCATOR,
    "web_mercator": CoordinateSystem.PROJECTED_MERCATOR,
    "3857": CoordinateSystem.PROJECTED_MERCATOR,
    "epsg:3857": CoordinateSystem.PROJECTED_MERCATOR,
}


def parse_coordinate_system(text: str) -> CoordinateSystem:
    """Resolve a user-facing CRS name ("WGS84", "3857", ...) to a CoordinateSystem."""

    key = (text or "").strip().lower()
    try:
        return _ALIASES[key]
    except KeyError:
        raise InvalidArgumentError(f"Invalid coordinate system: {text}") from None
