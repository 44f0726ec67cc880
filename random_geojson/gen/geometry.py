"""Random Point / LineString / Polygon generation.

Coordinates are drawn in geographic space (lon in [-180, 180], lat in [-90, 90])
and then projected into the requested coordinate system, so every emitted pair
lies inside that system's legal domain.

All functions take the random source explicitly (`np.random.Generator`); nothing
here keeps random state between calls.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple, Union

import numpy as np
from shapely.geometry import LineString, Point, Polygon

from ..errors import InvalidArgumentError
from ..geo.crs import CoordinateSystem
from ..geo.projector import project

Geometry = Union[Point, LineString, Polygon]

# Vertex count ranges, upper bound exclusive (np.random.Generator.integers).
LINESTRING_VERTICES = (2, 10)
POLYGON_VERTICES = (3, 10)


class GeometryKind(Enum):
    POINT = "Point"
    LINESTRING = "LineString"
    POLYGON = "Polygon"
    ALL = "All"


CONCRETE_KINDS: Tuple[GeometryKind, ...] = (
    GeometryKind.POINT,
    GeometryKind.LINESTRING,
    GeometryKind.POLYGON,
)


def parse_geometry_kind(text: str) -> GeometryKind:
    key = (text or "").strip().lower()
    for kind in GeometryKind:
        if kind.value.lower() == key:
            return kind
    raise InvalidArgumentError(
        f"Invalid geometry type: {text} (expected one of: Point, LineString, Polygon, All)"
    )


def random_coords(crs: CoordinateSystem, rng: np.random.Generator) -> Tuple[float, float]:
    lon = float(rng.uniform(-180.0, 180.0))
    lat = float(rng.uniform(-90.0, 90.0))
    return project(lon, lat, crs)


def _random_coord_list(n: int, crs: CoordinateSystem, rng: np.random.Generator) -> List[Tuple[float, float]]:
    return [random_coords(crs, rng) for _ in range(n)]


def random_point(crs: CoordinateSystem, rng: np.random.Generator) -> Point:
    return Point(random_coords(crs, rng))


def random_linestring(crs: CoordinateSystem, rng: np.random.Generator) -> LineString:
    """LineString with 2..9 independently drawn vertices, in draw order."""

    n = int(rng.integers(*LINESTRING_VERTICES))
    return LineString(_random_coord_list(n, crs, rng))


def random_polygon(crs: CoordinateSystem, rng: np.random.Generator) -> Polygon:
    """Single-ring Polygon with 3..9 drawn vertices plus the closing vertex.

    The ring is not checked for self-intersection.
    """

    n = int(rng.integers(*POLYGON_VERTICES))
    ring = _random_coord_list(n, crs, rng)
    # Close the ring by repeating the first vertex.
    ring.append(ring[0])
    return Polygon(ring)


def pick_kind(kind: GeometryKind, rng: np.random.Generator) -> GeometryKind:
    """Resolve ALL to one concrete kind, uniformly; concrete kinds pass through."""

    if kind is GeometryKind.ALL:
        return CONCRETE_KINDS[int(rng.integers(0, len(CONCRETE_KINDS)))]
    return kind


def generate_geometry(
    kind: GeometryKind,
    crs: CoordinateSystem,
    rng: np.random.Generator,
) -> Geometry:
    concrete = pick_kind(kind, rng)
    if concrete is GeometryKind.POINT:
        return random_point(crs, rng)
    if concrete is GeometryKind.LINESTRING:
        return random_linestring(crs, rng)
    return random_polygon(crs, rng)
