"""Geographic <-> spherical Web Mercator conversion.

The forward transform is the standard EPSG:3857 formula on a sphere of radius
R = 6378137 m:

    x = R * lon_rad
    y = R * ln(tan(pi/4 + lat_rad/2))

y diverges at the poles, so latitude is clamped to +/-85.05112878 degrees first
(the latitude at which the map becomes square). Clamping instead of raising
keeps project() total over the geographic domain.
"""

from __future__ import annotations

import math
from typing import Tuple

from .crs import CoordinateSystem

EARTH_RADIUS_M = 6378137.0
MAX_MERCATOR_LAT = 85.05112878


def clamp_latitude(lat: float) -> float:
    return max(-MAX_MERCATOR_LAT, min(MAX_MERCATOR_LAT, float(lat)))


def project(lon: float, lat: float, target: CoordinateSystem) -> Tuple[float, float]:
    """Project a geographic (lon, lat) pair into `target`.

    Args:
        lon: longitude in degrees, [-180, 180]
        lat: latitude in degrees, [-90, 90]
        target: output coordinate system

    Returns:
        (x, y) in degrees for GEOGRAPHIC (unchanged), meters for PROJECTED_MERCATOR.
    """

    if target is CoordinateSystem.GEOGRAPHIC:
        return float(lon), float(lat)

    lat_c = clamp_latitude(lat)
    x = EARTH_RADIUS_M * math.radians(float(lon))
    y = EARTH_RADIUS_M * math.log(math.tan(math.pi / 4.0 + math.radians(lat_c) / 2.0))
    return x, y


def unproject(x: float, y: float, source: CoordinateSystem) -> Tuple[float, float]:
    """Inverse of project(): (x, y) in `source` back to (lon, lat) degrees."""

    if source is CoordinateSystem.GEOGRAPHIC:
        return float(x), float(y)

    lon = math.degrees(float(x) / EARTH_RADIUS_M)
    lat = math.degrees(2.0 * math.atan(math.exp(float(y) / EARTH_RADIUS_M)) - math.pi / 2.0)
    return lon, lat
