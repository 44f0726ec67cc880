"""Run configuration for one generation pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgumentError
from .gen.geometry import GeometryKind
from .geo.crs import CoordinateSystem


def _check_count(name: str, value) -> None:
    # bool is an int subclass; reject it along with floats and strings.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be zero or more, got {value}")


@dataclass
class GeneratorConfig:
    feature_count: int = 100
    property_count: int = 0
    geometry_kind: GeometryKind = GeometryKind.ALL
    coordinate_system: CoordinateSystem = CoordinateSystem.GEOGRAPHIC
    # Only used by the writer, never by the generators.
    pretty_print: bool = False
    output_destination: str = "random.geojson"
    seed: Optional[int] = None

    def validate(self) -> "GeneratorConfig":
        _check_count("feature count", self.feature_count)
        _check_count("property count", self.property_count)
        if self.seed is not None:
            _check_count("seed", self.seed)
        if not isinstance(self.geometry_kind, GeometryKind):
            raise InvalidArgumentError(f"geometry_kind must be a GeometryKind, got {self.geometry_kind!r}")
        if not isinstance(self.coordinate_system, CoordinateSystem):
            raise InvalidArgumentError(
                f"coordinate_system must be a CoordinateSystem, got {self.coordinate_system!r}"
            )
        return self
