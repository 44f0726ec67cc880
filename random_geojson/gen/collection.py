"""Feature collection assembly.

`assemble(...)` drives the geometry and property generators N times and keeps
the features in generation order. `generate_collection(config)` is the
convenience entry used by the CLI: it builds the rng from the config seed.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

import numpy as np

from ..config import GeneratorConfig
from ..geo.crs import CoordinateSystem
from .geometry import Geometry, GeometryKind, generate_geometry
from .properties import PropertyValue, faker_from, generate_properties

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 250


@dataclass(frozen=True)
class Feature:
    id: str
    geometry: Geometry
    properties: Mapping[str, PropertyValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view over a private copy.
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))


@dataclass(frozen=True)
class FeatureCollection:
    features: Tuple[Feature, ...] = ()

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)


def new_feature_id(rng: np.random.Generator) -> str:
    """Random (version 4) UUID in canonical text form, drawn from `rng`."""

    return str(uuid.UUID(bytes=rng.bytes(16), version=4))


def assemble(
    feature_count: int,
    geometry_kind: GeometryKind,
    coordinate_system: CoordinateSystem,
    property_count: int,
    rng: np.random.Generator,
) -> FeatureCollection:
    features = []
    fake = faker_from(rng) if property_count > 0 else None
    for i in range(int(feature_count)):
        feature_id = new_feature_id(rng)
        geometry = generate_geometry(geometry_kind, coordinate_system, rng)
        properties = generate_properties(property_count, rng, fake)
        features.append(Feature(id=feature_id, geometry=geometry, properties=properties))
        if (i + 1) % PROGRESS_EVERY == 0:
            logger.debug("Generated %d/%d features", i + 1, feature_count)
    return FeatureCollection(features=tuple(features))


def generate_collection(
    config: GeneratorConfig,
    rng: Optional[np.random.Generator] = None,
) -> FeatureCollection:
    """Validate `config` and assemble its collection.

    If `rng` is not given, one is created from `config.seed` (fresh entropy when
    the seed is None).
    """

    config.validate()
    if rng is None:
        rng = np.random.default_rng(config.seed)

    logger.info(
        "Generating %d %s feature(s) with %d propert%s in %s",
        config.feature_count,
        config.geometry_kind.value,
        config.property_count,
        "y" if config.property_count == 1 else "ies",
        config.coordinate_system.to_pyproj().name,
    )
    return assemble(
        config.feature_count,
        config.geometry_kind,
        config.coordinate_system,
        config.property_count,
        rng,
    )
