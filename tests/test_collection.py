import uuid

import numpy as np
import pytest
from shapely.geometry import LineString, Point, Polygon

from random_geojson.config import GeneratorConfig
from random_geojson.errors import InvalidArgumentError
from random_geojson.gen.collection import (
    Feature,
    FeatureCollection,
    assemble,
    generate_collection,
    new_feature_id,
)
from random_geojson.gen.geometry import GeometryKind
from random_geojson.geo.crs import CoordinateSystem


@pytest.mark.parametrize("n", [0, 1, 17, 300])
def test_length_and_unique_ids(n, rng):
    fc = assemble(n, GeometryKind.ALL, CoordinateSystem.GEOGRAPHIC, 2, rng)
    assert isinstance(fc, FeatureCollection)
    assert len(fc) == n
    ids = [f.id for f in fc]
    assert len(set(ids)) == n


def test_feature_ids_are_uuid4(rng):
    for _ in range(20):
        fid = new_feature_id(rng)
        parsed = uuid.UUID(fid)
        assert parsed.version == 4
        assert str(parsed) == fid


def test_zero_properties_gives_empty_sets(rng):
    fc = assemble(20, GeometryKind.POINT, CoordinateSystem.GEOGRAPHIC, 0, rng)
    assert all(f.properties == {} for f in fc)


def test_property_count_per_feature(rng):
    fc = assemble(20, GeometryKind.POLYGON, CoordinateSystem.PROJECTED_MERCATOR, 4, rng)
    for f in fc:
        assert isinstance(f, Feature)
        assert sorted(f.properties) == ["prop1", "prop2", "prop3", "prop4"]
        assert isinstance(f.geometry, Polygon)


def test_fixed_kind_is_respected(rng):
    fc = assemble(30, GeometryKind.LINESTRING, CoordinateSystem.GEOGRAPHIC, 0, rng)
    assert all(isinstance(f.geometry, LineString) for f in fc)


def test_all_kinds_mixes_geometries(rng):
    fc = assemble(200, GeometryKind.ALL, CoordinateSystem.GEOGRAPHIC, 0, rng)
    kinds = {type(f.geometry) for f in fc}
    assert kinds == {Point, LineString, Polygon}


def test_same_seed_same_order():
    a = assemble(25, GeometryKind.ALL, CoordinateSystem.GEOGRAPHIC, 3, np.random.default_rng(1))
    b = assemble(25, GeometryKind.ALL, CoordinateSystem.GEOGRAPHIC, 3, np.random.default_rng(1))
    assert [f.id for f in a] == [f.id for f in b]
    for fa, fb in zip(a, b):
        assert fa.geometry.equals_exact(fb.geometry, 0.0)
        assert fa.properties == fb.properties


def test_different_seeds_same_structure():
    cfg = GeneratorConfig(feature_count=40, property_count=3, geometry_kind=GeometryKind.POLYGON)
    a = assemble(40, cfg.geometry_kind, cfg.coordinate_system, 3, np.random.default_rng(1))
    b = assemble(40, cfg.geometry_kind, cfg.coordinate_system, 3, np.random.default_rng(2))
    assert len(a) == len(b) == 40
    for fa, fb in zip(a, b):
        assert type(fa.geometry) is type(fb.geometry)
        assert list(fa.properties) == list(fb.properties)
    assert [f.id for f in a] != [f.id for f in b]


def test_generate_collection_uses_config_seed():
    cfg = GeneratorConfig(feature_count=10, property_count=1, seed=42)
    a = generate_collection(cfg)
    b = generate_collection(cfg)
    assert [f.id for f in a] == [f.id for f in b]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"feature_count": 2.5},
        {"feature_count": True},
        {"feature_count": "3"},
        {"property_count": 1.0},
        {"seed": -1},
        {"seed": 1.5},
    ],
)
def test_config_rejects_non_integer_counts_and_bad_seeds(kwargs):
    with pytest.raises(InvalidArgumentError):
        GeneratorConfig(**kwargs).validate()


def test_config_accepts_zero_seed():
    assert GeneratorConfig(seed=0).validate().seed == 0


def test_feature_properties_are_read_only(rng):
    fc = assemble(3, GeometryKind.POINT, CoordinateSystem.GEOGRAPHIC, 2, rng)
    with pytest.raises(TypeError):
        fc.features[0].properties["x"] = 1
    assert "x" not in fc.features[0].properties

    source = {"prop1": 1.0}
    feature = Feature(id="a", geometry=fc.features[0].geometry, properties=source)
    source["prop2"] = True
    assert dict(feature.properties) == {"prop1": 1.0}


def test_generate_collection_rejects_bad_config():
    with pytest.raises(InvalidArgumentError):
        generate_collection(GeneratorConfig(feature_count=-1))
    with pytest.raises(InvalidArgumentError):
        generate_collection(GeneratorConfig(property_count=-5))
    with pytest.raises(InvalidArgumentError):
        generate_collection(GeneratorConfig(geometry_kind="Point"))
