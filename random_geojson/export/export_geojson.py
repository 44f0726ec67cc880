"""GeoJSON export helpers.

Turns a FeatureCollection into a GeoJSON FeatureCollection document and writes
it compact (one line) or pretty-printed. Coordinates are written as-is: [lon, lat]
degrees for EPSG:4326 or [x, y] meters for EPSG:3857.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from shapely.geometry import mapping

from ..errors import GeoJSONWriteError
from ..gen.collection import Feature, FeatureCollection

STDOUT = "-"


def _to_lists(coords: Any) -> Any:
    # shapely's mapping() gives nested tuples; GeoJSON arrays are lists.
    if isinstance(coords, (list, tuple)):
        return [_to_lists(c) for c in coords]
    return float(coords)


def geometry_to_geojson(geom) -> Dict[str, Any]:
    gj = mapping(geom)
    return {"type": gj["type"], "coordinates": _to_lists(gj["coordinates"])}


def feature_to_geojson(feature: Feature) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "id": feature.id,
        "geometry": geometry_to_geojson(feature.geometry),
        "properties": dict(feature.properties),
    }


def collection_to_geojson(fc: FeatureCollection) -> Dict[str, Any]:
    return {"type": "FeatureCollection", "features": [feature_to_geojson(f) for f in fc]}


def dumps_geojson(fc: FeatureCollection, pretty: bool = False) -> str:
    doc = collection_to_geojson(fc)
    if pretty:
        return json.dumps(doc, indent=2)
    return json.dumps(doc, separators=(",", ":"))


def write_geojson(
    fc: FeatureCollection,
    out_path: str,
    pretty: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Write `fc` to `out_path`.

    Args:
        fc: the collection to write.
        out_path: file path, or "-" for `stream` (stdout by default).
        pretty: indent the JSON instead of writing it on one line.
        stream: override for the "-" destination (tests pass a StringIO).
    """

    text = dumps_geojson(fc, pretty=pretty)

    if out_path == STDOUT:
        out = stream if stream is not None else sys.stdout
        try:
            out.write(text)
            out.write("\n")
            out.flush()
        except OSError as exc:
            raise GeoJSONWriteError(f"Failed to write GeoJSON to stdout: {exc}") from exc
        return

    path = Path(out_path)
    try:
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        raise GeoJSONWriteError(f"Failed to write GeoJSON to {path}: {exc}") from exc
