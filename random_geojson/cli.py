"""Command line entry point: generate a random GeoJSON FeatureCollection.

Examples:
  random-geojson --length 500 --geometry-type Polygon -o polys.geojson
  random-geojson --coordinate-system 3857 --num-properties 4 --pretty -o -
  random-geojson --seed 42  # reproducible output
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import GeneratorConfig
from .errors import GeoJSONWriteError, InvalidArgumentError
from .export.export_geojson import STDOUT, write_geojson
from .gen.collection import generate_collection
from .gen.geometry import GeometryKind, parse_geometry_kind
from .geo.crs import CoordinateSystem, parse_coordinate_system

logger = logging.getLogger(__name__)


def zero_or_more(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("Value must be zero or more") from None
    if n < 0:
        raise argparse.ArgumentTypeError("Value must be zero or more")
    return n


def geometry_kind_arg(value: str) -> GeometryKind:
    try:
        return parse_geometry_kind(value)
    except InvalidArgumentError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def coordinate_system_arg(value: str) -> CoordinateSystem:
    try:
        return parse_coordinate_system(value)
    except InvalidArgumentError:
        raise argparse.ArgumentTypeError(
            "Coordinate system must be one of: WGS84, WebMercator, 4326, 3857"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="random-geojson",
        description="Generate random GeoJSON data for testing and development.",
    )
    parser.add_argument("--length", type=zero_or_more, default=100, help="Number of features (default: 100)")
    parser.add_argument(
        "--num-properties",
        type=zero_or_more,
        default=0,
        help="Number of random properties per feature (default: 0)",
    )
    parser.add_argument(
        "--geometry-type",
        type=geometry_kind_arg,
        default=GeometryKind.ALL,
        help="Point, LineString, Polygon or All (default: All, a random type per feature)",
    )
    parser.add_argument(
        "--coordinate-system",
        type=coordinate_system_arg,
        default=CoordinateSystem.GEOGRAPHIC,
        help="WGS84/4326 or WebMercator/3857 (default: WGS84)",
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print the GeoJSON output")
    parser.add_argument(
        "-o",
        "--output-file",
        type=str,
        default="random.geojson",
        help=f"Output file, or '{STDOUT}' for stdout (default: random.geojson)",
    )
    parser.add_argument("--seed", type=zero_or_more, default=None, help="Random seed for reproducible output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    return GeneratorConfig(
        feature_count=args.length,
        property_count=args.num_properties,
        geometry_kind=args.geometry_type,
        coordinate_system=args.coordinate_system,
        pretty_print=args.pretty,
        output_destination=args.output_file,
        seed=args.seed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # stderr, so "-o -" output stays clean.
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = config_from_args(args)
    fc = generate_collection(config)

    try:
        write_geojson(fc, config.output_destination, pretty=config.pretty_print)
    except GeoJSONWriteError as exc:
        logger.error("%s", exc)
        return 1

    if config.output_destination != STDOUT:
        logger.info("Wrote %d features to %s", len(fc), config.output_destination)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
