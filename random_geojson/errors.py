"""Exceptions raised outside the (total) generation core."""


class RandomGeojsonError(Exception):
    """Base class for random_geojson errors."""


class InvalidArgumentError(RandomGeojsonError, ValueError):
    """A configuration value (count, geometry type, CRS name) is not accepted."""


class GeoJSONWriteError(RandomGeojsonError, OSError):
    """The generated document could not be written to its destination."""
