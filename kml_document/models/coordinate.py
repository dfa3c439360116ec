"""Coordinate type and KML coordinate text codec.

KML writes coordinates as ``lon,lat[,alt]`` tuples separated by
whitespace. Decoding is lenient: a token with fewer than two fields is
skipped and an unparsable number becomes ``0.0``.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from kml_document.utils.helpers import parse_float

logger = logging.getLogger("kml_document.models.coordinate")


class Coordinate(NamedTuple):
    """A WGS 84 position. Altitude is not kept."""

    latitude: float
    longitude: float

    @property
    def lon_lat(self) -> tuple[float, float]:
        """The position in GeoJSON/shapely axis order."""
        return (self.longitude, self.latitude)


ORIGIN = Coordinate(0.0, 0.0)


def parse_coordinates(text: str) -> list[Coordinate]:
    """Decode KML coordinate text into positions, preserving order.

    >>> parse_coordinates("-122.1,37.4,0 -122.2,37.5,0")
    [Coordinate(latitude=37.4, longitude=-122.1), Coordinate(latitude=37.5, longitude=-122.2)]
    """
    coordinates: list[Coordinate] = []
    for token in text.split():
        fields = token.split(",")
        if len(fields) < 2:
            continue
        coordinates.append(Coordinate(parse_float(fields[1]), parse_float(fields[0])))
    return coordinates


def parse_coordinate(text: str) -> Coordinate:
    """Decode a single ``lon,lat[,alt]`` position.

    Returns the origin when the text holds no usable tuple.
    """
    coordinates = parse_coordinates(text)
    if not coordinates:
        logger.warning("No usable coordinate in %r, using origin", text)
        return ORIGIN
    return coordinates[0]
