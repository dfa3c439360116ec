"""Render-ready records projected from resolved placemarks.

An ``Overlay`` is a polygon or line string plus the effective style of
its placemark; an ``Annotation`` is a point with a title, subtitle and
style. They are what a map surface consumes; how they are drawn is up
to the consumer. ``to_shapely()`` hands the geometry over to shapely
(lon/lat axis order).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapely.geometry import LineString as ShapelyLineString
    from shapely.geometry import Point as ShapelyPoint
    from shapely.geometry import Polygon as ShapelyPolygon

    from kml_document.models.coordinate import Coordinate
    from kml_document.models.styles import Style


_MIN_RING_POSITIONS = 4
_MIN_PATH_POSITIONS = 2


class OverlayKind(Enum):
    POLYGON = "Polygon"
    LINE_STRING = "LineString"


@dataclass(frozen=True, slots=True)
class Overlay:
    """A projected polygon or line string.

    Attributes:
        kind: ``POLYGON`` or ``LINE_STRING``.
        coordinates: Outer boundary (polygons) or path (line strings).
        inner_boundaries: Holes; always empty for line strings.
        style: Effective style of the owning placemark, or ``None``.
        title: Name of the owning placemark.
        tessellate: Copied from the geometry.
    """

    kind: OverlayKind
    coordinates: tuple[Coordinate, ...]
    inner_boundaries: tuple[tuple[Coordinate, ...], ...] = ()
    style: Style | None = None
    title: str = ""
    tessellate: bool = False

    def to_shapely(self) -> ShapelyPolygon | ShapelyLineString:
        """Convert to a shapely geometry in ``(lon, lat)`` order.

        Lenient coordinate decoding can leave too few positions for a
        valid geometry. An outer ring under 4 positions or a path under 2
        yields an empty geometry; inner rings under 4 positions are dropped.
        """
        from shapely.geometry import LineString, Polygon

        if self.kind is OverlayKind.POLYGON:
            if len(self.coordinates) < _MIN_RING_POSITIONS:
                return Polygon()
            return Polygon(
                [c.lon_lat for c in self.coordinates],
                [
                    [c.lon_lat for c in ring]
                    for ring in self.inner_boundaries
                    if len(ring) >= _MIN_RING_POSITIONS
                ],
            )
        if len(self.coordinates) < _MIN_PATH_POSITIONS:
            return LineString()
        return LineString([c.lon_lat for c in self.coordinates])


@dataclass(frozen=True, slots=True)
class Annotation:
    """A projected point with its placemark's name and description."""

    coordinate: Coordinate
    title: str = ""
    subtitle: str = ""
    style: Style | None = None

    def to_shapely(self) -> ShapelyPoint:
        from shapely.geometry import Point

        return Point(self.coordinate.lon_lat)
