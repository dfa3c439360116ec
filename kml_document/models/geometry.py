"""Geometry elements: ``Polygon``, ``LineString``, ``Point``, ``MultiGeometry``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from kml_document.core.constants import KmlTag
from kml_document.core.registry import tag_registry
from kml_document.models.coordinate import ORIGIN, Coordinate, parse_coordinate, parse_coordinates
from kml_document.models.element import Element
from kml_document.utils.helpers import parse_bool

if TYPE_CHECKING:
    from kml_document.reader import XmlNode


@tag_registry.register(KmlTag.MULTI_GEOMETRY)
@dataclass(eq=False)
class MultiGeometry(Element):
    """Groups several geometries of one placemark."""


@tag_registry.register(KmlTag.POLYGON)
@dataclass(eq=False)
class Polygon(Element):
    """A polygon with one outer ring and zero or more holes.

    Attributes:
        outer_boundary: Positions of ``outerBoundaryIs/LinearRing``.
        inner_boundaries: One position list per ``innerBoundaryIs``.
        tessellate: Whether the polygon follows the terrain.
    """

    outer_boundary: list[Coordinate] = field(default_factory=list)
    inner_boundaries: list[list[Coordinate]] = field(default_factory=list)
    tessellate: bool = False

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        outer_boundary: list[Coordinate] = []
        inner_boundaries: list[list[Coordinate]] = []
        tessellate = False
        for child in node.children:
            match child.tag:
                case "tessellate":
                    tessellate = parse_bool(child.text, False)
                case "outerBoundaryIs":
                    outer_boundary = parse_coordinates(child.find_text("LinearRing", "coordinates"))
                case "innerBoundaryIs":
                    inner_boundaries.append(
                        parse_coordinates(child.find_text("LinearRing", "coordinates"))
                    )
        return {
            "outer_boundary": outer_boundary,
            "inner_boundaries": inner_boundaries,
            "tessellate": tessellate,
        }

    @property
    def coordinates(self) -> list[Coordinate]:
        return self.outer_boundary


@tag_registry.register(KmlTag.LINE_STRING)
@dataclass(eq=False)
class LineString(Element):
    coordinates: list[Coordinate] = field(default_factory=list)
    tessellate: bool = False

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        return {
            "coordinates": parse_coordinates(node.find_text("coordinates")),
            "tessellate": parse_bool(node.find_text("tessellate"), False),
        }


@tag_registry.register(KmlTag.POINT)
@dataclass(eq=False)
class Point(Element):
    coordinate: Coordinate = ORIGIN

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        coordinates = node.find("coordinates")
        if coordinates is None:
            return {}
        return {"coordinate": parse_coordinate(coordinates.text)}
