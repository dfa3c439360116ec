"""Placemark element: a named feature with one geometry and a style."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from kml_document.core.constants import KmlTag
from kml_document.core.registry import tag_registry
from kml_document.models.element import Element
from kml_document.models.geometry import LineString, Point, Polygon
from kml_document.utils.helpers import strip_reference_marker

if TYPE_CHECKING:
    from kml_document.models.styles import Style
    from kml_document.reader import XmlNode


@tag_registry.register(KmlTag.PLACEMARK)
@dataclass(eq=False)
class Placemark(Element):
    """A named feature.

    Exactly one geometry slot is filled, chosen by priority
    point > line string > polygon among all geometries in the subtree.
    Overlays are still projected from *every* polygon and line string of
    the placemark (e.g. inside a ``MultiGeometry``).

    Attributes:
        description: Text of ``<description>``.
        style_url: Referenced style id with the leading ``#`` removed.
        style: Effective style, assigned once by the style resolver.
            Never a ``StyleMap``.
    """

    description: str = ""
    style_url: str = ""
    point: Point | None = field(default=None, init=False, repr=False)
    line_string: LineString | None = field(default=None, init=False, repr=False)
    polygon: Polygon | None = field(default=None, init=False, repr=False)
    style: Style | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if (point := self.find_element(Point)) is not None:
            self.point = point
        elif (line_string := self.find_element(LineString)) is not None:
            self.line_string = line_string
        else:
            self.polygon = self.find_element(Polygon)

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        return {
            "description": node.find_text("description"),
            "style_url": strip_reference_marker(node.find_text("styleUrl")),
        }

    @property
    def geometry(self) -> Point | LineString | Polygon | None:
        """Whichever geometry slot is filled."""
        return self.point or self.line_string or self.polygon
