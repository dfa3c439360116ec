"""Data models and schemas.

Defines the data structures built from a KML document:
- Element: Generic typed node, subtree queries, the recursive builder
- Style, StyleMap and the colour style groups
- Polygon, LineString, Point, MultiGeometry
- Placemark: Named feature with one geometry and an effective style
- Overlay, Annotation: Render-ready projections
- Payloads: Pydantic snapshots for serialisation

Importing this package registers every built-in element class on the
shared tag registry.
"""

from kml_document.models.color import BLACK, Color
from kml_document.models.coordinate import Coordinate, parse_coordinate, parse_coordinates
from kml_document.models.element import Element, build_children
from kml_document.models.geometry import LineString, MultiGeometry, Point, Polygon
from kml_document.models.placemark import Placemark
from kml_document.models.projection import Annotation, Overlay, OverlayKind
from kml_document.models.styles import (
    BalloonStyle,
    ColorMode,
    ColorStyleGroup,
    Icon,
    IconStyle,
    LineStyle,
    PolyStyle,
    Style,
    StyleMap,
)

__all__ = [
    "BLACK",
    "Annotation",
    "BalloonStyle",
    "Color",
    "ColorMode",
    "ColorStyleGroup",
    "Coordinate",
    "Element",
    "Icon",
    "IconStyle",
    "LineString",
    "LineStyle",
    "MultiGeometry",
    "Overlay",
    "OverlayKind",
    "Placemark",
    "Point",
    "PolyStyle",
    "Polygon",
    "Style",
    "StyleMap",
    "build_children",
    "parse_coordinate",
    "parse_coordinates",
]
