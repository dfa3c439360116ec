"""KML Document Model.

Parses KML into a strongly-typed element tree, resolves each
placemark's effective style through Style/StyleMap references, and
projects placemarks into render-ready overlays (polygons, line strings)
and annotations (points).

Usage::

    from kml_document import KmlDocument

    doc = KmlDocument.from_path("parks.kml")
    for overlay in doc.overlays:
        draw(overlay.to_shapely(), paint_for_overlay(overlay))
"""

from kml_document.core.registry import TagRegistry, default_registry, tag_registry
from kml_document.dispatch import load_document, parse_bytes, parse_path
from kml_document.document import KmlDocument

__version__ = "0.1.0"

__all__ = [
    "KmlDocument",
    "TagRegistry",
    "default_registry",
    "load_document",
    "parse_bytes",
    "parse_path",
    "tag_registry",
]
