"""Shared constants — single source of truth.

Centralises KML tag names, reference markers and the default render
palette so the element model, the resolver and the render helpers
agree on the same literals.
"""

from __future__ import annotations

from enum import StrEnum

# ---------------------------------------------------------------------------
# Structural tags
# ---------------------------------------------------------------------------

DEFAULT_ROOT_TAG: str = "Document"
"""Top-level container used as the build root."""

NAME_TAG: str = "name"
"""Child tag captured as the parent's ``name`` instead of a structural child."""

ERROR_TAG: str = "KmlDocumentError"
"""Tag of the synthetic error-marker node produced for unreadable input."""

REFERENCE_MARKER: str = "#"
"""Leading fragment-identifier character of ``styleUrl`` references."""

NORMAL_ROLE: str = "normal"
"""StyleMap role used when rendering a placemark."""

HIGHLIGHT_ROLE: str = "highlight"


class KmlTag(StrEnum):
    """Tags handled by the default registry.

    Each member value is exactly the XML local name it refers to.
    """

    STYLE = "Style"
    STYLE_MAP = "StyleMap"
    POLY_STYLE = "PolyStyle"
    LINE_STYLE = "LineStyle"
    ICON_STYLE = "IconStyle"
    BALLOON_STYLE = "BalloonStyle"
    MULTI_GEOMETRY = "MultiGeometry"
    POLYGON = "Polygon"
    LINE_STRING = "LineString"
    POINT = "Point"
    FOLDER = "Folder"
    PLACEMARK = "Placemark"
    ICON = "Icon"


# ---------------------------------------------------------------------------
# Default render palette (RGBA, 0..1)
# ---------------------------------------------------------------------------

DEFAULT_POLYGON_FILL: tuple[float, float, float, float] = (0.6, 1.0, 0.5, 0.2)
DEFAULT_POLYGON_STROKE: tuple[float, float, float, float] = (1.0, 0.6, 0.5, 0.8)
DEFAULT_LINE_STROKE: tuple[float, float, float, float] = (0.6, 0.6, 1.0, 0.8)
DEFAULT_LINE_WIDTH: float = 2.0
