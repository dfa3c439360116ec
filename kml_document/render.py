"""Paint helpers for map surfaces.

Translate an overlay's or annotation's effective style into the few
values a path or marker renderer needs. Unstyled overlays get the
default palette: translucent green fill with a salmon outline for
polygons, a translucent blue stroke for lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kml_document.core.constants import (
    DEFAULT_LINE_STROKE,
    DEFAULT_LINE_WIDTH,
    DEFAULT_POLYGON_FILL,
    DEFAULT_POLYGON_STROKE,
)
from kml_document.models.color import Color
from kml_document.models.projection import OverlayKind

if TYPE_CHECKING:
    from kml_document.models.projection import Annotation, Overlay


@dataclass(frozen=True, slots=True)
class PathPaint:
    """How to draw a polygon or line. ``None`` colours are not drawn."""

    fill_color: Color | None
    stroke_color: Color | None
    line_width: float


@dataclass(frozen=True, slots=True)
class IconPaint:
    href: str = ""
    scale: float = 1.0
    heading: float = 0.0
    color: Color | None = None


POLYGON_PAINT = PathPaint(
    fill_color=Color.from_rgba(DEFAULT_POLYGON_FILL),
    stroke_color=Color.from_rgba(DEFAULT_POLYGON_STROKE),
    line_width=DEFAULT_LINE_WIDTH,
)
LINE_PAINT = PathPaint(
    fill_color=None,
    stroke_color=Color.from_rgba(DEFAULT_LINE_STROKE),
    line_width=DEFAULT_LINE_WIDTH,
)


def paint_for_overlay(overlay: Overlay, *, line_width_scale: float = 1.0) -> PathPaint:
    """Return the paint for an overlay.

    A styled overlay takes its fill from ``PolyStyle`` (polygons only)
    and its stroke from ``LineStyle``; ``fill=0`` and ``outline=0``
    switch the respective part off. ``line_width_scale`` converts KML
    pixel widths to the surface's unit.
    """
    is_polygon = overlay.kind is OverlayKind.POLYGON
    style = overlay.style
    if style is None:
        return POLYGON_PAINT if is_polygon else LINE_PAINT

    fill_color: Color | None = None
    stroke_color: Color | None = None
    line_width = DEFAULT_LINE_WIDTH

    if style.line_style is not None:
        stroke_color = style.line_style.color
        line_width = style.line_style.width * line_width_scale

    poly_style = style.poly_style
    if poly_style is not None and is_polygon:
        if poly_style.fill:
            fill_color = poly_style.color
        if not poly_style.outline:
            stroke_color = None

    return PathPaint(fill_color=fill_color, stroke_color=stroke_color, line_width=line_width)


def paint_for_annotation(annotation: Annotation) -> IconPaint:
    """Return the icon paint for an annotation; defaults when unstyled."""
    style = annotation.style
    if style is None or style.icon_style is None:
        return IconPaint()
    icon_style = style.icon_style
    return IconPaint(
        href=icon_style.icon.href if icon_style.icon is not None else "",
        scale=icon_style.scale,
        heading=icon_style.heading,
        color=icon_style.color,
    )
