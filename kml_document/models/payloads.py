"""Pydantic payload models for handing a built document to other processes.

The element tree holds live objects (shared style instances, parent
links through ``children``). These models flatten a ``KmlDocument`` into
plain data: colours become ``#rrggbbaa`` strings, coordinates become
``[lon, lat]`` pairs, styles are embedded by value. ``to_geojson()``
produces a GeoJSON FeatureCollection of the overlays and annotations.

Coordinates follow GeoJSON axis order (longitude first), unlike
``Coordinate`` which is ``(latitude, longitude)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from kml_document.models.projection import OverlayKind
from kml_document.models.styles import StyleMap

if TYPE_CHECKING:
    from kml_document.document import KmlDocument
    from kml_document.models.coordinate import Coordinate
    from kml_document.models.projection import Annotation, Overlay
    from kml_document.models.styles import Style

# Schema version for forward compatibility
SCHEMA_VERSION = "kml-document-v1"


def _lon_lat(coordinates: tuple[Coordinate, ...] | list[Coordinate]) -> list[list[float]]:
    return [[c.longitude, c.latitude] for c in coordinates]


class StylePayload(BaseModel):
    """Flattened style.

    Attributes:
        style_id: Style id (``""`` for inline styles).
        fill_color: PolyStyle colour, ``None`` without PolyStyle or with ``fill=0``.
        stroke_color: LineStyle colour, ``None`` without LineStyle.
        line_width: LineStyle width, ``None`` without LineStyle.
        icon_href: IconStyle icon image URL.
        icon_scale: IconStyle scale.
        balloon_text: BalloonStyle text template.
        pairs: StyleMap role → referenced id; empty for plain styles.
    """

    style_id: str = ""
    fill_color: str | None = None
    stroke_color: str | None = None
    line_width: float | None = None
    icon_href: str = ""
    icon_scale: float = 1.0
    balloon_text: str = ""
    pairs: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_style(cls, style: Style) -> StylePayload:
        payload = cls(style_id=style.style_id)
        if style.poly_style is not None and style.poly_style.fill:
            payload.fill_color = style.poly_style.color.to_hex()
        if style.line_style is not None:
            payload.stroke_color = style.line_style.color.to_hex()
            payload.line_width = style.line_style.width
        if style.icon_style is not None:
            payload.icon_scale = style.icon_style.scale
            if style.icon_style.icon is not None:
                payload.icon_href = style.icon_style.icon.href
        if style.balloon_style is not None:
            payload.balloon_text = style.balloon_style.text
        if isinstance(style, StyleMap):
            payload.pairs = dict(style.pairs)
        return payload


def _style_payload(style: Style | None) -> StylePayload | None:
    return StylePayload.from_style(style) if style is not None else None


class OverlayPayload(BaseModel):
    kind: str = OverlayKind.POLYGON.value
    title: str = ""
    coordinates: list[list[float]] = Field(default_factory=list)
    inner_boundaries: list[list[list[float]]] = Field(default_factory=list)
    style: StylePayload | None = None

    @classmethod
    def from_overlay(cls, overlay: Overlay) -> OverlayPayload:
        return cls(
            kind=overlay.kind.value,
            title=overlay.title,
            coordinates=_lon_lat(overlay.coordinates),
            inner_boundaries=[_lon_lat(ring) for ring in overlay.inner_boundaries],
            style=_style_payload(overlay.style),
        )

    def to_feature(self) -> dict[str, Any]:
        if self.kind == OverlayKind.POLYGON.value:
            coordinates: list[Any] = [self.coordinates, *self.inner_boundaries]
        else:
            coordinates = self.coordinates
        return {
            "type": "Feature",
            "geometry": {"type": self.kind, "coordinates": coordinates},
            "properties": {
                "name": self.title,
                "style": self.style.model_dump() if self.style is not None else None,
            },
        }


class AnnotationPayload(BaseModel):
    title: str = ""
    subtitle: str = ""
    coordinate: list[float] = Field(default_factory=list)
    style: StylePayload | None = None

    @classmethod
    def from_annotation(cls, annotation: Annotation) -> AnnotationPayload:
        return cls(
            title=annotation.title,
            subtitle=annotation.subtitle,
            coordinate=[annotation.coordinate.longitude, annotation.coordinate.latitude],
            style=_style_payload(annotation.style),
        )

    def to_feature(self) -> dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": self.coordinate},
            "properties": {
                "name": self.title,
                "description": self.subtitle,
                "style": self.style.model_dump() if self.style is not None else None,
            },
        }


class DocumentPayload(BaseModel):
    """Plain-data snapshot of a built document."""

    schema_version: str = SCHEMA_VERSION
    name: str = ""
    is_error: bool = False
    styles: dict[str, StylePayload] = Field(default_factory=dict)
    overlays: list[OverlayPayload] = Field(default_factory=list)
    annotations: list[AnnotationPayload] = Field(default_factory=list)

    @classmethod
    def from_document(cls, document: KmlDocument) -> DocumentPayload:
        return cls(
            name=document.name,
            is_error=document.is_error,
            styles={
                style_id: StylePayload.from_style(style)
                for style_id, style in document.styles.items()
            },
            overlays=[OverlayPayload.from_overlay(o) for o in document.overlays],
            annotations=[AnnotationPayload.from_annotation(a) for a in document.annotations],
        )

    def to_geojson(self) -> dict[str, Any]:
        """Return a GeoJSON FeatureCollection: overlays first, then annotations."""
        return {
            "type": "FeatureCollection",
            "features": [
                *(overlay.to_feature() for overlay in self.overlays),
                *(annotation.to_feature() for annotation in self.annotations),
            ],
        }
