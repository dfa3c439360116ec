"""Geometry projection — placemarks to overlays and annotations.

Every polygon and line string anywhere under a placemark becomes an
overlay (polygons first, then line strings, each in document order).
A placemark whose geometry slot holds a point becomes an annotation.
Both carry the placemark's already resolved style.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kml_document.models.geometry import LineString, Polygon
from kml_document.models.projection import Annotation, Overlay, OverlayKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kml_document.models.placemark import Placemark


def project_overlays(placemarks: Iterable[Placemark]) -> list[Overlay]:
    """Project every polygon and line string of each placemark."""
    overlays: list[Overlay] = []
    for placemark in placemarks:
        for polygon in placemark.find_elements(Polygon):
            overlays.append(
                Overlay(
                    kind=OverlayKind.POLYGON,
                    coordinates=tuple(polygon.outer_boundary),
                    inner_boundaries=tuple(tuple(ring) for ring in polygon.inner_boundaries),
                    style=placemark.style,
                    title=placemark.name,
                    tessellate=polygon.tessellate,
                )
            )
        for line in placemark.find_elements(LineString):
            overlays.append(
                Overlay(
                    kind=OverlayKind.LINE_STRING,
                    coordinates=tuple(line.coordinates),
                    style=placemark.style,
                    title=placemark.name,
                    tessellate=line.tessellate,
                )
            )
    return overlays


def project_annotations(placemarks: Iterable[Placemark]) -> list[Annotation]:
    """Project the point of each point placemark."""
    return [
        Annotation(
            coordinate=placemark.point.coordinate,
            title=placemark.name,
            subtitle=placemark.description,
            style=placemark.style,
        )
        for placemark in placemarks
        if placemark.point is not None
    ]
