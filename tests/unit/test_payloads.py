"""Tests for the pydantic document payloads and GeoJSON export.

Covers:
- Style flattening (colours as ``#rrggbbaa``, StyleMap pairs)
- Overlay and annotation coordinates in ``[lon, lat]`` order
- FeatureCollection ordering (overlays, then annotations)
- JSON round trip through pydantic
"""

from __future__ import annotations

from pathlib import Path

from kml_document import KmlDocument
from kml_document.models.payloads import (
    SCHEMA_VERSION,
    DocumentPayload,
    StylePayload,
)


class TestStylePayload:
    def test_line_style(self, point_kml: Path) -> None:
        doc = KmlDocument.from_path(point_kml)
        payload = StylePayload.from_style(doc.styles["red"])
        assert payload.style_id == "red"
        assert payload.stroke_color == "#ff0000ff"
        assert payload.line_width == 4.0
        assert payload.fill_color is None
        assert payload.pairs == {}

    def test_style_map_pairs(self, style_map_kml: Path) -> None:
        doc = KmlDocument.from_path(style_map_kml)
        payload = StylePayload.from_style(doc.styles["pair"])
        assert payload.pairs == {"normal": "normalState", "highlight": "highlightState"}
        normal = StylePayload.from_style(doc.styles["normalState"])
        assert normal.fill_color == "#00ff007f"

    def test_icon_style(self, nested_folders_kml: Path) -> None:
        doc = KmlDocument.from_path(nested_folders_kml)
        payload = StylePayload.from_style(doc.annotations[0].style)
        assert payload.icon_scale == 1.5
        assert payload.icon_href.endswith("red-circle.png")


class TestDocumentPayload:
    def test_from_document(self, nested_folders_kml: Path) -> None:
        payload = DocumentPayload.from_document(KmlDocument.from_path(nested_folders_kml))
        assert payload.schema_version == SCHEMA_VERSION
        assert payload.name == "Nested folders"
        assert payload.is_error is False
        assert set(payload.styles) == {"route", ""}
        assert len(payload.overlays) == 4
        assert len(payload.annotations) == 1

    def test_geojson_feature_order(self, nested_folders_kml: Path) -> None:
        geojson = DocumentPayload.from_document(
            KmlDocument.from_path(nested_folders_kml)
        ).to_geojson()
        assert geojson["type"] == "FeatureCollection"
        kinds = [f["geometry"]["type"] for f in geojson["features"]]
        assert kinds == ["LineString", "Polygon", "Polygon", "LineString", "Point"]

    def test_geojson_lon_lat(self, nested_folders_kml: Path) -> None:
        features = DocumentPayload.from_document(
            KmlDocument.from_path(nested_folders_kml)
        ).to_geojson()["features"]
        assert features[0]["geometry"]["coordinates"] == [[10.0, 20.0], [11.0, 21.0], [12.0, 22.0]]
        assert features[0]["properties"]["style"]["stroke_color"] == "#0000ffff"
        assert features[-1]["geometry"]["coordinates"] == [7.5, 46.5]
        assert features[-1]["properties"]["description"] == "Highest point"

    def test_polygon_rings(self, style_map_kml: Path) -> None:
        feature = DocumentPayload.from_document(
            KmlDocument.from_path(style_map_kml)
        ).to_geojson()["features"][0]
        outer, inner = feature["geometry"]["coordinates"]
        assert outer[0] == [1.0, 1.0]
        assert inner[0] == [1.2, 1.1]

    def test_error_document(self, tmp_path: Path) -> None:
        payload = DocumentPayload.from_document(KmlDocument.from_path(tmp_path / "x.kml"))
        assert payload.is_error is True
        assert payload.to_geojson()["features"] == []

    def test_json_round_trip(self, style_map_kml: Path) -> None:
        payload = DocumentPayload.from_document(KmlDocument.from_path(style_map_kml))
        restored = DocumentPayload.model_validate_json(payload.model_dump_json())
        assert restored == payload
