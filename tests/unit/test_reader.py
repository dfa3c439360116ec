"""Tests for the lxml reader and the generic node shape.

Covers:
- Namespace, comment and processing-instruction removal
- Attribute and text capture
- Root lookup and the error-marker node
- File access failures
"""

from __future__ import annotations

from pathlib import Path

import pytest

from kml_document.reader import (
    KmlParseError,
    KmlSourceError,
    XmlNode,
    error_node,
    find_root,
    read_source,
    read_xml,
)


class TestReadXml:
    """Bytes → XmlNode conversion."""

    def test_namespaces_stripped(self, kml_bytes) -> None:
        tree = read_xml(kml_bytes("<Placemark/>"))
        assert tree.tag == "kml"
        assert tree.children[0].tag == "Document"
        assert tree.children[0].children[0].tag == "Placemark"

    def test_prefixed_tags_use_local_name(self, unknown_tags_kml: Path) -> None:
        tree = read_xml(unknown_tags_kml.read_bytes())
        document = find_root(tree)
        assert [child.tag for child in document] == [
            "open",
            "Tour",
            "ExtendedData",
            "Placemark",
        ]

    def test_comments_removed(self, kml_bytes) -> None:
        tree = read_xml(kml_bytes("<!-- hidden --><?pi data?><Folder/>"))
        assert [child.tag for child in find_root(tree)] == ["Folder"]

    def test_attributes_and_stripped_text(self, kml_bytes) -> None:
        tree = read_xml(kml_bytes('<Style id="red"><name>\n  Red  \n</name></Style>'))
        style = find_root(tree).find("Style")
        assert style is not None
        assert style.attributes == {"id": "red"}
        assert style.find_text("name") == "Red"

    def test_empty_content_rejected(self) -> None:
        with pytest.raises(KmlParseError, match="empty"):
            read_xml(b"  \n")

    def test_malformed_content_rejected(self, not_xml_kml: Path) -> None:
        with pytest.raises(KmlParseError, match="Not valid XML") as exc_info:
            read_xml(not_xml_kml.read_bytes())
        assert exc_info.value.stage == "parse"

    def test_unclosed_tag_rejected(self) -> None:
        with pytest.raises(KmlParseError):
            read_xml(b"<kml><Document></kml>")


class TestFindRoot:
    def test_child_document(self, kml_bytes) -> None:
        root = find_root(read_xml(kml_bytes("")))
        assert root.tag == "Document"
        assert not root.is_error

    def test_tree_itself_matches(self) -> None:
        tree = XmlNode(tag="Document")
        assert find_root(tree) is tree

    def test_custom_root_tag(self, no_document_kml: Path) -> None:
        tree = read_xml(no_document_kml.read_bytes())
        assert find_root(tree, "Placemark").find_text("name") == "Orphan"

    def test_missing_root_yields_error_node(self, no_document_kml: Path) -> None:
        root = find_root(read_xml(no_document_kml.read_bytes()))
        assert root.is_error
        assert "Document" in root.error
        assert len(root) == 0


class TestXmlNode:
    def test_find_text_path(self) -> None:
        node = XmlNode(
            tag="outerBoundaryIs",
            children=(
                XmlNode(
                    tag="LinearRing",
                    children=(XmlNode(tag="coordinates", text="1,2"),),
                ),
            ),
        )
        assert node.find_text("LinearRing", "coordinates") == "1,2"
        assert node.find_text("LinearRing", "missing") == ""
        assert node.find_text() == ""

    def test_find_returns_first(self) -> None:
        first = XmlNode(tag="Pair", text="a")
        node = XmlNode(tag="StyleMap", children=(first, XmlNode(tag="Pair", text="b")))
        assert node.find("Pair") is first
        assert node.find("Nope") is None

    def test_error_node(self) -> None:
        node = error_node("disk on fire")
        assert node.is_error
        assert node.error == "disk on fire"
        assert node.children == ()
        assert error_node("").error == "unknown error"


class TestReadSource:
    def test_reads_bytes(self, point_kml: Path) -> None:
        assert read_source(point_kml).startswith(b"<?xml")

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.kml"
        with pytest.raises(KmlSourceError) as exc_info:
            read_source(missing)
        assert exc_info.value.path == str(missing)
        assert exc_info.value.category == "permanent"
