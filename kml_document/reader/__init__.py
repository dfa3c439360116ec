"""KML reader — bytes to generic node tree.

The reading pipeline is split into focused parts:
- **_node**: the immutable ``XmlNode`` input shape and the error marker
- **_lxml_reader**: lxml-backed parsing, root lookup and file access

Everything downstream (the element builder, the style resolver) works
on ``XmlNode`` only and never sees lxml objects.
"""

from __future__ import annotations

from kml_document.reader._lxml_reader import (
    KmlParseError,
    KmlSourceError,
    find_root,
    read_source,
    read_xml,
)
from kml_document.reader._node import XmlNode, error_node

__all__ = [
    "KmlParseError",
    "KmlSourceError",
    "XmlNode",
    "error_node",
    "find_root",
    "read_source",
    "read_xml",
]
