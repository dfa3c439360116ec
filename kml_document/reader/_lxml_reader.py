"""lxml-based reader — turns KML bytes into an ``XmlNode`` tree.

The reader is deliberately thin: it checks well-formedness, drops
namespaces, comments and processing instructions, and copies tag,
attributes, text and children into immutable nodes. Interpreting
the tags is the element builder's job.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_document.core.constants import DEFAULT_ROOT_TAG
from kml_document.core.exceptions import PermanentError, ValidationError
from kml_document.reader._node import XmlNode, error_node

if TYPE_CHECKING:
    from os import PathLike

    from lxml.etree import _Element

logger = logging.getLogger("kml_document.reader")


# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from __init__)
# ---------------------------------------------------------------------------


class KmlParseError(ValidationError):
    """Raised when KML bytes are not well-formed XML."""

    default_stage = "parse"
    default_code = "KML_PARSE_FAILED"


class KmlSourceError(PermanentError):
    """Raised when the byte source (e.g. a file) cannot be read."""

    default_stage = "load"
    default_code = "KML_SOURCE_UNREADABLE"

    def __init__(self, message: str = "", *, path: str = "", **kwargs: object) -> None:
        self.path = path
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def read_source(path: str | PathLike[str]) -> bytes:
    """Read the raw bytes of a KML file.

    Raises:
        KmlSourceError: If the file does not exist or cannot be read.
    """
    from pathlib import Path

    kml_path = Path(path)
    try:
        return kml_path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read KML file {kml_path}: {exc}"
        raise KmlSourceError(msg, path=str(kml_path)) from exc


def read_xml(content: bytes, *, huge_tree: bool = False) -> XmlNode:
    """Parse KML bytes into a generic node tree.

    Entity resolution and network access are disabled.

    Raises:
        KmlParseError: If the content is empty or not well-formed XML.
    """
    from lxml import etree  # type: ignore[attr-defined]

    if not content.strip():
        msg = "KML content is empty"
        raise KmlParseError(msg)

    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=huge_tree,
        remove_comments=True,
        remove_pis=True,
    )
    try:
        root: _Element = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmlParseError(msg) from exc

    return _to_node(root)


def find_root(tree: XmlNode, root_tag: str = DEFAULT_ROOT_TAG) -> XmlNode:
    """Locate the build root (``<Document>`` by default) in a parsed tree.

    The root itself qualifies, otherwise its direct children are searched.
    A missing root yields an error-marker node rather than an exception.
    """
    if tree.tag == root_tag:
        return tree
    node = tree.find(root_tag)
    if node is None:
        logger.warning("No <%s> element under <%s>", root_tag, tree.tag)
        return error_node(f"No <{root_tag}> element under <{tree.tag}>")
    return node


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _local_name(name: str) -> str:
    """Strip a ``{namespace}`` prefix from a tag or attribute name."""
    if name.startswith("{"):
        return name[name.index("}") + 1 :]
    return name


def _to_node(element: _Element) -> XmlNode:
    children = tuple(
        _to_node(child)
        for child in element
        # Entities and other non-element nodes have a non-string tag.
        if isinstance(child.tag, str)
    )
    return XmlNode(
        tag=_local_name(element.tag),
        attributes={_local_name(key): value for key, value in element.attrib.items()},
        text=(element.text or "").strip(),
        children=children,
    )
