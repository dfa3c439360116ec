"""Generic tagged node, the input shape of the element builder.

An ``XmlNode`` is what the builder consumes: a tag (namespace removed),
its attributes, its stripped text and its element children in order.
Anything that can produce this shape (lxml, a test fixture, another
reader) can feed the builder.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from kml_document.core.constants import ERROR_TAG


@dataclass(frozen=True, slots=True)
class XmlNode:
    """A single element of the generic input tree.

    Attributes:
        tag: Local tag name (e.g. ``"Placemark"``).
        attributes: Attribute map with local attribute names.
        text: Text content, stripped of surrounding whitespace.
        children: Element children in document order.
        error: Non-empty only on an error-marker node; holds the reason
            the real input could not be obtained.
    """

    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    text: str = ""
    children: tuple[XmlNode, ...] = ()
    error: str = ""

    def __iter__(self) -> Iterator[XmlNode]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    @property
    def is_error(self) -> bool:
        """Whether this node stands in for input that could not be read."""
        return bool(self.error)

    def find(self, tag: str) -> XmlNode | None:
        """Return the first direct child with the given tag."""
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def find_text(self, *path: str) -> str:
        """Return the text at a child path, or ``""`` if any step is missing.

        ``polygon.find_text("outerBoundaryIs", "LinearRing", "coordinates")``
        """
        node: XmlNode | None = self
        for tag in path:
            node = node.find(tag)
            if node is None:
                return ""
        return node.text


def error_node(message: str) -> XmlNode:
    """Build the error-marker node used in place of unreadable input.

    A document built from it has no structural children, so its
    ``is_error`` flag is set.
    """
    return XmlNode(tag=ERROR_TAG, text=message, error=message or "unknown error")
