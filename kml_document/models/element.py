"""Element tree — the generic typed node and the recursive builder.

Every KML tag the registry knows becomes an ``Element`` (or subclass).
Construction is a pure fold over the generic input tree:

- a ``<name>`` child becomes the parent's ``name``, not a child node;
- a child whose tag is registered is built by its factory, which in
  turn builds its own children the same way;
- any other child is skipped, so unknown tags never break a parse.

Subclasses add typed fields by overriding :meth:`Element.parse_fields`,
which reads the subclass' own values from the input node. Fields that
depend on the built subtree (a style's poly style, a placemark's
geometry) are filled in ``__post_init__``.

The tree is queried with three traversal helpers that accept a
*selector*: an ``Element`` subclass, a tuple of subclasses, or a
predicate. All three share one pre-order, depth-first walk.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from kml_document.core.constants import NAME_TAG, KmlTag
from kml_document.core.registry import tag_registry

E = TypeVar("E", bound="Element")

if TYPE_CHECKING:
    from kml_document.core.registry import Factory
    from kml_document.reader import XmlNode

    Selector = type[E] | tuple[type[E], ...] | Callable[["Element"], bool]


@dataclass(eq=False)
class Element:
    """A typed node of the built document tree.

    Also the handler of ``<Folder>``: a pure grouping node.

    Attributes:
        name: Text of the node's ``<name>`` child, or ``""``.
        children: Built children in document order.
    """

    name: str = ""
    children: list[Element] = field(default_factory=list, repr=False)

    @classmethod
    def from_xml(cls, node: XmlNode, registry: Mapping[str, Factory]) -> Element:
        """Build this element and its registered descendants from ``node``."""
        name, children = build_children(node, registry)
        return cls(name=name, children=children, **cls.parse_fields(node))

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        """Read the subclass-specific constructor arguments from ``node``."""
        return {}

    # -- traversal --------------------------------------------------------

    def iter_descendants(self) -> Iterator[Element]:
        """Yield every descendant in pre-order, depth-first."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find_element(self, selector: Selector[E]) -> E | None:
        """Return the first descendant matching ``selector``, or ``None``."""
        matches = _matcher(selector)
        for node in self.iter_descendants():
            if matches(node):
                return node  # type: ignore[return-value]
        return None

    def find_elements(self, selector: Selector[E]) -> list[E]:
        """Return every descendant matching ``selector``, in document order."""
        matches = _matcher(selector)
        return [node for node in self.iter_descendants() if matches(node)]  # type: ignore[misc]

    def has_element(self, selector: Selector[E]) -> bool:
        """Tell whether any descendant matches ``selector``."""
        return self.find_element(selector) is not None


def build_children(node: XmlNode, registry: Mapping[str, Factory]) -> tuple[str, list[Element]]:
    """Build the typed children of ``node``.

    Returns the captured ``name`` text and the list of built children.
    Children whose tag has no factory in ``registry`` are skipped.
    """
    name = ""
    children: list[Element] = []
    for child in node.children:
        if child.tag == NAME_TAG:
            name = child.text
            continue
        factory = registry.get(child.tag)
        if factory is None:
            continue
        children.append(factory(child, registry))  # type: ignore[arg-type]
    return name, children


def _matcher(selector: Selector[E]) -> Callable[[Element], bool]:
    if isinstance(selector, type | tuple):
        return lambda node: isinstance(node, selector)
    return selector


tag_registry.add(KmlTag.FOLDER, Element.from_xml)
