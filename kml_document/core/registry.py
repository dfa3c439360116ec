"""Tag registry — maps KML tag names to element factories.

The builder never hard-codes which classes exist. It looks every child
tag up in a registry and calls the factory it finds; tags without an
entry are skipped. A factory takes the generic ``XmlNode`` and the
registry in use (so it can build its own children the same way) and
returns an ``Element``.

Element classes register themselves on the shared ``tag_registry``::

    @tag_registry.register(KmlTag.POLYGON)
    @dataclass(eq=False)
    class Polygon(Element):
        ...

Embedding applications extend or replace the table without touching
the builder::

    registry = default_registry()
    registry["Model"] = MyModel.from_xml        # add a tag
    registry["Point"] = MyPoint.from_xml        # override a tag
    doc = KmlDocument.from_bytes(data, registry=registry)

Any ``Mapping[str, Factory]`` is accepted wherever a registry is.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, MutableMapping
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from kml_document.models.element import Element
    from kml_document.reader import XmlNode

logger = logging.getLogger("kml_document.core.registry")

Factory = Callable[["XmlNode", "TagRegistry"], "Element"]
"""Builds a typed element from a generic node, recursing through the registry."""

C = TypeVar("C")


class TagRegistry(MutableMapping[str, Factory]):
    """Mutable mapping of tag name to element factory.

    The same factory may be registered for several tags.
    """

    def __init__(self, factories: dict[str, Factory] | None = None) -> None:
        self._factories: dict[str, Factory] = dict(factories or {})

    # -- mapping protocol -------------------------------------------------

    def __getitem__(self, tag: str) -> Factory:
        return self._factories[tag]

    def __setitem__(self, tag: str, factory: Factory) -> None:
        if not callable(factory):
            raise TypeError(f"Factory for <{tag}> must be callable, got {factory!r}")
        self._factories[str(tag)] = factory

    def __delitem__(self, tag: str) -> None:
        del self._factories[tag]

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({sorted(self._factories)!r})"

    # -- registration -----------------------------------------------------

    def add(self, tag: str, factory: Factory, *, override: bool = False) -> None:
        """Register a factory for a tag.

        Raises:
            ValueError: If the tag is empty, or already registered and
                ``override`` is not set.
        """
        tag = str(tag)
        if not tag:
            msg = "Tag name must be non-empty"
            raise ValueError(msg)
        if tag in self._factories and not override:
            msg = f"Another factory is already registered for the <{tag}> tag"
            raise ValueError(msg)
        self[tag] = factory
        logger.debug("Registered element factory: %s", tag)

    def register(self, tag: str | None = None, *, override: bool = False) -> Callable[[C], C]:
        """Decorator to register an element class as the handler of a tag.

        The class' ``from_xml`` classmethod becomes the factory. When no tag
        is given the class name is used.
        """

        def _dec(element_class: C) -> C:
            self.add(
                tag or element_class.__name__,  # type: ignore[attr-defined]
                element_class.from_xml,  # type: ignore[attr-defined]
                override=override,
            )
            return element_class

        return _dec

    def copy(self) -> TagRegistry:
        """Return an independent registry with the same entries."""
        return self.__class__(self._factories)


#: The shared registry the built-in element classes register at.
tag_registry = TagRegistry()


def default_registry() -> TagRegistry:
    """Return a fresh copy of the built-in registry.

    The element modules are imported lazily so that their registrations
    have run before the copy is taken.
    """
    import kml_document.models  # noqa: F401

    return tag_registry.copy()
