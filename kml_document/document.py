"""KML document assembler.

Builds the complete document model from a generic node tree:

1. **Build**: registry-driven element tree from the root node
2. **Resolve**: style table, StyleMap links, placemark styles
3. **Project**: overlays and annotations (optional)

A ``KmlDocument`` is only returned once all stages have finished; its
collections are read-only afterwards.

Error handling:
- Malformed bytes raise ``KmlParseError`` (or, with ``strict=False``,
  yield an error document).
- An unreadable file yields an error document; ``is_error`` is set.
- A StyleMap referencing an unknown style raises ``StyleResolutionError``.
- Unknown tags, bad coordinate tokens and unparsable numbers degrade
  quietly inside the document.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from kml_document.core.config import DocumentConfig
from kml_document.core.registry import tag_registry
from kml_document.models import Element, Placemark
from kml_document.pipeline import project_annotations, project_overlays, resolve_styles
from kml_document.reader import (
    KmlParseError,
    KmlSourceError,
    error_node,
    find_root,
    read_source,
    read_xml,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from os import PathLike

    from kml_document.core.registry import Factory
    from kml_document.models import Annotation, Overlay, Style
    from kml_document.reader import XmlNode

logger = logging.getLogger("kml_document.document")


class KmlDocument:
    """A fully built and style-resolved KML document.

    Attributes:
        root: The built element tree (the ``<Document>`` element).
        styles: Style id → style, StyleMaps included (read-only).
        placemarks: Every placemark in document order.
        overlays: Projected polygons and line strings.
        annotations: Projected points.
        error: Reason the input could not be obtained, ``""`` otherwise.
    """

    root: Element
    styles: Mapping[str, Style]
    placemarks: tuple[Placemark, ...]
    overlays: tuple[Overlay, ...]
    annotations: tuple[Annotation, ...]
    error: str

    def __init__(
        self,
        root: XmlNode,
        *,
        generate_overlays: bool = True,
        registry: Mapping[str, Factory] | None = None,
    ) -> None:
        """Build the document from the node of its top-level container.

        Args:
            root: The ``<Document>`` node (or an error-marker node).
            generate_overlays: Project overlays and annotations. When
                false only the tree, styles and placemarks are built.
            registry: Tag → factory mapping; defaults to the shared
                registry with the built-in element classes.

        Raises:
            StyleResolutionError: If a StyleMap references an unknown style.
        """
        if registry is None:
            registry = tag_registry

        self.error = root.error
        self.root = Element.from_xml(root, registry)

        placemarks = self.root.find_elements(Placemark)
        styles = resolve_styles(self.root, placemarks)

        overlays: list[Overlay] = []
        annotations: list[Annotation] = []
        if generate_overlays:
            overlays = project_overlays(placemarks)
            annotations = project_annotations(placemarks)

        self.placemarks = tuple(placemarks)
        self.styles = MappingProxyType(styles)
        self.overlays = tuple(overlays)
        self.annotations = tuple(annotations)

        logger.info(
            "Built KML document | name=%s | placemarks=%d | styles=%d | overlays=%d | annotations=%d",
            self.name,
            len(self.placemarks),
            len(self.styles),
            len(self.overlays),
            len(self.annotations),
        )

    # -- construction from bytes and files --------------------------------

    @classmethod
    def from_bytes(
        cls,
        content: bytes,
        *,
        generate_overlays: bool | None = None,
        registry: Mapping[str, Factory] | None = None,
        config: DocumentConfig | None = None,
        strict: bool = True,
    ) -> KmlDocument:
        """Parse KML bytes and build the document.

        Args:
            content: Raw KML bytes.
            generate_overlays: Overrides ``config.generate_overlays``.
            registry: Tag → factory mapping.
            config: Builder configuration (root tag, lxml limits).
            strict: Raise on malformed bytes; when false, return an
                error document (``is_error`` set) instead.

        Raises:
            KmlParseError: If ``strict`` and the bytes are not valid XML.
            StyleResolutionError: If a StyleMap references an unknown style.
        """
        if config is None:
            config = DocumentConfig()
        if generate_overlays is None:
            generate_overlays = config.generate_overlays

        try:
            tree = read_xml(content, huge_tree=config.huge_tree)
        except KmlParseError as exc:
            if strict:
                raise
            logger.warning("Could not parse KML, building error document: %s", exc.message)
            root = error_node(exc.message)
        else:
            root = find_root(tree, config.root_tag)

        return cls(root, generate_overlays=generate_overlays, registry=registry)

    @classmethod
    def from_path(
        cls,
        path: str | PathLike[str],
        *,
        generate_overlays: bool | None = None,
        registry: Mapping[str, Factory] | None = None,
        config: DocumentConfig | None = None,
        strict: bool = True,
    ) -> KmlDocument:
        """Read a KML file and build the document.

        A file that cannot be read yields an error document
        (``is_error`` set) rather than an exception.

        Raises:
            KmlParseError: If ``strict`` and the file is not valid XML.
            StyleResolutionError: If a StyleMap references an unknown style.
        """
        if config is None:
            config = DocumentConfig()
        if generate_overlays is None:
            generate_overlays = config.generate_overlays

        try:
            content = read_source(path)
        except KmlSourceError as exc:
            logger.warning("KML source unavailable | path=%s | error=%s", exc.path, exc.message)
            return cls(error_node(exc.message), generate_overlays=generate_overlays, registry=registry)

        return cls.from_bytes(
            content,
            generate_overlays=generate_overlays,
            registry=registry,
            config=config,
            strict=strict,
        )

    # -- properties --------------------------------------------------------

    @property
    def name(self) -> str:
        return self.root.name

    @property
    def children(self) -> tuple[Element, ...]:
        return tuple(self.root.children)

    @property
    def is_error(self) -> bool:
        """Whether the built tree has no structural children.

        Set for error documents (unreadable or malformed input, missing
        ``<Document>``) and for documents without any supported element.
        """
        return not self.root.children

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} name={self.name!r}"
            f" placemarks={len(self.placemarks)} overlays={len(self.overlays)}"
            f" annotations={len(self.annotations)}>"
        )
