"""Style resolution — second pass over a built element tree.

Runs once per document, after the tree is built:

1. Every ``Style`` in the tree is entered into the style table under its
   ``style_id``; a later definition replaces an earlier one.
2. Every ``StyleMap`` links each of its role references to the table
   entry of that id, then replaces its own table entry. A reference to
   an id that is not in the table means the document is corrupt and
   raises ``StyleResolutionError``.
3. Every placemark gets its effective style: the table entry of its
   ``style_url``, else the first inline ``Style`` in its subtree, else
   ``None``. A ``StyleMap`` result is replaced by its ``normal`` style.

Running the pass again on an already resolved tree produces the same
bindings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_document.core.exceptions import ValidationError
from kml_document.models.styles import Style, StyleMap

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kml_document.models.element import Element
    from kml_document.models.placemark import Placemark

logger = logging.getLogger("kml_document.pipeline.resolve_styles")


class StyleResolutionError(ValidationError):
    """Raised when a StyleMap references a style id that does not exist.

    Attributes:
        style_map_id: Id of the StyleMap holding the reference.
        role: Role key of the dangling pair.
        style_id: The referenced id that is missing.
    """

    default_stage = "resolve_styles"
    default_code = "KML_STYLE_REFERENCE_DANGLING"

    def __init__(self, style_map_id: str, role: str, style_id: str) -> None:
        self.style_map_id = style_map_id
        self.role = role
        self.style_id = style_id
        super().__init__(
            f"StyleMap {style_map_id!r} role {role!r} references unknown style {style_id!r}"
        )


def build_style_table(root: Element) -> dict[str, Style]:
    """Collect and link every style of the tree into an id → style table.

    Raises:
        StyleResolutionError: If a StyleMap pair references an unknown id.
    """
    styles: dict[str, Style] = {}
    for style in root.find_elements(Style):
        styles[style.style_id] = style

    for style_map in root.find_elements(StyleMap):
        for role, style_id in style_map.pairs.items():
            try:
                target = styles[style_id]
            except KeyError:
                raise StyleResolutionError(style_map.style_id, role, style_id) from None
            style_map.link(role, target)
        styles[style_map.style_id] = style_map

    return styles


def resolve_placemark_style(placemark: Placemark, styles: dict[str, Style]) -> Style | None:
    """Return the effective style of one placemark.

    The result is never a ``StyleMap``.
    """
    style: Style | None = None
    if placemark.style_url:
        style = styles.get(placemark.style_url)
        if style is None:
            logger.debug(
                "Placemark %r references unknown style %r, trying inline style",
                placemark.name,
                placemark.style_url,
            )
    if style is None:
        style = placemark.find_element(Style)
    return _concrete_style(style)


def resolve_styles(root: Element, placemarks: Iterable[Placemark]) -> dict[str, Style]:
    """Build the style table and assign each placemark its effective style.

    Returns the style table.

    Raises:
        StyleResolutionError: If a StyleMap pair references an unknown id.
    """
    styles = build_style_table(root)
    for placemark in placemarks:
        placemark.style = resolve_placemark_style(placemark, styles)
    return styles


def _concrete_style(style: Style | None) -> Style | None:
    """Follow ``normal`` roles until the style is not a StyleMap."""
    seen: set[int] = set()
    while isinstance(style, StyleMap):
        if id(style) in seen:
            logger.warning("StyleMap %r redirects to itself, ignoring style", style.style_id)
            return None
        seen.add(id(style))
        style = style.normal_style
    return style
