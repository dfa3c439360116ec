"""Style elements: ``Style``, ``StyleMap`` and the colour style groups.

A ``Style`` bundles up to one each of ``PolyStyle``, ``LineStyle``,
``IconStyle`` and ``BalloonStyle`` found anywhere in its subtree. A
``StyleMap`` is a ``Style`` that points at other styles by role
(``normal``/``highlight``); the resolver links those references once
every style in the document is known.

Field parsing is lenient: a boolean or number that cannot be read keeps
its default, an invalid colour becomes black.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from kml_document.core.constants import HIGHLIGHT_ROLE, NORMAL_ROLE, KmlTag
from kml_document.core.registry import tag_registry
from kml_document.models.color import BLACK, Color
from kml_document.models.element import Element
from kml_document.utils.helpers import parse_bool, parse_float, strip_reference_marker

if TYPE_CHECKING:
    from kml_document.reader import XmlNode

logger = logging.getLogger("kml_document.models.styles")


class ColorMode(Enum):
    NORMAL = "normal"
    RANDOM = "random"


# ---------------------------------------------------------------------------
# Colour style groups
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class ColorStyleGroup(Element):
    """Base of the style groups that carry a ``<color>``."""

    color: Color = BLACK
    color_mode: ColorMode = ColorMode.NORMAL

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        fields = super().parse_fields(node)
        for child in node.children:
            match child.tag:
                case "color":
                    fields["color"] = Color.from_kml_hex(child.text)
                case "colorMode":
                    fields["color_mode"] = (
                        ColorMode.RANDOM if child.text == "random" else ColorMode.NORMAL
                    )
        return fields


@tag_registry.register(KmlTag.POLY_STYLE)
@dataclass(eq=False)
class PolyStyle(ColorStyleGroup):
    """Fill colour and the fill/outline switches of polygons."""

    fill: bool = True
    outline: bool = True

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        fields = super().parse_fields(node)
        for child in node.children:
            match child.tag:
                case "fill":
                    fields["fill"] = parse_bool(child.text, True)
                case "outline":
                    fields["outline"] = parse_bool(child.text, True)
        return fields


@tag_registry.register(KmlTag.LINE_STYLE)
@dataclass(eq=False)
class LineStyle(ColorStyleGroup):
    """Stroke colour and width of lines and polygon outlines."""

    width: float = 1.0

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        fields = super().parse_fields(node)
        child = node.find("width")
        if child is not None:
            fields["width"] = parse_float(child.text, 1.0)
        return fields


@tag_registry.register(KmlTag.ICON)
@dataclass(eq=False)
class Icon(Element):
    href: str = ""

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        return {"href": node.find_text("href")}


@tag_registry.register(KmlTag.ICON_STYLE)
@dataclass(eq=False)
class IconStyle(ColorStyleGroup):
    """Point icon: image, scale and heading."""

    scale: float = 1.0
    heading: float = 0.0
    icon: Icon | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.icon = self.find_element(Icon)

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        fields = super().parse_fields(node)
        for child in node.children:
            match child.tag:
                case "scale":
                    fields["scale"] = parse_float(child.text, 1.0)
                case "heading":
                    fields["heading"] = parse_float(child.text, 0.0)
        return fields


@tag_registry.register(KmlTag.BALLOON_STYLE)
@dataclass(eq=False)
class BalloonStyle(ColorStyleGroup):
    """Text and colours of the pop-up balloon."""

    bg_color: Color = BLACK
    text_color: Color = BLACK
    text: str = ""

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        fields = super().parse_fields(node)
        for child in node.children:
            match child.tag:
                case "bgColor":
                    fields["bg_color"] = Color.from_kml_hex(child.text)
                case "textColor":
                    fields["text_color"] = Color.from_kml_hex(child.text)
                case "text":
                    fields["text"] = child.text
        return fields


# ---------------------------------------------------------------------------
# Style and StyleMap
# ---------------------------------------------------------------------------


@tag_registry.register(KmlTag.STYLE)
@dataclass(eq=False)
class Style(Element):
    """A named bundle of style groups.

    Attributes:
        style_id: Value of the ``id`` attribute (``""`` for inline styles).
        poly_style, line_style, icon_style, balloon_style: The first
            group of each kind found anywhere in the style's subtree.
    """

    style_id: str = ""
    poly_style: PolyStyle | None = field(default=None, init=False, repr=False)
    line_style: LineStyle | None = field(default=None, init=False, repr=False)
    icon_style: IconStyle | None = field(default=None, init=False, repr=False)
    balloon_style: BalloonStyle | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.poly_style = self.find_element(PolyStyle)
        self.line_style = self.find_element(LineStyle)
        self.icon_style = self.find_element(IconStyle)
        self.balloon_style = self.find_element(BalloonStyle)

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        return {"style_id": node.attributes.get("id", "")}


@tag_registry.register(KmlTag.STYLE_MAP)
@dataclass(eq=False)
class StyleMap(Style):
    """A style that redirects to other styles by role.

    Attributes:
        pairs: Role key → referenced style id (``#`` stripped), as written.
        resolved: Role key → linked ``Style``; filled by the resolver.
    """

    pairs: dict[str, str] = field(default_factory=dict)
    resolved: dict[str, Style] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def parse_fields(cls, node: XmlNode) -> dict[str, Any]:
        fields = super().parse_fields(node)
        pairs: dict[str, str] = {}
        for pair in node.children:
            if pair.tag != "Pair":
                continue
            key = pair.find_text("key")
            style_url = strip_reference_marker(pair.find_text("styleUrl"))
            if not style_url:
                logger.debug("StyleMap %r: pair %r has no styleUrl", fields["style_id"], key)
                continue
            pairs[key] = style_url
        fields["pairs"] = pairs
        return fields

    @property
    def normal_style(self) -> Style | None:
        """The style rendered by default."""
        return self.resolved.get(NORMAL_ROLE)

    @property
    def highlight_style(self) -> Style | None:
        return self.resolved.get(HIGHLIGHT_ROLE)

    def link(self, role: str, style: Style) -> None:
        """Record the style a role resolves to."""
        self.resolved[role] = style
