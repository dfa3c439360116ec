"""RGBA colour decoded from KML hex notation.

KML colours are ``aabbggrr``: alpha first, then blue, green, red. The
short 3, 4 and 6 digit forms are read as ``rgb``, ``rgba`` and
``rrggbb``. Anything else decodes to opaque black.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger("kml_document.models.color")

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


@dataclass(frozen=True, slots=True)
class Color:
    """Colour with channels in the ``0.0``–``1.0`` range."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    @classmethod
    def from_kml_hex(cls, text: str) -> Color:
        """Decode a KML colour string such as ``ff0000ff`` (opaque red)."""
        value = text.strip().removeprefix("#")
        if not _HEX_RE.match(value):
            logger.warning("Invalid KML colour %r, using black", text)
            return BLACK

        hex_value = int(value, 16)
        match len(value):
            case 3:
                return cls(
                    red=((hex_value & 0xF00) >> 8) / 15.0,
                    green=((hex_value & 0x0F0) >> 4) / 15.0,
                    blue=(hex_value & 0x00F) / 15.0,
                )
            case 4:
                return cls(
                    red=((hex_value & 0xF000) >> 12) / 15.0,
                    green=((hex_value & 0x0F00) >> 8) / 15.0,
                    blue=((hex_value & 0x00F0) >> 4) / 15.0,
                    alpha=(hex_value & 0x000F) / 15.0,
                )
            case 6:
                return cls(
                    red=((hex_value & 0xFF0000) >> 16) / 255.0,
                    green=((hex_value & 0x00FF00) >> 8) / 255.0,
                    blue=(hex_value & 0x0000FF) / 255.0,
                )
            case 8:
                return cls(
                    alpha=((hex_value & 0xFF000000) >> 24) / 255.0,
                    blue=((hex_value & 0x00FF0000) >> 16) / 255.0,
                    green=((hex_value & 0x0000FF00) >> 8) / 255.0,
                    red=(hex_value & 0x000000FF) / 255.0,
                )
            case _:
                logger.warning(
                    "KML colour %r must have 3, 4, 6 or 8 hex digits, using black", text
                )
                return BLACK

    @classmethod
    def from_rgba(cls, rgba: tuple[float, float, float, float]) -> Color:
        red, green, blue, alpha = rgba
        return cls(red=red, green=green, blue=blue, alpha=alpha)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)

    def to_hex(self) -> str:
        """Return ``#rrggbbaa`` (CSS channel order, not KML order)."""
        channels = (round(c * 255) for c in self.as_tuple())
        return "#" + "".join(f"{c:02x}" for c in channels)


BLACK = Color()
