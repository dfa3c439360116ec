"""Shared helper functions for reading KML text values.

KML in the wild is sloppy: booleans written as ``true`` or ``1``,
numbers with stray characters, references with or without ``#``.
These helpers fall back to a default instead of raising, so one bad
field never aborts a document.
"""

from __future__ import annotations

from kml_document.core.constants import REFERENCE_MARKER

_TRUE_VALUES = frozenset({"1", "true"})
_FALSE_VALUES = frozenset({"0", "false"})


def parse_bool(text: str, default: bool) -> bool:
    """Parse a KML boolean (``1``/``0``/``true``/``false``).

    Returns ``default`` for anything else.
    """
    value = text.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def parse_float(text: str, default: float = 0.0) -> float:
    """Parse a decimal number, returning ``default`` if it is unparsable."""
    try:
        return float(text)
    except (TypeError, ValueError):
        return default


def strip_reference_marker(reference: str) -> str:
    """Remove the leading ``#`` from a style reference (``#red`` → ``red``)."""
    reference = reference.strip()
    if reference.startswith(REFERENCE_MARKER):
        return reference[len(REFERENCE_MARKER) :]
    return reference
