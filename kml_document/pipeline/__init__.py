"""Post-build passes over the element tree.

- resolve_styles: style table, StyleMap linking, placemark style binding
- project_geometry: overlays and annotations for rendering collaborators
"""

from kml_document.pipeline.project_geometry import project_annotations, project_overlays
from kml_document.pipeline.resolve_styles import (
    StyleResolutionError,
    build_style_table,
    resolve_placemark_style,
    resolve_styles,
)

__all__ = [
    "StyleResolutionError",
    "build_style_table",
    "project_annotations",
    "project_overlays",
    "resolve_placemark_style",
    "resolve_styles",
]
