"""Document builder configuration loaded from environment variables.

All configuration values have defaults that reproduce the behaviour of
a plain ``KmlDocument.from_bytes()`` call, so configuration is optional.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range. This catches bad configuration at startup rather
    than inside a background build.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from kml_document.core.constants import DEFAULT_ROOT_TAG
from kml_document.core.exceptions import KmlDocumentError


class ConfigValidationError(KmlDocumentError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class DocumentConfig:
    """Immutable builder configuration.

    Attributes:
        root_tag: Tag of the element used as the build root.
        generate_overlays: Project overlays and annotations by default.
        huge_tree: Allow lxml to parse very deep or very large trees.
        max_workers: Size of the background build thread pool. A build
            requesting a different size replaces the shared pool.
        line_width_scale: Multiplier applied to ``LineStyle.width`` by
            the render helpers (``0.5`` reproduces point-based surfaces).
    """

    root_tag: str = DEFAULT_ROOT_TAG
    generate_overlays: bool = True
    huge_tree: bool = False
    max_workers: int = 4
    line_width_scale: float = 1.0

    @classmethod
    def from_env(cls) -> DocumentConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range, empty, or
                a boolean variable holds an unrecognised value.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``KML_MAX_WORKERS=abc``).
        """
        config = cls(
            root_tag=os.getenv("KML_ROOT_TAG", DEFAULT_ROOT_TAG),
            generate_overlays=_env_bool("KML_GENERATE_OVERLAYS", "true"),
            huge_tree=_env_bool("KML_HUGE_TREE", "false"),
            max_workers=int(os.getenv("KML_MAX_WORKERS", "4")),
            line_width_scale=float(os.getenv("KML_LINE_WIDTH_SCALE", "1.0")),
        )
        _validate(config)
        return config


_ENV_TRUE = frozenset({"1", "true", "yes", "on"})
_ENV_FALSE = frozenset({"0", "false", "no", "off"})


def _env_bool(key: str, default: str) -> bool:
    raw = os.getenv(key, default)
    value = raw.strip().lower()
    if value in _ENV_TRUE:
        return True
    if value in _ENV_FALSE:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false, 1/0, yes/no, on/off)")


def _validate(config: DocumentConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.root_tag:
        raise ConfigValidationError("KML_ROOT_TAG", config.root_tag, "must not be empty")

    if config.max_workers < 1:
        raise ConfigValidationError("KML_MAX_WORKERS", config.max_workers, "must be >= 1")

    if config.line_width_scale <= 0:
        raise ConfigValidationError(
            "KML_LINE_WIDTH_SCALE",
            config.line_width_scale,
            "must be > 0",
        )
