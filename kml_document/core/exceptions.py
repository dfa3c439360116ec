"""Unified exception taxonomy.

Provides a shared base exception hierarchy for the document builder.
Every domain exception inherits from ``KmlDocumentError`` and carries
structured context fields so callers (including the asynchronous
errback channel) can report failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``   — malformed input or a corrupt document, never retryable.
- ``PermanentError``    — unrecoverable environment failures (unreadable source).

Only these two categories ever reach the caller. Lenient input handling
(unknown tags, bad coordinate tokens, unparsable numbers) degrades within
the built document instead of raising.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class KmlDocumentError(Exception):
    """Base exception for all document-building errors.

    Attributes:
        message: Human-readable error description.
        stage: Build stage where the error occurred
            (e.g. ``"parse"``, ``"resolve_styles"``).
        code: Machine-readable error code (e.g. ``"KML_PARSE_FAILED"``).
        retryable: Whether repeating the operation could succeed.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(KmlDocumentError):
    """Input or document-model validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(KmlDocumentError):
    """Unrecoverable failure outside the document itself. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
