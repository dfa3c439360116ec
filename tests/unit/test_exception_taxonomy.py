"""Tests for the unified exception taxonomy.

Validates:
- KmlDocumentError hierarchy and structured attributes
- Category classification (validation, permanent)
- ``to_error_dict()`` produces stable payload keys
- All domain exceptions are KmlDocumentError subclasses
"""

from __future__ import annotations

from typing import ClassVar

from kml_document.core.config import ConfigValidationError
from kml_document.core.exceptions import KmlDocumentError, PermanentError, ValidationError
from kml_document.dispatch import KmlBuildError
from kml_document.pipeline import StyleResolutionError
from kml_document.reader import KmlParseError, KmlSourceError


class TestKmlDocumentErrorBase:
    """KmlDocumentError base class behavior."""

    def test_default_attributes(self) -> None:
        err = KmlDocumentError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.retryable is False

    def test_custom_attributes(self) -> None:
        err = KmlDocumentError("fail", stage="parse", code="X", retryable=True)
        assert err.stage == "parse"
        assert err.code == "X"
        assert err.retryable is True
        assert err.category == "transient"

    def test_str_is_message(self) -> None:
        assert str(KmlDocumentError("human-readable error")) == "human-readable error"

    def test_to_error_dict_keys(self) -> None:
        d = KmlDocumentError("x", stage="s", code="C").to_error_dict()
        assert set(d.keys()) == {"category", "code", "stage", "message", "retryable"}
        assert d["message"] == "x"
        assert d["stage"] == "s"
        assert d["code"] == "C"
        assert d["retryable"] is False
        assert d["category"] == "permanent"


class TestCategoryBases:
    """Category base classes set correct defaults."""

    def test_validation_error_not_retryable(self) -> None:
        err = ValidationError("bad input")
        assert err.retryable is False
        assert err.category == "validation"

    def test_permanent_error_not_retryable(self) -> None:
        err = PermanentError("gone")
        assert err.retryable is False
        assert err.category == "permanent"


class TestDomainExceptions:
    """Every domain exception sits in the taxonomy with a stable code."""

    EXPECTED: ClassVar[list[tuple[KmlDocumentError, type, str, str]]] = [
        (KmlParseError("bad"), ValidationError, "parse", "KML_PARSE_FAILED"),
        (
            StyleResolutionError("map", "normal", "missing"),
            ValidationError,
            "resolve_styles",
            "KML_STYLE_REFERENCE_DANGLING",
        ),
        (KmlSourceError("nope", path="/x.kml"), PermanentError, "load", "KML_SOURCE_UNREADABLE"),
        (ConfigValidationError("K", 1, "bad"), KmlDocumentError, "config", "CONFIG_VALIDATION_FAILED"),
        (KmlBuildError("boom"), PermanentError, "build", "KML_BUILD_FAILED"),
    ]

    def test_hierarchy_stage_and_code(self) -> None:
        for err, base, stage, code in self.EXPECTED:
            assert isinstance(err, KmlDocumentError)
            assert isinstance(err, base)
            assert err.stage == stage
            assert err.code == code
            assert err.retryable is False

    def test_style_resolution_error_context(self) -> None:
        err = StyleResolutionError("pair", "normal", "gone")
        assert err.style_map_id == "pair"
        assert err.role == "normal"
        assert err.style_id == "gone"
        assert "'gone'" in err.message

    def test_source_error_path(self) -> None:
        err = KmlSourceError("cannot read", path="/data/a.kml")
        assert err.path == "/data/a.kml"
        assert err.to_error_dict()["category"] == "permanent"
