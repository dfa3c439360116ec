"""Shared pytest fixtures for the KML document test suite."""

from collections.abc import Callable
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"

KML_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<kml xmlns="http://www.opengis.net/kml/2.2"><Document>BODY</Document></kml>'
)


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


@pytest.fixture()
def kml_bytes() -> Callable[[str], bytes]:
    """Return a helper wrapping a KML fragment in ``<kml><Document>``."""

    def _wrap(body: str) -> bytes:
        return KML_TEMPLATE.replace("BODY", body).encode("utf-8")

    return _wrap


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def point_kml(data_dir: Path) -> Path:
    """Path to a single point placemark with a red LineStyle."""
    return data_dir / "01_point_red_style.kml"


@pytest.fixture()
def polygon_kml(data_dir: Path) -> Path:
    """Path to a single polygon placemark without any style."""
    return data_dir / "02_polygon_no_style.kml"


@pytest.fixture()
def style_map_kml(data_dir: Path) -> Path:
    """Path to a polygon (with hole) styled through a normal/highlight StyleMap."""
    return data_dir / "03_style_map.kml"


@pytest.fixture()
def nested_folders_kml(data_dir: Path) -> Path:
    """Path to nested Folders, a MultiGeometry and an inline-styled point."""
    return data_dir / "04_nested_folders.kml"


# ---------------------------------------------------------------------------
# Edge-case KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml_kml(edge_cases_dir: Path) -> Path:
    """Path to a file that is not valid XML."""
    return edge_cases_dir / "11_malformed_not_xml.kml"


@pytest.fixture()
def dangling_style_map_kml(edge_cases_dir: Path) -> Path:
    """Path to a StyleMap referencing a style id that does not exist."""
    return edge_cases_dir / "12_dangling_style_map.kml"


@pytest.fixture()
def no_document_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML without a <Document> container."""
    return edge_cases_dir / "13_no_document.kml"


@pytest.fixture()
def unknown_tags_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML full of unsupported tags and a bad coordinate token."""
    return edge_cases_dir / "14_unknown_tags.kml"
