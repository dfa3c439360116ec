"""Tests for the KML coordinate codec.

Covers:
- Ordered decoding of ``lon,lat[,alt]`` tuples into (lat, lon) pairs
- Skipping of tokens with fewer than two fields
- Zero fallback for unparsable numbers
- Single-coordinate decoding
"""

from __future__ import annotations

from kml_document.models.coordinate import (
    ORIGIN,
    Coordinate,
    parse_coordinate,
    parse_coordinates,
)


class TestParseCoordinates:
    """Multi-tuple decoding."""

    def test_order_preserved_altitude_ignored(self) -> None:
        result = parse_coordinates("-122.1,37.4,0 -122.2,37.5,0")
        assert result == [(37.4, -122.1), (37.5, -122.2)]

    def test_malformed_token_skipped(self) -> None:
        result = parse_coordinates("badtoken -122.1,37.4")
        assert result == [(37.4, -122.1)]

    def test_returns_named_coordinates(self) -> None:
        (coord,) = parse_coordinates("5.5,52.1")
        assert isinstance(coord, Coordinate)
        assert coord.latitude == 52.1
        assert coord.longitude == 5.5
        assert coord.lon_lat == (5.5, 52.1)

    def test_newlines_and_tabs_separate_tuples(self) -> None:
        text = """
            1,2,0
        \t3,4,0
            5,6
        """
        assert parse_coordinates(text) == [(2.0, 1.0), (4.0, 3.0), (6.0, 5.0)]

    def test_unparsable_numbers_become_zero(self) -> None:
        assert parse_coordinates("abc,37.4 -122.1,xyz") == [(37.4, 0.0), (0.0, -122.1)]

    def test_empty_text(self) -> None:
        assert parse_coordinates("") == []
        assert parse_coordinates("   \n ") == []

    def test_extra_fields_ignored(self) -> None:
        assert parse_coordinates("1,2,3,4,5") == [(2.0, 1.0)]


class TestParseCoordinate:
    """Single-position decoding."""

    def test_with_altitude(self) -> None:
        assert parse_coordinate("-122.0822035425683,37.42228990140251,0") == (
            37.42228990140251,
            -122.0822035425683,
        )

    def test_surrounding_whitespace(self) -> None:
        assert parse_coordinate("\n  1.5,2.5\n") == (2.5, 1.5)

    def test_no_usable_tuple_returns_origin(self) -> None:
        assert parse_coordinate("") == ORIGIN
        assert parse_coordinate("42") == ORIGIN
        assert ORIGIN == (0.0, 0.0)
