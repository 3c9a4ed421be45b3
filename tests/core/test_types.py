"""Tests for square helpers."""

import pytest

from pgnreplay.core.types import (
    A1, A8, E4, E8, H1, H8,
    SCAN_ORDER,
    coordinates_to_square,
    parse_square,
    square_name,
    square_to_coordinates,
)


class TestSquareNames:
    def test_roundtrip(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    def test_known_squares(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"
        assert parse_square("e4") == E4

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E4", "e44"])
    def test_invalid_name_raises(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square"):
            parse_square(name)


class TestCoordinates:
    def test_row_zero_is_rank_eight(self) -> None:
        assert square_to_coordinates(A8) == (0, 0)
        assert square_to_coordinates(H1) == (7, 7)
        assert square_to_coordinates(E8) == (0, 4)

    def test_inverse(self) -> None:
        for sq in range(64):
            assert coordinates_to_square(*square_to_coordinates(sq)) == sq

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError):
            coordinates_to_square(8, 0)


class TestScanOrder:
    def test_rank_eight_to_rank_one(self) -> None:
        assert len(SCAN_ORDER) == 64
        assert len(set(SCAN_ORDER)) == 64
        assert SCAN_ORDER[0] == A8
        assert SCAN_ORDER[7] == H8
        assert SCAN_ORDER[-8] == A1
        assert SCAN_ORDER[-1] == H1
