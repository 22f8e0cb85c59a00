"""Unit tests for vector primitives."""

import math

import pytest

from linetrack.core.geometry import (
    cross,
    distance,
    heading_degrees,
    is_parallel,
    normalize,
    normalize_degrees,
    rotate_minus_90,
    rotate_plus_90,
    round_half_up,
)
from linetrack.domain import Point


class TestVectorOps:
    """Tests for basic vector operations."""

    def test_distance(self) -> None:
        """Test Euclidean distance."""
        assert distance(Point(0, 0), Point(3, 4)) == 5.0

    def test_normalize(self) -> None:
        """Test unit length after normalization."""
        v = normalize(Point(3, 4))
        assert math.isclose(math.hypot(v.x, v.y), 1.0)
        assert math.isclose(v.x, 0.6)

    def test_normalize_zero_vector(self) -> None:
        """Test zero vector is returned unchanged."""
        assert normalize(Point(0, 0)) == Point(0.0, 0.0)

    def test_cross_sign_matches_board_turns(self) -> None:
        """Test right turns (y down) give a positive cross product."""
        east = Point(1, 0)
        south = Point(0, 1)
        north = Point(0, -1)
        assert cross(east, south) > 0
        assert cross(east, north) < 0

    def test_cross_scenario(self) -> None:
        """Test the worked example from an H into an up-right arc."""
        assert cross(Point(4, 0), Point(2, -2)) == -8

    def test_rotations(self) -> None:
        """Test quarter-turn rotations."""
        assert rotate_plus_90(Point(1, 0)) == Point(-0.0, 1)
        assert rotate_minus_90(Point(1, 0)) == Point(0, -1)

    def test_is_parallel(self) -> None:
        """Test parallel and anti-parallel detection."""
        assert is_parallel(Point(2, 2), Point(4, 4), 1e-9)
        assert is_parallel(Point(2, 2), Point(-1, -1), 1e-9)
        assert not is_parallel(Point(2, 2), Point(2, -2), 1e-9)

    def test_is_parallel_scale_invariant(self) -> None:
        """Test the parallel test ignores coordinate scale."""
        s = 31.25
        assert is_parallel(Point(2 * s, 2 * s), Point(3 * s, 3 * s + 1e-12), 1e-9)


class TestAngles:
    """Tests for angle helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.5, 1), (1.49, 1), (-0.5, 0), (-1.5, -1), (44.999, 45)],
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        """Test rounding halves toward positive infinity."""
        assert round_half_up(value) == expected

    @pytest.mark.parametrize(
        ("angle", "expected"),
        [(0, 0), (180, 180), (-180, 180), (270, -90), (-270, 90), (540, 180)],
    )
    def test_normalize_degrees(self, angle: int, expected: int) -> None:
        """Test normalization into (-180, 180]."""
        assert normalize_degrees(angle) == expected

    @pytest.mark.parametrize(
        ("vector", "expected"),
        [
            (Point(1, 0), 0),
            (Point(0, 1), 90),
            (Point(-1, 0), 180),
            (Point(-1, -0.0), 180),
            (Point(0, -1), -90),
            (Point(2, -2), -45),
            (Point(3, 1), 18),
        ],
    )
    def test_heading_degrees(self, vector: Point, expected: int) -> None:
        """Test headings of common grid directions."""
        assert heading_degrees(vector) == expected
