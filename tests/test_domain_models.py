"""Tests for domain models to verify they work correctly."""

import pytest

from linetrack.domain import (
    ArcGeometry,
    GridPoint,
    Path,
    Point,
    PointIcon,
    RotationSense,
    SegmentKind,
)


class TestGridPoint:
    """Tests for GridPoint class."""

    def test_grid_point_creation(self) -> None:
        """Test basic grid point creation."""
        p = GridPoint(3, 7)
        assert p.x == 3
        assert p.y == 7
        assert p.to_tuple() == (3, 7)

    def test_grid_point_serialization(self) -> None:
        """Test grid point serialization and deserialization."""
        p1 = GridPoint(12, 24)
        assert GridPoint.from_dict(p1.to_dict()) == p1

    def test_grid_point_immutable(self) -> None:
        """Test that grid point is immutable."""
        p = GridPoint(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5  # type: ignore

    def test_grid_point_hashable(self) -> None:
        """Test grid points work as set members."""
        assert len({GridPoint(1, 2), GridPoint(1, 2), GridPoint(2, 1)}) == 2


class TestPath:
    """Tests for Path class."""

    def test_from_tuples(self) -> None:
        """Test building a path from tuples."""
        path = Path.from_tuples([(0, 0), (3, 0)], path_id="a")
        assert path.points == [GridPoint(0, 0), GridPoint(3, 0)]
        assert path.path_id == "a"
        assert path.icons == {}

    def test_open_path_not_closed(self) -> None:
        """Test an open path."""
        assert not Path.from_tuples([(0, 0), (3, 0), (3, 3)]).is_closed

    def test_closed_path(self) -> None:
        """Test a path returning to its start."""
        assert Path.from_tuples([(0, 0), (3, 0), (3, 3), (0, 0)]).is_closed

    def test_two_identical_points_not_closed(self) -> None:
        """Test that a two point path is never closed."""
        assert not Path.from_tuples([(1, 1), (1, 1)]).is_closed

    def test_distinct_points_drops_consecutive_duplicates(self) -> None:
        """Test duplicate neighbours are removed but revisits are kept."""
        path = Path.from_tuples([(0, 0), (0, 0), (3, 0), (3, 0), (0, 0)])
        assert path.distinct_points() == [GridPoint(0, 0), GridPoint(3, 0), GridPoint(0, 0)]

    def test_path_serialization(self) -> None:
        """Test path serialization keeps icons."""
        p1 = Path.from_tuples([(0, 0), (3, 0)], icons={1: PointIcon.STOP}, path_id="x")
        p2 = Path.from_dict(p1.to_dict())
        assert p2.points == p1.points
        assert p2.icons == {1: PointIcon.STOP}
        assert p2.path_id == "x"


class TestSegmentKind:
    """Tests for SegmentKind enum."""

    def test_tags(self) -> None:
        """Test netlist tags."""
        assert [k.tag for k in SegmentKind] == ["H", "V", "A+", "A-", "B"]

    def test_arc_kind_from_sense(self) -> None:
        """Test arc kind lookup."""
        assert SegmentKind.arc(RotationSense.CLOCKWISE) is SegmentKind.ARC_CW
        assert SegmentKind.arc(RotationSense.COUNTER_CLOCKWISE) is SegmentKind.ARC_CCW
        assert SegmentKind.ARC_CW.is_arc
        assert not SegmentKind.HORIZONTAL.is_arc


class TestRotationSense:
    """Tests for RotationSense enum."""

    def test_opposite(self) -> None:
        """Test sense flipping."""
        assert RotationSense.CLOCKWISE.opposite is RotationSense.COUNTER_CLOCKWISE
        assert RotationSense.COUNTER_CLOCKWISE.opposite is RotationSense.CLOCKWISE

    def test_arc_geometry_flag(self) -> None:
        """Test canvas-style counterclockwise flag."""
        arc = ArcGeometry(Point(0, 0), 1.0, 0.0, 1.0, RotationSense.COUNTER_CLOCKWISE)
        assert arc.counterclockwise
