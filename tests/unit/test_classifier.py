"""Unit tests for segment classification."""

import pytest

from linetrack.core.classifier import SegmentShape, classify_segment
from linetrack.core.transforms import BoardTransform
from linetrack.domain import GridPoint, Point


class TestClassifySegment:
    """Tests for classify_segment."""

    @pytest.mark.parametrize(
        ("p0", "p1", "expected"),
        [
            ((5, 5), (9, 5), SegmentShape.HORIZONTAL),
            ((9, 5), (5, 5), SegmentShape.HORIZONTAL),
            ((3, 2), (3, 7), SegmentShape.VERTICAL),
            ((3, 7), (3, 2), SegmentShape.VERTICAL),
            ((9, 5), (11, 3), SegmentShape.ARC),
            ((0, 0), (3, 3), SegmentShape.ARC),
            ((4, 0), (2, 2), SegmentShape.ARC),
            ((0, 0), (3, 1), SegmentShape.SPLINE),
            ((0, 0), (2, 3), SegmentShape.SPLINE),
        ],
    )
    def test_grid_steps(
        self, p0: tuple[int, int], p1: tuple[int, int], expected: SegmentShape
    ) -> None:
        """Test classification of integer grid steps."""
        assert classify_segment(Point(*p0), Point(*p1)) is expected

    def test_zero_length(self) -> None:
        """Test a zero-length step has no shape."""
        assert classify_segment(Point(4, 4), Point(4, 4)) is None

    def test_unit_diagonal_is_arc(self) -> None:
        """Test the smallest diagonal is still an arc."""
        assert classify_segment(Point(0, 0), Point(1, 1)) is SegmentShape.ARC

    def test_render_noise_tolerated(self) -> None:
        """Test floating point noise does not turn an arc into a spline."""
        p0 = Point(40.0, 40.0)
        p1 = Point(40.0 + 62.66666666666667, 40.0 - 62.666666666666664)
        assert classify_segment(p0, p1) is SegmentShape.ARC

    def test_near_diagonal_is_spline(self) -> None:
        """Test a visibly off-diagonal step stays a spline."""
        assert classify_segment(Point(0, 0), Point(100, 99)) is SegmentShape.SPLINE

    @pytest.mark.parametrize("spacing", [1.0, 7.5, 31.333333333333332, 1000.0])
    def test_scale_invariant(self, spacing: float) -> None:
        """Test classification agrees in grid and render space."""
        transform = BoardTransform(origin=Point(13.7, 41.2), spacing=spacing)
        steps = [((5, 5), (9, 5)), ((3, 2), (3, 7)), ((9, 5), (11, 3)), ((0, 0), (3, 1))]
        for a, b in steps:
            grid = classify_segment(Point(*a), Point(*b))
            render = classify_segment(transform(GridPoint(*a)), transform(GridPoint(*b)))
            assert grid is render

    def test_fixed_tangent_shapes(self) -> None:
        """Test which shapes carry a fixed tangent."""
        assert SegmentShape.HORIZONTAL.has_fixed_tangent
        assert SegmentShape.ARC.has_fixed_tangent
        assert not SegmentShape.SPLINE.has_fixed_tangent
