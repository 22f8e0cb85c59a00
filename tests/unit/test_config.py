"""Tests for settings and logging utilities."""

import pytest
from pydantic import ValidationError

from linetrack.config import (
    BoardConfig,
    GeometryConfig,
    LinetrackSettings,
    RenderConfig,
    get_default_settings,
)
from linetrack.core.transforms import BoardTransform
from linetrack.domain import GridPoint, Point
from linetrack.exceptions import GeometryError
from linetrack.utils import DesignLogger, configure_logging


class TestBoardConfig:
    """Tests for BoardConfig."""

    def test_defaults(self) -> None:
        """Test the default 48 inch square board."""
        board = BoardConfig()
        assert (board.width, board.height) == (25, 25)
        assert board.point_count == 625
        assert board.size_inches == (48.0, 48.0)

    def test_rectangular(self) -> None:
        """Test an explicit height."""
        board = BoardConfig(grid_points=10, grid_height=5)
        assert board.point_count == 50
        assert board.contains(9, 4)
        assert not board.contains(10, 0)
        assert not board.contains(0, -1)

    def test_limits(self) -> None:
        """Test boards larger than the encoding allows are rejected."""
        with pytest.raises(ValidationError):
            BoardConfig(grid_points=63)


class TestGeometryConfig:
    """Tests for GeometryConfig."""

    def test_defaults(self) -> None:
        """Test default handle ratios."""
        config = get_default_settings().geometry
        assert config.spline_handle_ratio == 0.4
        assert config.line_handle_ratio == pytest.approx(1 / 3)

    def test_tolerance_bounds(self) -> None:
        """Test tolerances must stay small."""
        with pytest.raises(ValidationError):
            GeometryConfig(relative_tolerance=0.1)


class TestRenderConfig:
    """Tests for RenderConfig."""

    @pytest.mark.parametrize(
        ("width", "height", "padding"), [(800, 800, 400), (100, 800, 50), (800, 60, 45)]
    )
    def test_padding_must_leave_room(self, width: float, height: float, padding: float) -> None:
        """Test margins that swallow the canvas are rejected."""
        with pytest.raises(ValidationError, match="leaves no room"):
            RenderConfig(width=width, height=height, padding=padding)

    def test_tight_padding_allowed(self) -> None:
        """Test a margin just short of half the canvas."""
        assert RenderConfig(width=100, height=100, padding=49).padding == 49


class TestBoardTransform:
    """Tests for fitting the board into a canvas."""

    def test_fit_square(self) -> None:
        """Test the default board on the default canvas."""
        render = LinetrackSettings().render
        transform = BoardTransform.fit(BoardConfig(), render.width, render.height, render.padding)
        assert transform.spacing == pytest.approx(30.0)
        assert transform(GridPoint(0, 0)) == Point(40.0, 40.0)
        assert transform.to_grid(Point(371.0, 129.0)) == GridPoint(11, 3)

    def test_fit_centers_short_side(self) -> None:
        """Test a wide canvas centers the board horizontally."""
        transform = BoardTransform.fit(BoardConfig(), 1000, 800, 40)
        origin = transform(GridPoint(0, 0))
        assert origin.x == pytest.approx(140.0)
        assert origin.y == pytest.approx(40.0)

    def test_fit_rejects_full_padding(self) -> None:
        """Test fitting into a canvas with no usable area."""
        with pytest.raises(GeometryError):
            BoardTransform.fit(BoardConfig(), 100, 800, 50)


class TestDesignLogger:
    """Tests for DesignLogger statistics."""

    def test_counts(self) -> None:
        """Test path and skip counts accumulate."""
        design_logger = DesignLogger(configure_logging(quiet=True))
        design_logger.log_fragment_skipped("AB", "off the board")
        design_logger.log_path_synthesized(1, 3, ["H", "A-"], closed=False)
        design_logger.log_path_synthesized(2, 9, ["H", "A+", "V", "A+"], closed=True)
        design_logger.log_track_length(12.5)

        stats = design_logger.stats
        assert stats.skipped == [("AB", "off the board")]
        assert stats.path_count == 2
        assert stats.closed_path_count == 1
        assert stats.segment_count == 6
        assert stats.arc_count == 3
        assert stats.track_length_inches == 12.5
