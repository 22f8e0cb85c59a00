"""Unit tests for the design URL encoding."""

import logging

import pytest

from linetrack.config import BoardConfig
from linetrack.domain import GridPoint, Path, PointIcon
from linetrack.exceptions import DesignDecodeError, DesignEncodeError
from linetrack.io import decode_design, encode_design, extract_design
from linetrack.io.design import decode_point, encode_point


@pytest.fixture
def skipped() -> list[DesignDecodeError]:
    """Collector for skipped fragments."""
    return []


class TestPoints:
    """Tests for single point encoding."""

    @pytest.mark.parametrize(
        ("point", "pair"),
        [((0, 0), "00"), ((5, 5), "26"), ((9, 5), "2A"), ((11, 3), "1O"), ((24, 24), "A4")],
    )
    def test_encode_point(self, point: tuple[int, int], pair: str) -> None:
        """Test pairs on the default 25x25 board."""
        assert encode_point(GridPoint(*point), BoardConfig()) == pair
        assert decode_point(pair, BoardConfig()) == GridPoint(*point)

    def test_non_square_board(self) -> None:
        """Test the index uses the board width."""
        board = BoardConfig(grid_points=10, grid_height=5)
        assert encode_point(GridPoint(9, 4), board) == "0n"
        assert decode_point("0n", board) == GridPoint(9, 4)
        with pytest.raises(DesignDecodeError):
            decode_point("0o", board)

    def test_off_board_encode(self) -> None:
        """Test points off the board cannot be encoded."""
        with pytest.raises(DesignEncodeError):
            encode_point(GridPoint(25, 0), BoardConfig())

    def test_invalid_character(self) -> None:
        """Test characters outside base-62 are rejected."""
        with pytest.raises(DesignDecodeError, match="invalid base-62"):
            decode_point("-5", BoardConfig())


class TestEncodeDesign:
    """Tests for encode_design."""

    def test_single_path(self) -> None:
        """Test the line-then-arc path."""
        path = Path.from_tuples([(5, 5), (9, 5), (11, 3)])
        assert encode_design([path]) == "262A1O"

    def test_paths_comma_separated(self) -> None:
        """Test several paths."""
        paths = [
            Path.from_tuples([(0, 0), (4, 0), (6, 2), (8, 4), (12, 4)]),
            Path.from_tuples([(0, 2), (2, 0), (6, 0)]),
        ]
        assert encode_design(paths) == "00040u1k1o,0o0206"

    def test_icons(self) -> None:
        """Test the icon suffix is sorted by point index."""
        path = Path.from_tuples(
            [(0, 0), (5, 0), (9, 0)],
            icons={2: PointIcon.STOP, 0: PointIcon.PLAY},
        )
        assert encode_design([path]) == "000509!0P2S"

    def test_icon_index_out_of_range(self) -> None:
        """Test icons must sit on a point of the path."""
        path = Path.from_tuples([(0, 0), (5, 0)], icons={4: PointIcon.CAUTION})
        with pytest.raises(DesignEncodeError):
            encode_design([path])


class TestDecodeDesign:
    """Tests for decode_design."""

    def test_single_path(self) -> None:
        """Test decoding the line-then-arc path."""
        (path,) = decode_design("262A1O")
        assert [p.to_tuple() for p in path.points] == [(5, 5), (9, 5), (11, 3)]
        assert path.icons == {}

    def test_reversing_path(self) -> None:
        """Test a path that doubles back decodes as written."""
        encoded = encode_design([Path.from_tuples([(0, 0), (3, 0), (0, 0)])])
        assert encoded == "000300"
        (path,) = decode_design(encoded)
        assert [p.to_tuple() for p in path.points] == [(0, 0), (3, 0), (0, 0)]

    def test_icon_suffix(self) -> None:
        """Test icons decode onto their points."""
        (path,) = decode_design("0005!1P")
        assert [p.to_tuple() for p in path.points] == [(0, 0), (5, 0)]
        assert path.icons == {1: PointIcon.PLAY}
        assert encode_design([path]) == "0005!1P"

    def test_off_board_path_skipped(self, skipped: list[DesignDecodeError]) -> None:
        """Test a path with no valid points is skipped without raising."""
        assert decode_design("AB!1P", on_skip=skipped.append) == []
        assert skipped
        assert skipped[0].fragment == "AB"

    def test_bad_pair_skipped(self, skipped: list[DesignDecodeError]) -> None:
        """Test a broken pair is dropped and the rest of the path kept."""
        (path,) = decode_design("00-505", on_skip=skipped.append)
        assert [p.to_tuple() for p in path.points] == [(0, 0), (5, 0)]
        assert len(skipped) == 1

    def test_icon_positions_follow_kept_points(self, skipped: list[DesignDecodeError]) -> None:
        """Test icon indices refer to the encoded positions."""
        (path,) = decode_design("00AB05!2S", on_skip=skipped.append)
        assert path.icons == {1: PointIcon.STOP}

    def test_icon_on_dropped_point(self, skipped: list[DesignDecodeError]) -> None:
        """Test an icon on a skipped point is skipped too."""
        (path,) = decode_design("00AB05!1S", on_skip=skipped.append)
        assert path.icons == {}
        assert len(skipped) == 2

    def test_unknown_icon(self, skipped: list[DesignDecodeError]) -> None:
        """Test unknown icon letters are skipped."""
        (path,) = decode_design("0005!1Z", on_skip=skipped.append)
        assert path.icons == {}
        assert "unknown icon" in skipped[0].reason

    def test_odd_length_path(self, skipped: list[DesignDecodeError]) -> None:
        """Test an odd-length fragment drops only that path."""
        paths = decode_design("0005,000,0006", on_skip=skipped.append)
        assert len(paths) == 2
        assert skipped[0].fragment == "000"

    def test_single_point_path_dropped(self) -> None:
        """Test paths need two points."""
        assert decode_design("05") == []

    @pytest.mark.parametrize("encoded", ["", ",", ",,"])
    def test_empty(self, encoded: str) -> None:
        """Test empty designs decode to no paths."""
        assert decode_design(encoded) == []

    def test_skip_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test skipped fragments are logged as warnings."""
        with caplog.at_level(logging.WARNING, logger="linetrack.io.design"):
            decode_design("AB")
        assert "Skipping design fragment" in caplog.text


class TestExtractDesign:
    """Tests for extract_design."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("https://example.org/track?g=262A1O", "262A1O"),
            ("https://example.org/?a=1&g=262A1O&b=2", "262A1O"),
            ("?g=262A1O#top", "262A1O"),
            ("g=262A1O", "262A1O"),
            ("  262A1O\n", "262A1O"),
            ("https://example.org/?a=1", None),
            ("https://example.org/?flag=1", None),
            ("https://example.org/?tag=5&g=0005", "0005"),
            ("lang=en", None),
        ],
    )
    def test_extract(self, text: str, expected: str | None) -> None:
        """Test the accepted input forms."""
        assert extract_design(text) == expected
