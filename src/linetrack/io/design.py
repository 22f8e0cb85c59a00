"""Design encoding for sharing track layouts in a URL.

A design is a comma separated list of paths. Each path is a run of
two-character base-62 pairs, one per point, encoding ``y * width + x``.
A path may end with an icon suffix: ``!`` followed by two-character tags,
a base-62 point index and an icon letter.

    ?g=262A1O,5a5e!0P1S

Decoding is best effort. A broken fragment is skipped and reported; the
rest of the design still decodes.
"""

import logging
from collections.abc import Callable
from urllib.parse import parse_qs

from linetrack.config import BoardConfig
from linetrack.domain import GridPoint, Path, PointIcon
from linetrack.exceptions import DesignDecodeError, DesignEncodeError

logger = logging.getLogger(__name__)

BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
ICON_MARKER = "!"
PATH_SEPARATOR = ","

_DIGITS = {ch: value for value, ch in enumerate(BASE62)}

SkipCallback = Callable[[DesignDecodeError], None]


def _digit(ch: str, fragment: str) -> int:
    try:
        return _DIGITS[ch]
    except KeyError:
        raise DesignDecodeError(fragment, f"invalid base-62 character {ch!r}") from None


def encode_point(point: GridPoint, board: BoardConfig) -> str:
    """Encode one grid point as a base-62 pair.

    Raises:
        DesignEncodeError: If the point is off the board
    """
    if not board.contains(point.x, point.y):
        raise DesignEncodeError(
            point.to_tuple(), f"outside the {board.width}x{board.height} board"
        )
    index = point.y * board.width + point.x
    return BASE62[index // 62] + BASE62[index % 62]


def decode_point(pair: str, board: BoardConfig) -> GridPoint:
    """Decode a base-62 pair into a grid point.

    Raises:
        DesignDecodeError: If the pair is malformed or off the board
    """
    if len(pair) != 2:
        raise DesignDecodeError(pair, "point pairs are two characters")
    index = _digit(pair[0], pair) * 62 + _digit(pair[1], pair)
    if index >= board.point_count:
        raise DesignDecodeError(pair, f"index {index} is off the board")
    return GridPoint(index % board.width, index // board.width)


def encode_path(path: Path, board: BoardConfig) -> str:
    """Encode one path, including its icon suffix when it has icons.

    Raises:
        DesignEncodeError: If a point is off the board or an icon index
            cannot be written as one base-62 digit
    """
    encoded = "".join(encode_point(p, board) for p in path.points)
    if not path.icons:
        return encoded

    tags: list[str] = []
    for index in sorted(path.icons):
        if not 0 <= index < min(len(path.points), 62):
            point = path.points[index].to_tuple() if 0 <= index < len(path.points) else (-1, -1)
            raise DesignEncodeError(point, f"icon index {index} cannot be encoded")
        tags.append(BASE62[index] + path.icons[index].value)
    return encoded + ICON_MARKER + "".join(tags)


def encode_design(paths: list[Path], board: BoardConfig | None = None) -> str:
    """Encode a design as a comma separated path list.

    Args:
        paths: Paths to encode
        board: Board dimensions (defaults when None)

    Returns:
        Encoded design, without the ``?g=`` prefix
    """
    board = board or BoardConfig()
    return PATH_SEPARATOR.join(encode_path(path, board) for path in paths)


def _report(error: DesignDecodeError, on_skip: SkipCallback | None) -> None:
    logger.warning("Skipping design fragment: %s", error)
    if on_skip is not None:
        on_skip(error)


def _decode_icons(
    suffix: str,
    positions: dict[int, int],
    on_skip: SkipCallback | None,
) -> dict[int, PointIcon]:
    """Decode an icon suffix, remapping encoded positions to kept points."""
    icons: dict[int, PointIcon] = {}
    if len(suffix) % 2 != 0:
        _report(DesignDecodeError(suffix, "icon tags are two characters"), on_skip)

    for i in range(0, len(suffix) - 1, 2):
        tag = suffix[i : i + 2]
        try:
            position = _digit(tag[0], tag)
            try:
                icon = PointIcon(tag[1])
            except ValueError:
                raise DesignDecodeError(tag, f"unknown icon {tag[1]!r}") from None
            if position not in positions:
                raise DesignDecodeError(tag, f"no point at index {position}")
        except DesignDecodeError as e:
            _report(e, on_skip)
            continue
        icons[positions[position]] = icon

    return icons


def decode_path(
    fragment: str,
    board: BoardConfig,
    on_skip: SkipCallback | None = None,
) -> Path | None:
    """Decode one path fragment.

    Args:
        fragment: Encoded path, optionally with icon suffix
        board: Board dimensions
        on_skip: Called with every skipped fragment

    Returns:
        The path, or None when it has fewer than two valid points or the
        point string has odd length
    """
    point_part, marker, icon_part = fragment.partition(ICON_MARKER)

    if len(point_part) % 2 != 0:
        _report(DesignDecodeError(fragment, "odd-length point string"), on_skip)
        return None

    points: list[GridPoint] = []
    positions: dict[int, int] = {}
    for position, i in enumerate(range(0, len(point_part), 2)):
        try:
            point = decode_point(point_part[i : i + 2], board)
        except DesignDecodeError as e:
            _report(e, on_skip)
            continue
        positions[position] = len(points)
        points.append(point)

    if len(points) < 2:
        _report(DesignDecodeError(fragment, f"path has {len(points)} valid points"), on_skip)
        return None

    icons = _decode_icons(icon_part, positions, on_skip) if marker else {}
    return Path(points=points, icons=icons)


def decode_design(
    encoded: str,
    board: BoardConfig | None = None,
    on_skip: SkipCallback | None = None,
) -> list[Path]:
    """Decode an encoded design into paths.

    Never raises for malformed input: broken paths, pairs and icon tags are
    skipped and passed to ``on_skip``.

    Args:
        encoded: Encoded design, without the ``?g=`` prefix
        board: Board dimensions (defaults when None)
        on_skip: Called with every skipped fragment

    Returns:
        Decoded paths, in order
    """
    board = board or BoardConfig()
    paths: list[Path] = []

    for fragment in encoded.split(PATH_SEPARATOR):
        if not fragment:
            continue
        path = decode_path(fragment, board, on_skip)
        if path is not None:
            paths.append(path)

    logger.debug("Decoded %d paths", len(paths))
    return paths


def extract_design(text: str) -> str | None:
    """Pull the encoded design out of a URL or query string.

    Accepts a full URL, a ``?g=`` query, a bare ``g=...`` query or an
    encoded design on its own.

    Args:
        text: User supplied design reference

    Returns:
        The encoded design, or None when a query is present without ``g``
    """
    text = text.strip()
    if "?" in text:
        query = text.split("?", 1)[1]
    elif "=" in text:
        query = text
    else:
        return text

    values = parse_qs(query.split("#", 1)[0], keep_blank_values=True).get("g")
    return values[0] if values else None
