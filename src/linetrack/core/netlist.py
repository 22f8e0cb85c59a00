"""Netlist formatting.

The netlist is a fixed-width text description of every segment of a
design, one row per segment:

    <seg#:2> <angle:4> <type:4> <entry:4> (<x0:2>,<y0:2>) (<x1:2>,<y1:2>) <exit:4>

Angles are integer degrees in (-180, 180], measured on the board with y
growing downward. Rows are built from ``synthesize_segments`` with the
identity transform, the same function renderers use.
"""

from dataclasses import dataclass

from linetrack.config import GeometryConfig
from linetrack.core.assembler import synthesize_segments
from linetrack.core.geometry import heading_degrees
from linetrack.domain import Path, Point, Segment


@dataclass(frozen=True, slots=True)
class NetlistRow:
    """One netlist line.

    Attributes:
        number: Global 1-based segment number
        angle: Heading of the straight line from start to end
        tag: Segment type tag (H, V, A+, A-, B)
        entry_angle: Heading of travel entering the segment
        exit_angle: Heading of travel leaving the segment
        start: Start grid coordinates
        end: End grid coordinates
    """

    number: int
    angle: int
    tag: str
    entry_angle: int
    exit_angle: int
    start: tuple[int, int]
    end: tuple[int, int]

    def format(self) -> str:
        """Render the row in the fixed-width layout."""
        x0, y0 = self.start
        x1, y1 = self.end
        return (
            f"{self.number:>2} {self.angle:>4} {self.tag:<4} {self.entry_angle:>4} "
            f"({x0:>2},{y0:>2}) ({x1:>2},{y1:>2}) {self.exit_angle:>4}"
        )


def row_from_segment(segment: Segment, number: int) -> NetlistRow:
    """Describe a grid-space segment as a netlist row."""
    chord = Point(
        segment.grid_end.x - segment.grid_start.x,
        segment.grid_end.y - segment.grid_start.y,
    )
    return NetlistRow(
        number=number,
        angle=heading_degrees(chord),
        tag=segment.kind.tag,
        entry_angle=heading_degrees(segment.entry_tangent),
        exit_angle=heading_degrees(segment.exit_tangent),
        start=segment.grid_start.to_tuple(),
        end=segment.grid_end.to_tuple(),
    )


def build_netlist_rows(
    path: Path,
    first_number: int = 1,
    config: GeometryConfig | None = None,
) -> list[NetlistRow]:
    """Build the netlist rows of one path.

    Args:
        path: Path of grid points
        first_number: Number given to the first row
        config: Geometry settings

    Returns:
        Rows numbered consecutively from ``first_number``
    """
    segments = synthesize_segments(path, config=config)
    return [row_from_segment(seg, first_number + offset) for offset, seg in enumerate(segments)]


def format_netlist(paths: list[Path], config: GeometryConfig | None = None) -> str:
    """Render the netlist of a whole design.

    Numbering continues across paths. Paths are separated by one blank
    line; paths without segments contribute nothing, and there is no
    trailing newline.

    Args:
        paths: Paths of the design, in order
        config: Geometry settings

    Returns:
        Netlist text
    """
    blocks: list[str] = []
    next_number = 1

    for path in paths:
        rows = build_netlist_rows(path, next_number, config)
        if not rows:
            continue
        next_number += len(rows)
        blocks.append("\n".join(row.format() for row in rows))

    return "\n\n".join(blocks)
