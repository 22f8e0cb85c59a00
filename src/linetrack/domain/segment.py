"""Segment types produced by curve synthesis.

A segment is the piece of track between two consecutive path points. It is
ephemeral: every request recomputes segments from the point sequence.
"""

from dataclasses import dataclass
from enum import Enum, auto

from linetrack.domain.grid import GridPoint, Point


class RotationSense(Enum):
    """Direction of travel around an arc center.

    Senses are as seen on the board drawing, where y grows downward.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()

    @property
    def opposite(self) -> "RotationSense":
        """The other rotation sense."""
        if self is RotationSense.CLOCKWISE:
            return RotationSense.COUNTER_CLOCKWISE
        return RotationSense.CLOCKWISE


class SegmentKind(Enum):
    """Shape of a segment.

    The value is the tag written to the netlist.
    """

    HORIZONTAL = "H"
    VERTICAL = "V"
    ARC_CW = "A+"
    ARC_CCW = "A-"
    SPLINE = "B"

    @property
    def tag(self) -> str:
        """Netlist type tag."""
        return self.value

    @property
    def is_arc(self) -> bool:
        """True for either arc kind."""
        return self in (SegmentKind.ARC_CW, SegmentKind.ARC_CCW)

    @classmethod
    def arc(cls, sense: RotationSense) -> "SegmentKind":
        """Arc kind for a rotation sense."""
        return cls.ARC_CW if sense is RotationSense.CLOCKWISE else cls.ARC_CCW


@dataclass(frozen=True, slots=True)
class ArcGeometry:
    """Circle parameters of a quarter-circle arc segment.

    Attributes:
        center: Arc center in render space
        radius: Arc radius in render units
        start_angle: Angle of the start point around the center (radians)
        end_angle: Angle of the end point around the center (radians)
        sense: Rotation sense of travel
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    sense: RotationSense

    @property
    def counterclockwise(self) -> bool:
        """Canvas-style arc flag."""
        return self.sense is RotationSense.COUNTER_CLOCKWISE


@dataclass(frozen=True, slots=True)
class Segment:
    """A renderable piece of track between two consecutive path points.

    Every segment carries cubic control points so a generic cubic renderer
    can draw lines and splines. Arc segments carry degenerate control points
    at their own endpoints; renderers must draw them from ``arc`` instead.

    Attributes:
        index: Ordinal of the segment within its path (0-based)
        start: Start point in render space
        end: End point in render space
        grid_start: Start point on the board grid
        grid_end: End point on the board grid
        kind: Segment shape
        cp1: First cubic control point
        cp2: Second cubic control point
        entry_tangent: Unit direction of travel at the start
        exit_tangent: Unit direction of travel at the end
        arc: Circle parameters, only for arc segments
    """

    index: int
    start: Point
    end: Point
    grid_start: GridPoint
    grid_end: GridPoint
    kind: SegmentKind
    cp1: Point
    cp2: Point
    entry_tangent: Point
    exit_tangent: Point
    arc: ArcGeometry | None = None

    @property
    def is_arc(self) -> bool:
        """True for arc segments."""
        return self.arc is not None
