"""Segment classification.

Decides whether the step between two consecutive points is a horizontal
line, a vertical line, a quarter-circle arc or a free spline. Only the
deltas matter, so classification gives the same answer in grid units and in
any uniformly scaled render space.
"""

from enum import Enum

from linetrack.domain import Point


class SegmentShape(Enum):
    """Shape of a step, before arc rotation sense is known."""

    HORIZONTAL = "H"
    VERTICAL = "V"
    ARC = "A"
    SPLINE = "B"

    @property
    def has_fixed_tangent(self) -> bool:
        """True for lines and arcs."""
        return self is not SegmentShape.SPLINE


def classify_segment(
    p0: Point,
    p1: Point,
    relative_tolerance: float = 1e-9,
) -> SegmentShape | None:
    """Classify the step from ``p0`` to ``p1``.

    Rules, applied in order:
    1. |dy| negligible and |dx| not -> HORIZONTAL
    2. |dx| negligible and |dy| not -> VERTICAL
    3. both significant and |dx| == |dy| within slack -> ARC
    4. otherwise -> SPLINE

    "Negligible" is measured against the larger of |dx| and |dy|, which makes
    the test exact for integer input and immune to the rounding noise of a
    scale-and-translate transform.

    Args:
        p0: Start point
        p1: End point
        relative_tolerance: Slack as a fraction of the larger delta

    Returns:
        The segment shape, or None for a zero-length step

    Examples:
        >>> classify_segment(Point(5, 5), Point(9, 5))
        <SegmentShape.HORIZONTAL: 'H'>
        >>> classify_segment(Point(9, 5), Point(11, 3))
        <SegmentShape.ARC: 'A'>
    """
    abs_dx = abs(p1.x - p0.x)
    abs_dy = abs(p1.y - p0.y)
    span = max(abs_dx, abs_dy)
    if span == 0:
        return None

    slack = span * relative_tolerance

    if abs_dy <= slack:
        return SegmentShape.HORIZONTAL
    if abs_dx <= slack:
        return SegmentShape.VERTICAL
    if abs(abs_dx - abs_dy) <= slack:
        return SegmentShape.ARC
    return SegmentShape.SPLINE
