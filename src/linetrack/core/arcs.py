"""Quarter-circle arc solving.

An arc segment joins two points whose horizontal and vertical distances are
equal. Its center sits on one of the two corners of their bounding square
that are off the diagonal; the rotation sense picks the corner.
"""

import math

from linetrack.core.geometry import normalize, rotate_minus_90, rotate_plus_90, subtract
from linetrack.domain import ArcGeometry, Point, RotationSense
from linetrack.exceptions import ArcGeometryError


def arc_center(p0: Point, p1: Point, sense: RotationSense) -> Point:
    """Locate the center of the arc from ``p0`` to ``p1``.

    Same-sign deltas put a counter-clockwise center at (x1, y0) and a
    clockwise one at (x0, y1); opposite-sign deltas swap the corners.

    Args:
        p0: Arc start
        p1: Arc end
        sense: Rotation sense of travel

    Returns:
        Arc center
    """
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    same_sign = (dx > 0 and dy > 0) or (dx < 0 and dy < 0)
    counterclockwise = sense is RotationSense.COUNTER_CLOCKWISE

    if same_sign == counterclockwise:
        return Point(p1.x, p0.y)
    return Point(p0.x, p1.y)


def solve_arc(
    p0: Point,
    p1: Point,
    sense: RotationSense,
    relative_tolerance: float = 1e-9,
) -> ArcGeometry:
    """Compute the circle parameters of a quarter-circle arc.

    Angles are measured with ``atan2`` around the center, so they are the
    same in grid units and in any uniformly scaled and translated space.

    Args:
        p0: Arc start
        p1: Arc end
        sense: Rotation sense of travel
        relative_tolerance: Allowed mismatch between |dx| and |dy|

    Returns:
        ArcGeometry with center, radius and angles

    Raises:
        ArcGeometryError: If the endpoints are not diagonal neighbours

    Examples:
        >>> arc = solve_arc(Point(9, 5), Point(11, 3), RotationSense.COUNTER_CLOCKWISE)
        >>> arc.center, arc.radius
        (Point(x=9, y=3), 2)
    """
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    span = max(abs(dx), abs(dy))
    if span == 0:
        raise ArcGeometryError(f"Zero-length arc at ({p0.x}, {p0.y})")
    if abs(abs(dx) - abs(dy)) > span * relative_tolerance:
        raise ArcGeometryError(
            f"Arc endpoints ({p0.x}, {p0.y}) -> ({p1.x}, {p1.y}) are not on a 45 degree diagonal"
        )

    center = arc_center(p0, p1, sense)
    return ArcGeometry(
        center=center,
        radius=abs(dx),
        start_angle=math.atan2(p0.y - center.y, p0.x - center.x),
        end_angle=math.atan2(p1.y - center.y, p1.x - center.x),
        sense=sense,
    )


def arc_tangent_at(arc: ArcGeometry, point: Point) -> Point:
    """Unit direction of travel at a point on the arc.

    The tangent is the radius vector turned a quarter: +90 degrees for
    clockwise travel, -90 degrees for counter-clockwise travel.

    Args:
        arc: Arc parameters
        point: Point on the arc (normally an endpoint)

    Returns:
        Unit tangent vector
    """
    radius_vec = subtract(point, arc.center)
    if arc.sense is RotationSense.CLOCKWISE:
        return normalize(rotate_plus_90(radius_vec))
    return normalize(rotate_minus_90(radius_vec))
