"""Internal curve flattening algorithms.

This is an internal module containing helper functions for
``flatten_segment``. Not intended for public use.
"""

import math

from linetrack.domain import Point

# Subdivision stops here even if the flatness test still fails
_MAX_DEPTH = 16


def flatten_cubic(points: list[Point], tolerance: float, _depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision. The curve is flat enough
    when both inner control points lie within ``tolerance`` of the chord.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve

    Returns:
        List of points approximating the curve, endpoints included
    """
    p0, p1, p2, p3 = points

    chord_x = p3.x - p0.x
    chord_y = p3.y - p0.y
    chord_len = math.hypot(chord_x, chord_y)

    if chord_len == 0:
        deviation = max(math.hypot(p.x - p0.x, p.y - p0.y) for p in (p1, p2))
    else:
        # Distance of the inner control points from the chord line
        deviation = max(
            abs((p.x - p0.x) * chord_y - (p.y - p0.y) * chord_x) / chord_len for p in (p1, p2)
        )

    if deviation <= tolerance or _depth >= _MAX_DEPTH:
        return [p0, p3]

    # First level
    q1 = Point((p0.x + p1.x) / 2, (p0.y + p1.y) / 2)
    q2 = Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)
    q3 = Point((p2.x + p3.x) / 2, (p2.y + p3.y) / 2)

    # Second level
    r1 = Point((q1.x + q2.x) / 2, (q1.y + q2.y) / 2)
    r2 = Point((q2.x + q3.x) / 2, (q2.y + q3.y) / 2)

    # Third level (midpoint)
    mid = Point((r1.x + r2.x) / 2, (r1.y + r2.y) / 2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, _depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, _depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def sample_arc(
    center: Point,
    radius: float,
    start_angle: float,
    sweep: float,
    tolerance: float,
) -> list[Point]:
    """Sample a circular arc so no chord strays more than ``tolerance``.

    Args:
        center: Arc center
        radius: Arc radius
        start_angle: Starting angle (radians)
        sweep: Signed angular extent (radians)
        tolerance: Maximum sagitta of each chord

    Returns:
        List of points along the arc, endpoints included
    """
    if radius <= tolerance:
        steps = 1
    else:
        max_step = 2 * math.acos(1 - tolerance / radius)
        steps = max(1, math.ceil(abs(sweep) / max_step))

    return [
        Point(
            center.x + radius * math.cos(start_angle + sweep * k / steps),
            center.y + radius * math.sin(start_angle + sweep * k / steps),
        )
        for k in range(steps + 1)
    ]
