"""Vector primitives for curve synthesis.

This module provides the small set of 2D vector operations everything else
is built on:
- Vector arithmetic (add, subtract, scale)
- Length, distance and normalization
- Cross product and quarter-turn rotation
- Angle conversion for netlist output

All functions are pure and operate on immutable ``Point`` values.
"""

import math

from linetrack.domain import Point


def add(a: Point, b: Point) -> Point:
    """Component-wise sum of two vectors."""
    return Point(a.x + b.x, a.y + b.y)


def subtract(a: Point, b: Point) -> Point:
    """Vector from ``b`` to ``a``."""
    return Point(a.x - b.x, a.y - b.y)


def scale(v: Point, factor: float) -> Point:
    """Multiply a vector by a scalar."""
    return Point(v.x * factor, v.y * factor)


def length(v: Point) -> float:
    """Euclidean length of a vector."""
    return math.hypot(v.x, v.y)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points.

    Examples:
        >>> distance(Point(0.0, 0.0), Point(3.0, 4.0))
        5.0
    """
    return math.hypot(b.x - a.x, b.y - a.y)


def normalize(v: Point) -> Point:
    """Scale a vector to unit length.

    A zero vector is returned unchanged rather than raising, so callers can
    test the result length when they care about degenerate input.

    Examples:
        >>> normalize(Point(0.0, 5.0))
        Point(x=0.0, y=1.0)
    """
    norm = math.hypot(v.x, v.y) or 1.0
    return Point(v.x / norm, v.y / norm)


def cross(a: Point, b: Point) -> float:
    """Z component of the cross product ``a x b``.

    With y growing downward a positive value is a clockwise (right) turn
    from ``a`` to ``b`` as seen on the board.

    Examples:
        >>> cross(Point(4.0, 0.0), Point(2.0, -2.0))
        -8.0
    """
    return a.x * b.y - a.y * b.x


def rotate_plus_90(v: Point) -> Point:
    """Rotate a vector by +90 degrees, ``(x, y) -> (-y, x)``."""
    return Point(-v.y, v.x)


def rotate_minus_90(v: Point) -> Point:
    """Rotate a vector by -90 degrees, ``(x, y) -> (y, -x)``."""
    return Point(v.y, -v.x)


def is_parallel(a: Point, b: Point, relative_tolerance: float) -> bool:
    """Check whether two vectors are parallel or anti-parallel.

    The cross product is compared against the product of the lengths so the
    test does not depend on the coordinate scale.

    Args:
        a: First vector
        b: Second vector
        relative_tolerance: Allowed |sin| of the angle between the vectors

    Returns:
        True when the vectors are (anti-)parallel within tolerance
    """
    return abs(cross(a, b)) <= relative_tolerance * length(a) * length(b)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def normalize_degrees(angle: int) -> int:
    """Bring an integer angle into the range (-180, 180]."""
    while angle > 180:
        angle -= 360
    while angle <= -180:
        angle += 360
    return angle


def heading_degrees(v: Point) -> int:
    """Integer heading of a vector in degrees, within (-180, 180].

    Examples:
        >>> heading_degrees(Point(2.0, -2.0))
        -45
        >>> heading_degrees(Point(-1.0, 0.0))
        180
    """
    return normalize_degrees(round_half_up(math.degrees(math.atan2(v.y, v.x))))
