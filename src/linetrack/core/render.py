"""Render-side consumers of synthesized segments.

These functions turn segments into something a drawing surface or a robot
planner can use. Arc segments are always drawn from their circle
parameters; their cubic control points are placeholders.

Key functions:
- arc_sweep: Signed angular extent of an arc
- path_data: SVG path data string for a segment list
- flatten_segment: Polyline approximation of one segment
- track_length: Total length of a segment list
"""

import math

from linetrack.core._bezier import flatten_cubic, sample_arc
from linetrack.core.geometry import distance
from linetrack.domain import ArcGeometry, Point, RotationSense, Segment


def arc_sweep(arc: ArcGeometry) -> float:
    """Signed angle travelled along an arc, in radians.

    Clockwise travel on the board (y down) increases the angle.
    """
    sweep = arc.end_angle - arc.start_angle
    if arc.sense is RotationSense.CLOCKWISE and sweep < 0:
        sweep += 2 * math.pi
    elif arc.sense is RotationSense.COUNTER_CLOCKWISE and sweep > 0:
        sweep -= 2 * math.pi
    return sweep


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _pt(point: Point, precision: int) -> str:
    return f"{_fmt(point.x, precision)},{_fmt(point.y, precision)}"


def path_data(segments: list[Segment], precision: int = 2) -> str:
    """Build an SVG path ``d`` attribute for consecutive segments.

    A new subpath starts wherever a segment does not begin at the end of
    the previous one.

    Args:
        segments: Segments in render space
        precision: Decimal places for coordinates

    Returns:
        Path data, empty for an empty segment list
    """
    commands: list[str] = []
    cursor: Point | None = None

    for seg in segments:
        if cursor != seg.start:
            commands.append(f"M {_pt(seg.start, precision)}")

        if seg.arc is not None:
            radius = _fmt(seg.arc.radius, precision)
            sweep_flag = 1 if seg.arc.sense is RotationSense.CLOCKWISE else 0
            commands.append(f"A {radius},{radius} 0 0 {sweep_flag} {_pt(seg.end, precision)}")
        else:
            commands.append(
                f"C {_pt(seg.cp1, precision)} {_pt(seg.cp2, precision)} {_pt(seg.end, precision)}"
            )
        cursor = seg.end

    return " ".join(commands)


def flatten_segment(segment: Segment, tolerance: float) -> list[Point]:
    """Approximate a segment with a polyline.

    Args:
        segment: Segment in render space
        tolerance: Maximum deviation from the true curve, in render units

    Returns:
        Points from segment start to segment end
    """
    if segment.arc is not None:
        arc = segment.arc
        points = sample_arc(arc.center, arc.radius, arc.start_angle, arc_sweep(arc), tolerance)
        # Pin the endpoints exactly
        return [segment.start, *points[1:-1], segment.end]
    return flatten_cubic([segment.start, segment.cp1, segment.cp2, segment.end], tolerance)


def segment_length(segment: Segment, tolerance: float) -> float:
    """Length of one segment.

    Arcs are measured exactly; cubics through their flattened polyline.
    """
    if segment.arc is not None:
        return segment.arc.radius * abs(arc_sweep(segment.arc))
    polyline = flatten_segment(segment, tolerance)
    return sum(distance(a, b) for a, b in zip(polyline, polyline[1:]))


def track_length(segments: list[Segment], tolerance: float) -> float:
    """Total length of a segment list in render units."""
    return sum(segment_length(seg, tolerance) for seg in segments)
