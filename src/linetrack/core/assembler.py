"""Curve assembly: from a path of grid points to renderable segments.

``synthesize_segments`` is the one function every consumer calls, the
netlist formatter with the identity transform and renderers with a board
transform, so both always see the same segment kinds and tangents.

The assembly runs three passes over the distinct points:
1. classify each step and resolve arc rotation senses
2. compute one tangent per vertex
3. build segments with control points or arc parameters
"""

import logging

from linetrack.config import GeometryConfig
from linetrack.core.arcs import solve_arc
from linetrack.core.classifier import SegmentShape, classify_segment
from linetrack.core.geometry import add, distance, is_parallel, scale, subtract
from linetrack.core.tangents import (
    SegmentPlan,
    fixed_entry_tangent,
    fixed_exit_tangent,
    synthesize_tangents,
)
from linetrack.core.transforms import GridTransform, identity_transform
from linetrack.core.turns import resolve_turn
from linetrack.domain import GridPoint, Path, Point, Segment, SegmentKind

logger = logging.getLogger(__name__)

_LINE_KINDS = {
    SegmentShape.HORIZONTAL: SegmentKind.HORIZONTAL,
    SegmentShape.VERTICAL: SegmentKind.VERTICAL,
    SegmentShape.SPLINE: SegmentKind.SPLINE,
}


def _resolution_order(
    points: list[Point],
    shapes: list[SegmentShape],
    closed: bool,
    relative_tolerance: float,
) -> list[int]:
    """Order in which segment senses are resolved.

    An arc whose chord is parallel to a preceding arc takes the opposite
    sense of that arc, so it has to come after it. Open paths run front to
    back. Closed paths start at the first segment that does not continue an
    S-curve from the segment before it, then wrap around the seam.
    """
    count = len(shapes)
    if not closed:
        return list(range(count))

    def continues_s_curve(i: int) -> bool:
        j = (i - 1) % count
        if shapes[i] is not SegmentShape.ARC or shapes[j] is not SegmentShape.ARC:
            return False
        return is_parallel(
            subtract(points[j + 1], points[j]),
            subtract(points[i + 1], points[i]),
            relative_tolerance,
        )

    start = next((i for i in range(count) if not continues_s_curve(i)), 0)
    return [(start + k) % count for k in range(count)]


def plan_segments(
    points: list[Point],
    closed: bool = False,
    relative_tolerance: float = 1e-9,
) -> list[SegmentPlan]:
    """Classify every step and resolve arc senses.

    On a closed path the seam is not special: the segment before segment 0
    is the last segment, for the previous point and for the S-curve rule
    alike, so the result does not depend on where the loop starts.

    Args:
        points: Distinct consecutive points in render space
        closed: Whether the path returns to its first point
        relative_tolerance: Classification and parallel-test slack

    Returns:
        One plan per consecutive point pair
    """
    last = len(points) - 1
    shapes: list[SegmentShape] = []
    for i in range(last):
        shape = classify_segment(points[i], points[i + 1], relative_tolerance)
        # Callers pass distinct points; treat a stray duplicate as a spline
        shapes.append(shape if shape is not None else SegmentShape.SPLINE)

    plans: list[SegmentPlan | None] = [None] * last
    for i in _resolution_order(points, shapes, closed, relative_tolerance):
        shape = shapes[i]
        if shape is not SegmentShape.ARC:
            plans[i] = SegmentPlan(shape=shape)
            continue

        p0 = points[i]
        p1 = points[i + 1]
        prev = points[i - 1] if i > 0 else (points[last - 1] if closed else None)
        nxt = points[i + 2] if i + 2 <= last else (points[1] if closed else None)
        before = plans[i - 1] if i > 0 or closed else None
        previous_arc_sense = (
            before.sense if before is not None and before.shape is SegmentShape.ARC else None
        )

        sense = resolve_turn(prev, p0, p1, nxt, previous_arc_sense, relative_tolerance)
        arc = solve_arc(p0, p1, sense, relative_tolerance)
        plans[i] = SegmentPlan(shape=shape, sense=sense, arc=arc)

    return [plan for plan in plans if plan is not None]


def synthesize_segments(
    path: Path,
    transform: GridTransform = identity_transform,
    config: GeometryConfig | None = None,
) -> list[Segment]:
    """Build the renderable segments of a path.

    Consecutive duplicate points are dropped first, so zero-length steps
    never produce a segment and ordinals stay contiguous. Paths with fewer
    than two distinct points produce no segments.

    Args:
        path: Path of grid points
        transform: Grid to render space mapping (uniform scale + translate)
        config: Geometry settings (defaults when None)

    Returns:
        Segments in travel order
    """
    config = config or GeometryConfig()
    grid_points: list[GridPoint] = path.distinct_points()
    if len(grid_points) < 2:
        return []

    closed = len(grid_points) > 2 and grid_points[0] == grid_points[-1]
    points = [transform(p) for p in grid_points]

    plans = plan_segments(points, closed, config.relative_tolerance)
    tangents = synthesize_tangents(points, plans, closed, config.cusp_epsilon)

    segments: list[Segment] = []
    for i, plan in enumerate(plans):
        p0 = points[i]
        p1 = points[i + 1]

        if plan.arc is not None and plan.sense is not None:
            segments.append(
                Segment(
                    index=i,
                    start=p0,
                    end=p1,
                    grid_start=grid_points[i],
                    grid_end=grid_points[i + 1],
                    kind=SegmentKind.arc(plan.sense),
                    cp1=p0,
                    cp2=p1,
                    entry_tangent=fixed_entry_tangent(plan, p0, p1),
                    exit_tangent=fixed_exit_tangent(plan, p0, p1),
                    arc=plan.arc,
                )
            )
            continue

        if plan.shape is SegmentShape.SPLINE:
            entry = tangents[i]
            exit_ = tangents[i + 1]
            handle = distance(p0, p1) * config.spline_handle_ratio
            cp1 = add(p0, scale(entry, handle))
            cp2 = subtract(p1, scale(exit_, handle))
        else:
            entry = exit_ = fixed_entry_tangent(plan, p0, p1)
            chord = subtract(p1, p0)
            cp1 = add(p0, scale(chord, config.line_handle_ratio))
            cp2 = subtract(p1, scale(chord, config.line_handle_ratio))

        segments.append(
            Segment(
                index=i,
                start=p0,
                end=p1,
                grid_start=grid_points[i],
                grid_end=grid_points[i + 1],
                kind=_LINE_KINDS[plan.shape],
                cp1=cp1,
                cp2=cp2,
                entry_tangent=entry,
                exit_tangent=exit_,
            )
        )

    logger.debug(
        "Synthesized %d segments (%d arcs, closed=%s)",
        len(segments),
        sum(1 for s in segments if s.is_arc),
        closed,
    )
    return segments


def segment_kinds(segments: list[Segment]) -> list[SegmentKind]:
    """Kind sequence of a segment list, for comparing consumers."""
    return [s.kind for s in segments]
