"""Vertex tangent synthesis.

Every vertex of a path gets one direction of travel that both neighbouring
segments honour, which is what makes the track C1 continuous. Choosing the
tangent is split in two pure steps:

- ``choose_tangent_rule`` decides *which* rule applies at a vertex and
  returns one of the rule types below;
- ``compute_tangent`` evaluates a rule to a unit vector.

Rule priority:
1. FixedFromPrev: the previous segment is a line or arc, use its exit tangent
2. FixedFromNext: the next segment is a line or arc, use its entry tangent
3. EdgeForward: first point of an open path, aim at the next point
4. EdgeBackward: last point of an open path, continue from the previous point
5. Blended: between two splines, average incoming and outgoing directions
"""

from dataclasses import dataclass

from linetrack.core.arcs import arc_tangent_at
from linetrack.core.classifier import SegmentShape
from linetrack.core.geometry import add, length, normalize, rotate_plus_90, subtract
from linetrack.domain import ArcGeometry, Point, RotationSense


@dataclass(frozen=True, slots=True)
class SegmentPlan:
    """Shape decisions for one segment, made before any tangent exists.

    Attributes:
        shape: Classified shape of the segment
        sense: Rotation sense, arcs only
        arc: Solved arc parameters, arcs only
    """

    shape: SegmentShape
    sense: RotationSense | None = None
    arc: ArcGeometry | None = None


@dataclass(frozen=True, slots=True)
class FixedFromPrev:
    """Take the exit tangent of segment ``segment``."""

    segment: int


@dataclass(frozen=True, slots=True)
class FixedFromNext:
    """Take the entry tangent of segment ``segment``."""

    segment: int


@dataclass(frozen=True, slots=True)
class EdgeForward:
    """Direction from point ``start`` to point ``end``."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class EdgeBackward:
    """Direction from point ``start`` to point ``end``, arriving at the end."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Blended:
    """Bisector of the directions ``prev -> vertex`` and ``vertex -> next``."""

    prev: int
    vertex: int
    next: int


@dataclass(frozen=True, slots=True)
class Fallback:
    """No neighbours at all; travel along +x."""


TangentRule = FixedFromPrev | FixedFromNext | EdgeForward | EdgeBackward | Blended | Fallback


def fixed_entry_tangent(plan: SegmentPlan, p0: Point, p1: Point) -> Point:
    """Tangent at the start of a line or arc segment."""
    if plan.arc is not None:
        return arc_tangent_at(plan.arc, p0)
    return normalize(subtract(p1, p0))


def fixed_exit_tangent(plan: SegmentPlan, p0: Point, p1: Point) -> Point:
    """Tangent at the end of a line or arc segment."""
    if plan.arc is not None:
        return arc_tangent_at(plan.arc, p1)
    return normalize(subtract(p1, p0))


def choose_tangent_rule(
    vertex: int,
    plans: list[SegmentPlan],
    closed: bool = False,
) -> TangentRule:
    """Decide which tangent rule applies at a vertex.

    Closed paths wrap around: the segment before vertex 0 is the last
    segment and the point before it is the second-to-last point, so the
    shared first/last vertex gets the same rule from both ends.

    Args:
        vertex: Point index
        plans: Segment plans, one per consecutive point pair
        closed: Whether the path returns to its first point

    Returns:
        The rule to evaluate for this vertex
    """
    segment_count = len(plans)
    point_count = segment_count + 1

    if vertex > 0:
        prev_seg: int | None = vertex - 1
        prev_pt: int | None = vertex - 1
    elif closed:
        prev_seg = segment_count - 1
        prev_pt = point_count - 2
    else:
        prev_seg = prev_pt = None

    if vertex < segment_count:
        next_seg: int | None = vertex
        next_pt: int | None = vertex + 1
    elif closed:
        next_seg = 0
        next_pt = 1
    else:
        next_seg = next_pt = None

    if prev_seg is not None and plans[prev_seg].shape.has_fixed_tangent:
        return FixedFromPrev(prev_seg)
    if next_seg is not None and plans[next_seg].shape.has_fixed_tangent:
        return FixedFromNext(next_seg)
    if prev_pt is None and next_pt is not None:
        return EdgeForward(vertex, next_pt)
    if prev_pt is not None and next_pt is None:
        return EdgeBackward(prev_pt, vertex)
    if prev_pt is not None and next_pt is not None:
        return Blended(prev_pt, vertex, next_pt)
    return Fallback()


def compute_tangent(
    rule: TangentRule,
    points: list[Point],
    plans: list[SegmentPlan],
    cusp_epsilon: float = 1e-3,
) -> Point:
    """Evaluate a tangent rule to a unit vector.

    Args:
        rule: Rule chosen by ``choose_tangent_rule``
        points: Path points in the space the tangent is wanted in
        plans: Segment plans for the same points
        cusp_epsilon: Length below which a blended sum counts as a cusp

    Returns:
        Unit tangent vector
    """
    if isinstance(rule, FixedFromPrev):
        s = rule.segment
        return fixed_exit_tangent(plans[s], points[s], points[s + 1])

    if isinstance(rule, FixedFromNext):
        s = rule.segment
        return fixed_entry_tangent(plans[s], points[s], points[s + 1])

    if isinstance(rule, (EdgeForward, EdgeBackward)):
        return normalize(subtract(points[rule.end], points[rule.start]))

    if isinstance(rule, Blended):
        incoming = normalize(subtract(points[rule.vertex], points[rule.prev]))
        outgoing = normalize(subtract(points[rule.next], points[rule.vertex]))
        blended = add(incoming, outgoing)
        if length(blended) < cusp_epsilon:
            # Path reverses on itself; turn across the cusp instead
            return rotate_plus_90(incoming)
        return normalize(blended)

    return Point(1.0, 0.0)


def synthesize_tangents(
    points: list[Point],
    plans: list[SegmentPlan],
    closed: bool = False,
    cusp_epsilon: float = 1e-3,
) -> list[Point]:
    """Compute the tangent at every vertex of a path.

    Args:
        points: Path points (no consecutive duplicates)
        plans: Segment plans, ``len(points) - 1`` of them
        closed: Whether the path returns to its first point
        cusp_epsilon: Cusp threshold for blended tangents

    Returns:
        One unit tangent per point
    """
    return [
        compute_tangent(choose_tangent_rule(i, plans, closed), points, plans, cusp_epsilon)
        for i in range(len(points))
    ]
