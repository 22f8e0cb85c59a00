"""Rotation sense resolution for arc segments.

An arc between two diagonal neighbours can bulge either way. The sense is
read off the turn the path makes into the arc: a right turn gives a
clockwise arc, a left turn a counter-clockwise one.
"""

import logging

from linetrack.core.geometry import cross, is_parallel, subtract
from linetrack.domain import Point, RotationSense

logger = logging.getLogger(__name__)


def turn_sense(incoming: Point, outgoing: Point) -> RotationSense:
    """Sense of the turn from ``incoming`` to ``outgoing``.

    Positive cross product is clockwise on the board (y down); zero and
    negative map to clockwise and counter-clockwise respectively.
    """
    if cross(incoming, outgoing) < 0:
        return RotationSense.COUNTER_CLOCKWISE
    return RotationSense.CLOCKWISE


def resolve_turn(
    prev: Point | None,
    p0: Point,
    p1: Point,
    next_point: Point | None,
    previous_arc_sense: RotationSense | None = None,
    relative_tolerance: float = 1e-9,
) -> RotationSense:
    """Choose the rotation sense for the arc from ``p0`` to ``p1``.

    Args:
        prev: Point before ``p0``, if any
        p0: Arc start
        p1: Arc end
        next_point: Point after ``p1``, if any
        previous_arc_sense: Sense of the preceding segment when it is an arc
        relative_tolerance: Slack for the parallel (S-curve) test

    Returns:
        Rotation sense. Without any neighbour the arc defaults to clockwise.
    """
    outgoing = subtract(p1, p0)

    if prev is not None:
        incoming = subtract(p0, prev)
        if previous_arc_sense is not None and is_parallel(incoming, outgoing, relative_tolerance):
            # S-curve: two arcs on one diagonal must bend opposite ways
            logger.debug("S-curve at (%s, %s), flipping arc sense", p0.x, p0.y)
            return previous_arc_sense.opposite
        return turn_sense(incoming, outgoing)

    if next_point is not None:
        return turn_sense(outgoing, subtract(next_point, p1))

    return RotationSense.CLOCKWISE
