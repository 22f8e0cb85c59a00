"""Core curve synthesis for linetrack.

This module contains the algorithms that turn a path of grid points into a
tangent-continuous track:

- Geometry primitives (normalize, distance, cross product)
- Segment classification (H, V, arc, spline)
- Arc rotation sense resolution, including S-curves
- Arc solving (center, radius, angles)
- Vertex tangent synthesis
- Curve assembly and netlist formatting

All functions are pure and keep no state between calls, so the netlist and
every renderer derive identical geometry from the same points.

Key functions:
- synthesize_segments: Path to renderable segments
- format_netlist: Paths to netlist text
- classify_segment: Shape of one step
- resolve_turn: Rotation sense of an arc
- solve_arc: Circle parameters of an arc
- choose_tangent_rule / compute_tangent: Vertex tangents
- path_data: SVG path data for segments

Key classes:
- DesignProcessor: Decode, synthesize and report on a whole design
- BoardTransform: Grid to render space mapping
"""

from linetrack.core.arcs import arc_center, arc_tangent_at, solve_arc
from linetrack.core.assembler import plan_segments, segment_kinds, synthesize_segments
from linetrack.core.classifier import SegmentShape, classify_segment
from linetrack.core.netlist import NetlistRow, build_netlist_rows, format_netlist
from linetrack.core.processor import DesignProcessor
from linetrack.core.render import flatten_segment, path_data, track_length
from linetrack.core.tangents import (
    Blended,
    EdgeBackward,
    EdgeForward,
    Fallback,
    FixedFromNext,
    FixedFromPrev,
    SegmentPlan,
    TangentRule,
    choose_tangent_rule,
    compute_tangent,
    synthesize_tangents,
)
from linetrack.core.transforms import BoardTransform, GridTransform, identity_transform
from linetrack.core.turns import resolve_turn

__all__ = [
    # Tangent rules
    "Blended",
    # Transforms
    "BoardTransform",
    # Processor classes
    "DesignProcessor",
    "EdgeBackward",
    "EdgeForward",
    "Fallback",
    "FixedFromNext",
    "FixedFromPrev",
    "GridTransform",
    # Netlist
    "NetlistRow",
    # Planning
    "SegmentPlan",
    "SegmentShape",
    "TangentRule",
    # Functions
    "arc_center",
    "arc_tangent_at",
    "build_netlist_rows",
    "choose_tangent_rule",
    "classify_segment",
    "compute_tangent",
    "flatten_segment",
    "format_netlist",
    "identity_transform",
    "path_data",
    "plan_segments",
    "resolve_turn",
    "segment_kinds",
    "solve_arc",
    "synthesize_segments",
    "synthesize_tangents",
    "track_length",
]
