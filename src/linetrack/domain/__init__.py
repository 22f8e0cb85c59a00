"""Domain models for linetrack.

This module contains the value types exchanged between callers and the
geometry core. All models are plain dataclasses, independent of any
rendering surface.

Key classes:
- GridPoint: An integer point on the board grid
- Point: A point or direction vector in render space
- Path: An ordered list of grid points with optional icons
- Segment: One synthesized piece of track
- ArcGeometry: Circle parameters of an arc segment
"""

from linetrack.domain.grid import GridPoint, Path, Point, PointIcon
from linetrack.domain.segment import ArcGeometry, RotationSense, Segment, SegmentKind

__all__: list[str] = [
    # Enums
    "PointIcon",
    "RotationSense",
    "SegmentKind",
    # Core types
    "GridPoint",
    "Point",
    "Path",
    "ArcGeometry",
    "Segment",
]
