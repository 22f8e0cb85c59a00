"""Grid-level types describing a track design.

This module defines the value types a caller hands to the geometry core:
- GridPoint: An integer point on the board grid
- Point: A point in render space (after a coordinate transform)
- PointIcon: Marker placed on a path point, ignored by geometry
- Path: An ordered list of grid points
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PointIcon(str, Enum):
    """Marker icons that can be attached to path points.

    The value is the single letter used by the design encoding.
    """

    PLAY = "P"
    FAST_FORWARD = "F"
    STOP = "S"
    CAUTION = "C"
    CIRCLE = "O"
    SQUARE = "Q"


@dataclass(frozen=True, slots=True)
class GridPoint:
    """A point on the board grid.

    Attributes:
        x: Column index
        y: Row index (grows downward, as on the board drawing)
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GridPoint":
        """Deserialize from dictionary."""
        return cls(x=int(data["x"]), y=int(data["y"]))


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in render space.

    Immutable and hashable. Used both for positions and for direction
    vectors such as tangents.

    Attributes:
        x: X coordinate in render units
        y: Y coordinate in render units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass
class Path:
    """An ordered sequence of grid points a track passes through.

    The icon map is carried through unchanged; no geometry depends on it.

    Attributes:
        points: Grid points in travel order
        icons: Sparse map from point index to icon
        path_id: Optional caller-side identifier
    """

    points: list[GridPoint]
    icons: dict[int, PointIcon] = field(default_factory=dict)
    path_id: str | None = None

    @classmethod
    def from_tuples(
        cls,
        coords: list[tuple[int, int]],
        icons: dict[int, PointIcon] | None = None,
        path_id: str | None = None,
    ) -> "Path":
        """Build a path from plain (x, y) tuples.

        Args:
            coords: List of (x, y) grid coordinates
            icons: Optional icon map
            path_id: Optional identifier

        Returns:
            Path instance
        """
        return cls(
            points=[GridPoint(x, y) for x, y in coords],
            icons=dict(icons or {}),
            path_id=path_id,
        )

    @property
    def is_closed(self) -> bool:
        """True when the path returns to its first point."""
        return len(self.points) > 2 and self.points[0] == self.points[-1]

    def distinct_points(self) -> list[GridPoint]:
        """Return the points with consecutive duplicates removed.

        Duplicate neighbours would form zero-length segments, which
        produce no geometry.
        """
        result: list[GridPoint] = []
        for point in self.points:
            if not result or result[-1] != point:
                result.append(point)
        return result

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.path_id,
            "points": [p.to_dict() for p in self.points],
            "icons": {str(idx): icon.value for idx, icon in self.icons.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary."""
        return cls(
            points=[GridPoint.from_dict(p) for p in data["points"]],
            icons={int(idx): PointIcon(v) for idx, v in data.get("icons", {}).items()},
            path_id=data.get("id"),
        )
