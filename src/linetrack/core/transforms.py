"""Grid-to-render coordinate transforms.

Curve synthesis accepts any callable mapping a ``GridPoint`` to a ``Point``.
Only uniform scale-and-translate transforms keep classification and arc
angles identical to grid space, which is what both provided transforms are.
"""

from collections.abc import Callable
from dataclasses import dataclass

from linetrack.config import BoardConfig
from linetrack.domain import GridPoint, Point
from linetrack.exceptions import GeometryError

GridTransform = Callable[[GridPoint], Point]


def identity_transform(point: GridPoint) -> Point:
    """Use grid units as render units."""
    return Point(float(point.x), float(point.y))


@dataclass(frozen=True, slots=True)
class BoardTransform:
    """Uniform scale and translate from grid units to render units.

    Attributes:
        origin: Render position of grid point (0, 0)
        spacing: Render distance between neighbouring grid points
    """

    origin: Point
    spacing: float

    def __call__(self, point: GridPoint) -> Point:
        return Point(
            self.origin.x + point.x * self.spacing,
            self.origin.y + point.y * self.spacing,
        )

    def to_grid(self, point: Point) -> GridPoint:
        """Snap a render-space point to the nearest grid point."""
        return GridPoint(
            round((point.x - self.origin.x) / self.spacing),
            round((point.y - self.origin.y) / self.spacing),
        )

    @classmethod
    def fit(
        cls,
        board: BoardConfig,
        width: float,
        height: float,
        padding: float = 40.0,
    ) -> "BoardTransform":
        """Fit a board into a canvas, centered, with a margin.

        Grid spacing is chosen so the larger board dimension fills the
        usable area of the canvas.

        Args:
            board: Board dimensions
            width: Canvas width
            height: Canvas height
            padding: Margin on every side

        Returns:
            Transform placing the board in the canvas

        Raises:
            GeometryError: If the margins use up the whole canvas
        """
        usable = min(width - padding * 2, height - padding * 2)
        if usable <= 0:
            raise GeometryError(f"Padding {padding:g} leaves no room on a {width:g}x{height:g} canvas")
        spacing = usable / (max(board.width, board.height) - 1)
        board_width = spacing * (board.width - 1)
        board_height = spacing * (board.height - 1)
        return cls(
            origin=Point((width - board_width) / 2, (height - board_height) / 2),
            spacing=spacing,
        )
