"""Configuration settings for linetrack."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class BoardConfig(BaseModel):
    """Physical layout of the track board.

    The board is a grid of ``grid_points`` columns by ``grid_height`` rows
    spaced ``spacing_inches`` apart. The default is a 48 inch board with a
    point every 2 inches.
    """

    grid_points: int = Field(
        default=25,
        ge=2,
        le=62,
        description="Number of grid points across the board",
    )
    grid_height: int | None = Field(
        default=None,
        ge=2,
        le=62,
        description="Number of grid points down the board (None = square)",
    )
    spacing_inches: float = Field(
        default=2.0,
        gt=0.0,
        description="Distance between neighbouring grid points",
    )
    line_width_inches: float = Field(
        default=0.75,
        gt=0.0,
        description="Width of the printed track line",
    )

    @property
    def width(self) -> int:
        """Grid points across."""
        return self.grid_points

    @property
    def height(self) -> int:
        """Grid points down."""
        return self.grid_height if self.grid_height is not None else self.grid_points

    @property
    def point_count(self) -> int:
        """Total number of grid points on the board."""
        return self.width * self.height

    @property
    def size_inches(self) -> tuple[float, float]:
        """Board extent as (width, height) in inches."""
        return (
            (self.width - 1) * self.spacing_inches,
            (self.height - 1) * self.spacing_inches,
        )

    def contains(self, x: int, y: int) -> bool:
        """Check whether a grid coordinate lies on the board."""
        return 0 <= x < self.width and 0 <= y < self.height


class GeometryConfig(BaseModel):
    """Configuration for curve synthesis.

    Tolerances are relative to the size of the segment being examined, so
    the same values hold in grid units and in any scaled render space.
    """

    relative_tolerance: float = Field(
        default=1e-9,
        gt=0.0,
        le=1e-3,
        description="Relative slack for straight/diagonal classification and parallel tests",
    )
    cusp_epsilon: float = Field(
        default=1e-3,
        gt=0.0,
        le=0.5,
        description="Length below which blended unit tangents count as cancelling out",
    )
    spline_handle_ratio: float = Field(
        default=0.4,
        gt=0.0,
        le=0.5,
        description="Spline handle length as a fraction of the chord",
    )
    line_handle_ratio: float = Field(
        default=1.0 / 3.0,
        gt=0.0,
        lt=0.5,
        description="Straight segment handle length as a fraction of the chord",
    )
    flatten_tolerance: float = Field(
        default=0.01,
        ge=1e-4,
        le=1.0,
        description="Maximum polyline deviation when flattening, in grid units",
    )


class RenderConfig(BaseModel):
    """Configuration for render-space output."""

    width: float = Field(default=800.0, gt=0.0, description="Canvas width")
    height: float = Field(default=800.0, gt=0.0, description="Canvas height")
    padding: float = Field(default=40.0, ge=0.0, description="Margin around the board")
    precision: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimal places in emitted path data",
    )

    @model_validator(mode="after")
    def check_padding(self) -> "RenderConfig":
        """Require room for the board inside the margins."""
        if self.padding * 2 >= min(self.width, self.height):
            raise ValueError(
                f"padding {self.padding:g} leaves no room on a {self.width:g}x{self.height:g} canvas"
            )
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class LinetrackSettings(BaseModel):
    """Main application settings."""

    board: BoardConfig = Field(default_factory=BoardConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> LinetrackSettings:
    """Get default application settings."""
    return LinetrackSettings()
