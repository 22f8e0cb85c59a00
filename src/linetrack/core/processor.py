"""Design processing orchestration.

This module wires the pieces a front end needs into one object: decoding a
shared design, synthesizing segments in grid or render space, formatting
the netlist and measuring the track.

Key components:
- DesignProcessor: Main orchestrator class
"""

from linetrack.config import LinetrackSettings
from linetrack.core.assembler import synthesize_segments
from linetrack.core.netlist import format_netlist
from linetrack.core.render import path_data, track_length
from linetrack.core.transforms import BoardTransform, GridTransform, identity_transform
from linetrack.domain import Path, Segment
from linetrack.exceptions import DesignDecodeError, DesignError
from linetrack.io import decode_design, extract_design
from linetrack.utils import DesignLogger, DesignStats, configure_logging


class DesignProcessor:
    """Runs the curve synthesis pipeline for a whole design.

    Example:
        processor = DesignProcessor(LinetrackSettings())
        paths = processor.load("https://example.org/?g=262A1O")
        print(processor.netlist(paths))
    """

    def __init__(self, config: LinetrackSettings, quiet: bool = False) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Linetrack settings
            quiet: Suppress console logging below ERROR
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.design_logger = DesignLogger(self.logger)

    @property
    def render_transform(self) -> BoardTransform:
        """Transform placing the board on the configured canvas."""
        render = self.config.render
        return BoardTransform.fit(self.config.board, render.width, render.height, render.padding)

    def load(self, design: str) -> list[Path]:
        """Decode a design given as URL, query string or bare encoding.

        Malformed fragments are skipped and counted in ``stats``.

        Args:
            design: Design reference

        Returns:
            Decoded paths

        Raises:
            DesignError: If a URL or query carries no design at all
        """
        encoded = extract_design(design)
        if encoded is None:
            raise DesignError(f"No design parameter 'g' in {design!r}")

        def on_skip(error: DesignDecodeError) -> None:
            self.design_logger.log_fragment_skipped(error.fragment, error.reason)

        paths = decode_design(encoded, self.config.board, on_skip=on_skip)
        self.logger.info("Design decoded", paths=len(paths))
        return paths

    def synthesize(
        self,
        paths: list[Path],
        transform: GridTransform | None = None,
    ) -> list[list[Segment]]:
        """Synthesize segments for every path.

        Args:
            paths: Design paths
            transform: Grid to render mapping (the configured canvas if None)

        Returns:
            One segment list per path
        """
        transform = transform or self.render_transform
        return [synthesize_segments(path, transform, self.config.geometry) for path in paths]

    def netlist(self, paths: list[Path]) -> str:
        """Netlist text for the design."""
        return format_netlist(paths, self.config.geometry)

    def path_data(self, paths: list[Path]) -> list[str]:
        """SVG path data per path, on the configured canvas."""
        precision = self.config.render.precision
        return [path_data(segments, precision) for segments in self.synthesize(paths)]

    def analyze(self, paths: list[Path]) -> DesignStats:
        """Synthesize the design in grid space and collect statistics.

        Track length is reported in inches using the board spacing. Each
        call replaces the synthesis statistics of the previous one; fragments
        skipped by ``load`` are kept.

        Args:
            paths: Design paths

        Returns:
            Statistics including any fragments skipped by ``load``
        """
        self.design_logger.reset_synthesis()
        tolerance = self.config.geometry.flatten_tolerance
        total_grid_units = 0.0

        for number, (path, segments) in enumerate(
            zip(paths, self.synthesize(paths, identity_transform)), start=1
        ):
            self.design_logger.log_path_synthesized(
                path_number=number,
                point_count=len(path.points),
                kinds=[seg.kind.tag for seg in segments],
                closed=path.is_closed,
            )
            total_grid_units += track_length(segments, tolerance)

        self.design_logger.log_track_length(total_grid_units * self.config.board.spacing_inches)
        stats = self.design_logger.stats
        self.logger.info(
            "Design analyzed",
            paths=stats.path_count,
            segments=stats.segment_count,
            skipped=stats.skipped_count,
        )
        return stats

    @property
    def stats(self) -> DesignStats:
        """Statistics gathered so far."""
        return self.design_logger.stats
