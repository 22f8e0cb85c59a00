"""Logging utilities for linetrack."""

import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class DesignStats:
    """Statistics from synthesizing a design."""

    path_count: int = 0
    closed_path_count: int = 0
    segment_count: int = 0
    skipped_count: int = 0
    kind_counts: Counter[str] = field(default_factory=Counter)
    skipped: list[tuple[str, str]] = field(default_factory=list)
    track_length_inches: float = 0.0

    @property
    def arc_count(self) -> int:
        """Number of arc segments of either sense."""
        return self.kind_counts["A+"] + self.kind_counts["A-"]


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_linetrack", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._linetrack = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    # Console output goes to stderr so netlists on stdout stay clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel("ERROR" if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    console_handler._linetrack = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("linetrack")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class DesignLogger:
    """Logger for tracking design synthesis and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = DesignStats()

    def log_fragment_skipped(self, fragment: str, reason: str) -> None:
        """Log a design fragment the decoder could not use."""
        self._logger.warning("Design fragment skipped", fragment=fragment, reason=reason)
        self._stats.skipped_count += 1
        self._stats.skipped.append((fragment, reason))

    def log_path_synthesized(
        self,
        path_number: int,
        point_count: int,
        kinds: list[str],
        closed: bool,
    ) -> None:
        """Log one synthesized path."""
        self._logger.debug(
            "Path synthesized",
            path=path_number,
            points=point_count,
            segments=len(kinds),
            closed=closed,
        )
        self._stats.path_count += 1
        self._stats.segment_count += len(kinds)
        self._stats.kind_counts.update(kinds)
        if closed:
            self._stats.closed_path_count += 1

    def log_track_length(self, length_inches: float) -> None:
        """Record the total track length."""
        self._stats.track_length_inches += length_inches
        self._logger.debug("Track length", inches=round(length_inches, 2))

    def reset_synthesis(self) -> None:
        """Clear path, segment and length statistics, keeping decode skips."""
        self._stats.path_count = 0
        self._stats.closed_path_count = 0
        self._stats.segment_count = 0
        self._stats.kind_counts.clear()
        self._stats.track_length_inches = 0.0

    @property
    def stats(self) -> DesignStats:
        """Get current statistics."""
        return self._stats
