"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages. Machine-readable output (netlists,
path data) is printed plainly so it can be piped.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from linetrack.core.geometry import heading_degrees
from linetrack.domain import Segment
from linetrack.utils import DesignStats

console = Console()
err_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Linetrack[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_plain(text: str) -> None:
    """Print text without markup or highlighting."""
    console.print(Text(text), highlight=False, soft_wrap=True)


def segment_table(path_number: int, segments: list[Segment]) -> Table:
    """Build a table describing the segments of one path.

    Args:
        path_number: 1-based path number for the title
        segments: Segments synthesized in grid space

    Returns:
        Rich table
    """
    table = Table(title=f"Path {path_number}", title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Entry°", justify="right")
    table.add_column("Exit°", justify="right")
    table.add_column("Arc center", justify="right")

    for seg in segments:
        center = ""
        if seg.arc is not None:
            center = f"({seg.arc.center.x:g}, {seg.arc.center.y:g}) r={seg.arc.radius:g}"
        table.add_row(
            str(seg.index + 1),
            seg.kind.tag,
            f"({seg.grid_start.x}, {seg.grid_start.y})",
            f"({seg.grid_end.x}, {seg.grid_end.y})",
            str(heading_degrees(seg.entry_tangent)),
            str(heading_degrees(seg.exit_tangent)),
            center,
        )
    return table


def print_stats(stats: DesignStats) -> None:
    """Print a design summary.

    Args:
        stats: Statistics from the processor
    """
    console.print(f"\n[bold green]{SYM_OK} Design[/bold green]")
    console.print(
        f"  {stats.path_count} paths {SYM_DOT} {stats.closed_path_count} closed "
        f"{SYM_DOT} {stats.segment_count} segments"
    )
    kinds = f" {SYM_DOT} ".join(f"{tag} {count}" for tag, count in sorted(stats.kind_counts.items()))
    if kinds:
        console.print(f"  {kinds}")
    console.print(f"  {stats.track_length_inches:.1f} in of track")

    if stats.skipped_count:
        console.print(f"  [yellow]{stats.skipped_count} fragments skipped[/yellow]")
        for fragment, reason in stats.skipped[:10]:
            line = Text("    ")
            line.append(fragment, style="bold")
            line.append(f" {SYM_DOT} {reason}")
            console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        err_console.print(f"  {details}")
