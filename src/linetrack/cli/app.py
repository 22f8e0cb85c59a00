"""CLI application entry point for linetrack.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from linetrack import __version__
from linetrack.cli.output import (
    SYM_OK,
    console,
    print_error,
    print_header,
    print_plain,
    print_stats,
    print_step,
    segment_table,
)
from linetrack.config import BoardConfig, LinetrackSettings, LoggingConfig, RenderConfig
from linetrack.core import DesignProcessor, identity_transform
from linetrack.domain import GridPoint, Path as TrackPath
from linetrack.exceptions import LinetrackError
from linetrack.io import encode_design

# Create the Typer app
app = typer.Typer(
    name="linetrack",
    help="Synthesize line-follower tracks and netlists from grid point designs.",
    add_completion=False,
    no_args_is_help=True,
)

DesignArg = Annotated[
    str,
    typer.Argument(
        help="Encoded design, '?g=' query or full share URL",
        show_default=False,
    ),
]
GridPointsOpt = Annotated[
    int,
    typer.Option(
        "--grid-points",
        "-g",
        help="Grid points across the board",
        min=2,
        max=62,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Linetrack[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Synthesize line-follower tracks and netlists from grid point designs."""
    ctx.obj = LoggingConfig(log_file=log_file, log_level=log_level.upper())


def _processor(ctx: typer.Context, grid_points: int, render: RenderConfig | None = None) -> DesignProcessor:
    logging_config = ctx.obj if isinstance(ctx.obj, LoggingConfig) else LoggingConfig()
    settings = LinetrackSettings(
        board=BoardConfig(grid_points=grid_points),
        render=render or RenderConfig(),
        logging=logging_config,
    )
    return DesignProcessor(settings)


@app.command()
def netlist(
    ctx: typer.Context,
    design: DesignArg,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the netlist to a file instead of stdout",
        ),
    ] = None,
    grid_points: GridPointsOpt = 25,
) -> None:
    """Print the fixed-width netlist of a design.

    Example:
        linetrack netlist "?g=262A1O"
    """
    try:
        processor = _processor(ctx, grid_points)
        text = processor.netlist(processor.load(design))
    except LinetrackError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output is None:
        print_plain(text)
        return

    try:
        output.write_text(text + "\n" if text else "", encoding="utf-8")
    except OSError as e:
        print_error(f"Could not write netlist: {e}")
        raise typer.Exit(code=1)
    console.print(f"[bold green]{SYM_OK}[/bold green] Netlist written to {output}")


@app.command()
def inspect(
    ctx: typer.Context,
    design: DesignArg,
    grid_points: GridPointsOpt = 25,
) -> None:
    """Show every segment of a design with tangents and arc centers."""
    print_header(__version__)

    try:
        processor = _processor(ctx, grid_points)
        print_step("Decoding design")
        paths = processor.load(design)
        print_step("Synthesizing segments")
        for number, segments in enumerate(processor.synthesize(paths, identity_transform), start=1):
            console.print(segment_table(number, segments))
        stats = processor.analyze(paths)
    except LinetrackError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_stats(stats)


@app.command("path-data")
def path_data_command(
    ctx: typer.Context,
    design: DesignArg,
    width: Annotated[float, typer.Option("--width", help="Canvas width", min=1.0)] = 800.0,
    height: Annotated[float, typer.Option("--height", help="Canvas height", min=1.0)] = 800.0,
    padding: Annotated[float, typer.Option("--padding", help="Margin around the board", min=0.0)] = 40.0,
    precision: Annotated[int, typer.Option("--precision", help="Decimal places", min=0, max=6)] = 2,
    grid_points: GridPointsOpt = 25,
) -> None:
    """Print SVG path data for each path, fitted to a canvas."""
    try:
        render = RenderConfig(width=width, height=height, padding=padding, precision=precision)
    except ValidationError as e:
        print_error("Invalid canvas", details=e.errors()[0]["msg"])
        raise typer.Exit(code=1)

    try:
        processor = _processor(ctx, grid_points, render)
        for data in processor.path_data(processor.load(design)):
            print_plain(data)
    except LinetrackError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def encode(
    points: Annotated[
        list[str],
        typer.Argument(help="Grid points as X,Y", show_default=False),
    ],
    grid_points: GridPointsOpt = 25,
) -> None:
    """Encode a single path of grid points as a design query.

    Example:
        linetrack encode 5,5 9,5 11,3
    """
    try:
        coords = [GridPoint(*(int(v) for v in p.split(","))) for p in points]
    except (TypeError, ValueError):
        print_error("Points must be written as X,Y integers", details=" ".join(points))
        raise typer.Exit(code=1)

    try:
        encoded = encode_design([TrackPath(points=coords)], BoardConfig(grid_points=grid_points))
    except LinetrackError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_plain(f"?g={encoded}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
