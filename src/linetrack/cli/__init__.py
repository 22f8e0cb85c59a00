"""Command-line interface for linetrack.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Netlist output for a shared design URL
- Segment inspection with tangents and arc centers
- SVG path data fitted to a canvas
- Point list encoding
"""

from linetrack.cli.app import cli, main

__all__ = ["cli", "main"]
