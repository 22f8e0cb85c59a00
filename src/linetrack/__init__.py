"""Linetrack - Curve synthesis for line-follower track boards.

Linetrack turns a path of integer grid points into a tangent-continuous track
made of horizontal and vertical lines, quarter-circle arcs and cubic splines,
and describes the same track as a fixed-width netlist.

Example:
    $ linetrack netlist "?g=262A1O"

This prints one netlist row per segment of every path in the design.
"""

__version__ = "0.1.0"
__author__ = "Linetrack contributors"

__all__ = ["__author__", "__version__"]
