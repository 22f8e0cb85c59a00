"""Utility functions for linetrack.

This module provides utility functions including:

- Logging setup and configuration
- Design statistics tracking
"""

from linetrack.utils.logging import (
    DesignLogger,
    DesignStats,
    configure_logging,
)

__all__ = [
    "DesignLogger",
    "DesignStats",
    "configure_logging",
]
