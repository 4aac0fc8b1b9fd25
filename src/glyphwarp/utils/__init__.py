"""Utility functions for glyphwarp.

This module provides utility functions including:

- Logging setup and configuration
- Arrangement and batch run statistics tracking
"""

from glyphwarp.utils.logging import (
    ArrangementLogger,
    ArrangementStats,
    WarpStats,
    configure_logging,
)

__all__ = [
    "ArrangementLogger",
    "ArrangementStats",
    "WarpStats",
    "configure_logging",
]
