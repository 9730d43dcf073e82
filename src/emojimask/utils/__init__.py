"""Utility functions for emojimask.

This module provides utility functions including:

- Logging setup and configuration
- Per-run masking statistics
"""

from emojimask.utils.logging import (
    MaskingLogger,
    MaskingStats,
    configure_logging,
)

__all__ = [
    "MaskingLogger",
    "MaskingStats",
    "configure_logging",
]
