"""Utility functions for pathdata.

This module provides logging setup and encoding statistics.
"""

from pathdata.utils.logging import (
    EncodingLogger,
    EncodingStats,
    configure_logging,
)

__all__ = [
    "EncodingLogger",
    "EncodingStats",
    "configure_logging",
]
