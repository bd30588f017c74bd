"""Utility functions for bwmesh.

This module provides utility functions including:

- Logging setup and configuration
- Meshing statistics collection
"""

from bwmesh.utils.logging import (
    MeshingLogger,
    MeshingStats,
    configure_logging,
)

__all__ = [
    "MeshingLogger",
    "MeshingStats",
    "configure_logging",
]
