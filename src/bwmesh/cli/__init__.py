"""Command-line interface for bwmesh.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Boundary graph summary and triangulation switches
- Verbose/quiet output modes
- Dry-run mode that stops before triangulation
- Detailed error reporting
"""

from bwmesh.cli.app import cli, main

__all__ = ["cli", "main"]
