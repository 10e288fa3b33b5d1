"""Command-line interface for pathdata.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Encode JSON command documents
- Encode glyph outlines from fonts
- Optional encoding summary
"""

from pathdata.cli.app import cli, main

__all__ = ["cli", "main"]
