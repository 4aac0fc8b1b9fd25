"""Command-line interface for glyphwarp.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Corner moves and vertex insertions from the command line
- JSON edit scripts
- Verbose/quiet output modes
- Detailed error reporting
"""

from glyphwarp.cli.app import cli, main

__all__ = ["cli", "main"]
