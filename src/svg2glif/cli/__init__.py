"""Command-line interface for svg2glif.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Single file conversion with codepoint and glyph name options
- Parallel batch conversion into a glyphs directory
- Verbose/quiet output modes
- Detailed error reporting
"""

from svg2glif.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
