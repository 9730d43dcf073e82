"""Command-line interface for emojimask.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Cloud Vision or JSON-file face sources
- Explicit no-faces policy
- Verbose/quiet output modes
- Detailed error reporting
"""

from emojimask.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
