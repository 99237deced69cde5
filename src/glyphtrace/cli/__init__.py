"""Command-line interface for glyphtrace.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Catalog listing with skipped-entry reporting
- Stroke details for a glyph
- Replay of recorded pointer samples
- Demo traces synthesized from the glyph's own strokes
"""

from glyphtrace.cli.app import cli, main

__all__ = ["cli", "main"]
