"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from glyphtrace.core import RenderState
from glyphtrace.domain import GlyphDefinition, SessionSnapshot, StrokeStatus
from glyphtrace.io import RejectedEntry
from glyphtrace.utils import TracingStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_STATUS_STYLE = {
    StrokeStatus.COMPLETE: ("green", SYM_OK),
    StrokeStatus.IN_PROGRESS: ("yellow", SYM_STEP),
    StrokeStatus.NOT_STARTED: ("dim", SYM_DOT),
}


def create_progress() -> Progress:
    """Create a rich progress bar for sample replay.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphtrace[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_catalog(glyphs: list[GlyphDefinition], verbose: bool) -> None:
    """Print the selectable glyphs.

    Args:
        glyphs: Glyphs in display order
        verbose: Whether to include stroke lengths
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("id")
    table.add_column("glyph")
    table.add_column("category")
    table.add_column("strokes", justify="right")
    if verbose:
        table.add_column("length", justify="right")

    for glyph in glyphs:
        row = [glyph.id, glyph.display_label, glyph.category or "-", str(glyph.stroke_count)]
        if verbose:
            row.append(f"{glyph.total_length():.1f}")
        table.add_row(*row)

    console.print(table)
    console.print(f"\n  [green]{len(glyphs)}[/green] glyphs")


def print_rejected(rejected: tuple[RejectedEntry, ...]) -> None:
    """Print catalog entries excluded during loading.

    Args:
        rejected: Rejected entries
    """
    if not rejected:
        return
    console.print(f"  [red]{len(rejected)}[/red] entries skipped")
    for entry in rejected:
        line = Text(f"  {SYM_ERR} ", style="red")
        line.append(entry.glyph_id, style="bold")
        line.append(f" {SYM_DOT} {entry.reason}")
        console.print(line)


def print_glyph_detail(glyph: GlyphDefinition) -> None:
    """Print a glyph's strokes with their lengths and start markers.

    Args:
        glyph: Glyph to describe
    """
    console.print(
        f"\n[bold]{glyph.display_label}[/bold] ({glyph.id}) {SYM_DOT} "
        f"{glyph.category or 'uncategorized'} {SYM_DOT} says \"{glyph.phoneme}\""
    )
    for i, stroke in enumerate(glyph.strokes, start=1):
        start = stroke.start_point
        line = Text(f"  {i}. ")
        line.append(f"start ({start.x:g}, {start.y:g})")
        line.append(f" {SYM_DOT} length {stroke.length():.1f}")
        console.print(line)
        console.print(Text(f"     {stroke.path_data}", style="dim"))


def print_render_state(state: RenderState) -> None:
    """Print per-stroke tracing progress.

    Args:
        state: Render state of the session
    """
    for overlay in state.strokes:
        style, symbol = _STATUS_STYLE[overlay.status]
        percent = 100.0 * overlay.drawn_length / overlay.length if overlay.length else 0.0
        console.print(
            f"  [{style}]{symbol}[/{style}] stroke {overlay.index + 1} "
            f"{SYM_DOT} {overlay.drawn_length:.1f}/{overlay.length:.1f} ({percent:.0f}%)"
        )
    if state.guide_marker is not None:
        console.print(
            f"  next point ({state.guide_marker.x:.1f}, {state.guide_marker.y:.1f})"
        )


def print_trace_summary(snapshot: SessionSnapshot, stats: TracingStats) -> None:
    """Print the outcome of a replay.

    Args:
        snapshot: Final session state
        stats: Engine statistics for the replay
    """
    if snapshot.is_complete:
        console.print(f"\n[bold green]{SYM_OK} Traced[/bold green] {snapshot.glyph.display_label}")
    else:
        console.print(
            f"\n[bold yellow]{SYM_DOT} Incomplete[/bold yellow] "
            f"stroke {min(snapshot.stroke_index + 1, len(snapshot.glyph.strokes))}"
            f" of {len(snapshot.glyph.strokes)}"
        )

    off_style = "red" if stats.off_path_samples > 0 else "green"
    console.print(
        f"  {stats.samples} samples {SYM_DOT} {stats.advances} advances {SYM_DOT} "
        f"[{off_style}]{stats.off_path_samples} off path[/{off_style}] {SYM_DOT} "
        f"{stats.accuracy * 100:.0f}% on path"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
