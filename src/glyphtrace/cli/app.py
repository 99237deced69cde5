"""CLI application entry point for glyphtrace.

This module provides the main CLI interface using Typer.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from glyphtrace import __version__
from glyphtrace.cli.output import (
    console,
    create_progress,
    print_catalog,
    print_error,
    print_glyph_detail,
    print_header,
    print_rejected,
    print_render_state,
    print_step,
    print_trace_summary,
)
from glyphtrace.config import GlyphTraceSettings, LoggingConfig, TracingConfig
from glyphtrace.core import (
    ManualScheduler,
    TracingEngine,
    build_render_state,
    replay_samples,
    synthesize_trace,
)
from glyphtrace.domain import GlyphDefinition, SessionSnapshot
from glyphtrace.exceptions import (
    CatalogLoadError,
    GlyphNotFoundError,
    GlyphTraceError,
    SampleFileError,
)
from glyphtrace.io import GlyphCatalog, PointerSample, load_builtin_catalog, load_catalog, load_samples
from glyphtrace.io.samples import save_samples
from glyphtrace.utils import configure_logging

# Exit code for a replay that did not finish the glyph
EXIT_INCOMPLETE = 2

# Create the Typer app
app = typer.Typer(
    name="glyphtrace",
    help="Trace handwriting glyphs stroke by stroke.",
    add_completion=False,
    no_args_is_help=True,
)

CatalogOption = Annotated[
    Path | None,
    typer.Option(
        "--catalog",
        "-c",
        help="JSON catalog file (default: bundled Marathi letters)",
    ),
]
ToleranceOption = Annotated[
    float,
    typer.Option(
        "--tolerance",
        "-t",
        help="Distance from the expected point that counts as off path (normalized units)",
        min=1.0,
        max=50.0,
    ),
]
StepOption = Annotated[
    float,
    typer.Option(
        "--step",
        "-s",
        help="Arc length gained per accepted sample (normalized units)",
        min=0.1,
        max=25.0,
    ),
]


@dataclass
class CliState:
    """Options shared by every command."""

    settings: GlyphTraceSettings
    quiet: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphtrace[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Trace handwriting glyphs stroke by stroke."""
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = GlyphTraceSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(settings=settings, quiet=quiet)


@app.command("list")
def list_glyphs(
    ctx: typer.Context,
    catalog_path: CatalogOption = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show total stroke length per glyph",
        ),
    ] = False,
) -> None:
    """List the glyphs available for tracing.

    Entries with malformed strokes are reported and left out.
    """
    state: CliState = ctx.obj
    catalog = _open_catalog(catalog_path, state)

    if not state.quiet:
        print_header(__version__)
        print_step("Glyphs")
    print_catalog(list(catalog), verbose=verbose)
    print_rejected(catalog.rejected)


@app.command()
def show(
    ctx: typer.Context,
    glyph_key: Annotated[
        str,
        typer.Argument(help="Glyph id or character", show_default=False),
    ],
    catalog_path: CatalogOption = None,
) -> None:
    """Show a glyph's strokes in tracing order."""
    state: CliState = ctx.obj
    catalog = _open_catalog(catalog_path, state)
    glyph = _find_glyph(catalog, glyph_key)
    print_glyph_detail(glyph)


@app.command()
def trace(
    ctx: typer.Context,
    glyph_key: Annotated[
        str,
        typer.Argument(help="Glyph id or character", show_default=False),
    ],
    samples_path: Annotated[
        Path,
        typer.Argument(help="JSON file of pointer samples", show_default=False),
    ],
    catalog_path: CatalogOption = None,
    tolerance: ToleranceOption = 12.0,
    step: StepOption = 2.5,
) -> None:
    """Replay recorded pointer samples against a glyph.

    Exits with code 2 when the samples do not finish the glyph.
    """
    state: CliState = ctx.obj
    state.settings.tracing = TracingConfig(tolerance=tolerance, step=step)
    catalog = _open_catalog(catalog_path, state)
    glyph = _find_glyph(catalog, glyph_key)

    try:
        samples = load_samples(samples_path)
    except SampleFileError as e:
        print_error(f"Could not read samples: {e.reason}")
        raise typer.Exit(code=1) from None

    snapshot = _run_trace(glyph, samples, state)
    if not snapshot.is_complete:
        raise typer.Exit(code=EXIT_INCOMPLETE)


@app.command()
def demo(
    ctx: typer.Context,
    glyph_key: Annotated[
        str,
        typer.Argument(help="Glyph id or character", show_default=False),
    ],
    catalog_path: CatalogOption = None,
    jitter: Annotated[
        float,
        typer.Option(
            "--jitter",
            "-j",
            help="Random offset added to each sample (must stay inside the inner band)",
            min=0.0,
        ),
    ] = 0.0,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for jitter"),
    ] = None,
    save: Annotated[
        Path | None,
        typer.Option("--save", help="Also write the synthesized samples to this file"),
    ] = None,
    tolerance: ToleranceOption = 12.0,
    step: StepOption = 2.5,
) -> None:
    """Trace a glyph with a synthesized ideal pointer trace."""
    state: CliState = ctx.obj
    state.settings.tracing = TracingConfig(tolerance=tolerance, step=step)

    if jitter >= state.settings.tracing.inner_tolerance:
        print_error(
            f"Jitter {jitter:g} is too large",
            details=f"It must be below {state.settings.tracing.inner_tolerance:g} "
            "for every sample to count.",
        )
        raise typer.Exit(code=1)

    catalog = _open_catalog(catalog_path, state)
    glyph = _find_glyph(catalog, glyph_key)
    samples = list(synthesize_trace(glyph, state.settings.tracing, jitter=jitter, seed=seed))

    if save is not None:
        try:
            save_samples(save, samples)
        except OSError as e:
            print_error(f"Could not save samples: {e}")
            raise typer.Exit(code=1) from None

    snapshot = _run_trace(glyph, samples, state)
    if not snapshot.is_complete:
        raise typer.Exit(code=EXIT_INCOMPLETE)


def _open_catalog(catalog_path: Path | None, state: CliState) -> GlyphCatalog:
    """Load the requested catalog, exiting with an error message on failure.

    Args:
        catalog_path: JSON catalog file, or None for the bundled catalog
        state: Shared CLI options

    Returns:
        The catalog
    """
    geometry = state.settings.geometry
    try:
        if catalog_path is None:
            return load_builtin_catalog(geometry)
        return load_catalog(catalog_path, geometry)
    except CatalogLoadError as e:
        print_error(f"Could not load catalog: {e.reason}")
        raise typer.Exit(code=1) from None


def _find_glyph(catalog: GlyphCatalog, key: str) -> GlyphDefinition:
    try:
        return catalog.find(key)
    except GlyphNotFoundError:
        ids = ", ".join(catalog.ids()[:20])
        print_error(f"Unknown glyph: {key}", details=f"Available: {ids}" if ids else None)
        raise typer.Exit(code=1) from None


def _run_trace(
    glyph: GlyphDefinition,
    samples: list[PointerSample],
    state: CliState,
) -> SessionSnapshot:
    """Replay samples through a fresh engine and report the outcome.

    Args:
        glyph: Glyph to trace
        samples: Pointer samples in order
        state: Shared CLI options

    Returns:
        Final session snapshot
    """
    scheduler = ManualScheduler()
    engine = TracingEngine(config=state.settings.tracing, scheduler=scheduler)

    try:
        session = engine.begin(glyph)

        if not state.quiet:
            print_step(f"Tracing {session.glyph.display_label} ({len(samples)} samples)")
            with create_progress() as progress:
                task_id = progress.add_task("Replaying", total=len(samples))

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                replay_samples(engine, session, samples, progress_callback=update_progress)
        else:
            replay_samples(engine, session, samples)

        # Let the deferred completion land
        scheduler.run_all()
    except GlyphTraceError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    snapshot = session.snapshot()
    if not state.quiet:
        print_render_state(build_render_state(snapshot))
    print_trace_summary(snapshot, engine.stats)
    return snapshot


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
