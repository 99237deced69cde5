"""Logging utilities for Glyphtrace."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class TracingStats:
    """Statistics from tracing sessions."""

    samples: int = 0
    ignored_samples: int = 0
    advances: int = 0
    off_path_samples: int = 0
    strokes_completed: int = 0
    glyphs_started: int = 0
    glyphs_completed: int = 0

    @property
    def accuracy(self) -> float:
        """Share of evaluated samples that stayed within tolerance."""
        evaluated = self.samples - self.ignored_samples
        if evaluated <= 0:
            return 0.0
        return (evaluated - self.off_path_samples) / evaluated


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphtrace")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class SessionLogger:
    """Logger for tracing events and running statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = TracingStats()

    def log_glyph_start(self, glyph_id: str, stroke_count: int, attempt: int) -> None:
        """Log the start of a tracing attempt."""
        self._logger.debug("Tracing started", glyph=glyph_id, strokes=stroke_count, attempt=attempt)
        self._stats.glyphs_started += 1

    def log_sample(self, ignored: bool = False) -> None:
        """Count a pointer sample."""
        self._stats.samples += 1
        if ignored:
            self._stats.ignored_samples += 1

    def log_advance(self) -> None:
        """Count a progress advance."""
        self._stats.advances += 1

    def log_off_path(self, glyph_id: str, stroke_index: int, distance: float) -> None:
        """Log a sample beyond tolerance."""
        self._logger.debug(
            "Pointer off path",
            glyph=glyph_id,
            stroke=stroke_index,
            distance=round(distance, 2),
        )
        self._stats.off_path_samples += 1

    def log_stroke_complete(self, glyph_id: str, stroke_index: int, length: float) -> None:
        """Log a finished stroke."""
        self._logger.info(
            "Stroke traced",
            glyph=glyph_id,
            stroke=stroke_index,
            length=round(length, 2),
        )
        self._stats.strokes_completed += 1

    def log_glyph_complete(self, glyph_id: str, attempt: int) -> None:
        """Log a fully traced glyph."""
        self._logger.info("Glyph traced", glyph=glyph_id, attempt=attempt)
        self._stats.glyphs_completed += 1

    def log_stale_completion(self, glyph_id: str, attempt: int) -> None:
        """Log a deferred completion dropped because the session moved on."""
        self._logger.debug("Stale completion dropped", glyph=glyph_id, attempt=attempt)

    def log_subscriber_error(self, event: str, error: Exception) -> None:
        """Log an exception raised by an event subscriber."""
        self._logger.error(
            "Event subscriber failed",
            event=event,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> TracingStats:
        """Get current tracing statistics."""
        return self._stats
