"""Tracing session state.

A TracingSession holds everything that changes while a learner traces one
glyph. The engine is the only writer; renderers read immutable snapshots.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from glyphtrace.domain.curve import CurveSpec
from glyphtrace.domain.glyph import GlyphDefinition
from glyphtrace.domain.point import Point


class StrokeStatus(Enum):
    """Tracing status of a single stroke."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    COMPLETE = auto()


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only copy of a session for the presentation layer.

    Attributes:
        glyph: The glyph being traced
        stroke_index: Active stroke, equal to the stroke count once all are traced
        stroke_progress: Arc length traced on each stroke
        is_pointer_down: Whether the pointer is currently pressed
        is_off_path: Whether the last sample strayed beyond tolerance
        is_complete: Whether the glyph has been fully traced
    """

    glyph: GlyphDefinition
    stroke_index: int
    stroke_progress: tuple[float, ...]
    is_pointer_down: bool
    is_off_path: bool
    is_complete: bool


@dataclass(frozen=True, slots=True)
class SessionDelta:
    """What a single pointer event changed.

    Attributes:
        stroke_index_before: Active stroke before the event
        stroke_index_after: Active stroke after the event
        progress_before: Progress of the stroke active before the event
        progress_after: Progress of that same stroke after the event
        distance: Distance from the pointer to the target point, if evaluated
        is_off_path: Off-path flag after the event
        advanced: Whether progress increased
        stroke_completed: Whether the event finished a stroke
        completion_scheduled: Whether the event finished the last stroke
        ignored: Whether the event was a no-op (pointer up, session complete)
    """

    stroke_index_before: int
    stroke_index_after: int
    progress_before: float
    progress_after: float
    distance: float | None = None
    is_off_path: bool = False
    advanced: bool = False
    stroke_completed: bool = False
    completion_scheduled: bool = False
    ignored: bool = False

    @property
    def progress_gained(self) -> float:
        """Arc length gained by the event."""
        return self.progress_after - self.progress_before


@dataclass
class TracingSession:
    """Mutable state for one attempt at tracing a glyph.

    Attributes:
        glyph: Glyph being traced (shared, read-only)
        stroke_index: Index of the active stroke in [0, stroke count]
        stroke_progress: Traced arc length per stroke
        is_pointer_down: Whether the pointer is pressed
        is_off_path: Whether the pointer strayed beyond tolerance
        is_complete: Whether the glyph has been completed
        attempt: Incremented on every begin/reset; stale deferred work checks it
    """

    glyph: GlyphDefinition
    stroke_index: int = 0
    stroke_progress: list[float] = field(default_factory=list)
    is_pointer_down: bool = False
    is_off_path: bool = False
    is_complete: bool = False
    attempt: int = 0

    def __post_init__(self) -> None:
        if not self.stroke_progress:
            self.stroke_progress = [0.0] * len(self.glyph.strokes)

    @property
    def stroke_count(self) -> int:
        """Number of strokes in the glyph."""
        return len(self.glyph.strokes)

    @property
    def all_strokes_traced(self) -> bool:
        """True once the engine has moved past the last stroke."""
        return self.stroke_index >= self.stroke_count

    @property
    def current_stroke(self) -> CurveSpec | None:
        """The stroke being traced, or None once all strokes are traced."""
        if self.all_strokes_traced:
            return None
        return self.glyph.strokes[self.stroke_index]

    @property
    def current_progress(self) -> float:
        """Progress of the active stroke (0.0 once all strokes are traced)."""
        if self.all_strokes_traced:
            return 0.0
        return self.stroke_progress[self.stroke_index]

    def target_point(self) -> Point | None:
        """Point on the active stroke the pointer is expected to be near.

        Returns:
            Target point, or None once all strokes are traced
        """
        stroke = self.current_stroke
        if stroke is None:
            return None
        return stroke.point_at(self.current_progress)

    def stroke_status(self, index: int) -> StrokeStatus:
        """Tracing status of the stroke at ``index``.

        Args:
            index: Stroke index

        Returns:
            Stroke status
        """
        if index < self.stroke_index:
            return StrokeStatus.COMPLETE
        if index == self.stroke_index and self.stroke_progress[index] > 0.0:
            return StrokeStatus.IN_PROGRESS
        return StrokeStatus.NOT_STARTED

    def rewind(self) -> None:
        """Zero all progress and clear every flag, starting a new attempt."""
        self.stroke_index = 0
        self.stroke_progress = [0.0] * self.stroke_count
        self.is_pointer_down = False
        self.is_off_path = False
        self.is_complete = False
        self.attempt += 1

    def snapshot(self) -> SessionSnapshot:
        """Create a read-only copy of the current state."""
        return SessionSnapshot(
            glyph=self.glyph,
            stroke_index=self.stroke_index,
            stroke_progress=tuple(self.stroke_progress),
            is_pointer_down=self.is_pointer_down,
            is_off_path=self.is_off_path,
            is_complete=self.is_complete,
        )
