"""Stroke tracing engine.

The engine owns the rules of tracing: where the pointer is expected to be, how
far off it may stray, how much progress one good sample earns, and when a
stroke or the whole glyph is done. All state lives in a TracingSession; the
engine mutates it once per pointer event and reports what changed as a
SessionDelta. Presentation concerns (pronunciation, particle bursts, success
overlays) subscribe to engine events instead of living in the engine.

The expected position is the point on the active stroke at the current arc
length, not the nearest point on the curve. Learners must follow the stroke
from its start in order; tracing ahead or cutting corners does not count.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import structlog

from glyphtrace.config import TracingConfig
from glyphtrace.core.geometry import distance
from glyphtrace.core.scheduler import ImmediateScheduler, Scheduler
from glyphtrace.domain import (
    GlyphDefinition,
    Point,
    SessionDelta,
    SessionSnapshot,
    TracingSession,
)
from glyphtrace.exceptions import EmptyGlyphError
from glyphtrace.utils import SessionLogger, TracingStats


class EngineEvent(str, Enum):
    """Notifications the presentation layer can subscribe to."""

    GLYPH_SELECTED = "glyph_selected"
    STROKE_ADVANCED = "stroke_advanced"
    STROKE_COMPLETED = "stroke_completed"
    OFF_PATH = "off_path"
    GLYPH_COMPLETED = "glyph_completed"
    SESSION_RESET = "session_reset"


@dataclass(frozen=True)
class TracingEvent:
    """Payload delivered to event subscribers.

    Attributes:
        kind: Which event fired
        snapshot: Session state right after the change
        point: Pointer position that caused the event, if any
        stroke_index: Stroke the event refers to, if any
    """

    kind: EngineEvent
    snapshot: SessionSnapshot
    point: Point | None = None
    stroke_index: int | None = None


EventCallback = Callable[[TracingEvent], None]


class TracingEngine:
    """Drives tracing sessions from pointer events.

    Example:
        engine = TracingEngine()
        engine.subscribe(EngineEvent.GLYPH_COMPLETED, show_success)
        session = engine.begin(catalog.lookup("ka"))
        engine.on_pointer_down(session, Point(50, 25))
        engine.on_pointer_move(session, Point(50, 27))
        engine.on_pointer_up(session)
    """

    def __init__(
        self,
        config: TracingConfig | None = None,
        scheduler: Scheduler | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Tolerance, step and completion delay (defaults if None)
            scheduler: Runs the deferred completion (immediate if None)
            logger: Structured logger (module logger if None)
        """
        self.config = config or TracingConfig()
        self.scheduler: Scheduler = scheduler or ImmediateScheduler()
        self.logger = logger or structlog.get_logger("glyphtrace.engine")
        self.session_logger = SessionLogger(self.logger)
        self._subscribers: dict[EngineEvent, list[EventCallback]] = {
            event: [] for event in EngineEvent
        }

    @property
    def stats(self) -> TracingStats:
        """Running statistics across every session of this engine."""
        return self.session_logger.stats

    def subscribe(self, event: EngineEvent, callback: EventCallback) -> None:
        """Register a callback for an event."""
        self._subscribers[event].append(callback)

    def unsubscribe(self, event: EngineEvent, callback: EventCallback) -> None:
        """Remove a previously registered callback (no-op if absent)."""
        if callback in self._subscribers[event]:
            self._subscribers[event].remove(callback)

    def begin(self, glyph: GlyphDefinition) -> TracingSession:
        """Start tracing a glyph.

        Args:
            glyph: Glyph to trace

        Returns:
            New session with all progress at zero

        Raises:
            EmptyGlyphError: If the glyph has no strokes
        """
        if not glyph.strokes:
            raise EmptyGlyphError(glyph.id)

        session = TracingSession(glyph=glyph)
        session.rewind()

        self.session_logger.log_glyph_start(glyph.id, len(glyph.strokes), session.attempt)
        self._emit(EngineEvent.GLYPH_SELECTED, session)
        return session

    def reset(self, session: TracingSession) -> TracingSession:
        """Rewind a session to the start of its glyph.

        Any completion still waiting on the scheduler is discarded.

        Args:
            session: Session to rewind in place

        Returns:
            The same session, zeroed
        """
        session.rewind()
        self.session_logger.log_glyph_start(
            session.glyph.id, session.stroke_count, session.attempt
        )
        self._emit(EngineEvent.SESSION_RESET, session)
        return session

    def on_pointer_down(self, session: TracingSession, point: Point) -> SessionDelta:
        """Press the pointer and evaluate its position as the first sample.

        Ignored once every stroke has been traced.
        """
        if session.is_complete or session.all_strokes_traced:
            self.session_logger.log_sample(ignored=True)
            return self._unchanged(session, ignored=True)

        session.is_pointer_down = True
        return self.on_pointer_move(session, point)

    def on_pointer_move(self, session: TracingSession, point: Point) -> SessionDelta:
        """Evaluate one pointer sample against the active stroke.

        A sample at or beyond the tolerance only raises the off-path flag.
        A sample inside the tolerance clears the flag, and one inside the
        tighter inner band also advances the stroke by one step, clamped to
        the stroke's length. Reaching the length moves on to the next stroke;
        after the last stroke the glyph is marked complete via the scheduler.

        Args:
            session: Session to update
            point: Pointer position in the normalized space

        Returns:
            Description of the change
        """
        if not session.is_pointer_down or session.is_complete or session.all_strokes_traced:
            self.session_logger.log_sample(ignored=True)
            return self._unchanged(session, ignored=True)

        self.session_logger.log_sample()

        index = session.stroke_index
        curve = session.glyph.strokes[index]
        before = session.stroke_progress[index]
        d = distance(point, curve.point_at(before))

        if d >= self.config.tolerance:
            was_off_path = session.is_off_path
            session.is_off_path = True
            self.session_logger.log_off_path(session.glyph.id, index, d)
            if not was_off_path:
                self._emit(EngineEvent.OFF_PATH, session, point=point, stroke_index=index)
            return self._unchanged(session, measured=d)

        session.is_off_path = False
        if d >= self.config.inner_tolerance:
            return self._unchanged(session, measured=d)

        length = curve.length()
        after = min(before + self.config.step, length)
        session.stroke_progress[index] = after
        self.session_logger.log_advance()

        stroke_completed = after >= length
        if stroke_completed:
            session.stroke_index = index + 1

        self._emit(EngineEvent.STROKE_ADVANCED, session, point=point, stroke_index=index)

        completion_scheduled = False
        if stroke_completed:
            self.session_logger.log_stroke_complete(session.glyph.id, index, length)
            self._emit(EngineEvent.STROKE_COMPLETED, session, point=point, stroke_index=index)
            if session.all_strokes_traced:
                completion_scheduled = True
                self._schedule_completion(session)

        return SessionDelta(
            stroke_index_before=index,
            stroke_index_after=session.stroke_index,
            progress_before=before,
            progress_after=after,
            distance=d,
            is_off_path=False,
            advanced=True,
            stroke_completed=stroke_completed,
            completion_scheduled=completion_scheduled,
        )

    def on_pointer_up(self, session: TracingSession) -> SessionDelta:
        """Release the pointer.

        Clears the off-path indicator; progress is kept.
        """
        session.is_pointer_down = False
        session.is_off_path = False
        return self._unchanged(session)

    def _schedule_completion(self, session: TracingSession) -> None:
        attempt = session.attempt

        def complete() -> None:
            if session.attempt != attempt or session.is_complete:
                self.session_logger.log_stale_completion(session.glyph.id, attempt)
                return
            session.is_complete = True
            self.session_logger.log_glyph_complete(session.glyph.id, attempt)
            self._emit(EngineEvent.GLYPH_COMPLETED, session)

        self.scheduler.call_later(self.config.completion_delay, complete)

    def _unchanged(
        self,
        session: TracingSession,
        measured: float | None = None,
        ignored: bool = False,
    ) -> SessionDelta:
        progress = session.current_progress
        return SessionDelta(
            stroke_index_before=session.stroke_index,
            stroke_index_after=session.stroke_index,
            progress_before=progress,
            progress_after=progress,
            distance=measured,
            is_off_path=session.is_off_path,
            ignored=ignored,
        )

    def _emit(
        self,
        kind: EngineEvent,
        session: TracingSession,
        point: Point | None = None,
        stroke_index: int | None = None,
    ) -> None:
        subscribers = self._subscribers[kind]
        if not subscribers:
            return

        event = TracingEvent(kind, session.snapshot(), point, stroke_index)
        for callback in list(subscribers):
            try:
                callback(event)
            except Exception as e:
                self.session_logger.log_subscriber_error(kind.value, e)
