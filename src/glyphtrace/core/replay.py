"""Replay recorded pointer samples through the engine."""

from collections.abc import Callable, Iterable

from glyphtrace.core.engine import TracingEngine
from glyphtrace.domain import SessionDelta, TracingSession
from glyphtrace.io.samples import PointerSample, SampleKind


def replay_samples(
    engine: TracingEngine,
    session: TracingSession,
    samples: Iterable[PointerSample],
    progress_callback: Callable[[int, SessionDelta], None] | None = None,
) -> list[SessionDelta]:
    """Feed samples to the engine in order.

    Args:
        engine: Engine applying the samples
        session: Session to update
        samples: Pointer samples in arrival order
        progress_callback: Called with (samples processed, delta) after each sample

    Returns:
        One delta per sample
    """
    deltas = []
    for count, sample in enumerate(samples, start=1):
        if sample.kind is SampleKind.UP:
            delta = engine.on_pointer_up(session)
        else:
            point = sample.point
            assert point is not None
            if sample.kind is SampleKind.DOWN:
                delta = engine.on_pointer_down(session, point)
            else:
                delta = engine.on_pointer_move(session, point)
        deltas.append(delta)
        if progress_callback is not None:
            progress_callback(count, delta)
    return deltas
