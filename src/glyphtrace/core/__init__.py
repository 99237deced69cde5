"""Core tracing algorithms for glyphtrace.

This module contains:

- Geometry operations (distance, Bezier flattening, arc lengths)
- The stroke tracing engine and its events
- Schedulers for the deferred completion transition
- Render state for presentation layers
- Synthetic traces and sample replay

Key functions:
- distance: Euclidean distance between two points
- flatten_commands: Convert stroke commands to a polyline
- cumulative_lengths: Arc length at each polyline point
- build_render_state: Describe a session for drawing
- synthesize_trace: Generate an ideal pointer trace for a glyph
- replay_samples: Feed recorded samples through an engine

Key classes:
- TracingEngine: Applies pointer events to tracing sessions
- EngineEvent / TracingEvent: Notifications for presentation layers
- ImmediateScheduler / ManualScheduler / AsyncioScheduler: Deferred callbacks
- Viewport: Device to normalized coordinate conversion
"""

from glyphtrace.core.autotrace import synthesize_trace
from glyphtrace.core.engine import EngineEvent, TracingEngine, TracingEvent
from glyphtrace.core.geometry import (
    cumulative_lengths,
    distance,
    flatten_commands,
    polyline_length,
)
from glyphtrace.core.overlay import (
    RenderState,
    StartMarker,
    StrokeOverlay,
    Viewport,
    build_render_state,
)
from glyphtrace.core.replay import replay_samples
from glyphtrace.core.scheduler import (
    AsyncioScheduler,
    ImmediateScheduler,
    ManualScheduler,
    Scheduler,
)

__all__ = [
    # Engine classes
    "EngineEvent",
    "TracingEngine",
    "TracingEvent",
    # Scheduler classes
    "AsyncioScheduler",
    "ImmediateScheduler",
    "ManualScheduler",
    "Scheduler",
    # Overlay classes
    "RenderState",
    "StartMarker",
    "StrokeOverlay",
    "Viewport",
    "build_render_state",
    # Geometry functions
    "cumulative_lengths",
    "distance",
    "flatten_commands",
    "polyline_length",
    # Traces
    "replay_samples",
    "synthesize_trace",
]
