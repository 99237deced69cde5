"""Synthetic pointer traces.

Generates the pointer samples a learner tracing perfectly would produce:
press at each stroke's start, follow the target point one step at a time,
release at the end. Optional jitter adds bounded noise for demos.
"""

import math
import random
from collections.abc import Iterator

from glyphtrace.config import TracingConfig
from glyphtrace.domain import GlyphDefinition, Point
from glyphtrace.io.samples import PointerSample


def synthesize_trace(
    glyph: GlyphDefinition,
    config: TracingConfig | None = None,
    jitter: float = 0.0,
    seed: int | None = None,
) -> Iterator[PointerSample]:
    """Yield pointer samples that trace a glyph stroke by stroke.

    Each sample sits at the point the engine will be expecting, so without
    jitter every sample advances progress by one step.

    Args:
        glyph: Glyph to trace
        config: Tracing settings providing the step (defaults if None)
        jitter: Maximum random offset of each sample from the target
        seed: Seed for the jitter's random generator

    Yields:
        Pointer samples: down, moves, up for every stroke in order
    """
    config = config or TracingConfig()
    rng = random.Random(seed)

    def wobble(p: Point) -> Point:
        if jitter <= 0.0:
            return p
        angle = rng.uniform(0.0, 2 * math.pi)
        radius = rng.uniform(0.0, jitter)
        return Point(p.x + radius * math.cos(angle), p.y + radius * math.sin(angle))

    for curve in glyph.strokes:
        length = curve.length()
        steps = math.ceil(length / config.step)

        yield PointerSample.down(wobble(curve.start_point))
        progress = config.step
        for _ in range(steps - 1):
            yield PointerSample.move(wobble(curve.point_at(progress)))
            progress += config.step
        yield PointerSample.up()
