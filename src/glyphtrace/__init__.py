"""Glyphtrace - Stroke-by-stroke handwriting tracing engine.

Glyphtrace guides a learner through writing a glyph one stroke at a time. Each
stroke is a curve in a normalized 0-100 square; pointer samples are accepted
only while they stay near the expected point on the curve, and progress
advances along the stroke until the whole glyph is traced.

Example:
    $ glyphtrace demo ka

This replays an ideal trace of the Marathi letter "क" through the engine.
"""

__version__ = "0.1.0"
__author__ = "Glyphtrace Developers"

__all__ = ["__author__", "__version__"]
