"""I/O layer for glyphtrace.

This module turns authored data into domain models: stroke path strings are
parsed with fonttools' SVG path support, catalog entries are validated with
pydantic, and pointer sample files are read for replays.

Key responsibilities:
- Parse SVG path data into stroke curves
- Build and validate glyph catalogs (bundled or from JSON files)
- Read recorded pointer samples

Key classes:
- GlyphCatalog: Immutable glyph lookup table
- PointerSample: One recorded pointer event
"""

from glyphtrace.io.catalog import (
    GlyphCatalog,
    RejectedEntry,
    build_catalog,
    build_glyph,
    load_builtin_catalog,
    load_catalog,
)
from glyphtrace.io.path_parser import build_curve, parse_stroke_path
from glyphtrace.io.samples import PointerSample, SampleKind, load_samples, save_samples

__all__ = [
    "GlyphCatalog",
    "PointerSample",
    "RejectedEntry",
    "SampleKind",
    "build_catalog",
    "build_curve",
    "build_glyph",
    "load_builtin_catalog",
    "load_catalog",
    "load_samples",
    "parse_stroke_path",
    "save_samples",
]
