"""Exception hierarchy for Glyphtrace."""


class GlyphTraceError(Exception):
    """Base exception for all Glyphtrace errors."""

    pass


class ConfigurationError(GlyphTraceError):
    """Malformed glyph or stroke definitions.

    Fatal to the affected glyph only; the rest of the catalog stays usable.
    """

    pass


class StrokeParseError(ConfigurationError):
    """A stroke's path data could not be parsed into a curve."""

    def __init__(self, path_data: str, reason: str) -> None:
        self.path_data = path_data
        self.reason = reason
        super().__init__(f"Invalid stroke path '{path_data}': {reason}")


class GlyphDefinitionError(ConfigurationError):
    """A glyph definition is unusable."""

    def __init__(self, glyph_id: str, reason: str) -> None:
        self.glyph_id = glyph_id
        self.reason = reason
        super().__init__(f"Invalid glyph '{glyph_id}': {reason}")


class EmptyGlyphError(GlyphDefinitionError):
    """Glyph has no strokes to trace."""

    def __init__(self, glyph_id: str) -> None:
        super().__init__(glyph_id, "glyph has no strokes")


class CatalogError(GlyphTraceError):
    """Errors related to the glyph catalog."""

    pass


class CatalogLoadError(CatalogError):
    """Error loading a catalog file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load catalog '{path}': {reason}")


class GlyphNotFoundError(CatalogError):
    """Requested glyph not found in the catalog."""

    def __init__(self, glyph_id: str) -> None:
        self.glyph_id = glyph_id
        super().__init__(f"Glyph '{glyph_id}' not found in catalog")


class SampleFileError(GlyphTraceError):
    """Error reading a pointer sample file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read samples '{path}': {reason}")
