"""Glyph definitions.

A glyph definition is the unit the engine traces: a character with its
display label, spoken phoneme and the ordered strokes that draw it.
"""

from dataclasses import dataclass
from typing import Any

from glyphtrace.domain.curve import CurveSpec


@dataclass(frozen=True)
class GlyphDefinition:
    """A traceable glyph.

    Stroke order is the required tracing order and never changes for the
    lifetime of the definition.

    Attributes:
        id: Catalog identifier (e.g., "ka")
        display_label: Character shown to the learner (e.g., "क")
        phoneme: Text handed to pronunciation playback
        strokes: Curves in tracing order
        category: Catalog grouping such as "vowel" or "consonant"
    """

    id: str
    display_label: str
    phoneme: str
    strokes: tuple[CurveSpec, ...]
    category: str = ""

    @property
    def stroke_count(self) -> int:
        """Number of strokes in the glyph."""
        return len(self.strokes)

    def total_length(self) -> float:
        """Sum of all stroke arc lengths.

        Returns:
            Total arc length in normalized units
        """
        return sum(stroke.length() for stroke in self.strokes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the catalog entry format.

        Returns:
            Dictionary with id, label, phoneme, strokes and category fields
        """
        return {
            "id": self.id,
            "label": self.display_label,
            "phoneme": self.phoneme,
            "strokes": [stroke.path_data for stroke in self.strokes],
            "category": self.category,
        }
