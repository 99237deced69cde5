"""Glyph catalog.

The catalog maps glyph identifiers to GlyphDefinitions. It is built once from
raw entries (bundled data or a JSON file) and never changes afterwards.
Entries that fail validation are configuration errors: they are recorded in
``GlyphCatalog.rejected``, logged and left out of the selectable glyphs so
one bad definition never takes the rest of the catalog down.
"""

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, Field, ValidationError

from glyphtrace.config import GeometryConfig
from glyphtrace.domain import GlyphDefinition
from glyphtrace.exceptions import (
    CatalogLoadError,
    EmptyGlyphError,
    GlyphDefinitionError,
    GlyphNotFoundError,
    StrokeParseError,
)
from glyphtrace.io.path_parser import build_curve

logger = structlog.get_logger(__name__)


class GlyphEntry(BaseModel):
    """Raw catalog entry as authored in data files."""

    id: str = Field(min_length=1, description="Catalog identifier")
    label: str = Field(min_length=1, description="Character shown to the learner")
    phoneme: str = Field(default="", description="Text for pronunciation playback")
    strokes: list[str] = Field(min_length=1, description="SVG path data per stroke, in order")
    category: str = Field(default="", description="Grouping such as vowel or consonant")


@dataclass(frozen=True)
class RejectedEntry:
    """A catalog entry that could not be turned into a glyph.

    Attributes:
        glyph_id: Identifier of the entry (or its position if it had none)
        reason: Why the entry was rejected
    """

    glyph_id: str
    reason: str


class GlyphCatalog:
    """Immutable lookup table of traceable glyphs.

    Glyphs keep the order they were authored in, which is also the order used
    for previous/next navigation.

    Example:
        catalog = load_builtin_catalog()
        glyph = catalog.lookup("ka")
        following = catalog.next_id("ka")
    """

    def __init__(
        self,
        glyphs: Iterable[GlyphDefinition] = (),
        rejected: Iterable[RejectedEntry] = (),
    ) -> None:
        """Initialize the catalog.

        Args:
            glyphs: Glyph definitions in display order
            rejected: Entries excluded during loading

        Raises:
            EmptyGlyphError: If a glyph has no strokes
            GlyphDefinitionError: If two glyphs share an identifier
        """
        self._glyphs: dict[str, GlyphDefinition] = {}
        for glyph in glyphs:
            if not glyph.strokes:
                raise EmptyGlyphError(glyph.id)
            if glyph.id in self._glyphs:
                raise GlyphDefinitionError(glyph.id, "duplicate glyph id")
            self._glyphs[glyph.id] = glyph
        self._order = list(self._glyphs)
        self._rejected = tuple(rejected)

    def lookup(self, glyph_id: str) -> GlyphDefinition:
        """Get a glyph by identifier.

        Args:
            glyph_id: Catalog identifier

        Returns:
            The glyph definition

        Raises:
            GlyphNotFoundError: If no selectable glyph has this identifier
        """
        try:
            return self._glyphs[glyph_id]
        except KeyError:
            raise GlyphNotFoundError(glyph_id) from None

    def get(self, glyph_id: str) -> GlyphDefinition | None:
        """Get a glyph by identifier, or None if it is not in the catalog."""
        return self._glyphs.get(glyph_id)

    def find(self, key: str) -> GlyphDefinition:
        """Get a glyph by identifier or by display label.

        Args:
            key: Identifier (e.g., "ka") or label (e.g., "क")

        Returns:
            The glyph definition

        Raises:
            GlyphNotFoundError: If nothing matches
        """
        glyph = self._glyphs.get(key)
        if glyph is not None:
            return glyph
        for glyph in self._glyphs.values():
            if glyph.display_label == key:
                return glyph
        raise GlyphNotFoundError(key)

    def ids(self) -> list[str]:
        """Identifiers in display order."""
        return list(self._order)

    def by_category(self, category: str) -> list[GlyphDefinition]:
        """Glyphs in a category, in display order."""
        return [g for g in self._glyphs.values() if g.category == category]

    def next_id(self, glyph_id: str) -> str:
        """Identifier following ``glyph_id``, wrapping to the first glyph.

        Raises:
            GlyphNotFoundError: If ``glyph_id`` is not in the catalog
        """
        return self._order[(self._index_of(glyph_id) + 1) % len(self._order)]

    def previous_id(self, glyph_id: str) -> str:
        """Identifier preceding ``glyph_id``, wrapping to the last glyph.

        Raises:
            GlyphNotFoundError: If ``glyph_id`` is not in the catalog
        """
        return self._order[(self._index_of(glyph_id) - 1) % len(self._order)]

    @property
    def rejected(self) -> tuple[RejectedEntry, ...]:
        """Entries excluded from the catalog during loading."""
        return self._rejected

    def _index_of(self, glyph_id: str) -> int:
        if glyph_id not in self._glyphs:
            raise GlyphNotFoundError(glyph_id)
        return self._order.index(glyph_id)

    def __contains__(self, glyph_id: object) -> bool:
        return glyph_id in self._glyphs

    def __iter__(self) -> Iterator[GlyphDefinition]:
        return iter(self._glyphs.values())

    def __len__(self) -> int:
        return len(self._glyphs)


def build_glyph(data: Mapping[str, Any], geometry: GeometryConfig | None = None) -> GlyphDefinition:
    """Validate a raw entry and build its GlyphDefinition.

    Args:
        data: Raw entry with id, label, phoneme, strokes and category fields
        geometry: Geometry settings (defaults used if None)

    Returns:
        Glyph definition with parsed strokes

    Raises:
        GlyphDefinitionError: If the entry or any of its strokes is invalid
    """
    glyph_id = str(data.get("id") or "?") if isinstance(data, Mapping) else "?"
    try:
        entry = GlyphEntry.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'entry'}: {err['msg']}"
            for err in e.errors()
        )
        raise GlyphDefinitionError(glyph_id, problems) from e

    strokes = []
    for index, path_data in enumerate(entry.strokes):
        try:
            strokes.append(build_curve(path_data, geometry))
        except StrokeParseError as e:
            raise GlyphDefinitionError(entry.id, f"stroke {index + 1}: {e.reason}") from e

    return GlyphDefinition(
        id=entry.id,
        display_label=entry.label,
        phoneme=entry.phoneme or entry.label,
        strokes=tuple(strokes),
        category=entry.category,
    )


def build_catalog(
    entries: Iterable[Mapping[str, Any]],
    geometry: GeometryConfig | None = None,
) -> GlyphCatalog:
    """Build a catalog, excluding entries that fail validation.

    Args:
        entries: Raw entries in display order
        geometry: Geometry settings (defaults used if None)

    Returns:
        Catalog of the valid glyphs, with rejections recorded
    """
    glyphs: list[GlyphDefinition] = []
    seen: set[str] = set()
    rejected: list[RejectedEntry] = []

    for position, data in enumerate(entries):
        try:
            glyph = build_glyph(data, geometry)
        except GlyphDefinitionError as e:
            entry_id = e.glyph_id if e.glyph_id != "?" else f"#{position + 1}"
            rejected.append(RejectedEntry(entry_id, e.reason))
            logger.warning("Glyph entry rejected", glyph=entry_id, reason=e.reason)
            continue

        if glyph.id in seen:
            rejected.append(RejectedEntry(glyph.id, "duplicate glyph id"))
            logger.warning("Glyph entry rejected", glyph=glyph.id, reason="duplicate glyph id")
            continue

        seen.add(glyph.id)
        glyphs.append(glyph)

    logger.debug("Catalog built", glyphs=len(glyphs), rejected=len(rejected))
    return GlyphCatalog(glyphs, rejected)


def load_catalog(path: Path, geometry: GeometryConfig | None = None) -> GlyphCatalog:
    """Load a catalog from a JSON file.

    The file holds either a list of entries or an object with a ``glyphs``
    list.

    Args:
        path: Path to the JSON file
        geometry: Geometry settings (defaults used if None)

    Returns:
        Catalog of the valid glyphs

    Raises:
        CatalogLoadError: If the file is missing, unreadable or not a catalog
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogLoadError(str(path), "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(str(path), f"invalid JSON: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("glyphs")
    if not isinstance(raw, list):
        raise CatalogLoadError(str(path), "expected a list of glyph entries")

    entries = [item if isinstance(item, Mapping) else {} for item in raw]
    return build_catalog(entries, geometry)


def load_builtin_catalog(geometry: GeometryConfig | None = None) -> GlyphCatalog:
    """Load the bundled Marathi letter catalog.

    Args:
        geometry: Geometry settings (defaults used if None)

    Returns:
        Catalog of vowels followed by consonants
    """
    from glyphtrace.io.builtin import MARATHI_LETTERS

    return build_catalog(MARATHI_LETTERS, geometry)
