"""Unit tests for the glyph catalog."""

import json
from pathlib import Path

import pytest

from glyphtrace.domain import GlyphDefinition
from glyphtrace.exceptions import (
    CatalogLoadError,
    EmptyGlyphError,
    GlyphDefinitionError,
    GlyphNotFoundError,
)
from glyphtrace.io.builtin import MARATHI_LETTERS
from glyphtrace.io.catalog import (
    GlyphCatalog,
    build_catalog,
    build_glyph,
    load_builtin_catalog,
    load_catalog,
)


def _entry(glyph_id: str, *strokes: str, **extra: str) -> dict:
    return {
        "id": glyph_id,
        "label": glyph_id.upper(),
        "phoneme": glyph_id,
        "strokes": list(strokes) or ["M 10,50 L 60,50"],
        **extra,
    }


class TestBuildGlyph:
    """Tests for build_glyph function."""

    def test_valid_entry(self) -> None:
        """Test a valid entry becomes a glyph definition."""
        glyph = build_glyph(_entry("t", "M 10,20 L 60,20", "M 35,20 L 35,50", category="vowel"))
        assert glyph.id == "t"
        assert glyph.display_label == "T"
        assert glyph.stroke_count == 2
        assert glyph.category == "vowel"
        assert glyph.strokes[1].length() == pytest.approx(30.0)

    def test_phoneme_defaults_to_label(self) -> None:
        """Test a missing phoneme falls back to the display label."""
        glyph = build_glyph({"id": "a", "label": "अ", "strokes": ["M 10,50 L 60,50"]})
        assert glyph.phoneme == "अ"

    def test_empty_strokes(self) -> None:
        """Test an entry without strokes is a configuration error."""
        with pytest.raises(GlyphDefinitionError, match="strokes") as exc_info:
            build_glyph({"id": "x", "label": "X", "strokes": []})
        assert exc_info.value.glyph_id == "x"

    def test_missing_label(self) -> None:
        """Test a required field missing is a configuration error."""
        with pytest.raises(GlyphDefinitionError, match="label"):
            build_glyph({"id": "x", "strokes": ["M 10,50 L 60,50"]})

    def test_bad_stroke_names_its_position(self) -> None:
        """Test a malformed stroke reports which stroke failed."""
        with pytest.raises(GlyphDefinitionError, match="stroke 2"):
            build_glyph(_entry("x", "M 10,50 L 60,50", "M 10,10"))


class TestGlyphCatalog:
    """Tests for GlyphCatalog class."""

    @pytest.fixture
    def catalog(self) -> GlyphCatalog:
        return build_catalog([_entry("a", category="vowel"), _entry("ka", category="consonant"), _entry("ga")])

    def test_lookup(self, catalog: GlyphCatalog) -> None:
        """Test lookup by id."""
        assert catalog.lookup("ka").id == "ka"

    def test_lookup_missing(self, catalog: GlyphCatalog) -> None:
        """Test lookup of an unknown id raises GlyphNotFoundError."""
        with pytest.raises(GlyphNotFoundError, match="zz"):
            catalog.lookup("zz")

    def test_get_missing(self, catalog: GlyphCatalog) -> None:
        """Test get returns None for an unknown id."""
        assert catalog.get("zz") is None

    def test_find_by_label(self, catalog: GlyphCatalog) -> None:
        """Test find matches display labels too."""
        assert catalog.find("KA").id == "ka"
        with pytest.raises(GlyphNotFoundError):
            catalog.find("nope")

    def test_order_and_len(self, catalog: GlyphCatalog) -> None:
        """Test glyphs keep their authored order."""
        assert catalog.ids() == ["a", "ka", "ga"]
        assert [g.id for g in catalog] == ["a", "ka", "ga"]
        assert len(catalog) == 3
        assert "ka" in catalog
        assert "zz" not in catalog

    def test_by_category(self, catalog: GlyphCatalog) -> None:
        """Test filtering by category."""
        assert [g.id for g in catalog.by_category("vowel")] == ["a"]

    def test_next_and_previous_wrap(self, catalog: GlyphCatalog) -> None:
        """Test navigation wraps around both ends."""
        assert catalog.next_id("a") == "ka"
        assert catalog.next_id("ga") == "a"
        assert catalog.previous_id("a") == "ga"
        assert catalog.previous_id("ka") == "a"

    def test_navigation_unknown_id(self, catalog: GlyphCatalog) -> None:
        """Test navigation from an unknown id raises."""
        with pytest.raises(GlyphNotFoundError):
            catalog.next_id("zz")

    def test_constructor_rejects_empty_glyph(self) -> None:
        """Test a glyph without strokes cannot enter a catalog."""
        glyph = GlyphDefinition(id="x", display_label="X", phoneme="x", strokes=())
        with pytest.raises(EmptyGlyphError):
            GlyphCatalog([glyph])

    def test_constructor_rejects_duplicates(self) -> None:
        """Test duplicate ids cannot enter a catalog directly."""
        glyph = build_glyph(_entry("a"))
        with pytest.raises(GlyphDefinitionError, match="duplicate"):
            GlyphCatalog([glyph, glyph])


class TestBuildCatalog:
    """Tests for build_catalog function."""

    def test_bad_entries_are_excluded(self) -> None:
        """Test malformed entries are recorded and skipped, not fatal."""
        catalog = build_catalog(
            [
                _entry("a"),
                {"id": "empty", "label": "E", "strokes": []},
                _entry("broken", "M 500,500 L 10,10"),
                _entry("b"),
            ]
        )
        assert catalog.ids() == ["a", "b"]
        assert [r.glyph_id for r in catalog.rejected] == ["empty", "broken"]
        assert "outside" in catalog.rejected[1].reason

    def test_duplicate_id_first_wins(self) -> None:
        """Test the first of two entries with the same id is kept."""
        catalog = build_catalog([_entry("a", "M 10,50 L 60,50"), _entry("a", "M 10,50 L 20,50")])
        assert len(catalog) == 1
        assert catalog.lookup("a").strokes[0].length() == pytest.approx(50.0)
        assert catalog.rejected[0].reason == "duplicate glyph id"

    def test_entry_without_id_uses_position(self) -> None:
        """Test an entry with no id is reported by its position."""
        catalog = build_catalog([_entry("a"), {"label": "?", "strokes": ["M 1,1 L 2,2"]}])
        assert catalog.rejected[0].glyph_id == "#2"


class TestLoadCatalog:
    """Tests for load_catalog function."""

    def test_load_list(self, tmp_path: Path) -> None:
        """Test loading a JSON list of entries."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([_entry("a"), _entry("b")]), encoding="utf-8")
        assert load_catalog(path).ids() == ["a", "b"]

    def test_load_object_with_glyphs(self, tmp_path: Path) -> None:
        """Test loading an object holding a glyphs list."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"glyphs": [_entry("a")]}), encoding="utf-8")
        assert load_catalog(path).ids() == ["a"]

    def test_non_object_entries_rejected(self, tmp_path: Path) -> None:
        """Test list items that are not objects are rejected individually."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([_entry("a"), 42]), encoding="utf-8")
        catalog = load_catalog(path)
        assert catalog.ids() == ["a"]
        assert catalog.rejected[0].glyph_id == "#2"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises CatalogLoadError."""
        with pytest.raises(CatalogLoadError, match="file not found"):
            load_catalog(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises CatalogLoadError."""
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="invalid JSON"):
            load_catalog(path)

    def test_wrong_shape(self, tmp_path: Path) -> None:
        """Test a JSON document that is not a catalog raises CatalogLoadError."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"letters": []}), encoding="utf-8")
        with pytest.raises(CatalogLoadError, match="list of glyph entries"):
            load_catalog(path)


class TestBuiltinCatalog:
    """Tests for the bundled Marathi catalog."""

    def test_every_entry_loads(self) -> None:
        """Test no bundled entry is rejected."""
        catalog = load_builtin_catalog()
        assert catalog.rejected == ()
        assert len(catalog) == len(MARATHI_LETTERS)

    def test_vowels_before_consonants(self) -> None:
        """Test vowels are listed first."""
        catalog = load_builtin_catalog()
        categories = [g.category for g in catalog]
        assert categories == sorted(categories, key=lambda c: c != "vowel")

    def test_ka(self) -> None:
        """Test the letter ka."""
        glyph = load_builtin_catalog().find("क")
        assert glyph.id == "ka"
        assert glyph.stroke_count == 4
        assert glyph.strokes[0].length() == pytest.approx(60.0)
