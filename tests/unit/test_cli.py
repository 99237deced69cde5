"""Tests for the glyphtrace command line."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from glyphtrace import __version__
from glyphtrace.cli.app import EXIT_INCOMPLETE, app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_logging() -> Iterator[None]:
    """Undo the logging setup each command performs."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {"id": "dash", "label": "-", "strokes": ["M 10,50 L 60,50"]},
                {"id": "bad", "label": "?", "strokes": ["M 500,500 L 10,10"]},
            ]
        ),
        encoding="utf-8",
    )
    return path


def _write_samples(path: Path, samples: list[dict[str, object]]) -> Path:
    path.write_text(json.dumps(samples), encoding="utf-8")
    return path


class TestGlobalOptions:
    """Tests for options shared by every command."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_log_level(self) -> None:
        result = runner.invoke(app, ["--log-level", "LOUD", "list"])
        assert result.exit_code == 1
        assert "Invalid log level" in result.output

    def test_log_file(self, tmp_path: Path) -> None:
        """Test --log-file receives the engine's debug records."""
        log_file = tmp_path / "trace.log"
        result = runner.invoke(app, ["--log-file", str(log_file), "-q", "demo", "ka"])
        assert result.exit_code == 0
        assert "Glyph traced" in log_file.read_text(encoding="utf-8")


class TestListCommand:
    """Tests for `glyphtrace list`."""

    def test_builtin(self) -> None:
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "ka" in result.output
        assert "14 glyphs" in result.output

    def test_verbose_adds_length(self) -> None:
        result = runner.invoke(app, ["list", "--verbose"])
        assert result.exit_code == 0
        assert "length" in result.output

    def test_rejected_entries_reported(self, catalog_file: Path) -> None:
        """Test malformed entries are listed as skipped, not fatal."""
        result = runner.invoke(app, ["list", "-c", str(catalog_file)])
        assert result.exit_code == 0
        assert "1 glyphs" in result.output
        assert "1 entries skipped" in result.output
        assert "outside" in result.output

    def test_missing_catalog(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["list", "-c", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert "Could not load catalog" in result.output


class TestShowCommand:
    """Tests for `glyphtrace show`."""

    def test_show_by_id(self) -> None:
        result = runner.invoke(app, ["show", "ka"])
        assert result.exit_code == 0
        assert "M 50,25 L 50,85" in result.output
        assert "length 60.0" in result.output

    def test_unknown_glyph(self) -> None:
        result = runner.invoke(app, ["show", "zz"])
        assert result.exit_code == 1
        assert "Unknown glyph: zz" in result.output


class TestTraceCommand:
    """Tests for `glyphtrace trace`."""

    def test_complete_trace(self, tmp_path: Path, catalog_file: Path) -> None:
        """Test a perfect recording finishes the glyph."""
        samples = [{"kind": "down", "x": 10, "y": 50}]
        samples += [{"kind": "move", "x": 10 + 2.5 * k, "y": 50} for k in range(1, 20)]
        samples.append({"kind": "up"})
        path = _write_samples(tmp_path / "s.json", samples)

        result = runner.invoke(app, ["trace", "dash", str(path), "-c", str(catalog_file)])

        assert result.exit_code == 0
        assert "Traced" in result.output
        assert "20 advances" in result.output

    def test_incomplete_trace(self, tmp_path: Path, catalog_file: Path) -> None:
        """Test an unfinished recording exits with the incomplete code."""
        path = _write_samples(
            tmp_path / "s.json",
            [{"kind": "down", "x": 10, "y": 50}, {"kind": "move", "x": 90, "y": 90}, {"kind": "up"}],
        )

        result = runner.invoke(app, ["trace", "dash", str(path), "-c", str(catalog_file)])

        assert result.exit_code == EXIT_INCOMPLETE
        assert "Incomplete" in result.output
        assert "1 off path" in result.output

    def test_looser_tolerance(self, tmp_path: Path, catalog_file: Path) -> None:
        """Test --tolerance widens the band that counts."""
        samples = [{"kind": "down", "x": 10, "y": 62}]
        samples += [{"kind": "move", "x": 10 + 2.5 * k, "y": 62} for k in range(1, 20)]
        path = _write_samples(tmp_path / "s.json", samples)

        strict = runner.invoke(app, ["-q", "trace", "dash", str(path), "-c", str(catalog_file)])
        loose = runner.invoke(
            app, ["-q", "trace", "dash", str(path), "-c", str(catalog_file), "-t", "20"]
        )

        assert strict.exit_code == EXIT_INCOMPLETE
        assert loose.exit_code == 0

    def test_bad_sample_file(self, tmp_path: Path) -> None:
        path = tmp_path / "s.json"
        path.write_text("not json", encoding="utf-8")
        result = runner.invoke(app, ["trace", "ka", str(path)])
        assert result.exit_code == 1
        assert "Could not read samples" in result.output


class TestDemoCommand:
    """Tests for `glyphtrace demo`."""

    def test_demo_completes(self) -> None:
        result = runner.invoke(app, ["demo", "ka"])
        assert result.exit_code == 0
        assert "Traced" in result.output

    def test_demo_by_character(self) -> None:
        result = runner.invoke(app, ["-q", "demo", "क"])
        assert result.exit_code == 0

    def test_jitter_must_stay_inside_band(self) -> None:
        result = runner.invoke(app, ["demo", "ka", "--jitter", "10"])
        assert result.exit_code == 1
        assert "too large" in result.output

    def test_save_and_replay(self, tmp_path: Path) -> None:
        """Test saved demo samples replay to the same result."""
        path = tmp_path / "ka.json"
        demo = runner.invoke(app, ["-q", "demo", "ka", "-j", "4", "--seed", "3", "--save", str(path)])
        assert demo.exit_code == 0
        assert path.exists()

        replay = runner.invoke(app, ["-q", "trace", "ka", str(path)])
        assert replay.exit_code == 0
