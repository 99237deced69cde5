"""Tests for geometric operations and Bezier flattening."""

import math

import pytest

from glyphtrace.core._bezier import flatten_cubic, flatten_quadratic
from glyphtrace.core.geometry import (
    cumulative_lengths,
    distance,
    flatten_commands,
    polyline_length,
)
from glyphtrace.domain import CommandKind, PathCommand, Point


def _move(x: float, y: float) -> PathCommand:
    return PathCommand(CommandKind.MOVE, (Point(x, y),))


class TestDistance:
    """Tests for distance function."""

    def test_pythagorean(self) -> None:
        """Test a 3-4-5 triangle."""
        assert distance(Point(0, 0), Point(3, 4)) == 5.0

    def test_symmetric(self) -> None:
        """Test distance does not depend on argument order."""
        a, b = Point(12.5, 80), Point(40, 7)
        assert distance(a, b) == distance(b, a)

    def test_zero(self) -> None:
        """Test distance to itself is zero."""
        assert distance(Point(5, 5), Point(5, 5)) == 0.0


class TestCumulativeLengths:
    """Tests for cumulative_lengths and polyline_length."""

    def test_cumulative(self) -> None:
        """Test running totals along a polyline."""
        points = [Point(0, 0), Point(3, 4), Point(3, 10)]
        assert cumulative_lengths(points) == [0.0, 5.0, 11.0]

    def test_empty(self) -> None:
        """Test empty polyline has zero length."""
        assert cumulative_lengths([]) == [0.0]
        assert polyline_length([]) == 0.0

    def test_single_point(self) -> None:
        """Test a single point has zero length."""
        assert polyline_length([Point(1, 1)]) == 0.0


class TestFlattenQuadratic:
    """Tests for quadratic Bezier flattening."""

    def test_straight_quadratic(self) -> None:
        """Test a collinear control point returns just the endpoints."""
        points = flatten_quadratic([Point(0, 0), Point(5, 0), Point(10, 0)], 0.01)
        assert points == [Point(0, 0), Point(10, 0)]

    def test_curved_quadratic_is_subdivided(self) -> None:
        """Test a bent quadratic is split into several segments."""
        points = flatten_quadratic([Point(0, 0), Point(50, 100), Point(100, 0)], 0.01)
        assert len(points) > 8
        assert points[0] == Point(0, 0)
        assert points[-1] == Point(100, 0)

    def test_points_lie_on_curve(self) -> None:
        """Test each flattened point is on the quadratic curve."""
        p0, p1, p2 = Point(0, 0), Point(50, 100), Point(100, 0)
        for p in flatten_quadratic([p0, p1, p2], 0.01):
            # For this symmetric parabola, y = 2x - x^2/50
            assert p.y == pytest.approx(2 * p.x - p.x**2 / 50, abs=1e-6)


class TestFlattenCubic:
    """Tests for cubic Bezier flattening."""

    def test_straight_cubic(self) -> None:
        """Test collinear control points return just the endpoints."""
        points = flatten_cubic([Point(0, 0), Point(3, 0), Point(6, 0), Point(9, 0)], 0.01)
        assert points == [Point(0, 0), Point(9, 0)]

    def test_s_curve_is_subdivided(self) -> None:
        """Test an S-curve whose midpoint lies on the chord is still subdivided."""
        points = flatten_cubic(
            [Point(0, 0), Point(10, 10), Point(20, -10), Point(30, 0)], 0.01
        )
        assert len(points) > 8
        assert polyline_length(points) > 30.0

    def test_quarter_circle_length(self) -> None:
        """Test a cubic quarter-circle approximation has the expected arc length."""
        k = 0.5522847498 * 50
        points = flatten_cubic(
            [Point(50, 0), Point(50, k), Point(k, 50), Point(0, 50)], 0.001
        )
        assert polyline_length(points) == pytest.approx(math.pi * 50 / 2, rel=1e-3)


class TestFlattenCommands:
    """Tests for flatten_commands function."""

    def test_lines(self) -> None:
        """Test straight segments are kept as-is."""
        commands = [
            _move(0, 0),
            PathCommand(CommandKind.LINE, (Point(10, 0),)),
            PathCommand(CommandKind.LINE, (Point(10, 10),)),
        ]
        assert flatten_commands(commands, 0.01) == [Point(0, 0), Point(10, 0), Point(10, 10)]

    def test_duplicate_points_dropped(self) -> None:
        """Test zero-length segments do not add points."""
        commands = [
            _move(0, 0),
            PathCommand(CommandKind.LINE, (Point(0, 0),)),
            PathCommand(CommandKind.LINE, (Point(10, 0),)),
        ]
        assert flatten_commands(commands, 0.01) == [Point(0, 0), Point(10, 0)]

    def test_mixed_segments_continue_from_current_point(self) -> None:
        """Test curves start where the previous segment ended."""
        commands = [
            _move(0, 0),
            PathCommand(CommandKind.LINE, (Point(10, 0),)),
            PathCommand(CommandKind.QUAD, (Point(20, 10), Point(10, 20))),
        ]
        points = flatten_commands(commands, 0.01)
        assert points[:2] == [Point(0, 0), Point(10, 0)]
        assert points[-1] == Point(10, 20)

    def test_close(self) -> None:
        """Test CLOSE returns to the start point."""
        commands = [
            _move(0, 0),
            PathCommand(CommandKind.LINE, (Point(10, 0),)),
            PathCommand(CommandKind.CLOSE),
        ]
        assert flatten_commands(commands, 0.01) == [Point(0, 0), Point(10, 0), Point(0, 0)]

    def test_must_start_with_move(self) -> None:
        """Test a missing move-to is rejected."""
        with pytest.raises(ValueError, match="move"):
            flatten_commands([PathCommand(CommandKind.LINE, (Point(1, 1),))], 0.01)

    def test_empty(self) -> None:
        """Test empty commands are rejected."""
        with pytest.raises(ValueError):
            flatten_commands([], 0.01)

    def test_second_move_rejected(self) -> None:
        """Test a move inside a stroke is rejected."""
        commands = [_move(0, 0), PathCommand(CommandKind.LINE, (Point(1, 0),)), _move(5, 5)]
        with pytest.raises(ValueError, match="move"):
            flatten_commands(commands, 0.01)
