"""Geometric operations for stroke curves.

This module provides the math behind curve arc-length queries and pointer
proximity checks:
- Euclidean distance
- Flattening of stroke drawing commands into a polyline
- Cumulative arc lengths along a polyline

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from glyphtrace.core._bezier import flatten_cubic as _flatten_cubic
from glyphtrace.core._bezier import flatten_quadratic as _flatten_quadratic
from glyphtrace.domain import CommandKind, PathCommand, Point


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in normalized units

    Examples:
        >>> distance(Point(0.0, 0.0), Point(3.0, 4.0))
        5.0
    """
    return math.hypot(a.x - b.x, a.y - b.y)


def flatten_commands(commands: Sequence[PathCommand], tolerance: float) -> list[Point]:
    """Convert stroke drawing commands into a polyline.

    Straight segments are kept as-is, Bezier segments are subdivided until
    they deviate from their chord by at most ``tolerance``. Consecutive
    duplicate points are dropped.

    Args:
        commands: Drawing commands starting with a MOVE
        tolerance: Maximum distance from the true curve

    Returns:
        Polyline points from the stroke start to its end

    Raises:
        ValueError: If commands are empty or do not start with a MOVE

    Examples:
        >>> cmds = [
        ...     PathCommand(CommandKind.MOVE, (Point(0.0, 0.0),)),
        ...     PathCommand(CommandKind.LINE, (Point(10.0, 0.0),)),
        ... ]
        >>> flatten_commands(cmds, 0.01)
        [Point(x=0.0, y=0.0), Point(x=10.0, y=0.0)]
    """
    if not commands or commands[0].kind is not CommandKind.MOVE:
        raise ValueError("Stroke must start with a move command")

    start = commands[0].points[0]
    current = start
    points = [start]

    for command in commands[1:]:
        if command.kind is CommandKind.LINE:
            segment = [current, command.points[0]]
        elif command.kind is CommandKind.QUAD:
            segment = _flatten_quadratic([current, *command.points], tolerance)
        elif command.kind is CommandKind.CUBIC:
            segment = _flatten_cubic([current, *command.points], tolerance)
        elif command.kind is CommandKind.CLOSE:
            segment = [current, start]
        else:
            raise ValueError(f"Unexpected {command.kind.value} command inside a stroke")

        for p in segment[1:]:
            if p != points[-1]:
                points.append(p)
        current = segment[-1]

    return points


def cumulative_lengths(points: Sequence[Point]) -> list[float]:
    """Arc length from the first point to each point of a polyline.

    Args:
        points: Polyline points

    Returns:
        List the same length as ``points``, starting at 0.0

    Examples:
        >>> cumulative_lengths([Point(0.0, 0.0), Point(3.0, 4.0), Point(3.0, 10.0)])
        [0.0, 5.0, 11.0]
    """
    if not points:
        return [0.0]

    totals = [0.0]
    for i in range(1, len(points)):
        totals.append(totals[-1] + distance(points[i - 1], points[i]))
    return totals


def polyline_length(points: Sequence[Point]) -> float:
    """Total length of a polyline.

    Args:
        points: Polyline points

    Returns:
        Length in normalized units; 0.0 for fewer than two points
    """
    return cumulative_lengths(points)[-1]
