"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for flatten_commands.
Not intended for public use.
"""

import math

from glyphtrace.domain import Point

# Subdivision depth cap; 2**16 segments per curve is far beyond any stroke.
MAX_DEPTH = 16


def _distance_to_chord(p: Point, a: Point, b: Point) -> float:
    """Distance from p to the line through a and b."""
    dx = b.x - a.x
    dy = b.y - a.y
    chord = math.hypot(dx, dy)
    if chord == 0.0:
        return math.hypot(p.x - a.x, p.y - a.y)
    return abs(dx * (a.y - p.y) - dy * (a.x - p.x)) / chord


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2 = points

    # Control point close to the chord means the curve is close to it too
    if depth >= MAX_DEPTH or _distance_to_chord(p1, p0, p2) <= tolerance:
        return [p0, p2]

    # Subdivide at t=0.5
    q1 = _midpoint(p0, p1)
    r1 = _midpoint(p1, p2)
    mid = _midpoint(q1, r1)

    left = flatten_quadratic([p0, q1, mid], tolerance, depth + 1)
    right = flatten_quadratic([mid, r1, p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision. Both control points are
    checked against the chord, so S-shaped curves whose midpoint happens to
    sit on the chord are still subdivided.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2, p3 = points

    flat = max(_distance_to_chord(p1, p0, p3), _distance_to_chord(p2, p0, p3))
    if depth >= MAX_DEPTH or flat <= tolerance:
        return [p0, p3]

    # First level
    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)

    # Second level
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)

    # Third level (point on curve at t=0.5)
    mid = _midpoint(r1, r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    return left[:-1] + right
