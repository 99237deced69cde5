"""Stroke curve representation.

A stroke is one continuous curve that must be traced in a single motion. It is
authored as SVG path data and stored as a sequence of drawing commands. Arc
length queries run against a flattened polyline that is computed once and
cached.
"""

from bisect import bisect_right
from dataclasses import dataclass, field
from enum import Enum

from glyphtrace.domain.point import Point


class CommandKind(Enum):
    """Kind of drawing command in a stroke path.

    - MOVE: Start of the stroke (one point)
    - LINE: Straight segment to one point
    - QUAD: Quadratic Bezier (control point, end point)
    - CUBIC: Cubic Bezier (two control points, end point)
    - CLOSE: Straight segment back to the start point
    """

    MOVE = "move"
    LINE = "line"
    QUAD = "quad"
    CUBIC = "cubic"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single drawing command.

    Attributes:
        kind: Command kind
        points: Points consumed by the command, end point last
    """

    kind: CommandKind
    points: tuple[Point, ...] = ()

    @property
    def end_point(self) -> Point | None:
        """Point the pen is at after this command (None for CLOSE)."""
        return self.points[-1] if self.points else None


@dataclass(frozen=True)
class CurveSpec:
    """An immutable stroke curve.

    Attributes:
        path_data: The authored SVG path string
        commands: Parsed drawing commands, starting with a MOVE
        flatten_tolerance: Maximum deviation of the cached polyline from the curve
    """

    path_data: str
    commands: tuple[PathCommand, ...]
    flatten_tolerance: float = field(default=0.01, compare=False)
    _polyline: tuple[Point, ...] | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _cumulative: tuple[float, ...] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def start_point(self) -> Point:
        """Starting coordinate of the stroke.

        Also used to place the stroke's ordinal start marker.
        """
        return self.commands[0].points[0]

    @property
    def end_point(self) -> Point:
        """Coordinate where the stroke ends."""
        return self.polyline()[-1]

    def polyline(self) -> tuple[Point, ...]:
        """Flattened approximation of the curve.

        Returns:
            Points from the start of the stroke to its end
        """
        self._ensure_flattened()
        assert self._polyline is not None
        return self._polyline

    def length(self) -> float:
        """Total arc length of the curve.

        Returns:
            Arc length in normalized units
        """
        self._ensure_flattened()
        assert self._cumulative is not None
        return self._cumulative[-1]

    def point_at(self, distance: float) -> Point:
        """Coordinate at a given arc-length offset from the start.

        Args:
            distance: Arc length from the start; clamped to [0, length()]

        Returns:
            Point on the curve
        """
        self._ensure_flattened()
        points = self._polyline
        cumulative = self._cumulative
        assert points is not None and cumulative is not None

        if distance <= 0.0:
            return points[0]
        if distance >= cumulative[-1]:
            return points[-1]

        i = bisect_right(cumulative, distance) - 1
        seg_len = cumulative[i + 1] - cumulative[i]
        if seg_len <= 0.0:
            return points[i + 1]

        t = (distance - cumulative[i]) / seg_len
        a, b = points[i], points[i + 1]
        return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)

    def _ensure_flattened(self) -> None:
        if self._polyline is not None:
            return

        from glyphtrace.core.geometry import cumulative_lengths, flatten_commands

        points = tuple(flatten_commands(self.commands, self.flatten_tolerance))
        object.__setattr__(self, "_polyline", points)
        object.__setattr__(self, "_cumulative", tuple(cumulative_lengths(points)))
