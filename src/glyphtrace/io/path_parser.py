"""Stroke path parsing.

Strokes are authored as SVG path data in the 0-100 normalized square. This
module drives fontTools' SVG path parser into a RecordingPen and converts the
recorded pen calls into domain PathCommands, validating that the result is a
single traceable stroke.
"""

import math
from typing import Any

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment
from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path import parse_path

from glyphtrace.config import GeometryConfig
from glyphtrace.domain import CommandKind, CurveSpec, PathCommand, Point
from glyphtrace.exceptions import StrokeParseError


def parse_stroke_path(path_data: str, extent: float = 100.0) -> tuple[PathCommand, ...]:
    """Parse SVG path data into stroke drawing commands.

    Args:
        path_data: SVG path string (e.g., "M 20,30 Q 50,10 80,30")
        extent: Size of the normalized square the start point must lie in

    Returns:
        Drawing commands, the first one being a MOVE

    Raises:
        StrokeParseError: If the path is empty, malformed, has more than one
            sub-path, has no drawing segments or starts outside the square
    """
    if not path_data or not path_data.strip():
        raise StrokeParseError(path_data, "empty path data")

    pen = RecordingPen()
    try:
        parse_path(path_data, pen)
    except (ValueError, IndexError, TypeError) as e:
        # IndexError: truncated coordinate pairs
        raise StrokeParseError(path_data, str(e) or type(e).__name__) from e

    return _recording_to_commands(path_data, pen.value, extent)


def build_curve(path_data: str, geometry: GeometryConfig | None = None) -> CurveSpec:
    """Parse and validate a stroke into a CurveSpec.

    Args:
        path_data: SVG path string
        geometry: Geometry settings (defaults used if None)

    Returns:
        CurveSpec with a positive arc length

    Raises:
        StrokeParseError: If the path is invalid or has zero length
    """
    geometry = geometry or GeometryConfig()
    commands = parse_stroke_path(path_data, extent=geometry.extent)
    curve = CurveSpec(
        path_data=path_data,
        commands=commands,
        flatten_tolerance=geometry.flatten_tolerance,
    )
    if curve.length() <= 0.0:
        raise StrokeParseError(path_data, "stroke has zero length")
    return curve


def _recording_to_commands(
    path_data: str,
    recording: list[tuple[str, Any]],
    extent: float,
) -> tuple[PathCommand, ...]:
    """Convert RecordingPen output to PathCommands.

    Args:
        path_data: Original path string, for error messages
        recording: List of (operator, operands) from RecordingPen.value
        extent: Size of the normalized square

    Returns:
        Tuple of PathCommands
    """
    commands: list[PathCommand] = []
    ended = False

    for op, args in recording:
        if op == "moveTo":
            if commands:
                raise StrokeParseError(path_data, "a stroke must be a single sub-path")
            start = _to_point(path_data, args[0])
            if not (0.0 <= start.x <= extent and 0.0 <= start.y <= extent):
                raise StrokeParseError(
                    path_data,
                    f"start point ({start.x:g}, {start.y:g}) is outside the 0-{extent:g} square",
                )
            commands.append(PathCommand(CommandKind.MOVE, (start,)))
            continue

        if not commands:
            raise StrokeParseError(path_data, "path must start with a move-to")

        if op in ("closePath", "endPath"):
            # parse_path already emitted the closing line segment for 'Z'
            ended = True
            continue

        if ended:
            raise StrokeParseError(path_data, "drawing after the end of the stroke")

        if op == "lineTo":
            commands.append(PathCommand(CommandKind.LINE, (_to_point(path_data, args[0]),)))
        elif op == "qCurveTo":
            commands.extend(_quadratic_commands(path_data, args))
        elif op == "curveTo":
            commands.extend(_cubic_commands(path_data, args))
        else:
            raise StrokeParseError(path_data, f"unsupported pen operation '{op}'")

    if not commands:
        raise StrokeParseError(path_data, "no drawing instructions")
    if len(commands) == 1:
        raise StrokeParseError(path_data, "stroke has no segments after the move-to")

    return tuple(commands)


def _quadratic_commands(path_data: str, args: tuple[Any, ...]) -> list[PathCommand]:
    if args[-1] is None:
        raise StrokeParseError(path_data, "implied on-curve quadratic loops are not strokes")
    if len(args) == 1:
        return [PathCommand(CommandKind.LINE, (_to_point(path_data, args[0]),))]
    return [
        PathCommand(
            CommandKind.QUAD,
            (_to_point(path_data, control), _to_point(path_data, end)),
        )
        for control, end in decomposeQuadraticSegment(list(args))
    ]


def _cubic_commands(path_data: str, args: tuple[Any, ...]) -> list[PathCommand]:
    if len(args) < 3:
        raise StrokeParseError(path_data, "cubic segment needs two control points")
    return [
        PathCommand(CommandKind.CUBIC, tuple(_to_point(path_data, p) for p in segment))
        for segment in decomposeSuperBezierSegment(list(args))
    ]


def _to_point(path_data: str, pt: Any) -> Point:
    x, y = float(pt[0]), float(pt[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise StrokeParseError(path_data, f"non-finite coordinate ({x}, {y})")
    return Point(x, y)
