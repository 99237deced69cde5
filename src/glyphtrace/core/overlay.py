"""Render state for the presentation layer.

Turns a session into the things a tracing surface draws: the traced part of
each stroke, the guide marker showing where to go next, numbered start
markers, and the off-path and success indicators. Also converts device
pointer coordinates into the normalized space the engine works in.
"""

from dataclasses import dataclass

from glyphtrace.domain import Point, SessionSnapshot, StrokeStatus, TracingSession


@dataclass(frozen=True, slots=True)
class Viewport:
    """On-screen rectangle of the tracing surface, in device pixels."""

    left: float
    top: float
    width: float
    height: float
    extent: float = 100.0

    def to_normalized(self, x: float, y: float) -> Point:
        """Convert a device coordinate to the normalized space.

        Args:
            x: Horizontal device coordinate
            y: Vertical device coordinate

        Returns:
            Point in the 0-extent space (outside it when the pointer is off the surface)

        Raises:
            ValueError: If the viewport has no area
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Viewport must have a positive width and height")
        return Point(
            (x - self.left) / self.width * self.extent,
            (y - self.top) / self.height * self.extent,
        )

    def to_device(self, point: Point) -> tuple[float, float]:
        """Convert a normalized point back to device coordinates."""
        return (
            self.left + point.x / self.extent * self.width,
            self.top + point.y / self.extent * self.height,
        )


@dataclass(frozen=True, slots=True)
class StrokeOverlay:
    """How much of one stroke to draw as traced.

    Attributes:
        index: Stroke index
        path_data: SVG path of the stroke
        length: Total arc length (dash pattern period)
        drawn_length: Arc length drawn as traced (dash length)
        status: Tracing status
        highlight_error: Whether to draw the traced part in the error color
    """

    index: int
    path_data: str
    length: float
    drawn_length: float
    status: StrokeStatus
    highlight_error: bool


@dataclass(frozen=True, slots=True)
class StartMarker:
    """Numbered marker at the start of a stroke."""

    ordinal: int
    point: Point
    status: StrokeStatus


@dataclass(frozen=True, slots=True)
class RenderState:
    """Everything needed to draw one frame of the tracing surface."""

    strokes: tuple[StrokeOverlay, ...]
    start_markers: tuple[StartMarker, ...]
    guide_marker: Point | None
    show_off_path: bool
    show_success: bool


def build_render_state(session: TracingSession | SessionSnapshot) -> RenderState:
    """Build the render state for a session.

    The guide marker sits at the point the learner should reach next and is
    hidden while the pointer is down and once every stroke is traced.

    Args:
        session: Live session or snapshot

    Returns:
        Render state for the current frame
    """
    glyph = session.glyph
    index = session.stroke_index
    all_traced = index >= len(glyph.strokes)

    overlays = []
    markers = []
    for i, curve in enumerate(glyph.strokes):
        length = curve.length()
        if i < index:
            status = StrokeStatus.COMPLETE
            drawn = length
        elif i == index and session.stroke_progress[i] > 0.0:
            status = StrokeStatus.IN_PROGRESS
            drawn = session.stroke_progress[i]
        else:
            status = StrokeStatus.NOT_STARTED
            drawn = 0.0

        overlays.append(
            StrokeOverlay(
                index=i,
                path_data=curve.path_data,
                length=length,
                drawn_length=drawn,
                status=status,
                highlight_error=session.is_off_path and i == index,
            )
        )
        markers.append(StartMarker(ordinal=i + 1, point=curve.start_point, status=status))

    guide = None
    if not all_traced and not session.is_complete and not session.is_pointer_down:
        guide = glyph.strokes[index].point_at(session.stroke_progress[index])

    return RenderState(
        strokes=tuple(overlays),
        start_markers=tuple(markers),
        guide_marker=guide,
        show_off_path=session.is_off_path,
        show_success=session.is_complete,
    )
