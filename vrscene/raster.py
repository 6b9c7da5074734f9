"""Screen-space helpers: coordinate conversion, clipping and scanline filling."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, replace

from .geometry import Color, Pos2D
from .mesh import FaceVertex

Point = tuple[int, int]
Triangle = tuple[Point, Point, Point]


class Canvas:
    """A drawing surface that records every command it receives.

    Subclasses that draw on a real surface override the drawing methods.
    """

    def __init__(self) -> None:
        self.color = Color(0, 0, 0, 255)
        self.commands: list[tuple] = []

    def set_color(self, color: Color) -> None:
        """Select the colour used by later drawing commands."""
        self.color = color
        self.commands.append(("color", color))

    def clear(self) -> None:
        """Fill the whole surface with the current colour."""
        self.commands.append(("clear",))

    def draw_point(self, x: int, y: int) -> None:
        """Draw a single pixel."""
        self.commands.append(("point", x, y))

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a straight line between two pixels."""
        self.commands.append(("line", x1, y1, x2, y2))

    @property
    def lines(self) -> list[tuple[int, int, int, int]]:
        """Every line drawn so far, in order."""
        return [command[1:] for command in self.commands if command[0] == "line"]


@dataclass
class Viewport:
    """The visible screen area and the camera's focal length."""

    width: int = 0
    height: int = 0
    focal_length: float = 1000.0

    def to_screen(self, pos: Pos2D) -> Pos2D:
        """Convert a centred, y-up position to screen pixels (origin top left, y down)."""
        return Pos2D(pos.x + self.width // 2, -pos.y + self.height // 2)

    def clamp(self, x: int, y: int) -> Point:
        """Clamp a pixel position to the edges of the screen."""
        return min(max(0, x), self.width), min(max(0, y), self.height)

    def contains(self, x: int, y: int) -> bool:
        """Tell whether a pixel lies strictly inside the screen."""
        return 0 < x < self.width and 0 < y < self.height


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def bresenham_line(x1: int, y1: int, x2: int, y2: int) -> Iterator[Point]:
    """Yield the pixels of the line from (x1, y1) to (x2, y2), both ends included."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy
    while True:
        yield x1, y1
        if x1 == x2 and y1 == y2:
            return
        e2 = err * 2
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy


def interpolate_x(p1: Point, p2: Point, y: int) -> int:
    """Return the x of the edge p1-p2 at height y, truncated toward zero."""
    if p1[1] == p2[1]:
        return p1[0]
    return p1[0] + _trunc_div((p2[0] - p1[0]) * (y - p1[1]), p2[1] - p1[1])


def triangle_spans(p1: Point, p2: Point, p3: Point) -> Iterator[tuple[int, int, int]]:
    """Yield (y, x_start, x_end) for every scanline covering the triangle."""
    top, middle, bottom = sorted((p1, p2, p3), key=lambda point: point[1])
    for y in range(top[1], bottom[1] + 1):
        if y < middle[1]:
            x1 = interpolate_x(top, middle, y)
        else:
            x1 = interpolate_x(middle, bottom, y)
        x2 = interpolate_x(top, bottom, y)
        if x1 > x2:
            x1, x2 = x2, x1
        yield y, x1, x2


def fill_triangle(canvas: Canvas, p1: Point, p2: Point, p3: Point) -> None:
    """Fill a triangle on the canvas with horizontal lines."""
    for y, x1, x2 in triangle_spans(p1, p2, p3):
        canvas.draw_line(x1, y, x2, y)


def draw_line(canvas: Canvas, viewport: Viewport, start: Pos2D, end: Pos2D) -> None:
    """Draw a line between two centred positions."""
    a = viewport.to_screen(start)
    b = viewport.to_screen(end)
    canvas.draw_line(a.x, a.y, b.x, b.y)


def _reachable(front: FaceVertex) -> set[FaceVertex]:
    seen = {front}
    queue = deque([front])
    while queue:
        for neighbour in queue.popleft().face_connections:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return seen


def _first(pending: dict[FaceVertex, list[FaceVertex]], current: FaceVertex) -> FaceVertex:
    remaining = pending[current]
    if not remaining:
        raise ValueError("face outline is not a closed loop")
    return remaining[0]


def _step(
    pending: dict[FaceVertex, list[FaceVertex]], current: FaceVertex, nxt: FaceVertex
) -> None:
    pending[nxt] = list(nxt.face_connections)
    pending[current] = [fv for fv in pending[current] if fv.vertex is not nxt.vertex]
    pending[nxt] = [fv for fv in pending[nxt] if fv.vertex is not current.vertex]


def _screen_point(viewport: Viewport, face_vertex: FaceVertex) -> Point:
    pos = viewport.to_screen(face_vertex.vertex.vertex2d.pos)
    return pos.x, pos.y


def face_triangles(viewport: Viewport, front: FaceVertex) -> Iterator[Triangle]:
    """Yield clamped screen triangles covering a face, walking its outline both ways.

    Raises ValueError if the face's edges do not form a closed loop.
    """
    start = replace(front)
    pending: dict[FaceVertex, list[FaceVertex]] = {start: list(start.face_connections)}
    current1 = current2 = start
    for _ in range(len(_reachable(front)) + 1):
        next1 = _first(pending, current1)
        if next1 is current2:
            return
        _step(pending, current1, next1)
        next2 = _first(pending, current2)
        _step(pending, current2, next2)

        p1, p2, p3, p4 = (
            _screen_point(viewport, fv) for fv in (current1, next1, current2, next2)
        )
        if p1 != p3:
            p1, p2, p3, p4 = (viewport.clamp(*p) for p in (p1, p2, p3, p4))
            yield p1, p2, p3
        if p2 != p4:
            p1, p2, p3, p4 = (viewport.clamp(*p) for p in (p1, p2, p3, p4))
            yield p4, p2, p3

        current1, current2 = next1, next2
        if current1 is current2:
            return
    raise ValueError("face outline is not a closed loop")


def fill_face(canvas: Canvas, viewport: Viewport, front: FaceVertex) -> None:
    """Fill a face on the canvas, starting the outline walk at the given vertex."""
    for triangle in face_triangles(viewport, front):
        fill_triangle(canvas, *triangle)