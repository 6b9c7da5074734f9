import pytest

from vrscene.geometry import Color, Pos, Pos2D
from vrscene.mesh import Face, Vertex3D
from vrscene.raster import (
    Canvas,
    Viewport,
    bresenham_line,
    draw_line,
    face_triangles,
    fill_face,
    fill_triangle,
    interpolate_x,
    triangle_spans,
)

SQUARE = [(-10, -10), (10, -10), (10, 10), (-10, 10)]
SQUARE_EDGES = [(0, 1), (0, 3), (1, 0), (1, 2), (2, 1), (2, 3), (3, 2), (3, 0)]
TRIANGLE = [(0, 20), (-15, -10), (15, -10)]
TRIANGLE_EDGES = [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)]


def _face(points, edges):
    vertices = [Vertex3D(Pos(0.0, 0.0, 0.0)) for _ in points]
    for vertex, (x, y) in zip(vertices, points):
        vertex.vertex2d.pos = Pos2D(x, y)
    for a, b in edges:
        vertices[a].add_connection(vertices[b])
    face = Face(vertices)
    face.link()
    return face


def _screen_set(viewport, points):
    result = set()
    for x, y in points:
        pos = viewport.to_screen(Pos2D(x, y))
        result.add((pos.x, pos.y))
    return result


def test_canvas_records_commands():
    canvas = Canvas()
    color = Color(1, 2, 3, 4)
    canvas.set_color(color)
    canvas.clear()
    canvas.draw_line(1, 2, 3, 4)
    assert canvas.color == color
    assert canvas.commands[:2] == [("color", color), ("clear",)]
    assert canvas.lines == [(1, 2, 3, 4)]


def test_to_screen_flips_y_and_shifts():
    vp = Viewport(200, 100)
    origin = vp.to_screen(Pos2D(0, 0))
    moved = vp.to_screen(Pos2D(7, 9))
    assert (moved.x - origin.x, moved.y - origin.y) == (7, -9)


def test_clamp_limits_to_screen():
    vp = Viewport(200, 100)
    assert vp.clamp(-5, 10_000) == (0, 100)
    assert vp.clamp(50, 60) == (50, 60)
    assert vp.clamp(500, -3) == (200, 0)


def test_contains_is_strict():
    vp = Viewport(200, 100)
    assert vp.contains(1, 1)
    assert not vp.contains(0, 10)
    assert not vp.contains(200, 10)
    assert not vp.contains(10, 100)


def test_default_focal_length():
    assert Viewport().focal_length == 1000.0


@pytest.mark.parametrize("end", [(10, 3), (-4, 9), (0, 0), (-7, -7), (3, -12)])
def test_bresenham_line_properties(end):
    points = list(bresenham_line(0, 0, *end))
    assert points[0] == (0, 0)
    assert points[-1] == end
    assert len(points) == max(abs(end[0]), abs(end[1])) + 1
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1


def test_interpolate_x_endpoints_and_horizontal():
    assert interpolate_x((2, 3), (8, 9), 3) == 2
    assert interpolate_x((2, 3), (8, 9), 9) == 8
    assert interpolate_x((4, 5), (30, 5), 5) == 4


def test_interpolate_x_truncates_toward_zero():
    assert interpolate_x((0, 0), (-3, 2), 1) == -1


def test_triangle_spans_cover_rows():
    spans = list(triangle_spans((5, 0), (0, 10), (10, 10)))
    assert [span[0] for span in spans] == list(range(0, 11))
    assert all(x1 <= x2 for _, x1, x2 in spans)
    assert spans[0][1] <= 5 <= spans[0][2]
    assert spans[-1] == (10, 0, 10)


def test_triangle_spans_point():
    assert list(triangle_spans((4, 4), (4, 4), (4, 4))) == [(4, 4, 4)]


def test_fill_triangle_draws_horizontal_lines():
    canvas = Canvas()
    fill_triangle(canvas, (0, 0), (20, 5), (3, 12))
    lines = canvas.lines
    assert [line[1] for line in lines] == list(range(0, 13))
    assert all(y1 == y2 and x1 <= x2 for x1, y1, x2, y2 in lines)


def test_draw_line_converts_endpoints():
    vp = Viewport(200, 100)
    canvas = Canvas()
    start, end = Pos2D(-5, 5), Pos2D(20, -30)
    draw_line(canvas, vp, start, end)
    a, b = vp.to_screen(start), vp.to_screen(end)
    assert canvas.lines == [(a.x, a.y, b.x, b.y)]


def test_face_triangles_square():
    vp = Viewport(200, 100)
    face = _face(SQUARE, SQUARE_EDGES)
    triangles = list(face_triangles(vp, face.front))
    assert len(triangles) == 2
    assert {p for tri in triangles for p in tri} == _screen_set(vp, SQUARE)


def test_face_triangles_triangle():
    vp = Viewport(200, 100)
    face = _face(TRIANGLE, TRIANGLE_EDGES)
    triangles = list(face_triangles(vp, face.front))
    assert len(triangles) == 1
    assert set(triangles[0]) == _screen_set(vp, TRIANGLE)


def test_face_triangles_are_clamped():
    vp = Viewport(200, 100)
    points = [(-10, -10), (10_000, -10), (10, 10_000), (-10, 10)]
    face = _face(points, SQUARE_EDGES)
    for triangle in face_triangles(vp, face.front):
        for x, y in triangle:
            assert 0 <= x <= vp.width
            assert 0 <= y <= vp.height


def test_face_triangles_open_outline_raises():
    vp = Viewport(200, 100)
    face = _face([(0, 0), (5, 5)], [(0, 1), (1, 0)])
    with pytest.raises(ValueError):
        list(face_triangles(vp, face.front))


def test_fill_face_draws_inside_screen():
    vp = Viewport(200, 100)
    canvas = Canvas()
    face = _face(SQUARE, SQUARE_EDGES)
    fill_face(canvas, vp, face.front)
    lines = canvas.lines
    assert lines
    for x1, y1, x2, y2 in lines:
        assert y1 == y2
        assert 0 <= x1 <= x2 <= vp.width