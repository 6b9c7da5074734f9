"""Meshes loaded from ``.vrobj`` files and their perspective projection."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from itertools import cycle
from os import PathLike
from typing import TypeVar

from .geometry import Color, Pos, Pos2D
from .mesh import Face, Vertex3D
from .raster import Canvas, Viewport, fill_face
from .scene import ObjectType, Player, Renderable

_T = TypeVar("_T")

_RED = Color(255, 0, 0, 255)
_WHITE = Color(255, 255, 255, 255)
_MIN_DEPTH = 0.00001


class ModelError(ValueError):
    """Raised when a model description cannot be understood."""


def split_tokens(line: str) -> list[str]:
    """Split a line on single spaces, dropping empty tokens."""
    return [token for token in line.split(" ") if token]


def _convert(kind: Callable[[str], _T], token: str, line_number: int) -> _T:
    try:
        return kind(token)
    except ValueError as exc:
        raise ModelError(f"line {line_number}: invalid number {token!r}") from exc


def _resolve(vertices: list[Vertex3D], index: int) -> Vertex3D:
    # A negative index walks no steps and lands on the first vertex.
    position = max(index, 0)
    if position >= len(vertices):
        raise ModelError(f"vertex index {index} out of range ({len(vertices)} vertices)")
    return vertices[position]


def parse_vrobj(lines: Iterable[str]) -> tuple[list[Vertex3D], list[Face]]:
    """Parse the lines of a ``.vrobj`` description into vertices and linked faces.

    Each line before the first one starting with ``f`` is a vertex: up to three
    coordinates (missing ones are zero) followed by indices of connected
    vertices. From the ``f`` line on, every line lists the vertex indices of
    one face.
    """
    vertices: list[Vertex3D] = []
    face_indices: list[list[int]] = []
    in_faces = False
    for line_number, raw in enumerate(lines, start=1):
        tokens = split_tokens(raw.rstrip("\n"))
        if not in_faces and tokens and tokens[0] == "f":
            in_faces = True
            tokens = tokens[1:]
        elif not in_faces:
            coords = [_convert(float, token, line_number) for token in tokens[:3]]
            coords.extend([0.0] * (3 - len(coords)))
            vertex = Vertex3D(Pos(*coords))
            for token in tokens[3:]:
                vertex.add_pending_connection(_convert(int, token, line_number))
            vertices.append(vertex)
            continue
        indices = [_convert(int, token, line_number) for token in tokens]
        if indices:
            face_indices.append(indices)

    for vertex in vertices:
        for index in vertex.pending_connections:
            vertex.add_connection(_resolve(vertices, index))

    faces = []
    for indices in face_indices:
        face = Face(_resolve(vertices, index) for index in indices)
        face.link()
        faces.append(face)
    return vertices, faces


def load_vrobj(path: str | PathLike[str]) -> tuple[list[Vertex3D], list[Face]]:
    """Read and parse a ``.vrobj`` file; OSError propagates if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_vrobj(handle)


class Model(Renderable):
    """A mesh placed in the world at a position."""

    object_type = ObjectType.MODEL

    def __init__(
        self,
        name: str,
        pos: Pos,
        size: float,
        color: Color,
        vertices: Iterable[Vertex3D] = (),
        faces: Iterable[Face] = (),
    ) -> None:
        super().__init__(name)
        self.pos = pos
        self.size = size
        self.color = color
        self.vertices = list(vertices)
        self.faces = list(faces)

    def project(self, player: Player, focal_length: float) -> None:
        """Project every vertex onto the screen plane as seen by the player.

        Stores the camera-space depth in ``virtual_z`` and the centred screen
        position in each vertex's 2D twin.
        """
        camera = player.pos
        cos_yaw, sin_yaw = _cos_sin(camera.yaw)
        cos_pitch, sin_pitch = _cos_sin(camera.pitch)
        cos_roll, sin_roll = _cos_sin(camera.roll)
        for vertex in self.vertices:
            x = vertex.pos.x + self.pos.x - camera.x
            y = vertex.pos.y + self.pos.y - camera.y
            z = vertex.pos.z + self.pos.z - camera.z
            x, z = x * cos_yaw - z * sin_yaw, z * cos_yaw + x * sin_yaw
            y, z = y * cos_pitch - z * sin_pitch, z * cos_pitch + y * sin_pitch
            x, y = x * cos_roll - y * sin_roll, y * cos_roll + x * sin_roll
            vertex.virtual_z = z
            if z <= 0:
                z = _MIN_DEPTH
            vertex.vertex2d.pos = Pos2D(int(x * focal_length / z), int(y * focal_length / z))

    def render(self, canvas: Canvas, player: Player, viewport: Viewport) -> None:
        """Project the mesh and fill its faces in alternating red and white."""
        self.project(player, viewport.focal_length)
        canvas.set_color(_WHITE)
        for face, color in zip(self.faces, cycle((_RED, _WHITE))):
            canvas.set_color(color)
            if face.front is not None:
                fill_face(canvas, viewport, face.front)


def _cos_sin(degrees: float) -> tuple[float, float]:
    radians = math.radians(degrees)
    return math.cos(radians), math.sin(radians)