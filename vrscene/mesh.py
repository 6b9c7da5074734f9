"""Vertices, their connections and the faces of a mesh."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

from .geometry import Pos, Pos2D


def _without(items: list, target: object) -> list:
    return [item for item in items if item is not target]


@dataclass(eq=False)
class Vertex:
    """A point on the screen plane with edges to other screen vertices."""

    pos: Pos2D
    connections: list[Vertex] = field(default_factory=list)

    def add_connection(self, vertex: Vertex) -> None:
        """Add an edge to another vertex."""
        self.connections.append(vertex)

    def remove_connection(self, vertex: Vertex) -> None:
        """Remove every edge to the given vertex."""
        self.connections = _without(self.connections, vertex)


@dataclass(eq=False)
class Vertex3D:
    """A point in model space, its edges and its last projection onto the screen."""

    pos: Pos
    connections: list[Vertex3D] = field(default_factory=list)
    pending_connections: list[int] = field(default_factory=list)
    vertex2d: Vertex = field(default_factory=lambda: Vertex(Pos2D(0, 0)))
    virtual_z: float = 0.0

    def __post_init__(self) -> None:
        self.pos = replace(self.pos)

    def add_connection(self, vertex: Vertex3D) -> None:
        """Add an edge to another vertex."""
        self.connections.append(vertex)

    def add_pending_connection(self, index: int) -> None:
        """Record an edge by vertex index, to be resolved once all vertices are known."""
        self.pending_connections.append(index)

    def remove_connection(self, vertex: Vertex3D) -> None:
        """Remove every edge to the given vertex."""
        self.connections = _without(self.connections, vertex)


@dataclass(eq=False)
class FaceVertex:
    """A vertex as it takes part in one face, with edges to the face's other vertices."""

    vertex: Vertex3D
    face_connections: list[FaceVertex] = field(default_factory=list)

    @property
    def connections(self) -> list[Vertex3D]:
        """The edges of the underlying vertex."""
        return self.vertex.connections

    def add_face_connection(self, other: FaceVertex) -> None:
        """Add an edge to another vertex of the same face."""
        self.face_connections.append(other)


class Face:
    """An ordered polygon of vertices."""

    def __init__(self, vertices: Iterable[Vertex3D] = ()) -> None:
        self._vertices: list[FaceVertex] = []
        for vertex in vertices:
            self.add(vertex)

    def __iter__(self) -> Iterator[FaceVertex]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    @property
    def front(self) -> FaceVertex | None:
        """The first vertex of the face, or None if it is empty."""
        return self._vertices[0] if self._vertices else None

    @property
    def last(self) -> FaceVertex | None:
        """The last vertex of the face, or None if it is empty."""
        return self._vertices[-1] if self._vertices else None

    def add(self, vertex: Vertex3D) -> FaceVertex:
        """Append a vertex to the face and return its face entry."""
        face_vertex = FaceVertex(vertex)
        self._vertices.append(face_vertex)
        return face_vertex

    def remove(self, face_vertex: FaceVertex) -> None:
        """Remove a vertex entry from the face; raise ValueError if it is not part of it."""
        for position, item in enumerate(self._vertices):
            if item is face_vertex:
                del self._vertices[position]
                return
        raise ValueError("vertex is not part of this face")

    def link(self) -> None:
        """Connect each face vertex to the face vertices its underlying vertex has edges to."""
        for face_vertex in self._vertices:
            for target in face_vertex.connections:
                for candidate in self._vertices:
                    if candidate.vertex is target:
                        face_vertex.add_face_connection(candidate)

    def average_depth(self) -> float:
        """Mean projected depth of the face's vertices; NaN for an empty face."""
        if not self._vertices:
            return math.nan
        return sum(fv.vertex.virtual_z for fv in self._vertices) / len(self._vertices)


def edges(vertices: Iterable[Vertex]) -> Iterator[tuple[Pos2D, Pos2D]]:
    """Yield (start, end) screen positions for every edge of the given vertices."""
    for vertex in vertices:
        for other in vertex.connections:
            yield vertex.pos, other.pos