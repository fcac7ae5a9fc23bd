"""
Square geometry.

The shape is fixed: a unit square centred on the origin, stored as
four corners. Drawn in order and closed, the corners outline the two
triangles that share the 0-2 diagonal.
"""

from typing import NamedTuple, Tuple


class Vertex(NamedTuple):
    """A point in shape space."""
    x: float
    y: float


# Corners in drawing order
SQUARE_VERTICES: Tuple[Vertex, ...] = (
    Vertex(-0.5, -0.5),
    Vertex(0.5, -0.5),
    Vertex(0.5, 0.5),
    Vertex(-0.5, 0.5),
)

# Two triangles sharing the diagonal between vertex 0 and vertex 2
SQUARE_TRIANGLES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (0, 2, 3),
)


class Geometry:
    """
    Read-only vertex store.

    Indexing wraps, so any integer (negative included) selects a vertex.
    """

    def __init__(
        self,
        vertices: Tuple[Vertex, ...] = SQUARE_VERTICES,
        triangles: Tuple[Tuple[int, int, int], ...] = SQUARE_TRIANGLES
    ):
        self._vertices = tuple(Vertex(float(x), float(y)) for x, y in vertices)
        self._triangles = tuple(triangles)

    def vertex_count(self) -> int:
        """Get number of vertices."""
        return len(self._vertices)

    def vertex_at(self, index: int) -> Vertex:
        """
        Get the vertex at an index.

        Args:
            index: Any integer; taken modulo the vertex count

        Returns:
            The vertex coordinates
        """
        return self._vertices[index % len(self._vertices)]

    def vertices(self) -> Tuple[Vertex, ...]:
        """Get all vertices in drawing order."""
        return self._vertices

    def triangles(self) -> Tuple[Tuple[int, int, int], ...]:
        """
        Get the triangulation as vertex index triples.

        Describes the shape only; the renderer fills the closed
        outline of vertices() and does not read this.
        """
        return self._triangles


# Shared default instance
SQUARE = Geometry()
