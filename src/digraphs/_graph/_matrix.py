"""Adjacency-matrix representation."""

from ._contract import Graph


class MatrixGraph(Graph):
    """Graph stored as an ``N x N`` matrix of presence cells.

    Each cell holds 0 or 1, so parallel edges cannot be represented:
    inserting the same edge twice leaves a single edge.

    ``row`` exposes the raw length-``N`` presence row of a vertex, while
    ``get_next_vertices`` reports the flagged targets in ascending order.
    """

    __slots__ = ("_matrix",)

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._matrix: list[list[int]] = [[0] * size for _ in range(size)]

    def add_edge(self, from_vertex: int, to_vertex: int) -> None:
        self.check_vertex(from_vertex)
        self.check_vertex(to_vertex)
        self._matrix[from_vertex][to_vertex] = 1

    def vertices_count(self) -> int:
        return len(self._matrix)

    def row(self, vertex: int) -> list[int]:
        """Return the presence row of ``vertex`` (length ``N``, 0/1 per target)."""
        self.check_vertex(vertex)
        return list(self._matrix[vertex])

    def get_next_vertices(self, vertex: int) -> list[int]:
        self.check_vertex(vertex)
        return [to_vertex for to_vertex, cell in enumerate(self._matrix[vertex]) if cell]

    def get_prev_vertices(self, vertex: int) -> list[int]:
        self.check_vertex(vertex)
        return [from_vertex for from_vertex, row in enumerate(self._matrix) if row[vertex]]
