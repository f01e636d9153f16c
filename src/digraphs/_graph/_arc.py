"""Edge-list (arc) representation."""

from ._contract import Graph


class ArcGraph(Graph):
    """Graph stored as a flat list of ``(from, to)`` pairs.

    The pair list does not bound the vertex count, so it is stored
    separately. Both neighbor queries are linear scans over all edges.
    """

    __slots__ = ("_arcs", "_vertices_count")

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._arcs: list[tuple[int, int]] = []
        self._vertices_count = size

    def add_edge(self, from_vertex: int, to_vertex: int) -> None:
        self.check_vertex(from_vertex)
        self.check_vertex(to_vertex)
        self._arcs.append((from_vertex, to_vertex))

    def vertices_count(self) -> int:
        return self._vertices_count

    def get_next_vertices(self, vertex: int) -> list[int]:
        self.check_vertex(vertex)
        return [to_vertex for from_vertex, to_vertex in self._arcs if from_vertex == vertex]

    def get_prev_vertices(self, vertex: int) -> list[int]:
        self.check_vertex(vertex)
        return [from_vertex for from_vertex, to_vertex in self._arcs if to_vertex == vertex]
