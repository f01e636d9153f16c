"""Adjacency-list representation."""

from ._contract import Graph


class ListGraph(Graph):
    """Graph stored as one ordered successor list per vertex.

    Duplicate edges are kept as duplicate entries. Predecessor queries scan
    every list, since no reverse index is maintained.
    """

    __slots__ = ("_adjacency",)

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._adjacency: list[list[int]] = [[] for _ in range(size)]

    def add_edge(self, from_vertex: int, to_vertex: int) -> None:
        self.check_vertex(from_vertex)
        self.check_vertex(to_vertex)
        self._adjacency[from_vertex].append(to_vertex)

    def vertices_count(self) -> int:
        return len(self._adjacency)

    def get_next_vertices(self, vertex: int) -> list[int]:
        self.check_vertex(vertex)
        return list(self._adjacency[vertex])

    def get_prev_vertices(self, vertex: int) -> list[int]:
        self.check_vertex(vertex)
        return [
            from_vertex
            for from_vertex, successors in enumerate(self._adjacency)
            for to_vertex in successors
            if to_vertex == vertex
        ]
