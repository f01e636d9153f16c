"""Hash-set representation."""

from ._contract import Graph


class SetGraph(Graph):
    """Graph stored as one unordered successor set per vertex.

    Duplicate edges collapse on insertion. Successors come back in set
    iteration order, which callers must not rely on.
    """

    __slots__ = ("_sets", "_vertices_count")

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._sets: list[set[int]] = [set() for _ in range(size)]
        self._vertices_count = size

    def add_edge(self, from_vertex: int, to_vertex: int) -> None:
        self.check_vertex(from_vertex)
        self.check_vertex(to_vertex)
        self._sets[from_vertex].add(to_vertex)

    def vertices_count(self) -> int:
        return self._vertices_count

    def get_next_vertices(self, vertex: int) -> list[int]:
        self.check_vertex(vertex)
        return list(self._sets[vertex])

    def get_prev_vertices(self, vertex: int) -> list[int]:
        self.check_vertex(vertex)
        return [from_vertex for from_vertex, successors in enumerate(self._sets) if vertex in successors]
