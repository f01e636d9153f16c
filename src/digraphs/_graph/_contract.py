"""Abstract graph contract shared by every storage representation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class PreconditionError(AssertionError):
    """Raised when a caller violates a precondition (e.g. vertex out of range).

    This signals a programming error in the caller, not a runtime condition,
    so the library never catches it. Unlike a bare ``assert`` it is raised
    even when Python runs with ``-O``.
    """


def check_size(size: int) -> None:
    """Ensure a vertex count is usable for a new graph.

    Raises:
        PreconditionError: If ``size`` is negative.

    """
    if size < 0:
        msg = f"Vertex count must be non-negative, got {size}"
        raise PreconditionError(msg)


class Graph(ABC):
    """A directed graph over the vertices ``0..N-1``.

    ``N`` is fixed at construction time; edges can only be added. Every
    representation implements the four contract operations below, so an
    algorithm written against ``Graph`` runs unmodified on any of them.
    """

    __slots__ = ()

    def __init__(self, size: int) -> None:
        check_size(size)

    @abstractmethod
    def add_edge(self, from_vertex: int, to_vertex: int) -> None:
        """Insert the directed edge ``from_vertex -> to_vertex``.

        Raises:
            PreconditionError: If either endpoint is out of range.

        """

    @abstractmethod
    def vertices_count(self) -> int:
        """Return the number of vertices ``N``."""

    @abstractmethod
    def get_next_vertices(self, vertex: int) -> list[int]:
        """Return the direct successors of ``vertex``.

        Order and duplicates depend on the representation. The returned list
        is a fresh copy.

        Raises:
            PreconditionError: If ``vertex`` is out of range.

        """

    @abstractmethod
    def get_prev_vertices(self, vertex: int) -> list[int]:
        """Return the direct predecessors of ``vertex``.

        Raises:
            PreconditionError: If ``vertex`` is out of range.

        """

    def check_vertex(self, vertex: int) -> None:
        """Raise ``PreconditionError`` unless ``0 <= vertex < N``."""
        count = self.vertices_count()
        if not 0 <= vertex < count:
            msg = f"Vertex {vertex} out of range for graph with {count} vertices"
            raise PreconditionError(msg)

    @classmethod
    def from_graph(cls, source: Graph) -> Self:
        """Build a new graph of this representation from any other graph.

        Only the contract of ``source`` is read; edges are written through
        this representation's own ``add_edge``. ``source`` is left untouched.

        Args:
            source: The graph to copy.

        Returns:
            A new instance with the same vertex count and edges.

        """
        graph = cls(source.vertices_count())
        for from_vertex, to_vertex in source.edges():
            graph.add_edge(from_vertex, to_vertex)
        logger.debug(f"Built {cls.__name__} from {type(source).__name__} ({source.vertices_count()} vertices)")
        return graph

    def edges(self) -> Iterator[tuple[int, int]]:
        """Iterate over every edge, vertex by vertex in successor order."""
        for from_vertex in range(self.vertices_count()):
            for to_vertex in self.get_next_vertices(from_vertex):
                yield from_vertex, to_vertex

    def __repr__(self) -> str:
        edge_count = sum(1 for _ in self.edges())
        return f"{type(self).__name__}(vertices={self.vertices_count()}, edges={edge_count})"
