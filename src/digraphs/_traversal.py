"""Traversal algorithms written against the abstract graph contract.

Every function here only uses ``Graph`` operations, so it runs unchanged
over any representation. Depth-first routines keep an explicit stack of
successor iterators instead of recursing, which keeps deep graphs off the
Python call stack while visiting vertices in the same order a recursive
implementation would.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, TypeAlias

from ._graph import PreconditionError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from ._graph import Graph

logger = logging.getLogger(__name__)

Visitor: TypeAlias = "Callable[[int], None]"


def _check_root(graph: Graph, vertex: int, visited: list[bool]) -> None:
    if len(visited) != graph.vertices_count():
        msg = f"Visited list has length {len(visited)}, expected {graph.vertices_count()}"
        raise PreconditionError(msg)
    graph.check_vertex(vertex)


def bfs(graph: Graph, vertex: int, visited: list[bool], visit: Visitor) -> None:
    """Breadth-first traversal from a single root.

    A vertex is marked visited when it is enqueued, so it enters the queue
    at most once even when several predecessors reach it.

    Args:
        graph: Graph to traverse.
        vertex: Root vertex. Assumed not yet visited.
        visited: Shared visited markers, one per vertex. Updated in place.
        visit: Called once per vertex, in dequeue order.

    """
    _check_root(graph, vertex, visited)
    queue = deque([vertex])
    visited[vertex] = True

    while queue:
        current = queue.popleft()
        visit(current)
        for next_vertex in graph.get_next_vertices(current):
            if not visited[next_vertex]:
                visited[next_vertex] = True
                queue.append(next_vertex)


def dfs(graph: Graph, vertex: int, visited: list[bool], visit: Visitor) -> None:
    """Pre-order depth-first traversal from a single root.

    Successors are explored in the order ``get_next_vertices`` returns them.

    Args:
        graph: Graph to traverse.
        vertex: Root vertex. Assumed not yet visited.
        visited: Shared visited markers, one per vertex. Updated in place.
        visit: Called once per vertex, when it is first entered.

    """
    _check_root(graph, vertex, visited)
    visited[vertex] = True
    visit(vertex)
    stack: list[Iterator[int]] = [iter(graph.get_next_vertices(vertex))]

    while stack:
        for next_vertex in stack[-1]:
            if not visited[next_vertex]:
                visited[next_vertex] = True
                visit(next_vertex)
                stack.append(iter(graph.get_next_vertices(next_vertex)))
                break
        else:
            stack.pop()


def _visit_all(graph: Graph, traverse: Callable[[Graph, int, list[bool], Visitor], None], visit: Visitor) -> None:
    visited = [False] * graph.vertices_count()
    for vertex in range(graph.vertices_count()):
        if not visited[vertex]:
            logger.debug(f"{traverse.__name__}: starting component at vertex {vertex}")
            traverse(graph, vertex, visited, visit)


def main_bfs(graph: Graph, visit: Visitor) -> None:
    """Breadth-first traversal covering every vertex, component by component.

    Roots are tried in index order; each still-unvisited vertex starts a new
    ``bfs`` sharing one visited list, so every vertex is visited exactly once.
    """
    _visit_all(graph, bfs, visit)


def main_dfs(graph: Graph, visit: Visitor) -> None:
    """Depth-first traversal covering every vertex, component by component.

    See ``main_bfs`` for how roots are chosen.
    """
    _visit_all(graph, dfs, visit)


def topological_sort(graph: Graph) -> deque[int]:
    """Order vertices so that each precedes every vertex reachable from it.

    A vertex is prepended to the result once all of its successors have been
    finished. Roots are tried in index order with one shared visited list.

    The result is only meaningful for acyclic graphs. On a graph with a cycle
    some ordering of all vertices is still returned; cycles are not detected.

    Args:
        graph: Graph to sort.

    Returns:
        Every vertex exactly once, in topological order.

    """
    visited = [False] * graph.vertices_count()
    order: deque[int] = deque()

    for root in range(graph.vertices_count()):
        if visited[root]:
            continue
        logger.debug(f"topological_sort: starting component at vertex {root}")
        visited[root] = True
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(graph.get_next_vertices(root)))]
        while stack:
            vertex, successors = stack[-1]
            for next_vertex in successors:
                if not visited[next_vertex]:
                    visited[next_vertex] = True
                    stack.append((next_vertex, iter(graph.get_next_vertices(next_vertex))))
                    break
            else:
                stack.pop()
                order.appendleft(vertex)

    return order
