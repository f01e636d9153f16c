"""Fixed demonstration run over the sample graph.

The demo builds a 7-vertex graph as a ``ListGraph``, traverses and sorts
it, then converts it through a chain of representations and traverses
each result. The results are returned as plain data; rendering lives in
the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._graph import ListGraph, Representation, convert_chain
from ._traversal import main_bfs, main_dfs, topological_sort

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._graph import Graph

logger = logging.getLogger(__name__)

DEMO_VERTICES = 7
DEMO_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1),
    (0, 5),
    (1, 2),
    (1, 3),
    (1, 5),
    (1, 6),
    (3, 2),
    (3, 4),
    (3, 6),
    (5, 4),
    (5, 6),
    (6, 4),
)
DEFAULT_CHAIN: tuple[Representation, ...] = (
    Representation.MATRIX,
    Representation.ARC,
    Representation.SET,
)


@dataclass(frozen=True, slots=True)
class StageResult:
    """Traversal results for one representation of the demo graph.

    Attributes:
        representation: Which representation this stage used.
        vertices_count: Vertex count reported by the graph.
        edge_count: Number of edges reported through the contract.
        bfs_order: Vertices in ``main_bfs`` visiting order.
        dfs_order: Vertices in ``main_dfs`` visiting order.

    """

    representation: Representation
    vertices_count: int
    edge_count: int
    bfs_order: tuple[int, ...]
    dfs_order: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class DemoResult:
    """Everything the demo computes."""

    stages: tuple[StageResult, ...]
    topological_order: tuple[int, ...]

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "topological_order": list(self.topological_order),
            "stages": [
                {
                    "representation": str(stage.representation),
                    "vertices_count": stage.vertices_count,
                    "edge_count": stage.edge_count,
                    "bfs_order": list(stage.bfs_order),
                    "dfs_order": list(stage.dfs_order),
                }
                for stage in self.stages
            ],
        }


def build_demo_graph() -> ListGraph:
    """Build the sample graph as a ``ListGraph``."""
    graph = ListGraph(DEMO_VERTICES)
    for from_vertex, to_vertex in DEMO_EDGES:
        graph.add_edge(from_vertex, to_vertex)
    return graph


def _run_stage(representation: Representation, graph: Graph) -> StageResult:
    bfs_order: list[int] = []
    dfs_order: list[int] = []
    main_bfs(graph, bfs_order.append)
    main_dfs(graph, dfs_order.append)
    logger.debug(f"{representation}: BFS {bfs_order}, DFS {dfs_order}")
    return StageResult(
        representation=representation,
        vertices_count=graph.vertices_count(),
        edge_count=sum(1 for _ in graph.edges()),
        bfs_order=tuple(bfs_order),
        dfs_order=tuple(dfs_order),
    )


def run_demo(chain: Iterable[Representation | str] = DEFAULT_CHAIN) -> DemoResult:
    """Run the demonstration.

    Args:
        chain: Representations to convert through after the initial
            ``ListGraph``. Each conversion reads the previous stage's graph.

    Returns:
        The topological order of the sample graph and one ``StageResult``
        per stage, starting with the ``ListGraph`` itself.

    """
    representations = [Representation(name) for name in chain]
    graph = build_demo_graph()
    stages = [_run_stage(Representation.LIST, graph)]
    for representation, converted in zip(representations, convert_chain(graph, representations), strict=True):
        stages.append(_run_stage(representation, converted))

    return DemoResult(
        stages=tuple(stages),
        topological_order=tuple(topological_sort(graph)),
    )
