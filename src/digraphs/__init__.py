"""Directed graphs with interchangeable storage representations."""

__all__ = [
    "ArcGraph",
    "DemoResult",
    "Graph",
    "ListGraph",
    "MatrixGraph",
    "PreconditionError",
    "Representation",
    "SetGraph",
    "StageResult",
    "bfs",
    "build_demo_graph",
    "convert",
    "convert_chain",
    "dfs",
    "main_bfs",
    "main_dfs",
    "run_demo",
    "topological_sort",
]

from ._demo import DemoResult, StageResult, build_demo_graph, run_demo
from ._graph import (
    ArcGraph,
    Graph,
    ListGraph,
    MatrixGraph,
    PreconditionError,
    Representation,
    SetGraph,
    convert,
    convert_chain,
)
from ._traversal import bfs, dfs, main_bfs, main_dfs, topological_sort
