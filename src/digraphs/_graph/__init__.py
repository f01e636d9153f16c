"""Graph module providing the graph contract and its representations.

This module contains:
- Graph: the abstract contract every representation implements
- ListGraph, MatrixGraph, ArcGraph, SetGraph: concrete storage layouts
- convert / convert_chain: building one representation from another
"""

from ._arc import ArcGraph
from ._contract import Graph, PreconditionError
from ._convert import Representation, convert, convert_chain
from ._list import ListGraph
from ._matrix import MatrixGraph
from ._set import SetGraph

__all__ = [
    "ArcGraph",
    "Graph",
    "ListGraph",
    "MatrixGraph",
    "PreconditionError",
    "Representation",
    "SetGraph",
    "convert",
    "convert_chain",
]
