"""Conversion between graph representations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from digraphs._str_enum_with_doc import StrEnumWithDoc

from ._arc import ArcGraph
from ._list import ListGraph
from ._matrix import MatrixGraph
from ._set import SetGraph

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._contract import Graph

logger = logging.getLogger(__name__)


class Representation(StrEnumWithDoc):
    """Names of the concrete graph representations.

    Each member carries a short description as its docstring.
    """

    LIST = "list", "Adjacency lists (ListGraph)"
    MATRIX = "matrix", "Adjacency matrix (MatrixGraph)"
    ARC = "arc", "Edge list (ArcGraph)"
    SET = "set", "Successor hash sets (SetGraph)"

    @property
    def graph_class(self) -> type[Graph]:
        """The class implementing this representation."""
        match self:
            case Representation.LIST:
                return ListGraph
            case Representation.MATRIX:
                return MatrixGraph
            case Representation.ARC:
                return ArcGraph
            case Representation.SET:
                return SetGraph


def convert(source: Graph, representation: Representation | str) -> Graph:
    """Build a copy of ``source`` in another representation.

    Args:
        source: Graph to read. It is not modified.
        representation: Target representation, as a member or its name.

    Returns:
        A new graph with the same vertex count and edges.

    Raises:
        ValueError: If ``representation`` is not a known name.

    """
    target = Representation(representation)
    logger.debug(f"Converting {type(source).__name__} to {target.graph_class.__name__}")
    return target.graph_class.from_graph(source)


def convert_chain(source: Graph, representations: Iterable[Representation | str]) -> list[Graph]:
    """Convert successively through ``representations``.

    Each step reads the graph produced by the previous step, starting from
    ``source``.

    Returns:
        The graph produced at every step, in order.

    """
    graphs: list[Graph] = []
    current = source
    for representation in representations:
        current = convert(current, representation)
        graphs.append(current)
    return graphs
