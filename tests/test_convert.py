"""Tests for converting between graph representations."""

import itertools
import logging

import pytest

from digraphs import (
    ArcGraph,
    Graph,
    ListGraph,
    MatrixGraph,
    Representation,
    SetGraph,
    build_demo_graph,
    convert,
    convert_chain,
)

ALL_REPRESENTATIONS: list[type[Graph]] = [ListGraph, MatrixGraph, ArcGraph, SetGraph]


def _successor_sets(graph: Graph) -> list[set[int]]:
    return [set(graph.get_next_vertices(v)) for v in range(graph.vertices_count())]


def _predecessor_sets(graph: Graph) -> list[set[int]]:
    return [set(graph.get_prev_vertices(v)) for v in range(graph.vertices_count())]


class TestFromGraph:
    """Tests for the from_graph conversion constructor."""

    @pytest.mark.parametrize(
        ("source_class", "target_class"),
        list(itertools.product(ALL_REPRESENTATIONS, repeat=2)),
    )
    def test_preserves_vertices_and_edges(self, source_class: type[Graph], target_class: type[Graph]) -> None:
        source = source_class.from_graph(build_demo_graph())
        target = target_class.from_graph(source)

        assert isinstance(target, target_class)
        assert target.vertices_count() == source.vertices_count()
        assert _successor_sets(target) == _successor_sets(source)
        assert _predecessor_sets(target) == _predecessor_sets(source)

    @pytest.mark.parametrize(
        ("first_class", "second_class"),
        list(itertools.product(ALL_REPRESENTATIONS, repeat=2)),
    )
    def test_round_trip(self, first_class: type[Graph], second_class: type[Graph]) -> None:
        original = first_class.from_graph(build_demo_graph())
        round_tripped = first_class.from_graph(second_class.from_graph(original))

        assert _successor_sets(round_tripped) == _successor_sets(original)

    @pytest.mark.parametrize("target_class", ALL_REPRESENTATIONS)
    def test_source_is_not_modified(self, target_class: type[Graph]) -> None:
        source = build_demo_graph()
        before = [source.get_next_vertices(v) for v in range(source.vertices_count())]

        target = target_class.from_graph(source)
        target.add_edge(4, 0)

        assert [source.get_next_vertices(v) for v in range(source.vertices_count())] == before

    def test_list_copy_keeps_successor_order_and_duplicates(self) -> None:
        source = ArcGraph(3)
        source.add_edge(0, 2)
        source.add_edge(0, 1)
        source.add_edge(0, 2)

        target = ListGraph.from_graph(source)

        assert target.get_next_vertices(0) == [2, 1, 2]

    def test_matrix_collapses_parallel_edges(self) -> None:
        source = ListGraph(2)
        source.add_edge(0, 1)
        source.add_edge(0, 1)

        target = MatrixGraph.from_graph(source)

        assert target.row(0) == [0, 1]
        assert ArcGraph.from_graph(target).get_next_vertices(0) == [1]

    def test_empty_graph(self) -> None:
        target = SetGraph.from_graph(ListGraph(0))
        assert target.vertices_count() == 0


class TestConvert:
    """Tests for the convert and convert_chain helpers."""

    @pytest.mark.parametrize(
        ("representation", "expected_class"),
        [
            (Representation.LIST, ListGraph),
            (Representation.MATRIX, MatrixGraph),
            (Representation.ARC, ArcGraph),
            (Representation.SET, SetGraph),
        ],
    )
    def test_convert_by_member(self, representation: Representation, expected_class: type[Graph]) -> None:
        assert isinstance(convert(build_demo_graph(), representation), expected_class)

    def test_convert_by_name(self) -> None:
        assert isinstance(convert(build_demo_graph(), "matrix"), MatrixGraph)

    def test_convert_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="tree"):
            convert(build_demo_graph(), "tree")

    def test_representation_docs(self) -> None:
        assert Representation.ARC.__doc__ == "Edge list (ArcGraph)"

    def test_chain_list_matrix_arc_set(self) -> None:
        source = build_demo_graph()
        expected_next = _successor_sets(source)
        expected_prev = _predecessor_sets(source)

        stages = convert_chain(source, ["matrix", "arc", "set"])

        assert [type(stage) for stage in stages] == [MatrixGraph, ArcGraph, SetGraph]
        for stage in stages:
            assert stage.vertices_count() == 7
            assert _successor_sets(stage) == expected_next
            assert _predecessor_sets(stage) == expected_prev

    def test_empty_chain(self) -> None:
        assert convert_chain(build_demo_graph(), []) == []

    def test_convert_logs_conversion(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="digraphs"):
            convert(build_demo_graph(), "set")

        messages = [record.getMessage() for record in caplog.records]
        assert "Converting ListGraph to SetGraph" in messages
        assert "Built SetGraph from ListGraph (7 vertices)" in messages
