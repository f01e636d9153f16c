"""Walk the sample graph through every representation.

Builds the sample graph as adjacency lists, converts it to a matrix, an
edge list and a set-of-successors graph in turn, and prints the BFS and DFS
orders at each step together with the topological order.

Run with ``python examples/representations.py``.
"""

from digraphs import (
    Graph,
    build_demo_graph,
    convert_chain,
    main_bfs,
    main_dfs,
    topological_sort,
)


def print_traversals(graph: Graph) -> None:
    print(f"{graph!r}")
    main_bfs(graph, lambda vertex: print(vertex, end=" "))
    print()
    main_dfs(graph, lambda vertex: print(vertex, end=" "))
    print()


list_graph = build_demo_graph()
print_traversals(list_graph)
print("Topological order:", *topological_sort(list_graph))

for graph in convert_chain(list_graph, ["matrix", "arc", "set"]):
    print()
    print_traversals(graph)
