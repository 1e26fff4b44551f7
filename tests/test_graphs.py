import math

import pytest

from algokit.graphs import (
    AdjacencyList,
    AdjacencyMatrix,
    IncidenceMatrix,
    dfs_list,
    dfs_matrix,
    dijkstra,
)


def test_adjacency_matrix_edges_are_symmetric():
    graph = AdjacencyMatrix(4)
    graph.add_edge(0, 2)
    assert graph.has_edge(0, 2)
    assert graph.has_edge(2, 0)
    assert not graph.has_edge(0, 1)
    assert graph.vertex_count == 4


def test_adjacency_matrix_remove_edge():
    graph = AdjacencyMatrix(3)
    graph.add_edge(1, 2)
    graph.remove_edge(2, 1)
    assert not graph.has_edge(1, 2)
    assert graph.rows == [[0, 0, 0]] * 3


def test_adjacency_matrix_ignores_out_of_range():
    graph = AdjacencyMatrix(2)
    graph.add_edge(0, 5)
    graph.add_edge(-1, 0)
    assert graph.rows == [[0, 0], [0, 0]]
    assert not graph.has_edge(0, 5)


def test_adjacency_matrix_render():
    graph = AdjacencyMatrix(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    assert graph.render() == "010\n101\n010"


def test_incidence_matrix_marks_tail_and_head():
    graph = IncidenceMatrix(3, 2)
    graph.add_edge(0, 1, 0)
    graph.add_edge(2, 0, 1)
    rows = graph.rows
    assert [row[0] for row in rows] == [1, -1, 0]
    assert [row[1] for row in rows] == [-1, 0, 1]
    assert len(graph.render().splitlines()) == 3


def test_incidence_matrix_rejects_bad_indices():
    graph = IncidenceMatrix(2, 1)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2, 0)
    with pytest.raises(IndexError):
        graph.add_edge(0, 1, 1)


def test_adjacency_list_newest_first():
    graph = AdjacencyList(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(0, 3)
    assert graph.neighbors(0) == [3, 2, 1]
    assert graph.neighbors(2) == [0]


def test_adjacency_list_render():
    graph = AdjacencyList(2)
    graph.add_edge(0, 1)
    assert graph.render().splitlines() == ["vertex 0:  -> 1", "vertex 1:  -> 0"]


def test_adjacency_list_rejects_bad_vertex():
    graph = AdjacencyList(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.neighbors(-1)


def test_dfs_matrix_visits_reachable_once():
    graph = AdjacencyMatrix(6)
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 3), (4, 5)]:
        graph.add_edge(u, v)
    order = dfs_matrix(graph.rows, 0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3]
    assert len(order) == len(set(order))


def test_dfs_matrix_goes_deep_first():
    graph = AdjacencyMatrix(4)
    for u, v in [(0, 1), (0, 3), (1, 2)]:
        graph.add_edge(u, v)
    assert dfs_matrix(graph.rows, 0) == [0, 1, 2, 3]


def test_dfs_list_follows_neighbour_order():
    graph = AdjacencyList(4)
    for u, v in [(0, 1), (0, 2), (2, 3)]:
        graph.add_edge(u, v)
    adjacency = [graph.neighbors(v) for v in range(4)]
    order = dfs_list(adjacency, 0)
    assert order[:2] == [0, adjacency[0][0]]
    assert sorted(order) == [0, 1, 2, 3]


def test_dfs_agrees_between_representations():
    edges = [(0, 1), (1, 2), (2, 3), (3, 0), (1, 4)]
    matrix = AdjacencyMatrix(5)
    for u, v in edges:
        matrix.add_edge(u, v)
    adjacency = [[i for i, cell in enumerate(row) if cell] for row in matrix.rows]
    assert dfs_list(adjacency, 2) == dfs_matrix(matrix.rows, 2)


def test_dfs_bad_start():
    with pytest.raises(IndexError):
        dfs_matrix([[0]], 1)


def sample_graph():
    graph = [[0] * 5 for _ in range(5)]
    graph[0][1] = 4
    graph[0][2] = 1
    graph[1][2] = 2
    graph[1][3] = 5
    graph[2][1] = 2
    graph[2][3] = 3
    graph[3][4] = 2
    return graph


def test_dijkstra_sample():
    assert dijkstra(sample_graph(), 0) == [0, 3, 1, 4, 6]


def test_dijkstra_unreachable_is_infinite():
    distances = dijkstra(sample_graph(), 3)
    assert distances[3] == 0
    assert distances[4] == 2
    assert all(math.isinf(d) for d in distances[:3])


def test_dijkstra_satisfies_edge_relaxation():
    graph = sample_graph()
    distances = dijkstra(graph, 0)
    for u, row in enumerate(graph):
        for v, weight in enumerate(row):
            if weight:
                assert distances[v] <= distances[u] + weight


def test_dijkstra_rejects_bad_input():
    with pytest.raises(IndexError):
        dijkstra(sample_graph(), 5)
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [0]], 0)