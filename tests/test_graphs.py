import random

import pytest

from algobox.graphs import INF, floyd_warshall, format_distance_matrix

SOURCE_GRAPH = [
    [0, 3, INF, 5],
    [2, 0, INF, 4],
    [INF, 1, 0, INF],
    [INF, INF, 2, 0],
]


def test_source_example():
    assert floyd_warshall(SOURCE_GRAPH) == [
        [0, 3, 7, 5],
        [2, 0, 6, 4],
        [3, 1, 0, 5],
        [5, 3, 2, 0],
    ]


def test_input_is_not_modified():
    graph = [list(row) for row in SOURCE_GRAPH]
    floyd_warshall(graph)
    assert graph == SOURCE_GRAPH


def test_unreachable_pairs_stay_inf():
    graph = [[0, INF], [INF, 0]]
    assert floyd_warshall(graph) == graph


def test_format_unreachable():
    assert format_distance_matrix([[0, INF], [INF, 0]]) == "   0 INF\n INF   0\n"


def test_format_cells_are_four_wide():
    text = format_distance_matrix(floyd_warshall(SOURCE_GRAPH))
    lines = text.splitlines()
    assert len(lines) == 4
    assert all(len(line) == 16 for line in lines)
    assert text.endswith("\n")


def test_non_square_graph_is_rejected():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_empty_graph():
    assert floyd_warshall([]) == []


def test_triangle_inequality_and_bounds():
    rng = random.Random(7)
    size = 6
    graph = [
        [0 if i == j else rng.choice([INF, rng.randint(1, 20)]) for j in range(size)]
        for i in range(size)
    ]
    result = floyd_warshall(graph)
    for i in range(size):
        assert result[i][i] == 0
        for j in range(size):
            assert result[i][j] <= graph[i][j]
            for k in range(size):
                assert result[i][j] <= result[i][k] + result[k][j]