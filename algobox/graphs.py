"""All-pairs shortest paths."""

from __future__ import annotations

from typing import Sequence

INF = 999
"""Distance standing for "no edge"; it takes part in sums like any other weight."""


def floyd_warshall(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the shortest-path distance matrix of a square weight matrix."""
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square matrix")
    distances = [list(row) for row in graph]
    for via in range(size):
        via_row = distances[via]
        for row in distances:
            to_via = row[via]
            for target, through in enumerate(via_row):
                if to_via + through < row[target]:
                    row[target] = to_via + through
    return distances


def format_distance_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix with four-wide cells, INF for unreachable pairs."""
    return "".join(
        "".join(f"{'INF':>4}" if cell == INF else f"{cell:4d}" for cell in row) + "\n"
        for row in matrix
    )