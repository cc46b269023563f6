"""Small graph utilities: adjacency lists, a labelled matrix puzzle, Dijkstra."""

from __future__ import annotations

import heapq
import math
from typing import Sequence

_LAB_MATRIX = (
    ("0", "n1", "n2", "n3", "n4", "n5", "n6"),
    ("n1", "0", "10", "0", "0", "8", "5"),
    ("n2", "10", "0", "0", "20", "12", "0"),
    ("n3", "0", "0", "0", "4", "0", "0"),
    ("n4", "0", "20", "4", "0", "15", "0"),
    ("n5", "8", "12", "0", "15", "0", "7"),
    ("n6", "5", "0", "0", "0", "7", "0"),
)


class AdjacencyListGraph:
    """Undirected graph stored as a list of neighbours per vertex."""

    def __init__(self) -> None:
        self._adjacency: dict[int, list[int]] = {}

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._adjacency.setdefault(u, []).append(v)
        self._adjacency.setdefault(v, []).append(u)

    def neighbours(self, vertex: int) -> list[int]:
        """Neighbours of ``vertex`` in the order the edges were added."""
        return list(self._adjacency.get(vertex, ()))

    def format(self) -> str:
        """Text listing every vertex, in ascending order, with its neighbours."""
        lines = ["Adjacency list for the Graph: "]
        for vertex in sorted(self._adjacency):
            neighbours = "".join(f"{n} " for n in self._adjacency[vertex])
            lines.append(f"{vertex} -> {neighbours}")
        return "\n".join(lines) + "\n"


def lab_matrix() -> list[list[str]]:
    """The labelled weight matrix of the lab exercise; row and column 0 are labels."""
    return [list(row) for row in _LAB_MATRIX]


def format_matrix(matrix: Sequence[Sequence[str]]) -> str:
    """Tab-separated text of ``matrix`` under a heading."""
    lines = ["Adjacency Matrix Representation:"]
    lines.extend("".join(f"{cell}\t" for cell in row) for row in matrix)
    return "\n".join(lines) + "\n"


def identify_nodes(matrix: Sequence[Sequence[str]]) -> tuple[dict[str, str], str]:
    """Match the letters A-F to the labelled vertices of ``matrix``.

    E has exactly one edge, D is E's neighbour, B has four edges, F is a
    neighbour of D other than E and B, A has two edges and C is whatever is
    left. Returns the labels by letter and the weight between B and C.
    """
    size = len(matrix)
    if size < 2 or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square with a label row and column")
    vertices = range(1, size)

    def degree(i: int) -> int:
        return sum(cell != "0" for cell in matrix[i][1:])

    def first(candidates, role: str) -> int:
        found = next(candidates, None)
        if found is None:
            raise ValueError(f"no vertex fits node {role}")
        return found

    e = first((i for i in vertices if degree(i) == 1), "E")
    d = first((j for j in vertices if matrix[e][j] != "0"), "D")
    b = first((i for i in vertices if degree(i) == 4), "B")
    f = first((j for j in vertices if matrix[d][j] != "0" and j not in (e, b)), "F")
    a = first((i for i in vertices if degree(i) == 2 and i != e), "A")
    c = first((i for i in vertices if i not in (e, d, b, f, a)), "C")

    labels = {role: matrix[i][0] for role, i in zip("ABCDEF", (a, b, c, d, e, f))}
    return labels, matrix[b][c]


def dijkstra(weights: Sequence[Sequence[float]], source: int = 0) -> list[float]:
    """Shortest distances from ``source`` over a weight matrix.

    A weight of 0 means no edge. Unreachable vertices get ``math.inf``.
    """
    size = len(weights)
    if any(len(row) != size for row in weights):
        raise ValueError("weight matrix must be square")
    if not 0 <= source < size:
        raise IndexError("source vertex out of range")
    if any(weight < 0 for row in weights for weight in row):
        raise ValueError("weights must not be negative")

    distances: list[float] = [math.inf] * size
    distances[source] = 0
    visited = [False] * size
    heap = [(0, source)]
    while heap:
        distance, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        for v, weight in enumerate(weights[u]):
            if weight and not visited[v] and distance + weight < distances[v]:
                distances[v] = distance + weight
                heapq.heappush(heap, (distances[v], v))
    return distances


def format_distances(distances: Sequence[float]) -> str:
    """Table of distances with vertices named A, B, C, ..."""
    lines = ["Vertex \t Distance from A"]
    lines.extend(
        f"{chr(ord('A') + index)} \t {distance}"
        for index, distance in enumerate(distances)
    )
    return "\n".join(lines) + "\n"