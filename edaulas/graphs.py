"""Breadth-first search on random graphs and Dijkstra's shortest paths through a cave system."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Optional, Sequence

NUM_VERTICES = 20
NUM_CAVES = 20
MAX_WEIGHT = 10

Matrix = list[list[int]]


def random_adjacency(size: int = NUM_VERTICES, rng: Optional[random.Random] = None) -> Matrix:
    """Undirected adjacency matrix where each pair of vertices is joined with probability 1/2."""
    generator = rng if rng is not None else random.Random()
    matrix = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(i + 1, size):
            if generator.randrange(2):
                matrix[i][j] = matrix[j][i] = 1
    return matrix


def bfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Vertices in the order a breadth-first search from ``start`` visits them."""
    if not 0 <= start < len(matrix):
        raise IndexError("start vertex out of range")
    visited = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour, edge in enumerate(matrix[vertex]):
            if edge == 1 and neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dijkstra(
    matrix: Sequence[Sequence[int]], origin: int
) -> tuple[list[Optional[int]], list[Optional[int]]]:
    """Shortest distances from ``origin`` and each vertex's predecessor on its path.

    Unreachable vertices have distance None; the origin and unreachable
    vertices have predecessor None. A zero weight means no edge.
    """
    size = len(matrix)
    if not 0 <= origin < size:
        raise IndexError("origin out of range")
    distance: list[Optional[int]] = [None] * size
    previous: list[Optional[int]] = [None] * size
    visited = [False] * size
    distance[origin] = 0
    for _ in range(size):
        candidates = [v for v in range(size) if not visited[v] and distance[v] is not None]
        if not candidates:
            break
        u = min(candidates, key=lambda v: distance[v])
        visited[u] = True
        base = distance[u]
        for v, weight in enumerate(matrix[u]):
            if visited[v] or not weight:
                continue
            current = distance[v]
            if current is None or base + weight < current:
                distance[v] = base + weight
                previous[v] = u
    return distance, previous


@dataclass(frozen=True)
class PathResult:
    """A shortest path between two caves.

    ``path`` runs from origin to destination and ``steps`` holds each passage
    on it as ``(from, to, weight)``. When the destination cannot be reached,
    ``distance`` is None and ``path`` holds only the destination.
    """

    origin: int
    destination: int
    distance: Optional[int]
    path: list[int]
    steps: list[tuple[int, int, int]]

    @property
    def total_weight(self) -> int:
        return sum(weight for _, _, weight in self.steps)


@dataclass
class CaveSystem:
    """Caves joined by weighted two-way passages, kept as an adjacency matrix."""

    size: int = NUM_CAVES
    matrix: Matrix = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.matrix:
            self.matrix = [[0] * self.size for _ in range(self.size)]
        elif len(self.matrix) != self.size:
            raise ValueError("matrix size does not match the number of caves")

    def add_passage(self, origin: int, destination: int, weight: int) -> None:
        """Join two caves in both directions with the given weight."""
        self.matrix[origin][destination] = weight
        self.matrix[destination][origin] = weight

    def create_random_passages(self, rng: Optional[random.Random] = None) -> None:
        """Give each cave one or two new passages to distinct caves, weights 1 to 10."""
        generator = rng if rng is not None else random.Random()
        for cave in range(self.size):
            for _ in range(generator.randrange(2) + 1):
                free = [
                    other
                    for other in range(self.size)
                    if other != cave and self.matrix[cave][other] == 0
                ]
                if not free:
                    break
                destination = generator.choice(free)
                weight = generator.randrange(MAX_WEIGHT) + 1
                self.add_passage(cave, destination, weight)

    def edges(self) -> list[tuple[int, int, int]]:
        """Every passage as ``(from, to, weight)``, listed once in each direction."""
        return [
            (i, j, weight)
            for i, row in enumerate(self.matrix)
            for j, weight in enumerate(row)
            if weight != 0
        ]

    def shortest_path(self, origin: int, destination: int) -> PathResult:
        """Shortest path from ``origin`` to ``destination`` by Dijkstra's algorithm."""
        if not (0 <= origin < self.size and 0 <= destination < self.size):
            raise ValueError("invalid caves")
        distance, previous = dijkstra(self.matrix, origin)
        walk = [destination]
        while (before := previous[walk[-1]]) is not None:
            walk.append(before)
        path = walk[::-1]
        steps = [(a, b, self.matrix[a][b]) for a, b in zip(path, path[1:])]
        return PathResult(origin, destination, distance[destination], path, steps)