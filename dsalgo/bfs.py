"""Breadth-first search over an adjacency matrix, with shortest paths."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import islice
from typing import TextIO


class NoPathError(ValueError):
    """Raised when the target cannot be reached from the search source."""


@dataclass(frozen=True)
class BfsResult:
    """Distances and BFS-tree parents; ``None`` marks unreachable or the root."""

    source: int
    distances: tuple[int | None, ...]
    parents: tuple[int | None, ...]


def undirected_adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Symmetric 0/1 adjacency matrix for the given edges."""
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside the graph")
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def bfs(adjacency: Sequence[Sequence[int]], source: int) -> BfsResult:
    """Search from ``source``, visiting neighbours in ascending vertex order."""
    count = len(adjacency)
    if not 0 <= source < count:
        raise ValueError(f"source {source} is not a vertex")
    distances: list[int | None] = [None] * count
    parents: list[int | None] = [None] * count
    distances[source] = 0
    pending = deque([source])
    while pending:
        u = pending.popleft()
        for v, edge in enumerate(adjacency[u]):
            if edge == 1 and distances[v] is None:
                distances[v] = distances[u] + 1  # type: ignore[operator]
                parents[v] = u
                pending.append(v)
    return BfsResult(source, tuple(distances), tuple(parents))


def shortest_path(result: BfsResult, target: int) -> list[int]:
    """Vertices from the source to ``target`` along the BFS tree."""
    if not 0 <= target < len(result.parents):
        raise ValueError(f"target {target} is not a vertex")
    path = [target]
    vertex = target
    while vertex != result.source:
        parent = result.parents[vertex]
        if parent is None:
            raise NoPathError(f"No path from {result.source} to {target} exists.")
        path.append(parent)
        vertex = parent
    path.reverse()
    return path


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_ints(tokens: Iterator[str], count: int) -> list[int]:
    values = list(islice(tokens, count))
    if len(values) < count:
        raise EOFError("unexpected end of input")
    return [int(value) for value in values]


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and report BFS distances and a path."""
    parser = argparse.ArgumentParser(description="Breadth-first search on an undirected graph.")
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of nodes and edges: ", end="")
        vertex_count, edge_count = _read_ints(tokens, 2)
        print("Enter the edges (u v):")
        edges = [tuple(_read_ints(tokens, 2)) for _ in range(edge_count)]
        adjacency = undirected_adjacency(vertex_count, edges)

        print("Adjacency Matrix:")
        for row in adjacency:
            print(" ".join(str(cell) for cell in row))

        print("Enter source vertex: ", end="")
        (source,) = _read_ints(tokens, 1)
        result = bfs(adjacency, source)

        print(f"Vertex distances from source {source}:")
        for vertex, distance in enumerate(result.distances):
            print(f"Vertex {vertex}: Distance = {-1 if distance is None else distance}")

        print("Enter destination vertex for shortest path: ", end="")
        (target,) = _read_ints(tokens, 1)
        print(f"Shortest path from {source} to {target}: ", end="")
        try:
            print(" ".join(str(vertex) for vertex in shortest_path(result, target)))
        except NoPathError as exc:
            print(exc)
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0