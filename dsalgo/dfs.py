"""Depth-first search with discovery and finishing times."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import islice
from typing import TextIO


@dataclass(frozen=True)
class DfsResult:
    """Timestamps start at 1; ``None`` parents mark the roots of the DFS forest."""

    discovery: tuple[int, ...]
    finish: tuple[int, ...]
    parents: tuple[int | None, ...]


def directed_adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """0/1 adjacency matrix with an entry for each directed edge ``u -> v``."""
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside the graph")
        matrix[u][v] = 1
    return matrix


def dfs(adjacency: Sequence[Sequence[int]]) -> DfsResult:
    """Search from every unvisited vertex in ascending order."""
    count = len(adjacency)
    neighbours = [[v for v, edge in enumerate(row) if edge == 1] for row in adjacency]
    discovery = [0] * count
    finish = [0] * count
    parents: list[int | None] = [None] * count
    seen = [False] * count
    clock = 0

    for root in range(count):
        if seen[root]:
            continue
        seen[root] = True
        clock += 1
        discovery[root] = clock
        stack = [(root, iter(neighbours[root]))]
        while stack:
            u, pending = stack[-1]
            for v in pending:
                if not seen[v]:
                    seen[v] = True
                    parents[v] = u
                    clock += 1
                    discovery[v] = clock
                    stack.append((v, iter(neighbours[v])))
                    break
            else:
                stack.pop()
                clock += 1
                finish[u] = clock

    return DfsResult(tuple(discovery), tuple(finish), tuple(parents))


def connected_components(adjacency: Sequence[Sequence[int]]) -> int:
    """Number of trees in the depth-first forest."""
    return sum(1 for parent in dfs(adjacency).parents if parent is None)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_ints(tokens: Iterator[str], count: int) -> list[int]:
    values = list(islice(tokens, count))
    if len(values) < count:
        raise EOFError("unexpected end of input")
    return [int(value) for value in values]


def main(argv: list[str] | None = None) -> int:
    """Read a directed graph from standard input and report DFS times."""
    parser = argparse.ArgumentParser(description="Depth-first search on a directed graph.")
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        print("Enter the number of vertices and edges:")
        vertex_count, edge_count = _read_ints(tokens, 2)
        print("Enter the edges (u v)")
        edges = [tuple(_read_ints(tokens, 2)) for _ in range(edge_count)]
        adjacency = directed_adjacency(vertex_count, edges)
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("Adjacency matrix:")
    for row in adjacency:
        print(" ".join(str(cell) for cell in row))

    result = dfs(adjacency)
    print("\nSTARTING AND FINISHING TIME OF EACH VERTEX")
    for vertex, (start, end) in enumerate(zip(result.discovery, result.finish)):
        print(f"Vertex {vertex} started at {start} and finished at {end}")

    print(f"No of connected components: {connected_components(adjacency)}")
    return 0