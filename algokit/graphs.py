"""Graph algorithms: cut vertices, shortest paths, spanning trees, flood fill."""

from __future__ import annotations

import heapq
import itertools
import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "Edge",
    "NegativeCycleError",
    "PathResult",
    "SpanningTree",
    "articulation_points",
    "bellman_ford",
    "boruvka_mst",
    "dijkstra_matrix",
    "flood_fill",
    "prim_mst",
    "shortest_paths",
]


@dataclass(frozen=True)
class Edge:
    """An edge from src to dest with an integer weight."""

    src: int
    dest: int
    weight: int = 0


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a minimum spanning tree and their total weight."""

    edges: list[Edge]
    total_weight: int


@dataclass(frozen=True)
class PathResult:
    """Distance to a vertex and the vertices on a shortest path to it."""

    distance: int
    path: tuple[int, ...]


def _as_edge(item: Edge | Sequence[int]) -> Edge:
    return item if isinstance(item, Edge) else Edge(*item)


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} out of range for {vertex_count} vertices")


def articulation_points(
    vertex_count: int, edges: Iterable[Edge | Sequence[int]]
) -> list[int]:
    """Return, in ascending order, the vertices whose removal disconnects the graph.

    Edges are undirected; each is an Edge or a (u, v) pair.
    """
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for item in edges:
        edge = _as_edge(item)
        _check_vertex(edge.src, vertex_count)
        _check_vertex(edge.dest, vertex_count)
        adjacency[edge.src].append(edge.dest)
        adjacency[edge.dest].append(edge.src)

    discovered = [0] * vertex_count
    low = [0] * vertex_count
    is_cut = [False] * vertex_count
    clock = itertools.count(1)

    def _visit(u: int, parent: int | None) -> None:
        discovered[u] = low[u] = next(clock)
        children = 0
        for v in adjacency[u]:
            if not discovered[v]:
                children += 1
                _visit(v, u)
                low[u] = min(low[u], low[v])
                if parent is not None and low[v] >= discovered[u]:
                    is_cut[u] = True
            elif v != parent:
                low[u] = min(low[u], discovered[v])
        if parent is None and children > 1:
            is_cut[u] = True

    for u in range(vertex_count):
        if not discovered[u]:
            _visit(u, None)
    return [u for u, cut in enumerate(is_cut) if cut]


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge | Sequence[int]], source: int
) -> list[int | None]:
    """Shortest distances from source over directed weighted edges.

    Unreachable vertices get None. Raises NegativeCycleError if a
    negative cycle is reachable from source.
    """
    _check_vertex(source, vertex_count)
    edge_list = [_as_edge(item) for item in edges]
    for edge in edge_list:
        _check_vertex(edge.src, vertex_count)
        _check_vertex(edge.dest, vertex_count)

    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for edge in edge_list:
            if dist[edge.src] != math.inf and dist[edge.src] + edge.weight < dist[edge.dest]:
                dist[edge.dest] = dist[edge.src] + edge.weight
    for edge in edge_list:
        if dist[edge.src] != math.inf and dist[edge.src] + edge.weight < dist[edge.dest]:
            raise NegativeCycleError("graph contains negative weight cycle")
    return [None if d == math.inf else int(d) for d in dist]


def boruvka_mst(
    vertex_count: int, edges: Iterable[Edge | Sequence[int]]
) -> SpanningTree:
    """Minimum spanning tree of an undirected graph by Borůvka's method.

    Raises ValueError if the graph is not connected.
    """
    edge_list = [_as_edge(item) for item in edges]
    for edge in edge_list:
        _check_vertex(edge.src, vertex_count)
        _check_vertex(edge.dest, vertex_count)

    parent = list(range(vertex_count))
    rank = [0] * vertex_count

    def _find(i: int) -> int:
        root = i
        while parent[root] != root:
            root = parent[root]
        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    def _union(a: int, b: int) -> None:
        if rank[a] < rank[b]:
            parent[a] = b
        elif rank[a] > rank[b]:
            parent[b] = a
        else:
            parent[b] = a
            rank[a] += 1

    chosen: list[Edge] = []
    total = 0
    trees = vertex_count
    while trees > 1:
        cheapest: list[int | None] = [None] * vertex_count
        for index, edge in enumerate(edge_list):
            a, b = _find(edge.src), _find(edge.dest)
            if a == b:
                continue
            for root in (a, b):
                best = cheapest[root]
                if best is None or edge_list[best].weight > edge.weight:
                    cheapest[root] = index
        merged = False
        for index in cheapest:
            if index is None:
                continue
            edge = edge_list[index]
            a, b = _find(edge.src), _find(edge.dest)
            if a == b:
                continue
            total += edge.weight
            chosen.append(edge)
            _union(a, b)
            trees -= 1
            merged = True
        if not merged:
            raise ValueError("graph is not connected")
    return SpanningTree(chosen, total)


def shortest_paths(
    adjacency: Sequence[Iterable[Sequence[int]]], source: int
) -> list[PathResult | None]:
    """Dijkstra over an adjacency list of (neighbour, weight) pairs.

    Returns one entry per vertex: its distance and path from source, or
    None if it cannot be reached.
    """
    vertex_count = len(adjacency)
    _check_vertex(source, vertex_count)
    results: list[PathResult | None] = [None] * vertex_count
    order = itertools.count()
    heap: list[tuple[int, int, int, tuple[int, ...]]] = [(0, next(order), source, (source,))]
    seen: set[int] = set()
    while heap:
        distance, _, node, path = heapq.heappop(heap)
        if node in seen:
            continue
        seen.add(node)
        results[node] = PathResult(distance, path)
        for neighbour, weight in adjacency[node]:
            if neighbour not in seen:
                heapq.heappush(
                    heap, (distance + weight, next(order), neighbour, path + (neighbour,))
                )
    return results


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, color: int
) -> list[list[int]]:
    """Return a copy of image with the 4-connected region at (row, col) recoloured.

    Raises ValueError if the start cell is outside the image.
    """
    grid = [list(line) for line in image]
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise ValueError(f"start cell ({row}, {col}) is outside the image")
    original = grid[row][col]
    grid[row][col] = color
    pending = deque([(row, col)])
    visited: set[tuple[int, int]] = set()
    while pending:
        x, y = pending.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (
                (nx, ny) not in visited
                and 0 <= nx < len(grid)
                and 0 <= ny < len(grid[nx])
                and grid[nx][ny] == original
            ):
                grid[nx][ny] = color
                pending.append((nx, ny))
                visited.add((nx, ny))
    return grid


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(line) != size for line in matrix):
        raise ValueError("matrix must be square")
    return size


def prim_mst(cost_matrix: Sequence[Sequence[int]]) -> SpanningTree:
    """Minimum spanning tree from a cost matrix by Prim's method.

    A zero cost means there is no edge. Edges run from each vertex's
    parent to the vertex. Raises ValueError for a non-square matrix or a
    disconnected graph.
    """
    size = _check_square(cost_matrix)
    key: list[float] = [math.inf] * size
    parent: list[int | None] = [None] * size
    visited = [False] * size
    if size:
        key[0] = 0
    for _ in range(size - 1):
        candidates = [v for v in range(size) if not visited[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        visited[u] = True
        for v in range(size):
            weight = cost_matrix[u][v]
            if weight and not visited[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    edges: list[Edge] = []
    for vertex in range(1, size):
        origin = parent[vertex]
        if origin is None:
            raise ValueError("graph is not connected")
        edges.append(Edge(origin, vertex, cost_matrix[vertex][origin]))
    return SpanningTree(edges, sum(edge.weight for edge in edges))


def dijkstra_matrix(
    graph: Sequence[Sequence[int]], source: int
) -> list[int | None]:
    """Shortest distances from source in a weight matrix; zero means no edge.

    Unreachable vertices get None. Raises ValueError for a non-square
    matrix or a source out of range.
    """
    size = _check_square(graph)
    _check_vertex(source, size)
    dist: list[float] = [math.inf] * size
    dist[source] = 0
    done = [False] * size
    for _ in range(size - 1):
        u: int | None = None
        for v in range(size):
            if not done[v] and (u is None or dist[v] <= dist[u]):
                u = v
        assert u is not None
        done[u] = True
        if dist[u] == math.inf:
            continue
        for v in range(size):
            weight = graph[u][v]
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return [None if d == math.inf else int(d) for d in dist]