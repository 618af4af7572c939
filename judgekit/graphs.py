"""Graph algorithms: reachability, shortest paths, traversals and tours."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict, deque
from functools import lru_cache
from typing import Iterable, Sequence


def transitive_closure(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the 0/1 matrix of pairs joined by a path of one or more edges."""
    size = len(matrix)
    reach = [[1 if value == 1 else 0 for value in row] for row in matrix]
    if any(len(row) != size for row in reach):
        raise ValueError("adjacency matrix must be square")
    for middle in range(size):
        via = reach[middle]
        for row in reach:
            if row[middle]:
                for target, linked in enumerate(via):
                    if linked:
                        row[target] = 1
    return reach


def all_pairs_shortest_paths(
    node_count: int, edges: Iterable[tuple[int, int, int]]
) -> list[list[int]]:
    """Return the cheapest cost between every ordered pair of nodes 1..n.

    Row ``i`` holds the costs from node ``i + 1``.  The diagonal and every
    unreachable pair hold 0.
    """
    dist = [[math.inf] * node_count for _ in range(node_count)]
    for node in range(node_count):
        dist[node][node] = 0
    for start, end, cost in edges:
        if start != end and cost < dist[start - 1][end - 1]:
            dist[start - 1][end - 1] = cost
    for middle in range(node_count):
        via = dist[middle]
        for row in dist:
            to_middle = row[middle]
            if to_middle == math.inf:
                continue
            for target, onward in enumerate(via):
                candidate = to_middle + onward
                if candidate < row[target]:
                    row[target] = candidate
    return [
        [0 if i == j or cost == math.inf else cost for j, cost in enumerate(row)]
        for i, row in enumerate(dist)
    ]


def _dijkstra(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], start: int
) -> dict[int, int]:
    graph: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for source, target, weight in edges:
        graph[source].append((weight, target))
    best = {start: 0}
    done: set[int] = set()
    queue = [(0, start)]
    while queue:
        cost, node = heapq.heappop(queue)
        if node in done:
            continue
        done.add(node)
        for weight, target in graph[node]:
            candidate = cost + weight
            if candidate < best.get(target, math.inf):
                best[target] = candidate
                heapq.heappush(queue, (candidate, target))
    return {node: cost for node, cost in best.items() if 1 <= node <= vertex_count}


def shortest_distances(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], start: int
) -> list[int | None]:
    """Return the distance from ``start`` to each vertex 1..n; None if unreachable."""
    if not 1 <= start <= vertex_count:
        raise ValueError(f"start vertex {start} is out of range")
    best = _dijkstra(vertex_count, edges, start)
    return [best.get(vertex) for vertex in range(1, vertex_count + 1)]


def cheapest_route(
    city_count: int, edges: Iterable[tuple[int, int, int]], source: int, target: int
) -> int | None:
    """Return the minimum cost of a bus route from ``source`` to ``target``."""
    for city in (source, target):
        if not 1 <= city <= city_count:
            raise ValueError(f"city {city} is out of range")
    return _dijkstra(city_count, edges, source).get(target)


def traversal_orders(
    edges: Iterable[tuple[int, int]], start: int
) -> tuple[list[int], list[int]]:
    """Return the DFS and BFS visiting orders, smaller neighbours first."""
    graph: dict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        graph[a].append(b)
        graph[b].append(a)
    neighbours = {node: sorted(adjacent) for node, adjacent in graph.items()}

    depth_order = [start]
    seen = {start}
    stack = [iter(neighbours.get(start, []))]
    while stack:
        for node in stack[-1]:
            if node not in seen:
                seen.add(node)
                depth_order.append(node)
                stack.append(iter(neighbours.get(node, [])))
                break
        else:
            stack.pop()

    breadth_order = []
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        breadth_order.append(node)
        for nxt in neighbours.get(node, []):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return depth_order, breadth_order


def count_loners(choices: Sequence[int]) -> int:
    """Return how many students belong to no team.

    Student ``i`` (1-based) chooses ``choices[i - 1]``; a team is a cycle of
    choices.
    """
    count = len(choices)
    for choice in choices:
        if not 1 <= choice <= count:
            raise ValueError(f"choice {choice} is out of range")
    owner = [0] * (count + 1)
    in_teams = 0
    for first in range(1, count + 1):
        if owner[first]:
            continue
        position: dict[int, int] = {}
        current = first
        while not owner[current]:
            owner[current] = first
            position[current] = len(position)
            current = choices[current - 1]
        if owner[current] == first:
            in_teams += len(position) - position[current]
    return count - in_teams


def tour_cost(
    weights: Sequence[Sequence[int]], start: int, visited_mask: int
) -> float:
    """Return the cheapest way from ``start`` through every unvisited city back to city 0.

    A weight of 0 means no road.  Returns ``math.inf`` when no route exists.
    """
    size = len(weights)
    full = (1 << size) - 1

    @lru_cache(maxsize=None)
    def visit(current: int, mask: int) -> float:
        if mask == full:
            back = weights[current][0]
            return back if back else math.inf
        best = math.inf
        for city, weight in enumerate(weights[current]):
            if weight == 0 or mask & (1 << city):
                continue
            best = min(best, weight + visit(city, mask | (1 << city)))
        return best

    return visit(start, visited_mask)


def travelling_salesman(weights: Sequence[Sequence[int]]) -> float:
    """Return the cost of the cheapest round trip through every city."""
    if any(len(row) != len(weights) for row in weights):
        raise ValueError("weight matrix must be square")
    return tour_cost(weights, 0, 1)