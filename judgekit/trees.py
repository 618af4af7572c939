"""Tree algorithms: rooting, subtree queries, traversals and tree DP."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable, Iterator, Sequence


def _rooted(
    node_count: int, edges: Iterable[tuple[int, int]], root: int
) -> tuple[dict[int, int], list[int], dict[int, list[int]]]:
    """Root an undirected tree; return parents, BFS order and children lists."""
    if not 1 <= root <= node_count:
        raise ValueError(f"root {root} is out of range")
    graph: dict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        graph[a].append(b)
        graph[b].append(a)
    parent = {root: 0}
    children: dict[int, list[int]] = defaultdict(list)
    order = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in graph[node]:
            if nxt not in parent:
                parent[nxt] = node
                children[node].append(nxt)
                queue.append(nxt)
    return parent, order, children


def leaves_after_removal(parents: Sequence[int], removed: int) -> int:
    """Return the leaf count once node ``removed`` and its subtree are cut.

    ``parents[i]`` is the parent of node ``i``, or -1 for the root.
    """
    count = len(parents)
    if not 0 <= removed < count:
        raise ValueError(f"node {removed} is out of range")
    children: list[list[int]] = [[] for _ in range(count)]
    roots = []
    for node, parent in enumerate(parents):
        (roots if parent < 0 else children[parent]).append(node)
    holder = roots if parents[removed] < 0 else children[parents[removed]]
    holder.remove(removed)
    leaves = 0
    stack = list(roots)
    while stack:
        node = stack.pop()
        if children[node]:
            stack.extend(children[node])
        else:
            leaves += 1
    return leaves


def parents_of(node_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the parents of nodes 2..n when the tree is rooted at node 1."""
    parent, _, _ = _rooted(node_count, edges, 1)
    return [parent[node] for node in range(2, node_count + 1)]


def accumulated_praise(
    superiors: Sequence[int], praises: Iterable[tuple[int, int]]
) -> list[int]:
    """Return each employee's total praise, passed down from every superior.

    ``superiors[i]`` is the superior of employee ``i + 1`` (-1 for the head,
    employee 1).
    """
    count = len(superiors)
    juniors: dict[int, list[int]] = defaultdict(list)
    for employee, superior in enumerate(superiors, start=1):
        if superior > 0:
            juniors[superior].append(employee)
    totals = [0] * (count + 1)
    for employee, amount in praises:
        totals[employee] += amount
    queue = deque([1])
    while queue:
        boss = queue.popleft()
        for junior in juniors[boss]:
            totals[junior] += totals[boss]
            queue.append(junior)
    return totals[1:]


def subtree_sizes(
    node_count: int, root: int, edges: Iterable[tuple[int, int]]
) -> dict[int, int]:
    """Return the number of nodes in the subtree of every node."""
    _, order, children = _rooted(node_count, edges, root)
    sizes: dict[int, int] = {}
    for node in reversed(order):
        sizes[node] = 1 + sum(sizes[child] for child in children[node])
    return sizes


def traversals(nodes: Iterable[tuple[str, str, str]]) -> tuple[str, str, str]:
    """Return preorder, inorder and postorder of a binary tree rooted at 'A'.

    Each node is ``(name, left, right)`` with '.' for a missing child.
    """
    tree = {name: (left, right) for name, left, right in nodes}
    if "A" not in tree:
        raise ValueError("tree has no root 'A'")

    def walk(name: str, position: int) -> Iterator[str]:
        if name == "." or name not in tree:
            return
        left, right = tree[name]
        if position == 0:
            yield name
        yield from walk(left, position)
        if position == 1:
            yield name
        yield from walk(right, position)
        if position == 2:
            yield name

    return tuple("".join(walk("A", position)) for position in range(3))  # type: ignore[return-value]


def max_independent_set(
    weights: Sequence[int], edges: Iterable[tuple[int, int]]
) -> tuple[int, list[int]]:
    """Return the heaviest independent set's weight and its sorted vertices.

    ``weights[i]`` is the weight of vertex ``i + 1``.
    """
    parent, order, children = _rooted(len(weights), edges, 1)
    without: dict[int, int] = {}
    with_node: dict[int, int] = {}
    for node in reversed(order):
        kids = children[node]
        without[node] = sum(max(without[k], with_node[k]) for k in kids)
        with_node[node] = weights[node - 1] + sum(without[k] for k in kids)
    chosen: set[int] = set()
    for node in order:
        if parent[node] not in chosen and without[node] < with_node[node]:
            chosen.add(node)
    return max(without[1], with_node[1]), sorted(chosen)


def min_early_adopters(node_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the fewest early adopters so every idea spreads through the tree."""
    _, order, children = _rooted(node_count, edges, 1)
    adopter: dict[int, int] = {}
    follower: dict[int, int] = {}
    for node in reversed(order):
        kids = children[node]
        adopter[node] = 1 + sum(min(adopter[k], follower[k]) for k in kids)
        follower[node] = sum(adopter[k] for k in kids)
    return min(adopter[1], follower[1])