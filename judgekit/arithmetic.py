"""Small arithmetic, geometry and greedy problems."""

from __future__ import annotations

import heapq
from typing import Iterable, Sequence


def min_sugar_bags(weight: int) -> int | None:
    """Return the fewest 5 kg and 3 kg bags weighing exactly ``weight``, or None."""
    if weight < 0:
        raise ValueError("weight must not be negative")
    for fives in range(weight // 5, -1, -1):
        rest = weight - 5 * fives
        if rest % 3 == 0:
            return fives + rest // 3
    return None


def _inside(point: tuple[int, int], circle: tuple[int, int, int]) -> int:
    """Return the sign of the point's squared distance minus the squared radius."""
    x, y = point
    cx, cy, radius = circle
    value = (cx - x) ** 2 + (cy - y) ** 2 - radius * radius
    return (value > 0) - (value < 0)


def boundary_crossings(
    start: tuple[int, int],
    end: tuple[int, int],
    circles: Iterable[tuple[int, int, int]],
) -> int:
    """Return how many circles hold exactly one of ``start`` and ``end`` inside."""
    return sum(
        1
        for circle in circles
        if _inside(start, circle) * _inside(end, circle) < 0
    )


def min_merge_cost(sizes: Iterable[int]) -> int:
    """Return the least total cost of merging all card piles two at a time."""
    heap = list(sizes)
    if not heap:
        raise ValueError("there must be at least one pile")
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total


def count_mask_sales(
    citizens: Iterable[tuple[int, int]], stores: Iterable[tuple[int, int]]
) -> int:
    """Return the most citizens who can buy a mask.

    A citizen ``(low, high)`` buys at a store ``(price, quantity)`` whose price
    lies between low and high.
    """
    waiting = sorted(citizens, key=lambda citizen: citizen[0])
    shops = sorted(stores, key=lambda store: store[0])
    sold = 0
    index = 0
    heap: list[tuple[int, int]] = []
    for price, quantity in shops:
        while index < len(waiting) and waiting[index][0] <= price:
            low, high = waiting[index]
            if high >= price:
                heapq.heappush(heap, (high, low))
            index += 1
        while quantity > 0 and heap:
            high, low = heapq.heappop(heap)
            if low <= price <= high:
                quantity -= 1
                sold += 1
    return sold


def polygon_area(points: Sequence[tuple[int, int]]) -> float:
    """Return the area of the polygon with the given vertices in order."""
    if not points:
        raise ValueError("polygon needs at least one point")
    x0, y0 = points[0]
    shifted = [(x - x0, y - y0) for x, y in points[1:]]
    doubled = sum(
        current_y * prev_x - current_x * prev_y
        for (prev_x, prev_y), (current_x, current_y) in zip(shifted, shifted[1:])
    )
    return abs(doubled) / 2