"""Dynamic-programming counting and optimisation problems."""

from __future__ import annotations

import math
from functools import lru_cache
from itertools import accumulate, combinations
from typing import Iterable, Sequence

TILING_MODULUS = 10007
DECOMPOSITION_MODULUS = 1_000_000_000


def tilings_2xn(n: int) -> int:
    """Return the number of ways to tile a 2 x n board with 1x2, 2x1 and 2x2 tiles, mod 10007."""
    if n < 1:
        raise ValueError("board width must be at least 1")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, (current + 2 * previous) % TILING_MODULUS
    return current


def knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Return the best total value of ``(weight, value)`` items that fit in ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError("item weight must not be negative")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    ending_here = best = first
    for value in iterator:
        ending_here = max(0, ending_here) + value
        best = max(best, ending_here)
    return best


def tilings_3xn(n: int) -> int:
    """Return the number of ways to tile a 3 x n board with 2x1 dominoes."""
    if n < 0:
        raise ValueError("board width must not be negative")
    if n % 2:
        return 0
    counts = [1]
    for width in range(2, n + 1, 2):
        extra = 2 * sum(counts[:-1])
        counts.append(3 * counts[-1] + extra)
    return counts[n // 2]


def sum_decompositions(n: int, k: int) -> int:
    """Return the number of ordered ways to write ``n`` as ``k`` integers in 0..n, mod 10**9."""
    if n < 0:
        raise ValueError("n must not be negative")
    if k < 1:
        raise ValueError("k must be at least 1")
    row = [0] * (n + 1)
    for _ in range(k):
        prefix = list(accumulate(row[1:], initial=0))
        row = [(1 + prefix[total]) % DECOMPOSITION_MODULUS for total in range(n + 1)]
    return row[n]


def _check_coins(coins: Sequence[int], target: int) -> None:
    if target < 0:
        raise ValueError("target must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")


def coin_combinations(coins: Sequence[int], target: int) -> int:
    """Return the number of coin multisets that add up to ``target``."""
    _check_coins(coins, target)
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


def min_coins(coins: Sequence[int], target: int) -> int | None:
    """Return the fewest coins adding up to ``target``, or None if it cannot be paid."""
    _check_coins(coins, target)
    best = [0] + [math.inf] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            best[amount] = min(best[amount], best[amount - coin] + 1)
    result = best[target]
    return None if result == math.inf else int(result)


def apartment_residents(floor: int, room: int) -> int:
    """Return how many people live in ``room`` on ``floor``.

    Room ``r`` on floor 0 houses ``r`` people; room ``r`` on floor ``k`` houses
    the sum of rooms 1..r on floor ``k - 1``.
    """
    if floor < 0:
        raise ValueError("floor must not be negative")
    if room < 1:
        raise ValueError("room must be at least 1")
    residents = list(range(1, room + 1))
    for _ in range(floor):
        residents = list(accumulate(residents))
    return residents[-1]


def sum_of_123_ways(n: int) -> int:
    """Return the number of ordered ways to write ``n`` as a sum of 1, 2 and 3."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ways = [0, 1, 2, 4]
    while len(ways) <= n:
        ways.append(ways[-1] + ways[-2] + ways[-3])
    return ways[n]


def max_consulting_profit(schedule: Sequence[tuple[int, int]]) -> int:
    """Return the best profit from ``(days, pay)`` consultations that end before the last day."""
    days = len(schedule)
    best = [0] * (days + 1)
    for day in range(days - 1, -1, -1):
        duration, pay = schedule[day]
        if duration < 1:
            raise ValueError("a consultation lasts at least one day")
        best[day] = best[day + 1]
        if day + duration <= days:
            best[day] = max(best[day], pay + best[day + duration])
    return best[0]


@lru_cache(maxsize=1)
def _decreasing_numbers() -> tuple[int, ...]:
    numbers = (
        int("".join(sorted(digits, reverse=True)))
        for size in range(1, 11)
        for digits in combinations("0123456789", size)
    )
    return tuple(sorted(numbers))


def nth_decreasing_number(n: int) -> int | None:
    """Return the ``n``-th (from 0) number whose digits strictly decrease, or None."""
    if n < 0:
        raise ValueError("n must not be negative")
    numbers = _decreasing_numbers()
    return numbers[n] if n < len(numbers) else None