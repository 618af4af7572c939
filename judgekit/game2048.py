"""The best block reachable on a 2048 board within a few moves."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

MAX_MOVES = 5

Board = tuple[tuple[int, ...], ...]


def _slide_row(row: Iterable[int]) -> tuple[int, ...]:
    """Slide a row towards its start, merging each equal pair once."""
    values = list(row)
    merged: list[int] = []
    pending: int | None = None
    for value in values:
        if not value:
            continue
        if pending == value:
            merged.append(2 * value)
            pending = None
        else:
            if pending is not None:
                merged.append(pending)
            pending = value
    if pending is not None:
        merged.append(pending)
    return tuple(merged + [0] * (len(values) - len(merged)))


def _transpose(board: Board) -> Board:
    return tuple(zip(*board))


def _left(board: Board) -> Board:
    return tuple(_slide_row(row) for row in board)


def _right(board: Board) -> Board:
    return tuple(_slide_row(row[::-1])[::-1] for row in board)


def _up(board: Board) -> Board:
    return _transpose(_left(_transpose(board)))


def _down(board: Board) -> Board:
    return _transpose(_right(_transpose(board)))


_MOVES: tuple[Callable[[Board], Board], ...] = (_up, _right, _down, _left)


def max_block(board: Sequence[Sequence[int]]) -> int:
    """Return the largest block that can appear within five moves."""
    start: Board = tuple(tuple(int(value) for value in row) for row in board)
    size = len(start)
    if size == 0:
        raise ValueError("board must not be empty")
    if any(len(row) != size for row in start):
        raise ValueError("board must be square")
    if any(value < 0 for row in start for value in row):
        raise ValueError("blocks must not be negative")

    best = max(max(row) for row in start)
    frontier = {start}
    for _ in range(MAX_MOVES):
        following: set[Board] = set()
        for state in frontier:
            for move in _MOVES:
                following.add(move(state))
        frontier = following
        best = max(best, max(max(row) for state in frontier for row in state))
    return best