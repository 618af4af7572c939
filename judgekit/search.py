"""Search problems solved by breadth-first search and backtracking."""

from __future__ import annotations

from collections import deque
from typing import Sequence

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MAX_MOVES = 10
_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def min_emoticon_time(target: int) -> int:
    """Return the fewest copy, paste and delete steps that turn one emoticon into ``target``."""
    if target < 1:
        raise ValueError("target must be at least 1")
    seen: set[tuple[int, int]] = set()
    queue = deque([(0, 1, 0)])
    while queue:
        clip, screen, steps = queue.popleft()
        if screen == target:
            return steps
        moves = []
        if screen:
            moves.append((clip, screen - 1))
        if screen <= target:
            moves.append((screen, screen))
            if clip:
                moves.append((clip, screen + clip))
        for state in moves:
            if state not in seen:
                seen.add(state)
                queue.append((*state, steps + 1))
    raise ValueError(f"cannot reach {target} emoticons")


def restore_permutation(digits: str) -> list[int]:
    """Split a run of digits back into a permutation of 1..N.

    N is fixed by the length: single digits for 1..9, two digits for the rest.
    """
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError("input must consist of digits")
    length = len(digits)
    if length < 10:
        return [int(char) for char in digits]
    size = 9 + (length - 9) // 2
    used = [False] * (size + 1)
    result: list[int] = []

    def place(start: int) -> bool:
        if start == length:
            return len(result) == size
        first = int(digits[start])
        if first == 0:
            return False
        candidates = [(first, 1)]
        if start + 1 < length:
            candidates.append((first * 10 + int(digits[start + 1]), 2))
        for value, width in candidates:
            if value > size or used[value]:
                continue
            used[value] = True
            result.append(value)
            if place(start + width):
                return True
            used[value] = False
            result.pop()
        return False

    if not place(0):
        raise ValueError("digits do not form a permutation")
    return result


def ideal_string(length: int) -> str | None:
    """Return an ideal string of ``length``, or None if there is none.

    In an ideal string the letters first appear in alphabetical order from
    'A', and a letter that first appears at position p (from 1) occurs p times.
    """
    if length < 1:
        raise ValueError("length must be at least 1")
    if length == 1:
        return "A"
    chars = ["A", "B"]
    remaining = [0] * len(ALPHABET)
    remaining[1] = 1

    def extend(last: int) -> bool:
        position = len(chars)
        pending = next((i for i, left in enumerate(remaining) if left), None)
        if position == length:
            return pending is None
        if pending is not None:
            remaining[pending] -= 1
            chars.append(ALPHABET[pending])
            if extend(last):
                return True
            chars.pop()
            remaining[pending] += 1
        new = last + 1
        if new < len(ALPHABET) and 2 * position + 1 + sum(remaining) <= length:
            remaining[new] = position
            chars.append(ALPHABET[new])
            if extend(new):
                return True
            chars.pop()
            remaining[new] = 0
        return False

    return "".join(chars) if extend(1) else None


def _locate(grid: Sequence[str]) -> dict[str, tuple[int, int]]:
    found: dict[str, tuple[int, int]] = {}
    for row_index, row in enumerate(grid):
        for col_index, char in enumerate(row):
            if char in "RBO":
                if char in found:
                    raise ValueError(f"board holds more than one {char!r}")
                found[char] = (row_index, col_index)
    missing = set("RBO") - found.keys()
    if missing:
        raise ValueError(f"board lacks {''.join(sorted(missing))}")
    return found


def marble_escape(board: Sequence[str]) -> int | None:
    """Return the fewest tilts that drop the red marble, not the blue, into the hole.

    Returns None when it takes more than ten tilts or cannot be done.
    """
    grid = [str(row) for row in board]
    found = _locate(grid)

    def cell(row: int, col: int) -> str:
        if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
            return grid[row][col]
        return "#"

    def roll(position: tuple[int, int], dr: int, dc: int) -> tuple[int, int, bool]:
        row, col = position
        while True:
            ahead = cell(row + dr, col + dc)
            if ahead == "#":
                return row, col, False
            row, col = row + dr, col + dc
            if ahead == "O":
                return row, col, True

    start = (found["R"], found["B"])
    seen = {start}
    queue = deque([(found["R"], found["B"], 0)])
    while queue:
        red, blue, moves = queue.popleft()
        if moves >= MAX_MOVES:
            break
        for dr, dc in _DIRECTIONS:
            red_row, red_col, red_in = roll(red, dr, dc)
            blue_row, blue_col, blue_in = roll(blue, dr, dc)
            if blue_in:
                continue
            if red_in:
                return moves + 1
            if (red_row, red_col) == (blue_row, blue_col):
                if red[0] * dr + red[1] * dc < blue[0] * dr + blue[1] * dc:
                    red_row, red_col = red_row - dr, red_col - dc
                else:
                    blue_row, blue_col = blue_row - dr, blue_col - dc
            state = ((red_row, red_col), (blue_row, blue_col))
            if state not in seen:
                seen.add(state)
                queue.append((*state, moves + 1))
    return None