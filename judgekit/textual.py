"""String problems: expressions, bracket checks, list programs and explosions."""

from __future__ import annotations

import re
from collections import deque
from typing import Iterable

EMPTY_RESULT = "FRULA"
_TERM = re.compile(r"\d+|[+-]")


class ProgramError(Exception):
    """Raised when an AC program deletes from an empty list."""


def evaluate_min_expression(expression: str) -> int:
    """Return the smallest value of ``expression`` when brackets may be added.

    Every number after the first minus sign is subtracted.
    """
    text = expression.strip()
    pieces = _TERM.findall(text)
    if not pieces or "".join(pieces) != text:
        raise ValueError(f"malformed expression: {expression!r}")
    total = 0
    negative = False
    for piece in pieces:
        if piece == "-":
            negative = True
        elif piece != "+":
            total += -int(piece) if negative else int(piece)
    return total


def char_at(word: str, position: int) -> str:
    """Return the character at 1-based ``position`` of ``word``."""
    if not 1 <= position <= len(word):
        raise IndexError(f"position {position} is outside the word")
    return word[position - 1]


def run_ac(commands: str, values: Iterable[int]) -> list[int]:
    """Run an AC program of R (reverse) and D (drop first) over ``values``."""
    items = deque(values)
    reversed_ = False
    for command in commands:
        if command == "R":
            reversed_ = not reversed_
        elif command == "D":
            if not items:
                raise ProgramError("error")
            if reversed_:
                items.pop()
            else:
                items.popleft()
        else:
            raise ValueError(f"unknown command {command!r}")
    result = list(items)
    return result[::-1] if reversed_ else result


def is_vps(text: str) -> bool:
    """Return whether ``text`` is a balanced parenthesis string."""
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        else:
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def explode(text: str, bomb: str) -> str:
    """Remove ``bomb`` from ``text`` repeatedly until none is left.

    Returns ``"FRULA"`` when nothing remains.
    """
    if not bomb:
        raise ValueError("bomb must not be empty")
    size = len(bomb)
    last = bomb[-1]
    kept: list[str] = []
    for char in text:
        kept.append(char)
        if char == last and len(kept) >= size and "".join(kept[-size:]) == bomb:
            del kept[-size:]
    return "".join(kept) if kept else EMPTY_RESULT