"""Shared pieces of the computer opponents.

Every opponent starts from the same enumeration of legal moves, see
:func:`reversi.othello.moves.get_valid_moves`, and returns the pass sentinel
when that enumeration is empty. Opponents only ever look at copies of the
grid they are given.
"""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Optional

from reversi.othello.grid import PASS_MOVE, Grid
from reversi.othello.moves import Candidate

# Deepest recursion depth the search opponent expands. Depths 0 through
# MAX_DEPTH are searched, so the lookahead is MAX_DEPTH + 1 plies.
MAX_DEPTH = 5

PASS = (PASS_MOVE, PASS_MOVE)


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3
    EXPERT = 4


class BaseAI:
    """Base class for a computer opponent.

    Subclasses implement :meth:`select_move`. Randomness is drawn from the
    per-instance ``rng`` only, so a seeded instance always plays the same
    moves for the same grids.
    """

    difficulty: Difficulty

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def select_move(self, grid: Grid, color: int) -> tuple[int, int]:
        raise NotImplementedError

    def pick_best(self, candidates: list[Candidate]) -> Optional[Candidate]:
        """Pick uniformly among the candidates sharing the highest score.

        The first pass counts the ties, the second walks to the k-th one, so a
        seeded ``rng`` gives the same pick for the same enumeration order.
        """
        if not candidates:
            return None

        best = candidates[0]
        count = 0
        for candidate in candidates:
            if candidate.score > best.score:
                best = candidate
                count = 1
            elif candidate.score == best.score:
                count += 1

        index = self.rng.randrange(count)
        for candidate in candidates:
            if candidate.score == best.score:
                if index == 0:
                    return candidate
                index -= 1

        raise AssertionError("unreachable")  # pragma: nocover
