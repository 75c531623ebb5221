from __future__ import annotations

from reversi.ai.base import PASS, BaseAI, Difficulty
from reversi.othello.grid import Grid
from reversi.othello.moves import get_valid_moves


def get_highest_score(grid: Grid, color: int) -> int:
    # Zero when `color` has to pass.
    return max((move.score for move in get_valid_moves(grid, color)), default=0)


class GreedyAI(BaseAI):
    """Plays the move that turns over the most discs right now."""

    difficulty = Difficulty.MEDIUM

    def select_move(self, grid: Grid, color: int) -> tuple[int, int]:
        best = self.pick_best(get_valid_moves(grid, color))

        if best is None:
            return PASS

        return best.as_move()
