from __future__ import annotations

from reversi.ai.base import PASS, BaseAI, Difficulty
from reversi.othello.grid import Grid
from reversi.othello.moves import get_valid_moves


class RandomAI(BaseAI):
    """Plays a uniformly random legal move."""

    difficulty = Difficulty.EASY

    def select_move(self, grid: Grid, color: int) -> tuple[int, int]:
        moves = get_valid_moves(grid, color)

        if not moves:
            return PASS

        index = self.rng.randrange(len(moves))
        return moves[index].as_move()
