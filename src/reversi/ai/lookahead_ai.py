from __future__ import annotations

from reversi.ai.base import PASS, BaseAI, Difficulty
from reversi.ai.greedy_ai import get_highest_score
from reversi.othello.grid import Grid, opponent
from reversi.othello.moves import Candidate, get_valid_moves, place


class LookaheadAI(BaseAI):
    """
    Looks one reply ahead: each move is scored by the discs it turns over minus
    the most discs the opponent can turn over in return.
    """

    difficulty = Difficulty.HARD

    def score_moves(self, grid: Grid, color: int) -> list[Candidate]:
        scored: list[Candidate] = []

        for move in get_valid_moves(grid, color):
            child = grid.copy()
            place(child, move.x, move.y, color)

            reply = get_highest_score(child, opponent(color))
            scored.append(Candidate(move.x, move.y, move.score - reply))

        return scored

    def select_move(self, grid: Grid, color: int) -> tuple[int, int]:
        best = self.pick_best(self.score_moves(grid, color))

        if best is None:
            return PASS

        return best.as_move()
