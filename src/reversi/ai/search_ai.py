from __future__ import annotations

import logging
import random
from typing import Optional

from reversi.ai.base import MAX_DEPTH, BaseAI, Difficulty
from reversi.othello.grid import Grid, opponent
from reversi.othello.moves import Candidate, get_valid_moves, place

logger = logging.getLogger(__name__)


def get_best_move(grid: Grid, color: int, depth: int, max_depth: int) -> Candidate:
    """
    Returns the move for `color` with the highest differential score: the discs
    it turns over minus the best differential score of the opponent's reply,
    searched until `depth` exceeds `max_depth`.

    A side without moves scores 0 and the search stops there, even if the other
    side could still move. Ties keep the first move in enumeration order.
    """
    if depth > max_depth:
        return Candidate.pass_move()

    best = Candidate.pass_move()

    for move in get_valid_moves(grid, color):
        child = grid.copy()
        place(child, move.x, move.y, color)

        reply = get_best_move(child, opponent(color), depth + 1, max_depth)
        score = move.score - reply.score

        if best.is_pass() or score > best.score:
            best = Candidate(move.x, move.y, score)

    return best


class SearchAI(BaseAI):
    """Fixed-depth differential search. Deterministic, `rng` is never used."""

    difficulty = Difficulty.EXPERT

    def __init__(
        self, rng: Optional[random.Random] = None, max_depth: int = MAX_DEPTH
    ) -> None:
        super().__init__(rng)
        self.max_depth = max_depth

    def __repr__(self) -> str:
        return f"SearchAI(max_depth={self.max_depth})"

    def select_move(self, grid: Grid, color: int) -> tuple[int, int]:
        best = get_best_move(grid, color, 0, self.max_depth)
        logger.debug("search picked %s for %d", best, color)
        return best.as_move()
