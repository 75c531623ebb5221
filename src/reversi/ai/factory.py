from __future__ import annotations

import logging
import random
from typing import Optional

from reversi.ai.base import MAX_DEPTH, BaseAI, Difficulty
from reversi.ai.greedy_ai import GreedyAI
from reversi.ai.lookahead_ai import LookaheadAI
from reversi.ai.random_ai import RandomAI
from reversi.ai.search_ai import SearchAI
from reversi.othello.grid import Grid

logger = logging.getLogger(__name__)

AI_CLASSES: dict[Difficulty, type[BaseAI]] = {
    Difficulty.EASY: RandomAI,
    Difficulty.MEDIUM: GreedyAI,
    Difficulty.HARD: LookaheadAI,
}


def create_ai(
    difficulty: int,
    rng: Optional[random.Random] = None,
    max_depth: int = MAX_DEPTH,
) -> BaseAI:
    # Raises ValueError for unknown difficulty levels.
    difficulty = Difficulty(difficulty)

    if difficulty == Difficulty.EXPERT:
        return SearchAI(rng, max_depth=max_depth)

    return AI_CLASSES[difficulty](rng)


def select_ai_move(
    grid: Grid,
    difficulty: int,
    color: int,
    rng: Optional[random.Random] = None,
) -> tuple[int, int]:
    """Pick a move for `color` without changing `grid`."""
    ai = create_ai(difficulty, rng)
    move = ai.select_move(grid.copy(), color)
    logger.debug("%r selected %s", ai, move)
    return move
