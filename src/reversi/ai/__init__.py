from reversi.ai.base import MAX_DEPTH, PASS, BaseAI, Difficulty
from reversi.ai.factory import create_ai, select_ai_move
from reversi.ai.greedy_ai import GreedyAI
from reversi.ai.lookahead_ai import LookaheadAI
from reversi.ai.random_ai import RandomAI
from reversi.ai.search_ai import SearchAI

__all__ = [
    "MAX_DEPTH",
    "PASS",
    "BaseAI",
    "Difficulty",
    "GreedyAI",
    "LookaheadAI",
    "RandomAI",
    "SearchAI",
    "create_ai",
    "select_ai_move",
]
