import os
from dotenv import load_dotenv
from typing import Optional

from reversi.ai.base import MAX_DEPTH, Difficulty

load_dotenv()


def get_search_depth() -> int:
    depth = int(os.getenv("REVERSI_SEARCH_DEPTH", str(MAX_DEPTH)))

    if depth < 0:
        raise ValueError(f"Search depth must not be negative, got {depth}")

    return depth


def get_seed() -> Optional[int]:
    seed = os.getenv("REVERSI_SEED", "")

    if seed == "":
        return None

    return int(seed)


def get_ai_difficulty() -> Difficulty:
    raw = int(os.getenv("REVERSI_AI_DIFFICULTY", str(int(Difficulty.EASY))))
    return Difficulty(raw)


def get_verbose() -> bool:
    return os.getenv("REVERSI_VERBOSE", "0") != "0"
