from __future__ import annotations

import random
from typing import Optional

from reversi.ai.factory import create_ai
from reversi.arena import Arena, ArenaResult


class ArenaCommand:
    def __init__(
        self,
        light_difficulty: int,
        dark_difficulty: int,
        games: int,
        seed: Optional[int],
        max_depth: int,
    ) -> None:
        rng = random.Random(seed)
        light = create_ai(light_difficulty, rng, max_depth=max_depth)
        dark = create_ai(dark_difficulty, rng, max_depth=max_depth)
        self.arena = Arena(light, dark)
        self.games = games

    def __call__(self) -> ArenaResult:
        return self.arena.run(self.games, verbose=True)
