from __future__ import annotations

import logging
from typing import Optional

from reversi.ai.base import PASS, BaseAI
from reversi.othello.game import Game
from reversi.othello.grid import DARK, LIGHT

logger = logging.getLogger(__name__)


class ArenaResult:
    def __init__(self) -> None:
        self.light_wins = 0
        self.dark_wins = 0
        self.draws = 0

    def add(self, winner: Optional[int]) -> None:
        if winner == LIGHT:
            self.light_wins += 1
        elif winner == DARK:
            self.dark_wins += 1
        else:
            self.draws += 1

    def total(self) -> int:
        return self.light_wins + self.dark_wins + self.draws

    def __str__(self) -> str:
        return f"Light: {self.light_wins} | Dark: {self.dark_wins} | Draw: {self.draws}"


class Arena:
    """Plays computer opponents against each other."""

    def __init__(self, light: BaseAI, dark: BaseAI) -> None:
        self.players = {LIGHT: light, DARK: dark}

    def play_game(self) -> Game:
        game = Game.start()
        passes = 0

        # Two passes in a row means neither side can move.
        while passes < 2:
            move = game.apply_ai_move(self.players[game.turn])

            if move == PASS:
                passes += 1
            else:
                passes = 0

        return game

    def run(self, games: int, verbose: bool = False) -> ArenaResult:
        result = ArenaResult()

        for _ in range(games):
            game = self.play_game()
            result.add(game.get_winner())

            logger.info(
                "game %d finished %d-%d",
                result.total(),
                game.grid.count(LIGHT),
                game.grid.count(DARK),
            )

            if verbose:
                print(result)

        return result
