from __future__ import annotations

from typing import Callable

from reversi.ai.base import PASS, BaseAI
from reversi.othello.game import Game
from reversi.othello.grid import DARK, LIGHT, Grid
from reversi.othello.moves import get_valid_moves

COLOR_NAMES = {LIGHT: "Light", DARK: "Dark"}


class PlayCommand:
    """
    Human against computer in the terminal.
    The human enters fields like `d3`, or `ps` to pass.
    """

    def __init__(
        self,
        ai: BaseAI,
        ai_color: int,
        read_input: Callable[[str], str] = input,
    ) -> None:
        self.ai = ai
        self.ai_color = ai_color
        self.read_input = read_input
        self.game = Game.start()
        self.passes = 0

    def show(self) -> None:
        legal = get_valid_moves(self.game.grid, self.game.turn)
        moves = [move.as_move() for move in legal]
        self.game.grid.show(moves)
        print(f"{COLOR_NAMES[self.game.turn]} to move")

    def do_ai_turn(self) -> tuple[int, int]:
        move = self.game.apply_ai_move(self.ai)
        print(f"Computer plays {Grid.move_to_field(*move)}")
        return move

    def do_human_turn(self) -> tuple[int, int]:
        while True:
            raw = self.read_input("Your move: ").strip()

            try:
                x, y = Grid.field_to_move(raw)
            except ValueError as e:
                print(e)
                continue

            # Illegal moves and passes while a move exists are ignored.
            if self.game.apply_human_move(x, y):
                return (x, y)

    def __call__(self) -> None:
        while self.passes < 2:
            self.show()

            if self.game.turn == self.ai_color:
                move = self.do_ai_turn()
            else:
                move = self.do_human_turn()

            if move == PASS:
                self.passes += 1
            else:
                self.passes = 0

        self.game.grid.show()

        light = self.game.grid.count(LIGHT)
        dark = self.game.grid.count(DARK)
        winner = self.game.get_winner()

        if winner is None:
            print(f"Draw {light}-{dark}")
        else:
            print(f"{COLOR_NAMES[winner]} wins {light}-{dark}")

