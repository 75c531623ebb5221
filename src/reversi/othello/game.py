from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from reversi.othello.grid import DARK, LIGHT, PASS_MOVE, SIZE, Grid, opponent
from reversi.othello.moves import can_move, place

if TYPE_CHECKING:
    from reversi.ai.base import BaseAI


class Game:
    """
    A single game session: the live grid and the color whose move is awaited.

    The grid is only changed through successful placements. Callers that want a
    hypothetical grid should work on `grid.copy()`.
    """

    def __init__(self, grid: Grid, turn: int) -> None:
        assert turn in [LIGHT, DARK]

        self.grid = grid
        self.turn = turn

    @classmethod
    def start(cls) -> Game:
        return Game(Grid.start(), LIGHT)

    def reset(self) -> None:
        self.grid.reset()
        self.turn = LIGHT

    def __repr__(self) -> str:
        return f"Game({self.grid!r}, {self.turn})"

    def pass_turn(self) -> None:
        self.turn = opponent(self.turn)

    def can_move(self, color: Optional[int] = None) -> bool:
        if color is None:
            color = self.turn
        return can_move(self.grid, color)

    def apply_human_move(self, x: int, y: int) -> bool:
        """
        Plays (x, y) for the side to move, or passes when given PASS_MOVE.
        A pass is only accepted when the side to move has no legal move.
        Returns whether the turn advanced; rejected requests change nothing.
        """
        if x == PASS_MOVE or y == PASS_MOVE:
            if self.can_move():
                return False

            self.pass_turn()
            return True

        if place(self.grid, x, y, self.turn) > 0:
            self.pass_turn()
            return True

        return False

    def apply_forced_move(self, x: int, y: int) -> tuple[int, int]:
        """
        Like `apply_human_move`, but the turn always advances. If (x, y) is not
        playable the first legal square in column-major order is played instead,
        and if there is none the side to move passes without further checks.
        Returns the move that was actually made.
        """
        if x != PASS_MOVE and y != PASS_MOVE:
            if place(self.grid, x, y, self.turn) > 0:
                self.pass_turn()
                return (x, y)

        for fx in range(SIZE):
            for fy in range(SIZE):
                if place(self.grid, fx, fy, self.turn) > 0:
                    self.pass_turn()
                    return (fx, fy)

        self.pass_turn()
        return (PASS_MOVE, PASS_MOVE)

    def apply_ai_move(self, ai: BaseAI) -> tuple[int, int]:
        # The AI receives a copy so the live grid can't be touched.
        x, y = ai.select_move(self.grid.copy(), self.turn)
        return self.apply_forced_move(x, y)

    def is_game_end(self) -> bool:
        return not (can_move(self.grid, LIGHT) or can_move(self.grid, DARK))

    def get_winner(self) -> Optional[int]:
        light = self.grid.count(LIGHT)
        dark = self.grid.count(DARK)

        if light > dark:
            return LIGHT
        if dark > light:
            return DARK
        return None
