from __future__ import annotations

from typing import Iterable

SIZE = 8

LIGHT = 1
DARK = -1
EMPTY = 0

PASS_MOVE = -1

SQUARE_CHARS = {EMPTY: ".", LIGHT: "L", DARK: "D"}


def opponent(color: int) -> int:
    assert color in [LIGHT, DARK]
    return -color


class Grid:
    """
    Grid stores the 8x8 cells of a game, but not the color of the player to move.
    Cells are addressed by column `x` and row `y`.
    """

    def __init__(self) -> None:
        self.squares = [[EMPTY] * SIZE for _ in range(SIZE)]

    @classmethod
    def start(cls) -> Grid:
        grid = Grid()
        grid.reset()
        return grid

    @classmethod
    def empty(cls) -> Grid:
        return Grid()

    @classmethod
    def from_squares(cls, squares: list[int]) -> Grid:
        assert len(squares) == SIZE * SIZE

        grid = Grid()
        for index, square in enumerate(squares):
            assert square in [EMPTY, LIGHT, DARK]
            grid.set(index % SIZE, index // SIZE, square)
        return grid

    @classmethod
    def from_text(cls, text: str) -> Grid:
        lookup = {char: color for color, char in SQUARE_CHARS.items()}

        rows = [line.replace(" ", "") for line in text.strip().splitlines()]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Grid text must have 8 rows of 8 squares")

        squares: list[int] = []
        for row in rows:
            for char in row:
                try:
                    squares.append(lookup[char.upper()])
                except KeyError:
                    raise ValueError(f'Invalid square "{char}"')

        return cls.from_squares(squares)

    def reset(self) -> None:
        for x in range(SIZE):
            for y in range(SIZE):
                if (x, y) in [(3, 3), (4, 4)]:
                    self.squares[x][y] = LIGHT
                elif (x, y) in [(3, 4), (4, 3)]:
                    self.squares[x][y] = DARK
                else:
                    self.squares[x][y] = EMPTY

    def copy(self) -> Grid:
        grid = Grid()
        grid.squares = [list(column) for column in self.squares]
        return grid

    def get(self, x: int, y: int) -> int:
        return self.squares[x][y]

    def set(self, x: int, y: int, color: int) -> None:
        self.squares[x][y] = color

    def count(self, color: int) -> int:
        return sum(column.count(color) for column in self.squares)

    def count_empties(self) -> int:
        return self.count(EMPTY)

    def to_text(self) -> str:
        return "\n".join(
            "".join(SQUARE_CHARS[self.get(x, y)] for x in range(SIZE))
            for y in range(SIZE)
        )

    def __repr__(self) -> str:
        return f"Grid({self.to_text()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            raise TypeError(f"Cannot compare Grid with {type(other)}")

        return self.squares == other.squares

    def show(self, moves: Iterable[tuple[int, int]] = ()) -> None:
        moves = set(moves)

        print("+-a-b-c-d-e-f-g-h-+")
        for y in range(SIZE):
            print("{} ".format(y + 1), end="")

            for x in range(SIZE):
                square = self.get(x, y)

                if square == DARK:
                    print("○ ", end="")
                elif square == LIGHT:
                    print("● ", end="")
                elif (x, y) in moves:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def move_to_field(cls, x: int, y: int) -> str:
        if x == PASS_MOVE or y == PASS_MOVE:
            return "--"
        if x not in range(SIZE) or y not in range(SIZE):
            raise ValueError
        return "abcdefgh"[x] + "12345678"[y]

    @classmethod
    def field_to_move(cls, field: str) -> tuple[int, int]:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if field in ["--", "ps", "pa"]:
            return PASS_MOVE, PASS_MOVE

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        x = ord(field[0]) - ord("a")
        y = ord(field[1]) - ord("1")
        return x, y
