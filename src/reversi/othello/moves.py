from __future__ import annotations

from reversi.othello.grid import EMPTY, PASS_MOVE, SIZE, Grid

DIRECTIONS = [
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
]


class Candidate:
    def __init__(self, x: int, y: int, score: int) -> None:
        self.x = x
        self.y = y
        self.score = score

    @classmethod
    def pass_move(cls) -> Candidate:
        return Candidate(PASS_MOVE, PASS_MOVE, 0)

    def is_pass(self) -> bool:
        return self.x == PASS_MOVE

    def as_move(self) -> tuple[int, int]:
        return (self.x, self.y)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.score)

    def __repr__(self) -> str:
        return f"Candidate({self.x}, {self.y}, {self.score})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            raise TypeError(f"Cannot compare Candidate with {type(other)}")

        return self.as_tuple() == other.as_tuple()


def flip_run(
    grid: Grid, x: int, y: int, dx: int, dy: int, color: int, apply: bool
) -> int:
    """
    Returns the length of the opponent run starting next to (x, y) in direction
    (dx, dy) that is closed off by a disc of `color`. Runs that reach an empty
    square or the edge of the grid count as zero. When `apply` is set, the run
    is turned over.
    """
    s = 1
    while True:
        curx = x + dx * s
        cury = y + dy * s
        if curx < 0 or curx >= SIZE or cury < 0 or cury >= SIZE:
            return 0

        square = grid.get(curx, cury)

        if square == EMPTY:
            return 0

        if square == color:
            if apply:
                for p in range(1, s):
                    grid.set(x + dx * p, y + dy * p, color)
            return s - 1

        s += 1


def check_move(grid: Grid, x: int, y: int, color: int, apply: bool = False) -> int:
    if color == EMPTY or grid.get(x, y) != EMPTY:
        return 0

    return sum(flip_run(grid, x, y, dx, dy, color, apply) for dx, dy in DIRECTIONS)


def place(grid: Grid, x: int, y: int, color: int) -> int:
    flipped = check_move(grid, x, y, color, apply=True)

    if flipped > 0:
        grid.set(x, y, color)

    return flipped


def get_valid_moves(grid: Grid, color: int) -> list[Candidate]:
    # Scan order is column-major, but the most recently found move comes first.
    # AI tie-breaking depends on this order.
    moves: list[Candidate] = []
    for x in range(SIZE):
        for y in range(SIZE):
            score = check_move(grid, x, y, color)
            if score > 0:
                moves.append(Candidate(x, y, score))

    moves.reverse()
    return moves


def can_move(grid: Grid, color: int) -> bool:
    return any(
        check_move(grid, x, y, color) > 0 for x in range(SIZE) for y in range(SIZE)
    )
