import pytest
import random
from typing import Optional

from reversi.ai import search_ai
from reversi.ai.base import MAX_DEPTH, PASS, BaseAI, Difficulty
from reversi.ai.factory import create_ai, select_ai_move
from reversi.ai.greedy_ai import GreedyAI, get_highest_score
from reversi.ai.lookahead_ai import LookaheadAI
from reversi.ai.random_ai import RandomAI
from reversi.ai.search_ai import SearchAI, get_best_move
from reversi.othello.grid import DARK, LIGHT, Grid
from reversi.othello.moves import Candidate, get_valid_moves

START_LIGHT_MOVES = {(2, 4), (3, 5), (4, 2), (5, 3)}

# Light can play d4 turning over two discs, after which dark answers with c3
# turning over two as well. Light's h3 only turns over one, but leaves dark
# without a move.
GRID_TRAP = Grid.from_text(
    """
    .......L
    .......D
    ........
    LDD.....
    ..D.D...
    ........
    ........
    ........
    """
)
TRAP_GREEDY_MOVE = (3, 3)
TRAP_SAFE_MOVE = (7, 2)

GRID_MIDGAME = Grid.from_text(
    """
    ........
    ........
    ..DLD...
    ..DDL...
    ..LLLD..
    ...D....
    ........
    ........
    """
)


class FixedRandom(random.Random):
    def __init__(self, value: int) -> None:
        super().__init__(0)
        self.value = value

    def randrange(self, start: int, stop: Optional[int] = None, step: int = 1) -> int:
        return self.value


@pytest.mark.parametrize(
    ["difficulty", "expected_type"],
    [
        pytest.param(Difficulty.EASY, RandomAI, id="easy"),
        pytest.param(Difficulty.MEDIUM, GreedyAI, id="medium"),
        pytest.param(Difficulty.HARD, LookaheadAI, id="hard"),
        pytest.param(Difficulty.EXPERT, SearchAI, id="expert"),
    ],
)
def test_create_ai(difficulty: Difficulty, expected_type: type[BaseAI]) -> None:
    ai = create_ai(int(difficulty))
    assert isinstance(ai, expected_type)
    assert ai.difficulty == difficulty


def test_create_ai_unknown_difficulty() -> None:
    with pytest.raises(ValueError):
        create_ai(5)


def test_create_ai_max_depth() -> None:
    ai = create_ai(Difficulty.EXPERT, max_depth=2)
    assert isinstance(ai, SearchAI)
    assert ai.max_depth == 2

    assert SearchAI().max_depth == MAX_DEPTH


@pytest.mark.parametrize(
    ["difficulty"], [pytest.param(d, id=d.name) for d in Difficulty]
)
def test_no_moves_passes(difficulty: Difficulty) -> None:
    grid = Grid.empty()
    assert select_ai_move(grid, difficulty, LIGHT, random.Random(0)) == PASS


@pytest.mark.parametrize(
    ["difficulty"], [pytest.param(d, id=d.name) for d in Difficulty]
)
def test_select_ai_move_leaves_grid_untouched(difficulty: Difficulty) -> None:
    grid = GRID_MIDGAME.copy()
    ai = create_ai(difficulty, random.Random(1), max_depth=2)

    move = ai.select_move(grid, DARK)

    assert grid == GRID_MIDGAME
    assert move in {m.as_move() for m in get_valid_moves(GRID_MIDGAME, DARK)}


@pytest.mark.parametrize(
    ["difficulty"],
    [
        pytest.param(Difficulty.EASY, id="easy"),
        pytest.param(Difficulty.MEDIUM, id="medium"),
        pytest.param(Difficulty.HARD, id="hard"),
    ],
)
def test_same_seed_same_move(difficulty: Difficulty) -> None:
    for seed in range(20):
        first = select_ai_move(Grid.start(), difficulty, LIGHT, random.Random(seed))
        second = select_ai_move(Grid.start(), difficulty, LIGHT, random.Random(seed))
        assert first == second


def test_random_ai_only_plays_legal_moves() -> None:
    ai = RandomAI(random.Random(42))
    seen = {ai.select_move(Grid.start(), LIGHT) for _ in range(200)}
    assert seen == START_LIGHT_MOVES


@pytest.mark.parametrize(
    ["index", "expected"],
    [
        pytest.param(0, (5, 3), id="first"),
        pytest.param(3, (2, 4), id="last"),
    ],
)
def test_random_ai_indexes_enumeration_order(
    index: int, expected: tuple[int, int]
) -> None:
    ai = RandomAI(FixedRandom(index))
    assert ai.select_move(Grid.start(), LIGHT) == expected


def test_greedy_ai_start_position() -> None:
    ai = GreedyAI(random.Random(7))
    seen = {ai.select_move(Grid.start(), LIGHT) for _ in range(200)}
    assert seen == START_LIGHT_MOVES


def test_greedy_ai_unique_best() -> None:
    for seed in range(20):
        ai = GreedyAI(random.Random(seed))
        assert ai.select_move(GRID_TRAP, LIGHT) == TRAP_GREEDY_MOVE


@pytest.mark.parametrize(
    ["index", "expected"],
    [
        pytest.param(0, Candidate(2, 0, 5), id="first-tie"),
        pytest.param(1, Candidate(4, 0, 5), id="second-tie"),
        pytest.param(2, Candidate(5, 0, 5), id="third-tie"),
    ],
)
def test_pick_best_walks_ties_in_order(index: int, expected: Candidate) -> None:
    candidates = [
        Candidate(1, 0, 3),
        Candidate(2, 0, 5),
        Candidate(3, 0, 1),
        Candidate(4, 0, 5),
        Candidate(5, 0, 5),
    ]
    ai = GreedyAI(FixedRandom(index))
    assert ai.pick_best(candidates) == expected


def test_pick_best_empty() -> None:
    assert GreedyAI().pick_best([]) is None


def test_get_highest_score() -> None:
    assert get_highest_score(GRID_TRAP, LIGHT) == 2
    assert get_highest_score(GRID_TRAP, DARK) == 0


def test_lookahead_ai_scores() -> None:
    ai = LookaheadAI(random.Random(0))

    scores = {move.as_move(): move.score for move in ai.score_moves(GRID_TRAP, LIGHT)}

    assert scores == {TRAP_GREEDY_MOVE: 0, TRAP_SAFE_MOVE: 1}


def test_lookahead_ai_start_scores() -> None:
    ai = LookaheadAI(random.Random(0))

    scored = ai.score_moves(Grid.start(), LIGHT)

    assert [move.as_tuple() for move in scored] == [
        (5, 3, 0),
        (4, 2, 0),
        (3, 5, 0),
        (2, 4, 0),
    ]


def test_lookahead_ai_avoids_trap() -> None:
    for seed in range(20):
        ai = LookaheadAI(random.Random(seed))
        assert ai.select_move(GRID_TRAP, LIGHT) == TRAP_SAFE_MOVE


@pytest.mark.parametrize(
    ["max_depth", "expected"],
    [
        pytest.param(0, TRAP_GREEDY_MOVE, id="depth-0"),
        pytest.param(1, TRAP_SAFE_MOVE, id="depth-1"),
    ],
)
def test_search_ai_trap(max_depth: int, expected: tuple[int, int]) -> None:
    assert SearchAI(max_depth=max_depth).select_move(GRID_TRAP, LIGHT) == expected


@pytest.mark.parametrize(
    ["max_depth"], [pytest.param(d, id=f"depth-{d}") for d in [0, 1]]
)
def test_search_ai_ties_keep_first(max_depth: int) -> None:
    best = get_best_move(Grid.start(), LIGHT, 0, max_depth)
    assert best.as_move() == (5, 3)


def test_search_ai_beyond_max_depth() -> None:
    assert get_best_move(Grid.start(), LIGHT, MAX_DEPTH + 1, MAX_DEPTH).is_pass()


def test_search_ai_full_depth_start_position() -> None:
    grid = Grid.start()

    move = SearchAI().select_move(grid, LIGHT)

    assert move in START_LIGHT_MOVES
    assert grid == Grid.start()


def test_search_ai_pass_without_recursion(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []
    original = search_ai.get_best_move

    def spy(grid: Grid, color: int, depth: int, max_depth: int) -> Candidate:
        calls.append(depth)
        return original(grid, color, depth, max_depth)

    monkeypatch.setattr(search_ai, "get_best_move", spy)

    assert SearchAI().select_move(Grid.empty(), LIGHT) == PASS
    assert calls == [0]


def test_search_ai_counts_calls_per_ply(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []
    original = search_ai.get_best_move

    def spy(grid: Grid, color: int, depth: int, max_depth: int) -> Candidate:
        calls.append(depth)
        return original(grid, color, depth, max_depth)

    monkeypatch.setattr(search_ai, "get_best_move", spy)

    SearchAI(max_depth=1).select_move(Grid.start(), LIGHT)

    # One root call, one per light move, one per dark reply to each of them.
    assert calls.count(0) == 1
    assert calls.count(1) == 4
    assert calls.count(2) == 12
