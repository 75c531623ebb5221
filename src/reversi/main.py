import logging
import random
import typer
from typing import Annotated, Optional

from reversi import config
from reversi.ai.factory import create_ai
from reversi.commands.arena import ArenaCommand
from reversi.commands.play import PlayCommand
from reversi.othello.game import Game
from reversi.othello.grid import DARK, LIGHT, Grid
from reversi.othello.moves import get_valid_moves

app = typer.Typer(pretty_exceptions_enable=False)

COLORS = {"light": LIGHT, "dark": DARK}


@app.callback()
def setup(
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    level = logging.DEBUG if verbose or config.get_verbose() else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def arena(
    light: Annotated[int, typer.Option("--light", "-l")] = 2,
    dark: Annotated[int, typer.Option("--dark", "-d")] = 3,
    games: Annotated[int, typer.Option("--games", "-n")] = 100,
    seed: Annotated[Optional[int], typer.Option("--seed", "-s")] = None,
) -> None:
    if seed is None:
        seed = config.get_seed()

    ArenaCommand(light, dark, games, seed, config.get_search_depth())()


@app.command()
def play(
    difficulty: Annotated[Optional[int], typer.Option("--difficulty", "-d")] = None,
    ai_color: Annotated[str, typer.Option("--ai-color", "-c")] = "dark",
    seed: Annotated[Optional[int], typer.Option("--seed", "-s")] = None,
) -> None:
    if ai_color not in COLORS:
        raise typer.BadParameter(
            f'Unknown color "{ai_color}"', param_hint="--ai-color"
        )

    if difficulty is None:
        difficulty = config.get_ai_difficulty()

    if seed is None:
        seed = config.get_seed()

    ai = create_ai(difficulty, random.Random(seed), max_depth=config.get_search_depth())
    PlayCommand(ai, COLORS[ai_color])()


@app.command()
def moves() -> None:
    game = Game.start()
    legal = get_valid_moves(game.grid, game.turn)

    game.grid.show(move.as_move() for move in legal)
    for move in legal:
        print(f"{Grid.move_to_field(move.x, move.y)} {move.score}")


if __name__ == "__main__":
    app()
