"""
Minesweeper - command-line entry point.

Usage:
    sweeper play [--width W] [--height H] [--mines N] [--seed S]
    sweeper simulate [--games N] [--width W] [--height H] [--mines N]
"""
import argparse
import logging
import random
from typing import Callable, Dict, Iterable, Optional

import numpy as np

from .chord import chord
from .config import BoardConfig, recommend_mines
from .environment import MinesweeperEnv, render_text
from .errors import OutOfBoundsError
from .flags import toggle_flag
from .reveal import reveal
from .session import GameSession, new_game

logger = logging.getLogger(__name__)

COMMANDS = {"r": reveal, "f": toggle_flag, "c": chord}

HELP_TEXT = "Commands: r ROW COL (reveal), f ROW COL (flag), c ROW COL (chord), q (quit)"


def _config_from_args(args: argparse.Namespace) -> BoardConfig:
    """Clamp command-line sizes the same way the new-game form does."""
    sized = BoardConfig.from_input(args.width, args.height, 1)
    mines = args.mines
    if mines is None:
        mines = recommend_mines(sized.width, sized.height)
    return BoardConfig.from_input(sized.width, sized.height, mines)


def _print_board(session: GameSession, out: Callable[[str], None]) -> None:
    out(render_text(session.get_observation()))
    out(f"Mines left: {session.mines_remaining}")


def run_interactive(
    session: GameSession,
    lines: Iterable[str],
    out: Callable[[str], None] = print,
) -> GameSession:
    """
    Apply text commands to a session until it ends or input runs out.

    Args:
        session: Game to play.
        lines: Command lines such as "r 3 4".
        out: Where to write board and messages.

    Returns:
        The session, for inspection after play.
    """
    _print_board(session, out)
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        if parts[0] == "q":
            break
        action = COMMANDS.get(parts[0])
        if action is None or len(parts) != 3:
            out(HELP_TEXT)
            continue
        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            out(HELP_TEXT)
            continue
        try:
            action(session, row, col)
        except OutOfBoundsError as error:
            out(str(error))
            continue

        _print_board(session, out)
        if session.is_won:
            out("*** WIN! ***")
            break
        if session.is_lost:
            out("*** LOST (hit mine) ***")
            break
    return session


def _read_lines() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def play(args: argparse.Namespace) -> None:
    """Play one game in the terminal."""
    config = _config_from_args(args)
    print(
        f"Board: {config.width}x{config.height} with {config.num_mines} mines"
    )
    print(HELP_TEXT)
    rng = random.Random(args.seed) if args.seed is not None else None
    session = new_game(config.width, config.height, config.num_mines, rng=rng)
    run_interactive(session, _read_lines())


def simulate_games(
    config: BoardConfig,
    num_games: int,
    seed: Optional[int] = None,
    max_steps: Optional[int] = None,
) -> Dict[str, float]:
    """
    Play games with uniformly random valid reveals.

    Args:
        config: Board configuration.
        num_games: Number of games to play.
        seed: Seed for both the boards and the move choice.
        max_steps: Step cap per game (default: number of cells).

    Returns:
        Dictionary with win rate, average steps and average revealed cells.

    Raises:
        ValueError: If num_games is less than one.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1")
    env = MinesweeperEnv(config=config)
    rng = np.random.default_rng(seed)
    max_steps = max_steps or config.total_cells

    wins = 0
    total_steps = 0
    total_revealed = 0

    for game in range(num_games):
        game_seed = None if seed is None else seed + game
        env.reset(seed=game_seed)

        for _ in range(max_steps):
            valid_indices = np.where(env.get_action_mask())[0]
            if len(valid_indices) == 0:
                break
            action = rng.choice(valid_indices)
            _, _, terminated, truncated, info = env.step(action)
            total_steps += 1
            if terminated or truncated:
                if info["game_state"] == "WON":
                    wins += 1
                total_revealed += info["revealed"]
                break

    logger.info(f"Simulated {num_games} games, {wins} won")
    return {
        "win_rate": wins / num_games,
        "avg_steps": total_steps / num_games,
        "avg_revealed": total_revealed / num_games,
    }


def simulate(args: argparse.Namespace) -> None:
    """Run random-play games and print summary statistics."""
    config = _config_from_args(args)
    print(
        f"Simulating {args.games} games on {config.width}x{config.height} "
        f"with {config.num_mines} mines..."
    )
    results = simulate_games(config, args.games, seed=args.seed)
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minesweeper - play or simulate games"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for name, help_text in (
        ("play", "Play a game in the terminal"),
        ("simulate", "Play random games and report statistics"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--width", type=int, default=9, help="Columns (5-30)")
        sub.add_argument("--height", type=int, default=9, help="Rows (5-30)")
        sub.add_argument(
            "--mines", type=int, default=None,
            help="Number of mines (default: recommended for the size)",
        )
        sub.add_argument("--seed", type=int, default=None, help="Random seed")
        if name == "simulate":
            sub.add_argument(
                "--games", type=int, default=100, help="Number of games"
            )

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "simulate" and args.games < 1:
        parser.error("--games must be at least 1")

    if args.command == "play":
        play(args)
    elif args.command == "simulate":
        simulate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
