#!/usr/bin/env python3
"""
vimsweeper - Main entry point.

Usage:
    python main.py play KEYS [--difficulty NAME | --rows R --cols C --mines M] [--seed S]
    python main.py benchmark [--games N] [--difficulty NAME] [--seed S]
"""
import argparse
import logging
import random

import numpy as np

from src.vimsweeper.game import (
    BoardConfig, ConfigurationError, PRESETS, calculate_3bv, create_grid,
    place_mines, safe_cell_count,
)
from src.vimsweeper.motion import parse_key_script
from src.vimsweeper.session import GameSession


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from preset or explicit sizes."""
    preset = PRESETS[args.difficulty]
    return BoardConfig(
        width=args.cols if args.cols is not None else preset.width,
        height=args.rows if args.rows is not None else preset.height,
        num_mines=args.mines if args.mines is not None else preset.num_mines,
        seed=args.seed,
    )


def play(args: argparse.Namespace) -> None:
    """Feed a key script to a fresh session and report the outcome."""
    config = build_config(args)
    session = GameSession(config)

    keys = parse_key_script(args.keys)
    ignored = [key for key in keys if not session.handle_key(key)]

    summary = session.summary()
    print(f"Board: {config.height}x{config.width} with {config.num_mines} mines")
    print(f"Keys: {len(keys)} ({len(ignored)} ignored)")
    print(f"State: {summary.state.name}")
    print(f"Cursor: row {session.cursor.r}, col {session.cursor.c}")
    print(f"Clicks: {summary.clicks}")
    if summary.three_bv is not None:
        print(f"3BV: {summary.three_bv}")
    if summary.safe_cells is not None:
        print(f"Safe cells: {summary.safe_cells}")
    if summary.efficiency is not None:
        print(f"Efficiency: {summary.efficiency:.1%}")


def benchmark(args: argparse.Namespace) -> None:
    """Generate boards and print 3BV statistics."""
    config = build_config(args)
    rng = random.Random(args.seed)
    first_click = (config.height // 2, config.width // 2)

    print(
        f"Scoring {args.games} boards of {config.height}x{config.width} "
        f"with {config.num_mines} mines..."
    )
    scores = []
    safe_counts = []
    for _ in range(args.games):
        grid = create_grid(config.height, config.width)
        place_mines(grid, config.num_mines, first_click, rng)
        scores.append(calculate_3bv(grid))
        safe_counts.append(safe_cell_count(grid))

    values = np.array(scores)
    print(f"  Mean 3BV: {values.mean():.2f}")
    print(f"  Std dev: {values.std():.2f}")
    print(f"  Min: {values.min()}  Max: {values.max()}")
    print(f"  3BV per safe cell: {(values / np.array(safe_counts)).mean():.3f}")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the board size options shared by all commands."""
    parser.add_argument(
        "--difficulty",
        choices=sorted(PRESETS),
        default="beginner",
        help="Preset board size",
    )
    parser.add_argument("--rows", type=int, default=None, help="Override rows")
    parser.add_argument("--cols", type=int, default=None, help="Override columns")
    parser.add_argument("--mines", type=int, default=None, help="Override mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="vimsweeper - minesweeper driven by vim motions"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a key script")
    play_parser.add_argument(
        "keys", help='Keys to press, e.g. "4j4l<Enter>wa"'
    )
    add_board_arguments(play_parser)

    # Benchmark command
    bench_parser = subparsers.add_parser(
        "benchmark", help="3BV statistics over random boards"
    )
    bench_parser.add_argument(
        "--games", type=int, default=1000, help="Number of boards to score"
    )
    add_board_arguments(bench_parser)

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "benchmark":
            benchmark(args)
        else:
            parser.print_help()
    except ConfigurationError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
