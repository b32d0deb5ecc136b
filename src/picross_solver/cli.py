"""
Command-line runner: solve the picross puzzle drawn in an image.

Usage:
    picross-solve puzzles/4x4-shuriken.png
    picross-solve puzzles/heart.png --receipts runs/heart --clues
"""

import sys
import argparse
from typing import Optional, List

from PIL import UnidentifiedImageError

from .types import GameStatus
from .errors import UnsupportedFormat
from .extract import describe
from .game import Game
from .utils import puzzle_sha, strategy_set_sha, log_receipt


# Exit codes
EXIT_SOLVED = 0
EXIT_STUCK = 1
EXIT_LOAD_ERROR = 2


def run_image(image_path: str, receipts_dir: Optional[str] = None,
              verbose: bool = True, show_clues: bool = False) -> int:
    """
    Load image, propagate to a terminal state, report.

    Args:
        image_path: Path to an 8-bit RGB image
        receipts_dir: If set, append a receipt to receipts.jsonl there
        verbose: Print the board after every step
        show_clues: Print the extracted clues before solving

    Returns:
        Process exit code
    """
    try:
        game = Game.from_image(image_path)
    except (OSError, UnidentifiedImageError, UnsupportedFormat) as e:
        print(f"Error loading {image_path}: {e}")
        return EXIT_LOAD_ERROR

    puzzle = game.puzzle

    if verbose:
        print("=" * 70)
        print("Picross Solver - Line Propagation")
        print(f"Image: {image_path}")
        print(f"Size: {puzzle.width}x{puzzle.height}")
        print("=" * 70)

    if show_clues:
        for label, text in describe(puzzle):
            print(f"{label:>8}: {text}")

    def on_step(step, prop, board):
        if verbose:
            print(f"Step {step}: {prop.orientation.value} {prop.index}")
            print(board)

    status = game.run(on_step=on_step)

    if status is GameStatus.SOLVED:
        print(f"SOLVED in {game.steps} steps")
    else:
        print(f"STUCK after {game.steps} steps: no line can be deduced")
        print(game.board)

    if receipts_dir is not None:
        receipt = {
            "image": str(image_path),
            "status": status.value,
            "steps": game.steps,
            "size": {"W": puzzle.width, "H": puzzle.height},
            "cells_unresolved": game.board.count_unresolved(),
            "timing_ms": game.stats.get("timing_ms", 0),
            "hashes": {
                "puzzle_sha": puzzle_sha(puzzle),
                "strategy_set_sha": strategy_set_sha(game.engine.strategies),
            },
        }
        path = log_receipt(receipt, out_dir=receipts_dir)
        if verbose:
            print(f"Receipt: {path}")

    return EXIT_SOLVED if status is GameStatus.SOLVED else EXIT_STUCK


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Solve a picross puzzle from its picture")
    parser.add_argument(
        "image",
        type=str,
        help="Path to the puzzle image (8-bit RGB, white background)"
    )
    parser.add_argument(
        "--receipts",
        type=str,
        default=None,
        help="Directory to append receipts.jsonl to"
    )
    parser.add_argument(
        "--clues",
        action="store_true",
        help="Print extracted clues before solving"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the final result"
    )

    args = parser.parse_args(argv)

    sys.exit(run_image(args.image, args.receipts, verbose=not args.quiet, show_clues=args.clues))


if __name__ == "__main__":
    main()
