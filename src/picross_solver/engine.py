"""
Propagation Engine for Picross Solver.

- Ordered list of line strategies
- One step = first Proposition found (strategies in order, rows then columns,
  ascending index); the caller merges it and asks again
- Fixed point: board matches the puzzle (SOLVED) or a full scan finds
  nothing (STUCK)
"""

import time
from typing import Callable, Dict, List, Optional, Tuple

from .types import GameStatus, Proposition, Puzzle
from .board import Board
from .line import LineView, iter_lines
from .strategies import Strategy, ExactFitStrategy


# Safety net for run_fixed_point (None: derived from puzzle size). Every
# successful step resolves at least one cell, so the derived limit is never hit
# by the built-in strategies
DEFAULT_MAX_STEPS = None

StepCallback = Callable[[int, Proposition, Board], None]


# ==============================================================================
# Engine
# ==============================================================================

class PropagationEngine:
    """
    Holds strategies in configured order. Stateless across calls.
    """

    def __init__(self, strategies: Optional[List[Strategy]] = None):
        """
        Args:
            strategies: Strategies to try, in order (default: [ExactFitStrategy()])
        """
        if strategies is None:
            strategies = [ExactFitStrategy()]
        self.strategies = list(strategies)

    def add(self, strategy: Strategy) -> 'PropagationEngine':
        """Append a strategy; returns self for chaining."""
        self.strategies.append(strategy)
        return self

    def solve(self, puzzle: Puzzle, board: Board) -> Optional[Proposition]:
        """
        Single propagation step. Does not modify board.

        Returns:
            First non-empty Proposition, or None when no strategy can progress
        """
        for strategy in self.strategies:
            for line in iter_lines(puzzle, board):
                prop = strategy.propose(line)
                if prop is not None:
                    return prop
        return None

    def __repr__(self) -> str:
        return f"PropagationEngine({[s.name for s in self.strategies]})"


# ==============================================================================
# Merge
# ==============================================================================

def apply_proposition(puzzle: Puzzle, board: Board, prop: Proposition) -> int:
    """
    Write every forced assignment of prop into board.

    Returns:
        Number of cells whose value changed
    """
    line = LineView.for_proposition(board, puzzle, prop)
    changed = 0
    for pos, cell in prop.forced():
        if pos >= line.length():
            continue
        if line.read(pos) != cell:
            changed += 1
        line.write(pos, cell)
    return changed


def merge_step(puzzle: Puzzle, board: Board, prop: Proposition) -> int:
    """
    apply_proposition for the solve loop: a step must change the board.

    Raises:
        RuntimeError: prop only restates what the board already holds
    """
    changed = apply_proposition(puzzle, board, prop)
    if changed == 0:
        raise RuntimeError(f"Strategy proposed a no-op for {prop.orientation.value} {prop.index}")
    return changed


# ==============================================================================
# Fixed-Point Iterator
# ==============================================================================

def run_fixed_point(puzzle: Puzzle,
                    board: Board,
                    engine: Optional[PropagationEngine] = None,
                    *,
                    max_steps: Optional[int] = DEFAULT_MAX_STEPS,
                    on_step: Optional[StepCallback] = None) -> Tuple[GameStatus, Dict]:
    """
    Solve + merge until SOLVED or STUCK.

    Args:
        puzzle: Puzzle (clues + source pixels)
        board: Board, mutated in place
        engine: Engine to use (default: exact-fit only)
        max_steps: Optional step limit (default: cells + lines)
        on_step: Called as on_step(step, proposition, board) after each merge

    Returns:
        (status, stats) where stats = {"steps": N, "cells_unresolved": M, "timing_ms": T}
    """
    if engine is None:
        engine = PropagationEngine()
    if max_steps is None:
        max_steps = puzzle.width * puzzle.height + puzzle.width + puzzle.height

    t_start = time.time()
    steps = 0

    while True:
        if board.matches(puzzle):
            status = GameStatus.SOLVED
            break

        prop = engine.solve(puzzle, board)
        if prop is None:
            status = GameStatus.STUCK
            break

        if steps >= max_steps:
            raise RuntimeError(f"No fixed point after {max_steps} steps ({engine!r})")

        merge_step(puzzle, board, prop)
        steps += 1
        if on_step is not None:
            on_step(steps, prop, board)

    stats = {
        "steps": steps,
        "cells_unresolved": board.count_unresolved(),
        "timing_ms": int((time.time() - t_start) * 1000),
    }
    return status, stats
