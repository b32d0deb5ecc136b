"""
Game: a Puzzle paired with the Board being solved.

State machine (driven by step()/run()):
    IN_PROGRESS -> IN_PROGRESS   (a step changed the board)
    IN_PROGRESS -> SOLVED        (board matches the puzzle)
    IN_PROGRESS -> STUCK         (no strategy yields a Proposition)
"""

from pathlib import Path
from typing import Dict, Optional, Union

from .types import GameStatus, Proposition, Puzzle
from .board import Board
from .extract import puzzle_from_image
from .engine import PropagationEngine, StepCallback, merge_step, run_fixed_point


class Game:
    """Owns the board; the puzzle is shared and never modified."""

    def __init__(self,
                 puzzle: Puzzle,
                 board: Optional[Board] = None,
                 engine: Optional[PropagationEngine] = None):
        if board is None:
            board = Board.for_puzzle(puzzle)
        elif (board.width, board.height) != (puzzle.width, puzzle.height):
            raise ValueError(
                f"Board is {board.width}x{board.height}, puzzle is {puzzle.width}x{puzzle.height}")
        self.puzzle = puzzle
        self.board = board
        self.engine = engine if engine is not None else PropagationEngine()
        self.steps = 0
        # Stats of the last run(): steps, cells_unresolved, timing_ms
        self.stats: Dict = {}
        self._stuck = False

    @classmethod
    def from_image(cls, path: Union[str, Path],
                   engine: Optional[PropagationEngine] = None) -> 'Game':
        """Load image, extract clues, start from a blank board."""
        return cls(puzzle_from_image(path), engine=engine)

    def status(self) -> GameStatus:
        if self.board.matches(self.puzzle):
            return GameStatus.SOLVED
        if self._stuck:
            return GameStatus.STUCK
        return GameStatus.IN_PROGRESS

    def is_over(self) -> bool:
        return self.status() is not GameStatus.IN_PROGRESS

    def step(self) -> Optional[Proposition]:
        """
        One propagation step: find a Proposition and merge it.

        Returns:
            The merged Proposition, or None if the game is over

        Raises:
            RuntimeError: a strategy proposed a change-free Proposition
        """
        if self.is_over():
            return None

        prop = self.engine.solve(self.puzzle, self.board)
        if prop is None:
            self._stuck = True
            return None

        merge_step(self.puzzle, self.board, prop)
        self.steps += 1
        return prop

    def run(self, on_step: Optional[StepCallback] = None) -> GameStatus:
        """Step until SOLVED or STUCK (see run_fixed_point for the guards)."""
        if self.is_over():
            return self.status()

        offset = self.steps

        def count_step(step, prop, board):
            self.steps = offset + step
            if on_step is not None:
                on_step(self.steps, prop, board)

        status, self.stats = run_fixed_point(
            self.puzzle, self.board, self.engine, on_step=count_step)
        if status is GameStatus.STUCK:
            self._stuck = True
        return status
