"""
Picross Solver - Constraint Propagation Approach

Extracts nonogram clues from an RGB bitmap and fills a blank board with
forced line assignments until it matches the picture or gets stuck.
"""

from .types import (
    Color, WHITE, Clue, Puzzle, Orientation,
    CellState, Cell, UNRESOLVED, MARKED,
    GameStatus, Proposition, glyph
)
from .errors import PicrossError, UnsupportedFormat
from .extract import (
    clues_from_line, extract, load_image, puzzle_from_image,
    format_clues
)
from .board import Board
from .line import LineView, iter_lines
from .strategies import (
    Strategy, ExactFitStrategy,
    min_required_length, forced_placement, slack
)
from .engine import PropagationEngine, apply_proposition, merge_step, run_fixed_point
from .game import Game
from .utils import P, BLACK, puzzle_sha, strategy_set_sha, log_receipt

__all__ = [
    # Types
    'Color', 'WHITE', 'Clue', 'Puzzle', 'Orientation',
    'CellState', 'Cell', 'UNRESOLVED', 'MARKED',
    'GameStatus', 'Proposition',

    # Errors
    'PicrossError', 'UnsupportedFormat',

    # Extraction
    'clues_from_line', 'extract', 'load_image', 'puzzle_from_image',
    'format_clues',

    # Board
    'Board', 'glyph',

    # Lines
    'LineView', 'iter_lines',

    # Strategies
    'Strategy', 'ExactFitStrategy',
    'min_required_length', 'forced_placement', 'slack',

    # Engine
    'PropagationEngine', 'apply_proposition', 'merge_step', 'run_fixed_point',

    # Game
    'Game',

    # Utils
    'P', 'BLACK', 'puzzle_sha', 'strategy_set_sha', 'log_receipt',
]
