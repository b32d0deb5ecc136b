"""
Exact-fit line solver tests.

Properties:
1. Zero slack: the unique placement is proposed, with a MARKED separator
   after every same-color clue boundary
2. Slack: nothing is proposed, whatever the board holds
3. No-op suppression: nothing is proposed once the board shows the placement
"""

import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from picross_solver.types import Cell, Clue, Orientation, MARKED, UNRESOLVED
from picross_solver.board import Board
from picross_solver.line import LineView
from picross_solver.extract import extract
from picross_solver.strategies import (
    ExactFitStrategy,
    min_required_length,
    forced_placement,
    slack,
)
from picross_solver.engine import apply_proposition
from picross_solver.utils import P, BLACK


RED = (0xFF, 0x00, 0x00)
BLUE = (0x00, 0x00, 0xFF)

B = Cell.filled(BLACK)
R = Cell.filled(RED)


def make_shuriken():
    """
    4x4 puzzle; rows 0/3 and columns 0/3 have zero slack.

        ##.#
        ...#
        #...
        #.##
    """
    return extract(P([
        "##.#",
        "...#",
        "#...",
        "#.##",
    ]))


def row_view(puzzle, board, y):
    return LineView(board, puzzle, Orientation.ROW, y)


def col_view(puzzle, board, x):
    return LineView(board, puzzle, Orientation.COLUMN, x)


# ==============================================================================
# Helpers
# ==============================================================================

def test_min_required_length_counts_same_color_separators():
    assert min_required_length(()) == 0
    assert min_required_length((Clue(BLACK, 3),)) == 3
    assert min_required_length((Clue(BLACK, 2), Clue(BLACK, 1))) == 4
    # Different colors may touch
    assert min_required_length((Clue(RED, 2), Clue(BLUE, 2))) == 4
    assert min_required_length((Clue(BLACK, 2), Clue(BLACK, 1), Clue(RED, 1), Clue(RED, 2))) == 8
    assert slack((Clue(BLACK, 1),), 3) == 2


def test_forced_placement():
    clues = (Clue(BLACK, 2), Clue(BLACK, 1), Clue(RED, 1), Clue(RED, 2))
    assert forced_placement(clues) == [B, B, MARKED, B, R, MARKED, R, R]
    assert forced_placement(()) == []


# ==============================================================================
# Property 1: zero slack
# ==============================================================================

def test_shuriken_row_zero():
    """Row 0 = 2 + 1 black with a separator: '██X█'."""
    puzzle = make_shuriken()
    board = Board.for_puzzle(puzzle)
    strategy = ExactFitStrategy()

    prop = strategy.propose(row_view(puzzle, board, 0))

    assert prop is not None, "Zero-slack row must be proposed"
    assert prop.orientation is Orientation.ROW
    assert prop.index == 0
    assert prop.pattern() == "██X█"
    assert prop.assignments == (B, B, MARKED, B)

    # propose() never writes
    assert board.count_unresolved() == 16

    apply_proposition(puzzle, board, prop)
    assert board.row_pattern(0) == "██X█"

    # Re-solving the same row yields nothing
    assert strategy.propose(row_view(puzzle, board, 0)) is None


def test_shuriken_columns():
    puzzle = make_shuriken()
    board = Board.for_puzzle(puzzle)
    strategy = ExactFitStrategy()

    prop0 = strategy.propose(col_view(puzzle, board, 0))
    prop3 = strategy.propose(col_view(puzzle, board, 3))

    assert prop0.pattern() == "█X██"
    assert prop3.pattern() == "██X█"
    assert strategy.propose(col_view(puzzle, board, 1)) is None, "Column 1 has slack"


def test_multicolor_line_without_separator():
    """Different colors touch; no MARKED cell between them."""
    puzzle = extract(P(["rr##"]))
    board = Board.for_puzzle(puzzle)

    prop = ExactFitStrategy().propose(row_view(puzzle, board, 0))

    assert prop.assignments == (R, R, B, B)
    assert MARKED not in prop.assignments


def test_separator_after_every_same_color_boundary():
    puzzle = extract(P(["##.#rr.r"]))
    board = Board.for_puzzle(puzzle)

    prop = ExactFitStrategy().propose(row_view(puzzle, board, 0))

    assert prop.assignments == (B, B, MARKED, B, R, R, MARKED, R)


def test_partially_known_line_is_still_proposed():
    puzzle = make_shuriken()
    board = Board.for_puzzle(puzzle)
    board.set(0, 0, B)
    board.set(1, 0, B)

    prop = ExactFitStrategy().propose(row_view(puzzle, board, 0))
    assert prop is not None
    assert prop.pattern() == "██X█"


def test_missing_separator_alone_counts_as_modification():
    """Only the MARKED cell is missing from the board."""
    puzzle = make_shuriken()
    board = Board.for_puzzle(puzzle)
    for x in (0, 1, 3):
        board.set(x, 0, B)

    prop = ExactFitStrategy().propose(row_view(puzzle, board, 0))
    assert prop is not None
    assert apply_proposition(puzzle, board, prop) == 1
    assert board.get(2, 0) == MARKED


# ==============================================================================
# Property 2: slack
# ==============================================================================

def test_slack_line_yields_nothing():
    puzzle = make_shuriken()
    board = Board.for_puzzle(puzzle)
    strategy = ExactFitStrategy()

    for y in (1, 2):
        assert strategy.propose(row_view(puzzle, board, y)) is None

    # Whatever the board holds
    for x in range(4):
        board.set(x, 1, B)
    assert strategy.propose(row_view(puzzle, board, 1)) is None
    for x in range(4):
        board.set(x, 2, MARKED)
    assert strategy.propose(row_view(puzzle, board, 2)) is None


def test_empty_clue_line_has_slack():
    puzzle = extract(P(["...", "###"]))
    board = Board.for_puzzle(puzzle)
    assert ExactFitStrategy().propose(row_view(puzzle, board, 0)) is None


# ==============================================================================
# Property 3: no-op suppression
# ==============================================================================

def test_already_solved_line_yields_nothing():
    puzzle = extract(P(["###"]))
    board = Board.for_puzzle(puzzle)
    for x in range(3):
        board.set(x, 0, B)

    assert ExactFitStrategy().propose(row_view(puzzle, board, 0)) is None


def test_wrong_cells_are_overwritten():
    """A cell holding something else than the forced value is a modification."""
    puzzle = extract(P(["rr"]))
    board = Board.for_puzzle(puzzle)
    board.set(0, 0, MARKED)
    board.set(1, 0, B)

    prop = ExactFitStrategy().propose(row_view(puzzle, board, 0))
    assert prop.assignments == (R, R)
    assert apply_proposition(puzzle, board, prop) == 2
    assert board.get(0, 0) == R and board.get(1, 0) == R
    assert UNRESOLVED not in (board.get(0, 0), board.get(1, 0))
