"""
Type definitions and dataclasses for Picross Solver.
"""

import numpy as np
from enum import Enum
from dataclasses import dataclass
from typing import Tuple, Optional, Iterator

# RGB triple, 8 bits per channel
Color = Tuple[int, int, int]

# Background color: white pixels are never part of a clue
WHITE: Color = (0xFF, 0xFF, 0xFF)

# Image type (H, W, 3) uint8
Pixels = np.ndarray


@dataclass(frozen=True)
class Clue:
    """One maximal run of same-colored, non-background pixels along a line."""
    color: Color
    count: int

    def __post_init__(self):
        # Normalize numpy scalars / lists to a plain int tuple
        object.__setattr__(self, "color", tuple(int(v) for v in self.color))
        object.__setattr__(self, "count", int(self.count))
        if self.count < 1:
            raise ValueError(f"Clue count must be positive, got {self.count}")
        if self.color == WHITE:
            raise ValueError("Clue color cannot be the background color")

    def __str__(self) -> str:
        return f"Clue ({self.color}, {self.count})"


ClueLine = Tuple[Clue, ...]


class Orientation(Enum):
    """Direction of a line."""
    ROW = "row"
    COLUMN = "column"


@dataclass(frozen=True, eq=False)
class Puzzle:
    """
    Puzzle = (width, height, rows, cols, pixels)

    - rows: one clue tuple per row (len = height), top to bottom
    - cols: one clue tuple per column (len = width), left to right
    - pixels: source image (H, W, 3), kept for the completion check
    """
    width: int
    height: int
    rows: Tuple[ClueLine, ...]
    cols: Tuple[ClueLine, ...]
    pixels: Pixels

    def clues(self, orientation: Orientation, index: int) -> ClueLine:
        """Clues of one row or column."""
        if orientation is Orientation.ROW:
            return self.rows[index]
        return self.cols[index]

    def line_count(self, orientation: Orientation) -> int:
        return self.height if orientation is Orientation.ROW else self.width

    def pixel(self, x: int, y: int) -> Color:
        r, g, b = self.pixels[y, x]
        return (int(r), int(g), int(b))


class CellState(Enum):
    """State of one board cell."""
    UNRESOLVED = 0
    FILLED = 1
    MARKED = 2


@dataclass(frozen=True)
class Cell:
    """
    Board cell.

    UNRESOLVED renders as background; MARKED is an explicit "known empty".
    Both read as background when the board is compared to the puzzle.
    """
    state: CellState
    color: Optional[Color] = None

    @classmethod
    def filled(cls, color: Color) -> 'Cell':
        return cls(CellState.FILLED, tuple(int(v) for v in color))

    @property
    def is_filled(self) -> bool:
        return self.state is CellState.FILLED

    @property
    def is_marked(self) -> bool:
        return self.state is CellState.MARKED

    @property
    def is_unresolved(self) -> bool:
        return self.state is CellState.UNRESOLVED

    def effective_color(self, bg: Color = WHITE) -> Color:
        """Color this cell stands for; background unless FILLED."""
        if self.state is CellState.FILLED:
            return self.color
        return bg


UNRESOLVED = Cell(CellState.UNRESOLVED)
MARKED = Cell(CellState.MARKED)


# ASCII glyphs used by Board.render() and Proposition.pattern()
GLYPH_UNRESOLVED = " "
GLYPH_FILLED = "█"
GLYPH_MARKED = "X"


def glyph(cell: Cell) -> str:
    """Single character for a cell (filled white reads as background)."""
    if cell.state is CellState.MARKED:
        return GLYPH_MARKED
    if cell.state is CellState.FILLED and cell.color != WHITE:
        return GLYPH_FILLED
    return GLYPH_UNRESOLVED


class GameStatus(Enum):
    """IN_PROGRESS -> SOLVED | STUCK (both terminal)."""
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    STUCK = "stuck"


@dataclass(frozen=True)
class Proposition:
    """
    Candidate assignments for one line, not yet applied to the board.

    assignments holds one entry per line position: None means "no opinion",
    a Cell is a forced value.
    """
    orientation: Orientation
    index: int
    assignments: Tuple[Optional[Cell], ...]

    def forced(self) -> Iterator[Tuple[int, Cell]]:
        """(position, cell) for every non-None assignment."""
        for pos, cell in enumerate(self.assignments):
            if cell is not None:
                yield pos, cell

    def pattern(self) -> str:
        """ASCII view of the assignments ('?' where no opinion)."""
        return "".join("?" if c is None else glyph(c) for c in self.assignments)
