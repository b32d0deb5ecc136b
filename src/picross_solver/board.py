"""
Board: mutable grid of cell states, independent of any puzzle.

Implementation: two H×W numpy arrays, one holding CellState codes and one
holding the RGB color of FILLED cells (background elsewhere).
"""

import numpy as np
from typing import Iterator, Tuple

from .types import Cell, CellState, Color, Pixels, Puzzle, WHITE, UNRESOLVED, MARKED, glyph


RULE = "=" * 23


class Board:
    """
    Grid of cells, all UNRESOLVED at creation.

    Mutated only through set(). Out-of-bounds writes are ignored rather than
    raising; reads out of bounds raise IndexError.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize blank board.

        Args:
            width, height: Board dimensions
        """
        if width < 0 or height < 0:
            raise ValueError(f"Invalid board size {width}x{height}")
        self.width = width
        self.height = height
        self.state = np.full((height, width), CellState.UNRESOLVED.value, dtype=np.uint8)
        self.colors = np.full((height, width, 3), 0xFF, dtype=np.uint8)

    @classmethod
    def for_puzzle(cls, puzzle: Puzzle) -> 'Board':
        """Blank board sized for puzzle."""
        return cls(puzzle.width, puzzle.height)

    def copy(self) -> 'Board':
        """Deep copy of board."""
        b = Board(self.width, self.height)
        b.state = self.state.copy()
        b.colors = self.colors.copy()
        return b

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        """Cell at column x, row y."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} board")
        state = CellState(int(self.state[y, x]))
        if state is CellState.FILLED:
            r, g, b = self.colors[y, x]
            return Cell.filled((int(r), int(g), int(b)))
        if state is CellState.MARKED:
            return MARKED
        return UNRESOLVED

    def set(self, x: int, y: int, cell: Cell):
        """Assign cell at (x, y). No-op when out of bounds."""
        if not self.in_bounds(x, y):
            return
        self.state[y, x] = cell.state.value
        if cell.state is CellState.FILLED:
            self.colors[y, x] = cell.color
        else:
            self.colors[y, x] = WHITE

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (x, y, cell) in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.get(x, y)

    def count_unresolved(self) -> int:
        return int((self.state == CellState.UNRESOLVED.value).sum())

    def to_pixels(self, bg: Color = WHITE) -> Pixels:
        """Effective colors as (H, W, 3) uint8 image; MARKED/UNRESOLVED read as bg."""
        out = np.empty((self.height, self.width, 3), dtype=np.uint8)
        out[:, :] = bg
        filled = self.state == CellState.FILLED.value
        out[filled] = self.colors[filled]
        return out

    def matches(self, puzzle: Puzzle) -> bool:
        """True iff every cell's effective color equals the puzzle's source pixel."""
        if (self.width, self.height) != (puzzle.width, puzzle.height):
            return False
        return bool(np.array_equal(self.to_pixels(), puzzle.pixels))

    def render(self) -> str:
        """ASCII grid framed by rules."""
        lines = [RULE]
        for y in range(self.height):
            lines.append("".join(glyph(self.get(x, y)) for x in range(self.width)))
        lines.append(RULE)
        return "\n".join(lines)

    def row_pattern(self, y: int) -> str:
        return "".join(glyph(self.get(x, y)) for x in range(self.width))

    def col_pattern(self, x: int) -> str:
        return "".join(glyph(self.get(x, y)) for y in range(self.height))

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: 'Board') -> bool:
        """Check if two boards are equal."""
        if not isinstance(other, Board):
            return NotImplemented
        if self.width != other.width or self.height != other.height:
            return False
        return np.array_equal(self.state, other.state) and np.array_equal(self.colors, other.colors)
