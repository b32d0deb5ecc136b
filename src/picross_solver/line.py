"""
Line view: one row or column of a Board paired with its clues.

Pure addressing; reads and writes go straight to the Board, so the solving
code is written once for both orientations.
"""

from typing import Iterator, List

from .types import Cell, ClueLine, Orientation, Proposition, Puzzle
from .board import Board


class LineView:
    """Row or column `index` of board, with the matching clues from puzzle."""

    __slots__ = ("board", "puzzle", "orientation", "index")

    def __init__(self, board: Board, puzzle: Puzzle, orientation: Orientation, index: int):
        self.board = board
        self.puzzle = puzzle
        self.orientation = orientation
        self.index = index

    @classmethod
    def for_proposition(cls, board: Board, puzzle: Puzzle, prop: Proposition) -> 'LineView':
        return cls(board, puzzle, prop.orientation, prop.index)

    def length(self) -> int:
        if self.orientation is Orientation.ROW:
            return self.board.width
        return self.board.height

    def _xy(self, position: int):
        if self.orientation is Orientation.ROW:
            return position, self.index
        return self.index, position

    def read(self, position: int) -> Cell:
        x, y = self._xy(position)
        return self.board.get(x, y)

    def write(self, position: int, cell: Cell):
        x, y = self._xy(position)
        self.board.set(x, y, cell)

    def clues(self) -> ClueLine:
        return self.puzzle.clues(self.orientation, self.index)

    def cells(self) -> List[Cell]:
        """Snapshot of the line's current cells."""
        return [self.read(i) for i in range(self.length())]

    def __repr__(self) -> str:
        return f"LineView({self.orientation.value} {self.index})"


def iter_lines(puzzle: Puzzle, board: Board) -> Iterator[LineView]:
    """All rows (ascending), then all columns (ascending)."""
    for orientation in (Orientation.ROW, Orientation.COLUMN):
        for index in range(puzzle.line_count(orientation)):
            yield LineView(board, puzzle, orientation, index)
