"""
Line-solving strategies for Picross Solver.

Each strategy:
1. Inherits from Strategy base class
2. Implements propose(line) - reads the line, never writes it
3. Returns a Proposition only when it would change the board
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .types import Cell, ClueLine, Proposition, MARKED
from .line import LineView


# ==============================================================================
# Strategy Base Class
# ==============================================================================

@dataclass
class Strategy:
    """
    Base class for line strategies.

    A strategy F: LineView -> Optional[Proposition] must be deterministic and
    must only propose assignments that are forced by the line's clues.
    """
    name: str
    params: Dict = field(default_factory=dict)

    def propose(self, line: LineView) -> Optional[Proposition]:
        """
        Inspect one line.

        Args:
            line: Row or column view (board cells + clues)

        Returns:
            Proposition for that line, or None if the strategy has nothing new
        """
        raise NotImplementedError("Subclass must implement propose()")


# ==============================================================================
# Helpers
# ==============================================================================

def same_color_pairs(clues: ClueLine) -> int:
    """Number of adjacent clue pairs sharing a color (each needs a separator)."""
    return sum(1 for a, b in zip(clues, clues[1:]) if a.color == b.color)


def min_required_length(clues: ClueLine) -> int:
    """Shortest line that can hold clues: sum of counts + mandatory separators."""
    return sum(c.count for c in clues) + same_color_pairs(clues)


def slack(clues: ClueLine, length: int) -> int:
    return length - min_required_length(clues)


def forced_placement(clues: ClueLine) -> List[Cell]:
    """
    Tightest arrangement of clues, left-aligned.

    A MARKED cell separates consecutive clues of the same color; differently
    colored clues touch.
    """
    out: List[Cell] = []
    prev = None
    for clue in clues:
        if prev is not None and clue.color == prev:
            out.append(MARKED)
        out.extend([Cell.filled(clue.color)] * clue.count)
        prev = clue.color
    return out


# ==============================================================================
# EXACT_FIT: lines with zero slack
# ==============================================================================

class ExactFitStrategy(Strategy):
    """
    Lines whose clues fill them exactly.

    When sum(count) + same-color separators == length there is a single legal
    arrangement; every cell is forced. Nothing is proposed for lines with
    slack, nor when the board already shows the forced arrangement.
    """

    def __init__(self):
        super().__init__("EXACT_FIT", {})

    def propose(self, line: LineView) -> Optional[Proposition]:
        clues = line.clues()
        length = line.length()

        if min_required_length(clues) != length:
            return None

        placement = forced_placement(clues)

        modified = False
        for pos, cell in enumerate(placement):
            if line.read(pos) != cell:
                modified = True
                break

        if not modified:
            return None

        return Proposition(line.orientation, line.index, tuple(placement))
