"""
Utility functions for Picross Solver.
"""

import numpy as np
import json
import hashlib
from pathlib import Path
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from .types import Color, ClueLine, Pixels, Puzzle, WHITE


BLACK: Color = (0x00, 0x00, 0x00)

# Characters understood by P()
DEFAULT_PALETTE: Dict[str, Color] = {
    ".": WHITE,
    "#": BLACK,
    "r": (0xFF, 0x00, 0x00),
    "g": (0x00, 0xFF, 0x00),
    "b": (0x00, 0x00, 0xFF),
}


def P(lines: Sequence[str], palette: Optional[Dict[str, Color]] = None) -> Pixels:
    """
    Build an (H, W, 3) uint8 image from text rows.

    Example:
        >>> P(["##.#", "...#"]).shape
        (2, 4, 3)
    """
    palette = DEFAULT_PALETTE if palette is None else palette
    H = len(lines)
    W = len(lines[0]) if H else 0
    out = np.empty((H, W, 3), dtype=np.uint8)
    for y, row in enumerate(lines):
        if len(row) != W:
            raise ValueError(f"Row {y} has length {len(row)}, expected {W}")
        for x, ch in enumerate(row):
            out[y, x] = palette[ch]
    return out


def clues_to_json(clues: ClueLine) -> List[Dict]:
    """JSON-serializable form of one clue line."""
    return [{"color": list(c.color), "count": c.count} for c in clues]


# ==============================================================================
# Hash functions for receipts
# ==============================================================================

def puzzle_sha(puzzle: Puzzle) -> str:
    """
    Compute SHA-256 hash of a puzzle's clues for puzzle identification.

    Args:
        puzzle: Extracted puzzle

    Returns:
        Hex string of SHA-256 hash
    """
    payload = {
        "width": puzzle.width,
        "height": puzzle.height,
        "rows": [clues_to_json(c) for c in puzzle.rows],
        "cols": [clues_to_json(c) for c in puzzle.cols],
    }
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()


def strategy_set_sha(strategies: List) -> str:
    """
    Compute SHA-256 hash of strategy sequence.

    Args:
        strategies: List of Strategy objects

    Returns:
        Hex string of SHA-256 hash
    """
    payload = [{"name": s.name, "params": {str(k): str(v) for k, v in s.params.items()}}
               for s in strategies]
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()


# ==============================================================================
# Receipt logging
# ==============================================================================

def log_receipt(record: Dict, out_dir: str = None) -> Path:
    """
    Write receipt record to JSONL file.

    Args:
        record: Dictionary with receipt data
        out_dir: Output directory (default: runs/YYYY-MM-DD)

    Returns:
        Path of the receipts file
    """
    if out_dir is None:
        date_str = datetime.now().strftime("%Y-%m-%d")
        out_dir = f"runs/{date_str}"

    Path(out_dir).mkdir(parents=True, exist_ok=True)
    receipt_path = Path(out_dir) / "receipts.jsonl"

    with open(receipt_path, "a") as f:
        f.write(json.dumps(record, sort_keys=True) + "\n")

    return receipt_path
