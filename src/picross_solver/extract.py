"""
Clue extraction: bitmap -> Puzzle.

Each row (then each column) is scanned once, keeping a running
(current_color, run_length) state seeded to (background, 0). A run closes on
a background pixel, on a change to another non-background color, and at the
end of the line.
"""

import numpy as np
from pathlib import Path
from typing import Iterable, List, Tuple, Union
from PIL import Image

from .types import Clue, ClueLine, Color, Pixels, Puzzle, WHITE
from .errors import UnsupportedFormat


# The only Pillow mode accepted as input
SUPPORTED_MODE = "RGB"


def clues_from_line(colors: Iterable[Color]) -> ClueLine:
    """
    Run-length encode one line of pixels into clues.

    Args:
        colors: Sequence of RGB triples, in left-to-right / top-to-bottom order

    Returns:
        Tuple of Clue, background runs omitted
    """
    out: List[Clue] = []
    current = WHITE
    run = 0

    for px in colors:
        px = (int(px[0]), int(px[1]), int(px[2]))
        if px == WHITE:
            if run > 0:
                out.append(Clue(current, run))
            current, run = WHITE, 0
        elif px == current:
            run += 1
        else:
            if run > 0:
                out.append(Clue(current, run))
            current, run = px, 1

    if run > 0:
        out.append(Clue(current, run))

    return tuple(out)


def _check_pixels(pixels: Pixels) -> Pixels:
    """Validate (H, W, 3) integer array."""
    if not isinstance(pixels, np.ndarray):
        pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise UnsupportedFormat(f"shape={pixels.shape}", "expected (H, W, 3) RGB")
    if not np.issubdtype(pixels.dtype, np.integer):
        raise UnsupportedFormat(f"dtype={pixels.dtype}", "expected 8-bit integer channels")
    if pixels.dtype != np.uint8 and pixels.size:
        if pixels.min() < 0 or pixels.max() > 0xFF:
            raise UnsupportedFormat(f"dtype={pixels.dtype}", "channel values outside 0..255")
    return pixels.astype(np.uint8, copy=False)


def extract(pixels: Pixels) -> Puzzle:
    """
    Build a Puzzle from decoded RGB pixels.

    Args:
        pixels: (H, W, 3) array of 8-bit RGB values

    Returns:
        Puzzle with row clues (top to bottom) and column clues (left to right)

    Raises:
        UnsupportedFormat: pixels are not an (H, W, 3) integer array
    """
    pixels = _check_pixels(pixels)
    H, W, _ = pixels.shape

    rows = tuple(clues_from_line(pixels[y, :]) for y in range(H))
    cols = tuple(clues_from_line(pixels[:, x]) for x in range(W))

    # Own a read-only copy so the Puzzle cannot be mutated through the caller's array
    src = pixels.copy()
    src.setflags(write=False)

    return Puzzle(width=W, height=H, rows=rows, cols=cols, pixels=src)


def load_image(path: Union[str, Path]) -> Pixels:
    """
    Decode an image file into an (H, W, 3) uint8 array.

    Only plain 8-bit RGB images are accepted; no color-space conversion is
    attempted. I/O errors (OSError) and decode errors
    (PIL.UnidentifiedImageError) propagate unchanged.

    Raises:
        UnsupportedFormat: image mode is not "RGB" (alpha, palette, grayscale, ...)
    """
    with Image.open(path) as img:
        if img.mode != SUPPORTED_MODE:
            raise UnsupportedFormat(img.mode, f"{Path(path).name} must be {SUPPORTED_MODE}")
        return np.array(img, dtype=np.uint8)


def puzzle_from_image(path: Union[str, Path]) -> Puzzle:
    """Load an image file and extract its clues."""
    return extract(load_image(path))


def format_clues(clues: ClueLine) -> str:
    """Compact text form, e.g. '2(0,0,0) 1(255,0,0)'."""
    if not clues:
        return "0"
    return " ".join(f"{c.count}({c.color[0]},{c.color[1]},{c.color[2]})" for c in clues)


def describe(puzzle: Puzzle) -> List[Tuple[str, str]]:
    """(label, clues) pairs for every row then every column."""
    out = [(f"row {y}", format_clues(c)) for y, c in enumerate(puzzle.rows)]
    out += [(f"col {x}", format_clues(c)) for x, c in enumerate(puzzle.cols)]
    return out
