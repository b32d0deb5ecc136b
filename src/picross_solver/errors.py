"""
Error types for Picross Solver.

Only the image boundary can fail: I/O and decode errors come straight from
the OS and Pillow and are not wrapped. A stuck propagation is a status, not
an error.
"""


class PicrossError(Exception):
    """Base class for errors raised by picross_solver."""


class UnsupportedFormat(PicrossError, ValueError):
    """Image decoded fine but is not plain 8-bit RGB (alpha, palette, grayscale, ...)."""

    def __init__(self, mode: str, detail: str = ""):
        self.mode = mode
        msg = f"Unsupported image format: {mode}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)
