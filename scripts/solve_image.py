#!/usr/bin/env python3
"""
Solve the picross puzzle drawn in an image, printing every propagation step.

Usage:
    python scripts/solve_image.py path/to/puzzle.png
    python scripts/solve_image.py path/to/puzzle.png --receipts runs/today --quiet
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from picross_solver.cli import main


if __name__ == "__main__":
    main()
