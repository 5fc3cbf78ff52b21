#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                    # 4×4, medium
    python main.py -s 3 -d easy       # 3×3, easy shuffle
    python main.py --seed 7           # reproducible shuffle
    python main.py --scores --sort moves
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slideterm.main import app  # noqa: E402

if __name__ == "__main__":
    app()
