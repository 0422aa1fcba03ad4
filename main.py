#!/usr/bin/env python3
"""
Minesweeper - main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py simulate [--games N]
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from sweeper.cli import main


if __name__ == "__main__":
    main()
