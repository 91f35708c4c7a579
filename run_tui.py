#!/usr/bin/env python3
"""Launcher script for the permalert demo TUI."""

import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

if __name__ == "__main__":
    from permalert.cli import app

    app(["demo", *sys.argv[1:]])
