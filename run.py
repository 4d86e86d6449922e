#!/usr/bin/env python3
"""
run.py - Main entry point for the Reversi engine

Forwards all arguments to the command-line interface, e.g.:

    python run.py play --hints
    python run.py --debug-level debug demo
    python run.py benchmark --iterations 500
"""

import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from reversi.interfaces.cli import main


if __name__ == "__main__":
    main()
