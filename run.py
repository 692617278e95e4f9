#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:

    # Play a hot-seat game on the standard 6x7 board
    python run.py play

    # Pick colours and a bigger board
    python run.py play --p1-color Ruby --p2-color Sapphire --rows 7 --columns 8

    # Inspect a position (42 values, top row first)
    python run.py test --position 0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,2,2,2,0,0,0,1,1,1,1,0,0,0

    # Benchmark with 5000 iterations and verbose logging
    python run.py --debug_level info benchmark --iterations 5000
"""

import os
import sys

# Make the package importable when run from a source checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
