#!/usr/bin/env python3
"""
Pal Creature Adventure - terminal edition

Thin wrapper around the palmon package:
- game/ holds the session aggregate, state machine and read-only views
- battle/ holds damage, capture and the deferred turn sequencing
- world/ holds the grid, movement and encounters
- ui/ reads views and keys; it never mutates game state

To run: python main.py
"""

from palmon.cli import run

if __name__ == "__main__":
    run()
