"""Palmon: a small turn-based creature-collecting game."""
__version__ = "0.1.0"
