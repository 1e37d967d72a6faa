from __future__ import annotations
from typing import Dict, Literal, Tuple
from palmon.battle.models import Position

Direction = Literal["up", "down", "left", "right"]

GRID_MIN = 0
GRID_MAX = 9

DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

def clamp(value: int) -> int:
    return max(GRID_MIN, min(GRID_MAX, value))

def step(position: Position, direction: str) -> Position:
    """Destination one tile away, clamped to the grid (never wrapped)."""
    dx, dy = DIRECTIONS[direction]
    return Position(clamp(position.x + dx), clamp(position.y + dy))

def in_bounds(position: Position) -> bool:
    return GRID_MIN <= position.x <= GRID_MAX and GRID_MIN <= position.y <= GRID_MAX
