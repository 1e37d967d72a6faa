from __future__ import annotations
from enum import Enum
from palmon.core.errors import InvalidInputError

class Button(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    A = "a"
    B = "b"

    @property
    def is_direction(self) -> bool:
        return self in _DIRECTIONS

_DIRECTIONS = {Button.UP, Button.DOWN, Button.LEFT, Button.RIGHT}

def parse_button(raw) -> Button:
    if isinstance(raw, Button):
        return raw
    try:
        return Button(str(raw).strip().lower())
    except ValueError:
        raise InvalidInputError(raw) from None
