"""Capture & escape mechanics."""
from __future__ import annotations
from dataclasses import dataclass
import random

CAPTURE_THRESHOLD = 0.7   # hp ratio must be strictly below this
CAPTURE_CEILING = 0.8     # chance as hp approaches zero
ESCAPE_CHANCE = 0.5

@dataclass
class CaptureResult:
    success: bool
    chance: float

def _ratio(hp: int, max_hp: int) -> float:
    return hp / max(1, max_hp)

def capture_eligible(hp: int, max_hp: int) -> bool:
    return _ratio(hp, max_hp) < CAPTURE_THRESHOLD

def capture_chance(hp: int, max_hp: int) -> float:
    return CAPTURE_CEILING * (1 - _ratio(hp, max_hp))

def attempt_capture(rng: random.Random, hp: int, max_hp: int) -> CaptureResult:
    chance = capture_chance(hp, max_hp)
    return CaptureResult(rng.random() < chance, chance)

def escape_success(rng: random.Random) -> bool:
    return rng.random() < ESCAPE_CHANCE

def captured_hp(max_hp: int) -> int:
    """HP a creature keeps when it joins the roster; never zero."""
    return max(max_hp // 2, 1)

__all__ = ["capture_eligible","capture_chance","attempt_capture","escape_success","captured_hp","CaptureResult"]
