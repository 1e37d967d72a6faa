from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
import math
import random
from palmon.battle.models import CreatureInstance

SUPER_EFFECTIVE = 1.5
NOT_VERY_EFFECTIVE = 0.5

# attacker -> defender; anything absent is neutral (1.0)
TYPE_EFFECTIVENESS: Dict[Tuple[str, str], float] = {
    ("fire","grass"): SUPER_EFFECTIVE,
    ("water","fire"): SUPER_EFFECTIVE,
    ("grass","water"): SUPER_EFFECTIVE,
    ("electric","water"): SUPER_EFFECTIVE,
    ("grass","fire"): NOT_VERY_EFFECTIVE,
    ("fire","water"): NOT_VERY_EFFECTIVE,
    ("water","grass"): NOT_VERY_EFFECTIVE,
}

PLAYER_DAMAGE_RANGE = (2, 4)
ENEMY_DAMAGE_RANGE = (1, 3)

FALLBACK_MOVE = "Struggle"

def effectiveness(attacker_element: Optional[str], defender_element: Optional[str]) -> float:
    if not attacker_element or not defender_element:
        return 1.0
    return TYPE_EFFECTIVENESS.get((attacker_element, defender_element), 1.0)

def choose_move(creature: CreatureInstance, rng: random.Random) -> str:
    if not creature.moves:
        return FALLBACK_MOVE
    return rng.choice(creature.moves)

@dataclass
class AttackResult:
    attacker: str
    defender: str
    move: str
    base: int
    multiplier: float
    damage: int

    @property
    def verdict(self) -> str:
        if self.multiplier > 1.0:
            return "super"
        if self.multiplier < 1.0:
            return "weak"
        return "normal"

def resolve_attack(attacker: CreatureInstance, defender: CreatureInstance, rng: random.Random,
                   damage_range: Tuple[int, int]) -> AttackResult:
    """Pick a move, roll base power, apply the type multiplier and hit the defender.

    The move name is cosmetic; damage depends only on the roll and elements.
    """
    move = choose_move(attacker, rng)
    lo, hi = damage_range
    base = rng.randint(lo, hi)
    mult = effectiveness(attacker.element, defender.element)
    damage = math.floor(base * mult)
    defender.take_damage(damage)
    return AttackResult(attacker=attacker.name, defender=defender.name, move=move,
                        base=base, multiplier=mult, damage=damage)

def describe_attack(result: AttackResult) -> str:
    line = f"{result.attacker} used {result.move}! It dealt {result.damage} damage!"
    if result.verdict == "super":
        return "It's super effective! " + line
    if result.verdict == "weak":
        return "It's not very effective... " + line
    return line

__all__ = ["TYPE_EFFECTIVENESS","effectiveness","choose_move","resolve_attack","describe_attack","AttackResult",
           "PLAYER_DAMAGE_RANGE","ENEMY_DAMAGE_RANGE"]
