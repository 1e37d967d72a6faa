from __future__ import annotations
import random
from typing import List, Optional
from palmon.battle.models import CreatureInstance, Position
from palmon.core.logging import logger
from palmon.data.catalog import random_template
from .movement import GRID_MIN, GRID_MAX
from .state import WorldState

AMBIENT_ENCOUNTER_RATE = 0.1
DEFAULT_WILD_COUNT = 5

def spawn_wild(rng: random.Random, count: int = DEFAULT_WILD_COUNT) -> List[CreatureInstance]:
    wilds = []
    for i in range(count):
        template = random_template(rng)
        pos = Position(rng.randint(GRID_MIN, GRID_MAX), rng.randint(GRID_MIN, GRID_MAX))
        wilds.append(CreatureInstance.from_template(template, f"wild-{i}", wild=True, position=pos))
    logger.debug("WildSpawned", count=len(wilds))
    return wilds

def roll_ambient_encounter(rng: random.Random, world: WorldState) -> Optional[str]:
    """Return the id of a random wild creature to battle, or None.

    An empty world never rolls.
    """
    if world.is_empty():
        return None
    if rng.random() >= AMBIENT_ENCOUNTER_RATE:
        return None
    chosen = rng.choice(world.creatures())
    logger.debug("AmbientEncounter", id=chosen.id)
    return chosen.id
