from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
from palmon.battle.models import CreatureInstance, Position
from palmon.core.logging import logger
from .movement import Direction

START_POSITION = Position(5, 5)

@dataclass
class PlayerState:
    position: Position = START_POSITION
    facing: Direction = "down"

@dataclass
class WorldState:
    player: PlayerState = field(default_factory=PlayerState)
    wilds: Dict[str, CreatureInstance] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.wilds)

    def is_empty(self) -> bool:
        return not self.wilds

    def creatures(self) -> List[CreatureInstance]:
        return list(self.wilds.values())

    def get(self, creature_id: str) -> Optional[CreatureInstance]:
        return self.wilds.get(creature_id)

    def add(self, creature: CreatureInstance):
        if creature.id in self.wilds:
            raise ValueError(f"duplicate wild creature id {creature.id}")
        self.wilds[creature.id] = creature

    def add_all(self, creatures: Iterable[CreatureInstance]):
        for c in creatures:
            self.add(c)

    def remove(self, creature_id: str) -> Optional[CreatureInstance]:
        gone = self.wilds.pop(creature_id, None)
        if gone is not None:
            logger.debug("WildRemoved", id=creature_id, remaining=len(self.wilds))
        return gone

    def wild_at(self, position: Position) -> Optional[CreatureInstance]:
        for c in self.wilds.values():
            if c.position == position:
                return c
        return None

    def move_player(self, position: Position, facing: Direction):
        self.player.position = position
        self.player.facing = facing
