from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import List, Literal, Optional, Tuple
from palmon.core.types import Element

Turn = Literal["player", "enemy"]

@dataclass(frozen=True)
class Position:
    x: int
    y: int

@dataclass(frozen=True)
class CreatureTemplate:
    name: str
    type_label: str
    max_hp: int
    moves: Tuple[str, ...]
    level: int = 5
    element: Optional[Element] = None
    workability: Optional[int] = None   # 0-100
    special_skill: Optional[str] = None

@dataclass
class CreatureInstance:
    """A concrete creature with mutable HP and level.

    ``position`` is set only while the creature roams the world; captured and
    player-owned creatures carry ``None``. ``element`` is ``None`` for
    creatures outside the elemental system.
    """
    id: str
    name: str
    type_label: str
    max_hp: int
    hp: int
    moves: List[str]
    level: int
    element: Optional[Element] = None
    is_wild: bool = False
    is_player: bool = False
    position: Optional[Position] = None
    workability: Optional[int] = None
    special_skill: Optional[str] = None

    def __post_init__(self):
        self.max_hp = max(1, int(self.max_hp))
        self.level = max(1, int(self.level))
        self.hp = max(0, min(int(self.hp), self.max_hp))

    @classmethod
    def from_template(cls, template: CreatureTemplate, creature_id: str, *,
                      wild: bool = False, position: Optional[Position] = None) -> "CreatureInstance":
        return cls(
            id=creature_id,
            name=template.name,
            type_label=template.type_label,
            max_hp=template.max_hp,
            hp=template.max_hp,
            moves=list(template.moves),
            level=template.level,
            element=template.element,
            is_wild=wild,
            is_player=not wild,
            position=position if wild else None,
            workability=template.workability,
            special_skill=template.special_skill,
        )

    def set_hp(self, value: int) -> int:
        self.hp = max(0, min(int(value), self.max_hp))
        return self.hp

    def take_damage(self, amount: int) -> int:
        """Apply damage and return how much HP was actually lost."""
        old = self.hp
        self.set_hp(old - max(0, int(amount)))
        return old - self.hp

    def heal_full(self):
        self.hp = self.max_hp

    def is_fainted(self) -> bool:
        return self.hp <= 0

    def level_up(self, hp_bonus: int):
        self.level += 1
        self.max_hp += hp_bonus
        self.heal_full()

    def captured_copy(self, new_id: str, hp: int) -> "CreatureInstance":
        """Player-owned copy of a wild creature, taken off the grid."""
        caught = replace(self, id=new_id, is_wild=False, is_player=True, position=None, moves=list(self.moves))
        caught.set_hp(hp)
        return caught

@dataclass
class BattleState:
    target_id: str
    turn: Turn = "player"
    can_capture: bool = False

@dataclass
class PlayerRoster:
    members: List[CreatureInstance] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(self.members)

    @property
    def active(self) -> Optional[CreatureInstance]:
        return self.members[0] if self.members else None

    def next_id(self) -> str:
        return f"player-{len(self.members) + 1}"

    def add(self, creature: CreatureInstance) -> CreatureInstance:
        self.members.append(creature)
        return creature

    def get(self, creature_id: str) -> Optional[CreatureInstance]:
        for m in self.members:
            if m.id == creature_id:
                return m
        return None

__all__ = ["Position","CreatureTemplate","CreatureInstance","BattleState","PlayerRoster","Turn"]
