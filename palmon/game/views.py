"""Read-only snapshots handed to renderers.

Views are frozen copies; nothing a renderer does to them reaches the session.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from palmon.battle.models import CreatureInstance, Position

@dataclass(frozen=True)
class CreatureView:
    id: str
    name: str
    type_label: str
    element: Optional[str]
    hp: int
    max_hp: int
    level: int
    moves: Tuple[str, ...]
    position: Optional[Position]
    is_wild: bool
    is_player: bool
    workability: Optional[int]
    special_skill: Optional[str]

    @classmethod
    def of(cls, c: CreatureInstance) -> "CreatureView":
        return cls(id=c.id, name=c.name, type_label=c.type_label, element=c.element,
                   hp=c.hp, max_hp=c.max_hp, level=c.level, moves=tuple(c.moves),
                   position=c.position, is_wild=c.is_wild, is_player=c.is_player,
                   workability=c.workability, special_skill=c.special_skill)

@dataclass(frozen=True)
class BattleView:
    target_id: str
    turn: str
    can_capture: bool
    target: Optional[CreatureView]

@dataclass(frozen=True)
class GameView:
    mode: str
    player_position: Position
    facing: str
    wilds: Tuple[CreatureView, ...]
    battle: Optional[BattleView]
    roster: Tuple[CreatureView, ...]
    message: str
    pending: bool = False

    @property
    def active(self) -> Optional[CreatureView]:
        return self.roster[0] if self.roster else None

def build_view(session, *, pending: bool = False) -> GameView:
    battle = None
    if session.battle is not None:
        target = session.world.get(session.battle.target_id)
        battle = BattleView(target_id=session.battle.target_id, turn=session.battle.turn,
                            can_capture=session.battle.can_capture,
                            target=CreatureView.of(target) if target else None)
    return GameView(
        mode=session.mode,
        player_position=session.world.player.position,
        facing=session.world.player.facing,
        wilds=tuple(CreatureView.of(c) for c in session.world.creatures()),
        battle=battle,
        roster=tuple(CreatureView.of(c) for c in session.roster),
        message=session.message,
        pending=pending,
    )
