"""The single owned aggregate of mutable game state."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, Optional
import random
from palmon.battle.models import BattleState, CreatureInstance, PlayerRoster
from palmon.core.logging import logger
from palmon.data.catalog import random_starter
from palmon.world.encounters import DEFAULT_WILD_COUNT, spawn_wild
from palmon.world.state import WorldState

Mode = Literal["title", "world", "battle", "menu"]

WELCOME = "Welcome to the world of Pal creatures!"

@dataclass
class GameSession:
    world: WorldState = field(default_factory=WorldState)
    roster: PlayerRoster = field(default_factory=PlayerRoster)
    mode: Mode = "title"
    battle: Optional[BattleState] = None
    message: str = WELCOME

    def say(self, text: str):
        self.message = text
        logger.debug("Message", mode=self.mode, text=text)

    def set_mode(self, mode: Mode):
        if mode != self.mode:
            logger.debug("ModeChange", from_mode=self.mode, to_mode=mode)
        self.mode = mode

    def end_battle(self):
        self.battle = None
        self.set_mode("world")

    @property
    def active(self) -> Optional[CreatureInstance]:
        return self.roster.active

def new_session(rng: random.Random, wild_count: int = DEFAULT_WILD_COUNT) -> GameSession:
    starter = random_starter(rng)
    session = GameSession()
    session.roster.add(CreatureInstance.from_template(starter, session.roster.next_id()))
    session.world.add_all(spawn_wild(rng, wild_count))
    logger.info("GameStarted", starter=starter.name, wilds=len(session.world))
    return session
