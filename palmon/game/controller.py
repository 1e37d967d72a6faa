"""Top-level state machine: title -> world <-> battle, world <-> menu.

All mutation of a :class:`GameSession` goes through :meth:`GameController.handle`
or the deferred steps it schedules; renderers only ever get a :class:`GameView`.
"""
from __future__ import annotations
import os
import random
from typing import Optional
from palmon.battle.engine import BattleEngine
from palmon.core.errors import InvalidInputError
from palmon.core.logging import logger
from palmon.core.scheduler import DeferredQueue
from palmon.system.settings import Settings
from palmon.world.encounters import DEFAULT_WILD_COUNT, roll_ambient_encounter
from palmon.world.movement import step
from .input import Button, parse_button
from .session import GameSession, new_session
from .views import GameView, build_view

INSTRUCTIONS = ("Use the arrow keys to explore and find Pal creatures! "
                "A opens your team; in battle A attacks and B runs or throws a capture sphere.")
ALL_GONE = "Congratulations! You have defeated or captured every wild creature!"

def create_rng(seed: Optional[int] = None) -> random.Random:
    """Create RNG with optional seed; PALMON_RNG_SEED in the environment wins."""
    env = os.environ.get('PALMON_RNG_SEED')
    if env:
        try:
            seed = int(env)
        except ValueError:
            logger.warn("BadRngSeed", value=env)
    return random.Random(seed)

class GameController:
    def __init__(self, session: GameSession, *, rng: Optional[random.Random] = None,
                 scheduler: Optional[DeferredQueue] = None):
        self.session = session
        self.rng = rng or create_rng()
        self.scheduler = scheduler or DeferredQueue()
        self.battle = BattleEngine(session, self.rng, self.scheduler)

    @classmethod
    def new_game(cls, settings: Optional[Settings] = None, rng: Optional[random.Random] = None) -> "GameController":
        wild_count = DEFAULT_WILD_COUNT
        seed = None
        if settings is not None:
            wild_count = settings.data.wild_count
            seed = settings.data.rng_seed
        rng = rng or create_rng(seed)
        return cls(new_session(rng, wild_count), rng=rng)

    @property
    def mode(self) -> str:
        return self.session.mode

    @property
    def pending(self) -> bool:
        return self.scheduler.pending

    def view(self) -> GameView:
        return build_view(self.session, pending=self.scheduler.pending)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def press(self, raw) -> bool:
        try:
            button = parse_button(raw)
        except InvalidInputError as e:
            logger.debug("InputIgnored", raw=repr(e.raw))
            return False
        return self.handle(button)

    def handle(self, button: Button) -> bool:
        """Route one input event; returns False when the input was ignored."""
        if self.scheduler.pending:
            logger.debug("InputIgnoredWhileResolving", button=button.value, steps=len(self.scheduler))
            return False
        mode = self.session.mode
        if mode == "title":
            return self._on_title(button)
        if mode == "world":
            return self._on_world(button)
        if mode == "battle":
            return self._on_battle(button)
        if mode == "menu":
            return self._on_menu(button)
        return False

    def _on_title(self, button: Button) -> bool:
        self.session.set_mode("world")
        self.session.say(INSTRUCTIONS)
        return True

    def _on_world(self, button: Button) -> bool:
        if button is Button.A:
            self.session.set_mode("menu")
            self.session.say(f"Your team ({len(self.session.roster)}). Press B to close.")
            return True
        if not button.is_direction:
            return False
        world = self.session.world
        dest = step(world.player.position, button.value)
        wild = world.wild_at(dest)
        if wild is not None:
            return self.battle.start(wild.id)
        world.move_player(dest, button.value)
        if world.is_empty():
            self.session.say(ALL_GONE)
            return True
        self.session.say(f"You walk {button.value} to ({dest.x}, {dest.y}).")
        ambush = roll_ambient_encounter(self.rng, world)
        if ambush is not None:
            self.battle.start(ambush)
        return True

    def _on_battle(self, button: Button) -> bool:
        battle = self.session.battle
        if battle is None or battle.turn != "player":
            return False
        if button is Button.A:
            self.battle.player_attack()
            return True
        if button is Button.B:
            if battle.can_capture:
                self.battle.attempt_capture()
            else:
                self.battle.attempt_escape()
            return True
        return False

    def _on_menu(self, button: Button) -> bool:
        if button is not Button.B:
            return False
        self.session.set_mode("world")
        self.session.say("Back to exploring.")
        return True

    # ------------------------------------------------------------------
    # Deferred steps
    # ------------------------------------------------------------------
    def advance(self, ms: int) -> int:
        return self.scheduler.advance(ms)

    def run_next(self) -> bool:
        return self.scheduler.run_next()

    def settle(self) -> int:
        return self.scheduler.drain()
