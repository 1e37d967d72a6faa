"""Turn sequencing for wild battles.

The player always acts first. Anything that happens "a moment later" (the
enemy's counter-attack, faint and victory announcements, the walk back to the
world) is pushed onto the deferred queue instead of running inline. Every
deferred step re-reads the session when it runs and quietly does nothing if
the creature it was about has since been removed.
"""
from __future__ import annotations
import random
from typing import Optional
from palmon.core.logging import logger
from palmon.core.scheduler import DeferredQueue
from palmon.game.session import GameSession
from .capture import attempt_capture as roll_capture, capture_eligible, captured_hp, escape_success
from .mechanics import (AttackResult, ENEMY_DAMAGE_RANGE, PLAYER_DAMAGE_RANGE,
                        describe_attack, resolve_attack)
from .models import BattleState, CreatureInstance

ENEMY_ATTACK_DELAY = 1000
FAINT_ANNOUNCE_DELAY = 1000
RECOVERY_DELAY = 1500
VICTORY_ANNOUNCE_DELAY = 1000
LEVEL_UP_DELAY = 1500
CAPTURE_RETURN_DELAY = 1500
ROSTER_REVEAL_DELAY = 1000

LEVEL_UP_HP_BONUS = 2

class BattleEngine:
    def __init__(self, session: GameSession, rng: random.Random, scheduler: DeferredQueue):
        self.session = session
        self.rng = rng
        self.scheduler = scheduler

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def target(self) -> Optional[CreatureInstance]:
        battle = self.session.battle
        if battle is None:
            return None
        return self.session.world.get(battle.target_id)

    def _refresh_capture(self, wild: CreatureInstance):
        if self.session.battle is not None:
            self.session.battle.can_capture = capture_eligible(wild.hp, wild.max_hp)

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------
    def start(self, wild_id: str) -> bool:
        wild = self.session.world.get(wild_id)
        if wild is None:
            return False
        self.session.battle = BattleState(target_id=wild_id, turn="player",
                                          can_capture=capture_eligible(wild.hp, wild.max_hp))
        self.session.set_mode("battle")
        self.session.say(f"A wild {wild.name} appeared!")
        logger.info("BattleStart", id=wild_id, hp=f"{wild.hp}/{wild.max_hp}",
                    can_capture=self.session.battle.can_capture)
        return True

    def player_attack(self) -> Optional[AttackResult]:
        player = self.session.active
        wild = self.target()
        if wild is None or player is None:
            return None
        result = resolve_attack(player, wild, self.rng, PLAYER_DAMAGE_RANGE)
        self.session.say(describe_attack(result))
        self._refresh_capture(wild)
        logger.debug("PlayerAttack", move=result.move, damage=result.damage, wild_hp=wild.hp)
        if wild.is_fainted():
            self.scheduler.schedule(VICTORY_ANNOUNCE_DELAY, lambda: self._wild_defeated(wild.id), "wild_defeated")
        else:
            self._pass_to_enemy()
        return result

    def attempt_capture(self) -> Optional[bool]:
        wild = self.target()
        if wild is None:
            return None
        res = roll_capture(self.rng, wild.hp, wild.max_hp)
        logger.debug("CaptureAttempt", id=wild.id, chance=f"{res.chance:.2f}", success=res.success)
        if not res.success:
            self.session.say(f"{wild.name} broke free!")
            self._pass_to_enemy()
            return False
        roster = self.session.roster
        caught = wild.captured_copy(roster.next_id(), captured_hp(wild.max_hp))
        self.session.world.remove(wild.id)
        roster.add(caught)
        self.session.say(f"You captured {wild.name}!")
        logger.info("CreatureCaptured", wild_id=wild.id, new_id=caught.id, roster=len(roster))
        self.scheduler.schedule(CAPTURE_RETURN_DELAY, lambda: self._capture_complete(caught.id), "capture_complete")
        return True

    def attempt_escape(self) -> bool:
        if self.session.battle is None:
            return False
        if escape_success(self.rng):
            self.session.end_battle()
            self.session.say("Got away safely!")
            logger.debug("EscapeSucceeded")
            return True
        self.session.say("Couldn't get away!")
        self._pass_to_enemy()
        return False

    # ------------------------------------------------------------------
    # Deferred steps
    # ------------------------------------------------------------------
    def _pass_to_enemy(self):
        if self.session.battle is not None:
            self.session.battle.turn = "enemy"
        self.scheduler.schedule(ENEMY_ATTACK_DELAY, self.enemy_attack, "enemy_attack")

    def enemy_attack(self) -> Optional[AttackResult]:
        battle = self.session.battle
        player = self.session.active
        wild = self.target()
        if battle is None or wild is None or player is None:
            return None
        result = resolve_attack(wild, player, self.rng, ENEMY_DAMAGE_RANGE)
        self.session.say(describe_attack(result))
        logger.debug("EnemyAttack", move=result.move, damage=result.damage, player_hp=player.hp)
        if player.is_fainted():
            self.scheduler.schedule(FAINT_ANNOUNCE_DELAY, self._player_fainted, "player_fainted")
        else:
            battle.turn = "player"
        return result

    def _wild_defeated(self, wild_id: str):
        wild = self.session.world.get(wild_id)
        player = self.session.active
        if wild is None or player is None:
            return
        self.session.say(f"{wild.name} fainted! {player.name} gained experience!")
        self.session.world.remove(wild_id)
        player.level_up(LEVEL_UP_HP_BONUS)
        logger.info("WildDefeated", id=wild_id, level=player.level, max_hp=player.max_hp,
                    remaining=len(self.session.world))
        self.scheduler.schedule(LEVEL_UP_DELAY, self._announce_level_up, "level_up")

    def _announce_level_up(self):
        player = self.session.active
        if player is None:
            return
        self.session.end_battle()
        self.session.say(f"{player.name} grew to level {player.level}!")

    def _player_fainted(self):
        player = self.session.active
        if player is None:
            return
        self.session.say(f"{player.name} fainted!")
        logger.info("PlayerFainted", id=player.id)
        self.scheduler.schedule(RECOVERY_DELAY, self._recover_player, "recover_player")

    def _recover_player(self):
        player = self.session.active
        if player is None:
            return
        player.heal_full()
        self.session.end_battle()
        self.session.say(f"{player.name} was sent back to base to recover...")

    def _capture_complete(self, caught_id: str):
        caught = self.session.roster.get(caught_id)
        if caught is None:
            return
        self.session.end_battle()
        self.session.say(f"{caught.name} joined your team!")
        self.scheduler.schedule(ROSTER_REVEAL_DELAY, self._reveal_roster, "reveal_roster")

    def _reveal_roster(self):
        if self.session.mode == "world":
            self.session.set_mode("menu")
