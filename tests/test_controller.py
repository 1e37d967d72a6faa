import random
from pathlib import Path
from palmon.battle.models import Position
from palmon.game.controller import GameController, INSTRUCTIONS, create_rng
from palmon.game.input import Button, parse_button
from palmon.core.errors import InvalidInputError
from palmon.data.catalog import starter_templates
from palmon.system.settings import Settings, SettingsData
from palmon.world.movement import in_bounds
import pytest


def test_new_game_starts_on_title():
    ctrl = GameController.new_game(rng=random.Random(7))
    s = ctrl.session
    assert ctrl.mode == "title"
    assert len(s.roster) == 1
    starter = s.roster.active
    assert starter.id == "player-1"
    assert starter.name in {t.name for t in starter_templates()}
    assert starter.is_player and starter.position is None
    assert sorted(s.world.wilds) == [f"wild-{i}" for i in range(5)]
    assert all(in_bounds(w.position) for w in s.world.creatures())
    assert s.world.player.position == Position(5, 5)
    assert s.world.player.facing == "down"


def test_new_game_uses_settings_wild_count(tmp_path):
    settings = Settings(SettingsData(wild_count=3), Path(tmp_path / "s.json"))
    ctrl = GameController.new_game(settings, rng=random.Random(1))
    assert len(ctrl.session.world) == 3


def test_same_seed_same_world():
    a = GameController.new_game(rng=random.Random(99)).view()
    b = GameController.new_game(rng=random.Random(99)).view()
    assert a == b


def test_env_seed_overrides(monkeypatch):
    monkeypatch.setenv("PALMON_RNG_SEED", "42")
    assert create_rng(1).random() == create_rng(2).random()


def test_parse_button():
    assert parse_button(" UP ") is Button.UP
    assert parse_button(Button.B) is Button.B
    with pytest.raises(InvalidInputError):
        parse_button("jump")


def test_title_any_key_enters_world(build_game):
    ctrl = build_game(mode="title")
    assert ctrl.press("b")
    assert ctrl.mode == "world"
    assert ctrl.session.message == INSTRUCTIONS


def test_unknown_input_is_ignored(build_game):
    ctrl = build_game(mode="title")
    assert ctrl.press("start") is False
    assert ctrl.mode == "title"


def test_menu_open_and_close(build_game):
    ctrl = build_game()
    assert ctrl.press("a")
    assert ctrl.mode == "menu"
    assert not ctrl.press("a")
    assert not ctrl.press("up")
    assert ctrl.mode == "menu"
    assert ctrl.press("b")
    assert ctrl.mode == "world"


def test_b_does_nothing_in_world(build_game):
    ctrl = build_game()
    before = ctrl.session.message
    assert ctrl.press("b") is False
    assert ctrl.session.message == before


def test_collision_starts_battle_without_moving(build_game, scripted_rng):
    rng = scripted_rng(randoms=[0.0])
    ctrl = build_game("Sproutling", [("Palcat", (5, 4))], rng=rng)
    assert ctrl.press("up")
    assert ctrl.mode == "battle"
    assert ctrl.session.battle.target_id == "wild-0"
    assert ctrl.session.world.player.position == Position(5, 5)
    assert ctrl.session.message == "A wild Palcat appeared!"
    # collision encounters never also roll for an ambient one
    assert rng.randoms == [0.0]


def test_plain_move(build_game, scripted_rng):
    ctrl = build_game("Sproutling", [("Palcat", (0, 0))], rng=scripted_rng(randoms=[0.5]))
    assert ctrl.press("right")
    assert ctrl.mode == "world"
    assert ctrl.session.world.player.position == Position(6, 5)
    assert ctrl.session.world.player.facing == "right"
    assert ctrl.session.message == "You walk right to (6, 5)."


def test_ambient_encounter(build_game, scripted_rng):
    ctrl = build_game("Sproutling", [("Voltail", (0, 0))], rng=scripted_rng(randoms=[0.05]))
    assert ctrl.press("down")
    assert ctrl.session.world.player.position == Position(5, 6)
    assert ctrl.mode == "battle"
    assert ctrl.session.battle.target_id == "wild-0"


def test_movement_clamps_at_edge(build_game, scripted_rng):
    ctrl = build_game("Sproutling", [("Voltail", (0, 0))], rng=scripted_rng(randoms=[0.9, 0.9]))
    ctrl.session.world.player.position = Position(9, 0)
    ctrl.press("right")
    assert ctrl.session.world.player.position == Position(9, 0)
    ctrl.press("up")
    assert ctrl.session.world.player.position == Position(9, 0)
    assert ctrl.session.world.player.facing == "up"


def test_directions_ignored_in_battle(build_game):
    ctrl = build_game("Sproutling", [("Palcat", (5, 4))])
    ctrl.press("up")
    assert ctrl.press("left") is False
    assert ctrl.mode == "battle"


def test_view_is_a_snapshot(build_game):
    ctrl = build_game("Sproutling", [("Palcat", (5, 4))])
    view = ctrl.view()
    ctrl.press("up")
    assert view.mode == "world"
    assert view.battle is None
    after = ctrl.view()
    assert after.mode == "battle"
    assert after.battle.target.name == "Palcat"
    assert after.active.name == "Sproutling"
