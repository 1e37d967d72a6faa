import dataclasses
import io
import pytest
from rich.console import Console
from palmon.core.logging import Logger
from palmon.ui.keys import translate, QUIT
from palmon.ui.render import render, hp_bar


def _text(view):
    console = Console(record=True, width=100, color_system=None)
    console.print(render(view))
    return console.export_text()


def test_render_each_mode(build_game):
    ctrl = build_game("Sproutling", [("Palcat", (5, 4))], mode="title")
    assert "Pal Creature Adventure" in _text(ctrl.view())
    ctrl.press("left")
    assert "Wild creatures left: 1" in _text(ctrl.view())
    ctrl.press("up")
    out = _text(ctrl.view())
    assert "A wild Palcat appeared!" in out
    assert "B: Run" in out
    ctrl.session.battle.can_capture = True
    assert "B: Capture" in _text(ctrl.view())


def test_render_roster(build_game):
    ctrl = build_game("Cinderpup")
    ctrl.press("a")
    out = _text(ctrl.view())
    assert "Your team" in out
    assert "Cinderpup" in out
    assert "Smelting" in out


def test_views_are_read_only(build_game):
    view = build_game().view()
    with pytest.raises(dataclasses.FrozenInstanceError):
        view.mode = "battle"
    with pytest.raises(dataclasses.FrozenInstanceError):
        view.roster[0].hp = 0


def test_hp_bar_widths():
    assert hp_bar(10, 20).count("█") == 10
    assert "FAINTED" in hp_bar(0, 0)


def test_key_translation():
    assert translate("W") == "up"
    assert translate("z") == "a"
    assert translate("\x1b") == "b"
    assert translate("q") == QUIT
    assert translate("p") is None


def test_logger_threshold_and_extras():
    out = io.StringIO()
    log = Logger("INFO", stream=out)
    log.debug("Hidden")
    log.info("BattleStart", id="wild-0")
    text = out.getvalue()
    assert "Hidden" not in text
    assert "[INFO] BattleStart id=wild-0" in text
    log.set_level("DEBUG")
    log.debug("Shown")
    assert "[DEBUG] Shown" in out.getvalue()
