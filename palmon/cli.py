from __future__ import annotations
import time
from rich.console import Console
from palmon.core.logging import logger
from palmon.game.controller import GameController
from palmon.system.settings import Settings
from palmon.ui.keys import QUIT, read_key
from palmon.ui.render import render

def _draw(console: Console, ctrl: GameController, settings: Settings):
    console.clear()
    steps = ctrl.scheduler.labels() if settings.data.debug else None
    console.print(render(ctrl.view(), debug_steps=steps))

def _play_out(console: Console, ctrl: GameController, settings: Settings):
    """Run queued battle steps in real time, redrawing after each one."""
    while ctrl.pending:
        wait = ctrl.scheduler.time_until_next() or 0
        time.sleep(wait / 1000 * settings.data.pacing)
        ctrl.run_next()
        _draw(console, ctrl, settings)

def run():
    settings = Settings.load()
    logger.set_level(settings.data.log_level)
    ctrl = GameController.new_game(settings)
    console = Console()
    _draw(console, ctrl, settings)
    while True:
        key = read_key()
        if key.command == QUIT:
            break
        if key.command is None:
            continue
        if ctrl.press(key.command):
            _draw(console, ctrl, settings)
            _play_out(console, ctrl, settings)
    console.print("Goodbye!")
    settings.save()
