"""Terminal renderer built on rich.

Reads a :class:`GameView` and returns renderables; it never touches the session.
"""
from __future__ import annotations
from typing import Optional
from rich.align import Align
from rich.box import ROUNDED
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from palmon.core.types import element_abbreviation, element_markup
from palmon.game.views import CreatureView, GameView
from palmon.world.movement import GRID_MAX, GRID_MIN

FACING_GLYPHS = {"up": "^", "down": "v", "left": "<", "right": ">"}

def hp_bar(current: int, max_hp: int, width: int = 20) -> str:
    if max_hp <= 0:
        return "[red]FAINTED[/red]"
    percent = current / max_hp
    filled = int(percent * width)
    if percent > 0.5:
        color = "green"
    elif percent > 0.25:
        color = "yellow"
    else:
        color = "red"
    return f"[{color}]{'█' * filled}{'░' * (width - filled)}[/{color}]"

def _creature_panel(c: CreatureView, title: str) -> Panel:
    tag = element_markup(c.element, element_abbreviation(c.element))
    body = (f"[bold]{c.name}[/bold] Lv{c.level} ({tag})\n"
            f"HP: {c.hp}/{c.max_hp}\n{hp_bar(c.hp, c.max_hp)}")
    return Panel(body, title=title, box=ROUNDED, width=40, padding=(0, 1))

def render_title() -> RenderableType:
    return Panel(Align.center(Text.from_markup(
        "[bold bright_yellow]Pal Creature Adventure[/bold bright_yellow]\n\n"
        "Press any key to start\n[dim]Collect, battle, and befriend wild creatures[/dim]")),
        box=ROUNDED, padding=(1, 2))

def render_world(view: GameView) -> RenderableType:
    grid = Table.grid(padding=(0, 1))
    for _ in range(GRID_MIN, GRID_MAX + 1):
        grid.add_column(justify="center")
    occupied = {}
    for c in view.wilds:
        if c.position is not None:
            occupied.setdefault((c.position.x, c.position.y), c)
    player = (view.player_position.x, view.player_position.y)
    for y in range(GRID_MIN, GRID_MAX + 1):
        row = []
        for x in range(GRID_MIN, GRID_MAX + 1):
            if (x, y) == player:
                row.append(f"[bold bright_white]{FACING_GLYPHS.get(view.facing, '@')}[/bold bright_white]")
                continue
            wild = occupied.get((x, y))
            row.append(element_markup(wild.element, "*") if wild else "[dim].[/dim]")
        grid.add_row(*row)
    footer = f"Wild creatures left: {len(view.wilds)}"
    return Panel(Group(grid, Text(footer, style="dim")), title="World", box=ROUNDED, width=40)

def render_battle(view: GameView) -> RenderableType:
    parts = []
    battle = view.battle
    if battle is not None and battle.target is not None:
        parts.append(_creature_panel(battle.target, "WILD"))
    if view.active is not None:
        parts.append(_creature_panel(view.active, "YOUR PAL"))
    if battle is not None:
        b_action = "Capture" if battle.can_capture else "Run"
        turn = "Your turn" if battle.turn == "player" else "Enemy turn"
        parts.append(Text.from_markup(f"[bold]{turn}[/bold]  A: Attack   B: {b_action}"))
    return Group(*parts)

def render_roster(view: GameView) -> RenderableType:
    table = Table(title="Your team", box=ROUNDED)
    for col in ("#", "Name", "Type", "Lv", "HP", "Work", "Skill"):
        table.add_column(col)
    for i, c in enumerate(view.roster, start=1):
        table.add_row(str(i), c.name, element_markup(c.element, c.type_label), str(c.level),
                      f"{c.hp}/{c.max_hp}",
                      "-" if c.workability is None else str(c.workability),
                      c.special_skill or "-")
    return table

def render(view: GameView, *, debug_steps: Optional[list] = None) -> RenderableType:
    if view.mode == "title":
        body: RenderableType = render_title()
    elif view.mode == "battle":
        body = render_battle(view)
    elif view.mode == "menu":
        body = render_roster(view)
    else:
        body = render_world(view)
    parts = [body, Panel(Text(view.message), box=ROUNDED, width=80)]
    if debug_steps:
        parts.append(Text("pending: " + ", ".join(debug_steps), style="dim"))
    return Group(*parts)
