"""Static creature catalog.

Templates are process-wide read-only data; the first three form the starter pool.
"""
from __future__ import annotations
import random
from typing import Dict, Tuple
from palmon.battle.models import CreatureTemplate
from palmon.core.errors import UnknownTemplateError

TEMPLATES: Tuple[CreatureTemplate, ...] = (
    CreatureTemplate(name="Sproutling", type_label="Grass", element="grass", max_hp=20,
                     moves=("Vine Whip", "Seed Bomb", "Photosynthesis"), level=5,
                     workability=65, special_skill="Farming"),
    CreatureTemplate(name="Cinderpup", type_label="Fire", element="fire", max_hp=18,
                     moves=("Ember", "Flame Charge", "Warm Body"), level=5,
                     workability=70, special_skill="Smelting"),
    CreatureTemplate(name="Puddlefin", type_label="Water", element="water", max_hp=22,
                     moves=("Water Gun", "Bubble", "Dive"), level=5,
                     workability=60, special_skill="Fishing"),
    CreatureTemplate(name="Palcat", type_label="Normal", element="neutral", max_hp=25,
                     moves=("Pounce", "Dig", "Cute Pose"), level=5,
                     workability=85, special_skill="Mining"),
    CreatureTemplate(name="Voltail", type_label="Electric", element="electric", max_hp=19,
                     moves=("Spark", "Thunder Fang", "Static Charge"), level=5,
                     workability=75, special_skill="Power Generation"),
    CreatureTemplate(name="Duskmoth", type_label="Dark", element="dark", max_hp=21,
                     moves=("Bite", "Shadow Veil", "Night Slash"), level=5),
)

STARTER_COUNT = 3

_BY_NAME: Dict[str, CreatureTemplate] = {t.name.lower(): t for t in TEMPLATES}

def get_template(name: str) -> CreatureTemplate:
    try:
        return _BY_NAME[name.lower()]
    except KeyError:
        raise UnknownTemplateError(name) from None

def all_templates() -> Tuple[CreatureTemplate, ...]:
    return TEMPLATES

def starter_templates() -> Tuple[CreatureTemplate, ...]:
    return TEMPLATES[:STARTER_COUNT]

def random_template(rng: random.Random) -> CreatureTemplate:
    return rng.choice(TEMPLATES)

def random_starter(rng: random.Random) -> CreatureTemplate:
    return rng.choice(starter_templates())

__all__ = ["TEMPLATES","get_template","all_templates","starter_templates","random_template","random_starter"]
