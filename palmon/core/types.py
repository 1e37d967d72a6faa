"""Global element metadata: colors & abbreviations.

Provides:
  ELEMENTS: the six elemental categories
  ELEMENT_COLORS_HEX: mapping element -> hex color string (#RRGGBB)
  ELEMENT_ABBREVIATIONS: mapping element -> 3-letter abbreviation (upper)
  helpers producing rich markup with a plain fallback for creatures without an element.
"""
from __future__ import annotations
from typing import Dict, Literal, Optional, Tuple

Element = Literal["fire", "water", "grass", "electric", "dark", "neutral"]

ELEMENTS: Tuple[str, ...] = ("fire", "water", "grass", "electric", "dark", "neutral")

ELEMENT_COLORS_HEX: Dict[str, str] = {
    "fire": "#EE8130",
    "water": "#6390F0",
    "grass": "#7AC74C",
    "electric": "#F7D02C",
    "dark": "#705746",
    "neutral": "#A8A77A",
}

ELEMENT_ABBREVIATIONS: Dict[str, str] = {
    "fire": "FIR",
    "water": "WTR",
    "grass": "GRS",
    "electric": "ELE",
    "dark": "DRK",
    "neutral": "NEU",
}

def element_abbreviation(element: Optional[str]) -> str:
    if not element:
        return "---"
    return ELEMENT_ABBREVIATIONS.get(element.lower(), element[:3].upper())

def element_markup(element: Optional[str], text: str) -> str:
    """Wrap text in rich color markup for the element, if it has a color."""
    hex_val = ELEMENT_COLORS_HEX.get((element or "").lower())
    if not hex_val:
        return text
    return f"[{hex_val}]{text}[/{hex_val}]"

__all__ = [
    'Element','ELEMENTS','ELEMENT_COLORS_HEX','ELEMENT_ABBREVIATIONS',
    'element_abbreviation','element_markup'
]
