"""
Key input abstraction: arrows / WASD move, Z / Enter / Space is A, X / Esc / Backspace is B, Q quits.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import sys

QUIT = "quit"

_CHAR_MAP = {
    "w": "up", "s": "down", "a": "left", "d": "right",
    "z": "a", "\r": "a", "\n": "a", " ": "a",
    "x": "b", "\x1b": "b", "\x7f": "b", "\x08": "b",
    "q": QUIT,
}

_ARROWS = {"A": "up", "B": "down", "C": "right", "D": "left"}
_WIN_ARROWS = {b"H": "up", b"P": "down", b"K": "left", b"M": "right"}

@dataclass
class KeyEvent:
    command: Optional[str]   # a button name, QUIT, or None for unmapped keys
    raw: str | bytes | None = None

def translate(ch: str) -> Optional[str]:
    if ch in _CHAR_MAP:
        return _CHAR_MAP[ch]
    return _CHAR_MAP.get(ch.lower())

def _win_read() -> KeyEvent:
    import msvcrt
    ch = msvcrt.getch()
    # Arrow keys: first byte is 0xe0 or 0x00 then second is code
    if ch in (b"\x00", b"\xe0"):
        nxt = msvcrt.getch()
        return KeyEvent(_WIN_ARROWS.get(nxt), ch + nxt)
    return KeyEvent(translate(ch.decode(errors="ignore")), ch)

def _unix_read() -> KeyEvent:
    import termios, tty
    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch == "\x1b":  # possible escape sequence
            import select
            ready, _, _ = select.select([sys.stdin], [], [], 0.01)
            if not ready:
                return KeyEvent("b", ch)
            seq = sys.stdin.read(1)
            if seq == "[":
                seq2 = sys.stdin.read(1)
                return KeyEvent(_ARROWS.get(seq2), "\x1b[" + seq2)
            return KeyEvent("b", ch)
        return KeyEvent(translate(ch), ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)

def read_key() -> KeyEvent:
    if sys.platform.startswith("win"):
        return _win_read()
    if not sys.stdin.isatty():
        # Piped input: one command per line
        line = sys.stdin.readline()
        if not line:
            return KeyEvent(QUIT, line)
        word = line.strip().lower()
        if word in {"up", "down", "left", "right", "a", "b", QUIT}:
            return KeyEvent(word, line)
        return KeyEvent(translate(word[:1]) if word else "a", line)
    return _unix_read()
