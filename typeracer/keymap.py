"""Translate key presses into game actions.

Key names follow ``pygame.key.name()``: ``"a"``, ``"backspace"``, ``"-"``,
``"[1]"`` for keypad keys, and so on.
"""
from __future__ import annotations

import string
from dataclasses import dataclass

from typeracer.economy import POWER_UPS

APPEND = "append"
BACKSPACE = "backspace"
PURCHASE = "purchase"
VOLUME_UP = "volume_up"
VOLUME_DOWN = "volume_down"
TOGGLE_INFO = "toggle_info"
QUIT = "quit"
RESTART = "restart"

# key name -> (unshifted, shifted)
LETTER_KEYS: dict[str, tuple[str, str]] = {
    ch: (ch, ch.upper()) for ch in string.ascii_lowercase
}

HYPHEN_KEY = "-"

TYPEABLE = frozenset(
    [c for pair in LETTER_KEYS.values() for c in pair] + [HYPHEN_KEY]
)

# Plain keys that do the same thing with or without shift.
_FIXED_KEYS: dict[str, tuple[str, str | None]] = {
    "backspace": (BACKSPACE, None),
    "=": (VOLUME_UP, None),
    "+": (VOLUME_UP, None),
    "[+]": (VOLUME_UP, None),
    "[-]": (VOLUME_DOWN, None),
    "`": (TOGGLE_INFO, None),
    "escape": (QUIT, None),
    "return": (RESTART, None),
    "enter": (RESTART, None),
}
for _defn in POWER_UPS.values():
    _FIXED_KEYS[_defn.key] = (PURCHASE, _defn.name)
    _FIXED_KEYS[f"[{_defn.key}]"] = (PURCHASE, _defn.name)


@dataclass(frozen=True)
class KeyAction:
    kind: str
    value: str | None = None


def translate(key_name: str, shift: bool = False) -> KeyAction | None:
    """Map one key press to an action, or None for keys the game ignores."""
    pair = LETTER_KEYS.get(key_name)
    if pair is not None:
        return KeyAction(APPEND, pair[1] if shift else pair[0])
    if key_name == HYPHEN_KEY:
        return KeyAction(APPEND, HYPHEN_KEY)
    fixed = _FIXED_KEYS.get(key_name)
    if fixed is None:
        return None
    return KeyAction(*fixed)


def is_typeable(text: str) -> bool:
    """True if every character of *text* can be produced by the keymap."""
    return bool(text) and all(c in TYPEABLE for c in text)
