"""
keybinds.py – Rebindable keybinding system with JSON persistence.

Provides two binding sets that are read together (a direction is held
when either set's key for it is down):
- PRIMARY_KEYS:   WASD + Space
- ALTERNATE_KEYS: Arrow keys + Space

Each set maps action names → pygame key constants. Actions:
    move_up, move_down, move_left, move_right, attack, shop

Usage:
    from keybinds import PRIMARY_KEYS, ALTERNATE_KEYS
    if pressed[PRIMARY_KEYS["move_left"]] or pressed[ALTERNATE_KEYS["move_left"]]:
        ...

Persistence:
    save_keybinds()   – write current bindings to controls.json
    load_keybinds()   – load from controls.json (called on import)
    reset_keybinds()  – restore factory defaults
"""

from __future__ import annotations

import json
import logging
import os

import pygame

logger = logging.getLogger(__name__)

# ══════════════════════════════════════════════════════════
#  Path to persistence file
# ══════════════════════════════════════════════════════════

_CONTROLS_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    "controls.json",
)

# ══════════════════════════════════════════════════════════
#  Canonical action list (shared by all binding sets)
# ══════════════════════════════════════════════════════════

ACTIONS: list[str] = [
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "attack",
    "shop",
]

# ══════════════════════════════════════════════════════════
#  Default bindings (factory settings)
# ══════════════════════════════════════════════════════════

_DEFAULT_PRIMARY: dict[str, int] = {
    "move_up":    pygame.K_w,
    "move_down":  pygame.K_s,
    "move_left":  pygame.K_a,
    "move_right": pygame.K_d,
    "attack":     pygame.K_SPACE,
    "shop":       pygame.K_b,
}

_DEFAULT_ALTERNATE: dict[str, int] = {
    "move_up":    pygame.K_UP,
    "move_down":  pygame.K_DOWN,
    "move_left":  pygame.K_LEFT,
    "move_right": pygame.K_RIGHT,
    "attack":     pygame.K_SPACE,
    "shop":       pygame.K_TAB,
}

# ══════════════════════════════════════════════════════════
#  Live binding dictionaries (mutated at runtime)
# ══════════════════════════════════════════════════════════

PRIMARY_KEYS: dict[str, int] = dict(_DEFAULT_PRIMARY)
ALTERNATE_KEYS: dict[str, int] = dict(_DEFAULT_ALTERNATE)

_SECTIONS = (
    ("primary", PRIMARY_KEYS, _DEFAULT_PRIMARY),
    ("alternate", ALTERNATE_KEYS, _DEFAULT_ALTERNATE),
)


def keys_for(action: str) -> tuple[int, ...]:
    """Every key currently bound to *action*, across both sets."""
    return tuple({PRIMARY_KEYS[action], ALTERNATE_KEYS[action]})


# ══════════════════════════════════════════════════════════
#  Persistence helpers
# ══════════════════════════════════════════════════════════

def save_keybinds(path: str = _CONTROLS_PATH) -> None:
    """Write both binding sets to *path* as JSON."""
    payload = {name: dict(live) for name, live, _ in _SECTIONS}
    try:
        with open(path, "w", encoding="utf-8") as fp:
            json.dump(payload, fp, indent=2)
        logger.info("Keybinds saved to %s", path)
    except OSError as exc:
        logger.error("Could not write bindings to %s: %s", path, exc)


def load_keybinds(path: str = _CONTROLS_PATH) -> None:
    """Replace the live bindings with those stored at *path*.

    Each action is read on its own: a missing or non-integer entry
    falls back to the factory key for that action only.  An unreadable
    file leaves the current bindings untouched.
    """
    if not os.path.exists(path):
        logger.debug("No saved bindings at %s", path)
        return

    try:
        with open(path, "r", encoding="utf-8") as fp:
            data = json.load(fp)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable bindings file %s (%s)", path, exc)
        return

    for section, live, defaults in _SECTIONS:
        raw = data.get(section, {})
        for action in ACTIONS:
            try:
                live[action] = int(raw[action])
            except (KeyError, TypeError, ValueError):
                live[action] = defaults[action]
        for first, later, key in find_conflicts(live):
            logger.warning("%s binding: %s and %s both use %s",
                           section, first, later, key)
    logger.info("Keybinds loaded from %s", path)


def reset_keybinds(path: str = _CONTROLS_PATH) -> None:
    """Put every action back on its factory key and persist that."""
    PRIMARY_KEYS.update(_DEFAULT_PRIMARY)
    ALTERNATE_KEYS.update(_DEFAULT_ALTERNATE)
    save_keybinds(path)
    logger.info("Bindings restored to factory keys")


# ══════════════════════════════════════════════════════════
#  Duplicate-key checks
# ══════════════════════════════════════════════════════════

def find_conflicts(bindings: dict[str, int]) -> list[tuple[str, str, int]]:
    """Pairs of actions sharing a key inside one binding set, as
    (first_action, later_action, key) in action order."""
    owner: dict[int, str] = {}
    clashes = []
    for action in (a for a in ACTIONS if a in bindings):
        key = bindings[action]
        first = owner.setdefault(key, action)
        if first != action:
            clashes.append((first, action, key))
    return clashes


def key_name(key_code: int) -> str:
    """Upper-case label for a key, as shown in HUD hints."""
    return pygame.key.name(key_code).upper()


def shop_key_label() -> str:
    """Label of the primary shop key, used by every shop hint."""
    return key_name(PRIMARY_KEYS["shop"])


# ══════════════════════════════════════════════════════════
#  Load saved bindings at import time
# ══════════════════════════════════════════════════════════

load_keybinds()
