"""
input_state.py – Polled input snapshot fed to the simulation.

The simulation never listens to events.  Once per frame the game loop
asks every input source for its current intents and ORs them into one
``InputSnapshot``:

- keyboard     – both keybind sets (WASD/arrows, Space)
- TouchControls – on-screen buttons for narrow windows
- PointerTracker – last known mouse position over the arena (aim)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pygame

logger = logging.getLogger(__name__)

from settings import (
    TOUCH_BUTTON_SIZE, TOUCH_BUTTON_PAD, MOBILE_CONTROLS_MAX_WIDTH,
)
from keybinds import keys_for

DIRECTIONS = ("up", "down", "left", "right")


@dataclass(frozen=True)
class InputSnapshot:
    """Boolean intents for one frame plus an optional aim point."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    attack: bool = False
    pointer: tuple[float, float] | None = None

    @property
    def move_vector(self) -> tuple[float, float]:
        """Raw (unnormalised) intent vector, each axis in {-1, 0, 1}."""
        mx = (1.0 if self.right else 0.0) - (1.0 if self.left else 0.0)
        my = (1.0 if self.down else 0.0) - (1.0 if self.up else 0.0)
        return mx, my

    def merged(self, other: "InputSnapshot") -> "InputSnapshot":
        """Logical OR of two sources.  The first non-empty pointer wins."""
        return InputSnapshot(
            up=self.up or other.up,
            down=self.down or other.down,
            left=self.left or other.left,
            right=self.right or other.right,
            attack=self.attack or other.attack,
            pointer=self.pointer if self.pointer is not None else other.pointer,
        )


IDLE = InputSnapshot()


def combine(*snapshots: InputSnapshot) -> InputSnapshot:
    """OR any number of input sources together."""
    result = IDLE
    for snap in snapshots:
        result = result.merged(snap)
    return result


def keyboard_snapshot(pressed) -> InputSnapshot:
    """Read intents from a ``pygame.key.get_pressed()``-style mapping."""

    def held(action: str) -> bool:
        return any(pressed[k] for k in keys_for(action))

    return InputSnapshot(
        up=held("move_up"),
        down=held("move_down"),
        left=held("move_left"),
        right=held("move_right"),
        attack=held("attack"),
    )


# ══════════════════════════════════════════════════════════
#  Pointer tracking
# ══════════════════════════════════════════════════════════

class PointerTracker:
    """Remembers the last pointer position over the arena."""

    def __init__(self):
        self.position: tuple[float, float] | None = None

    def on_move(self, pos: tuple[float, float], playing: bool):
        # Only recorded while a match is running
        if not playing:
            return
        self.position = (float(pos[0]), float(pos[1]))

    def on_leave(self):
        self.position = None

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(pointer=self.position)


# ══════════════════════════════════════════════════════════
#  On-screen touch buttons
# ══════════════════════════════════════════════════════════

class TouchControls:
    """Up/down/left/right/attack buttons for small screens.

    A button is held from pointer-down until pointer-up, or until the
    pointer leaves it.
    """

    BUTTONS = DIRECTIONS + ("attack",)

    def __init__(self, width: int, height: int):
        self.state: dict[str, bool] = {name: False for name in self.BUTTONS}
        self.rects: dict[str, pygame.Rect] = {}
        self._held_button: str | None = None
        self.layout(width, height)

    @staticmethod
    def wanted_for(width: int) -> bool:
        return width < MOBILE_CONTROLS_MAX_WIDTH

    def layout(self, width: int, height: int):
        """Place the D-pad bottom-left and the attack button bottom-right."""
        s = TOUCH_BUTTON_SIZE
        p = TOUCH_BUTTON_PAD
        base_x = p + s
        base_y = height - p - 2 * s
        self.rects = {
            "up":     pygame.Rect(base_x, base_y - s, s, s),
            "down":   pygame.Rect(base_x, base_y + s, s, s),
            "left":   pygame.Rect(base_x - s, base_y, s, s),
            "right":  pygame.Rect(base_x + s, base_y, s, s),
            "attack": pygame.Rect(width - p - int(s * 1.5), base_y - s // 2,
                                  int(s * 1.5), int(s * 1.5)),
        }

    def button_at(self, pos) -> str | None:
        for name, rect in self.rects.items():
            if rect.collidepoint(pos):
                return name
        return None

    def on_pointer_down(self, pos) -> bool:
        """Press the button under *pos*.  Returns True if one was hit."""
        name = self.button_at(pos)
        if name is None:
            return False
        self.state[name] = True
        self._held_button = name
        return True

    def on_pointer_up(self, pos=None):
        if self._held_button is not None:
            self.state[self._held_button] = False
            self._held_button = None

    def on_pointer_move(self, pos):
        # Sliding off a held button releases it
        if self._held_button is None:
            return
        if not self.rects[self._held_button].collidepoint(pos):
            self.on_pointer_up()

    def release_all(self):
        for name in self.state:
            self.state[name] = False
        self._held_button = None

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(**self.state)
