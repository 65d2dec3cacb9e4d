"""arena.py – Play-field bounds supplied by the window at call time."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Arena:
    """Width/height of the play surface in pixels.

    Bounds may change between frames (window resize); every step reads
    them when it runs instead of caching them.
    """
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2
