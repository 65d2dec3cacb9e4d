"""
projectile_system.py – Ballistic projectile system.

Handles:
- Projectile creation aimed at a target point
- Straight-line movement and lifetime ageing
- Culling of expired / out-of-bounds projectiles

Collision against characters lives in combat_system.py; this module
only owns the projectile collection.
"""

from __future__ import annotations

import enum
import logging
import math

logger = logging.getLogger(__name__)

from settings import (
    PROJECTILE_SPEED, PROJECTILE_LIFETIME, PROJECTILE_CULL_MARGIN,
)
from entities.arena import Arena


class Faction(enum.Enum):
    """Who fired a projectile; decides what it may hit."""
    PLAYER = "player"
    ENEMY = "enemy"


class Projectile:
    """A single projectile.

    Attributes
    ----------
    x, y     : float   – centre position
    vx, vy   : float   – velocity in pixels/sec
    damage   : float   – snapshot of the firer's attack damage
    life     : float   – seconds left before expiry
    faction  : Faction – owner side
    """

    __slots__ = ("x", "y", "vx", "vy", "damage", "life", "faction")

    def __init__(self, x: float, y: float, vx: float, vy: float,
                 damage: float, faction: Faction,
                 life: float = PROJECTILE_LIFETIME):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.damage = damage
        self.life = life
        self.faction = faction

    @property
    def active(self) -> bool:
        return self.life > 0

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    def update(self, dt: float):
        """Move and age the projectile."""
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.life -= dt

    def consume(self):
        """Mark as spent after a hit; removed on the next cull."""
        self.life = 0.0

    def in_bounds(self, arena: Arena, margin: float = PROJECTILE_CULL_MARGIN) -> bool:
        return (-margin < self.x < arena.width + margin
                and -margin < self.y < arena.height + margin)

    def __repr__(self) -> str:
        return (f"Projectile({self.faction.value}, x={self.x:.1f}, y={self.y:.1f}, "
                f"dmg={self.damage}, life={self.life:.2f})")


class ProjectileSystem:
    """Manages all active projectiles.

    Call ``advance(dt)`` then ``cull(arena)`` each frame.
    Use ``spawn_at`` to create projectiles.
    """

    def __init__(self):
        self._projectiles: list[Projectile] = []

    @property
    def projectiles(self) -> list[Projectile]:
        return self._projectiles

    def __len__(self) -> int:
        return len(self._projectiles)

    def __iter__(self):
        return iter(self._projectiles)

    # ── Spawners ──────────────────────────────────────────

    def spawn_at(self, x: float, y: float,
                 target_x: float, target_y: float,
                 damage: float, faction: Faction,
                 speed: float = PROJECTILE_SPEED) -> Projectile:
        """Spawn a projectile at (x, y) aimed at (target_x, target_y).

        A target sitting exactly on the origin has no direction; the
        shot then goes straight up.
        """
        dx = target_x - x
        dy = target_y - y
        dist = math.hypot(dx, dy)
        if dist == 0:
            dx, dy, dist = 0.0, -1.0, 1.0
        vx = (dx / dist) * speed
        vy = (dy / dist) * speed
        proj = Projectile(x, y, vx, vy, damage=damage, faction=faction)
        self._projectiles.append(proj)
        logger.debug("%s projectile spawned at (%.0f,%.0f) → (%.0f,%.0f)",
                     faction.value, x, y, target_x, target_y)
        return proj

    def fire(self, owner, target_x: float, target_y: float,
             faction: Faction) -> Projectile:
        """Fire from *owner*'s position using its current attack damage."""
        return self.spawn_at(owner.x, owner.y, target_x, target_y,
                             damage=owner.attack_damage, faction=faction)

    # ── Per-frame ─────────────────────────────────────────

    def advance(self, dt: float):
        """Move and age every projectile."""
        for p in self._projectiles:
            p.update(dt)

    def cull(self, arena: Arena) -> int:
        """Drop expired and out-of-bounds projectiles.  Returns how many went."""
        before = len(self._projectiles)
        self._projectiles = [
            p for p in self._projectiles if p.active and p.in_bounds(arena)
        ]
        return before - len(self._projectiles)
