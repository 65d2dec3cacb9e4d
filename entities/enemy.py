"""
enemy.py – AI-controlled opponent.

Enemies are weaker copies of an archetype: 40% of its speed and 20%
of its attack damage, full health.  A defeated enemy is never removed;
it is respawned at a new edge position with full health.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

from settings import ENEMY_RADIUS, ENEMY_SPEED_FACTOR, ENEMY_DAMAGE_FACTOR
from entities.archetypes import Archetype
from entities.character import Character


class Enemy(Character):
    """Enemy built from an archetype; driven by ai.pursuit."""

    def __init__(self, x: float, y: float, max_health: float, speed: float,
                 attack_damage: float, skin: str = "",
                 color: tuple[int, int, int] = (255, 255, 255),
                 archetype_id: str = ""):
        super().__init__(
            x=x, y=y, radius=ENEMY_RADIUS,
            max_health=max_health, speed=speed, attack_damage=attack_damage,
            skin=skin, color=color,
        )
        self.archetype_id = archetype_id

    @classmethod
    def from_archetype(cls, archetype: Archetype,
                       x: float, y: float) -> "Enemy":
        stats = archetype.stats
        return cls(
            x=x, y=y,
            max_health=stats.max_health,
            speed=stats.speed * ENEMY_SPEED_FACTOR,
            attack_damage=stats.attack_damage * ENEMY_DAMAGE_FACTOR,
            skin=archetype.skins[0],
            color=archetype.color,
            archetype_id=archetype.id,
        )

    def respawn(self, x: float, y: float):
        """Restore full health and move to (x, y)."""
        self.health = self.max_health
        self.x = x
        self.y = y
        logger.info("Enemy %s respawned at (%.0f, %.0f)", self.archetype_id, x, y)
