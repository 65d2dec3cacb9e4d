"""
pursuit.py – Enemy AI: chase the player and shoot when in range.

Every frame each enemy:
  1. measures the distance to the player,
  2. steps straight toward the player (no steering or separation),
  3. fires at the player's current position if the distance measured
     in (1) is inside the engagement range and its cooldown is spent,
  4. counts its cooldown down.

There is no line-of-sight test; range is the only gate.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

from settings import ENEMY_MOVE_SCALE, ENEMY_ENGAGE_RANGE, ENEMY_ATTACK_COOLDOWN
from entities.enemy import Enemy
from entities.player import Player
from systems.projectile_system import ProjectileSystem, Projectile, Faction


class PursuitController:
    """Drives every enemy with the same pursue-and-shoot behaviour."""

    def __init__(self, move_scale: float = ENEMY_MOVE_SCALE,
                 engage_range: float = ENEMY_ENGAGE_RANGE,
                 attack_cooldown: float = ENEMY_ATTACK_COOLDOWN):
        self.move_scale = move_scale
        self.engage_range = engage_range
        self.attack_cooldown = attack_cooldown

    def update(self, enemy: Enemy, player: Player,
               projectiles: ProjectileSystem, dt: float) -> Projectile | None:
        """Run one frame for one enemy.  Returns the projectile fired, if any."""
        dx = player.x - enemy.x
        dy = player.y - enemy.y
        dist = math.hypot(dx, dy)
        if dist > 0:
            step = enemy.speed * self.move_scale * dt
            enemy.x += (dx / dist) * step
            enemy.y += (dy / dist) * step

        shot = None
        if dist < self.engage_range and enemy.can_fire:
            shot = projectiles.fire(enemy, player.x, player.y, Faction.ENEMY)
            enemy.attack_cooldown = self.attack_cooldown
            logger.debug("Enemy %s fired from %.0f px", enemy.archetype_id, dist)
        enemy.tick_cooldown(dt)
        return shot

    def update_all(self, enemies: list[Enemy], player: Player,
                   projectiles: ProjectileSystem, dt: float) -> list[Projectile]:
        shots: list[Projectile] = []
        for enemy in enemies:
            shot = self.update(enemy, player, projectiles, dt)
            if shot is not None:
                shots.append(shot)
        return shots
