"""
spawn_system.py – Edge spawning for enemies.

Enemies enter from a random side of the arena, SPAWN_MARGIN pixels
outside it, at a uniformly random point along that side.
"""

from __future__ import annotations

import logging
import random

logger = logging.getLogger(__name__)

from settings import SPAWN_MARGIN, ENEMY_COUNT
from entities.arena import Arena
from entities.archetypes import Archetype
from entities.enemy import Enemy

# Side indices match the order used by random_edge_position
TOP, BOTTOM, LEFT, RIGHT = range(4)


def random_edge_position(arena: Arena, rng: random.Random,
                         margin: float = SPAWN_MARGIN) -> tuple[float, float]:
    """Pick a point just outside a random edge of *arena*."""
    side = rng.randrange(4)
    if side == TOP:
        return rng.random() * arena.width, -margin
    if side == BOTTOM:
        return rng.random() * arena.width, arena.height + margin
    if side == LEFT:
        return -margin, rng.random() * arena.height
    return arena.width + margin, rng.random() * arena.height


def spawn_enemies(opponents: list[Archetype], arena: Arena,
                  rng: random.Random, count: int = ENEMY_COUNT) -> list[Enemy]:
    """Create *count* enemies, cycling through the *opponents* archetypes."""
    enemies: list[Enemy] = []
    for i in range(count):
        archetype = opponents[i % len(opponents)]
        x, y = random_edge_position(arena, rng)
        enemies.append(Enemy.from_archetype(archetype, x, y))
        logger.info("Spawned enemy %s at (%.0f, %.0f)", archetype.id, x, y)
    return enemies


def respawn_enemy(enemy: Enemy, arena: Arena, rng: random.Random):
    """Bring a defeated enemy back at full health on a random edge."""
    x, y = random_edge_position(arena, rng)
    enemy.respawn(x, y)
