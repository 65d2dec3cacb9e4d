"""
combat_system.py – Projectile vs character collision resolution.

Responsibilities:
- Player projectiles against every enemy
- Enemy projectiles against the player
- Damage application, kill counting and bounty payout
- Respawning defeated enemies
- Reporting player death to the session

A hit is registered when the projectile centre lies strictly inside the
target's circle; the projectile's own size is ignored.  A projectile is
consumed by the first character it hits.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

from settings import KILL_BOUNTY
from entities.arena import Arena
from entities.character import Character
from entities.enemy import Enemy
from entities.player import Player
from systems.projectile_system import ProjectileSystem, Projectile, Faction
from systems.spawn_system import respawn_enemy
from utils.geometry import point_in_circle


@dataclass
class HitEvent:
    """One projectile landing on one character."""
    target: Character
    damage: float
    killed: bool = False


@dataclass
class CombatResult:
    """Encapsulates a frame's collisions for the game loop to react."""
    hits: list[HitEvent] = field(default_factory=list)
    kills: int = 0
    bounty: float = 0.0
    player_died: bool = False

    @property
    def damage_to_player(self) -> float:
        return sum(h.damage for h in self.hits if isinstance(h.target, Player))

    @property
    def damage_to_enemies(self) -> float:
        return sum(h.damage for h in self.hits if isinstance(h.target, Enemy))


class CombatSystem:
    """Central collision resolver."""

    def __init__(self, bounty: float = KILL_BOUNTY):
        self.bounty = bounty

    def resolve(self, projectiles: ProjectileSystem, player: Player,
                enemies: list[Enemy], arena: Arena,
                rng: random.Random) -> CombatResult:
        """Test every live projectile against the opposing faction."""
        result = CombatResult()
        for proj in projectiles:
            if not proj.active:
                continue
            if proj.faction is Faction.PLAYER:
                self._player_shot(proj, player, enemies, arena, rng, result)
            else:
                self._enemy_shot(proj, player, result)
                if result.player_died:
                    # Match is over; nothing after this frame matters
                    break
        return result

    # ── Player → Enemy ────────────────────────────────────

    def _player_shot(self, proj: Projectile, player: Player,
                     enemies: list[Enemy], arena: Arena,
                     rng: random.Random, result: CombatResult):
        for enemy in enemies:
            if not point_in_circle(proj.x, proj.y, enemy.x, enemy.y, enemy.radius):
                continue
            killed = enemy.take_damage(proj.damage)
            proj.consume()
            result.hits.append(HitEvent(enemy, proj.damage, killed))
            logger.debug("Projectile hit enemy %s for %.1f", enemy.archetype_id, proj.damage)
            if killed:
                result.kills += 1
                result.bounty += self.bounty
                player.gold += self.bounty
                logger.info("Enemy %s defeated (+%d gold)", enemy.archetype_id, self.bounty)
                respawn_enemy(enemy, arena, rng)
            break

    # ── Enemy → Player ────────────────────────────────────

    def _enemy_shot(self, proj: Projectile, player: Player, result: CombatResult):
        if not point_in_circle(proj.x, proj.y, player.x, player.y, player.radius):
            return
        killed = player.take_damage(proj.damage)
        proj.consume()
        result.hits.append(HitEvent(player, proj.damage, killed))
        logger.debug("Projectile hit player for %.1f (hp=%.1f)", proj.damage, player.health)
        if killed:
            result.player_died = True
            logger.info("Player defeated")
