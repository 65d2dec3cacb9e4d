"""
movement_system.py – Player movement, manual attack and passive income.

All functions mutate the entities they are given and return what they
produced; none of them keep state between frames.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

from settings import (
    PLAYER_MOVE_SCALE, PLAYER_ATTACK_COOLDOWN,
    PLAYER_AIM_FALLBACK_DY, GOLD_PER_SECOND,
)
from entities.arena import Arena
from entities.player import Player
from systems.input_state import InputSnapshot
from systems.projectile_system import ProjectileSystem, Projectile, Faction
from utils.geometry import clamp, normalize


def accrue_gold(player: Player, dt: float) -> float:
    """Credit passive income for *dt* seconds.  Returns the amount added."""
    earned = GOLD_PER_SECOND * dt
    player.gold += earned
    return earned


def clamp_to_arena(player: Player, arena: Arena):
    r = player.radius
    player.x = clamp(player.x, r, arena.width - r)
    player.y = clamp(player.y, r, arena.height - r)


def move_player(player: Player, inputs: InputSnapshot, dt: float, arena: Arena):
    """Step the player along the normalised intent vector, then clamp."""
    nx, ny = normalize(*inputs.move_vector)
    if nx or ny:
        step = player.speed * PLAYER_MOVE_SCALE * dt
        player.x += nx * step
        player.y += ny * step
    clamp_to_arena(player, arena)


def player_aim_target(player: Player,
                      pointer: tuple[float, float] | None) -> tuple[float, float]:
    """Aim at the pointer if we have one, otherwise straight up."""
    if pointer is not None:
        return pointer
    return player.x, player.y + PLAYER_AIM_FALLBACK_DY


def resolve_player_attack(player: Player, inputs: InputSnapshot, dt: float,
                          projectiles: ProjectileSystem) -> Projectile | None:
    """Fire if attack is held and the cooldown has run out.

    The cooldown is reset on fire and then counted down by *dt* in the
    same frame, whether or not a shot was fired.
    """
    shot = None
    if inputs.attack and player.can_fire:
        tx, ty = player_aim_target(player, inputs.pointer)
        shot = projectiles.fire(player, tx, ty, Faction.PLAYER)
        player.attack_cooldown = PLAYER_ATTACK_COOLDOWN
    player.tick_cooldown(dt)
    return shot
