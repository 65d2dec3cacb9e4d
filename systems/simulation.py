"""
simulation.py – One frame of the arena simulation.

``Simulation.tick(ctx, dt, inputs)`` runs, in this order:

  1. passive gold
  2. player movement + manual attack
  3. projectile movement
  4. projectile culling
  5. enemy AI
  6. projectile collisions
  7. HUD state

The simulation never schedules itself; an outer driver (the pygame
loop or the headless runner) calls ``tick`` once per frame.  All state
lives in a ``SimulationContext``.
"""

from __future__ import annotations

import enum
import logging
import math
import random
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

from entities.arena import Arena
from entities.enemy import Enemy
from entities.player import Player
from systems.input_state import InputSnapshot
from systems.projectile_system import ProjectileSystem
from systems.movement_system import accrue_gold, move_player, resolve_player_attack
from systems.combat_system import CombatSystem, CombatResult
from ai.pursuit import PursuitController


class GamePhase(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameover"


@dataclass
class SimulationContext:
    """Everything the simulation reads and writes."""
    player: Player
    enemies: list[Enemy]
    arena: Arena
    projectiles: ProjectileSystem = field(default_factory=ProjectileSystem)
    rng: random.Random = field(default_factory=random.Random)
    phase: GamePhase = GamePhase.PLAYING
    kills: int = 0
    gold_timer: float = 0.0


@dataclass(frozen=True)
class HudState:
    """What the HUD shows after a frame."""
    health_fraction: float
    gold: int
    kills: int

    @classmethod
    def from_context(cls, ctx: SimulationContext) -> "HudState":
        player = ctx.player
        # Raw health may be negative on the killing frame; the bar never is
        frac = max(0.0, min(1.0, player.health / player.max_health))
        return cls(health_fraction=frac, gold=math.floor(player.gold), kills=ctx.kills)


@dataclass
class FrameResult:
    """Outcome of one ``tick``."""
    simulated: bool
    hud: HudState
    dt: float = 0.0
    gold_earned: float = 0.0
    player_shots: int = 0
    enemy_shots: int = 0
    culled: int = 0
    combat: CombatResult = field(default_factory=CombatResult)

    @property
    def player_died(self) -> bool:
        return self.combat.player_died


class Simulation:
    """Orchestrates the per-frame steps over a SimulationContext."""

    def __init__(self, ai: PursuitController | None = None,
                 combat: CombatSystem | None = None):
        self.ai = ai or PursuitController()
        self.combat = combat or CombatSystem()

    def tick(self, ctx: SimulationContext, dt: float,
             inputs: InputSnapshot) -> FrameResult:
        if ctx.phase is not GamePhase.PLAYING:
            return FrameResult(simulated=False, hud=HudState.from_context(ctx))

        player = ctx.player

        # 1. Passive income
        earned = accrue_gold(player, dt)
        ctx.gold_timer += dt

        # 2. Player
        move_player(player, inputs, dt, ctx.arena)
        shot = resolve_player_attack(player, inputs, dt, ctx.projectiles)

        # 3-4. Projectiles
        ctx.projectiles.advance(dt)
        culled = ctx.projectiles.cull(ctx.arena)

        # 5. Enemies
        enemy_shots = self.ai.update_all(ctx.enemies, player, ctx.projectiles, dt)

        # 6. Collisions
        combat = self.combat.resolve(ctx.projectiles, player, ctx.enemies,
                                     ctx.arena, ctx.rng)
        ctx.kills += combat.kills
        if combat.player_died:
            ctx.phase = GamePhase.GAME_OVER

        # 7. HUD
        return FrameResult(
            simulated=True,
            hud=HudState.from_context(ctx),
            dt=dt,
            gold_earned=earned + combat.bounty,
            player_shots=1 if shot is not None else 0,
            enemy_shots=len(enemy_shots),
            culled=culled,
            combat=combat,
        )
