"""
game_state.py – Match lifecycle: menu → playing → gameover.

GameSession owns the simulation context, the frame clock and the match
statistics.  The pygame loop (main.py) and the headless runner
(ai/simulation_runner.py) both drive a session; neither touches the
entities directly except to read them for drawing.

There is no way back from gameover: to play again, build a new session.
"""

from __future__ import annotations

import logging
import random

logger = logging.getLogger(__name__)

from settings import ENEMY_COUNT
from entities.arena import Arena
from entities.archetypes import ARCHETYPES, Archetype, get_archetype, opponents_for
from entities.player import Player
from systems.input_state import InputSnapshot
from systems.projectile_system import ProjectileSystem
from systems.shop_system import get_item, purchase
from systems.simulation import (
    GamePhase, Simulation, SimulationContext, FrameResult, HudState,
)
from systems.spawn_system import spawn_enemies
from ai.stats import MatchStats


class GameStateError(RuntimeError):
    """Raised when the session is asked to do something its phase forbids."""


# ══════════════════════════════════════════════════════════
#  Frame clock
# ══════════════════════════════════════════════════════════

class FrameClock:
    """Turns frame timestamps (ms) into deltas (s) and gates on a running flag.

    Pausing simply clears the flag; resuming resets the baseline to the
    resume time so the paused interval is never simulated.
    """

    def __init__(self):
        self.running = False
        self._last_ms: float | None = None

    def start(self, now_ms: float):
        self.running = True
        self._last_ms = now_ms

    def stop(self):
        self.running = False

    def resume(self, now_ms: float):
        self.start(now_ms)

    def advance(self, now_ms: float) -> float | None:
        """Delta in seconds since the previous frame, or None while stopped."""
        if not self.running:
            return None
        last = now_ms if self._last_ms is None else self._last_ms
        self._last_ms = now_ms
        return max(0.0, (now_ms - last) / 1000.0)


# ══════════════════════════════════════════════════════════
#  Session
# ══════════════════════════════════════════════════════════

class GameSession:
    """One run of the game from hero selection to defeat."""

    def __init__(self, arena: Arena, seed: int | None = None,
                 enemy_count: int = ENEMY_COUNT,
                 chart_file: str | None = None):
        self.arena = arena
        self.rng = random.Random(seed)
        self.enemy_count = enemy_count
        self.chart_file = chart_file

        self.selected_index: int | None = None
        self.skin_index = 0

        self.simulation = Simulation()
        self.clock = FrameClock()
        self.ctx: SimulationContext | None = None
        self.stats: MatchStats | None = None

        self.shop_open = False
        self.outcome_message = ""

    # ── Queries ───────────────────────────────────────────

    @property
    def phase(self) -> GamePhase:
        if self.ctx is None:
            return GamePhase.MENU
        return self.ctx.phase

    @property
    def selected_archetype(self) -> Archetype | None:
        if self.selected_index is None:
            return None
        return ARCHETYPES[self.selected_index]

    @property
    def player(self) -> Player | None:
        return self.ctx.player if self.ctx else None

    @property
    def hud(self) -> HudState | None:
        return HudState.from_context(self.ctx) if self.ctx else None

    # ── Menu ──────────────────────────────────────────────

    def _require(self, phase: GamePhase, action: str):
        if self.phase is not phase:
            raise GameStateError(f"cannot {action} during {self.phase.value}")

    def select_archetype(self, index: int):
        self._require(GamePhase.MENU, "select a hero")
        get_archetype(index)
        self.selected_index = index
        self.skin_index = 0

    def select_skin(self, index: int):
        self._require(GamePhase.MENU, "select a skin")
        archetype = self.selected_archetype
        if archetype is None:
            raise GameStateError("select a hero before choosing a skin")
        if not 0 <= index < len(archetype.skins):
            raise IndexError(f"{archetype.name} has no skin {index}")
        self.skin_index = index

    def start(self, now_ms: float = 0.0):
        """Leave the menu: build the player and enemies, start the clock."""
        self._require(GamePhase.MENU, "start a match")
        if self.selected_index is None:
            raise GameStateError("no hero selected")

        archetype = ARCHETYPES[self.selected_index]
        player = Player.from_archetype(archetype, self.arena, self.skin_index)
        enemies = spawn_enemies(opponents_for(self.selected_index), self.arena,
                                self.rng, self.enemy_count)
        self.ctx = SimulationContext(
            player=player,
            enemies=enemies,
            arena=self.arena,
            projectiles=ProjectileSystem(),
            rng=self.rng,
            phase=GamePhase.PLAYING,
        )
        self.stats = MatchStats(archetype.id, [e.archetype_id for e in enemies])
        self.clock.start(now_ms)
        logger.info("Match started as %s vs %s", archetype.name,
                    ", ".join(e.archetype_id for e in enemies))

    # ── Frames ────────────────────────────────────────────

    def frame(self, now_ms: float, inputs: InputSnapshot) -> FrameResult | None:
        """Advance by the wall-clock time since the last frame.

        Returns None when the clock is stopped (shop open, game over).
        """
        dt = self.clock.advance(now_ms)
        if dt is None:
            return None
        return self.step(dt, inputs)

    def step(self, dt: float, inputs: InputSnapshot) -> FrameResult:
        """Advance by a fixed *dt* regardless of the clock."""
        if self.ctx is None:
            raise GameStateError("no match in progress")
        result = self.simulation.tick(self.ctx, dt, inputs)
        if result.simulated and self.stats is not None:
            self.stats.record_frame(result, self.ctx.player.health)
        if result.player_died:
            self._end()
        return result

    def _end(self):
        self.clock.stop()
        self.shop_open = False
        kills = self.ctx.kills if self.ctx else 0
        self.outcome_message = f"You have been defeated. Kills: {kills}"
        logger.info("Game over – %d kills", kills)
        if self.stats is not None and self.ctx is not None:
            self.stats.end_match(self.ctx.player.health, chart_file=self.chart_file)

    # ── Shop ──────────────────────────────────────────────

    def open_shop(self):
        """Pause the match while the shop is shown."""
        self._require(GamePhase.PLAYING, "open the shop")
        self.shop_open = True
        self.clock.stop()

    def close_shop(self, now_ms: float):
        self.shop_open = False
        if self.phase is GamePhase.PLAYING:
            self.clock.resume(now_ms)

    def buy(self, item_id: str) -> bool:
        """Attempt a purchase.  Returns True if the item was bought."""
        if self.phase is not GamePhase.PLAYING:
            return False
        item = get_item(item_id)
        bought = purchase(self.ctx.player, item)
        if bought and self.stats is not None:
            self.stats.record_purchase(item.id)
        return bought
