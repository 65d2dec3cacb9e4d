"""
simulation_runner.py – Automated headless matches.

Runs N matches where a scripted bot plays the hero.  Nothing is
rendered and no window is opened; the session is stepped at a fixed
60 Hz until the hero falls or the time cap is hit.

Usage (from CLI):
    python main.py --simulate 50

The bot strafes in a direction it re-rolls every second, always aims
at the nearest enemy, and holds the attack button.  It buys whatever
it can afford the moment it can afford it.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass

logger = logging.getLogger(__name__)

from settings import SIM_STEP, SIM_MAX_SECONDS
from entities.arena import Arena
from entities.archetypes import ARCHETYPES
from systems.game_state import GameSession
from systems.input_state import InputSnapshot
from systems.shop_system import ITEMS, can_purchase
from systems.simulation import GamePhase


# ══════════════════════════════════════════════════════════
#  Per-match result
# ══════════════════════════════════════════════════════════

@dataclass
class MatchResult:
    """Lightweight record for one simulated match."""
    match_number: int = 0
    archetype: str = ""
    outcome: str = ""              # "defeated" or "timeout"
    kills: int = 0
    survived_sec: float = 0.0
    items: tuple[str, ...] = ()


# ══════════════════════════════════════════════════════════
#  Bot
# ══════════════════════════════════════════════════════════

class BotPlayer:
    """Scripted input source for the hero."""

    _DIRECTIONS = [
        (up, down, left, right)
        for up, down in ((False, False), (True, False), (False, True))
        for left, right in ((False, False), (True, False), (False, True))
    ]

    def __init__(self, rng: random.Random, reroll_every: float = 1.0):
        self._rng = rng
        self._reroll_every = reroll_every
        self._timer = 0.0
        self._direction = self._rng.choice(self._DIRECTIONS)

    def decide(self, session: GameSession, dt: float) -> InputSnapshot:
        self._timer += dt
        if self._timer >= self._reroll_every:
            self._timer = 0.0
            self._direction = self._rng.choice(self._DIRECTIONS)

        ctx = session.ctx
        player = ctx.player
        target = None
        if ctx.enemies:
            nearest = min(ctx.enemies,
                          key=lambda e: math.hypot(e.x - player.x, e.y - player.y))
            target = (nearest.x, nearest.y)

        up, down, left, right = self._direction
        return InputSnapshot(up=up, down=down, left=left, right=right,
                             attack=True, pointer=target)

    @staticmethod
    def shop(session: GameSession):
        for item in ITEMS:
            if can_purchase(session.player, item):
                session.buy(item.id)


# ══════════════════════════════════════════════════════════
#  Simulation Runner
# ══════════════════════════════════════════════════════════

class SimulationRunner:
    """Run *n_matches* headless bot matches.

    Parameters
    ----------
    n_matches : int
        How many matches to run.
    arena : Arena
        Play-field size used for every match.
    seed : int | None
        Seed for hero choice, bot decisions and spawns.
    """

    def __init__(self, n_matches: int = 10, arena: Arena | None = None,
                 seed: int | None = None, max_seconds: float = SIM_MAX_SECONDS,
                 step: float = SIM_STEP) -> None:
        self._n_matches = max(1, n_matches)
        self._arena = arena or Arena(1024, 720)
        self._rng = random.Random(seed)
        self._max_seconds = max_seconds
        self._step = step
        self._results: list[MatchResult] = []

    @property
    def results(self) -> list[MatchResult]:
        return list(self._results)

    def run(self) -> list[MatchResult]:
        """Execute all N matches, then print and return results."""
        for i in range(1, self._n_matches + 1):
            logger.info("=== Simulation match %d / %d ===", i, self._n_matches)
            result = self.run_one(i)
            self._results.append(result)
            logger.info("Match %d: hero=%s outcome=%s kills=%d survived=%.1fs items=%s",
                        i, result.archetype, result.outcome, result.kills,
                        result.survived_sec, ",".join(result.items) or "-")
        self._print_summary()
        return self._results

    def run_one(self, match_number: int) -> MatchResult:
        session = GameSession(self._arena, seed=self._rng.randrange(2**32))
        hero_index = self._rng.randrange(len(ARCHETYPES))
        session.select_archetype(hero_index)
        session.start()

        bot = BotPlayer(random.Random(self._rng.randrange(2**32)))
        elapsed = 0.0
        while session.phase is GamePhase.PLAYING and elapsed < self._max_seconds:
            bot.shop(session)
            session.step(self._step, bot.decide(session, self._step))
            elapsed += self._step

        if session.phase is GamePhase.PLAYING:
            logger.warning("Match %d timed out after %.0fs", match_number, self._max_seconds)
            session.stats.end_match(session.player.health, chart_file=session.chart_file)
            outcome = "timeout"
        else:
            outcome = "defeated"

        return MatchResult(
            match_number=match_number,
            archetype=ARCHETYPES[hero_index].id,
            outcome=outcome,
            kills=session.ctx.kills,
            survived_sec=elapsed,
            items=tuple(sorted(session.player.items)),
        )

    def _print_summary(self):
        if not self._results:
            return
        print("\n" + "=" * 60)
        print(f"  SIMULATION SUMMARY  ({len(self._results)} matches)")
        print("=" * 60)
        print(f"  {'#':>3}  {'hero':<8} {'outcome':<9} {'kills':>5} {'survived':>9}")
        for r in self._results:
            print(f"  {r.match_number:>3}  {r.archetype:<8} {r.outcome:<9} "
                  f"{r.kills:>5} {r.survived_sec:>8.1f}s")
        avg_kills = sum(r.kills for r in self._results) / len(self._results)
        print("-" * 60)
        print(f"  Average kills: {avg_kills:.2f}")
        print("=" * 60 + "\n")
