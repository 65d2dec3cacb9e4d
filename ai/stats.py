"""
stats.py  –  Per-match statistics tracking.

MatchStats collects combat events during a single match and snapshots
the player's health every few seconds of simulated time.  At match end
it prints a formatted summary and saves a health-trend line graph via
matplotlib.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

import matplotlib
matplotlib.use("Agg")  # non-interactive backend so the plot doesn't block pygame
import matplotlib.pyplot as plt

from settings import STATS_SNAPSHOT_INTERVAL
from entities.player import Player


class MatchStats:
    """Tracks events for one match and produces end-of-match reports.

    Attributes tracked:
        player_archetype    – str
        enemy_archetypes    – list[str]
        player_shots        – int
        enemy_shots         – int
        hits_landed         – int   (player projectiles that hit)
        hits_taken          – int   (enemy projectiles that hit)
        damage_dealt        – float (player → enemies)
        damage_taken        – float (enemies → player)
        gold_earned         – float (passive income + bounties)
        items_bought        – list[str]
        kills               – int
        match_duration      – float (simulated seconds)
        health_history      – list[float]
    """

    def __init__(self, player_archetype: str, enemy_archetypes: list[str]):
        self.player_archetype = player_archetype
        self.enemy_archetypes = list(enemy_archetypes)

        # Cumulative counters
        self.player_shots = 0
        self.enemy_shots = 0
        self.hits_landed = 0
        self.hits_taken = 0
        self.damage_dealt = 0.0
        self.damage_taken = 0.0
        self.gold_earned = 0.0
        self.items_bought: list[str] = []
        self.kills = 0

        # Timing
        self.match_duration = 0.0
        self._since_snapshot = 0.0

        # Health snapshots (one per STATS_SNAPSHOT_INTERVAL)
        self.health_history: list[float] = []
        self.snapshot_times: list[float] = []

    # ===========================================================
    #  Per-frame / per-event recorders
    # ===========================================================

    def record_frame(self, result, health: float):
        """Fold one simulated FrameResult into the running totals."""
        if not result.simulated:
            return
        self.match_duration += result.dt
        self.player_shots += result.player_shots
        self.enemy_shots += result.enemy_shots
        self.gold_earned += result.gold_earned
        self.kills += result.combat.kills

        for hit in result.combat.hits:
            if isinstance(hit.target, Player):
                self.hits_taken += 1
                self.damage_taken += hit.damage
            else:
                self.hits_landed += 1
                self.damage_dealt += hit.damage

        self._since_snapshot += result.dt
        if not self.health_history or self._since_snapshot >= STATS_SNAPSHOT_INTERVAL:
            self._snapshot(health)
            self._since_snapshot = 0.0

    def _snapshot(self, health: float):
        self.health_history.append(health)
        self.snapshot_times.append(self.match_duration)

    def record_purchase(self, item_id: str):
        self.items_bought.append(item_id)

    @property
    def accuracy(self) -> float:
        """Fraction of player shots that landed."""
        if self.player_shots == 0:
            return 0.0
        return self.hits_landed / self.player_shots

    # ===========================================================
    #  End-of-match
    # ===========================================================

    def end_match(self, final_health: float, chart_file: str | None = None):
        """Finalise stats, print summary, and optionally save the health graph."""
        self._snapshot(final_health)
        self._print_summary()
        if chart_file:
            self._plot_health(chart_file)

    # ===========================================================
    #  Reports
    # ===========================================================

    def _print_summary(self):
        """Print a clean formatted match summary to stdout."""
        print("\n" + "=" * 52)
        print("  MATCH SUMMARY")
        print("=" * 52)
        print(f"  Hero             : {self.player_archetype}")
        print(f"  Opponents        : {', '.join(self.enemy_archetypes)}")
        print(f"  Survived         : {self.match_duration:.1f}s")
        print(f"  Kills            : {self.kills}")
        print("-" * 52)
        print(f"  Shots (player / enemy) : {self.player_shots} / {self.enemy_shots}")
        print(f"  Accuracy         : {self.accuracy:.0%}")
        print(f"  Damage Dealt     : {self.damage_dealt:.0f}")
        print(f"  Damage Taken     : {self.damage_taken:.0f}")
        print(f"  Gold Earned      : {self.gold_earned:.0f}")
        print(f"  Items Bought     : {', '.join(self.items_bought) or '-'}")
        print("=" * 52 + "\n")

    def _plot_health(self, filename: str):
        """Save a simple line graph of health_history to disk."""
        if not self.health_history:
            return

        x = self.snapshot_times
        y = self.health_history

        fig, ax = plt.subplots()
        ax.plot(x, y, marker="o")
        ax.set_xlabel("Time (seconds)")
        ax.set_ylabel("Health")
        ax.set_title(f"Health Trend - {self.player_archetype}")
        ax.grid(True)

        fig.savefig(filename, dpi=100, bbox_inches="tight")
        plt.close(fig)
        logger.info("Health graph saved to %s", filename)

    def as_dict(self) -> dict:
        """Return a plain dict snapshot (useful for JSON serialisation)."""
        return {
            "player_archetype": self.player_archetype,
            "enemy_archetypes": list(self.enemy_archetypes),
            "player_shots":     self.player_shots,
            "enemy_shots":      self.enemy_shots,
            "hits_landed":      self.hits_landed,
            "hits_taken":       self.hits_taken,
            "damage_dealt":     round(self.damage_dealt, 2),
            "damage_taken":     round(self.damage_taken, 2),
            "gold_earned":      round(self.gold_earned, 2),
            "items_bought":     list(self.items_bought),
            "kills":            self.kills,
            "match_duration":   round(self.match_duration, 2),
            "health_history":   list(self.health_history),
        }
