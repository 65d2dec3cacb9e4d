"""
character.py – Shared attribute schema for the player and the enemies.

Every simulated actor is a circle with health, a movement speed stat,
an attack damage stat and an attack cooldown timer.
"""

from __future__ import annotations


class Character:
    """Base combatant.

    Attributes
    ----------
    x, y            : float – centre position (pixels)
    radius          : float – collision radius
    health          : float – current health (may dip below 0 on the killing blow)
    max_health      : float
    speed           : float – speed stat, scaled to pixels/sec by the movers
    attack_damage   : float – damage copied into each fired projectile
    attack_cooldown : float – seconds until the next shot is allowed
    skin            : str   – image file name used by the renderer
    color           : tuple – signature color of the archetype
    """

    def __init__(self, x: float, y: float, radius: float,
                 max_health: float, speed: float, attack_damage: float,
                 skin: str = "", color: tuple[int, int, int] = (255, 255, 255)):
        self.x = x
        self.y = y
        self.radius = radius
        self.max_health = max_health
        self.health = max_health
        self.speed = speed
        self.attack_damage = attack_damage
        self.attack_cooldown = 0.0
        self.skin = skin
        self.color = color

    # ── Queries ───────────────────────────────────────────

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    @property
    def can_fire(self) -> bool:
        return self.attack_cooldown <= 0

    # ── Modifiers ─────────────────────────────────────────

    def take_damage(self, amount: float) -> bool:
        """Subtract *amount* from health.  Returns True if this killed us."""
        self.health -= amount
        return self.health <= 0

    def tick_cooldown(self, dt: float):
        """Count the attack cooldown down toward zero."""
        if self.attack_cooldown > 0:
            self.attack_cooldown -= dt

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(x={self.x:.1f}, y={self.y:.1f}, "
                f"hp={self.health:.1f}/{self.max_health:.1f})")
