"""
player.py – The hero controlled by the person at the keyboard.

Built once per match from the selected archetype's base stats plus
starting gold.  Item purchases raise its stats additively.
"""

from __future__ import annotations

from settings import PLAYER_RADIUS, PLAYER_START_GOLD
from entities.arena import Arena
from entities.archetypes import Archetype
from entities.character import Character


class Player(Character):
    """Player-controlled hero with a gold purse and an item inventory."""

    def __init__(self, x: float, y: float, max_health: float, speed: float,
                 attack_damage: float, skin: str = "",
                 color: tuple[int, int, int] = (255, 255, 255),
                 ability: str = "", gold: float = PLAYER_START_GOLD):
        super().__init__(
            x=x, y=y, radius=PLAYER_RADIUS,
            max_health=max_health, speed=speed, attack_damage=attack_damage,
            skin=skin, color=color,
        )
        self.ability = ability
        self.gold = gold
        self.items: set[str] = set()

    @classmethod
    def from_archetype(cls, archetype: Archetype, arena: Arena,
                       skin_index: int = 0) -> "Player":
        """Spawn the chosen hero at the centre of the arena."""
        cx, cy = arena.center
        stats = archetype.stats
        return cls(
            x=cx, y=cy,
            max_health=stats.max_health,
            speed=stats.speed,
            attack_damage=stats.attack_damage,
            skin=archetype.skins[skin_index],
            color=archetype.color,
            ability=archetype.ability,
        )

    def owns(self, item_id: str) -> bool:
        return item_id in self.items
