"""
archetypes.py – The four selectable heroes.

Archetypes are static templates: the player is built from the chosen
one, and enemies are built from the remaining ones.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseStats:
    max_health: float
    speed: float
    attack_damage: float


@dataclass(frozen=True)
class Archetype:
    """Read-only hero template shown on the character select screen."""
    id: str
    name: str
    description: str
    stats: BaseStats
    ability: str
    skins: tuple[str, ...]
    color: tuple[int, int, int]


ARCHETYPES: tuple[Archetype, ...] = (
    Archetype(
        id="blaze",
        name="Blaze",
        description="Agile warrior wielding the power of fire.",
        stats=BaseStats(max_health=120, speed=2.8, attack_damage=22),
        ability="Hurls a fireball that deals area damage.",
        skins=("blaze.png", "blaze_cyber.png"),
        color=(229, 57, 53),
    ),
    Archetype(
        id="aether",
        name="Aether",
        description="Wind mage with supporting abilities.",
        stats=BaseStats(max_health=100, speed=3.0, attack_damage=18),
        ability="Pushes enemies back with a gust of air.",
        skins=("aether.png", "aether_storm.png"),
        color=(66, 165, 245),
    ),
    Archetype(
        id="titan",
        name="Titan",
        description="Powerful tank clad in heavy armour.",
        stats=BaseStats(max_health=200, speed=2.2, attack_damage=20),
        ability="Raises a shield that temporarily blocks damage.",
        skins=("titan.png", "titan_mecha.png"),
        color=(141, 110, 99),
    ),
    Archetype(
        id="nix",
        name="Nix",
        description="Stealthy assassin with high mobility.",
        stats=BaseStats(max_health=90, speed=3.3, attack_damage=24),
        ability="Dashes straight through enemies.",
        skins=("nix.png", "nix_shadow.png"),
        color=(123, 31, 162),
    ),
)


def get_archetype(index: int) -> Archetype:
    """Return the archetype at *index* (raises IndexError when out of range)."""
    if not 0 <= index < len(ARCHETYPES):
        raise IndexError(f"no archetype at index {index}")
    return ARCHETYPES[index]


def opponents_for(player_index: int) -> list[Archetype]:
    """Archetypes available to enemies: every one except the player's."""
    return [a for i, a in enumerate(ARCHETYPES) if i != player_index]
