"""entities package – Archetypes, arena bounds, Character base, Player, and Enemy."""

from .archetypes import Archetype, BaseStats, ARCHETYPES, get_archetype, opponents_for
from .arena import Arena
from .character import Character
from .player import Player
from .enemy import Enemy
