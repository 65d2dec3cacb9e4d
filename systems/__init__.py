"""systems package – Projectiles, movement, combat, spawning, shop, input, HUD and screens.

The frame driver (systems.simulation) and the session (systems.game_state)
are imported from their modules directly since they depend on the ai package.
"""

from .projectile_system import ProjectileSystem, Projectile, Faction
from .input_state import InputSnapshot, PointerTracker, TouchControls, combine, keyboard_snapshot
from .spawn_system import random_edge_position, spawn_enemies, respawn_enemy
from .movement_system import accrue_gold, move_player, resolve_player_attack
from .combat_system import CombatSystem, CombatResult, HitEvent
from .shop_system import ItemKind, Item, ITEMS, get_item, purchase
