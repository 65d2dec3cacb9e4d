"""
shop_system.py – In-match item shop.

Items are a closed set of kinds; each kind maps to a pure stat
transform.  A purchase succeeds only when the player can afford the
item and does not already own it.

Item pool:
- atk – Power Crystal  : attack damage +8
- def – Shield Plate   : max and current health +50
- spd – Swift Boots    : speed +0.5
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

from settings import (
    ITEM_ATK_COST, ITEM_ATK_BONUS,
    ITEM_DEF_COST, ITEM_DEF_BONUS,
    ITEM_SPD_COST, ITEM_SPD_BONUS,
)
from entities.player import Player


class ItemKind(enum.Enum):
    ATTACK = "atk"
    DEFENSE = "def"
    SPEED = "spd"


@dataclass(frozen=True)
class StatChange:
    """Additive deltas applied to the player by an item."""
    attack_damage: float = 0.0
    max_health: float = 0.0
    health: float = 0.0
    speed: float = 0.0


@dataclass(frozen=True)
class Item:
    kind: ItemKind
    name: str
    description: str
    cost: int

    @property
    def id(self) -> str:
        return self.kind.value


ITEMS: tuple[Item, ...] = (
    Item(ItemKind.ATTACK, "Power Crystal",
         f"Increases attack damage by {ITEM_ATK_BONUS}.", ITEM_ATK_COST),
    Item(ItemKind.DEFENSE, "Shield Plate",
         f"Increases max health by {ITEM_DEF_BONUS}.", ITEM_DEF_COST),
    Item(ItemKind.SPEED, "Swift Boots",
         f"Increases speed by {ITEM_SPD_BONUS}.", ITEM_SPD_COST),
)

_ITEMS_BY_ID = {item.id: item for item in ITEMS}


def get_item(item_id: str) -> Item:
    """Look up an item by id (raises KeyError for unknown ids)."""
    return _ITEMS_BY_ID[item_id]


def stat_change(kind: ItemKind) -> StatChange:
    """Stat transform for an item kind."""
    if kind is ItemKind.ATTACK:
        return StatChange(attack_damage=ITEM_ATK_BONUS)
    if kind is ItemKind.DEFENSE:
        return StatChange(max_health=ITEM_DEF_BONUS, health=ITEM_DEF_BONUS)
    if kind is ItemKind.SPEED:
        return StatChange(speed=ITEM_SPD_BONUS)
    raise ValueError(f"unhandled item kind: {kind!r}")


def apply_stat_change(player: Player, change: StatChange):
    player.attack_damage += change.attack_damage
    player.max_health += change.max_health
    player.health += change.health
    player.speed += change.speed


def can_purchase(player: Player, item: Item) -> bool:
    return player.gold >= item.cost and not player.owns(item.id)


def purchase(player: Player, item: Item) -> bool:
    """Buy *item* for *player*.  Returns False (and changes nothing) when
    the player is short of gold or already owns it."""
    if not can_purchase(player, item):
        logger.debug("Purchase of %s refused (gold=%.0f)", item.id, player.gold)
        return False
    player.gold -= item.cost
    apply_stat_change(player, stat_change(item.kind))
    player.items.add(item.id)
    logger.info("Bought %s for %d gold", item.name, item.cost)
    return True
