"""
shop_panel.py – Shop overlay shown while the match is paused.

Lists every item with its cost.  Owned items are greyed out and marked
as owned; items the player cannot afford are dimmed.  Clicking a card
or pressing its number buys it through the session.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

import pygame
from settings import WHITE, GOLD_COLOR
from keybinds import shop_key_label
from systems.shop_system import ITEMS, can_purchase

_CARD_W = 260
_CARD_H = 120
_PAD = 18

_PANEL_BG = (18, 22, 40, 235)
_CARD_BG = (40, 46, 72)
_CARD_OWNED = (34, 60, 40)
_CARD_DISABLED = (40, 40, 48)
_TEXT_DIM = (120, 120, 130)


class ShopPanel:
    """Renders the shop and maps clicks / number keys to purchases."""

    def __init__(self):
        self._font_title = pygame.font.SysFont(None, 44)
        self._font_name = pygame.font.SysFont(None, 28)
        self._font_desc = pygame.font.SysFont(None, 20)
        self._message = ""

    def _card_rects(self, surface) -> list[pygame.Rect]:
        w, h = surface.get_size()
        total_w = len(ITEMS) * _CARD_W + (len(ITEMS) - 1) * _PAD
        x0 = (w - total_w) // 2
        y0 = (h - _CARD_H) // 2
        return [pygame.Rect(x0 + i * (_CARD_W + _PAD), y0, _CARD_W, _CARD_H)
                for i in range(len(ITEMS))]

    def handle_input(self, event, session) -> str | None:
        """Returns "close" when the panel should be dismissed."""
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return "close"
            index = event.key - pygame.K_1
            if 0 <= index < len(ITEMS):
                self._buy(session, index)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i, rect in enumerate(self._card_rects(pygame.display.get_surface())):
                if rect.collidepoint(event.pos):
                    self._buy(session, i)
        return None

    def _buy(self, session, index: int):
        item = ITEMS[index]
        if session.buy(item.id):
            self._message = f"Bought {item.name}!"
        elif session.player.owns(item.id):
            self._message = f"{item.name} already owned"
        else:
            self._message = "Not enough gold"

    def draw(self, surface, player):
        w, h = surface.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill(_PANEL_BG)
        surface.blit(overlay, (0, 0))

        title = self._font_title.render("Shop", True, WHITE)
        surface.blit(title, ((w - title.get_width()) // 2, h // 2 - _CARD_H))
        gold = self._font_name.render(f"Gold: {int(player.gold)}", True, GOLD_COLOR)
        surface.blit(gold, ((w - gold.get_width()) // 2, h // 2 - _CARD_H + 40))

        for i, (item, rect) in enumerate(zip(ITEMS, self._card_rects(surface))):
            owned = player.owns(item.id)
            affordable = can_purchase(player, item)
            bg = _CARD_OWNED if owned else _CARD_BG if affordable else _CARD_DISABLED
            text = WHITE if affordable else _TEXT_DIM
            pygame.draw.rect(surface, bg, rect, border_radius=8)

            name = self._font_name.render(f"{i + 1}. {item.name}", True, text)
            surface.blit(name, (rect.x + 12, rect.y + 12))
            desc = self._font_desc.render(item.description, True, text)
            surface.blit(desc, (rect.x + 12, rect.y + 46))
            label = "Owned" if owned else f"Cost: {item.cost} gold"
            cost = self._font_desc.render(label, True, GOLD_COLOR if not owned else text)
            surface.blit(cost, (rect.x + 12, rect.bottom - 28))

        hint_text = self._message or f"1-3 or click to buy  |  ESC / {shop_key_label()} to close"
        hint = self._font_desc.render(hint_text, True, WHITE)
        surface.blit(hint, ((w - hint.get_width()) // 2, h // 2 + _CARD_H))
