"""healthbar.py - Draws the HUD: smoothly animated health bar, gold and kills."""

import pygame
from settings import (
    WHITE, GRAY, GOLD_COLOR, HUD_FILL_COLOR,
    HEALTHBAR_WIDTH, HEALTHBAR_HEIGHT, HEALTHBAR_X, HEALTHBAR_Y,
    SMALL_FONT_SIZE, FONT_SIZE,
)

_LERP_SPEED = 0.15  # interpolation factor per frame


class Hud:
    """Renders a HudState.  Keeps only the displayed (smoothed) fraction."""

    def __init__(self):
        self._displayed: float | None = None
        self._font = pygame.font.SysFont(None, FONT_SIZE)
        self._font_small = pygame.font.SysFont(None, SMALL_FONT_SIZE)

    def reset(self):
        """Forget the smoothed value (call on match reset)."""
        self._displayed = None

    def draw(self, surface, hud, shop_hint: str = ""):
        frac = hud.health_fraction
        if self._displayed is None:
            self._displayed = frac
        self._displayed += (frac - self._displayed) * _LERP_SPEED

        x, y = HEALTHBAR_X, HEALTHBAR_Y
        radius = 6  # corner radius

        # Background
        bg_rect = pygame.Rect(x, y, HEALTHBAR_WIDTH, HEALTHBAR_HEIGHT)
        pygame.draw.rect(surface, GRAY, bg_rect, border_radius=radius)

        # Fill proportional to smoothed HP
        fill_width = int(HEALTHBAR_WIDTH * max(0.0, min(1.0, self._displayed)))
        if fill_width > 0:
            fill_rect = pygame.Rect(x, y, fill_width, HEALTHBAR_HEIGHT)
            pygame.draw.rect(surface, HUD_FILL_COLOR, fill_rect, border_radius=radius)

        # Border
        pygame.draw.rect(surface, (180, 180, 180), bg_rect, 2, border_radius=radius)

        pct = self._font_small.render(f"{round(frac * 100)}%", True, WHITE)
        surface.blit(pct, (x + (HEALTHBAR_WIDTH - pct.get_width()) // 2,
                           y + (HEALTHBAR_HEIGHT - pct.get_height()) // 2))

        # Gold and kills under the bar
        gold = self._font.render(f"Gold: {hud.gold}", True, GOLD_COLOR)
        surface.blit(gold, (x, y + HEALTHBAR_HEIGHT + 8))
        kills = self._font.render(f"Kills: {hud.kills}", True, WHITE)
        surface.blit(kills, (x + gold.get_width() + 24, y + HEALTHBAR_HEIGHT + 8))

        if shop_hint:
            hint = self._font_small.render(shop_hint, True, (170, 170, 190))
            surface.blit(hint, (surface.get_width() - hint.get_width() - 20, y))
