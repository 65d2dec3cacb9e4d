"""
renderer.py – Draws the arena, characters and projectiles.

Reads the simulation context; never mutates it.  Characters are drawn
from their skin image when one loaded, otherwise as a solid circle.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

import pygame
from settings import (
    ASSETS_DIR, GREEN, RED, YELLOW, SOFT_RED, OUTLINE_BLUE,
    PROJECTILE_DRAW_RADIUS,
)
from entities.archetypes import ARCHETYPES
from entities.character import Character
from systems.projectile_system import Faction
from utils.vfx import RadialGradient, draw_ring


class SkinCache:
    """Loads every archetype skin once.

    A skin that fails to load is remembered as missing (None) so it is
    never retried and never blocks play.
    """

    def __init__(self, assets_dir: str = ASSETS_DIR):
        self.assets_dir = assets_dir
        self._images: dict[str, pygame.Surface | None] = {}
        self._scaled: dict[tuple[str, int], pygame.Surface] = {}

    def preload(self) -> int:
        """Load all skins.  Returns how many loaded successfully."""
        for archetype in ARCHETYPES:
            for skin in archetype.skins:
                self.get(skin)
        loaded = sum(1 for img in self._images.values() if img is not None)
        logger.info("Skins loaded: %d / %d", loaded, len(self._images))
        return loaded

    def get(self, skin: str) -> pygame.Surface | None:
        if skin in self._images:
            return self._images[skin]
        path = os.path.join(self.assets_dir, skin)
        try:
            image = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha()
        except (pygame.error, OSError) as exc:
            logger.warning("Skin %s unavailable (%s) – drawing a circle instead.", skin, exc)
            image = None
        self._images[skin] = image
        return image

    def scaled(self, skin: str, diameter: int) -> pygame.Surface | None:
        image = self.get(skin)
        if image is None:
            return None
        key = (skin, diameter)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.smoothscale(image, (diameter, diameter))
        return self._scaled[key]


class Renderer:
    """Draws one frame of the arena."""

    def __init__(self, skins: SkinCache | None = None):
        self.skins = skins or SkinCache()
        self.background = RadialGradient()

    def draw(self, surface: pygame.Surface, ctx):
        self.background.draw(surface)
        self._draw_character(surface, ctx.player, GREEN)
        for enemy in ctx.enemies:
            self._draw_character(surface, enemy, RED)
        # Ring marks which one is you
        draw_ring(surface, ctx.player.position, int(ctx.player.radius) + 4, OUTLINE_BLUE)
        for proj in ctx.projectiles:
            color = YELLOW if proj.faction is Faction.PLAYER else SOFT_RED
            pygame.draw.circle(surface, color, (int(proj.x), int(proj.y)),
                               PROJECTILE_DRAW_RADIUS)

    def _draw_character(self, surface, char: Character, fallback_color):
        diameter = int(char.radius * 2)
        image = self.skins.scaled(char.skin, diameter)
        if image is not None:
            surface.blit(image, (int(char.x - char.radius), int(char.y - char.radius)))
        else:
            pygame.draw.circle(surface, fallback_color,
                               (int(char.x), int(char.y)), int(char.radius))
