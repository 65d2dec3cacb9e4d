"""
vfx.py  –  Procedural background and outline helpers.

Rendering-only; never touches game logic.
"""

import pygame

from settings import ARENA_GRADIENT_INNER, ARENA_GRADIENT_OUTER


class RadialGradient:
    """Radial gradient from the centre of the surface outward.

    Built once per surface size and blitted every frame after that.
    """

    def __init__(self, inner=ARENA_GRADIENT_INNER, outer=ARENA_GRADIENT_OUTER,
                 step: int = 4):
        self.inner = inner
        self.outer = outer
        self.step = step
        self._cache: pygame.Surface | None = None

    def _build(self, w: int, h: int) -> pygame.Surface:
        surf = pygame.Surface((w, h))
        surf.fill(self.outer)
        max_r = int(max(w, h) / 1.5)
        cx, cy = w // 2, h // 2
        # Concentric discs from the outside in
        for r in range(max_r, 0, -self.step):
            t = r / max_r
            color = tuple(
                int(self.inner[i] * (1 - t) + self.outer[i] * t) for i in range(3)
            )
            pygame.draw.circle(surf, color, (cx, cy), r)
        return surf

    def draw(self, surface: pygame.Surface):
        size = surface.get_size()
        if self._cache is None or self._cache.get_size() != size:
            self._cache = self._build(*size)
        surface.blit(self._cache, (0, 0))


def draw_ring(surface, pos, radius, color, width=3, alpha=204):
    """Semi-transparent circular outline centred on *pos*."""
    size = radius * 2 + width * 2
    ring = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(ring, (*color, alpha), (size // 2, size // 2), radius, width)
    surface.blit(ring, (int(pos[0]) - size // 2, int(pos[1]) - size // 2))
