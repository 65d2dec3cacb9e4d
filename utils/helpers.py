"""helpers.py - Reusable text and overlay drawing functions."""

import pygame
from settings import WHITE, FONT_SIZE


def draw_centered_text(surface, text, cy, color=WHITE, size=FONT_SIZE):
    """Render a single line of text horizontally centred at height *cy*."""
    font = pygame.font.SysFont(None, size)
    rendered = font.render(text, True, color)
    rect = rendered.get_rect(center=(surface.get_width() // 2, cy))
    surface.blit(rendered, rect)


def draw_end_screen(surface, message, hint="Press R to Play Again  |  ESC to Quit"):
    """Dim the screen and show a large outcome message plus a restart hint."""
    w, h = surface.get_size()
    overlay = pygame.Surface((w, h))
    overlay.set_alpha(180)
    overlay.fill((0, 0, 0))
    surface.blit(overlay, (0, 0))

    draw_centered_text(surface, message, h // 2 - 30, size=56)
    draw_centered_text(surface, hint, h // 2 + 40, size=30)
