"""
systems/character_select.py - Hero selection screen.

Displays the four archetypes as a 2x2 grid of cards with keyboard and
mouse navigation.  The highlighted card's skin can be toggled before
confirming.  Selection state lives in the GameSession; this screen only
reads and forwards it.

Usage:
    screen = CharacterSelectScreen(surface, session)
    # in game loop:
    for event in pygame.event.get():
        result = screen.handle_input(event)
        if result == "confirmed":
            session.start(now_ms)
        elif result == "back":
            # quit
    screen.update(dt)
    screen.draw()
"""

import pygame
from settings import WHITE, BG_COLOR
from entities.archetypes import ARCHETYPES

# ── Layout constants ──────────────────────────────────────

_COLS = 2
_ROWS = 2
_CARD_W = 300
_CARD_H = 190
_PAD_X = 24
_PAD_Y = 20

# ── Colors ────────────────────────────────────────────────

_CARD_BG = (34, 38, 58)
_CARD_SELECTED = (62, 72, 118)
_CARD_BORDER = (78, 84, 112)
_CARD_HIGHLIGHT = (66, 165, 245)
_NAME_COLOR = (236, 239, 250)
_STAT_COLOR = (176, 190, 214)
_DESC_COLOR = (150, 156, 178)
_ABILITY_COLOR = (255, 202, 120)
_HINT_COLOR = (120, 126, 150)

_BAR_HEALTH = (102, 187, 106)
_BAR_SPEED = (70, 200, 220)
_BAR_DAMAGE = (229, 57, 53)
_BAR_BG = (44, 48, 66)

# Bar scale: the largest value among the four heroes fills the bar
_STAT_MAX = {
    "max_health": max(a.stats.max_health for a in ARCHETYPES),
    "speed": max(a.stats.speed for a in ARCHETYPES),
    "attack_damage": max(a.stats.attack_damage for a in ARCHETYPES),
}

_SELECT_LERP_SPEED = 10.0


# ══════════════════════════════════════════════════════════
#  Text Wrapping Utility
# ══════════════════════════════════════════════════════════

def render_multiline_text(text, font, color, max_width):
    """Word-wrap *text* and return a list of rendered line surfaces.

    Words wider than *max_width* get a line of their own.
    """
    lines = []
    current = []
    for word in text.split():
        if current and font.size(" ".join(current + [word]))[0] > max_width:
            lines.append(font.render(" ".join(current), True, color))
            current = [word]
        else:
            current.append(word)
    if current:
        lines.append(font.render(" ".join(current), True, color))
    return lines


class CharacterSelectScreen:
    """2x2 hero grid bound to a GameSession's selection."""

    def __init__(self, screen: pygame.Surface, session):
        self.screen = screen
        self.session = session
        self._index = session.selected_index or 0
        self._highlight = [0.0 for _ in ARCHETYPES]

        self._font_title = pygame.font.SysFont(None, 48)
        self._font_name = pygame.font.SysFont(None, 30)
        self._font_stat = pygame.font.SysFont(None, 20)
        self._font_desc = pygame.font.SysFont(None, 19)
        self._font_hint = pygame.font.SysFont(None, 22)

        self._desc_cache = {
            a.id: render_multiline_text(a.description, self._font_desc,
                                        _DESC_COLOR, _CARD_W - 20)
            for a in ARCHETYPES
        }
        self._ability_cache = {
            a.id: render_multiline_text(a.ability, self._font_desc,
                                        _ABILITY_COLOR, _CARD_W - 20)
            for a in ARCHETYPES
        }

    # ── public API ────────────────────────────────────────

    def update(self, dt: float) -> None:
        for i in range(len(self._highlight)):
            target = 1.0 if i == self._index else 0.0
            self._highlight[i] += (target - self._highlight[i]) * min(1.0, _SELECT_LERP_SPEED * dt)

    def draw(self) -> None:
        self.screen.fill(BG_COLOR)
        w, h = self.screen.get_size()

        title = self._font_title.render("Choose Your Hero", True, WHITE)
        self.screen.blit(title, ((w - title.get_width()) // 2, 24))

        for i, rect in enumerate(self._card_rects()):
            self._draw_card(rect, i)

        hint = self._font_hint.render(
            "Arrows: Navigate  |  1/2: Skin  |  Enter: Start  |  ESC: Quit",
            True, _HINT_COLOR,
        )
        self.screen.blit(hint, ((w - hint.get_width()) // 2, h - 36))
        pygame.display.flip()

    def handle_input(self, event: pygame.event.Event) -> str | None:
        """Process a single pygame event.

        Returns
        -------
        "confirmed" – a hero is selected and Enter was pressed.
        "back"      – ESC was pressed.
        None        – event consumed or irrelevant.
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i, rect in enumerate(self._card_rects()):
                if rect.collidepoint(event.pos):
                    self._select(i)
            return None

        if event.type != pygame.KEYDOWN:
            return None

        if event.key == pygame.K_LEFT:
            self._move(-1, 0)
        elif event.key == pygame.K_RIGHT:
            self._move(1, 0)
        elif event.key == pygame.K_UP:
            self._move(0, -1)
        elif event.key == pygame.K_DOWN:
            self._move(0, 1)
        elif event.key in (pygame.K_1, pygame.K_2):
            if self.session.selected_index != self._index:
                self._select(self._index)
            self.session.select_skin(event.key - pygame.K_1)
        elif event.key == pygame.K_RETURN:
            if self.session.selected_index is None:
                self._select(self._index)
            return "confirmed"
        elif event.key == pygame.K_ESCAPE:
            return "back"
        return None

    # ── helpers ───────────────────────────────────────────

    def _select(self, index: int) -> None:
        self._index = index
        self.session.select_archetype(index)

    def _move(self, dx: int, dy: int) -> None:
        col = max(0, min(_COLS - 1, self._index % _COLS + dx))
        row = max(0, min(_ROWS - 1, self._index // _COLS + dy))
        self._select(row * _COLS + col)

    def _card_rects(self) -> list[pygame.Rect]:
        w, h = self.screen.get_size()
        grid_w = _COLS * _CARD_W + (_COLS - 1) * _PAD_X
        grid_h = _ROWS * _CARD_H + (_ROWS - 1) * _PAD_Y
        gx = (w - grid_w) // 2
        gy = (h - grid_h) // 2 + 20
        return [
            pygame.Rect(gx + (i % _COLS) * (_CARD_W + _PAD_X),
                        gy + (i // _COLS) * (_CARD_H + _PAD_Y),
                        _CARD_W, _CARD_H)
            for i in range(len(ARCHETYPES))
        ]

    def _draw_card(self, rect: pygame.Rect, index: int) -> None:
        archetype = ARCHETYPES[index]
        t = self._highlight[index]
        bg = tuple(int(_CARD_BG[c] + (_CARD_SELECTED[c] - _CARD_BG[c]) * t) for c in range(3))
        border = _CARD_HIGHLIGHT if index == self._index else _CARD_BORDER

        pygame.draw.rect(self.screen, bg, rect, border_radius=8)
        pygame.draw.rect(self.screen, border, rect, max(1, int(1 + 2 * t)), border_radius=8)

        # Name with a swatch of the hero color
        pygame.draw.circle(self.screen, archetype.color, (rect.x + 20, rect.y + 22), 8)
        name = self._font_name.render(archetype.name, True, _NAME_COLOR)
        self.screen.blit(name, (rect.x + 36, rect.y + 12))

        # Skin pips (filled = chosen)
        chosen = self.session.selected_index == index
        for s in range(len(archetype.skins)):
            filled = chosen and self.session.skin_index == s
            center = (rect.right - 20 - s * 20, rect.y + 22)
            pygame.draw.circle(self.screen, _CARD_HIGHLIGHT, center, 6, 0 if filled else 1)

        # Stat bars
        bar_y = rect.y + 44
        bar_x = rect.x + 12
        bar_w = _CARD_W - 24
        for label, key, color in (
            ("HP", "max_health", _BAR_HEALTH),
            ("SPD", "speed", _BAR_SPEED),
            ("ATK", "attack_damage", _BAR_DAMAGE),
        ):
            lbl = self._font_stat.render(label, True, _STAT_COLOR)
            self.screen.blit(lbl, (bar_x, bar_y - 1))
            bx = bar_x + 36
            bw = bar_w - 36
            pygame.draw.rect(self.screen, _BAR_BG, (bx, bar_y + 2, bw, 8), border_radius=3)
            frac = getattr(archetype.stats, key) / _STAT_MAX[key]
            pygame.draw.rect(self.screen, color, (bx, bar_y + 2, max(1, int(bw * frac)), 8),
                             border_radius=3)
            bar_y += 18

        y = bar_y + 4
        for line in self._desc_cache[archetype.id] + self._ability_cache[archetype.id]:
            self.screen.blit(line, (rect.x + 10, y))
            y += line.get_height() + 2
