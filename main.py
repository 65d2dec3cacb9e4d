"""
main.py - Entry point for Battle Arena.

Wires the pygame window to a GameSession:
- Hero selection (systems/character_select.py)
- Frame-stepped arena simulation (systems/simulation.py)
- Keyboard, pointer and on-screen touch input (systems/input_state.py)
- Shop overlay that pauses the match (systems/shop_panel.py)
- HUD and arena rendering (systems/healthbar.py, systems/renderer.py)
- Headless bot matches (ai/simulation_runner.py)

Run:  python main.py
      python main.py --simulate 20 --seed 7
"""
VERSION = "1.0.0"

import argparse
import logging
import sys

import pygame

logger = logging.getLogger(__name__)

# ── Project imports ───────────────────────────────────────
from settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, TITLE,
    TOUCH_BUTTON_COLOR, TOUCH_BUTTON_ALPHA, STATS_CHART_FILE,
)
from entities import Arena
from keybinds import keys_for, shop_key_label
from systems.character_select import CharacterSelectScreen
from systems.game_state import GameSession
from systems.healthbar import Hud
from systems.input_state import (
    PointerTracker, TouchControls, combine, keyboard_snapshot,
)
from systems.renderer import Renderer, SkinCache
from systems.shop_panel import ShopPanel
from systems.simulation import GamePhase
from utils import draw_end_screen
from ai.simulation_runner import SimulationRunner


# ══════════════════════════════════════════════════════════
#  GAME CLASS
# ══════════════════════════════════════════════════════════

class Game:
    """Top-level game controller.  Owns the window, events and drawing.

    All game rules live in the GameSession; this class only translates
    pygame events into session calls and draws what the session holds.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 seed: int | None = None, chart_file: str | None = STATS_CHART_FILE):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        self.arena = Arena(width, height)
        self.seed = seed
        self.chart_file = chart_file

        # Presentation
        skins = SkinCache()
        skins.preload()
        self.renderer = Renderer(skins)
        self.hud = Hud()
        self.shop_panel = ShopPanel()

        # Input sources
        self.pointer = PointerTracker()
        self.touch: TouchControls | None = None
        self._update_touch_layout(width, height)

        self.running = True
        self._new_session()

    # ── Session management ────────────────────────────────

    def _new_session(self):
        """Throw away the old session and go back to hero selection."""
        self.session = GameSession(self.arena, seed=self.seed,
                                   chart_file=self.chart_file)
        self.select_screen = CharacterSelectScreen(self.screen, self.session)
        self.pointer.on_leave()
        if self.touch:
            self.touch.release_all()
        self.hud.reset()

    def _update_touch_layout(self, width: int, height: int):
        if TouchControls.wanted_for(width):
            if self.touch is None:
                self.touch = TouchControls(width, height)
                logger.info("Touch controls enabled (%dpx wide)", width)
            else:
                self.touch.layout(width, height)
        elif self.touch is not None:
            self.touch = None
            logger.info("Touch controls disabled (%dpx wide)", width)

    # ── Main loop ─────────────────────────────────────────

    def run(self):
        """Start the game loop."""
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            phase = self.session.phase

            if phase is GamePhase.MENU:
                self._handle_menu_events()
                self.select_screen.update(dt)
                self.select_screen.draw()

            elif phase is GamePhase.PLAYING:
                self._handle_events()
                self._update()
                self._draw()

            elif phase is GamePhase.GAME_OVER:
                self._handle_game_over_events()
                self._draw()

        pygame.quit()
        sys.exit()

    # ── Shared events ─────────────────────────────────────

    def _handle_common(self, event) -> bool:
        """Window-level events.  Returns True when the event was consumed."""
        if event.type == pygame.QUIT:
            self.running = False
            return True
        if event.type == pygame.VIDEORESIZE:
            w, h = max(1, event.w), max(1, event.h)
            self.arena.width, self.arena.height = w, h
            self._update_touch_layout(w, h)
            logger.debug("Arena resized to %dx%d", w, h)
            return True
        if event.type == pygame.WINDOWLEAVE:
            self.pointer.on_leave()
            if self.touch:
                self.touch.release_all()
            return True
        return False

    # ── Hero selection (MENU) ─────────────────────────────

    def _handle_menu_events(self):
        for event in pygame.event.get():
            if self._handle_common(event):
                continue
            result = self.select_screen.handle_input(event)
            if result == "confirmed":
                self.session.start(pygame.time.get_ticks())
                self.hud.reset()
            elif result == "back":
                self.running = False

    # ── Playing ───────────────────────────────────────────

    def _handle_events(self):
        shop_keys = keys_for("shop")
        for event in pygame.event.get():
            if self._handle_common(event):
                continue

            if self.session.shop_open:
                if event.type == pygame.KEYDOWN and event.key in shop_keys:
                    self.session.close_shop(pygame.time.get_ticks())
                elif self.shop_panel.handle_input(event, self.session) == "close":
                    self.session.close_shop(pygame.time.get_ticks())
                continue

            if event.type == pygame.KEYDOWN:
                if event.key in shop_keys:
                    self.session.open_shop()
                    if self.touch:
                        self.touch.release_all()
                elif event.key == pygame.K_ESCAPE:
                    self.running = False

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if self.touch and self.touch.on_pointer_down(event.pos):
                    continue
                self._track_pointer(event.pos)

            elif event.type == pygame.MOUSEBUTTONUP:
                if self.touch:
                    self.touch.on_pointer_up(event.pos)

            elif event.type == pygame.MOUSEMOTION:
                if self.touch:
                    self.touch.on_pointer_move(event.pos)
                self._track_pointer(event.pos)

    def _track_pointer(self, pos):
        # Positions over a touch button are not aim targets
        if self.touch and self.touch.button_at(pos) is not None:
            return
        self.pointer.on_move(pos, self.session.phase is GamePhase.PLAYING)

    def _poll_inputs(self):
        sources = [keyboard_snapshot(pygame.key.get_pressed()), self.pointer.snapshot()]
        if self.touch:
            sources.append(self.touch.snapshot())
        return combine(*sources)

    def _update(self):
        # frame() returns None while the shop has the clock stopped
        self.session.frame(pygame.time.get_ticks(), self._poll_inputs())

    # ── Game over ─────────────────────────────────────────

    def _handle_game_over_events(self):
        for event in pygame.event.get():
            if self._handle_common(event):
                continue
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    self._new_session()
                elif event.key == pygame.K_ESCAPE:
                    self.running = False

    # ── Draw ──────────────────────────────────────────────

    def _draw(self):
        ctx = self.session.ctx
        if ctx is None:
            return
        self.renderer.draw(self.screen, ctx)

        self.hud.draw(self.screen, self.session.hud, shop_hint=f"{shop_key_label()}: Shop")

        if self.touch and self.session.phase is GamePhase.PLAYING:
            self._draw_touch_controls()

        if self.session.shop_open:
            self.shop_panel.draw(self.screen, ctx.player)

        if self.session.phase is GamePhase.GAME_OVER:
            draw_end_screen(self.screen, self.session.outcome_message)

        pygame.display.flip()

    def _draw_touch_controls(self):
        for name, rect in self.touch.rects.items():
            button = pygame.Surface(rect.size, pygame.SRCALPHA)
            alpha = TOUCH_BUTTON_ALPHA * 2 if self.touch.state[name] else TOUCH_BUTTON_ALPHA
            pygame.draw.rect(button, (*TOUCH_BUTTON_COLOR, alpha), button.get_rect(),
                             border_radius=10)
            self.screen.blit(button, rect.topleft)


# ══════════════════════════════════════════════════════════
#  CLI
# ══════════════════════════════════════════════════════════

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=f"{TITLE} v{VERSION}")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH,
                        help="initial window / arena width in pixels")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT,
                        help="initial window / arena height in pixels")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for spawn positions (and bot decisions)")
    parser.add_argument("--simulate", type=int, metavar="N", default=0,
                        help="run N headless bot matches instead of opening a window")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.info("%s v%s", TITLE, VERSION)

    if args.simulate > 0:
        runner = SimulationRunner(args.simulate, Arena(args.width, args.height),
                                  seed=args.seed)
        runner.run()
        return

    Game(args.width, args.height, seed=args.seed).run()


# ── Run ───────────────────────────────────────────────────
if __name__ == "__main__":
    main()
