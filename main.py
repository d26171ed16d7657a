"""
main.py — Entry point and game loop for Tick Tack Boom.

Responsibilities:
    - Configure logging
    - Initialise pygame and create the window
    - Own the Viewport (window → game coordinate translation)
    - Initialise the feedback sinks (Audio, Haptics) and hand them to Game
    - Run the main loop: handle events → update → render → flip
    - Wrap the loop in async for pygbag (WASM export)

Architecture note:
    main.py is intentionally thin. It owns pygame lifecycle and the
    window — nothing else. Game logic lives in core/game.py and the
    countdown itself in core/controller.py.

Usage (local):
    python main.py
    TICKTACKBOOM_SHOW_COUNTDOWN=1 TICKTACKBOOM_LOG_LEVEL=DEBUG python main.py

Usage (WASM export):
    pygbag main.py
"""

import asyncio
import logging
import pygame
from settings import SCREEN_W, SCREEN_H, FPS, TITLE, LOG_LEVEL
from utils.viewport import Viewport
from core.audio import Audio
from core.haptics import Haptics
from core.game import Game

logger = logging.getLogger(__name__)

# ── Window configuration ──────────────────────────────────────────────────────
# Desktop window opens at native size; the player can resize freely.
_WINDOW_W = SCREEN_W
_WINDOW_H = SCREEN_H

_MOUSE_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION)


def resolve_log_level(name: str) -> int:
    """Return the numeric level for a level name, INFO if it names no level."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _configure_logging() -> None:
    logging.basicConfig(
        level=resolve_log_level(LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def main() -> None:
    """Async main loop — compatible with both CPython and pygbag WASM.

    Each iteration yields to the event loop via asyncio.sleep(0), which
    pygbag uses to hand control back to the browser.
    """
    _configure_logging()
    Audio.pre_init()   # before pygame.init(), which opens the mixer itself
    pygame.init()

    # ── Window setup ──────────────────────────────────────────────────────────
    window = pygame.display.set_mode((_WINDOW_W, _WINDOW_H), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)

    # Native resolution surface — all game rendering targets this
    game_surface = pygame.Surface((SCREEN_W, SCREEN_H))
    viewport = Viewport(window.get_size())

    # ── Subsystems ────────────────────────────────────────────────────────────
    clock = pygame.time.Clock()
    game = Game()

    audio = Audio()
    audio.init()
    game.set_audio(audio)

    haptics = Haptics()
    haptics.init()
    game.set_haptics(haptics)

    logger.info("%s ready (audio=%s, controllers=%d)",
                TITLE, audio.available, haptics.pad_count)

    # ── Main loop ─────────────────────────────────────────────────────────────
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0   # seconds since last frame
        dt = min(dt, 0.25)              # clamp to 250ms — no tick bursts after a stall

        # ── Event handling ────────────────────────────────────────────────────
        for event in pygame.event.get():

            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

            elif event.type == pygame.VIDEORESIZE:
                viewport.fit((event.w, event.h))

            elif event.type in _MOUSE_EVENTS:
                game_pos = viewport.to_game(event.pos)
                if game_pos is not None:
                    # pygame events are immutable — rebuild with translated pos
                    translated = pygame.event.Event(event.type, {**event.dict, "pos": game_pos})
                    game.handle_event(translated)

            else:
                game.handle_event(event)

        # ── Update ────────────────────────────────────────────────────────────
        game.update(dt, viewport.to_game(pygame.mouse.get_pos()))

        # ── Render ────────────────────────────────────────────────────────────
        game.render(game_surface)
        viewport.present(window, game_surface)
        pygame.display.flip()

        # ── Yield to browser (pygbag) ─────────────────────────────────────────
        await asyncio.sleep(0)

    # ── Cleanup ───────────────────────────────────────────────────────────────
    game.shutdown()
    haptics.quit()
    audio.quit()
    pygame.quit()


def run() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
