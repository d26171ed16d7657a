"""
renderer/screens.py — Full-screen renderers for Tick Tack Boom.

One function per phase:
    draw_title   — IDLE:     flame, title, "Start Game" button
    draw_active  — ACTIVE:   bouncing bomb on a blue↔red pulsing background
    draw_boom    — FINISHED: red screen, "Boom!", shaking flame

All functions are stateless — animation is driven by the `clock` argument
(seconds since the phase began) that game.py passes in. No global state is
read except constants from settings.py and a font cache.

Coordinate system: native 360x640 game space. Viewport handles the rest.
"""

import math
import pygame
from settings import (
    SCREEN_W, SCREEN_H,
    COLOR,
    TITLE,
    TITLE_ICON_SIZE, GAME_ICON_SIZE, START_BTN_W, START_BTN_H,
    BOUNCE_PERIOD_S, BOUNCE_AMPLITUDE, PULSE_PERIOD_TICKS, SHAKE_AMPLITUDE,
    FONT_SIZE_XL, FONT_SIZE_LG, FONT_SIZE_SM,
)
from renderer.icons import draw_flame, draw_bomb
from utils.color import lerp_color, ease_ping_pong


# ── Font cache ────────────────────────────────────────────────────────────────
_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    if size not in _fonts:
        _fonts[size] = pygame.font.Font(None, size)
    return _fonts[size]


def _blit_centered(surface: pygame.Surface, text: str, size: int,
                   color, cy: int) -> None:
    label = _font(size).render(text, True, color)
    surface.blit(label, ((SCREEN_W - label.get_width()) // 2,
                         cy - label.get_height() // 2))


def start_button_rect() -> pygame.Rect:
    """Return the start button rect in game coordinates.

    Exposed separately so game.py can hit-test clicks without rendering.
    """
    return pygame.Rect((SCREEN_W - START_BTN_W) // 2, 420, START_BTN_W, START_BTN_H)


# ── IDLE ──────────────────────────────────────────────────────────────────────

def draw_title(surface: pygame.Surface, hovered: bool = False) -> pygame.Rect:
    """Draw the title screen and return the start button rect.

    Args:
        surface: Native game surface.
        hovered: True if the mouse is over the start button.

    Returns:
        pygame.Rect of the start button for hit detection.
    """
    surface.fill(COLOR["background"])

    draw_flame(surface, SCREEN_W // 2, 200, TITLE_ICON_SIZE)
    _blit_centered(surface, TITLE, FONT_SIZE_LG, COLOR["text"], 300)

    btn = start_button_rect()
    fill = COLOR["button_hover"] if hovered else COLOR["button"]
    pygame.draw.rect(surface, fill, btn, border_radius=10)
    label = _font(FONT_SIZE_LG).render("Start Game", True, COLOR["text_light"])
    surface.blit(label, (btn.centerx - label.get_width() // 2,
                         btn.centery - label.get_height() // 2))

    _blit_centered(surface, "pass the phone before it blows", FONT_SIZE_SM,
                   COLOR["text"], 520)
    return btn


# ── ACTIVE ────────────────────────────────────────────────────────────────────

def active_background(beat: float) -> tuple[int, int, int]:
    """Return the pulsing background color at `beat` ticks into the round.

    Fully blue on even ticks, fully red on odd ones.
    """
    t = ease_ping_pong(beat, PULSE_PERIOD_TICKS)
    return lerp_color(COLOR["active_a"], COLOR["active_b"], t)


def draw_active(surface: pygame.Surface, clock: float, beat: float,
                remaining: int | None = None) -> None:
    """Draw the ticking bomb screen.

    Args:
        surface:   Native game surface.
        clock:     Seconds since the round started. Drives the bounce
                   and spark flicker.
        beat:      Round time in ticks (Game.beat()). Drives the
                   background pulse so it flips colour on each tick.
        remaining: Seconds left, drawn under the bomb. None keeps the
                   countdown hidden, which is how the game is played.
    """
    surface.fill(active_background(beat))

    bounce = ease_ping_pong(clock, BOUNCE_PERIOD_S)
    offset = BOUNCE_AMPLITUDE - 2 * BOUNCE_AMPLITUDE * bounce   # +A → -A → +A
    spark = 0.5 + 0.5 * math.sin(clock * 25.0)
    draw_bomb(surface, SCREEN_W // 2, SCREEN_H // 2 + offset, GAME_ICON_SIZE,
              spark_phase=spark)

    if remaining is not None:
        _blit_centered(surface, str(remaining), FONT_SIZE_XL,
                       COLOR["text_light"], SCREEN_H // 2 + GAME_ICON_SIZE)


# ── FINISHED ──────────────────────────────────────────────────────────────────

def draw_boom(surface: pygame.Surface, clock: float) -> None:
    """Draw the explosion screen.

    Args:
        surface: Native game surface.
        clock:   Seconds since the bomb went off. The flame shakes hardest
                 at first and settles over the first second.
    """
    surface.fill(COLOR["boom"])

    _blit_centered(surface, "Boom!", FONT_SIZE_XL, COLOR["text_light"], 180)

    damp = max(0.0, 1.0 - clock)
    dx = math.sin(clock * 60.0) * SHAKE_AMPLITUDE * damp
    dy = math.cos(clock * 47.0) * SHAKE_AMPLITUDE * damp
    draw_flame(surface, SCREEN_W // 2 + dx, SCREEN_H // 2 + 20 + dy, GAME_ICON_SIZE,
               outer=COLOR["flame_inner"], inner=COLOR["text_light"])
