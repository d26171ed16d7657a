"""
settings.py — Global constants for Tick Tack Boom.

All magic numbers live here. No other module should hardcode colors,
dimensions, or timing values. Import what you need with:
    from settings import COLOR, COUNTDOWN_RANGE_S, ...

Two values can be overridden from the environment:
    TICKTACKBOOM_LOG_LEVEL       — logging level name (default INFO)
    TICKTACKBOOM_SHOW_COUNTDOWN  — "1"/"true"/"yes" shows seconds left
"""

import os

# ── Screen ────────────────────────────────────────────────────────────────────
SCREEN_W = 360
SCREEN_H = 640
FPS = 60
TITLE = "Tick Tack Boom"

# ── Colors ────────────────────────────────────────────────────────────────────
COLOR = {
    "background":  (245, 245, 245),   # title screen
    "text":        ( 33,  33,  33),
    "text_light":  (255, 255, 255),
    "button":      ( 30, 136, 229),   # #1E88E5 — start button
    "button_hover":( 21, 101, 192),   # #1565C0
    "active_a":    ( 30, 136, 229),   # background pulse, blue end
    "active_b":    (229,  57,  53),   # background pulse, red end
    "boom":        (229,  57,  53),   # #E53935 — explosion screen
    "flame_outer": (255, 112,  67),   # #FF7043
    "flame_inner": (255, 213,  79),   # #FFD54F
    "bomb_body":   ( 38,  38,  38),
    "bomb_shine":  ( 97,  97,  97),
    "fuse":        (141, 110,  99),   # #8D6E63
}

# ── Countdown ─────────────────────────────────────────────────────────────────
COUNTDOWN_RANGE_S = (20, 45)   # inclusive integer seconds, drawn per round
TICK_INTERVAL_S   = 1.0        # one controller tick per real-time second

# ── Explosion ─────────────────────────────────────────────────────────────────
EXPLOSION_HOLD_S   = 5.0       # seconds on the boom screen before the title
HAPTIC_STRENGTH    = 1.0       # rumble intensity in [0.0, 1.0]
HAPTIC_DURATION_MS = 1000

# ── Animation ─────────────────────────────────────────────────────────────────
BOUNCE_PERIOD_S  = 0.5         # one full up/down cycle of the bomb
BOUNCE_AMPLITUDE = 10          # px
PULSE_PERIOD_TICKS = 2.0       # ticks per full blue → red → blue background cycle
SHAKE_AMPLITUDE  = 6           # px, boom screen icon jitter

# ── UI Layout (relative to 360×640) ──────────────────────────────────────────
TITLE_ICON_SIZE = 100
GAME_ICON_SIZE  = 200
START_BTN_W     = 220
START_BTN_H     = 56

# ── Fonts ─────────────────────────────────────────────────────────────────────
# pygame.font.Font(None, size) — the bundled default font, always available
FONT_SIZE_XL = 56
FONT_SIZE_LG = 36
FONT_SIZE_SM = 20

# ── Environment overrides ─────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("TICKTACKBOOM_LOG_LEVEL", "INFO").upper()
SHOW_COUNTDOWN = os.environ.get("TICKTACKBOOM_SHOW_COUNTDOWN", "").strip().lower() in (
    "1", "true", "yes", "on",
)
