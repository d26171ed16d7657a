"""
renderer/icons.py — Pure vector icons for Tick Tack Boom.

No sprites, no images. The flame and the bomb are drawn from pygame.draw
primitives so the game ships as code only (and runs under pygbag).

Coordinate system:
    (cx, cy) is the CENTRE of the icon's bounding square.
    size is the side length of that square in pixels.

Example:
    draw_flame(surface, cx=180, cy=200, size=100)
"""

import math
import pygame
from settings import COLOR
from utils.color import lighter, RGBColor

# Flame outline in unit space: x in [-0.5, 0.5], y in [-0.5, 0.5], y down.
# Traced clockwise from the tip.
_FLAME_OUTLINE = [
    ( 0.00, -0.50),
    ( 0.12, -0.30),
    ( 0.30, -0.12),
    ( 0.40,  0.08),
    ( 0.38,  0.28),
    ( 0.26,  0.43),
    ( 0.00,  0.50),
    (-0.26,  0.43),
    (-0.38,  0.28),
    (-0.40,  0.08),
    (-0.32, -0.06),
    (-0.20,  0.04),
    (-0.16, -0.22),
]


def _scaled(points, cx: float, cy: float, size: float, sx: float = 1.0, sy: float = 1.0):
    return [(cx + px * size * sx, cy + py * size * sy) for px, py in points]


def draw_flame(
    surface: pygame.Surface,
    cx: float,
    cy: float,
    size: int,
    outer: RGBColor = COLOR["flame_outer"],
    inner: RGBColor = COLOR["flame_inner"],
) -> None:
    """Draw a two-tone flame.

    The inner core is the same outline shrunk toward the base, so the
    flame reads as hotter at the bottom.

    Args:
        surface: Target surface.
        cx, cy:  Centre of the icon.
        size:    Side of the bounding square in pixels.
        outer:   Outer flame color.
        inner:   Core color.
    """
    pygame.draw.polygon(surface, outer, _scaled(_FLAME_OUTLINE, cx, cy, size))
    core_cy = cy + size * 0.18
    pygame.draw.polygon(surface, inner,
                        _scaled(_FLAME_OUTLINE, cx, core_cy, size, sx=0.5, sy=0.55))


def draw_bomb(
    surface: pygame.Surface,
    cx: float,
    cy: float,
    size: int,
    spark_phase: float = 0.0,
) -> None:
    """Draw a round bomb with a lit fuse.

    Args:
        surface:     Target surface.
        cx, cy:      Centre of the icon's bounding square.
        size:        Side of the bounding square in pixels.
        spark_phase: Float in [0.0, 1.0]. Scales the spark at the fuse tip
                     so it flickers when driven by an animation clock.
    """
    radius = size * 0.36
    body_cx = cx - size * 0.04
    body_cy = cy + size * 0.12

    # Body and highlight
    pygame.draw.circle(surface, COLOR["bomb_body"], (body_cx, body_cy), radius)
    pygame.draw.circle(surface, COLOR["bomb_shine"],
                       (body_cx - radius * 0.4, body_cy - radius * 0.4), radius * 0.22)

    # Fuse cap sits on the upper right of the body
    angle = -math.pi / 4
    cap_x = body_cx + math.cos(angle) * radius
    cap_y = body_cy + math.sin(angle) * radius
    cap = pygame.Rect(0, 0, int(size * 0.16), int(size * 0.12))
    cap.center = (int(cap_x), int(cap_y))
    pygame.draw.rect(surface, lighter(COLOR["bomb_body"], 30), cap, border_radius=3)

    # Fuse: a short quadratic curve up and to the right
    p0 = (cap_x, cap_y - size * 0.04)
    p1 = (cap_x + size * 0.10, cap_y - size * 0.22)
    p2 = (cap_x + size * 0.22, cap_y - size * 0.20)
    fuse = []
    for i in range(9):
        t = i / 8
        x = (1 - t) ** 2 * p0[0] + 2 * (1 - t) * t * p1[0] + t ** 2 * p2[0]
        y = (1 - t) ** 2 * p0[1] + 2 * (1 - t) * t * p1[1] + t ** 2 * p2[1]
        fuse.append((x, y))
    pygame.draw.lines(surface, COLOR["fuse"], False, fuse, max(2, size // 40))

    # Spark
    spark = size * (0.16 + 0.08 * spark_phase)
    draw_flame(surface, p2[0], p2[1] - spark * 0.3, int(spark))
