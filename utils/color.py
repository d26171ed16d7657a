"""
utils/color.py — Color and easing helpers for Tick Tack Boom.

Used by renderer/screens.py for the blue↔red background pulse on the
active screen and by renderer/icons.py to shade the bomb and flame.
"""

import math
from typing import Tuple

RGBColor = Tuple[int, int, int]


def clamp(value: int, lo: int = 0, hi: int = 255) -> int:
    """Clamp an integer value to [lo, hi]."""
    return max(lo, min(hi, value))


def lighter(color: RGBColor, amount: int = 40) -> RGBColor:
    """Return color with every channel raised by `amount`, clamped to 255."""
    r, g, b = color
    return (clamp(r + amount), clamp(g + amount), clamp(b + amount))


def lerp_color(a: RGBColor, b: RGBColor, t: float) -> RGBColor:
    """Linearly interpolate between two RGB colors.

    Args:
        a: Start color.
        b: End color.
        t: Interpolation factor, clamped to [0.0, 1.0]. 0 → a, 1 → b.

    Returns:
        Interpolated RGB tuple.
    """
    t = max(0.0, min(1.0, t))
    return (
        clamp(int(a[0] + (b[0] - a[0]) * t)),
        clamp(int(a[1] + (b[1] - a[1]) * t)),
        clamp(int(a[2] + (b[2] - a[2]) * t)),
    )


def ease_ping_pong(time_s: float, period_s: float) -> float:
    """Map time onto a smooth 0 → 1 → 0 wave with the given period.

    Ease-in-out shape (raised cosine), so the bounce and the background
    pulse slow down at each end like an autoreversing tween.

    Args:
        time_s:   Seconds since the animation started.
        period_s: Seconds for one full 0 → 1 → 0 cycle.

    Returns:
        Float in [0.0, 1.0]. 0.0 at time 0.
    """
    if period_s <= 0:
        return 0.0
    return 0.5 - 0.5 * math.cos(2 * math.pi * time_s / period_s)
