"""
utils/viewport.py — Window letterboxing for Tick Tack Boom.

The game is drawn at a fixed 360x640 portrait resolution. Viewport fits
that surface into whatever the window currently is — keeping the aspect
ratio, centring it, and painting black bars around it — and maps mouse
positions back into native coordinates.

Usage:
    viewport = Viewport((window_w, window_h))
    viewport.present(window, game_surface)

    pos = viewport.to_game(event.pos)
    if pos is not None:
        ...   # click landed on the game, not on a bar
"""

from __future__ import annotations
import pygame

from settings import SCREEN_W, SCREEN_H


class Viewport:
    """Maps the native game surface into the window and back.

    Attributes:
        scale: Uniform scale from native to window pixels.
        rect:  Where the scaled game surface lands in the window.
    """

    def __init__(self, window_size: tuple[int, int],
                 native_size: tuple[int, int] = (SCREEN_W, SCREEN_H)) -> None:
        self._native = native_size
        self.scale: float = 1.0
        self.rect:  pygame.Rect = pygame.Rect(0, 0, *native_size)
        self.fit(window_size)

    def fit(self, window_size: tuple[int, int]) -> None:
        """Recompute scale and placement for a new window size.

        Call on startup and on every VIDEORESIZE / WINDOWSIZECHANGED.

        Args:
            window_size: (width, height) of the window in pixels.
        """
        win_w, win_h = window_size
        nat_w, nat_h = self._native
        self.scale = max(min(win_w / nat_w, win_h / nat_h), 1e-6)

        w = int(nat_w * self.scale)
        h = int(nat_h * self.scale)
        self.rect = pygame.Rect((win_w - w) // 2, (win_h - h) // 2, w, h)

    def present(self, window: pygame.Surface, game_surface: pygame.Surface) -> None:
        """Clear the bars and draw the scaled game surface into the window."""
        window.fill((0, 0, 0))
        if self.rect.size == game_surface.get_size():
            window.blit(game_surface, self.rect.topleft)
        else:
            window.blit(pygame.transform.scale(game_surface, self.rect.size),
                        self.rect.topleft)

    def to_game(self, window_pos: tuple[int, int]) -> tuple[int, int] | None:
        """Convert a window pixel position to native game coordinates.

        Args:
            window_pos: (x, y) in window pixels, e.g. event.pos.

        Returns:
            (x, y) in native coordinates, or None if the point falls in a
            letterbox bar.
        """
        if not self.rect.collidepoint(window_pos):
            return None
        x = (window_pos[0] - self.rect.x) / self.scale
        y = (window_pos[1] - self.rect.y) / self.scale
        return int(x), int(y)
