"""
core/timer.py — Fixed-cadence tick source for Tick Tack Boom.

The main loop advances time in variable frame deltas. TickTimer turns
those deltas into discrete ticks, one per TICK_INTERVAL_S of real time,
and hands each one to a callback. Timer owns only its accumulator — it
does not know about phases. game.py starts it when a round begins and
stops it when the round ends.

Usage:
    timer = TickTimer(controller.tick)
    timer.start()

    # each frame:
    timer.update(dt)
"""

from __future__ import annotations
from typing import Callable

from settings import TICK_INTERVAL_S


class TickTimer:
    """Repeating one-second trigger driven by frame delta time.

    Attributes:
        _on_tick:  Callback invoked once per interval while running.
        _interval: Seconds between ticks.
        _carry:    Seconds accumulated toward the next tick.
        _running:  True if update() should fire ticks.
    """

    def __init__(
        self,
        on_tick: Callable[[], None],
        interval: float = TICK_INTERVAL_S,
    ) -> None:
        """Create a stopped timer.

        Args:
            on_tick:  Called with no arguments on every tick.
            interval: Seconds between ticks. Must be positive.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._on_tick:  Callable[[], None] = on_tick
        self._interval: float              = interval
        self._carry:    float              = 0.0
        self._running:  bool               = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start (or restart) counting from a clean accumulator.

        The first tick fires one full interval after start().
        """
        self._carry   = 0.0
        self._running = True

    def stop(self) -> None:
        """Stop firing ticks and drop any partial interval."""
        self._running = False
        self._carry   = 0.0

    def update(self, dt: float) -> int:
        """Advance the timer by dt seconds, firing any ticks that are due.

        No-op while stopped. If a tick callback stops the timer, the rest
        of the accumulated time is discarded.

        Args:
            dt: Delta time in seconds since the last frame.

        Returns:
            Number of ticks fired during this call.
        """
        if not self._running:
            return 0

        self._carry += dt
        fired = 0
        while self._running and self._carry >= self._interval:
            self._carry -= self._interval
            fired += 1
            self._on_tick()
        return fired

    def progress(self) -> float:
        """Return how far the current interval has advanced.

        Game.beat() adds this to the tick count to phase the background
        pulse with the ticks.

        Returns:
            Float in [0.0, 1.0).
        """
        return self._carry / self._interval
