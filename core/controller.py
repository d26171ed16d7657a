"""
core/controller.py — Countdown state machine for Tick Tack Boom.

GameController owns the phase, the hidden countdown target, and the
elapsed-second counter. It performs no scheduling, drawing, or sound:
game.py feeds it ticks from core/timer.py and reacts to phase changes
through listeners.

States:
    IDLE      — title screen, nothing counting
    ACTIVE    — bomb is ticking, elapsed counts up toward target
    FINISHED  — bomb went off, waiting for the host to acknowledge

Transitions:
    IDLE      → ACTIVE    : start()
    ACTIVE    → FINISHED  : tick() and elapsed reaches target
    FINISHED  → IDLE      : acknowledge_finish()
    ACTIVE    → ACTIVE    : start() again restarts with a fresh target

Every operation is total. Calls that make no sense in the current phase
are silent no-ops rather than errors.

Usage:
    controller = GameController(rng=random.Random(7))
    controller.add_listener(lambda prev, cur: print(prev, "→", cur))
    controller.start()

    # once per second while ACTIVE:
    controller.tick()
"""

from __future__ import annotations
import random
from enum import Enum, auto
from typing import Callable, Protocol

from settings import COUNTDOWN_RANGE_S


class Phase(Enum):
    """Game phases. Exactly one is current at any time."""
    IDLE     = auto()
    ACTIVE   = auto()
    FINISHED = auto()


PhaseListener = Callable[[Phase, Phase], None]


class RandomSource(Protocol):
    """Anything with an inclusive randint(), e.g. random.Random."""

    def randint(self, a: int, b: int) -> int: ...


class GameController:
    """Pure countdown state machine.

    Attributes:
        phase:      Current Phase.
        elapsed:    Whole seconds ticked since the last start(). 0 outside ACTIVE
                    after an acknowledge_finish().
        target:     Seconds the current round lasts, or None while IDLE.
        ticking:    True while tick() is allowed to advance elapsed.
        _rng:       Injected random source used to draw target.
        _bounds:    Inclusive (low, high) range for target.
        _listeners: Callbacks invoked as listener(previous, current).
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        bounds: tuple[int, int] = COUNTDOWN_RANGE_S,
    ) -> None:
        """Create a controller in IDLE.

        Args:
            rng:    Random source with randint(a, b). Defaults to a private
                    random.Random() so the global generator is never touched.
            bounds: Inclusive countdown range in seconds.
        """
        self.phase:   Phase      = Phase.IDLE
        self.elapsed: int        = 0
        self.target:  int | None = None
        self.ticking: bool       = False
        self._rng:       RandomSource        = rng if rng is not None else random.Random()
        self._bounds:    tuple[int, int]     = bounds
        self._listeners: list[PhaseListener] = []

    # ── Listeners ─────────────────────────────────────────────────────────────

    def add_listener(self, listener: PhaseListener) -> None:
        """Subscribe to phase changes.

        Args:
            listener: Called as listener(previous, current) after every
                      transition, including an ACTIVE → ACTIVE restart.
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: PhaseListener) -> None:
        """Unsubscribe a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _set_phase(self, phase: Phase) -> None:
        previous = self.phase
        self.phase = phase
        for listener in list(self._listeners):
            listener(previous, phase)

    # ── Operations ────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Begin a round from any phase with a freshly drawn target.

        target is uniform over the inclusive bounds, elapsed resets to 0.
        """
        low, high = self._bounds
        self.target  = self._rng.randint(low, high)
        self.elapsed = 0
        self.ticking = True
        self._set_phase(Phase.ACTIVE)

    def tick(self) -> None:
        """Advance elapsed by one second.

        No-op unless ACTIVE and ticking. When elapsed reaches target the
        controller moves to FINISHED and stops ticking; halting the timer
        source that calls this is the caller's job.
        """
        if self.phase is not Phase.ACTIVE or not self.ticking:
            return
        self.elapsed += 1
        if self.elapsed >= self.target:
            self.ticking = False
            self._set_phase(Phase.FINISHED)

    def acknowledge_finish(self) -> None:
        """Return from FINISHED to IDLE, clearing elapsed and target.

        No-op from any other phase.
        """
        if self.phase is not Phase.FINISHED:
            return
        self.elapsed = 0
        self.target  = None
        self._set_phase(Phase.IDLE)

    # ── Reads ─────────────────────────────────────────────────────────────────

    def current_phase(self) -> Phase:
        return self.phase

    def remaining(self) -> int:
        """Return whole seconds left in the round, 0 outside ACTIVE."""
        if self.phase is not Phase.ACTIVE or self.target is None:
            return 0
        return max(0, self.target - self.elapsed)
