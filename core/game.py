"""
core/game.py — Host for the Tick Tack Boom state machine.

Game wires the pure GameController to everything with side effects:
    - TickTimer (turns frame dt into one tick per second)
    - Audio     (start cue, looping tick, blast)
    - Haptics   (one rumble when the bomb goes off)
    - Renderer  (one screen per phase)

Phases (owned by core/controller.py):
    IDLE      — title screen, waiting for Start
    ACTIVE    — bomb ticking, countdown hidden
    FINISHED  — boom screen, held for EXPLOSION_HOLD_S then back to IDLE

Side effects hang off the controller's phase-change listener, so the
controller never calls into audio or pygame itself. Every feedback call
is guarded: a broken mixer or controller is logged and the FINISHED →
IDLE hold still runs.

game.py does NOT call pygame.display.flip() or manage the window.
That is main.py's responsibility.
"""

from __future__ import annotations
import logging
from typing import Callable

import pygame

from core.audio import Playback
from core.controller import GameController, Phase, RandomSource
from core.timer import TickTimer
from renderer import screens
from settings import EXPLOSION_HOLD_S, SHOW_COUNTDOWN

logger = logging.getLogger(__name__)

_START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)


class Game:
    """Drives one play session: title → ticking → boom → title, forever.

    Attributes:
        controller:     The GameController state machine.
        timer:          TickTimer feeding controller.tick().
        show_countdown: Draw the seconds left on the active screen.
        _audio:         Audio instance injected via set_audio(). None until set.
        _haptics:       Haptics instance injected via set_haptics().
        _tick_loop:     Playback handle for the ticking sound while ACTIVE.
        _hold_left:     Seconds left on the boom screen.
        _clock:         Seconds since the current phase began (animation).
        _btn_rect:      Start button rect from the last title render.
        _hover:         True if the mouse is over the start button.
    """

    def __init__(self, rng: RandomSource | None = None,
                 show_countdown: bool = SHOW_COUNTDOWN) -> None:
        """Create the session in IDLE.

        Args:
            rng:            Random source for countdown targets. Tests pass a
                            seeded or fixed one.
            show_countdown: Draw the seconds left during a round.
        """
        self.controller:     GameController  = GameController(rng=rng)
        self.timer:          TickTimer       = TickTimer(self.controller.tick)
        self.show_countdown: bool            = show_countdown
        self._audio                          = None
        self._haptics                        = None
        self._tick_loop:     Playback | None = None
        self._hold_left:     float           = 0.0
        self._clock:         float           = 0.0
        self._btn_rect:      pygame.Rect     = screens.start_button_rect()
        self._hover:         bool            = False

        self.controller.add_listener(self._on_phase_change)

    @property
    def phase(self) -> Phase:
        return self.controller.current_phase()

    def beat(self) -> float:
        """Return round time in ticks: whole ticks elapsed plus the partial one.

        Locks the background pulse to the ticks the controller actually saw.
        """
        return self.controller.elapsed + self.timer.progress()

    # ── Feedback sinks ────────────────────────────────────────────────────────

    def set_audio(self, audio) -> None:
        """Inject the Audio instance after construction.

        Kept out of __init__ so pygame.mixer is never touched before
        pygame.init(), and so tests can pass a fake.
        """
        self._audio = audio

    def set_haptics(self, haptics) -> None:
        """Inject the Haptics instance after construction."""
        self._haptics = haptics

    def _guard(self, what: str, action: Callable[[], object]) -> None:
        """Run one feedback action, logging instead of raising on failure."""
        try:
            action()
        except Exception:
            logger.exception("Feedback failed: %s", what)

    def _release_tick_loop(self) -> None:
        if self._tick_loop is not None:
            loop, self._tick_loop = self._tick_loop, None
            self._guard("stop tick loop", loop.stop)

    def _acquire_tick_loop(self) -> None:
        if self._audio is None:
            return

        def acquire() -> None:
            self._tick_loop = self._audio.loop("tick")

        self._guard("start tick loop", acquire)

    def _explode(self) -> None:
        """Fire the one-shot blast sound and rumble."""
        if self._audio is not None:
            self._guard("blast sound", lambda: self._audio.play("blast"))
        if self._haptics is not None:
            self._guard("rumble", self._haptics.rumble)

    # ── Phase changes ─────────────────────────────────────────────────────────

    def _on_phase_change(self, previous: Phase, current: Phase) -> None:
        """React to a controller transition. All side effects live here."""
        self._clock = 0.0

        if previous is Phase.ACTIVE:
            self._release_tick_loop()

        if current is Phase.ACTIVE:
            logger.info("Round started")
            logger.debug("Countdown target %ss", self.controller.target)
            self.timer.start()
            if self._audio is not None:
                self._guard("start sound", lambda: self._audio.play("start"))
            self._acquire_tick_loop()

        elif current is Phase.FINISHED:
            logger.info("Boom after %ss", self.controller.elapsed)
            self.timer.stop()
            self._hold_left = EXPLOSION_HOLD_S
            self._explode()

        elif current is Phase.IDLE:
            self.timer.stop()
            self._hold_left = 0.0

    # ── Transitions ───────────────────────────────────────────────────────────

    def start_game(self) -> None:
        """Start a round. From ACTIVE this restarts with a new target."""
        self.controller.start()

    # ── Per-frame update ──────────────────────────────────────────────────────

    def update(self, dt: float, game_mouse_pos: tuple[int, int] | None = None) -> None:
        """Advance game logic by one frame.

        Args:
            dt:             Delta time in seconds since last frame.
            game_mouse_pos: Mouse position in native game coordinates, or
                            None if the cursor is outside the viewport.
        """
        self._clock += dt

        if self.phase is Phase.ACTIVE:
            self.timer.update(dt)

        elif self.phase is Phase.FINISHED:
            self._hold_left = max(0.0, self._hold_left - dt)
            if self._hold_left <= 0.0:
                self.controller.acknowledge_finish()

        elif self.phase is Phase.IDLE:
            self._hover = (game_mouse_pos is not None
                           and self._btn_rect.collidepoint(game_mouse_pos))

    # ── Event handling ────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route a pygame event.

        Mouse positions are expected to already be in game coordinates;
        main.py translates them through Viewport.to_game().

        Args:
            event: A pygame event.
        """
        if event.type in (pygame.JOYDEVICEADDED, pygame.JOYDEVICEREMOVED):
            if self._haptics is not None:
                self._guard("controller refresh", self._haptics.refresh)
            return

        # Only the title screen takes input — once lit, the bomb runs its course
        if self.phase is not Phase.IDLE:
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._btn_rect.collidepoint(event.pos):
                self.start_game()
        elif event.type == pygame.KEYDOWN and event.key in _START_KEYS:
            self.start_game()

    # ── Rendering ─────────────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current phase onto the native game surface."""
        if self.phase is Phase.IDLE:
            self._btn_rect = screens.draw_title(surface, hovered=self._hover)

        elif self.phase is Phase.ACTIVE:
            remaining = self.controller.remaining() if self.show_countdown else None
            screens.draw_active(surface, self._clock, self.beat(), remaining)

        elif self.phase is Phase.FINISHED:
            screens.draw_boom(surface, self._clock)

    # ── Shutdown ──────────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Stop the timer and release any playing loop before exit."""
        self.timer.stop()
        self._release_tick_loop()
