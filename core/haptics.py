"""
core/haptics.py — Controller rumble for Tick Tack Boom.

The explosion is felt as well as heard: one strong rumble on every
connected game controller that supports it. Haptics are strictly
best-effort — no controller, no rumble motor, or an SDL error all end
up as a logged no-op, never an exception in the game loop.

game.py forwards JOYDEVICEADDED / JOYDEVICEREMOVED events to refresh()
so controllers plugged in mid-session are picked up.

Usage:
    haptics = Haptics()
    haptics.init()
    haptics.rumble()
"""

from __future__ import annotations
import logging
import pygame

from settings import HAPTIC_STRENGTH, HAPTIC_DURATION_MS

logger = logging.getLogger(__name__)


class Haptics:
    """Rumble driver over pygame.joystick.

    Attributes:
        _pads:      Open pygame Joystick objects.
        _available: True if the joystick subsystem initialised.
    """

    def __init__(self) -> None:
        self._pads:      list = []
        self._available: bool = False

    @property
    def pad_count(self) -> int:
        return len(self._pads)

    def init(self) -> None:
        """Initialise the joystick subsystem and open every controller."""
        try:
            pygame.joystick.init()
            self._available = True
        except pygame.error as exc:
            self._available = False
            logger.warning("Haptics disabled, joystick init failed: %s", exc)
            return
        self.refresh()

    def refresh(self) -> None:
        """Re-enumerate connected controllers."""
        if not self._available:
            return
        pads = []
        try:
            for index in range(pygame.joystick.get_count()):
                pads.append(pygame.joystick.Joystick(index))
        except pygame.error as exc:
            logger.warning("Could not enumerate controllers: %s", exc)
        self._pads = pads
        logger.debug("%d controller(s) connected", len(pads))

    def rumble(
        self,
        strength: float = HAPTIC_STRENGTH,
        duration_ms: int = HAPTIC_DURATION_MS,
    ) -> bool:
        """Fire one rumble on every connected controller.

        Args:
            strength:    Motor intensity in [0.0, 1.0], used for both the
                         low and high frequency motors.
            duration_ms: Rumble length in milliseconds.

        Returns:
            True if at least one controller accepted the rumble.
        """
        if not self._available or not self._pads:
            return False

        strength = max(0.0, min(1.0, strength))
        accepted = False
        for pad in self._pads:
            try:
                if pad.rumble(strength, strength, duration_ms):
                    accepted = True
            except pygame.error as exc:
                logger.warning("Rumble failed on %s: %s", pad.get_name(), exc)
        if not accepted:
            logger.debug("No controller accepted the rumble")
        return accepted

    def quit(self) -> None:
        """Stop any running rumble and release the controllers."""
        for pad in self._pads:
            try:
                pad.stop_rumble()
            except pygame.error:
                logger.debug("stop_rumble failed on shutdown", exc_info=True)
        self._pads = []
        if self._available:
            pygame.joystick.quit()
            self._available = False
