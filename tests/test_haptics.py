from __future__ import annotations

import pygame

from core.haptics import Haptics


class _Pad:
    def __init__(self, accepts=True, raises=False):
        self.accepts = accepts
        self.raises = raises
        self.calls = []

    def rumble(self, low, high, duration):
        if self.raises:
            raise pygame.error("rumble not supported")
        self.calls.append((low, high, duration))
        return self.accepts

    def stop_rumble(self):
        pass

    def get_name(self):
        return "Fake Pad"


def _haptics_with(pads) -> Haptics:
    haptics = Haptics()
    haptics._available = True
    haptics._pads = list(pads)
    return haptics


def test_no_controllers_means_no_rumble() -> None:
    assert Haptics().rumble() is False
    assert _haptics_with([]).rumble() is False


def test_rumble_reaches_every_pad_with_clamped_strength() -> None:
    a, b = _Pad(), _Pad(accepts=False)
    haptics = _haptics_with([a, b])
    assert haptics.rumble(strength=3.0, duration_ms=250) is True
    assert a.calls == [(1.0, 1.0, 250)]
    assert b.calls == [(1.0, 1.0, 250)]


def test_pad_errors_are_logged_not_raised(caplog) -> None:
    good, bad = _Pad(), _Pad(raises=True)
    haptics = _haptics_with([bad, good])
    assert haptics.rumble() is True
    assert "Rumble failed" in caplog.text


def test_init_failure_disables_haptics(monkeypatch, caplog) -> None:
    def broken_init():
        raise pygame.error("joystick subsystem unavailable")

    monkeypatch.setattr(pygame.joystick, "init", broken_init)
    haptics = Haptics()
    haptics.init()
    assert haptics.pad_count == 0
    assert haptics.rumble() is False
    assert "joystick init failed" in caplog.text


def test_refresh_enumerates_connected_pads(monkeypatch) -> None:
    monkeypatch.setattr(pygame.joystick, "get_count", lambda: 2)
    monkeypatch.setattr(pygame.joystick, "Joystick", lambda index: _Pad())
    haptics = Haptics()
    haptics._available = True
    haptics.refresh()
    assert haptics.pad_count == 2
