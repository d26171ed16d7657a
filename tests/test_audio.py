from __future__ import annotations

import pygame
import pytest

from core import audio as audio_mod
from core.audio import Audio, Playback, synthesize


def test_synthesized_sounds_fit_pcm_range() -> None:
    sounds = synthesize()
    assert set(sounds) == {"start", "tick", "blast"}
    for samples in sounds.values():
        assert samples
        assert all(abs(s) <= 1.01 for s in samples)


def test_tick_loop_lasts_exactly_one_tick_at_any_rate() -> None:
    assert len(synthesize()["tick"]) == audio_mod.SAMPLE_RATE
    assert len(synthesize(44100)["tick"]) == 44100


def test_blast_is_deterministic() -> None:
    assert synthesize()["blast"] == synthesize()["blast"]


def test_pack_is_stereo_int16_and_clamps() -> None:
    data = audio_mod._pack([0.0, 2.0, -2.0])
    assert len(data) == 3 * 4
    assert data[4:8] == (32767).to_bytes(2, "little", signed=True) * 2
    assert data[8:12] == (-32767).to_bytes(2, "little", signed=True) * 2


def test_pack_mono_writes_one_frame_per_sample() -> None:
    assert len(audio_mod._pack([0.0, 0.5, -0.5], channels=1)) == 3 * 2


def test_uninitialised_audio_is_silent() -> None:
    audio = Audio()
    assert not audio.available
    audio.play("blast")
    handle = audio.loop("tick")
    assert not handle.playing
    handle.stop()
    audio.quit()


def test_mixer_failure_leaves_audio_disabled(monkeypatch, caplog) -> None:
    def broken_init(*args, **kwargs):
        raise pygame.error("no audio device")

    monkeypatch.setattr(pygame.mixer, "init", broken_init)
    audio = Audio()
    audio.init()
    assert not audio.available
    assert "mixer init failed" in caplog.text


def test_sound_build_failure_still_closes_mixer(monkeypatch, caplog) -> None:
    quits = []

    def broken_sound(*args, **kwargs):
        raise pygame.error("bad buffer")

    monkeypatch.setattr(pygame.mixer, "get_init", lambda: (44100, -16, 2))
    monkeypatch.setattr(pygame.mixer, "init", lambda *args, **kwargs: None)
    monkeypatch.setattr(pygame.mixer, "Sound", broken_sound)
    monkeypatch.setattr(pygame.mixer, "quit", lambda: quits.append(True))

    audio = Audio()
    audio.init()
    assert not audio.available
    assert "could not build sounds" in caplog.text
    assert quits == [True]

    audio.quit()
    assert quits == [True]


def test_tick_plays_one_second_after_pygame_init(pygame_with_mixer) -> None:
    audio = Audio()
    audio.init()
    if not audio.available:
        pytest.skip("no audio device")
    try:
        assert abs(audio._sounds["tick"].get_length() - 1.0) < 0.01
    finally:
        audio.quit()


class _Channel:
    def __init__(self):
        self.stops = 0

    def stop(self):
        self.stops += 1


def test_playback_stop_is_idempotent_and_scoped() -> None:
    channel = _Channel()
    with Playback("tick", channel) as handle:
        assert handle.playing
    assert not handle.playing
    handle.stop()
    assert channel.stops == 1
