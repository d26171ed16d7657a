"""
core/audio.py — Audio manager for Tick Tack Boom.

Generates every sound programmatically with pure Python math — no numpy,
no audio files. Compatible with both CPython and pygbag WASM.

Sound design:
    start  — 200→800Hz sine sweep          — round begins
    tick   — tick/tock clicks, 1s long      — looped for the whole round,
                                              one tick-tock per game second
    blast  — decaying noise + 55Hz rumble   — the bomb goes off

Samples are built at whatever rate and channel count the mixer actually
opened with, so durations hold even when pygame.init() got to the mixer
first with its own defaults. main.py still calls Audio.pre_init() before
pygame.init() to ask for SAMPLE_RATE.

One-shot cues go through play(). The ticking is a looping sound owned by
whoever starts it: loop() hands back a Playback handle that must be
stopped when the round ends, so the sound's lifetime is tied to the
phase rather than to a global player.

Usage:
    Audio.pre_init()
    pygame.init()
    audio = Audio()
    audio.init()
    with audio.loop("tick"):
        ...
    audio.play("blast")
"""

from __future__ import annotations
import logging
import math
import random
import struct
import pygame

logger = logging.getLogger(__name__)

# ── Synthesis constants ───────────────────────────────────────────────────────
SAMPLE_RATE  = 22050   # requested mixer rate
_MAX_AMP     = 32767   # int16 max
_NOISE_SEED  = 1945    # fixed so the blast sounds the same every run


def _pack(samples: list[float], channels: int = 2) -> bytes:
    """Pack float samples [-1.0, 1.0] into signed 16-bit interleaved PCM bytes.

    Mono samples are duplicated across every mixer channel.
    """
    fmt = "<" + "h" * channels
    out = bytearray()
    for s in samples:
        v = int(max(-1.0, min(1.0, s)) * _MAX_AMP)
        out += struct.pack(fmt, *([v] * channels))
    return bytes(out)


def _sine(freq: float, duration: float, rate: int, volume: float = 0.3) -> list[float]:
    n = int(rate * duration)
    step = 2 * math.pi * freq / rate
    return [volume * math.sin(step * i) for i in range(n)]


def _click(freq: float, duration: float, rate: int, volume: float = 0.4) -> list[float]:
    """Generate a percussive square click with a fast exponential decay.

    Args:
        freq:     Frequency in Hz.
        duration: Duration in seconds.
        rate:     Sample rate in Hz.
        volume:   Peak amplitude in [0.0, 1.0].

    Returns:
        List of float samples.
    """
    n = int(rate * duration)
    period = rate / freq
    samples = []
    for i in range(n):
        env = math.exp(-6.0 * i / n)
        samples.append(volume * env * (1.0 if (i % period) < (period / 2) else -1.0))
    return samples


def _sweep(f_start: float, f_end: float, duration: float, rate: int,
           volume: float = 0.3) -> list[float]:
    """Generate a linear sine glide between two frequencies."""
    n = int(rate * duration)
    samples = []
    phase = 0.0
    for i in range(n):
        freq = f_start + (f_end - f_start) * (i / n)
        phase += 2 * math.pi * freq / rate
        samples.append(volume * math.sin(phase))
    return samples


def _noise(duration: float, rate: int, volume: float, decay: float,
           rng: random.Random) -> list[float]:
    """Generate white noise shaped by an exponential decay envelope.

    Args:
        duration: Duration in seconds.
        rate:     Sample rate in Hz.
        volume:   Peak amplitude in [0.0, 1.0].
        decay:    Envelope steepness. Higher dies away faster.
        rng:      Random source for the noise samples.

    Returns:
        List of float samples.
    """
    n = int(rate * duration)
    return [volume * math.exp(-decay * i / n) * rng.uniform(-1.0, 1.0) for i in range(n)]


def _mix(*parts: list[float]) -> list[float]:
    """Sum sample lists of possibly different lengths, padding with silence."""
    length = max((len(p) for p in parts), default=0)
    out = [0.0] * length
    for p in parts:
        for i, s in enumerate(p):
            out[i] += s
    return out


def _pad_to(samples: list[float], duration: float, rate: int) -> list[float]:
    """Right-pad (or trim) a sample list to exactly duration seconds."""
    n = int(rate * duration)
    return (samples + [0.0] * n)[:n]


def _fade_out(samples: list[float], rate: int, tail: float = 0.05) -> list[float]:
    """Linearly fade the last `tail` seconds to avoid a click at the end."""
    fade_n = min(int(rate * tail), len(samples))
    result = list(samples)
    start = len(result) - fade_n
    for i in range(fade_n):
        result[start + i] *= 1.0 - i / fade_n
    return result


def synthesize(rate: int = SAMPLE_RATE) -> dict[str, list[float]]:
    """Build the float sample data for every game sound.

    Kept separate from Audio so the waveforms can be inspected without
    an initialised mixer.

    Args:
        rate: Sample rate in Hz the samples will be played back at.

    Returns:
        Dict mapping sound name → float sample list.
    """
    rng = random.Random(_NOISE_SEED)

    # tick — high "tick" on the beat, lower "tock" half a second later.
    # Exactly one second long so the loop stays in step with game ticks.
    tick_half = _pad_to(_click(2200, 0.02, rate, volume=0.35), 0.5, rate)
    tock_half = _pad_to(_click(1600, 0.02, rate, volume=0.30), 0.5, rate)

    return {
        "start": _fade_out(_sweep(200, 800, 0.25, rate, volume=0.30), rate),
        "tick":  tick_half + tock_half,
        "blast": _fade_out(_mix(
            _noise(1.2, rate, volume=0.55, decay=5.0, rng=rng),
            _sine(55, 1.2, rate, volume=0.25),
            _sweep(180, 40, 0.6, rate, volume=0.2),
        ), rate, tail=0.3),
    }


# ── Scoped playback ───────────────────────────────────────────────────────────

class Playback:
    """Handle to a looping sound, released when its owner's phase ends.

    stop() is idempotent. A handle created while audio is unavailable is
    inert: it reports not playing and stop() does nothing.

    Attributes:
        name:     Sound name this handle plays.
        _channel: pygame mixer Channel, or None if nothing is playing.
    """

    def __init__(self, name: str, channel: pygame.mixer.Channel | None) -> None:
        self.name = name
        self._channel = channel

    @property
    def playing(self) -> bool:
        return self._channel is not None

    def stop(self) -> None:
        """Stop the sound and release the channel."""
        if self._channel is None:
            return
        try:
            self._channel.stop()
        except pygame.error as exc:
            logger.warning("Could not stop %s playback: %s", self.name, exc)
        self._channel = None

    def __enter__(self) -> Playback:
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()


# ── Audio manager ─────────────────────────────────────────────────────────────

class Audio:
    """Manages all game audio. Pure Python synthesis, no numpy required.

    Attributes:
        _sounds:      Dict mapping sound name → pygame.mixer.Sound.
        _mixer_open:  True once this manager opened pygame.mixer.
        _available:   True if the mixer is open and every sound was built.
    """

    def __init__(self) -> None:
        """Create an uninitialised Audio manager. Call init() before use."""
        self._sounds:     dict[str, pygame.mixer.Sound] = {}
        self._mixer_open: bool = False
        self._available:  bool = False

    @staticmethod
    def pre_init() -> None:
        """Request SAMPLE_RATE stereo int16. Must run before pygame.init()."""
        pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 512)

    @property
    def available(self) -> bool:
        return self._available

    def init(self) -> None:
        """Open pygame.mixer and synthesize all sounds at its real format.

        Safe to call multiple times. Logs and stays silent if the mixer
        cannot be opened (no audio device, headless CI) or the sounds
        cannot be built; in the latter case the mixer is closed again.
        """
        if self._available:
            return
        try:
            if not pygame.mixer.get_init():
                self.pre_init()
            pygame.mixer.init()
            self._mixer_open = True
        except pygame.error as exc:
            logger.warning("Audio disabled, mixer init failed: %s", exc)
            return

        rate, _size, channels = pygame.mixer.get_init()
        try:
            self._sounds = {
                name: pygame.mixer.Sound(buffer=_pack(samples, channels))
                for name, samples in synthesize(rate).items()
            }
        except pygame.error as exc:
            logger.warning("Audio disabled, could not build sounds: %s", exc)
            self._sounds = {}
            self.quit()
            return

        self._available = True
        logger.debug("Audio ready at %d Hz x%d: %s",
                     rate, channels, ", ".join(sorted(self._sounds)))

    def play(self, name: str) -> None:
        """Play a one-shot sound by name. Silent no-op if unavailable or unknown.

        Args:
            name: One of: start, tick, blast.
        """
        if not self._available:
            return
        sound = self._sounds.get(name)
        if sound is None:
            logger.warning("Unknown sound %r", name)
            return
        sound.play()

    def loop(self, name: str) -> Playback:
        """Start a sound looping indefinitely and return its handle.

        Args:
            name: Sound name, normally "tick".

        Returns:
            Playback handle. Inert if audio is unavailable, the name is
            unknown, or no mixer channel was free.
        """
        if not self._available:
            return Playback(name, None)
        sound = self._sounds.get(name)
        if sound is None:
            logger.warning("Unknown sound %r", name)
            return Playback(name, None)
        return Playback(name, sound.play(loops=-1))

    def quit(self) -> None:
        """Shut down pygame.mixer cleanly on game exit."""
        self._available = False
        if self._mixer_open:
            pygame.mixer.quit()
            self._mixer_open = False
