"""Procedural sound cues for Rainbow Snake: eat, crash and the sad guitar."""

from __future__ import annotations

import logging
import math
import random
from array import array
from dataclasses import dataclass

import pygame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tone:
    freq: float
    duration_ms: int
    partials: tuple[tuple[float, float], ...] = ((1.0, 1.0),)
    sweep: float = 0.0
    noise: float = 0.0
    attack: float = 0.02
    release: float = 0.3
    waveform: str = "square"  # "square", "triangle" or "sine"
    volume: float = 0.5


TONES: dict[str, Tone] = {
    # Low thump with a fast downward sweep, the "boom" when a fruit is eaten.
    "eat": Tone(
        freq=120,
        duration_ms=260,
        partials=((1.0, 1.0), (0.5, 0.6)),
        sweep=-70,
        noise=0.12,
        attack=0.005,
        release=0.6,
        waveform="sine",
        volume=0.8,
    ),
    "death": Tone(
        freq=330,
        duration_ms=420,
        partials=((1.0, 1.0), (2.0, 0.3)),
        sweep=-220,
        noise=0.2,
        attack=0.01,
        release=0.5,
        volume=0.6,
    ),
    # Detuned, out-of-tune strum queued after the death cue.
    "guitar": Tone(
        freq=196,
        duration_ms=900,
        partials=((1.0, 1.0), (1.26, 0.7), (1.52, 0.5), (2.03, 0.3)),
        sweep=-12,
        attack=0.002,
        release=0.85,
        waveform="triangle",
        volume=0.55,
    ),
}


class AudioEngine:
    """Mixer wrapper; silently disabled when no audio device is available."""

    def __init__(self, master_volume: float = 0.45) -> None:
        self.enabled = False
        self.master_volume = master_volume
        self.sample_rate = 32000
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        self._init_audio()

    def _init_audio(self) -> None:
        try:
            pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
        except pygame.error as exc:
            logger.warning("Audio disabled: %s", exc)
            return
        mixer_info = pygame.mixer.get_init()
        if mixer_info:
            self.sample_rate = mixer_info[0]
        self.sounds = {name: self._render(tone) for name, tone in TONES.items()}
        self.enabled = True

    def _render(self, tone: Tone) -> pygame.mixer.Sound:
        """Synthesize ``tone`` into a 16-bit mono buffer."""
        count = max(1, int(self.sample_rate * tone.duration_ms / 1000))
        attack = max(1, int(count * tone.attack))
        release_start = int(count * (1.0 - tone.release))
        samples = []
        for idx in range(count):
            t = idx / self.sample_rate
            freq = tone.freq + tone.sweep * (idx / count)
            value = 0.0
            for mult, weight in tone.partials:
                cycle = (freq * mult * t) % 1.0
                if tone.waveform == "square":
                    wave = 1.0 if cycle < 0.5 else -1.0
                elif tone.waveform == "triangle":
                    wave = 4.0 * abs(cycle - 0.5) - 1.0
                else:
                    wave = math.sin(2.0 * math.pi * cycle)
                value += weight * wave
            if tone.noise:
                value += tone.noise * (random.random() * 2.0 - 1.0)

            if idx < attack:
                env = idx / attack
            elif idx >= release_start:
                env = 1.0 - (idx - release_start) / max(1, count - release_start)
            else:
                env = 1.0
            samples.append(value * env)

        peak = max((abs(val) for val in samples), default=1.0) or 1.0
        scale = 32767 * tone.volume * self.master_volume / peak
        buffer = array("h", (int(max(-32767, min(32767, val * scale))) for val in samples))
        return pygame.mixer.Sound(buffer=buffer)

    def play(self, name: str) -> pygame.mixer.Channel | None:
        if not self.enabled:
            return None
        sound = self.sounds.get(name)
        if sound is None:
            return None
        try:
            return sound.play()
        except pygame.error as exc:
            logger.warning("Audio disabled after playback error: %s", exc)
            self.enabled = False
            return None

    def play_game_over(self) -> None:
        """Death cue, followed on the same channel by the guitar."""
        channel = self.play("death")
        if channel is not None and "guitar" in self.sounds:
            channel.queue(self.sounds["guitar"])
