"""
Procedurally generated sound effects for Fronton.

The three clips (hit, miss, match over) are synthesized with numpy at
startup, so the game ships without audio assets. Playback goes through
pygame mixer channels and never blocks the frame loop.
"""

from typing import Dict, Optional, Sequence

import numpy as np
import pygame

from fronton import config
from fronton.logging import get_logger
from fronton.models import MatchEvent

log = get_logger('sounds')

SAMPLE_RATE = 22050


def _apply_envelope(wave: np.ndarray, fade_in: float, fade_out: float) -> np.ndarray:
    """Fade the start and end of a wave to avoid clicks.

    Args:
        wave: Float samples in [-1, 1]
        fade_in: Fraction of samples to fade in
        fade_out: Fraction of samples to fade out

    Returns:
        The enveloped wave
    """
    num_samples = len(wave)
    envelope = np.ones(num_samples)
    fade_in_samples = int(num_samples * fade_in)
    fade_out_samples = int(num_samples * fade_out)
    if fade_in_samples:
        envelope[:fade_in_samples] = np.linspace(0, 1, fade_in_samples)
    if fade_out_samples:
        envelope[-fade_out_samples:] = np.linspace(1, 0, fade_out_samples)
    return wave * envelope


def _to_pcm16(wave: np.ndarray, volume: float) -> np.ndarray:
    """Scale float samples to 16-bit integers."""
    return (np.clip(wave, -1.0, 1.0) * 32767 * volume).astype(np.int16)


def synthesize_sweep(
    frequency_start: float,
    frequency_end: float,
    duration: float,
    volume: float = 0.3,
    sample_rate: int = SAMPLE_RATE,
) -> np.ndarray:
    """Generate a mono sine tone sweeping between two frequencies.

    Args:
        frequency_start: Start frequency in Hz
        frequency_end: End frequency in Hz
        duration: Length in seconds
        volume: Peak amplitude (0-1)
        sample_rate: Samples per second

    Returns:
        int16 mono samples
    """
    num_samples = int(sample_rate * duration)
    frequencies = np.linspace(frequency_start, frequency_end, num_samples)
    phase = np.cumsum(2.0 * np.pi * frequencies / sample_rate)
    wave = _apply_envelope(np.sin(phase), fade_in=0.05, fade_out=0.2)
    return _to_pcm16(wave, volume)


def synthesize_arpeggio(
    frequencies: Sequence[float],
    duration: float,
    volume: float = 0.35,
    sample_rate: int = SAMPLE_RATE,
) -> np.ndarray:
    """Generate a mono sequence of equal-length notes.

    Args:
        frequencies: Note frequencies in Hz, played in order
        duration: Total length in seconds
        volume: Peak amplitude (0-1)
        sample_rate: Samples per second

    Returns:
        int16 mono samples
    """
    samples_per_note = int(sample_rate * duration) // len(frequencies)
    t = np.arange(samples_per_note) / sample_rate
    notes = [
        _apply_envelope(np.sin(2.0 * np.pi * freq * t), fade_in=0.1, fade_out=0.1)
        for freq in frequencies
    ]
    return _to_pcm16(np.concatenate(notes), volume)


class SoundBank:
    """One clip per MatchEvent kind.

    If the mixer cannot be opened (no audio device, headless CI) the bank
    logs a warning and stays silent.

    Examples:
        >>> bank = SoundBank(audio_enabled=False)
        >>> bank.play(MatchEvent.BALL_HIT)  # no-op
    """

    def __init__(self, audio_enabled: bool = True, volume: float = config.SFX_VOLUME):
        """Initialize the bank, generating sounds if audio is enabled.

        Args:
            audio_enabled: Whether to open the mixer at all
            volume: Playback volume for every clip (0-1)
        """
        self.audio_enabled = audio_enabled and config.AUDIO_ENABLED
        self.sounds: Dict[MatchEvent, Optional[pygame.mixer.Sound]] = {}
        self._volume = volume

        if self.audio_enabled:
            self._init_audio()

    def _init_audio(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            frequency, _, channels = pygame.mixer.get_init()

            clips = {
                # short bright beep
                MatchEvent.BALL_HIT: synthesize_sweep(880.0, 880.0, 0.08, sample_rate=frequency),
                # falling blip
                MatchEvent.BALL_MISS: synthesize_sweep(784.0, 196.0, 0.18, volume=0.25,
                                                       sample_rate=frequency),
                # rising C major arpeggio
                MatchEvent.MATCH_OVER: synthesize_arpeggio(
                    [523.25, 659.25, 783.99, 1046.50], 0.5, sample_rate=frequency),
            }
            for event, mono in clips.items():
                self.sounds[event] = self._make_sound(mono, channels)
        except pygame.error as e:
            log.warning("Audio initialization failed, continuing without sound: %s", e)
            self.audio_enabled = False
            self.sounds = {}

    def _make_sound(self, mono: np.ndarray, channels: int) -> pygame.mixer.Sound:
        samples = mono if channels == 1 else np.column_stack([mono] * channels)
        sound = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
        sound.set_volume(self._volume)
        return sound

    def play(self, event: MatchEvent) -> None:
        """Play the clip for an event.

        Safe to call even if audio is disabled.
        """
        sound = self.sounds.get(event)
        if self.audio_enabled and sound is not None:
            sound.play()
