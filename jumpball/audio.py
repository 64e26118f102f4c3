"""Background music playback through the pygame mixer."""

from __future__ import annotations

import os

import pygame

FREQUENCY = 44100
SAMPLE_SIZE = -16
CHANNELS = 2
BUFFER_SIZE = 2048


class AudioError(RuntimeError):
    """Raised when the mixer cannot be started or music cannot be used."""


def init_audio() -> None:
    """Open the audio device: 44.1 kHz, signed 16-bit, stereo."""
    try:
        pygame.mixer.init(
            frequency=FREQUENCY, size=SAMPLE_SIZE, channels=CHANNELS, buffer=BUFFER_SIZE
        )
    except pygame.error as exc:
        raise AudioError(f"Mixer could not initialize: {exc}") from exc


def load_music(path: str | os.PathLike[str]) -> None:
    """Load the music track that `play_music` will loop."""
    try:
        pygame.mixer.music.load(os.fspath(path))
    except pygame.error as exc:
        raise AudioError(f"Failed to load music {os.fspath(path)}: {exc}") from exc


def play_music() -> None:
    """Loop the loaded track forever unless something is already playing."""
    try:
        if not pygame.mixer.music.get_busy():
            pygame.mixer.music.play(-1)
    except pygame.error as exc:
        raise AudioError(f"Cannot play music: {exc}") from exc


def close_audio() -> None:
    """Release the music and close the audio device; safe to call twice."""
    if pygame.mixer.get_init() is None:
        return
    pygame.mixer.music.stop()
    pygame.mixer.music.unload()
    pygame.mixer.quit()