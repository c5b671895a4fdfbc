"""Sound cues for jump, level-up and game-over."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

import pygame

logger = logging.getLogger(__name__)

CUE_NAMES = ("jump", "level-up", "game-over")


class CuePlayer(Protocol):
    """Fire-and-forget sound playback."""

    def play(self, name: str) -> None:
        """Play the named cue without blocking."""


class NullCuePlayer(CuePlayer):
    """Plays nothing. Used headless and with ``--mute``."""

    def play(self, name: str) -> None:
        return None


class SoundCuePlayer(CuePlayer):
    """Plays ``<name>.wav``/``.ogg``/``.mp3`` from the sounds folder via pygame.mixer.

    Cues whose file is missing stay silent, as does everything when the mixer
    cannot be opened (no audio device).
    """

    extensions = (".wav", ".ogg", ".mp3")

    def __init__(self, sound_root: Optional[Path] = None) -> None:
        self.sound_root = sound_root or Path(__file__).resolve().parent.parent / "assets" / "sounds"
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("Audio disabled: %s", exc)
            return

        for name in CUE_NAMES:
            sound = self._load(name)
            if sound is not None:
                self.sounds[name] = sound

    def _load(self, name: str) -> Optional[pygame.mixer.Sound]:
        for ext in self.extensions:
            path = self.sound_root / f"{name}{ext}"
            if path.exists():
                return pygame.mixer.Sound(str(path))
        logger.warning("No sound file for cue %r under %s", name, self.sound_root)
        return None

    def play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()
