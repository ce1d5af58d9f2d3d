"""Background music and the word-typed cue, on top of pygame.mixer."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pygame

from typeracer.signals import WORD_TYPED, SignalBus
from typeracer_ui.constants import (
    INITIAL_VOLUME,
    MUSIC_FILE,
    TYPED_SOUND_FILE,
    VOLUME_STEP,
)

logger = logging.getLogger(__name__)


class AudioPlayer:
    """Plays the cue for each typed word and keeps the volume setting.

    With ``enabled=False``, or when the mixer or a sound file is not
    available, it stays silent but still tracks volume.
    """

    def __init__(
        self,
        enabled: bool = True,
        volume: float = INITIAL_VOLUME,
        music: Path = MUSIC_FILE,
        cue: Path = TYPED_SOUND_FILE,
    ) -> None:
        self.volume = volume
        self._cue: pygame.mixer.Sound | None = None
        self._music = False
        if enabled:
            self._open(music, cue)

    def _open(self, music: Path, cue: Path) -> None:
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("audio disabled: %s", exc)
            return
        if cue.is_file():
            self._cue = pygame.mixer.Sound(str(cue))
        else:
            logger.warning("no typed-word sound at %s", cue)
        if music.is_file():
            pygame.mixer.music.load(str(music))
            pygame.mixer.music.play(-1)
            self._music = True
        else:
            logger.warning("no background music at %s", music)
        self._apply_volume()

    @property
    def active(self) -> bool:
        return self._cue is not None or self._music

    def _apply_volume(self) -> None:
        if self._music:
            pygame.mixer.music.set_volume(self.volume)
        if self._cue is not None:
            self._cue.set_volume(self.volume)

    def volume_up(self) -> None:
        if self.volume + VOLUME_STEP <= 1.0:
            self.volume += VOLUME_STEP
            self._apply_volume()

    def volume_down(self) -> None:
        if self.volume - VOLUME_STEP >= 0.0:
            self.volume -= VOLUME_STEP
            self._apply_volume()

    def close(self) -> None:
        """Stop the music and release the mixer."""
        if self._music:
            pygame.mixer.music.stop()
            self._music = False
        self._cue = None
        if pygame.mixer.get_init():
            pygame.mixer.quit()

    def play_cue(self) -> None:
        if self._cue is not None:
            self._cue.play()

    def attach(self, bus: SignalBus) -> None:
        """Play the cue whenever the core reports a typed word."""

        def _on_typed(signal: str, data: dict[str, Any]) -> None:
            self.play_cue()

        bus.subscribe(WORD_TYPED, _on_typed)
