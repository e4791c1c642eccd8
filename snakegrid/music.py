"""Background music and sound effects."""

from __future__ import annotations

import logging
from typing import Optional

import pygame

log = logging.getLogger(__name__)

_FREQUENCY = 44100
_SAMPLE_SIZE = -16
_CHANNELS = 2
_BUFFER = 2048


class Music:
    """Owns the audio device, the looping background track and two effects.

    Failures to open the device or load a file are logged, and the missing
    sound is then simply not played.
    """

    def __init__(
        self,
        music_file: str = "music_snake.mp3",
        eating_file: str = "snake_eating.wav",
        collision_file: str = "snake_collision.mp3",
    ):
        self.available = False
        self.music_loaded = False
        self.eating_sound: Optional[pygame.mixer.Sound] = None
        self.collision_sound: Optional[pygame.mixer.Sound] = None
        try:
            pygame.mixer.init(_FREQUENCY, _SAMPLE_SIZE, _CHANNELS, _BUFFER)
        except pygame.error as exc:
            log.error("Cannot open audio: %s", exc)
            return
        self.available = True

        try:
            pygame.mixer.music.load(music_file)
            self.music_loaded = True
        except (pygame.error, OSError) as exc:
            log.error("Cannot load music %s: %s", music_file, exc)

        self.eating_sound = self._load_sound(eating_file)
        self.collision_sound = self._load_sound(collision_file)

    @staticmethod
    def _load_sound(filename: str) -> Optional[pygame.mixer.Sound]:
        try:
            return pygame.mixer.Sound(filename)
        except (pygame.error, OSError) as exc:
            log.error("Cannot load sound %s: %s", filename, exc)
            return None

    def __enter__(self) -> "Music":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def background_music(self) -> bool:
        """Loop the background track forever; return whether it started."""
        if not (self.available and self.music_loaded):
            return False
        pygame.mixer.music.play(-1)
        return True

    def stop(self) -> None:
        """Halt the background track."""
        if self.available:
            pygame.mixer.music.stop()

    @staticmethod
    def _play(sound: Optional[pygame.mixer.Sound]) -> bool:
        if sound is None:
            return False
        sound.play()
        return True

    def snake_collision(self) -> bool:
        """Play the collision effect once; return whether it was played."""
        return self.available and self._play(self.collision_sound)

    def snake_eating(self) -> bool:
        """Play the eating effect once; return whether it was played."""
        return self.available and self._play(self.eating_sound)

    def close(self) -> None:
        """Release every sound and close the audio device."""
        if not self.available:
            return
        pygame.mixer.music.stop()
        if self.music_loaded:
            pygame.mixer.music.unload()
        self.music_loaded = False
        self.eating_sound = None
        self.collision_sound = None
        self.available = False
        pygame.mixer.quit()