import os
import wave
from unittest import mock

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from snakegrid.music import Music


def _write_wav(path):
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(22050)
        out.writeframes(b"\x00\x00" * 200)
    return str(path)


@pytest.fixture
def sound_files(tmp_path):
    return (
        _write_wav(tmp_path / "music.wav"),
        _write_wav(tmp_path / "eat.wav"),
        _write_wav(tmp_path / "hit.wav"),
    )


def test_loads_all_sounds(sound_files):
    with Music(*sound_files) as music:
        assert music.available is True
        assert music.music_loaded is True
        assert music.eating_sound.get_length() > 0
        assert music.collision_sound.get_length() > 0


def test_effects_play_when_loaded(sound_files):
    with Music(*sound_files) as music:
        assert music.snake_eating() is True
        assert music.snake_collision() is True


def test_background_music_starts_when_loaded(sound_files):
    with Music(*sound_files) as music:
        assert music.background_music() is True
        music.stop()
        assert music.available is True


def test_missing_files_are_skipped(tmp_path):
    with Music(
        str(tmp_path / "a.mp3"), str(tmp_path / "b.wav"), str(tmp_path / "c.mp3")
    ) as music:
        assert music.music_loaded is False
        assert music.eating_sound is None
        assert music.collision_sound is None
        assert music.background_music() is False
        assert music.snake_eating() is False
        assert music.snake_collision() is False


def test_audio_device_failure_is_tolerated(sound_files):
    with mock.patch.object(pygame.mixer, "init", side_effect=pygame.error("no audio")):
        music = Music(*sound_files)
    assert music.available is False
    assert music.snake_eating() is False
    assert music.background_music() is False


def test_close_releases_device(sound_files):
    music = Music(*sound_files)
    music.close()
    assert pygame.mixer.get_init() is None
    assert music.available is False
    assert music.snake_collision() is False


def test_close_twice_is_harmless(sound_files):
    music = Music(*sound_files)
    music.close()
    music.close()
    assert music.eating_sound is None