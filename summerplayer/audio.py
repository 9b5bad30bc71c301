"""Audio playback through pygame and track metadata probing."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import wave  # noqa: E402
from dataclasses import dataclass  # noqa: E402
from pathlib import Path  # noqa: E402

import pygame  # noqa: E402

from summerplayer.controller import PlaybackState  # noqa: E402
from summerplayer.formatting import format_duration, format_file_size  # noqa: E402

UNKNOWN_DURATION = "未知时长"
UNKNOWN_BITRATE = "未知比特率"


class PygameBackend:
    """Plays one track at a time with ``pygame.mixer.music``.

    The mixer is opened on first use, so creating a backend needs no audio
    device. Positions are in milliseconds, volume runs from 0.0 to 1.0.
    """

    def __init__(self) -> None:
        self._state = PlaybackState.STOPPED
        self._volume = 1.0
        self._offset = 0
        self._loaded = False

    def _music(self):
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.music

    def load(self, path) -> None:
        """Make ``path`` the current source, stopped at its start."""
        music = self._music()
        music.stop()
        music.load(str(path))
        music.set_volume(self._volume)
        self._loaded = True
        self._state = PlaybackState.STOPPED
        self._offset = 0

    def play(self) -> None:
        """Start or resume the current source; nothing happens without one."""
        if not self._loaded:
            return
        music = self._music()
        if self._state is PlaybackState.PAUSED:
            music.unpause()
        elif self._state is PlaybackState.STOPPED:
            music.play(start=self._offset / 1000)
        self._state = PlaybackState.PLAYING

    def pause(self) -> None:
        """Pause playback if it is running."""
        if self._state is PlaybackState.PLAYING:
            self._music().pause()
            self._state = PlaybackState.PAUSED

    def stop(self) -> None:
        """Stop playback and rewind to the start."""
        if self._loaded:
            self._music().stop()
        self._state = PlaybackState.STOPPED
        self._offset = 0

    def set_volume(self, volume: float) -> None:
        """Set the output volume, clamped to 0.0-1.0."""
        self._volume = min(max(float(volume), 0.0), 1.0)
        if pygame.mixer.get_init():
            pygame.mixer.music.set_volume(self._volume)

    def volume(self) -> float:
        return self._volume

    def set_position(self, position: int) -> None:
        """Move to ``position`` milliseconds, keeping the playback state."""
        self._offset = max(0, int(position))
        if not self._loaded or self._state is PlaybackState.STOPPED:
            return
        music = self._music()
        music.play(start=self._offset / 1000)
        if self._state is PlaybackState.PAUSED:
            music.pause()

    def position(self) -> int:
        """Current playback position in milliseconds."""
        if self._state is PlaybackState.STOPPED or not pygame.mixer.get_init():
            return self._offset
        return self._offset + max(int(pygame.mixer.music.get_pos()), 0)

    def state(self) -> PlaybackState:
        return self._state

    def finished(self) -> bool:
        """Report, once, that a playing track has run to its end."""
        if self._state is not PlaybackState.PLAYING:
            return False
        if self._music().get_busy():
            return False
        self._state = PlaybackState.STOPPED
        self._offset = 0
        return True


@dataclass(frozen=True)
class TrackInfo:
    """What the track list shows about one audio file."""

    path: str
    name: str
    folder: str
    size: str
    duration: str
    bitrate: str
    duration_ms: int | None = None

    @property
    def info_text(self) -> str:
        return f"时长: {self.duration}\n比特率: {self.bitrate}"


def _probe(file: Path) -> tuple[int | None, int | None]:
    """Return (duration in ms, bitrate in bit/s), each None when unknown."""
    if file.suffix.lower() == ".wav":
        try:
            with wave.open(str(file), "rb") as reader:
                rate = reader.getframerate()
                if rate:
                    duration = reader.getnframes() * 1000 // rate
                    bitrate = rate * reader.getnchannels() * reader.getsampwidth() * 8
                    return duration, bitrate
        except (wave.Error, EOFError, OSError):
            pass
        return None, None
    if pygame.mixer.get_init():
        try:
            return int(pygame.mixer.Sound(str(file)).get_length() * 1000), None
        except (pygame.error, OSError):
            pass
    return None, None


def describe_track(path) -> TrackInfo:
    """Collect name, folder, size, duration and bitrate of an audio file."""
    file = Path(path)
    if not file.is_file():
        raise FileNotFoundError(str(path))
    duration_ms, bitrate = _probe(file)
    return TrackInfo(
        path=str(path),
        name=file.name,
        folder=str(file.parent),
        size=format_file_size(file.stat().st_size),
        duration=format_duration(duration_ms) if duration_ms is not None else UNKNOWN_DURATION,
        bitrate=f"{bitrate // 1000} kbps" if bitrate else UNKNOWN_BITRATE,
        duration_ms=duration_ms,
    )