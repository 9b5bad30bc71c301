"""Player logic independent of any widget toolkit or audio library."""

from __future__ import annotations

import enum
import os
import random
from pathlib import Path
from typing import Protocol

from summerplayer.playlist import PlayMode, Playlist, scan_audio_files

NOW_PLAYING_PREFIX = "正在播放："


class NoAudioError(Exception):
    """Raised when an action needs tracks but none are loaded."""


class PlaybackState(enum.Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class _AudioBackend(Protocol):
    def load(self, path: str) -> None: ...
    def play(self) -> None: ...
    def pause(self) -> None: ...
    def stop(self) -> None: ...
    def set_volume(self, volume: float) -> None: ...
    def volume(self) -> float: ...
    def set_position(self, position: int) -> None: ...
    def position(self) -> int: ...
    def state(self) -> PlaybackState: ...
    def finished(self) -> bool: ...


class PlayerController:
    """Drives an audio backend from user actions and playback events."""

    def __init__(self, backend: _AudioBackend, rng: random.Random | None = None) -> None:
        self.backend = backend
        self.rng = rng if rng is not None else random.Random()
        self.playlist = Playlist()
        self.mode = PlayMode.LIST_LOOP
        self.volume = 0.5
        self._now_playing = ""

    def import_folder(self, folder) -> list[str]:
        """Replace the playlist with the audio files found in ``folder``."""
        files = scan_audio_files(folder) if folder else []
        self.playlist.load(files)
        if folder and not files:
            raise NoAudioError(f"No audio file in {folder}")
        return files

    def play_pause(self) -> PlaybackState:
        """Toggle between playing and paused; start the current track if stopped."""
        if not self.playlist:
            raise NoAudioError("No audio file, you need to import first.")
        state = self.backend.state()
        if state is PlaybackState.PLAYING:
            self.backend.pause()
        elif state is PlaybackState.PAUSED:
            self.backend.play()
        else:
            self._start(self.playlist.current())
        self._show_current()
        return self.backend.state()

    def next_track(self) -> str:
        """Play the next track, wrapping to the first."""
        if not self.playlist:
            raise NoAudioError("No audio file")
        path = self.playlist.advance()
        self._start(path)
        self._show_current()
        return path

    def previous_track(self) -> str:
        """Play the previous track, wrapping to the last."""
        if not self.playlist:
            raise NoAudioError("No audio file")
        path = self.playlist.retreat()
        self._start(path)
        self._show_current()
        return path

    def play_path(self, path: str) -> bool:
        """Play a file chosen from the track list; False if it does not exist."""
        if not path or not os.path.exists(path):
            return False
        self._start(path)
        self.playlist.select(path)
        self._show_current()
        return True

    def on_end_of_media(self) -> None:
        """Continue playback according to the current play mode."""
        if self.mode is PlayMode.LIST_LOOP:
            self.next_track()
        elif self.mode is PlayMode.SINGLE_LOOP:
            self.backend.set_position(0)
            self.backend.play()
        else:
            path = self.playlist.choose_random(self.rng)
            if path is not None:
                self._start(path)

    def set_slider_volume(self, value: int) -> bool:
        """Apply a 0-100 slider value; return True when it means muted."""
        self.volume = value / 100.0
        self.backend.set_volume(self.volume)
        return value == 0

    def toggle_mute(self) -> bool:
        """Mute, or restore the slider volume; return True when now muted."""
        if self.backend.volume() == 0:
            self.backend.set_volume(self.volume)
            return False
        self.backend.set_volume(0.0)
        return True

    def cycle_mode(self) -> PlayMode:
        """Switch to the next play mode and return it."""
        self.mode = self.mode.following()
        return self.mode

    def seek(self, position: int) -> None:
        """Move playback to ``position`` milliseconds."""
        self.backend.set_position(position)

    def now_playing_text(self) -> str:
        """Label text naming the track last shown as playing."""
        return self._now_playing

    def _start(self, path: str) -> None:
        self.backend.load(path)
        self.backend.play()

    def _show_current(self) -> None:
        path = self.playlist.current()
        if path is not None:
            self._now_playing = NOW_PLAYING_PREFIX + Path(path).name