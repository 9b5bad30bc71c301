"""Play modes, audio folder scanning and the playlist cursor."""

from __future__ import annotations

import enum
import random
from pathlib import Path
from typing import Iterable, Iterator

AUDIO_SUFFIXES = (".mp3", ".wav", ".ogg")


class PlayMode(enum.Enum):
    """What happens when a track reaches its end."""

    LIST_LOOP = "list_loop"
    SINGLE_LOOP = "single_loop"
    RANDOM_PLAY = "random_play"

    def following(self) -> "PlayMode":
        """The mode the mode button switches to next."""
        order = list(PlayMode)
        return order[(order.index(self) + 1) % len(order)]

    @property
    def icon(self) -> str:
        """Icon resource name shown on the mode button."""
        return _MODE_ICONS[self]


_MODE_ICONS = {
    PlayMode.LIST_LOOP: "repeat.png",
    PlayMode.SINGLE_LOOP: "repeat-one.png",
    PlayMode.RANDOM_PLAY: "random.png",
}


def scan_audio_files(folder) -> list[str]:
    """Return the audio files directly inside ``folder``, sorted by path."""
    if not folder:
        return []
    root = Path(folder)
    if not root.is_dir():
        return []
    return sorted(
        str(entry)
        for entry in root.iterdir()
        if entry.is_file() and entry.name.lower().endswith(AUDIO_SUFFIXES)
    )


class Playlist:
    """An ordered list of track paths with a current position."""

    def __init__(self, files: Iterable[str] = ()) -> None:
        self._files: list[str] = list(files)
        self.index = 0

    def load(self, files: Iterable[str]) -> None:
        """Replace the tracks and move back to the first one."""
        self._files = list(files)
        self.index = 0

    def current(self) -> str | None:
        """The current track, or None when the position is out of range."""
        if 0 <= self.index < len(self._files):
            return self._files[self.index]
        return None

    def advance(self) -> str:
        """Move to the next track, wrapping to the first."""
        if not self._files:
            raise IndexError("playlist is empty")
        self.index = self.index + 1 if self.index < len(self._files) - 1 else 0
        return self._files[self.index]

    def retreat(self) -> str:
        """Move to the previous track, wrapping to the last."""
        if not self._files:
            raise IndexError("playlist is empty")
        self.index = self.index - 1 if self.index > 0 else len(self._files) - 1
        return self._files[self.index]

    def choose_random(self, rng: random.Random) -> str | None:
        """Jump to a random track; None when the playlist is empty."""
        if not self._files:
            return None
        self.index = rng.randrange(len(self._files))
        return self._files[self.index]

    def select(self, path: str) -> bool:
        """Make the first entry equal to ``path`` current; False if absent."""
        try:
            self.index = self._files.index(path)
        except ValueError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)