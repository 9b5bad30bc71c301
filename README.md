# summerplayer

A small desktop music player. Point it at a folder and it plays the
`.mp3`, `.wav` and `.ogg` files found directly in that folder, with a
track list, a volume slider with mute, a seekable progress bar and three
play modes.

## Installing

```
pip install .
```

Audio playback uses pygame. The window uses Tk (`tkinter`), which ships
with most Python installations.

## Running

```
summerplayer
```

The window has a fixed size of 576×432. Its menu bar has two entries:

- **Import** opens a folder chooser (starting in your home folder) and
  replaces the playlist with the audio files in the chosen folder,
  sorted by path. Subfolders are not searched. If the folder holds no
  audio files, a notice says so.
- **Quit** closes the window.

The buttons below the progress bar:

- **Play / Pause** starts the current track when stopped, pauses it
  while playing and resumes it when paused. Its label shows "Pause"
  while a track is playing and "Play" otherwise.
- **Previous / Next** step through the playlist, wrapping around at
  either end.
- The **mode** button cycles Repeat → Repeat one → Random. When a track
  ends, Repeat moves on to the next track, Repeat one plays the same
  track again from the start, and Random picks any track at random.
- **List** shows or hides the track list. Each row shows the file name,
  its folder, its duration, bitrate and size. Selecting a row plays that
  track. With an empty playlist the list shows a single placeholder row.
- **Volume** shows or hides the volume slider (0–100, starting at 50).
  The **Mute** button beside it mutes, and when pressed again restores
  the last slider volume; its label reads "Unmute" while muted. Moving
  the slider to 0 also counts as muted.

The label at the top of the window shows the track now playing. Next to
the progress bar are the position as `mm:ss` and the track length as
`/mm:ss`; dragging the progress bar and releasing it seeks.

Pressing Play, Previous or Next with no tracks loaded shows a notice
instead.

## What it does not do

- Durations are read from WAV headers, or for other formats by decoding
  the file with pygame; when that fails the list shows an unknown
  duration. Bitrates are only known for WAV files.
- No tags (title, artist, album) are read, and playlists are not saved
  between runs.

## Using it as a library

The player logic does not depend on the window and can be driven
directly:

```python
import random

from summerplayer.audio import PygameBackend
from summerplayer.controller import NoAudioError, PlayerController

controller = PlayerController(PygameBackend(), random.Random())
try:
    controller.import_folder("/path/to/music")
    controller.play_pause()
except NoAudioError as exc:
    print(exc)
print(controller.now_playing_text())
```

`PlayerController` also has `next_track`, `previous_track`, `play_path`,
`seek`, `set_slider_volume`, `toggle_mute` and `cycle_mode`. It does not
watch for the end of a track by itself: poll `backend.finished()`, which
reports a finished track once, and call `on_end_of_media()` when it
returns true.

Other modules:

- `summerplayer.playlist` has `scan_audio_files`, `Playlist` and
  `PlayMode`.
- `summerplayer.audio` has `PygameBackend`, `describe_track` and the
  `TrackInfo` it returns.
- `summerplayer.formatting` has `format_duration` (`HH:MM:SS`),
  `format_file_size`, `format_clock` (`MM:SS`) and `format_total`
  (`/MM:SS`).
- `summerplayer.app` has `MainWindow`, `build_track_rows` and `main`.

## Testing

```
pip install .[test]
pytest
```