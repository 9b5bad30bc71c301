"""The music player window."""

from __future__ import annotations

import argparse
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox, ttk
from typing import Iterable

from summerplayer.audio import PygameBackend, TrackInfo, describe_track
from summerplayer.controller import NoAudioError, PlaybackState, PlayerController
from summerplayer.formatting import format_clock, format_total
from summerplayer.playlist import PlayMode

WINDOW_TITLE = "RemindSummer music player"
WINDOW_WIDTH = 192 * 3
WINDOW_HEIGHT = 108 * 4
EMPTY_LIST_TEXT = "没有可用的音频文件"
FOLDER_DIALOG_TITLE = "选择音频文件夹"
NOTICE_TITLE = "remind"
POLL_MS = 200

_MODE_LABELS = {
    PlayMode.LIST_LOOP: "Repeat",
    PlayMode.SINGLE_LOOP: "Repeat one",
    PlayMode.RANDOM_PLAY: "Random",
}


def build_track_rows(paths: Iterable[str]) -> list[TrackInfo]:
    """Describe every existing regular file among ``paths``, in order."""
    return [describe_track(path) for path in paths if Path(path).is_file()]


class MainWindow:
    """Player window: transport buttons, track list, progress and volume."""

    def __init__(self, root: tk.Tk, controller: PlayerController) -> None:
        self.root = root
        self.controller = controller
        self._current: str | None = None
        self._row_paths: dict[str, str] = {}
        self._seeking = False

        root.title(WINDOW_TITLE)
        root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        root.resizable(False, False)
        root.columnconfigure(0, weight=1)
        self._build_menu()
        self._build_widgets()
        self.refresh()

    def _build_menu(self) -> None:
        menubar = tk.Menu(self.root)
        menubar.add_command(label="Import", command=self._import_folder)
        menubar.add_command(label="Quit", command=self.root.destroy)
        self.root.config(menu=menubar)

    def _build_widgets(self) -> None:
        self.current_label = ttk.Label(self.root, text="", width=48)
        self.current_label.grid(row=0, column=0, sticky="w", padx=8, pady=4)

        columns = ("name", "folder", "duration", "bitrate", "size")
        self.track_list = ttk.Treeview(self.root, columns=columns, show="headings", height=8)
        for column in columns:
            self.track_list.heading(column, text=column.capitalize())
            self.track_list.column(column, width=100, stretch=True)
        self.track_list.bind("<<TreeviewSelect>>", self._on_track_selected)
        self.track_list.grid(row=1, column=0, sticky="nsew", padx=8)
        self.track_list.grid_remove()
        self.root.rowconfigure(1, weight=1)

        progress = ttk.Frame(self.root)
        progress.grid(row=2, column=0, sticky="ew", padx=8, pady=4)
        progress.columnconfigure(0, weight=1)
        self.progress_slider = tk.Scale(
            progress, from_=0, to=0, orient=tk.HORIZONTAL, showvalue=False
        )
        self.progress_slider.grid(row=0, column=0, sticky="ew")
        self.progress_slider.bind("<ButtonPress-1>", self._on_seek_start)
        self.progress_slider.bind("<ButtonRelease-1>", self._on_seek_end)
        self.time_label = ttk.Label(progress, text=format_clock(0))
        self.time_label.grid(row=0, column=1)
        self.total_label = ttk.Label(progress, text=format_total(0))
        self.total_label.grid(row=0, column=2)

        buttons = ttk.Frame(self.root)
        buttons.grid(row=3, column=0, pady=4)
        self.previous_button = ttk.Button(buttons, text="Previous", command=self._previous)
        self.mode_button = ttk.Button(
            buttons, text=_MODE_LABELS[self.controller.mode], command=self._cycle_mode
        )
        self.play_button = ttk.Button(buttons, text="Play", command=self._play_pause)
        self.next_button = ttk.Button(buttons, text="Next", command=self._next)
        self.playlist_button = ttk.Button(buttons, text="List", command=self._toggle_list)
        self.volume_button = ttk.Button(buttons, text="Volume", command=self._toggle_volume)
        for column, button in enumerate(
            (
                self.previous_button,
                self.mode_button,
                self.play_button,
                self.next_button,
                self.playlist_button,
                self.volume_button,
            )
        ):
            button.grid(row=0, column=column, padx=2)

        self.volume_frame = ttk.Frame(self.root)
        self.volume_frame.grid(row=4, column=0, pady=4)
        self.mute_button = ttk.Button(self.volume_frame, text="Mute", command=self._toggle_mute)
        self.mute_button.grid(row=0, column=0)
        self.volume_slider = tk.Scale(
            self.volume_frame,
            from_=0,
            to=100,
            resolution=1,
            orient=tk.HORIZONTAL,
            bigincrement=5,
        )
        self.volume_slider.set(50)
        self.volume_slider.grid(row=0, column=1)
        self.volume_slider.bind("<B1-Motion>", self._on_volume_moved)
        self.volume_slider.bind("<ButtonRelease-1>", self._on_volume_moved)
        self.volume_frame.grid_remove()

    def refresh(self) -> None:
        """Poll the backend, continue at track end and update the displays."""
        backend = self.controller.backend
        if backend.finished():
            self._guarded(self.controller.on_end_of_media)

        path = self.controller.playlist.current()
        if path != self._current:
            self._current = path
            self._set_duration(path)

        position = backend.position()
        if not self._seeking:
            self.progress_slider.set(position)
        self.time_label.config(text=format_clock(position))
        self.current_label.config(text=self.controller.now_playing_text())
        playing = backend.state() is PlaybackState.PLAYING
        self.play_button.config(text="Pause" if playing else "Play")
        self.root.after(POLL_MS, self.refresh)

    def _set_duration(self, path: str | None) -> None:
        duration = 0
        if path and Path(path).is_file():
            duration = describe_track(path).duration_ms or 0
        self.progress_slider.config(to=duration)
        self.total_label.config(text=format_total(duration))

    def _guarded(self, action) -> None:
        try:
            action()
        except NoAudioError as exc:
            messagebox.showinfo(NOTICE_TITLE, str(exc), parent=self.root)

    def _import_folder(self) -> None:
        folder = filedialog.askdirectory(
            parent=self.root,
            title=FOLDER_DIALOG_TITLE,
            initialdir=str(Path.home()),
            mustexist=True,
        )
        try:
            self._guarded(lambda: self.controller.import_folder(folder or ""))
        finally:
            self._fill_track_list()

    def _fill_track_list(self) -> None:
        self.track_list.delete(*self.track_list.get_children())
        self._row_paths.clear()
        if not self.controller.playlist:
            self.track_list.insert("", tk.END, values=(EMPTY_LIST_TEXT, "", "", "", ""))
            return
        for info in build_track_rows(self.controller.playlist):
            row = self.track_list.insert(
                "",
                tk.END,
                values=(info.name, info.folder, info.duration, info.bitrate, info.size),
            )
            self._row_paths[row] = info.path

    def _on_track_selected(self, _event=None) -> None:
        selection = self.track_list.selection()
        if not selection:
            return
        path = self._row_paths.get(selection[0])
        if path:
            self.controller.play_path(path)

    def _play_pause(self) -> None:
        self._guarded(self.controller.play_pause)

    def _next(self) -> None:
        self._guarded(self.controller.next_track)

    def _previous(self) -> None:
        self._guarded(self.controller.previous_track)

    def _cycle_mode(self) -> None:
        self.mode_button.config(text=_MODE_LABELS[self.controller.cycle_mode()])

    def _toggle_list(self) -> None:
        if self.track_list.winfo_ismapped():
            self.track_list.grid_remove()
        else:
            self.track_list.grid()

    def _toggle_volume(self) -> None:
        if self.volume_frame.winfo_ismapped():
            self.volume_frame.grid_remove()
        else:
            self.volume_frame.grid()

    def _on_volume_moved(self, _event=None) -> None:
        muted = self.controller.set_slider_volume(int(self.volume_slider.get()))
        self.mute_button.config(text="Unmute" if muted else "Mute")

    def _toggle_mute(self) -> None:
        muted = self.controller.toggle_mute()
        self.mute_button.config(text="Unmute" if muted else "Mute")

    def _on_seek_start(self, _event=None) -> None:
        self._seeking = True

    def _on_seek_end(self, _event=None) -> None:
        self._seeking = False
        self.controller.seek(int(self.progress_slider.get()))


def main(argv=None) -> int:
    """Open the player window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="summerplayer", description=WINDOW_TITLE)
    parser.parse_args(argv)
    root = tk.Tk()
    MainWindow(root, PlayerController(PygameBackend()))
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())