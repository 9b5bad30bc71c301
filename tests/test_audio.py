import wave
from unittest import mock

import pytest

from summerplayer.audio import (
    UNKNOWN_BITRATE,
    UNKNOWN_DURATION,
    PygameBackend,
    describe_track,
)
from summerplayer.controller import PlaybackState, PlayerController
from summerplayer.formatting import format_duration, format_file_size


@pytest.fixture
def fake_pygame():
    with mock.patch("summerplayer.audio.pygame") as fake:
        fake.mixer.get_init.return_value = (44100, -16, 2)
        fake.mixer.music.get_busy.return_value = True
        fake.mixer.music.get_pos.return_value = 0
        yield fake


def test_new_backend_is_stopped_at_start(fake_pygame):
    backend = PygameBackend()
    assert backend.state() is PlaybackState.STOPPED
    assert backend.position() == 0


def test_play_without_source_does_nothing(fake_pygame):
    backend = PygameBackend()
    backend.play()
    assert backend.state() is PlaybackState.STOPPED
    fake_pygame.mixer.music.play.assert_not_called()


def test_load_and_play(fake_pygame):
    backend = PygameBackend()
    backend.load("/music/a.ogg")
    fake_pygame.mixer.music.load.assert_called_once_with("/music/a.ogg")
    assert backend.state() is PlaybackState.STOPPED
    backend.play()
    assert backend.state() is PlaybackState.PLAYING
    assert fake_pygame.mixer.music.play.call_args.kwargs["start"] == 0


def test_load_opens_mixer_when_closed(fake_pygame):
    fake_pygame.mixer.get_init.return_value = None
    backend = PygameBackend()
    backend.load("/music/a.ogg")
    assert fake_pygame.mixer.init.call_count == 1
    assert backend.state() is PlaybackState.STOPPED
    assert backend.position() == 0


def test_pause_and_resume(fake_pygame):
    backend = PygameBackend()
    backend.load("/music/a.ogg")
    backend.play()
    backend.pause()
    assert backend.state() is PlaybackState.PAUSED
    fake_pygame.mixer.music.pause.assert_called_once()
    backend.play()
    assert backend.state() is PlaybackState.PLAYING
    fake_pygame.mixer.music.unpause.assert_called_once()


def test_stop_rewinds(fake_pygame):
    backend = PygameBackend()
    backend.load("/music/a.ogg")
    backend.set_position(4000)
    backend.stop()
    assert backend.state() is PlaybackState.STOPPED
    assert backend.position() == 0


def test_volume_is_clamped(fake_pygame):
    backend = PygameBackend()
    backend.set_volume(7)
    high = backend.volume()
    backend.set_volume(-3)
    low = backend.volume()
    assert (low, high) == (0.0, 1.0)


def test_volume_passed_to_mixer(fake_pygame):
    backend = PygameBackend()
    backend.set_volume(0.3)
    assert backend.volume() == 0.3
    fake_pygame.mixer.music.set_volume.assert_called_with(0.3)


def test_position_while_stopped_starts_play_there(fake_pygame):
    backend = PygameBackend()
    backend.load("/music/a.ogg")
    backend.set_position(5000)
    assert backend.position() == 5000
    backend.play()
    assert fake_pygame.mixer.music.play.call_args.kwargs["start"] == 5000 / 1000
    assert backend.position() == 5000


def test_seek_while_paused_stays_paused(fake_pygame):
    backend = PygameBackend()
    backend.load("/music/a.ogg")
    backend.play()
    backend.pause()
    backend.set_position(3000)
    assert backend.state() is PlaybackState.PAUSED
    assert fake_pygame.mixer.music.pause.call_count == 2


def test_finished_reported_once(fake_pygame):
    backend = PygameBackend()
    backend.load("/music/a.ogg")
    backend.play()
    assert backend.finished() is False
    fake_pygame.mixer.music.get_busy.return_value = False
    assert backend.finished() is True
    assert backend.state() is PlaybackState.STOPPED
    assert backend.finished() is False


def test_controller_drives_backend(fake_pygame, tmp_path):
    for name in ("a.mp3", "b.ogg"):
        (tmp_path / name).write_bytes(b"x")
    controller = PlayerController(PygameBackend())
    files = controller.import_folder(tmp_path)
    assert controller.play_pause() is PlaybackState.PLAYING
    fake_pygame.mixer.music.load.assert_called_with(files[0])
    controller.next_track()
    fake_pygame.mixer.music.load.assert_called_with(files[1])


def _write_wav(path, seconds_frames, rate, channels=1, width=2):
    with wave.open(str(path), "wb") as writer:
        writer.setnchannels(channels)
        writer.setsampwidth(width)
        writer.setframerate(rate)
        writer.writeframes(b"\x00" * seconds_frames * channels * width)


def test_describe_wav(tmp_path):
    track = tmp_path / "tone.wav"
    _write_wav(track, 16000, 8000)
    info = describe_track(track)
    assert info.name == "tone.wav"
    assert info.folder == str(tmp_path)
    assert info.duration == format_duration(2000)
    assert info.bitrate == "128 kbps"
    assert info.size == format_file_size(track.stat().st_size)


def test_describe_unreadable_file(tmp_path):
    track = tmp_path / "broken.wav"
    track.write_bytes(b"not audio")
    info = describe_track(track)
    assert info.duration == UNKNOWN_DURATION
    assert info.bitrate == UNKNOWN_BITRATE
    assert info.duration_ms is None
    assert info.info_text == f"时长: {UNKNOWN_DURATION}\n比特率: {UNKNOWN_BITRATE}"


def test_describe_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        describe_track(tmp_path / "missing.mp3")