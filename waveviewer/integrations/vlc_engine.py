"""libVLC playback engine."""

from __future__ import annotations

import os
import sys

from ..domain.media import AssetHandle

try:
    import vlc as _vlc
except Exception:  # pragma: no cover - dependency optional at import time
    _vlc = None


class VlcPlaybackEngine:
    """Thin libVLC wrapper for audio-only playback."""

    def __init__(
        self,
        *,
        vlc_module=None,
        platform_name: str | None = None,
        volume: float = 1.0,
        logger=None,
    ) -> None:
        self._vlc = vlc_module if vlc_module is not None else _vlc
        if self._vlc is None:
            raise RuntimeError("python-vlc is not available")
        platform_value = platform_name if platform_name is not None else sys.platform
        args = ["--no-xlib"] if str(platform_value).startswith("linux") else []
        self.logger = logger
        self.instance = self._vlc.Instance(args)
        self.player = self.instance.media_player_new()
        self.media = None
        self.volume = max(0.0, min(1.5, float(volume)))
        self._duration_ms = 0
        self._play_requested = False
        self._pending_seek_ms: int | None = None

    def set_source(self, handle: AssetHandle) -> None:
        if not os.path.isfile(handle.path):
            raise FileNotFoundError(handle.path)
        self._release_media()
        media = self.instance.media_new(os.path.abspath(handle.path))
        self.player.set_media(media)
        self.media = media
        self._duration_ms = 0
        self._pending_seek_ms = None

    def prepare(self) -> None:
        if self.media is None:
            raise RuntimeError("No media source set.")
        self.media.parse()
        self._duration_ms = max(0, int(self.media.get_duration() or 0))
        self.player.audio_set_volume(int(round(self.volume * 100.0)))

    def play(self) -> None:
        rc = int(self.player.play())
        if rc == -1:
            raise RuntimeError("VLC failed to start playback.")
        self._play_requested = True
        if self._pending_seek_ms is not None:
            self.player.set_time(self._pending_seek_ms)

    def pause(self) -> None:
        self.player.set_pause(1)
        self._play_requested = False

    def seek(self, milliseconds: int) -> None:
        target = max(0, int(milliseconds))
        duration = self.duration_ms()
        if duration > 0:
            target = min(target, duration)
        if self._input_open():
            self._pending_seek_ms = None
            self.player.set_time(target)
            return
        # libVLC drops set_time until the input is open; applied once playback starts.
        self._pending_seek_ms = target

    def is_playing(self) -> bool:
        if self.player.is_playing():
            self._apply_pending_seek()
            return True
        if not self._play_requested:
            return False
        # libVLC reports not playing while it is still opening or buffering.
        state = self.player.get_state()
        ended_states = {
            self._vlc.State.Ended,
            self._vlc.State.Stopped,
            self._vlc.State.Error,
            self._vlc.State.Paused,
        }
        if state in ended_states:
            self._play_requested = False
            return False
        return True

    def current_position_ms(self) -> int:
        self._apply_pending_seek()
        if self._pending_seek_ms is not None:
            return self._pending_seek_ms
        return max(0, int(self.player.get_time() or 0))

    def duration_ms(self) -> int:
        if self._duration_ms <= 0:
            self._duration_ms = max(0, int(self.player.get_length() or 0))
        return self._duration_ms

    def reset(self) -> None:
        self._play_requested = False
        self._pending_seek_ms = None
        self.player.stop()
        self._release_media()
        self._duration_ms = 0

    def _input_open(self) -> bool:
        return self.player.get_state() in (self._vlc.State.Playing, self._vlc.State.Paused)

    def _apply_pending_seek(self) -> None:
        if self._pending_seek_ms is None or not self._input_open():
            return
        target = self._pending_seek_ms
        self._pending_seek_ms = None
        self.player.set_time(target)

    def _release_media(self) -> None:
        if self.media is not None:
            try:
                self.media.release()
            except Exception:
                if self.logger is not None:
                    self.logger.exception("Failed to release VLC media")
            self.media = None

    def release(self) -> None:
        self._play_requested = False
        try:
            self.player.stop()
        except Exception:
            if self.logger is not None:
                self.logger.exception("Failed to stop VLC player")
        self._release_media()
        try:
            self.player.release()
        except Exception:
            if self.logger is not None:
                self.logger.exception("Failed to release VLC player")
        try:
            self.instance.release()
        except Exception:
            if self.logger is not None:
                self.logger.exception("Failed to release VLC instance")
