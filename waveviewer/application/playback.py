"""Playback state machine and derived position values."""
from __future__ import annotations

import enum
from typing import Sequence

import numpy as np

from ..constants import DEFAULT_ASSETS, MAX_PROGRESS_VALUE, NOT_READY_MESSAGE, REFRESH_RATE_MS
from ..domain.errors import (
    EngineFailureError,
    EngineNotReadyError,
    SourceUnavailableError,
    WaveViewerError,
)
from ..domain.timecode import (
    current_waveform_index,
    milliseconds_to_progress,
    progress_to_milliseconds,
)
from .media_loader import extract_amplitudes
from .observable import ObservableValue
from .poller import PositionPoller
from .ports import AssetHandle, AssetSource, PlaybackEngine, SampleExtractor, Scheduler


class PlaybackState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    PREPARED = "prepared"
    PLAYING = "playing"


def _empty_waveform() -> np.ndarray:
    return np.zeros(0, dtype=np.int32)


class PlaybackViewModel:
    """Coordinates the engine, the extractor and the position poller.

    Failures never propagate out of the public operations; they are published
    on ``error`` and cleared by the next successful operation.
    """

    def __init__(
        self,
        *,
        engine: PlaybackEngine,
        extractor: SampleExtractor,
        asset_source: AssetSource,
        scheduler: Scheduler,
        logger,
        default_assets: Sequence[str] = DEFAULT_ASSETS,
        refresh_rate_ms: int = REFRESH_RATE_MS,
        max_progress: int = MAX_PROGRESS_VALUE,
    ) -> None:
        self.engine = engine
        self.extractor = extractor
        self.asset_source = asset_source
        self.logger = logger
        self.default_assets = tuple(default_assets)
        self.max_progress = int(max_progress)
        self._current_media = 0

        self.waveform: ObservableValue[np.ndarray] = ObservableValue(_empty_waveform())
        self.current_waveform_index: ObservableValue[int] = ObservableValue(0)
        self.title: ObservableValue[str] = ObservableValue("")
        self.state: ObservableValue[PlaybackState] = ObservableValue(PlaybackState.UNINITIALIZED)
        self.timestamp: ObservableValue[int] = ObservableValue(0)
        self.duration: ObservableValue[int] = ObservableValue(0)
        self.progress: ObservableValue[int] = ObservableValue(0)
        self.error: ObservableValue[WaveViewerError | None] = ObservableValue(None)

        self.poller = PositionPoller(
            scheduler,
            self._update_timestamp_and_waveform_index,
            self._update_state,
            interval_ms=refresh_rate_ms,
            logger=logger,
        )

    # -------- loading --------

    def load_next_default(self) -> bool:
        """Load the next bundled asset, cycling through the default playlist."""
        playlist = self._default_playlist()
        if not playlist:
            self.logger.error("No default assets available")
            self._publish_error(SourceUnavailableError("No media files found in the assets directory"))
            return False
        name = playlist[self._current_media % len(playlist)]
        self._current_media = (self._current_media + 1) % len(playlist)
        return self.load(name)

    def _default_playlist(self) -> tuple[str, ...]:
        """Configured defaults that exist, else every asset the source lists."""
        try:
            available = list(self.asset_source.list_assets())
        except Exception:
            self.logger.exception("Failed to list assets")
            available = []
        playlist = tuple(name for name in self.default_assets if name in available)
        if playlist:
            return playlist
        if self.default_assets:
            self.logger.warning(
                "Default assets %s not found; using %s listed assets",
                ", ".join(self.default_assets),
                len(available),
            )
        return tuple(available)

    def load(self, name_or_path: str) -> bool:
        self._reset()
        try:
            handle = self.asset_source.open(name_or_path)
        except WaveViewerError as exc:
            self.logger.error("Failed to open media %s: %s", name_or_path, exc)
            self._publish_error(exc)
            return False
        except Exception as exc:
            self.logger.exception("Failed to open media %s", name_or_path)
            self._publish_error(SourceUnavailableError(str(exc)))
            return False
        return self._load_opened(handle)

    def load_handle(self, handle: AssetHandle) -> bool:
        self._reset()
        return self._load_opened(handle)

    def _load_opened(self, handle: AssetHandle) -> bool:
        self.logger.debug("Trying to load media: %s", handle.title)
        try:
            waveform = extract_amplitudes(self.extractor, handle, self.logger)
            self._prepare_engine(handle)
            position = int(self.engine.current_position_ms())
            duration = int(self.engine.duration_ms())
        except WaveViewerError as exc:
            self.logger.error("Failed to set media %s: %s", handle.title, exc)
            self._abort_load(exc)
            return False
        except Exception as exc:
            self.logger.exception("Failed to set media %s", handle.title)
            self._abort_load(EngineFailureError(str(exc)))
            return False
        finally:
            self._close_handle(handle)

        self.waveform.set(waveform)
        self.title.set(handle.title)
        self.duration.set(duration)
        self.timestamp.set(position)
        self._clear_error()
        self._update_state()
        self._update_timestamp_and_waveform_index()
        self.logger.debug("State after loading %s: %s", handle.title, self.state.value)
        return self.state.value is not PlaybackState.UNINITIALIZED

    def _prepare_engine(self, handle: AssetHandle) -> None:
        try:
            self.engine.set_source(handle)
            self.engine.prepare()
        except WaveViewerError:
            raise
        except Exception as exc:
            raise EngineFailureError(f"Failed to prepare media player: {exc}") from exc
        # Transitions out of UNINITIALIZED only once the engine is prepared.
        self.state.set(PlaybackState.PREPARED)

    def _close_handle(self, handle: AssetHandle) -> None:
        try:
            self.asset_source.close(handle)
        except Exception:
            self.logger.exception("Failed to close asset %s", handle.title)

    def _abort_load(self, exc: WaveViewerError) -> None:
        self._reset_engine()
        self.state.set(PlaybackState.UNINITIALIZED)
        self.waveform.set(_empty_waveform())
        self._publish_error(exc)

    def _reset(self) -> None:
        """Release the previous source and clear every derived value."""
        self.poller.cancel()
        self._reset_engine()
        self.waveform.set(_empty_waveform())
        self.current_waveform_index.set(0)
        self.title.set("")
        self.state.set(PlaybackState.UNINITIALIZED)
        self.timestamp.set(0)
        self.duration.set(0)
        self.progress.set(0)

    def _reset_engine(self) -> None:
        try:
            self.engine.reset()
        except Exception:
            self.logger.exception("Failed to reset media player")

    # -------- transport --------

    def toggle_play_pause(self) -> bool:
        self._update_state()
        if not self._ensure_ready("toggle play/pause"):
            return False
        if self.state.value is PlaybackState.PLAYING:
            return self.pause()
        return self.play()

    def play(self) -> bool:
        if not self._ensure_ready("play"):
            return False
        if self.state.value is PlaybackState.PLAYING:
            return False
        try:
            self.engine.play()
        except Exception as exc:
            self._engine_failure("play", exc)
            return False
        self.state.set(PlaybackState.PLAYING)
        self._clear_error()
        self.poller.start()
        return True

    def pause(self) -> bool:
        if not self._ensure_ready("pause"):
            return False
        if self.state.value is not PlaybackState.PLAYING:
            return False
        try:
            self.engine.pause()
        except Exception as exc:
            self._engine_failure("pause", exc)
            return False
        self.state.set(PlaybackState.PREPARED)
        self._clear_error()
        return True

    def stop(self) -> bool:
        if not self._ensure_ready("stop"):
            return False
        try:
            if self.state.value is PlaybackState.PLAYING:
                self.engine.pause()
            self.engine.seek(0)
        except Exception as exc:
            self._engine_failure("stop", exc)
            return False
        self.state.set(PlaybackState.PREPARED)
        self._update_state()
        self._update_timestamp_and_waveform_index()
        self._clear_error()
        return True

    def seek(self, timestamp_ms: int) -> bool:
        if not self._ensure_ready("seek"):
            return False
        self.logger.info("Seeking to %s ms", timestamp_ms)
        try:
            self.engine.seek(int(timestamp_ms))
        except Exception as exc:
            self._engine_failure("seek", exc)
            return False
        self._update_timestamp_and_waveform_index()
        self._clear_error()
        return True

    def seek_to_progress(self, progress: int) -> bool:
        return self.seek(progress_to_milliseconds(self.duration.value, progress, self.max_progress))

    def release(self) -> None:
        self.poller.cancel()
        try:
            self.engine.release()
        except Exception:
            self.logger.exception("Failed to release media player")

    # -------- derived values --------

    def _update_state(self) -> bool:
        """Sync ``state`` with the engine; return True while playing."""
        if self.state.value is PlaybackState.UNINITIALIZED:
            return False
        try:
            playing = bool(self.engine.is_playing())
        except Exception as exc:
            self.logger.exception("Media player error")
            self.state.set(PlaybackState.UNINITIALIZED)
            self._publish_error(EngineFailureError(str(exc)))
            return False
        state = PlaybackState.PLAYING if playing else PlaybackState.PREPARED
        if state is not self.state.value:
            self.state.set(state)
        return playing

    def _update_timestamp_and_waveform_index(self) -> None:
        if self.state.value is PlaybackState.UNINITIALIZED:
            return
        try:
            position = int(self.engine.current_position_ms())
        except Exception as exc:
            self.logger.exception("Failed to query playback position")
            self._publish_error(EngineFailureError(str(exc)))
            return
        duration = self.duration.value
        self.timestamp.set(position)
        self.progress.set(milliseconds_to_progress(position, duration, self.max_progress))
        index = current_waveform_index(int(self.waveform.value.size), position, duration)
        if index < 0:
            return
        self.current_waveform_index.set(index)

    # -------- errors --------

    def _ensure_ready(self, operation: str) -> bool:
        if self.state.value is not PlaybackState.UNINITIALIZED:
            return True
        self.logger.error("Media player is not ready for %s", operation)
        self._publish_error(EngineNotReadyError(NOT_READY_MESSAGE))
        return False

    def _engine_failure(self, operation: str, exc: Exception) -> None:
        self.logger.exception("Media player failed to %s", operation)
        self._publish_error(EngineFailureError(f"Failed to {operation}: {exc}"))

    def _publish_error(self, exc: WaveViewerError) -> None:
        self.error.set(exc)

    def _clear_error(self) -> None:
        if self.error.value is not None:
            self.error.set(None)
