"""Ports for the external media, asset and view collaborators."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from ..domain.formats import TrackFormat
from ..domain.media import UNKNOWN_LENGTH, AssetHandle

__all__ = [
    "UNKNOWN_LENGTH",
    "AssetHandle",
    "AssetSource",
    "DrawSurface",
    "PlaybackEngine",
    "SampleExtractor",
    "Scheduler",
]


class AssetSource(Protocol):
    def open(self, name_or_path: str) -> AssetHandle: ...

    def close(self, handle: AssetHandle) -> None: ...

    def list_assets(self) -> list[str]: ...


class PlaybackEngine(Protocol):
    def set_source(self, handle: AssetHandle) -> None: ...

    def prepare(self) -> None: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def seek(self, milliseconds: int) -> None: ...

    def is_playing(self) -> bool: ...

    def current_position_ms(self) -> int: ...

    def duration_ms(self) -> int: ...

    def reset(self) -> None: ...

    def release(self) -> None: ...


class SampleExtractor(Protocol):
    def set_source(self, handle: AssetHandle) -> None: ...

    def track_count(self) -> int: ...

    def track_format(self, index: int) -> TrackFormat: ...

    def select_track(self, index: int) -> None: ...

    def read_next_chunk(self, buffer: bytearray, offset: int) -> int:
        """Write the next chunk at ``offset``; return bytes written or -1 at the end."""

    def advance(self) -> None: ...

    def release(self) -> None: ...


class DrawSurface(Protocol):
    def request_redraw(self) -> None: ...

    def width(self) -> int: ...

    def height(self) -> int: ...


class Scheduler(Protocol):
    """Subset of the ``tk.Misc`` timer API used for cooperative loops."""

    def after(self, delay_ms: int, callback: Callable[[], Any]) -> Any: ...

    def after_cancel(self, job: Any) -> None: ...
