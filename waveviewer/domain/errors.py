"""Error taxonomy shared by the loader, the engines and the view model."""

from __future__ import annotations


class WaveViewerError(Exception):
    """Base class for recoverable wave viewer failures."""


class UnsupportedFormatError(WaveViewerError):
    """The source has no tracks or its track format is not 16-bit mono PCM at 44.1 kHz."""

    def __init__(self, message: str, verdict=None) -> None:
        super().__init__(message)
        self.verdict = verdict


class SourceUnavailableError(WaveViewerError):
    """The asset or file could not be opened or read."""


class EngineNotReadyError(WaveViewerError):
    """A transport operation was attempted before the media was prepared."""


class EngineFailureError(WaveViewerError):
    """The playback engine raised while preparing or handling a transport call."""
