"""Application layer orchestration."""

from .bootstrap import AppServices, create_playback_engine, initialize_app_services
from .media_loader import extract_amplitudes, extraction_buffer_size
from .observable import ObservableValue
from .playback import PlaybackState, PlaybackViewModel
from .poller import PositionPoller
from .ports import (
    AssetHandle,
    AssetSource,
    DrawSurface,
    PlaybackEngine,
    SampleExtractor,
    Scheduler,
)

__all__ = [
    "AppServices",
    "AssetHandle",
    "AssetSource",
    "DrawSurface",
    "ObservableValue",
    "PlaybackEngine",
    "PlaybackState",
    "PlaybackViewModel",
    "PositionPoller",
    "SampleExtractor",
    "Scheduler",
    "create_playback_engine",
    "extract_amplitudes",
    "extraction_buffer_size",
    "initialize_app_services",
]
