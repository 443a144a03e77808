"""Adapters for the asset, demux and playback collaborators."""

from .assets import FileAssetSource
from .sounddevice_engine import SoundDevicePlaybackEngine
from .soundfile_extractor import SoundFileExtractor
from .vlc_engine import VlcPlaybackEngine

__all__ = [
    "FileAssetSource",
    "SoundDevicePlaybackEngine",
    "SoundFileExtractor",
    "VlcPlaybackEngine",
]
