"""Progressive waveform drawing."""

from .easing import PhaseAnimator, accelerate_decelerate
from .path import WaveformPath
from .progressive import ProgressivePathRenderer, path_chunk

__all__ = [
    "PhaseAnimator",
    "ProgressivePathRenderer",
    "WaveformPath",
    "accelerate_decelerate",
    "path_chunk",
]
