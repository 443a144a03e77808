"""Desktop presentation layer."""

from .desktop_types import DesktopApp
from .tkinter_app import TkinterWaveViewerApp, create_tkinter_app
from .waveform_canvas import WaveformCanvasView

__all__ = [
    "DesktopApp",
    "TkinterWaveViewerApp",
    "WaveformCanvasView",
    "create_tkinter_app",
]
