"""Tkinter desktop UI for the wave viewer."""
from __future__ import annotations

import os
import tkinter as tk
from tkinter import filedialog, ttk
from typing import Any, Callable

from ..application.bootstrap import AppServices, initialize_app_services
from ..application.playback import PlaybackState
from ..config import AppConfig
from ..constants import APP_TITLE, MAX_PROGRESS_VALUE
from ..domain.timecode import format_timestamp
from ..rendering.easing import PhaseAnimator
from ..rendering.progressive import ProgressivePathRenderer
from .desktop_types import DesktopApp
from .waveform_canvas import WaveformCanvasView

INDICATOR_OFF = "#1f4f1f"
INDICATOR_ON = "#00ff41"


def pulse_level(amplitude: int) -> float:
    """Map a sample amplitude to an indicator intensity in [0, 1]."""
    return max(0.0, min(1.0, abs(int(amplitude)) / 32767.0))


def blend_color(low: str, high: str, level: float) -> str:
    level = max(0.0, min(1.0, float(level)))
    low_rgb = [int(low[index : index + 2], 16) for index in (1, 3, 5)]
    high_rgb = [int(high[index : index + 2], 16) for index in (1, 3, 5)]
    mixed = [round(a + (b - a) * level) for a, b in zip(low_rgb, high_rgb)]
    return "#" + "".join(f"{value:02x}" for value in mixed)


class TkinterWaveViewerApp(DesktopApp):
    """Tkinter implementation of the wave viewer window."""

    def __init__(
        self,
        *,
        config: AppConfig,
        logger,
        services_factory: Callable[..., AppServices] = initialize_app_services,
        filedialog_module=filedialog,
    ) -> None:
        self.title = APP_TITLE
        self.config = config
        self.logger = logger
        self.services_factory = services_factory
        self.filedialog = filedialog_module
        self.root: tk.Tk | None = None
        self.services: AppServices | None = None
        self.waveform_view: WaveformCanvasView | None = None
        self.title_var: tk.StringVar | None = None
        self.time_var: tk.StringVar | None = None
        self.status_var: tk.StringVar | None = None
        self.progress_var: tk.DoubleVar | None = None
        self.play_btn: ttk.Button | None = None
        self.indicator: tk.Canvas | None = None
        self.seek_dragging = False
        self.seek_programmatic = False
        self._notice_job: Any = None
        self._unsubscribers: list[Callable[[], None]] = []

    def launch(self) -> None:
        self._ensure_root()
        assert self.root is not None
        self.root.mainloop()

    def build_for_test(self) -> tk.Tk:
        """Build root/widgets without entering mainloop (for tests)."""
        self._ensure_root()
        assert self.root is not None
        return self.root

    def _ensure_root(self) -> None:
        if self.root is not None:
            return
        root = tk.Tk()
        root.title(APP_TITLE)
        root.geometry("960x420")
        root.minsize(640, 320)
        self.root = root
        self.services = self.services_factory(config=self.config, logger=self.logger, scheduler=root)
        self._init_tk_variables()
        self._build_layout()
        self._bind_view_model()
        root.bind("<space>", lambda _event: self._on_play_pause())
        root.protocol("WM_DELETE_WINDOW", self._on_close)
        root.after(0, self._on_next_sample)
        self.logger.debug("Tkinter UI wiring complete")

    def _init_tk_variables(self) -> None:
        self.title_var = tk.StringVar(value="")
        self.time_var = tk.StringVar(value="00:00 / 00:00")
        self.status_var = tk.StringVar(value="")
        self.progress_var = tk.DoubleVar(value=0.0)

    def _build_layout(self) -> None:
        assert self.root is not None
        root = self.root
        root.columnconfigure(0, weight=1)
        root.rowconfigure(1, weight=1)

        ttk.Label(root, textvariable=self.title_var, anchor="center").grid(
            row=0, column=0, sticky="ew", padx=12, pady=(12, 4)
        )

        canvas = tk.Canvas(root, background="#020702", highlightthickness=0)
        canvas.grid(row=1, column=0, sticky="nsew", padx=12, pady=4)
        renderer = ProgressivePathRenderer(
            step_count=self.config.waveform_step_count,
            animator=PhaseAnimator(self.config.animation_duration_ms),
            logger=self.logger,
        )
        self.waveform_view = WaveformCanvasView(canvas, root, renderer, logger=self.logger)
        canvas.bind("<Configure>", self.waveform_view.on_configure)

        seek_frame = ttk.Frame(root)
        seek_frame.grid(row=2, column=0, sticky="ew", padx=12, pady=4)
        seek_frame.columnconfigure(0, weight=1)
        scale = ttk.Scale(
            seek_frame,
            from_=0,
            to=MAX_PROGRESS_VALUE,
            variable=self.progress_var,
            command=self._on_seek_change,
        )
        scale.grid(row=0, column=0, sticky="ew")
        scale.bind("<ButtonPress-1>", self._on_seek_press)
        scale.bind("<ButtonRelease-1>", self._on_seek_release)
        ttk.Label(seek_frame, textvariable=self.time_var, width=14, anchor="e").grid(
            row=0, column=1, padx=(8, 0)
        )

        controls = ttk.Frame(root)
        controls.grid(row=3, column=0, pady=(4, 8))
        self.indicator = tk.Canvas(controls, width=22, height=22, highlightthickness=0)
        self.indicator.grid(row=0, column=0, padx=(0, 8))
        self.indicator.create_oval(3, 3, 19, 19, fill=INDICATOR_OFF, outline="#ffffff", tags="lamp")
        self.play_btn = ttk.Button(controls, text="Play", command=self._on_play_pause)
        self.play_btn.grid(row=0, column=1, padx=4)
        ttk.Button(controls, text="Stop", command=self._on_stop).grid(row=0, column=2, padx=4)
        ttk.Button(controls, text="Next sample", command=self._on_next_sample).grid(
            row=0, column=3, padx=4
        )
        ttk.Button(controls, text="Open...", command=self._on_open_file).grid(
            row=0, column=4, padx=4
        )

        ttk.Label(root, textvariable=self.status_var, anchor="w").grid(
            row=4, column=0, sticky="ew", padx=12, pady=(0, 8)
        )

    def _bind_view_model(self) -> None:
        assert self.services is not None
        view_model = self.services.view_model
        self._unsubscribers = [
            view_model.title.subscribe(self._on_title_changed, emit_current=True),
            view_model.waveform.subscribe(self._on_waveform_changed),
            view_model.current_waveform_index.subscribe(self._on_waveform_index_changed),
            view_model.state.subscribe(self._on_state_changed, emit_current=True),
            view_model.timestamp.subscribe(lambda _value: self._update_time_label()),
            view_model.duration.subscribe(lambda _value: self._update_time_label()),
            view_model.progress.subscribe(self._on_progress_changed),
            view_model.error.subscribe(self._on_error_changed),
        ]

    # -------- view model observers --------

    def _on_title_changed(self, title: str) -> None:
        if self.title_var is not None:
            self.title_var.set(title)

    def _on_waveform_changed(self, waveform) -> None:
        if self.waveform_view is not None:
            self.waveform_view.set_waveform(waveform)

    def _on_waveform_index_changed(self, index: int) -> None:
        assert self.services is not None
        if self.waveform_view is not None:
            self.waveform_view.set_playhead(index)
        waveform = self.services.view_model.waveform.value
        if self.services.view_model.state.value is not PlaybackState.PLAYING:
            return
        if 0 <= index < waveform.size:
            self._set_indicator(blend_color(INDICATOR_OFF, INDICATOR_ON, pulse_level(waveform[index])))

    def _on_state_changed(self, state: PlaybackState) -> None:
        if self.play_btn is not None:
            self.play_btn.configure(text="Pause" if state is PlaybackState.PLAYING else "Play")
            self.play_btn.state(
                ["disabled"] if state is PlaybackState.UNINITIALIZED else ["!disabled"]
            )
        if state is not PlaybackState.PLAYING:
            self._set_indicator(INDICATOR_OFF)

    def _on_progress_changed(self, progress: int) -> None:
        if self.progress_var is None or self.seek_dragging:
            return
        self.seek_programmatic = True
        try:
            self.progress_var.set(float(progress))
        finally:
            self.seek_programmatic = False

    def _on_error_changed(self, error) -> None:
        if error is None or self.status_var is None or self.root is None:
            return
        self.status_var.set(str(error))
        if self._notice_job is not None:
            self.root.after_cancel(self._notice_job)
        self._notice_job = self.root.after(self.config.error_notice_ms, self._clear_notice)

    def _clear_notice(self) -> None:
        self._notice_job = None
        if self.status_var is not None:
            self.status_var.set("")

    def _update_time_label(self) -> None:
        assert self.services is not None
        if self.time_var is None:
            return
        view_model = self.services.view_model
        self.time_var.set(
            f"{format_timestamp(view_model.timestamp.value)} / "
            f"{format_timestamp(view_model.duration.value)}"
        )

    def _set_indicator(self, color: str) -> None:
        if self.indicator is not None:
            self.indicator.itemconfigure("lamp", fill=color)

    # -------- user actions --------

    def _on_play_pause(self) -> None:
        assert self.services is not None
        self.services.view_model.toggle_play_pause()

    def _on_stop(self) -> None:
        assert self.services is not None
        self.services.view_model.stop()

    def _on_next_sample(self) -> None:
        assert self.services is not None
        self.services.view_model.load_next_default()

    def _on_open_file(self) -> None:
        assert self.services is not None
        path = self.filedialog.askopenfilename(
            title="Open WAV file",
            initialdir=self.config.assets_dir if os.path.isdir(self.config.assets_dir) else None,
            filetypes=[("WAV audio", "*.wav"), ("All files", "*.*")],
        )
        if not path:
            return
        self.services.view_model.load(path)

    def _on_seek_press(self, _event: tk.Event[Any]) -> None:
        self.seek_dragging = True

    def _on_seek_release(self, _event: tk.Event[Any]) -> None:
        assert self.services is not None
        self.seek_dragging = False
        if self.progress_var is None:
            return
        self.services.view_model.seek_to_progress(int(round(self.progress_var.get())))

    def _on_seek_change(self, value: str) -> None:
        if self.seek_programmatic or self.seek_dragging:
            return
        assert self.services is not None
        try:
            progress = int(round(float(value)))
        except ValueError:
            return
        self.services.view_model.seek_to_progress(progress)

    def _on_close(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        if self.services is not None:
            self.services.view_model.release()
        if self.root is not None:
            self.root.destroy()
            self.root = None


def create_tkinter_app(*, config: AppConfig, logger, services_factory=None) -> DesktopApp:
    """Create the Tkinter desktop app instance."""
    if services_factory is None:
        return TkinterWaveViewerApp(config=config, logger=logger)
    return TkinterWaveViewerApp(config=config, logger=logger, services_factory=services_factory)
