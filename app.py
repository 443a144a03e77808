"""Desktop entrypoint for the wave viewer."""

from __future__ import annotations

import os
import platform
import sys

import numpy as np

from waveviewer.config import load_config
from waveviewer.logging_config import setup_logging
from waveviewer.ui.tkinter_app import create_tkinter_app

CONFIG = load_config()
logger = setup_logging(CONFIG)


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


SKIP_APP_INIT = _env_flag("WAVEVIEWER_SKIP_APP_INIT")

logger.info("Starting app")
logger.info("Log file: %s", CONFIG.log_file)
logger.debug(
    "Config: LOG_LEVEL=%s FILE_LOG_LEVEL=%s LOG_DIR=%s ASSETS_DIR=%s DEFAULT_ASSETS=%s "
    "REFRESH_RATE_MS=%s WAVEFORM_STEP_COUNT=%s ANIMATION_DURATION_MS=%s "
    "PLAYBACK_BACKEND=%s PLAYER_VOLUME=%s ERROR_NOTICE_MS=%s",
    CONFIG.log_level,
    CONFIG.file_log_level,
    CONFIG.log_dir,
    CONFIG.assets_dir,
    ",".join(CONFIG.default_assets),
    CONFIG.refresh_rate_ms,
    CONFIG.waveform_step_count,
    CONFIG.animation_duration_ms,
    CONFIG.playback_backend,
    CONFIG.player_volume,
    CONFIG.error_notice_ms,
)
logger.debug("Python version: %s", sys.version.replace("\n", " "))
logger.debug("Platform: %s", platform.platform())
logger.debug("NumPy version: %s", np.__version__)

DESKTOP_APP = None
if not SKIP_APP_INIT:
    DESKTOP_APP = create_tkinter_app(config=CONFIG, logger=logger)
else:
    logger.info("WAVEVIEWER_SKIP_APP_INIT enabled; skipping UI initialization")


def launch() -> None:
    if SKIP_APP_INIT:
        logger.info("WAVEVIEWER_SKIP_APP_INIT enabled; launch skipped")
        return
    if DESKTOP_APP is None:
        raise RuntimeError("Desktop app is not initialized.")
    logger.info("Launching desktop app")
    DESKTOP_APP.launch()


if __name__ == "__main__":
    launch()
