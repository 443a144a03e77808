"""Configuration loading from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .constants import (
    ANIMATION_DURATION_MS,
    DEFAULT_ASSETS,
    DEFAULT_STEP_COUNT,
    PLAYBACK_BACKENDS,
    REFRESH_RATE_MS,
)
from .utils import parse_float_env, parse_int_env, parse_list_env, resolve_path


@dataclass(frozen=True)
class AppConfig:
    log_level: str
    file_log_level: str
    log_dir: str
    log_file: str
    assets_dir: str
    default_assets: tuple[str, ...] = DEFAULT_ASSETS
    refresh_rate_ms: int = REFRESH_RATE_MS
    waveform_step_count: int = DEFAULT_STEP_COUNT
    animation_duration_ms: int = ANIMATION_DURATION_MS
    playback_backend: str = "auto"
    player_volume: float = 1.0
    error_notice_ms: int = 2500


def load_config() -> AppConfig:
    base_dir = str(Path(__file__).resolve().parents[1])
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    file_log_level = os.getenv("FILE_LOG_LEVEL", "DEBUG").upper()
    log_dir = resolve_path(os.getenv("LOG_DIR", "logs"), base_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(
        log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.log"
    )
    assets_dir = resolve_path(os.getenv("ASSETS_DIR", "assets").strip(), base_dir)
    default_assets = parse_list_env("DEFAULT_ASSETS", DEFAULT_ASSETS)
    refresh_rate_ms = parse_int_env(
        "REFRESH_RATE_MS", REFRESH_RATE_MS, min_value=1, max_value=1000
    )
    waveform_step_count = parse_int_env(
        "WAVEFORM_STEP_COUNT", DEFAULT_STEP_COUNT, min_value=1, max_value=100000
    )
    animation_duration_ms = parse_int_env(
        "ANIMATION_DURATION_MS", ANIMATION_DURATION_MS, min_value=0, max_value=10000
    )
    playback_backend = os.getenv("PLAYBACK_BACKEND", "auto").strip().lower()
    if playback_backend not in PLAYBACK_BACKENDS:
        playback_backend = "auto"
    player_volume = parse_float_env("PLAYER_VOLUME", 1.0, min_value=0.0, max_value=1.5)
    error_notice_ms = parse_int_env("ERROR_NOTICE_MS", 2500, min_value=0, max_value=60000)
    return AppConfig(
        log_level=log_level,
        file_log_level=file_log_level,
        log_dir=log_dir,
        log_file=log_file,
        assets_dir=assets_dir,
        default_assets=default_assets,
        refresh_rate_ms=refresh_rate_ms,
        waveform_step_count=waveform_step_count,
        animation_duration_ms=animation_duration_ms,
        playback_backend=playback_backend,
        player_volume=player_volume,
        error_notice_ms=error_notice_ms,
    )
