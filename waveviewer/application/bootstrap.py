"""Application bootstrap assembly for media collaborators and the view model."""
from __future__ import annotations

from dataclasses import dataclass

from ..config import AppConfig
from ..integrations.assets import FileAssetSource
from ..integrations.sounddevice_engine import SoundDevicePlaybackEngine
from ..integrations.soundfile_extractor import SoundFileExtractor
from ..integrations.vlc_engine import VlcPlaybackEngine
from .playback import PlaybackViewModel
from .ports import AssetSource, PlaybackEngine, SampleExtractor, Scheduler


@dataclass(frozen=True)
class AppServices:
    asset_source: AssetSource
    extractor: SampleExtractor
    engine: PlaybackEngine
    view_model: PlaybackViewModel


def create_playback_engine(
    config: AppConfig,
    logger,
    *,
    vlc_module=None,
    sd_module=None,
    sf_module=None,
) -> PlaybackEngine:
    """Create the configured engine, falling back to sounddevice when libVLC fails."""
    backend = config.playback_backend
    if backend in ("auto", "vlc"):
        try:
            engine = VlcPlaybackEngine(
                vlc_module=vlc_module, volume=config.player_volume, logger=logger
            )
            logger.info("Playback backend: vlc")
            return engine
        except Exception:
            if backend == "vlc":
                raise
            logger.exception("Failed to create VLC backend; trying sounddevice")
    engine = SoundDevicePlaybackEngine(
        sd_module=sd_module,
        sf_module=sf_module,
        volume=config.player_volume,
        logger=logger,
    )
    logger.info("Playback backend: sounddevice")
    return engine


def initialize_app_services(
    *,
    config: AppConfig,
    logger,
    scheduler: Scheduler,
    engine: PlaybackEngine | None = None,
    extractor: SampleExtractor | None = None,
    asset_source: AssetSource | None = None,
) -> AppServices:
    """Construct the runtime collaborators and return a typed service bundle."""
    asset_source = asset_source or FileAssetSource(config.assets_dir, logger)
    extractor = extractor or SoundFileExtractor(logger=logger)
    engine = engine or create_playback_engine(config, logger)
    view_model = PlaybackViewModel(
        engine=engine,
        extractor=extractor,
        asset_source=asset_source,
        scheduler=scheduler,
        logger=logger,
        default_assets=config.default_assets,
        refresh_rate_ms=config.refresh_rate_ms,
    )
    logger.debug("Assets dir: %s", config.assets_dir)
    return AppServices(
        asset_source=asset_source,
        extractor=extractor,
        engine=engine,
        view_model=view_model,
    )
