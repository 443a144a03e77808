from pathlib import Path

import pytest

pytest.importorskip("soundfile")

from waveviewer.application.playback import PlaybackState, PlaybackViewModel
from waveviewer.constants import DEFAULT_ASSETS
from waveviewer.integrations.assets import FileAssetSource
from waveviewer.integrations.soundfile_extractor import SoundFileExtractor

ASSETS_DIR = Path(__file__).resolve().parents[2] / "assets"


def test_default_assets_ship_with_the_project(logger):
    assert FileAssetSource(str(ASSETS_DIR), logger).list_assets() == sorted(DEFAULT_ASSETS)


def test_default_assets_cycle_through_real_files(catalog, fake_media, engine, scheduler, logger):
    for name in DEFAULT_ASSETS:
        catalog[name] = fake_media(duration_ms=1000)
    view_model = PlaybackViewModel(
        engine=engine,
        extractor=SoundFileExtractor(logger=logger),
        asset_source=FileAssetSource(str(ASSETS_DIR), logger),
        scheduler=scheduler,
        logger=logger,
        default_assets=DEFAULT_ASSETS,
    )
    sizes = {}

    for _ in DEFAULT_ASSETS:
        assert view_model.load_next_default() is True, view_model.error.value
        sizes[view_model.title.value] = view_model.waveform.value.size

    assert sizes == {
        "music_mono_44100Hz_16bit.wav": 88200,
        "gravitational_wave_mono_44100Hz_16bit.wav": 66150,
        "whistle_mono_44100Hz_16bit.wav": 44100,
    }
    assert view_model.state.value is PlaybackState.PREPARED
