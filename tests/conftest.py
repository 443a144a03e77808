"""Shared fakes for the media collaborators.

The fakes keep a small in-memory catalog of sources so tests can load
several files in a row without touching libVLC, libsndfile or a display.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import pytest

from waveviewer.application.playback import PlaybackViewModel
from waveviewer.domain.errors import SourceUnavailableError
from waveviewer.domain.formats import TrackFormat
from waveviewer.domain.media import AssetHandle
from waveviewer.domain.samples import encode_pcm16

PCM16_MONO = TrackFormat(encoding="PCM_16", channel_count=1, sample_rate=44100)


class _Logger:
    def __init__(self):
        self.debugs = []
        self.infos = []
        self.warnings = []
        self.errors = []
        self.exceptions = []

    def debug(self, message, *args):
        self.debugs.append(message % args if args else message)

    def info(self, message, *args):
        self.infos.append(message % args if args else message)

    def warning(self, message, *args):
        self.warnings.append(message % args if args else message)

    def error(self, message, *args):
        self.errors.append(message % args if args else message)

    def exception(self, message, *args):
        self.exceptions.append(message % args if args else message)


class _Scheduler:
    """Collects ``after`` callbacks; tests run them explicitly."""

    def __init__(self):
        self.jobs = []
        self.cancelled = []
        self._next_id = 0

    def after(self, delay_ms, callback):
        self._next_id += 1
        job = f"after#{self._next_id}"
        self.jobs.append((job, delay_ms, callback))
        return job

    def after_cancel(self, job):
        self.cancelled.append(job)
        self.jobs = [entry for entry in self.jobs if entry[0] != job]

    @property
    def pending(self):
        return len(self.jobs)

    def run_next(self):
        job, _delay, callback = self.jobs.pop(0)
        callback()
        return job

    def run_all(self, limit=1000):
        ran = 0
        while self.jobs and ran < limit:
            self.run_next()
            ran += 1
        return ran


@dataclass
class FakeMedia:
    samples: list = field(default_factory=list)
    duration_ms: int = 0
    tracks: list = field(default_factory=lambda: [PCM16_MONO])
    prepare_error: Exception | None = None

    @property
    def payload(self) -> bytes:
        return encode_pcm16(self.samples)


class _AssetSource:
    def __init__(self, catalog):
        self.catalog = catalog
        self.opened = []
        self.closed = []

    def open(self, name_or_path):
        if name_or_path not in self.catalog:
            raise SourceUnavailableError(f"Media file not found: {name_or_path}")
        media = self.catalog[name_or_path]
        handle = AssetHandle(
            title=name_or_path,
            path=f"/assets/{name_or_path}",
            byte_length=len(media.payload) + 44,
        )
        self.opened.append(handle)
        return handle

    def close(self, handle):
        self.closed.append(handle)

    def list_assets(self):
        return sorted(name for name in self.catalog if name.endswith(".wav"))


class _Extractor:
    def __init__(self, catalog, chunk_size=100):
        self.catalog = catalog
        self.chunk_size = chunk_size
        self.media = None
        self.selected = None
        self.cursor = 0
        self.released = 0
        self.advanced = 0

    def set_source(self, handle):
        self.media = self.catalog[handle.title]
        self.cursor = 0

    def track_count(self):
        return len(self.media.tracks)

    def track_format(self, index):
        return self.media.tracks[index]

    def select_track(self, index):
        self.selected = index

    def read_next_chunk(self, buffer, offset):
        payload = self.media.payload
        if self.cursor >= len(payload):
            return -1
        chunk = payload[self.cursor : self.cursor + self.chunk_size]
        buffer[offset : offset + len(chunk)] = chunk
        self.cursor += len(chunk)
        return len(chunk)

    def advance(self):
        self.advanced += 1

    def release(self):
        self.released += 1
        self.selected = None


class _Engine:
    def __init__(self, catalog):
        self.catalog = catalog
        self.media = None
        self.prepared = False
        self.playing = False
        self.position = 0
        self.calls = []
        self.failures = {}

    def _record(self, name):
        self.calls.append(name)
        error = self.failures.get(name)
        if error is not None:
            raise error

    def set_source(self, handle):
        self._record("set_source")
        self.media = self.catalog[handle.title]
        self.position = 0

    def prepare(self):
        self._record("prepare")
        if self.media.prepare_error is not None:
            raise self.media.prepare_error
        self.prepared = True

    def play(self):
        self._record("play")
        self.playing = True

    def pause(self):
        self._record("pause")
        self.playing = False

    def seek(self, milliseconds):
        self._record("seek")
        self.position = max(0, min(self.duration_ms(), int(milliseconds)))

    def is_playing(self):
        self._record("is_playing")
        return self.playing

    def current_position_ms(self):
        self._record("current_position_ms")
        return self.position

    def duration_ms(self):
        return 0 if self.media is None else self.media.duration_ms

    def reset(self):
        self._record("reset")
        self.media = None
        self.prepared = False
        self.playing = False
        self.position = 0

    def release(self):
        self._record("release")
        self.playing = False


def _whistle_samples():
    return [(index * 37) % 2000 - 1000 for index in range(792)]


@pytest.fixture
def logger():
    return _Logger()


@pytest.fixture
def scheduler():
    return _Scheduler()


@pytest.fixture
def catalog():
    return {
        "whistle.wav": FakeMedia(samples=_whistle_samples(), duration_ms=792),
        "music.wav": FakeMedia(samples=list(range(-500, 500)), duration_ms=10000),
        "stereo.wav": FakeMedia(
            samples=[1, 2, 3, 4],
            duration_ms=100,
            tracks=[TrackFormat(encoding="PCM_16", channel_count=2, sample_rate=44100)],
        ),
        "compressed.mp3": FakeMedia(
            samples=[1, 2, 3, 4],
            duration_ms=100,
            tracks=[TrackFormat(encoding="MPEG_LAYER_III", channel_count=1, sample_rate=44100)],
        ),
        "no_tracks.wav": FakeMedia(samples=[], duration_ms=0, tracks=[]),
    }


@pytest.fixture
def asset_source(catalog):
    return _AssetSource(catalog)


@pytest.fixture
def extractor(catalog):
    return _Extractor(catalog)


@pytest.fixture
def engine(catalog):
    return _Engine(catalog)


@pytest.fixture
def view_model(engine, extractor, asset_source, scheduler, logger):
    return PlaybackViewModel(
        engine=engine,
        extractor=extractor,
        asset_source=asset_source,
        scheduler=scheduler,
        logger=logger,
        default_assets=("music.wav", "whistle.wav"),
    )


@pytest.fixture
def fake_media():
    return FakeMedia


@pytest.fixture
def whistle_samples():
    return np.array(_whistle_samples(), dtype=np.int32)
