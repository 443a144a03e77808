"""Synthesize the bundled demo clips as mono 16-bit PCM WAV at 44.1 kHz."""

from __future__ import annotations

import argparse
import math
from pathlib import Path
import sys

import numpy as np
import soundfile as sf

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from waveviewer.constants import DEFAULT_ASSETS, EXPECTED_AUDIO_ENCODING, EXPECTED_SAMPLE_RATE

FULL_SCALE = 32767.0
MUSIC_NOTES_HZ = (261.63, 329.63, 392.0, 523.25, 392.0, 329.63, 261.63, 196.0)
MUSIC_NOTE_SECONDS = 0.25
CHIRP_F0_HZ = 35.0
CHIRP_COALESCENCE_S = 1.55


def _timeline(seconds: float) -> np.ndarray:
    return np.arange(int(round(seconds * EXPECTED_SAMPLE_RATE)), dtype=np.float64) / EXPECTED_SAMPLE_RATE


def _fade(t: np.ndarray, seconds: float, ramp: float = 0.02) -> np.ndarray:
    return np.minimum(1.0, np.minimum(t / ramp, (seconds - t) / ramp)).clip(0.0, 1.0)


def _to_pcm16(signal: np.ndarray) -> np.ndarray:
    return (np.clip(signal, -1.0, 1.0) * FULL_SCALE).astype(np.int16)


def music_clip() -> np.ndarray:
    """Arpeggio of decaying notes with a quiet second harmonic."""
    seconds = MUSIC_NOTE_SECONDS * len(MUSIC_NOTES_HZ)
    t = _timeline(seconds)
    note_index = np.minimum((t / MUSIC_NOTE_SECONDS).astype(np.int64), len(MUSIC_NOTES_HZ) - 1)
    local = t - note_index * MUSIC_NOTE_SECONDS
    freq = np.asarray(MUSIC_NOTES_HZ)[note_index]
    envelope = np.minimum(1.0, local / 0.01) * np.exp(-6.0 * local)
    tone = np.sin(2.0 * math.pi * freq * local) + 0.3 * np.sin(4.0 * math.pi * freq * local)
    return _to_pcm16(0.45 * envelope * tone * _fade(t, seconds))


def gravitational_wave_clip() -> np.ndarray:
    """Inspiral chirp: frequency and amplitude rise towards coalescence."""
    seconds = 1.5
    t = _timeline(seconds)
    remaining = 1.0 - t / CHIRP_COALESCENCE_S
    phase = -(16.0 * math.pi * CHIRP_F0_HZ * CHIRP_COALESCENCE_S / 5.0) * remaining**0.625
    end_remaining = 1.0 - seconds / CHIRP_COALESCENCE_S
    amplitude = 0.8 * (remaining / end_remaining) ** -0.25
    return _to_pcm16(amplitude * np.sin(phase) * _fade(t, seconds))


def whistle_clip() -> np.ndarray:
    """1.8 kHz tone with a 3 Hz vibrato."""
    seconds = 1.0
    t = _timeline(seconds)
    depth = 600.0 / (2.0 * math.pi * 3.0)
    phase = 2.0 * math.pi * (1800.0 * t + depth * (1.0 - np.cos(2.0 * math.pi * 3.0 * t)))
    return _to_pcm16(0.6 * np.sin(phase) * _fade(t, seconds))


CLIPS = dict(zip(DEFAULT_ASSETS, (music_clip, gravitational_wave_clip, whistle_clip)))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Write the default demo clips.")
    parser.add_argument(
        "--output-dir",
        default=str(PROJECT_ROOT / "assets"),
        help="Directory for the generated WAV files.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    for name, build in CLIPS.items():
        samples = build()
        path = output_dir / name
        sf.write(str(path), samples, EXPECTED_SAMPLE_RATE, subtype=EXPECTED_AUDIO_ENCODING)
        print(f"{path}: {samples.size} samples")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
