"""Raw 16-bit PCM sample decoding."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..constants import BYTES_PER_SAMPLE


def decode_pcm16(buffer, filled_length: int | None = None) -> np.ndarray:
    """Convert interleaved little-endian 16-bit mono samples to signed integers.

    Only the first ``filled_length`` bytes are decoded, so a pre-allocated
    extraction buffer can be passed as is. A trailing odd byte is ignored.
    Each value equals ``(high << 8) | low`` with the sign carried by the high byte.
    """
    view = memoryview(buffer).cast("B")
    limit = len(view) if filled_length is None else max(0, min(int(filled_length), len(view)))
    sample_count = sample_count_for_bytes(limit)
    if sample_count == 0:
        return np.zeros(0, dtype=np.int32)
    samples = np.frombuffer(view, dtype="<i2", count=sample_count)
    return samples.astype(np.int32)


def encode_pcm16(samples: Iterable[int]) -> bytes:
    """Pack integers in the signed 16-bit range as little-endian sample pairs."""
    values = np.fromiter((int(value) for value in samples), dtype=np.int64)
    if values.size and (values.min() < -32768 or values.max() > 32767):
        raise ValueError("sample out of 16-bit range")
    return values.astype("<i2").tobytes()


def sample_count_for_bytes(byte_length: int) -> int:
    return max(0, int(byte_length)) // BYTES_PER_SAMPLE
