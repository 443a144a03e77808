"""Extraction of raw PCM samples from an asset into an amplitude sequence."""

from __future__ import annotations

import numpy as np

from ..constants import MAX_BUFFER_BYTES, UNKNOWN_LENGTH_BUFFER_BYTES
from ..domain.formats import ensure_supported
from ..domain.samples import decode_pcm16
from .ports import AssetHandle, SampleExtractor


def extraction_buffer_size(byte_length: int) -> int:
    if byte_length < 0:
        return UNKNOWN_LENGTH_BUFFER_BYTES
    return min(int(byte_length), MAX_BUFFER_BYTES)


def extract_amplitudes(extractor: SampleExtractor, handle: AssetHandle, logger) -> np.ndarray:
    """Validate the first track of ``handle`` and decode its samples.

    Raises ``UnsupportedFormatError`` before any sample is read when the
    track format does not match 16-bit mono PCM at 44.1 kHz.
    """
    buffer = bytearray(extraction_buffer_size(handle.byte_length))
    filled = 0
    try:
        extractor.set_source(handle)
        formats = [extractor.track_format(index) for index in range(extractor.track_count())]
        ensure_supported(formats)
        extractor.select_track(0)
        read = extractor.read_next_chunk(buffer, filled)
        while read > 0:
            filled += read
            extractor.advance()
            read = extractor.read_next_chunk(buffer, filled)
    finally:
        extractor.release()
    waveform = decode_pcm16(buffer, filled)
    logger.debug(
        "Extracted %s samples (%s of %s buffer bytes) from %s",
        waveform.size,
        filled,
        len(buffer),
        handle.title,
    )
    return waveform
