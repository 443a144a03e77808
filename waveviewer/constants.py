"""Shared constants for audio format, playback and drawing."""

EXPECTED_AUDIO_ENCODING = "PCM_16"
EXPECTED_NUM_CHANNELS = 1
EXPECTED_SAMPLE_RATE = 44100
BYTES_PER_SAMPLE = 2

# ~6 minutes of 44.1 kHz 16-bit mono when the asset does not report a length.
UNKNOWN_LENGTH_BUFFER_BYTES = 30 * 1024 * 1024
MAX_BUFFER_BYTES = 2**31 - 1
EXTRACT_CHUNK_FRAMES = 4096

REFRESH_RATE_MS = 17
MAX_PROGRESS_VALUE = 10000

DEFAULT_STEP_COUNT = 2000
ANIMATION_DURATION_MS = 1000
ANIMATION_FRAME_MS = 16

DEFAULT_ASSETS = (
    "music_mono_44100Hz_16bit.wav",
    "gravitational_wave_mono_44100Hz_16bit.wav",
    "whistle_mono_44100Hz_16bit.wav",
)
PLAYBACK_BACKENDS = ("auto", "vlc", "sounddevice")
NOT_READY_MESSAGE = "Preparing media player..."
APP_TITLE = "Wave Viewer"
