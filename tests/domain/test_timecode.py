from waveviewer.domain.timecode import (
    current_waveform_index,
    format_timestamp,
    milliseconds_to_progress,
    progress_to_milliseconds,
)


def test_progress_round_trips_through_milliseconds():
    assert progress_to_milliseconds(10000, 2500) == 2500
    assert milliseconds_to_progress(2500, 10000) == 2500
    assert progress_to_milliseconds(792, 10000) == 792
    assert milliseconds_to_progress(396, 792) == 5000


def test_progress_conversions_clamp_and_guard_zero_duration():
    assert milliseconds_to_progress(100, 0) == 0
    assert milliseconds_to_progress(5000, 1000) == 10000
    assert progress_to_milliseconds(1000, 20000) == 1000
    assert progress_to_milliseconds(1000, -5) == 0


def test_current_waveform_index_uses_time_ratio():
    # 792 samples over 792 ms: halfway lands on sample 395.
    assert current_waveform_index(792, 396, 792) == 395
    assert current_waveform_index(792, 792, 792) == 791
    assert current_waveform_index(44100, 1000, 10000) == 4409


def test_current_waveform_index_is_negative_at_start_or_without_duration():
    assert current_waveform_index(792, 0, 792) == -1
    assert current_waveform_index(792, 100, 0) == -1
    assert current_waveform_index(0, 100, 200) == -1


def test_format_timestamp():
    assert format_timestamp(0) == "00:00"
    assert format_timestamp(61_999) == "01:01"
    assert format_timestamp(-5) == "00:00"
