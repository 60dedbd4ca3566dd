"""Tests for the command-line interface."""

import inspect
import logging
import struct
import pytest
from riffwave.cli import build_config, main, parse_args
from riffwave.core.models import BytePerSample, FormatTag, ReportConfig, WaveFile, WaveFormat, WordPerSample
from riffwave.report import render_wave


def write_wav(path, payload: bytes, channels: int = 1, bits_per_sample: int = 8) -> str:
    """Write a minimal WAV whose data size field is omitted from the payload."""
    block_align = channels * bits_per_sample // 8
    header = (
        b"RIFF" + struct.pack("<I", 36)
        + b"WAVE"
        + b"fmt " + struct.pack("<I", 16)
        + struct.pack("<HHIIHH", 1, channels, 8000, 8000 * block_align, block_align, bits_per_sample)
        + b"data"
    )
    path.write_bytes(header + payload)
    return str(path)


def make_wave(samples) -> WaveFile:
    return WaveFile(
        format=WaveFormat(
            tag=FormatTag.PCM,
            channel_count=len(samples.channels),
            sample_rate=8000,
            average_byte_rate=16000,
            block_align=2,
        ),
        samples=samples,
    )


def test_main_no_paths(capsys):
    """Test that no arguments prints nothing and succeeds."""
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_prints_decoded_file(tmp_path, capsys):
    path = write_wav(tmp_path / "mono.wav", bytes([0x01, 0xFF, 0x7F]))

    assert main([path]) == 0

    out = capsys.readouterr().out
    assert f"Result for {path}:" in out
    assert "format tag: PCM (0x0001)" in out
    assert "channel 0: [1, -1, 127]" in out


def test_main_continues_after_error(tmp_path, capsys):
    """Test that a failing file does not stop the remaining ones."""
    bad = tmp_path / "bad.wav"
    bad.write_bytes(b"RIFX" + bytes(40))
    good = write_wav(tmp_path / "good.wav", bytes([1, 2, 3, 4]), channels=2)

    assert main([str(bad), good, str(tmp_path / "missing.wav")]) == 1

    out = capsys.readouterr().out
    assert "error: InvalidFormat" in out
    assert "channel 0: [1, 3]" in out
    assert "error: TruncatedInput" in out


def test_main_all_channels(tmp_path, capsys):
    path = write_wav(tmp_path / "stereo.wav", bytes([1, 2, 3, 4]), channels=2)

    main(["--all-channels", path])

    out = capsys.readouterr().out
    assert "channel 1: [2, 4]" in out


def test_build_config_levels():
    assert build_config(parse_args(["-v"])).log_level == logging.DEBUG
    assert build_config(parse_args(["-q"])).log_level == logging.ERROR
    assert build_config(parse_args([])).log_level == logging.WARNING


def test_build_config_preview():
    config = build_config(parse_args(["-n", "3", "--all-channels"]))
    assert config.preview_samples == 3
    assert config.all_channels


def test_render_byte_samples_truncates_preview():
    wave = make_wave(BytePerSample(((1, -2, 3, -4),)))

    text = render_wave(wave, ReportConfig(preview_samples=2))

    assert "bits per sample: 8" in text
    assert "channel 0: [1, -2, ...]" in text


def test_render_word_samples_as_hex():
    wave = make_wave(WordPerSample(((0x0201, 0x0403),)))

    text = render_wave(wave)

    assert "bits per sample: 16" in text
    assert "channel 0: [0x0201, 0x0403]" in text


def test_render_rejects_unknown_buffer():
    wave = make_wave(BytePerSample(((),)))
    object.__setattr__(wave, "samples", object())

    with pytest.raises(TypeError):
        render_wave(wave)


def test_main_verbose_sets_log_level(tmp_path):
    """Test that -v lowers riffwave loggers to DEBUG."""
    path = write_wav(tmp_path / "mono.wav", bytes([1]))
    try:
        main(["-v", path])
        assert logging.getLogger("riffwave.formats.wav").level == logging.DEBUG
    finally:
        main(["-q"])
        main([])
    assert logging.getLogger("riffwave.formats.wav").level == logging.WARNING


def test_render_builds_default_config_per_call():
    """Test that render_wave does not share one default ReportConfig."""
    assert inspect.signature(render_wave).parameters["config"].default is None

    wave = make_wave(BytePerSample((tuple(range(12)),)))
    assert "channel 0: [0, 1, 2, 3, 4, 5, 6, 7, ...]" in render_wave(wave)
