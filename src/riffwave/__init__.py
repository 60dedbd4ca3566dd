"""
riffwave - decoder for RIFF/WAVE audio files.

Parses the RIFF container, validates the fmt chunk, and deinterleaves
8-bit or 16-bit sample data into one sequence per channel.
"""

from riffwave.core.exceptions import (
    IncompleteData,
    InvalidFormat,
    TruncatedInput,
    UnsupportedBitDepth,
    WaveDecodeError,
)
from riffwave.core.models import (
    BytePerSample,
    FormatParameters,
    FormatTag,
    ReportConfig,
    SampleBuffer,
    WaveFile,
    WaveFormat,
    WordPerSample,
)
from riffwave.formats import load_audio
from riffwave.formats.wav import decode_wave, deinterleave, load_wave

__version__ = "0.1.0"

__all__ = [
    "decode_wave",
    "load_wave",
    "load_audio",
    "deinterleave",
    "FormatTag",
    "FormatParameters",
    "WaveFormat",
    "WaveFile",
    "SampleBuffer",
    "BytePerSample",
    "WordPerSample",
    "ReportConfig",
    "WaveDecodeError",
    "TruncatedInput",
    "InvalidFormat",
    "UnsupportedBitDepth",
    "IncompleteData",
]
