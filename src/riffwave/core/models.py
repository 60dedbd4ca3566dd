"""Data models and configuration classes."""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Tuple, Union

from riffwave.core.exceptions import InvalidFormat


class FormatTag(IntEnum):
    """Format tag enumeration (WAVE_FORMAT_* codes)."""

    PCM = 0x0001
    IEEE_FLOAT = 0x0003
    A_LAW = 0x0006
    MU_LAW = 0x0007
    EXTENSIBLE = 0xFFFE

    @classmethod
    def from_code(cls, code: int) -> "FormatTag":
        """Map a 16-bit code to a FormatTag, rejecting unknown codes."""
        try:
            return cls(code)
        except ValueError:
            raise InvalidFormat(f"Unknown format tag: 0x{code:04X}") from None


@dataclass(frozen=True)
class FormatParameters:
    """Fields of the fmt chunk, in file order."""

    tag: FormatTag
    channel_count: int
    sample_rate: int
    average_byte_rate: int
    block_align: int
    bits_per_sample: int

    @property
    def frame_size(self) -> int:
        """Frame size in bytes implied by channel count and bit depth."""
        return self.channel_count * self.bits_per_sample // 8


@dataclass(frozen=True)
class WaveFormat:
    """Format fields kept on a decoded file (bit depth lives on the samples)."""

    tag: FormatTag
    """Sample encoding."""

    channel_count: int
    """Number of channels."""

    sample_rate: int
    """Sample rate in Hz."""

    average_byte_rate: int
    """Average bytes per second, as declared."""

    block_align: int
    """Bytes per frame, as declared."""

    @classmethod
    def from_parameters(cls, params: FormatParameters) -> "WaveFormat":
        return cls(
            tag=params.tag,
            channel_count=params.channel_count,
            sample_rate=params.sample_rate,
            average_byte_rate=params.average_byte_rate,
            block_align=params.block_align,
        )


Channels = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class BytePerSample:
    """Signed 8-bit samples, one tuple per channel."""

    bits_per_sample: ClassVar[int] = 8

    channels: Channels


@dataclass(frozen=True)
class WordPerSample:
    """Unsigned 16-bit samples, one tuple per channel."""

    bits_per_sample: ClassVar[int] = 16

    channels: Channels


SampleBuffer = Union[BytePerSample, WordPerSample]


@dataclass(frozen=True)
class WaveFile:
    """A decoded WAVE file."""

    format: WaveFormat
    """Format chunk fields."""

    samples: SampleBuffer
    """Deinterleaved sample data."""

    riff_size: int = 0
    """Declared RIFF size (not checked against the stream)."""

    fmt_size: int = 0
    """Declared fmt chunk size (not checked against the bytes read)."""

    @property
    def bits_per_sample(self) -> int:
        return self.samples.bits_per_sample

    @property
    def channel_count(self) -> int:
        return self.format.channel_count

    @property
    def num_frames(self) -> int:
        """Number of audio frames."""
        if not self.samples.channels:
            return 0
        return len(self.samples.channels[0])

    @property
    def duration_seconds(self) -> float:
        """Duration in seconds."""
        if self.format.sample_rate == 0:
            return 0.0
        return self.num_frames / self.format.sample_rate


@dataclass
class ReportConfig:
    """Configuration for the command-line report."""

    preview_samples: int = 8
    """Number of leading samples to show per previewed channel. Default: 8."""

    all_channels: bool = False
    """Preview every channel instead of only the first. Default: False."""

    log_level: int = logging.WARNING
    """Log level applied to riffwave loggers. Default: WARNING."""
