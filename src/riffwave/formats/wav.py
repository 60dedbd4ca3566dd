"""RIFF WAVE decoder."""

from pathlib import Path
from riffwave.core.exceptions import (
    IncompleteData,
    TruncatedInput,
    UnsupportedBitDepth,
)
from riffwave.core.interfaces import IAudioFormat, IByteStream
from riffwave.core.models import (
    BytePerSample,
    FormatParameters,
    FormatTag,
    SampleBuffer,
    WaveFile,
    WaveFormat,
    WordPerSample,
)
from riffwave.formats.primitives import expect_id, read_u16_le, read_u32_le
from riffwave.utils.log import get_logger

logger = get_logger(__name__)

SUPPORTED_BITS_PER_SAMPLE = (8, 16)


class WavFormat(IAudioFormat):
    """WAV format loader implementing IAudioFormat."""

    @property
    def extensions(self) -> tuple[str, ...]:
        """Supported file extensions."""
        return (".wav", ".wave")

    def can_load(self, path: str) -> bool:
        """Check if file can be loaded as WAV."""
        path_obj = Path(path)
        if not path_obj.is_file():
            return False

        if path_obj.suffix.lower() not in self.extensions:
            return False

        # Check file header (RIFF WAVE)
        try:
            with open(path_obj, "rb") as f:
                header = f.read(12)
        except OSError:
            return False
        return header[0:4] == b"RIFF" and header[8:12] == b"WAVE"

    def load(self, path: str) -> WaveFile:
        """
        Load a WAV file and return the decoded WaveFile.

        Supports:
        - 8-bit (signed) and 16-bit (unsigned words) samples
        - Any number of channels
        - Files laid out as RIFF, WAVE, fmt , data with data running to EOF

        Args:
            path: Path to WAV file.

        Returns:
            WaveFile with format fields and per-channel samples.

        Raises:
            TruncatedInput: If the file cannot be opened or ends early.
            InvalidFormat: If a chunk id or the format tag is wrong.
            UnsupportedBitDepth: If bits per sample is not 8 or 16.
            IncompleteData: If the sample data ends mid-frame.
        """
        return load_wave(path)


def load_wave(path: str) -> WaveFile:
    """Open path and decode it as a WAVE file."""
    try:
        f = open(path, "rb")
    except OSError as e:
        raise TruncatedInput(f"Cannot open WAV file {path}: {e}") from e

    with f:
        return decode_wave(f)


def read_format_tag(stream: IByteStream) -> FormatTag:
    """Read the 16-bit format tag and validate it."""
    return FormatTag.from_code(read_u16_le(stream))


def read_format_chunk(stream: IByteStream) -> FormatParameters:
    """Read the fixed 16-byte body of a fmt chunk."""
    # Format: audio_format(2), num_channels(2), sample_rate(4),
    #         byte_rate(4), block_align(2), bits_per_sample(2)
    tag = read_format_tag(stream)
    channel_count = read_u16_le(stream)
    sample_rate = read_u32_le(stream)
    average_byte_rate = read_u32_le(stream)
    block_align = read_u16_le(stream)
    bits_per_sample = read_u16_le(stream)
    return FormatParameters(
        tag=tag,
        channel_count=channel_count,
        sample_rate=sample_rate,
        average_byte_rate=average_byte_rate,
        block_align=block_align,
        bits_per_sample=bits_per_sample,
    )


def _read_remaining(stream: IByteStream) -> bytes:
    try:
        return stream.read()
    except OSError as e:
        raise TruncatedInput(f"Read failed: {e}") from e


def deinterleave(
    stream: IByteStream, channel_count: int, bits_per_sample: int
) -> SampleBuffer:
    """
    Read the rest of the stream and split it into one sequence per channel.

    Samples are assigned to channels round-robin, so frame k of channel c is
    sample k * channel_count + c of the payload. 8-bit bytes are read as
    signed; 16-bit words are built low byte first and kept unsigned.

    Args:
        stream: Stream positioned at the first sample byte.
        channel_count: Number of interleaved channels.
        bits_per_sample: 8 or 16.

    Returns:
        BytePerSample for 8-bit data, WordPerSample for 16-bit data.

    Raises:
        UnsupportedBitDepth: If bits_per_sample is not 8 or 16.
        IncompleteData: If the payload does not end on a frame boundary.
    """
    if bits_per_sample not in SUPPORTED_BITS_PER_SAMPLE:
        raise UnsupportedBitDepth(bits_per_sample)

    payload = _read_remaining(stream)
    if channel_count == 0:
        raise IncompleteData(channel_count, bits_per_sample, len(payload))

    channels = [[] for _ in range(channel_count)]
    cursor = 0
    low_byte = None

    if bits_per_sample == 8:
        for byte in payload:
            channels[cursor].append(byte - 0x100 if byte & 0x80 else byte)
            cursor = (cursor + 1) % channel_count
    else:
        for byte in payload:
            if low_byte is None:
                low_byte = byte
                continue
            channels[cursor].append(low_byte | (byte << 8))
            low_byte = None
            cursor = (cursor + 1) % channel_count

    if cursor != 0 or low_byte is not None:
        raise IncompleteData(channel_count, bits_per_sample, len(payload))

    if len({len(channel) for channel in channels}) > 1:
        raise IncompleteData(channel_count, bits_per_sample, len(payload))

    frozen = tuple(tuple(channel) for channel in channels)
    if bits_per_sample == 8:
        return BytePerSample(frozen)
    return WordPerSample(frozen)


def decode_wave(stream: IByteStream) -> WaveFile:
    """
    Decode a WAVE file from a binary stream.

    The layout must be RIFF header, WAVE id, fmt chunk, then data chunk
    running to end of stream. Declared chunk sizes are read but not used to
    delimit chunks.

    Raises:
        WaveDecodeError: The first failure encountered; nothing is returned
            on error.
    """
    expect_id(stream, b"RIFF")
    riff_size = read_u32_le(stream)
    logger.debug(f"RIFF size: {riff_size}")

    expect_id(stream, b"WAVE")

    expect_id(stream, b"fmt ")
    fmt_size = read_u32_le(stream)
    logger.debug(f"fmt chunk size: {fmt_size}")
    params = read_format_chunk(stream)

    expect_id(stream, b"data")
    samples = deinterleave(stream, params.channel_count, params.bits_per_sample)

    wave = WaveFile(
        format=WaveFormat.from_parameters(params),
        samples=samples,
        riff_size=riff_size,
        fmt_size=fmt_size,
    )

    logger.info(
        f"Decoded WAV: {params.channel_count}ch, {params.sample_rate}Hz, "
        f"{params.bits_per_sample}bit, {wave.duration_seconds:.2f}s"
    )

    return wave


# Format instance for registration
wav_format = WavFormat()
