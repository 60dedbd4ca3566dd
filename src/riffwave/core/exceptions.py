"""Exception classes for riffwave."""


class WaveDecodeError(Exception):
    """Base exception for WAVE decoding errors."""
    pass


class TruncatedInput(WaveDecodeError):
    """Raised when the stream ends (or fails) before a read is satisfied."""
    pass


class InvalidFormat(WaveDecodeError):
    """Raised when a chunk id or the format tag is not what the container requires."""
    pass


class UnsupportedBitDepth(WaveDecodeError):
    """Raised when bits_per_sample is neither 8 nor 16."""

    def __init__(self, bits_per_sample: int):
        self.bits_per_sample = bits_per_sample
        super().__init__(
            f"Unsupported bits per sample: {bits_per_sample} (only 8 or 16 supported)"
        )


class IncompleteData(WaveDecodeError):
    """Raised when the sample payload does not end on a frame boundary."""

    def __init__(self, channel_count: int, bits_per_sample: int, byte_count: int):
        self.channel_count = channel_count
        self.bits_per_sample = bits_per_sample
        self.byte_count = byte_count
        super().__init__(
            f"Sample data of {byte_count} bytes does not fill whole frames "
            f"({channel_count}ch, {bits_per_sample}bit)"
        )
