"""Little-endian integer and chunk id readers."""

import struct
from riffwave.core.exceptions import InvalidFormat, TruncatedInput
from riffwave.core.interfaces import IByteStream


def read_exact(stream: IByteStream, size: int) -> bytes:
    """
    Read exactly size bytes, or fewer only if the stream is exhausted.

    Short reads from unbuffered streams are retried until EOF.

    Raises:
        TruncatedInput: If the underlying read fails.
    """
    chunks = []
    remaining = size
    try:
        while remaining > 0:
            chunk = stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
    except OSError as e:
        raise TruncatedInput(f"Read failed: {e}") from e
    return b"".join(chunks)


def _read_required(stream: IByteStream, size: int) -> bytes:
    data = read_exact(stream, size)
    if len(data) < size:
        raise TruncatedInput(f"Expected {size} bytes, got {len(data)}")
    return data


def read_u16_le(stream: IByteStream) -> int:
    """Read an unsigned 16-bit little-endian integer."""
    return struct.unpack("<H", _read_required(stream, 2))[0]


def read_u32_le(stream: IByteStream) -> int:
    """Read an unsigned 32-bit little-endian integer."""
    return struct.unpack("<I", _read_required(stream, 4))[0]


def expect_id(stream: IByteStream, literal: bytes) -> None:
    """
    Consume a 4-byte chunk id and check it against literal.

    The bytes are consumed whether or not they match.

    Raises:
        InvalidFormat: If the id differs or the stream ends early.
        TruncatedInput: If the underlying read fails.
    """
    found = read_exact(stream, 4)
    if found != literal:
        raise InvalidFormat(f"Expected chunk id {literal!r}, found {found!r}")
