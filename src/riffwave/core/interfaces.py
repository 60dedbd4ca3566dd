"""Protocol interfaces for byte sources and format loaders."""

from typing import Protocol
from riffwave.core.models import WaveFile


class IByteStream(Protocol):
    """Interface for a forward-only binary source."""

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes (all remaining bytes when size is -1)."""
        ...


class IAudioFormat(Protocol):
    """Interface for audio format loaders."""

    @property
    def extensions(self) -> tuple[str, ...]:
        """
        File extensions supported by this format (e.g., ('.wav', '.wave')).

        Returns:
            Tuple of supported file extensions (lowercase, with dot).
        """
        ...

    def can_load(self, path: str) -> bool:
        """
        Check if this format can load the given file.

        Args:
            path: Path to audio file.

        Returns:
            True if this format can load the file, False otherwise.
        """
        ...

    def load(self, path: str) -> WaveFile:
        """
        Load an audio file and return the decoded WaveFile.

        Args:
            path: Path to audio file.

        Returns:
            WaveFile with format fields and per-channel samples.

        Raises:
            WaveDecodeError: If the file cannot be decoded.
        """
        ...
