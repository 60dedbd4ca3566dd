"""Audio format loaders with registration by extension."""

from pathlib import Path
from typing import Dict, Optional
from riffwave.core.exceptions import InvalidFormat, TruncatedInput, WaveDecodeError
from riffwave.core.interfaces import IAudioFormat
from riffwave.core.models import WaveFile
from riffwave.formats.wav import decode_wave, load_wave, wav_format
from riffwave.utils.log import get_logger

logger = get_logger(__name__)

# Registry of all available formats
_format_registry: Dict[str, IAudioFormat] = {}


def register_format(format: IAudioFormat) -> None:
    """
    Register an audio format.

    Args:
        format: Format instance implementing IAudioFormat.
    """
    for ext in format.extensions:
        ext_lower = ext.lower()
        if ext_lower in _format_registry:
            logger.warning(
                f"Format with extension {ext_lower} already registered, "
                f"overwriting with {type(format).__name__}"
            )
        _format_registry[ext_lower] = format
    logger.debug(f"Registered format {type(format).__name__} for extensions: {format.extensions}")


def get_format_for_file(path: str) -> Optional[IAudioFormat]:
    """
    Get the appropriate format handler for a file.

    Args:
        path: Path to audio file.

    Returns:
        IAudioFormat instance if a suitable format is found, None otherwise.
    """
    ext = Path(path).suffix.lower()

    # First try by extension
    format = _format_registry.get(ext)
    if format is not None and format.can_load(path):
        return format

    # Extension unknown or misleading, so let every format sniff the header
    for format in _format_registry.values():
        if format.can_load(path):
            return format

    return None


def load_audio(path: str) -> WaveFile:
    """
    Detect the format of a file and decode it.

    Args:
        path: Path to audio file.

    Returns:
        The decoded WaveFile.

    Raises:
        TruncatedInput: If the file does not exist.
        InvalidFormat: If no registered format can load the file.
        WaveDecodeError: If the file cannot be decoded.
    """
    if not Path(path).is_file():
        raise TruncatedInput(f"Audio file not found: {path}")

    format = get_format_for_file(path)
    if format is None:
        raise InvalidFormat(
            f"No suitable format handler found for file: {path}. "
            f"Supported extensions: {', '.join(sorted(_format_registry))}"
        )
    return format.load(path)


register_format(wav_format)

__all__ = [
    "load_audio",
    "get_format_for_file",
    "register_format",
    "decode_wave",
    "load_wave",
    "IAudioFormat",
    "WaveDecodeError",
]
