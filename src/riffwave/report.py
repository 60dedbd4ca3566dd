"""Human-readable rendering of decoded WAVE files."""

from typing import Optional

from riffwave.core.models import (
    BytePerSample,
    Channels,
    ReportConfig,
    WaveFile,
    WordPerSample,
)


def _format_preview(samples, count: int, as_hex: bool) -> str:
    shown = samples[:count]
    if as_hex:
        items = [f"0x{sample:04X}" for sample in shown]
    else:
        items = [str(sample) for sample in shown]
    if len(samples) > count:
        items.append("...")
    return "[" + ", ".join(items) + "]"


def _render_channels(channels: Channels, config: ReportConfig, as_hex: bool) -> list[str]:
    lines = []
    previewed = channels if config.all_channels else channels[:1]
    for index, samples in enumerate(previewed):
        lines.append(
            f"  channel {index}: {_format_preview(samples, config.preview_samples, as_hex)}"
        )
    return lines


def render_wave(wave: WaveFile, config: Optional[ReportConfig] = None) -> str:
    """Render format fields and a preview of the samples."""
    if config is None:
        config = ReportConfig()
    samples = wave.samples
    if isinstance(samples, BytePerSample):
        preview = _render_channels(samples.channels, config, as_hex=False)
    elif isinstance(samples, WordPerSample):
        preview = _render_channels(samples.channels, config, as_hex=True)
    else:
        raise TypeError(f"Unknown sample buffer type: {type(samples).__name__}")

    fmt = wave.format
    lines = [
        f"  format tag: {fmt.tag.name} (0x{fmt.tag.value:04X})",
        f"  channels: {fmt.channel_count}",
        f"  sample rate: {fmt.sample_rate} Hz",
        f"  average byte rate: {fmt.average_byte_rate}",
        f"  block align: {fmt.block_align}",
        f"  bits per sample: {wave.bits_per_sample}",
        f"  riff size: {wave.riff_size}",
        f"  frames: {wave.num_frames} ({wave.duration_seconds:.2f}s)",
    ]
    lines.extend(preview)
    return "\n".join(lines)
