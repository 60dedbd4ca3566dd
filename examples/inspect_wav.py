"""Example: Decode a WAV file and print per-channel statistics."""

import sys
from pathlib import Path

from riffwave import WaveDecodeError, load_wave

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python inspect_wav.py <path_to_wav_file>")
        sys.exit(1)

    wav_path = sys.argv[1]
    if not Path(wav_path).exists():
        print(f"Error: File not found: {wav_path}")
        sys.exit(1)

    try:
        wave = load_wave(wav_path)
    except WaveDecodeError as e:
        print(f"Error: {type(e).__name__}: {e}")
        sys.exit(1)

    print(
        f"Loaded: {wave.channel_count}ch, {wave.format.sample_rate}Hz, "
        f"{wave.bits_per_sample}bit, {wave.duration_seconds:.2f} seconds"
    )

    for index, channel in enumerate(wave.samples.channels):
        if channel:
            print(f"  channel {index}: min={min(channel)} max={max(channel)}")
        else:
            print(f"  channel {index}: empty")
