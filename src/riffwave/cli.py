"""Command-line interface for decoding WAVE files."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from riffwave.core.exceptions import WaveDecodeError
from riffwave.core.models import ReportConfig
from riffwave.formats import load_audio
from riffwave.report import render_wave
from riffwave.utils.log import get_logger, set_level

logger = get_logger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Decode RIFF/WAVE files and print their contents")
    parser.add_argument("paths", nargs="*", help="WAVE files to decode")
    parser.add_argument(
        "-n",
        "--preview",
        type=int,
        default=ReportConfig.preview_samples,
        help="Number of leading samples to show per channel (default: %(default)s)",
    )
    parser.add_argument(
        "--all-channels",
        action="store_true",
        help="Preview every channel instead of only the first",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ReportConfig:
    """Turn parsed arguments into a ReportConfig."""
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    return ReportConfig(
        preview_samples=max(args.preview, 0),
        all_channels=args.all_channels,
        log_level=level,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Decode each path in turn and print the result or the error."""
    args = parse_args(argv)
    config = build_config(args)
    set_level(config.log_level)

    failures = 0
    for path in args.paths:
        print(f"Result for {path}:")
        try:
            wave = load_audio(path)
        except WaveDecodeError as e:
            failures += 1
            logger.debug(f"Decoding {path} failed", exc_info=True)
            print(f"  error: {type(e).__name__}: {e}")
            continue
        print(render_wave(wave, config))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
