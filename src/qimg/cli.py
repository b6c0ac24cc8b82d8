"""Command line entry point: convert between .qimg and raster formats.

Usage:
    qimg-convert -i photo.png -n 8
    qimg-convert -i photo.png -n 8 -o preview.png
    qimg-convert -i photo.qimg -o photo.png
    qimg-convert -i photo.qimg --info
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .container import HEADER_SIZE, read_header
from .converter import ConvertOptions, convert, detect_mode
from .exceptions import QimgError
from .models.enums import ConvertMode
from .raster import DEFAULT_JPEG_QUALITY

_LOGGER = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="qimg-convert",
        description="Convert between .qimg format and other image formats.",
    )
    parser.add_argument("-i", "--input", required=True, help="Input file (.qimg, .png, .jpg, .jpeg)")
    parser.add_argument("-n", "--box-size", type=int, help="Box edge length in pixels (required to compress)")
    parser.add_argument("-o", "--output", help="Output file (default: input with .qimg or .jpeg extension)")
    parser.add_argument("--workers", type=int, help="Threads for per-box work (default: sequential)")
    parser.add_argument("--strict", action="store_true", help="Reject truncated or over-length .qimg input")
    parser.add_argument(
        "--quality",
        type=int,
        default=DEFAULT_JPEG_QUALITY,
        help=f"JPEG output quality 1-100. Default: {DEFAULT_JPEG_QUALITY}",
    )
    parser.add_argument("--info", action="store_true", help="Print the .qimg header and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    logging.captureWarnings(True)


def print_info(path: Path) -> int:
    header = read_header(path.read_bytes()[:HEADER_SIZE])
    print(f"version:    {header.version[0]}.{header.version[1]}")
    print(f"box size:   {header.box_size}")
    print(f"grid:       {header.size.width}x{header.size.height} boxes")
    print(f"image:      {header.size.width * header.box_size}x{header.size.height * header.box_size} px")
    print(f"box count:  {header.box_count}")
    print(f"expected:   {header.expected_length} bytes")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)

    input_path = Path(args.input)
    mode = detect_mode(input_path)

    if args.info and mode is not ConvertMode.DECOMPRESS:
        print("--info requires a .qimg input file", file=sys.stderr)
        return 2
    if mode is ConvertMode.COMPRESS and args.box_size is None:
        print("No box size parameter provided (use -n/--box-size)", file=sys.stderr)
        return 2

    options = ConvertOptions(
        box_size=args.box_size,
        workers=args.workers,
        strict=args.strict,
        quality=args.quality,
    )

    try:
        if args.info:
            return print_info(input_path)
        convert(input_path, args.output, options)
    except (QimgError, OSError) as exc:
        _LOGGER.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
