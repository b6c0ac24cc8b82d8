"""Compress one image at several box sizes and report container sizes.

Usage:
    python examples/compare_box_sizes.py photo.png
    python examples/compare_box_sizes.py photo.png --sizes 2 4 8 16 --previews
"""

from __future__ import annotations

import argparse
import warnings
from pathlib import Path

from qimg import (
    FieldOverflowError,
    RasterFormat,
    boxify,
    decode_raster,
    encode_raster,
    get_raster_format,
    pack,
    serialize,
    unpack,
)


def compare(path: Path, sizes: list[int], previews: bool) -> None:
    """Print container size per box size, optionally writing PNG previews."""
    image = decode_raster(path.read_bytes(), get_raster_format(path.suffix))
    raw_size = image.width * image.height * 4
    print(f"{path.name}: {image.width}x{image.height}, {raw_size} bytes raw RGBA")

    for box_size in sizes:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            packed = pack(boxify(image, box_size))
        try:
            data = serialize(packed)
        except FieldOverflowError as err:
            print(f"  box {box_size:>3}: {err}")
            continue

        cropped = " (cropped)" if caught else ""
        print(
            f"  box {box_size:>3}: {len(packed.boxes):>6} boxes, "
            f"{len(data):>9} bytes, ratio {raw_size / len(data):.2f}{cropped}"
        )

        if previews and packed.boxes:
            preview = path.with_name(f"{path.stem}.box{box_size}.png")
            preview.write_bytes(encode_raster(unpack(packed), RasterFormat.PNG))
            print(f"           preview: {preview}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare .qimg container sizes across box sizes."
    )
    parser.add_argument("image", type=Path, help="PNG or JPEG input")
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=[2, 4, 8, 16],
        help="Box sizes to try. Default: 2 4 8 16",
    )
    parser.add_argument(
        "--previews",
        action="store_true",
        help="Write a PNG preview of each quantized image next to the input.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    compare(args.image, args.sizes, args.previews)


if __name__ == "__main__":
    main()
