"""Test the full boxify -> pack -> serialize -> deserialize -> unpack pipeline."""

import numpy as np
import pytest

from qimg import boxify, deserialize, pack, serialize, unpack
from qimg.exceptions import CroppingWarning
from qimg.models.image import RasterImage


def _run(image: RasterImage, box_size: int) -> RasterImage:
    return unpack(deserialize(serialize(pack(boxify(image, box_size)))))


def test_checkerboard_tiles_keep_two_expected_colors(checkerboard) -> None:
    image, expected = checkerboard(4, 3, 4)
    output = _run(image, 4)
    pixels = output.to_array()

    assert (output.width, output.height) == (16, 12)
    for (tx, ty), (light, dark) in expected.items():
        tile = pixels[ty * 4:(ty + 1) * 4, tx * 4:(tx + 1) * 4]
        colors = {tuple(int(v) for v in px) for px in tile.reshape(-1, 4)}
        assert colors == {(*light, 255), (*dark, 255)}

    assert output == image


def test_serialized_size(checkerboard) -> None:
    image, _ = checkerboard(4, 3, 4)
    data = serialize(pack(boxify(image, 4)))
    assert len(data) == 16 + 12 * (8 + 16)


def test_cropped_image_roundtrip() -> None:
    rng = np.random.default_rng(11)
    pixels = rng.integers(0, 256, size=(10, 13, 4), dtype=np.uint8)

    with pytest.warns(CroppingWarning):
        output = _run(RasterImage.from_array(pixels), 4)

    assert (output.width, output.height) == (12, 8)
    assert all(output.pixel(x, y)[3] == 255 for x in range(12) for y in range(8))


def test_threaded_pipeline_matches_sequential(checkerboard) -> None:
    image, _ = checkerboard(5, 5, 2)
    boxed = boxify(image, 2)

    sequential = serialize(pack(boxed))
    threaded = serialize(pack(boxed, workers=4))

    assert threaded == sequential
    assert unpack(deserialize(threaded), workers=4) == unpack(deserialize(sequential))
