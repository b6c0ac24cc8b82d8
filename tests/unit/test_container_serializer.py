"""Test .qimg serialization."""

import pytest

from qimg.container.header import HEADER_SIZE, MAGIC, MAX_BOX_COUNT, ContainerHeader
from qimg.container.serializer import serialize
from qimg.exceptions import FieldOverflowError, InvalidParameterError
from qimg.models.image import Color, PackedBox, PackedImage, Size


def _single_box_image(**overrides) -> PackedImage:
    box = PackedBox(0, 0, Color(1, 2, 3), Color(4, 5, 6), b"\x00\x01\x01\x00")
    fields = {"size": Size(1, 1), "box_size": 2, "boxes": (box,)}
    fields.update(overrides)
    return PackedImage(**fields)


class TestSerializeLayout:
    """Test the exact byte layout."""

    def test_single_box_bytes(self):
        data = serialize(_single_box_image())

        assert data == bytes([
            99, 115, 113, 47, 113, 105, 109, 103,  # magic
            0, 1,                                  # version
            2,                                     # box size
            1, 1,                                  # grid width, height
            0, 0, 1,                               # box count
            0, 0,                                  # x, y
            1, 2, 3,                               # light
            4, 5, 6,                               # dark
            0, 1, 1, 0,                            # indices
        ])

    def test_magic_is_ascii_signature(self):
        data = serialize(_single_box_image())
        assert data[:8].decode("ascii") == "csq/qimg"
        assert data[:8] == MAGIC

    def test_version_bytes(self):
        assert list(serialize(_single_box_image())[8:10]) == [0, 1]

    def test_total_length(self):
        boxes = tuple(
            PackedBox(x, y, Color(), Color(), b"\x00" * 9)
            for y in range(2)
            for x in range(3)
        )
        data = serialize(PackedImage(Size(3, 2), 3, boxes))
        assert len(data) == HEADER_SIZE + 6 * (8 + 9)

    def test_box_count_is_24_bit_big_endian(self):
        box = PackedBox(0, 0, Color(), Color(), b"")
        packed = PackedImage(Size(1, 1), 0, (box,) * 65538)

        data = serialize(packed)

        assert list(data[13:16]) == [1, 0, 2]

    def test_records_follow_box_order(self):
        first = PackedBox(1, 0, Color(9, 9, 9), Color(), b"\x01")
        second = PackedBox(0, 0, Color(8, 8, 8), Color(), b"\x00")
        data = serialize(PackedImage(Size(2, 1), 1, (first, second)))

        assert data[16:25] == bytes([1, 0, 9, 9, 9, 0, 0, 0, 1])
        assert data[25:34] == bytes([0, 0, 8, 8, 8, 0, 0, 0, 0])

    def test_empty_image(self):
        data = serialize(PackedImage(Size(0, 0), 4))
        assert len(data) == HEADER_SIZE
        assert list(data[10:16]) == [4, 0, 0, 0, 0, 0]


class TestSerializeOverflow:
    """Test fields that do not fit their widths."""

    def test_box_size_too_large(self):
        with pytest.raises(FieldOverflowError, match="box size"):
            serialize(_single_box_image(box_size=256, boxes=()))

    def test_width_too_large(self):
        with pytest.raises(FieldOverflowError, match="width"):
            serialize(_single_box_image(size=Size(256, 1)))

    def test_height_too_large(self):
        with pytest.raises(FieldOverflowError, match="height"):
            serialize(_single_box_image(size=Size(1, 300)))

    def test_box_count_too_large(self):
        header = ContainerHeader(box_size=1, size=Size(1, 1), box_count=MAX_BOX_COUNT + 1)
        with pytest.raises(FieldOverflowError, match="box count"):
            header.to_bytes()

    def test_max_values_fit(self):
        header = ContainerHeader(box_size=255, size=Size(255, 255), box_count=MAX_BOX_COUNT)
        assert header.to_bytes()[10:16] == bytes([255, 255, 255, 255, 255, 255])

    def test_box_coordinate_too_large(self):
        box = PackedBox(256, 0, Color(), Color(), b"\x00")
        with pytest.raises(FieldOverflowError, match="box x"):
            serialize(PackedImage(Size(1, 1), 1, (box,)))

    def test_index_count_must_match_box_size(self):
        box = PackedBox(0, 0, Color(), Color(), b"\x00\x01\x01")
        with pytest.raises(InvalidParameterError, match="has 3 indices, expected 4"):
            serialize(PackedImage(Size(1, 1), 2, (box,)))

    def test_overflow_is_a_value_error(self):
        with pytest.raises(ValueError):
            serialize(_single_box_image(box_size=1000, boxes=()))
