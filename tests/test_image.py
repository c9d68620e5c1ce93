import pytest

from fromage.image import Image, new_image


def test_new_image_is_black_and_sized():
    image = new_image(3, 2)
    assert image.width == 3
    assert image.height == 2
    assert image.pixels() == [[0, 0, 0], [0, 0, 0]]


def test_buffer_matches_reported_layout():
    image = new_image(5, 4)
    data, bpp, size_line, endian = image.data_address()
    assert len(data) == size_line * image.height
    assert size_line == image.width * bpp // 8
    assert endian == image.endian
    assert not any(data)


def test_set_and_get_round_trip():
    image = new_image(4, 3)
    image.set_pixel(2, 1, 0x123456)
    image.set_pixel(0, 0, 0xABCDEF)
    assert image.get_pixel(2, 1) == 0x123456
    assert image.get_pixel(0, 0) == 0xABCDEF
    assert image.get_pixel(1, 1) == 0


def test_little_endian_byte_order():
    image = new_image(2, 1)
    image.set_pixel(1, 0, 0x11223344)
    data, _, _, _ = image.data_address()
    assert bytes(data[4:8]) == b"\x44\x33\x22\x11"


def test_big_endian_byte_order():
    image = Image(1, 1, endian=1)
    image.set_pixel(0, 0, 0x11223344)
    assert bytes(image.data) == b"\x11\x22\x33\x44"
    assert image.get_pixel(0, 0) == 0x11223344


def test_negative_colour_keeps_low_bits():
    image = new_image(1, 1)
    image.set_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_writing_to_shared_buffer_changes_pixels():
    image = new_image(2, 2)
    data, _, size_line, _ = image.data_address()
    data[size_line] = 7
    assert image.get_pixel(0, 1) == 7


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_out_of_range_pixel_raises(x, y):
    image = new_image(2, 2)
    with pytest.raises(IndexError):
        image.set_pixel(x, y, 1)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-3, 2)])
def test_bad_size_raises(width, height):
    with pytest.raises(ValueError):
        new_image(width, height)


def test_bad_endian_raises():
    with pytest.raises(ValueError):
        Image(1, 1, endian=2)


def test_same_layout():
    assert new_image(3, 3).same_layout(new_image(3, 3))
    assert not new_image(3, 3).same_layout(new_image(3, 4))
    assert not new_image(3, 3).same_layout(Image(3, 3, endian=1))