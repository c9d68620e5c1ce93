"""In-memory images with a packed pixel buffer.

An image stores its pixels row by row in a :class:`bytearray`. Each pixel
takes four bytes; ``endian`` 0 stores the least significant byte first,
``endian`` 1 the most significant byte first.
"""

from __future__ import annotations

BITS_PER_PIXEL = 32
_PIXEL_MASK = 0xFFFFFFFF


class Image:
    """A width by height grid of 32-bit pixels held in a byte buffer."""

    def __init__(self, width: int, height: int, endian: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {endian}")
        self.width = width
        self.height = height
        self.endian = endian
        self.bits_per_pixel = BITS_PER_PIXEL
        self.size_line = width * self.bytes_per_pixel
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        """Number of bytes taken by one pixel."""
        return self.bits_per_pixel // 8

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, endian={self.endian})"

    def data_address(self) -> tuple[bytearray, int, int, int]:
        """Return ``(data, bits_per_pixel, size_line, endian)``.

        The buffer is shared with the image, so writing to it changes the image.
        """
        return self.data, self.bits_per_pixel, self.size_line, self.endian

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store *color* at column *x*, row *y*; only its low 32 bits are kept."""
        offset = self._offset(x, y)
        size = self.bytes_per_pixel
        self.data[offset:offset + size] = (color & _PIXEL_MASK).to_bytes(
            size, self._byteorder()
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value at column *x*, row *y*."""
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset:offset + self.bytes_per_pixel], self._byteorder()
        )

    def same_layout(self, other: Image) -> bool:
        """Tell whether *other* has the same size and memory layout."""
        return (
            self.width,
            self.height,
            self.bits_per_pixel,
            self.size_line,
            self.endian,
        ) == (
            other.width,
            other.height,
            other.bits_per_pixel,
            other.size_line,
            other.endian,
        )

    def pixels(self) -> list[list[int]]:
        """Return all pixel values as a list of rows."""
        return [
            [self.get_pixel(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]


def new_image(width: int, height: int) -> Image:
    """Create a black image of *width* by *height* pixels."""
    return Image(width, height)