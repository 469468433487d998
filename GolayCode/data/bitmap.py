"""
BMP file splitting and reassembly.

Only the pixel data is sent through the channel; the header is kept
untouched so the processed file still opens as an image.
"""

from dataclasses import dataclass

from GolayCode.core.constants import BMP_HEADER_SIZE
from GolayCode.core.errors import InvalidFormat
from GolayCode.utils.io import read_bytes, write_bytes
from GolayCode.utils.logging import get_logger


@dataclass(frozen=True)
class BitmapImage:
    """BMP file split into its header and pixel data."""

    header: bytes
    pixels: bytes

    @classmethod
    def from_bytes(cls, data: bytes, header_size: int = BMP_HEADER_SIZE) -> "BitmapImage":
        if len(data) < header_size:
            raise InvalidFormat(
                f"BMP data is {len(data)} bytes long, shorter than its {header_size}-byte header"
            )
        if not data.startswith(b"BM"):
            get_logger().warning("File does not start with the 'BM' signature")
        return cls(header=bytes(data[:header_size]), pixels=bytes(data[header_size:]))

    def to_bytes(self) -> bytes:
        return self.header + self.pixels

    def with_pixels(self, pixels: bytes) -> "BitmapImage":
        """Returns a copy with the same header and new pixel data."""
        return BitmapImage(header=self.header, pixels=pixels)


def load_bitmap(filepath: str, header_size: int = BMP_HEADER_SIZE) -> BitmapImage:
    """
    Reads a BMP file.

    Args:
        filepath: Path to the image
        header_size: Number of leading bytes kept as header

    Returns:
        BitmapImage

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidFormat: If the file is shorter than the header
    """
    return BitmapImage.from_bytes(read_bytes(filepath), header_size)

def save_bitmap(image: BitmapImage, filepath: str) -> str:
    return write_bytes(filepath, image.to_bytes())
