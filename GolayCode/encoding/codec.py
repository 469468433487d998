"""
Conversions between bit vectors, bytes and text.

Bytes map to bits least significant bit first: bit 0 of the vector is
bit 0 (value 1) of the byte.
"""

from typing import List

from GolayCode.core.bitvector import BitVector
from GolayCode.core.constants import BYTE_BITS, MESSAGE_BITS
from GolayCode.core.errors import InvalidLength


def vector_to_string(vector: BitVector) -> str:
    """Converts a vector to its '0'/'1' string."""
    return vector.to_bit_string()

def string_to_vector(text: str) -> BitVector:
    """
    Parses a '0'/'1' string.

    Raises:
        InvalidFormat: If the string holds any other character
    """
    return BitVector.from_bit_string(text)

def byte_to_vector(value: int, length: int = MESSAGE_BITS) -> BitVector:
    """
    Converts a byte to a bit vector, zero-padding the upper bits.

    Args:
        value: Byte value in 0..255
        length: Vector length, at least 8 (default: 12 for Golay messages)

    Returns:
        Vector whose first 8 bits are the byte, LSB first
    """
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Byte value must be in 0..255, got {value}")
    if length < BYTE_BITS:
        raise InvalidLength(f"Vector must be at least {BYTE_BITS} bits long to hold a byte")

    vector = BitVector(length)
    for i in range(BYTE_BITS):
        vector[i] = (value >> i) & 1
    return vector

def vector_to_byte(vector: BitVector) -> int:
    """
    Converts a vector of at most 8 bits to a byte.

    Raises:
        InvalidLength: If the vector contains more bits than fit into a byte
    """
    if len(vector) > BYTE_BITS:
        raise InvalidLength("Vector contains more bits than can fit into a single byte.")

    value = 0
    for i, bit in enumerate(vector):
        if bit:
            value |= 1 << i
    return value

def message_to_byte(message: BitVector) -> int:
    """Truncates a decoded message to its first 8 bits and converts them to a byte."""
    return vector_to_byte(message.slice(0, BYTE_BITS))

def bytes_to_vectors(data: bytes, length: int = MESSAGE_BITS) -> List[BitVector]:
    return [byte_to_vector(b, length) for b in data]

def text_to_bytes(text: str) -> bytes:
    return text.encode("utf-8")

def bytes_to_text(data: bytes) -> str:
    """Decodes UTF-8, replacing undecodable sequences with U+FFFD."""
    return data.decode("utf-8", errors="replace")
