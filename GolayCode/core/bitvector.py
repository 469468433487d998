"""
Fixed-length bit vector used by every stage of the coding pipeline.
"""

import operator
from typing import Iterable, Iterator, List

import numpy as np

from GolayCode.core.errors import InvalidFormat, InvalidLength


class BitVector:
    """
    Ordered sequence of bits with a length fixed at construction.

    Bits are stored in a private numpy bool array. Constructors copy their
    input and the combining operations (xor, slice, concat) return new
    vectors, so callers never share a buffer. Only `set` mutates, and only
    the vector it is called on.
    """

    __slots__ = ("_bits",)
    __hash__ = None

    def __init__(self, length: int = 0):
        """
        Creates an all-zero vector.

        Args:
            length: Number of bits
        """
        length = operator.index(length)
        if length < 0:
            raise InvalidLength(f"Vector length must not be negative, got {length}")
        self._bits = np.zeros(length, dtype=bool)

    @classmethod
    def zeros(cls, length: int) -> "BitVector":
        return cls(length)

    @classmethod
    def unit(cls, length: int, position: int) -> "BitVector":
        """Creates a vector with a single set bit at `position`."""
        vector = cls(length)
        vector.set(position, True)
        return vector

    @classmethod
    def from_bits(cls, bits: Iterable) -> "BitVector":
        """
        Creates a vector from any iterable of truthy/falsy values.

        Args:
            bits: Bits in index order (bools, 0/1 ints, numpy values)

        Returns:
            New BitVector holding a copy of the bits

        Raises:
            InvalidFormat: If bits is a string; use from_bit_string instead
        """
        if isinstance(bits, str):
            raise InvalidFormat("from_bits does not parse strings, use from_bit_string")
        return cls.from_numpy(np.fromiter((bool(b) for b in bits), dtype=bool))

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "BitVector":
        """Creates a vector from a one-dimensional numpy array (copied)."""
        array = np.asarray(array)
        if array.ndim != 1:
            raise InvalidLength(f"Expected a one-dimensional array, got shape {array.shape}")
        vector = cls.__new__(cls)
        vector._bits = array.astype(bool, copy=True)
        return vector

    @classmethod
    def from_bit_string(cls, text: str) -> "BitVector":
        """
        Parses a string of '0' and '1' characters.

        Args:
            text: Bit string, one character per bit

        Returns:
            Vector of length len(text)

        Raises:
            InvalidFormat: If any character is not '0' or '1'
        """
        for position, char in enumerate(text):
            if char not in "01":
                raise InvalidFormat(
                    f"Invalid character {char!r} at position {position}; only '0' and '1' are allowed"
                )
        return cls.from_numpy(np.array([char == "1" for char in text], dtype=bool))

    def to_bit_string(self) -> str:
        return "".join("1" if bit else "0" for bit in self._bits)

    def to_numpy(self) -> np.ndarray:
        """Returns a copy of the bits as a numpy bool array."""
        return self._bits.copy()

    def to_list(self) -> List[bool]:
        return [bool(bit) for bit in self._bits]

    @property
    def length(self) -> int:
        return len(self._bits)

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if index < 0 or index >= len(self._bits):
            raise IndexError(f"Bit index {index} out of range for vector of length {len(self._bits)}")
        return index

    def get(self, index: int) -> bool:
        return bool(self._bits[self._check_index(index)])

    def set(self, index: int, value: bool) -> None:
        self._bits[self._check_index(index)] = bool(value)

    def hamming_weight(self) -> int:
        """Number of set bits."""
        return int(np.count_nonzero(self._bits))

    def xor(self, other: "BitVector") -> "BitVector":
        """
        Bitwise XOR with a vector of the same length.

        Raises:
            InvalidLength: If the lengths differ
        """
        if len(other) != len(self):
            raise InvalidLength(f"Cannot XOR vectors of length {len(self)} and {len(other)}")
        return BitVector.from_numpy(self._bits ^ other._bits)

    def slice(self, start: int, stop: int) -> "BitVector":
        if not 0 <= start <= stop <= len(self._bits):
            raise IndexError(f"Slice [{start}:{stop}] out of range for vector of length {len(self._bits)}")
        return BitVector.from_numpy(self._bits[start:stop])

    def concat(self, other: "BitVector") -> "BitVector":
        return BitVector.from_numpy(np.concatenate([self._bits, other._bits]))

    def copy(self) -> "BitVector":
        return BitVector.from_numpy(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __setitem__(self, index: int, value: bool) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[bool]:
        return (bool(bit) for bit in self._bits)

    def __xor__(self, other: "BitVector") -> "BitVector":
        return self.xor(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return bool(np.array_equal(self._bits, other._bits))

    def __repr__(self) -> str:
        return f"BitVector('{self.to_bit_string()}')"

    def __str__(self) -> str:
        return self.to_bit_string()
