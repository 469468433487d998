"""
Generator and parity-check matrices of the binary Golay code.

G = [I | B'] is 12x23, where B' is B without its last column.
H = [I ; B] is 24x12 and checks the extended [24,12,8] code.
"""

from functools import lru_cache
from typing import NamedTuple

import numpy as np

from GolayCode.core.constants import CODEWORD_BITS, MESSAGE_BITS

IDENTITY = np.eye(MESSAGE_BITS, dtype=np.uint8)

# Symmetric and self-inverse over GF(2): B @ B = I.
B = np.array([
    [1, 1, 0, 1, 1, 1, 0, 0, 0, 1, 0, 1],
    [1, 0, 1, 1, 1, 0, 0, 0, 1, 0, 1, 1],
    [0, 1, 1, 1, 0, 0, 0, 1, 0, 1, 1, 1],
    [1, 1, 1, 0, 0, 0, 1, 0, 1, 1, 0, 1],
    [1, 1, 0, 0, 0, 1, 0, 1, 1, 0, 1, 1],
    [1, 0, 0, 0, 1, 0, 1, 1, 0, 1, 1, 1],
    [0, 0, 0, 1, 0, 1, 1, 0, 1, 1, 1, 1],
    [0, 0, 1, 0, 1, 1, 0, 1, 1, 1, 0, 1],
    [0, 1, 0, 1, 1, 0, 1, 1, 1, 0, 0, 1],
    [1, 0, 1, 1, 0, 1, 1, 1, 0, 0, 0, 1],
    [0, 1, 1, 0, 1, 1, 1, 0, 0, 0, 1, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0],
], dtype=np.uint8)

IDENTITY.setflags(write=False)
B.setflags(write=False)


class GolayMatrices(NamedTuple):
    """The fixed matrices shared by encoder and decoder."""

    generator: np.ndarray
    parity_check: np.ndarray
    b: np.ndarray


def _read_only(matrix: np.ndarray) -> np.ndarray:
    matrix.setflags(write=False)
    return matrix


def build_generator() -> np.ndarray:
    """
    Builds the 12x23 generator matrix.

    The identity fills the first 12 columns, the first 11 columns of B
    fill the remaining ones.

    Returns:
        Read-only uint8 array of shape (12, 23)
    """
    generator = np.hstack([IDENTITY, B[:, :CODEWORD_BITS - MESSAGE_BITS]])
    return _read_only(generator)


def build_parity_check() -> np.ndarray:
    """
    Builds the 24x12 parity-check matrix by stacking I above B.

    Returns:
        Read-only uint8 array of shape (24, 12)
    """
    parity_check = np.vstack([IDENTITY, B])
    return _read_only(parity_check)


@lru_cache(maxsize=None)
def build_matrices() -> GolayMatrices:
    """Builds G, H and B once; later calls return the same arrays."""
    return GolayMatrices(
        generator=build_generator(),
        parity_check=build_parity_check(),
        b=B,
    )


def gf2_multiply(bits: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """
    Multiplies a row vector by a matrix over GF(2).

    Args:
        bits: Vector of length matrix.shape[0] (bool or 0/1)
        matrix: 0/1 matrix

    Returns:
        Bool vector of length matrix.shape[1]
    """
    return (np.dot(np.asarray(bits, dtype=np.int64), matrix) % 2).astype(bool)
