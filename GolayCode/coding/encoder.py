"""
Systematic Golay encoder.
"""

from typing import Optional

import numpy as np

from GolayCode.core.bitvector import BitVector
from GolayCode.core.constants import MESSAGE_BITS
from GolayCode.core.errors import InvalidLength
from GolayCode.core.matrices import build_matrices, gf2_multiply


class Encoder:
    """
    Maps 12-bit messages to 23-bit codewords.

    The first 12 bits of a codeword are the message itself, the remaining
    11 are check bits taken from the message times B.
    """

    def __init__(self, generator: Optional[np.ndarray] = None):
        """
        Initializes the encoder.

        Args:
            generator: 12x23 generator matrix (default: build_matrices().generator)
        """
        self.generator = generator if generator is not None else build_matrices().generator

    def encode(self, message: BitVector) -> BitVector:
        """
        Encodes a message.

        Args:
            message: 12-bit message

        Returns:
            23-bit codeword

        Raises:
            InvalidLength: If the message is not 12 bits long
        """
        if message is None or len(message) != MESSAGE_BITS:
            raise InvalidLength(f"Vector must be a length of {MESSAGE_BITS}")

        return BitVector.from_numpy(gf2_multiply(message.to_numpy(), self.generator))
