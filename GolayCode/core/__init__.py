from GolayCode.core.bitvector import BitVector
from GolayCode.core.errors import GolayError, InvalidLength, InvalidFormat, DecodingFailure
from GolayCode.core.matrices import (
    IDENTITY,
    B,
    GolayMatrices,
    build_generator,
    build_parity_check,
    build_matrices,
    gf2_multiply,
)
from GolayCode.core.constants import (
    MESSAGE_BITS,
    CODEWORD_BITS,
    EXTENDED_BITS,
    SYNDROME_BITS,
    MAX_CORRECTABLE,
    BYTE_BITS,
    BMP_HEADER_SIZE,
)

__all__ = [
    "BitVector",
    "GolayError",
    "InvalidLength",
    "InvalidFormat",
    "DecodingFailure",
    "IDENTITY",
    "B",
    "GolayMatrices",
    "build_generator",
    "build_parity_check",
    "build_matrices",
    "gf2_multiply",
    "MESSAGE_BITS",
    "CODEWORD_BITS",
    "EXTENDED_BITS",
    "SYNDROME_BITS",
    "MAX_CORRECTABLE",
    "BYTE_BITS",
    "BMP_HEADER_SIZE",
]
