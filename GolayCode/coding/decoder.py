"""
Syndrome decoder for the binary Golay code.

A received 23-bit word is extended to 24 bits and decoded as a word of the
extended [24,12,8] code. Because H = [I ; B] and B is symmetric with
B @ B = I, every error pattern of weight <= 3 is found by one of four
checks on the syndrome s = wH and the second syndrome sB:

    1. wt(s) <= 3                  -> u = [s | 0]
    2. wt(s + B[row]) <= 2         -> u = [s + B[row] | e_row]
    3. wt(sB) <= 3                 -> u = [0 | sB]
    4. wt(sB + B[row]) <= 2        -> u = [e_row | sB + B[row]]

Rows are always scanned in order 0..11 and the first match wins.
"""

from typing import Optional, Tuple

import numpy as np

from GolayCode.coding.result import CodingOutcome, DecodeResult, DecodeStage
from GolayCode.core.bitvector import BitVector
from GolayCode.core.constants import (
    CODEWORD_BITS,
    EXTENDED_BITS,
    MAX_CORRECTABLE,
    MESSAGE_BITS,
    SYNDROME_BITS,
)
from GolayCode.core.errors import DecodingFailure, GolayError, InvalidLength
from GolayCode.core.matrices import build_matrices, gf2_multiply


class Decoder:
    """
    Recovers 12-bit messages from possibly corrupted 23-bit codewords.

    Stateless between calls; one instance may be shared freely.
    """

    def __init__(
        self,
        parity_check: Optional[np.ndarray] = None,
        b: Optional[np.ndarray] = None,
    ):
        """
        Initializes the decoder.

        Args:
            parity_check: 24x12 parity-check matrix H
            b: 12x12 matrix B
        """
        matrices = build_matrices()
        self.parity_check = parity_check if parity_check is not None else matrices.parity_check
        self.b = b if b is not None else matrices.b
        self._rows = [BitVector.from_numpy(row) for row in self.b]

    def decode(self, received: BitVector) -> BitVector:
        """
        Decodes a received codeword.

        Args:
            received: 23-bit received word

        Returns:
            12-bit decoded message

        Raises:
            InvalidLength: If the word is not 23 bits long
            DecodingFailure: If no correctable error pattern exists
        """
        return self.decode_detailed(received).message

    def decode_detailed(self, received: BitVector) -> DecodeResult:
        """Decodes a 23-bit word and reports how it was corrected."""
        if received is None or len(received) != CODEWORD_BITS:
            raise InvalidLength(f"Vector must be a length of {CODEWORD_BITS}")

        return self.decode_extended(self.extend(received))

    def try_decode(self, received: BitVector) -> CodingOutcome[DecodeResult]:
        """
        Decodes without raising.

        Returns:
            CodingOutcome holding a DecodeResult, or the GolayError raised
        """
        try:
            return CodingOutcome.success(self.decode_detailed(received))
        except GolayError as e:
            return CodingOutcome.failure(e)

    def extend(self, received: BitVector) -> BitVector:
        """
        Appends the 24th bit used to decode as the extended code.

        The appended bit is set when the received weight is even, so the
        extended word always has odd weight.
        """
        last_bit = received.hamming_weight() % 2 == 0
        tail = BitVector(1)
        tail[0] = last_bit
        return received.concat(tail)

    def compute_syndrome(self, word: BitVector) -> BitVector:
        """
        Computes s = wH for a 24-bit word.

        Raises:
            InvalidLength: If the word is not 24 bits long
        """
        if len(word) != EXTENDED_BITS:
            raise InvalidLength(f"Vector must be a length of {EXTENDED_BITS}")
        return BitVector.from_numpy(gf2_multiply(word.to_numpy(), self.parity_check))

    def compute_second_syndrome(self, syndrome: BitVector) -> BitVector:
        """
        Computes sB for a 12-bit syndrome.

        Raises:
            InvalidLength: If the syndrome is not 12 bits long
        """
        if len(syndrome) != SYNDROME_BITS:
            raise InvalidLength(f"Vector must be a length of {SYNDROME_BITS}")
        return BitVector.from_numpy(gf2_multiply(syndrome.to_numpy(), self.b))

    def _search_rows(self, syndrome: BitVector) -> Optional[Tuple[int, BitVector]]:
        # First row whose adjusted syndrome has weight <= 2.
        for row, b_row in enumerate(self._rows):
            adjusted = syndrome.xor(b_row)
            if adjusted.hamming_weight() <= MAX_CORRECTABLE - 1:
                return row, adjusted
        return None

    def locate_errors(self, word: BitVector) -> Tuple[BitVector, DecodeStage]:
        """
        Finds the error pattern of weight <= 3 for a 24-bit word.

        Args:
            word: 24-bit extended word

        Returns:
            Tuple of (24-bit error pattern u, stage that found it)

        Raises:
            DecodingFailure: If no such pattern exists
        """
        syndrome = self.compute_syndrome(word)
        zeros = BitVector.zeros(SYNDROME_BITS)

        if syndrome.hamming_weight() <= MAX_CORRECTABLE:
            return syndrome.concat(zeros), DecodeStage.DIRECT

        match = self._search_rows(syndrome)
        if match is not None:
            row, adjusted = match
            return adjusted.concat(BitVector.unit(SYNDROME_BITS, row)), DecodeStage.ROW_SEARCH

        second_syndrome = self.compute_second_syndrome(syndrome)

        if second_syndrome.hamming_weight() <= MAX_CORRECTABLE:
            return zeros.concat(second_syndrome), DecodeStage.SECOND_SYNDROME

        match = self._search_rows(second_syndrome)
        if match is not None:
            row, adjusted = match
            return BitVector.unit(SYNDROME_BITS, row).concat(adjusted), DecodeStage.SECOND_ROW_SEARCH

        raise DecodingFailure()

    def decode_extended(self, word: BitVector) -> DecodeResult:
        """
        Decodes a 24-bit word of the extended code.

        Args:
            word: 24-bit word

        Returns:
            DecodeResult with the first 12 bits of the corrected word

        Raises:
            InvalidLength: If the word is not 24 bits long
            DecodingFailure: If more errors occurred than can be corrected
        """
        error_pattern, stage = self.locate_errors(word)
        corrected = word.xor(error_pattern)
        return DecodeResult(
            message=corrected.slice(0, MESSAGE_BITS),
            error_pattern=error_pattern,
            stage=stage,
        )
