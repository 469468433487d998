"""
Result types returned by the decoder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from GolayCode.core.bitvector import BitVector
from GolayCode.core.constants import CODEWORD_BITS
from GolayCode.core.errors import GolayError

T = TypeVar("T")


class DecodeStage(Enum):
    """Stage of syndrome decoding that located the error pattern."""

    DIRECT = "direct"
    ROW_SEARCH = "row_search"
    SECOND_SYNDROME = "second_syndrome"
    SECOND_ROW_SEARCH = "second_row_search"


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of a successful decode.

    Attributes:
        message: Recovered 12-bit message
        error_pattern: 24-bit error pattern u applied to the extended word
        stage: Decoding stage that found u
    """

    message: BitVector
    error_pattern: BitVector
    stage: DecodeStage

    @property
    def corrected_bits(self) -> int:
        """Bits corrected among the 23 transmitted positions."""
        return self.error_pattern.slice(0, CODEWORD_BITS).hamming_weight()


@dataclass(frozen=True)
class CodingOutcome(Generic[T]):
    """
    Either a value or the error that prevented producing it.

    Usage:
        outcome = decoder.try_decode(received)
        if outcome.ok:
            use(outcome.value)
        else:
            report(outcome.error)
    """

    value: Optional[T] = None
    error: Optional[GolayError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "CodingOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: GolayError) -> "CodingOutcome[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Returns the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value
