"""
Binary symmetric channel simulation.
"""

from typing import List, Optional

import numpy as np

from GolayCode.core.bitvector import BitVector
from GolayCode.core.errors import InvalidLength


class NoisyChannel:
    """
    Simulates a noisy channel that flips each bit independently.

    A bit is flipped when its uniform sample from [0, 1) is <= probability.
    The only state is the channel's own random generator.
    """

    def __init__(
        self,
        probability: float,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initializes the channel.

        Args:
            probability: Per-bit error probability in [0, 1]
            seed: Seed for a new generator (ignored when rng is given)
            rng: Generator to draw samples from
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Error probability must be between 0 and 1, got {probability}")
        self.probability = probability
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def transmit(self, vector: BitVector) -> BitVector:
        """
        Sends a vector through the channel.

        Args:
            vector: Vector to transmit

        Returns:
            New vector of the same length with some bits flipped
        """
        bits = vector.to_numpy()
        flips = self._rng.random(len(bits)) <= self.probability
        return BitVector.from_numpy(bits ^ flips)


def error_positions(sent: BitVector, received: BitVector) -> List[int]:
    """Indices where the two vectors differ."""
    if len(sent) != len(received):
        raise InvalidLength(f"Cannot compare vectors of length {len(sent)} and {len(received)}")
    return [i for i, (a, b) in enumerate(zip(sent, received)) if a != b]


def count_errors(sent: BitVector, received: BitVector) -> int:
    return sent.xor(received).hamming_weight()
