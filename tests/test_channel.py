import numpy as np
import pytest

from GolayCode.channel.noisy import NoisyChannel, count_errors, error_positions
from GolayCode.core.bitvector import BitVector
from GolayCode.core.errors import InvalidLength

from conftest import bits


def test_zero_probability_returns_identical_vector():
    channel = NoisyChannel(0.0, seed=1)
    vector = bits("10110011100011110000101")
    assert channel.transmit(vector) == vector


def test_probability_one_flips_every_bit():
    channel = NoisyChannel(1.0, seed=1)
    vector = bits("10110011100011110000101")
    received = channel.transmit(vector)
    assert count_errors(vector, received) == len(vector)


def test_high_probability_flips_nearly_all_bits():
    channel = NoisyChannel(0.99, seed=3)
    vector = BitVector(10_000)
    flipped = channel.transmit(vector).hamming_weight()
    assert flipped > 9_800


def test_flip_rate_matches_probability():
    channel = NoisyChannel(0.1, seed=5)
    vector = BitVector(20_000)
    rate = channel.transmit(vector).hamming_weight() / 20_000
    assert 0.09 < rate < 0.11


def test_transmit_preserves_length_and_input():
    channel = NoisyChannel(0.5, seed=11)
    vector = bits("000000000000")
    received = channel.transmit(vector)
    assert len(received) == 12
    assert vector.to_bit_string() == "000000000000"


def test_seeded_channels_are_reproducible():
    vector = BitVector(64)
    first = NoisyChannel(0.3, seed=42).transmit(vector)
    second = NoisyChannel(0.3, seed=42).transmit(vector)
    assert first == second


def test_accepts_external_generator():
    rng = np.random.default_rng(8)
    channel = NoisyChannel(0.2, rng=rng)
    assert len(channel.transmit(BitVector(16))) == 16


@pytest.mark.parametrize("probability", [-0.1, 1.5])
def test_invalid_probability(probability):
    with pytest.raises(ValueError):
        NoisyChannel(probability)


def test_error_positions():
    assert error_positions(bits("1100"), bits("0101")) == [0, 3]
    with pytest.raises(InvalidLength):
        error_positions(bits("1"), bits("10"))
