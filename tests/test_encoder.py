import random

import pytest

from GolayCode.core.bitvector import BitVector
from GolayCode.core.errors import InvalidLength

from conftest import bits, message_from_int


def test_zero_message_encodes_to_zero_codeword(encoder):
    codeword = encoder.encode(BitVector(12))
    assert codeword == BitVector(23)


def test_unit_messages_encode_to_generator_rows(encoder, matrices):
    assert encoder.encode(bits("100000000000")).to_bit_string() == "10000000000011011100010"
    assert encoder.encode(bits("010000000000")).to_bit_string() == "01000000000010111000101"

    for row in range(12):
        codeword = encoder.encode(BitVector.unit(12, row))
        assert codeword.to_list() == [bool(b) for b in matrices.generator[row]]


def test_encoding_is_systematic(encoder):
    message = bits("101100111000")
    assert encoder.encode(message).slice(0, 12) == message


def test_nonzero_codewords_have_weight_at_least_seven(encoder):
    weights = {encoder.encode(message_from_int(value)).hamming_weight() for value in range(1, 4096)}
    assert min(weights) == 7
    assert weights <= {7, 8, 11, 12, 15, 16, 23}


def test_linearity(encoder):
    rng = random.Random(7)
    for _ in range(300):
        a = message_from_int(rng.randrange(4096))
        b = message_from_int(rng.randrange(4096))
        assert encoder.encode(a ^ b) == encoder.encode(a) ^ encoder.encode(b)


def test_encode_does_not_modify_input(encoder):
    message = bits("111100001111")
    encoder.encode(message)
    assert message.to_bit_string() == "111100001111"


@pytest.mark.parametrize("length", [0, 8, 11, 13, 23])
def test_invalid_length(encoder, length):
    with pytest.raises(InvalidLength):
        encoder.encode(BitVector(length))


def test_none_is_invalid_length(encoder):
    with pytest.raises(InvalidLength):
        encoder.encode(None)
