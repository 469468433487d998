import pytest

from GolayCode.core.bitvector import BitVector
from GolayCode.core.errors import InvalidFormat, InvalidLength
from GolayCode.encoding.codec import (
    byte_to_vector,
    bytes_to_text,
    bytes_to_vectors,
    message_to_byte,
    string_to_vector,
    text_to_bytes,
    vector_to_byte,
    vector_to_string,
)


def test_byte_to_vector_is_lsb_first_and_zero_padded():
    vector = byte_to_vector(0b00000101)
    assert len(vector) == 12
    assert vector.to_bit_string() == "101000000000"


def test_byte_to_vector_custom_length():
    assert byte_to_vector(0x80, length=8).to_bit_string() == "00000001"


def test_byte_round_trip():
    for value in range(256):
        assert vector_to_byte(byte_to_vector(value, length=8)) == value
        assert message_to_byte(byte_to_vector(value)) == value


def test_vector_to_byte_rejects_long_vectors():
    with pytest.raises(InvalidLength):
        vector_to_byte(BitVector(9))


def test_byte_to_vector_rejects_out_of_range():
    with pytest.raises(ValueError):
        byte_to_vector(256)
    with pytest.raises(InvalidLength):
        byte_to_vector(1, length=7)


def test_string_conversions():
    vector = string_to_vector("0110")
    assert vector_to_string(vector) == "0110"
    with pytest.raises(InvalidFormat):
        string_to_vector("01x0")


def test_bytes_to_vectors():
    vectors = bytes_to_vectors(b"\x01\xff")
    assert [v.to_bit_string() for v in vectors] == ["100000000000", "111111110000"]


def test_text_round_trip_utf8():
    text = "Zażółć gęślą jaźń"
    assert bytes_to_text(text_to_bytes(text)) == text


def test_invalid_utf8_is_replaced():
    assert bytes_to_text(b"ab\xff") == "ab�"
