import pytest
import torch

from GolayCode.core.errors import InvalidLength
from GolayCode.encoding.batch import (
    batch_to_vectors,
    bytes_to_message_batch,
    encode_batch,
    message_batch_to_bytes,
    transmit_batch,
    vectors_to_batch,
)
from GolayCode.encoding.codec import byte_to_vector

from conftest import message_from_int


def test_bytes_to_message_batch_matches_byte_to_vector(cpu):
    data = bytes([0, 1, 0x5A, 0xFF])
    batch = bytes_to_message_batch(data, cpu)
    assert batch.shape == (4, 12)
    assert batch_to_vectors(batch) == [byte_to_vector(b) for b in data]


def test_message_batch_round_trip(cpu):
    data = bytes(range(256))
    assert message_batch_to_bytes(bytes_to_message_batch(data, cpu)) == data


def test_empty_input(cpu):
    batch = bytes_to_message_batch(b"", cpu)
    assert batch.shape == (0, 12)
    assert message_batch_to_bytes(batch) == b""


def test_encode_batch_matches_encoder(encoder, matrices, cpu):
    messages = [message_from_int(value) for value in range(4096)]
    codewords = encode_batch(vectors_to_batch(messages, cpu), matrices.generator)

    assert codewords.shape == (4096, 23)
    assert batch_to_vectors(codewords) == [encoder.encode(m) for m in messages]


def test_encode_batch_rejects_wrong_width(matrices, cpu):
    with pytest.raises(InvalidLength):
        encode_batch(torch.zeros((3, 8), device=cpu), matrices.generator)


def test_transmit_batch_extremes(cpu):
    bits = bytes_to_message_batch(b"\x0f\xf0", cpu)
    assert torch.equal(transmit_batch(bits, 0.0), bits)
    assert torch.equal(transmit_batch(bits, 1.0), 1.0 - bits)


def test_transmit_batch_is_reproducible_with_generator(cpu):
    bits = torch.zeros((50, 23), device=cpu)
    first = transmit_batch(bits, 0.2, torch.Generator().manual_seed(3))
    second = transmit_batch(bits, 0.2, torch.Generator().manual_seed(3))
    assert torch.equal(first, second)
    assert 0 < first.sum().item() < bits.numel()


def test_transmit_batch_invalid_probability(cpu):
    with pytest.raises(ValueError):
        transmit_batch(torch.zeros((1, 8), device=cpu), 2.0)


def test_vectors_to_batch_requires_equal_lengths(cpu):
    with pytest.raises(InvalidLength):
        vectors_to_batch([message_from_int(1), byte_to_vector(1, length=8)], cpu)


def test_transmit_batch_never_flips_at_zero_probability(cpu):
    bits = torch.zeros(1 << 24, device=cpu)
    generator = torch.Generator().manual_seed(0)
    for _ in range(4):
        assert transmit_batch(bits, 0.0, generator).sum().item() == 0


def test_transmit_batch_small_probability_is_not_rounded_up(cpu):
    bits = torch.zeros(1 << 20, device=cpu)
    noisy = transmit_batch(bits, 1e-9, torch.Generator().manual_seed(0))
    assert noisy.sum().item() == 0
