import pytest
import torch

from GolayCode.coding.decoder import Decoder
from GolayCode.coding.encoder import Encoder
from GolayCode.core.bitvector import BitVector
from GolayCode.core.matrices import build_matrices
from GolayCode.simulation.config import SimulationConfig


def bits(text: str) -> BitVector:
    return BitVector.from_bit_string(text)


def message_from_int(value: int) -> BitVector:
    return BitVector.from_bits((value >> i) & 1 for i in range(12))


def flip(vector: BitVector, *positions: int) -> BitVector:
    flipped = vector.copy()
    for position in positions:
        flipped[position] = not flipped[position]
    return flipped


@pytest.fixture
def matrices():
    return build_matrices()


@pytest.fixture
def encoder(matrices):
    return Encoder(matrices.generator)


@pytest.fixture
def decoder(matrices):
    return Decoder(matrices.parity_check, matrices.b)


@pytest.fixture
def cpu():
    return torch.device("cpu")


@pytest.fixture
def config(tmp_path):
    return SimulationConfig(
        error_probability=0.05,
        seed=1234,
        output_dir=str(tmp_path),
        force_cpu=True,
        batch_size=64,
        log_level="WARNING",
    )
