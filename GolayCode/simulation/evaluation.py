"""
Error-rate evaluation for the Golay-coded channel.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import torch

from GolayCode.coding.decoder import Decoder
from GolayCode.core.constants import CODEWORD_BITS, MESSAGE_BITS
from GolayCode.core.matrices import build_matrices
from GolayCode.encoding.batch import batch_to_vectors, encode_batch, transmit_batch
from GolayCode.simulation.config import SimulationConfig
from GolayCode.utils.device import get_device
from GolayCode.utils.logging import get_logger
from GolayCode.utils.timing import timed


@dataclass
class ChannelStatistics:
    """
    Measured channel performance.

    Attributes:
        units: Number of 12-bit messages sent
        raw_bit_error_rate: Fraction of codeword bits flipped by the channel
        residual_bit_error_rate: Fraction of message bits still wrong after decoding
        unit_error_rate: Fraction of messages not recovered exactly
        failures: Messages the decoder rejected (always 0 for 23-bit words)
    """
    units: int
    raw_bit_error_rate: float
    residual_bit_error_rate: float
    unit_error_rate: float
    failures: int


@timed
def evaluate_channel(
    config: SimulationConfig,
    units: int = 10_000,
    device: Optional[torch.device] = None,
) -> ChannelStatistics:
    """
    Sends random messages through the coded channel and measures error rates.

    Args:
        config: Simulation configuration (probability, seed, batch size)
        units: Number of random 12-bit messages to send
        device: Compute device for encoding and channel noise

    Returns:
        ChannelStatistics
    """
    if units <= 0:
        raise ValueError("units must be positive")

    device = device or get_device(force_cpu=config.force_cpu)
    matrices = build_matrices()
    decoder = Decoder(matrices.parity_check, matrices.b)

    rng = np.random.default_rng(config.seed)
    generator = torch.Generator(device=device)
    if config.seed is not None:
        generator.manual_seed(config.seed)
    else:
        generator.seed()

    flipped_bits = 0
    wrong_bits = 0
    wrong_units = 0
    failures = 0

    for start in range(0, units, config.batch_size):
        count = min(config.batch_size, units - start)
        messages = torch.tensor(
            rng.integers(0, 2, size=(count, MESSAGE_BITS)),
            dtype=torch.float32,
            device=device,
        )
        codewords = encode_batch(messages, matrices.generator)
        noisy = transmit_batch(codewords, config.error_probability, generator)
        flipped_bits += int((noisy != codewords).sum().item())

        for message, received in zip(batch_to_vectors(messages), batch_to_vectors(noisy)):
            outcome = decoder.try_decode(received)
            if not outcome.ok:
                failures += 1
                wrong_units += 1
                wrong_bits += message.xor(received.slice(0, MESSAGE_BITS)).hamming_weight()
                continue

            errors = message.xor(outcome.value.message).hamming_weight()
            wrong_bits += errors
            if errors:
                wrong_units += 1

    stats = ChannelStatistics(
        units=units,
        raw_bit_error_rate=flipped_bits / (units * CODEWORD_BITS),
        residual_bit_error_rate=wrong_bits / (units * MESSAGE_BITS),
        unit_error_rate=wrong_units / units,
        failures=failures,
    )
    get_logger().transmission_summary(
        "Evaluation", units, flipped_bits,
        raw_ber=stats.raw_bit_error_rate,
        residual_ber=stats.residual_bit_error_rate,
        unit_error_rate=stats.unit_error_rate,
    )
    return stats
