"""
Byte-stream processing through the noisy channel, with and without coding.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import torch

from GolayCode.channel.noisy import NoisyChannel, count_errors
from GolayCode.coding.decoder import Decoder
from GolayCode.coding.encoder import Encoder
from GolayCode.core.bitvector import BitVector
from GolayCode.core.constants import BYTE_BITS, MESSAGE_BITS
from GolayCode.encoding.batch import (
    batch_to_vectors,
    bytes_to_message_batch,
    encode_batch,
    message_batch_to_bytes,
    transmit_batch,
)
from GolayCode.encoding.codec import message_to_byte
from GolayCode.simulation.config import SimulationConfig
from GolayCode.utils.device import get_device
from GolayCode.utils.logging import get_logger


@dataclass
class FrameStats:
    """Counters collected while processing one byte stream."""

    units: int = 0
    flipped_bits: int = 0
    corrected_bits: int = 0
    unit_errors: int = 0
    failures: int = 0
    retransmissions: int = 0

    @property
    def unit_error_rate(self) -> float:
        return self.unit_errors / self.units if self.units else 0.0


class FrameProcessor:
    """
    Sends byte streams through the channel one byte per unit.

    Without coding each byte travels as 8 raw bits. With coding each byte
    is zero-extended to 12 bits, encoded to 23, sent, decoded, and
    truncated back to 8 bits. Encoding and channel noise run batched on
    the configured torch device; decoding runs unit by unit.

    A 23-bit word always decodes with the standard Decoder, so
    max_retransmissions and the failure counters only take effect with a
    decoder that can reject words.
    """

    def __init__(
        self,
        config: SimulationConfig,
        encoder: Optional[Encoder] = None,
        decoder: Optional[Decoder] = None,
        channel: Optional[NoisyChannel] = None,
        device: Optional[torch.device] = None,
    ):
        self.config = config
        self.device = device or get_device(force_cpu=config.force_cpu)
        self.encoder = encoder or Encoder()
        self.decoder = decoder or Decoder()
        self.channel = channel or NoisyChannel(config.error_probability, seed=config.seed)
        self.logger = get_logger()

        self.generator = torch.Generator(device=self.device)
        if config.seed is not None:
            self.generator.manual_seed(config.seed)
        else:
            self.generator.seed()

    def _chunks(self, data: bytes) -> Iterator[bytes]:
        for start in range(0, len(data), self.config.batch_size):
            yield data[start:start + self.config.batch_size]

    def process_without_coding(self, data: bytes) -> Tuple[bytes, FrameStats]:
        """
        Sends raw bytes through the channel.

        Args:
            data: Bytes to send

        Returns:
            Tuple of (received bytes, stats)
        """
        stats = FrameStats()
        processed = bytearray()

        for chunk in self._chunks(data):
            bits = bytes_to_message_batch(chunk, self.device, width=BYTE_BITS)
            noisy = transmit_batch(bits, self.config.error_probability, self.generator)
            received = message_batch_to_bytes(noisy)

            stats.units += len(chunk)
            stats.flipped_bits += int((noisy != bits).sum().item())
            stats.unit_errors += sum(1 for a, b in zip(chunk, received) if a != b)
            processed += received

        self.logger.transmission_summary(
            "Without coding", stats.units, stats.flipped_bits,
            unit_errors=stats.unit_errors,
        )
        return bytes(processed), stats

    def process_with_coding(self, data: bytes) -> Tuple[bytes, FrameStats]:
        """
        Encodes, sends and decodes bytes.

        Args:
            data: Bytes to send

        Returns:
            Tuple of (decoded bytes, stats)
        """
        stats = FrameStats()
        processed = bytearray()

        for chunk in self._chunks(data):
            messages = bytes_to_message_batch(chunk, self.device)
            codewords = encode_batch(messages, self.encoder.generator)
            noisy = transmit_batch(codewords, self.config.error_probability, self.generator)
            stats.flipped_bits += int((noisy != codewords).sum().item())

            for original, codeword, received in zip(
                chunk, batch_to_vectors(codewords), batch_to_vectors(noisy)
            ):
                decoded = self._decode_unit(codeword, received, stats)
                stats.units += 1
                if decoded != original:
                    stats.unit_errors += 1
                processed.append(decoded)

        self.logger.transmission_summary(
            "With coding", stats.units, stats.flipped_bits,
            corrected_bits=stats.corrected_bits,
            unit_errors=stats.unit_errors,
            failures=stats.failures,
        )
        return bytes(processed), stats

    def _decode_unit(self, codeword: BitVector, received: BitVector, stats: FrameStats) -> int:
        outcome = self.decoder.try_decode(received)

        attempts = 0
        while not outcome.ok and attempts < self.config.max_retransmissions:
            attempts += 1
            stats.retransmissions += 1
            received = self.channel.transmit(codeword)
            stats.flipped_bits += count_errors(codeword, received)
            outcome = self.decoder.try_decode(received)

        if outcome.ok:
            stats.corrected_bits += outcome.value.corrected_bits
            return message_to_byte(outcome.value.message)

        stats.failures += 1
        self.logger.warning(f"Unit {stats.units}: {outcome.error} Keeping the received bits.")
        return message_to_byte(received.slice(0, MESSAGE_BITS))
