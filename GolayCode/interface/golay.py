"""
GolayCode main interface.
"""

import os
from dataclasses import dataclass
from typing import Callable, List, Optional

from GolayCode.channel.noisy import NoisyChannel, error_positions
from GolayCode.coding.decoder import Decoder
from GolayCode.coding.encoder import Encoder
from GolayCode.coding.result import DecodeResult
from GolayCode.core.bitvector import BitVector
from GolayCode.core.constants import CODEWORD_BITS
from GolayCode.core.errors import InvalidLength
from GolayCode.core.matrices import build_matrices
from GolayCode.data.bitmap import load_bitmap, save_bitmap
from GolayCode.encoding.codec import bytes_to_text, text_to_bytes
from GolayCode.interface.framer import FrameProcessor, FrameStats
from GolayCode.interface.visualizer import TransmissionVisualizer
from GolayCode.simulation.config import SimulationConfig
from GolayCode.utils.logging import get_logger
from GolayCode.utils.timing import timing_context

VectorOverride = Callable[[BitVector], Optional[BitVector]]


@dataclass
class VectorReport:
    """Every stage of one vector sent through the channel."""
    original: BitVector
    encoded: BitVector
    transmitted: BitVector
    received: BitVector
    decoded: BitVector
    error_positions: List[int]
    result: DecodeResult


@dataclass
class StringReport:
    """A text sent through the channel with and without coding."""
    text: str
    without_coding: str
    with_coding: str
    stats_without_coding: FrameStats
    stats_with_coding: FrameStats


@dataclass
class BitmapReport:
    """Files written by the BMP scenario."""
    source_path: str
    without_coding_path: str
    with_coding_path: str
    stats_without_coding: FrameStats
    stats_with_coding: FrameStats


class Golay:
    """
    High-level interface for the Golay coding scenarios.

    Wires the encoder, decoder and noisy channel together and runs a
    vector, a text or the pixel data of a BMP image through them.

    Usage:
        golay = Golay(SimulationConfig(error_probability=0.05))

        report = golay.code_vector(BitVector.from_bit_string("101100111000"))
        report = golay.code_string("Hello!")
        report = golay.code_bmp_image("picture.bmp")
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        visualizer: Optional[TransmissionVisualizer] = None,
    ):
        self.config = config or SimulationConfig()
        self.logger = get_logger()
        self.logger.set_level(self.config.log_level)

        matrices = build_matrices()
        self.encoder = Encoder(matrices.generator)
        self.decoder = Decoder(matrices.parity_check, matrices.b)
        self.channel = NoisyChannel(self.config.error_probability, seed=self.config.seed)
        self.framer = FrameProcessor(
            self.config,
            encoder=self.encoder,
            decoder=self.decoder,
            channel=self.channel,
        )
        self.visualizer = visualizer or TransmissionVisualizer()
        self.visualizer.logger.set_level(self.config.log_level)

    @property
    def probability(self) -> float:
        return self.config.error_probability

    def code_vector(
        self,
        vector: BitVector,
        override: Optional[VectorOverride] = None,
    ) -> VectorReport:
        """
        Encodes a vector, sends it through the channel and decodes it.

        Args:
            vector: 12-bit message
            override: Called with the noisy vector; may return a 23-bit
                vector to decode instead

        Returns:
            VectorReport

        Raises:
            InvalidLength: If the message or the replacement has the wrong length
            DecodingFailure: If the received vector cannot be decoded
        """
        self.visualizer.start_operation("vector", {"Failure probability": self.probability})

        encoded = self.encoder.encode(vector)
        transmitted = self.channel.transmit(encoded)

        received = transmitted
        if override is not None:
            replacement = override(transmitted)
            if replacement is not None:
                if len(replacement) != CODEWORD_BITS:
                    raise InvalidLength(f"Vector must be a length of {CODEWORD_BITS}")
                received = replacement

        result = self.decoder.decode_detailed(received)
        report = VectorReport(
            original=vector.copy(),
            encoded=encoded,
            transmitted=transmitted,
            received=received,
            decoded=result.message,
            error_positions=error_positions(encoded, transmitted),
            result=result,
        )

        self.visualizer.log_vector(report)
        self.visualizer.end_operation("vector", {"Decoding stage": result.stage.value})
        return report

    def code_string(self, text: str) -> StringReport:
        """
        Sends a text through the channel with and without Golay coding.

        Args:
            text: Text to send, UTF-8 encoded one byte per unit

        Returns:
            StringReport with both received texts
        """
        self.visualizer.start_operation("string", {"Failure probability": self.probability})

        data = text_to_bytes(text)
        without_coding, stats_without = self.framer.process_without_coding(data)
        with_coding, stats_with = self.framer.process_with_coding(data)

        report = StringReport(
            text=text,
            without_coding=bytes_to_text(without_coding),
            with_coding=bytes_to_text(with_coding),
            stats_without_coding=stats_without,
            stats_with_coding=stats_with,
        )

        self.visualizer.log_string(report)
        self.visualizer.end_operation("string")
        return report

    def code_bmp_image(self, filepath: str) -> BitmapReport:
        """
        Sends the pixel data of a BMP image through the channel.

        Writes one image processed without coding and one processed with
        Golay coding into config.output_dir. Headers are copied unchanged.

        Args:
            filepath: Path to the BMP image

        Returns:
            BitmapReport with the written paths

        Raises:
            FileNotFoundError: If the image does not exist
            InvalidFormat: If the file is shorter than the BMP header
        """
        self.visualizer.start_operation("bitmap", {"File": filepath})

        image = load_bitmap(filepath, self.config.header_size)

        with timing_context("Processing image without coding"):
            pixels_without, stats_without = self.framer.process_without_coding(image.pixels)

        with timing_context("Processing image with coding"):
            pixels_with, stats_with = self.framer.process_with_coding(image.pixels)

        without_path = save_bitmap(
            image.with_pixels(pixels_without),
            os.path.join(self.config.output_dir, self.config.without_coding_filename),
        )
        with_path = save_bitmap(
            image.with_pixels(pixels_with),
            os.path.join(self.config.output_dir, self.config.with_coding_filename),
        )
        self.logger.info("New files are created")

        self.visualizer.end_operation("bitmap", {
            "Without coding": without_path,
            "With coding": with_path,
        })
        return BitmapReport(
            source_path=filepath,
            without_coding_path=without_path,
            with_coding_path=with_path,
            stats_without_coding=stats_without,
            stats_with_coding=stats_with,
        )
