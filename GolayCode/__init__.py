"""
GolayCode - Binary Golay Code Library

Encoding and syndrome decoding for the (23,12,7) binary Golay code,
correcting up to 3 bit errors per codeword, with a simulated noisy
channel and text and BMP transmission scenarios.
"""

from GolayCode.version import __version__

from GolayCode.core.bitvector import BitVector
from GolayCode.core.errors import GolayError, InvalidLength, InvalidFormat, DecodingFailure
from GolayCode.core.matrices import build_matrices

from GolayCode.coding.encoder import Encoder
from GolayCode.coding.decoder import Decoder
from GolayCode.channel.noisy import NoisyChannel

from GolayCode.interface.golay import Golay
from GolayCode.simulation.config import SimulationConfig

from GolayCode import core
from GolayCode import coding
from GolayCode import channel
from GolayCode import encoding
from GolayCode import interface
from GolayCode import simulation

__all__ = [
    "__version__",
    "BitVector",
    "GolayError",
    "InvalidLength",
    "InvalidFormat",
    "DecodingFailure",
    "build_matrices",
    "Encoder",
    "Decoder",
    "NoisyChannel",
    "Golay",
    "SimulationConfig",
    "core",
    "coding",
    "channel",
    "encoding",
    "interface",
    "simulation",
]
