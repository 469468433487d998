from GolayCode.coding.encoder import Encoder
from GolayCode.coding.decoder import Decoder
from GolayCode.coding.result import CodingOutcome, DecodeResult, DecodeStage

__all__ = [
    "Encoder",
    "Decoder",
    "CodingOutcome",
    "DecodeResult",
    "DecodeStage",
]
