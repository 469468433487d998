"""
Simulation configuration for GolayCode.
"""

from dataclasses import dataclass
from typing import Optional

from GolayCode.core.constants import BMP_HEADER_SIZE


@dataclass
class SimulationConfig:
    """
    Configuration parameters for a coding session.

    Captures the channel, retransmission and output settings.
    """

    error_probability: float = 0.01
    seed: Optional[int] = None

    max_retransmissions: int = 0

    header_size: int = BMP_HEADER_SIZE
    output_dir: str = "."
    without_coding_filename: str = "image_without_coding.bmp"
    with_coding_filename: str = "image_with_coding.bmp"

    force_cpu: bool = False
    batch_size: int = 4096

    log_level: str = "INFO"

    def __post_init__(self):
        if not 0.0 <= self.error_probability <= 1.0:
            raise ValueError(
                f"error_probability must be between 0 and 1, got {self.error_probability}"
            )
        if self.max_retransmissions < 0:
            raise ValueError("max_retransmissions must not be negative")
        if self.header_size < 0:
            raise ValueError("header_size must not be negative")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "SimulationConfig":
        """Creates a SimulationConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
