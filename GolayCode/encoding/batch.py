"""
Batch encoding and channel noise over tensors of many 12-bit units.
"""

import torch
import numpy as np
from typing import List, Optional

from GolayCode.core.bitvector import BitVector
from GolayCode.core.constants import BYTE_BITS, MESSAGE_BITS
from GolayCode.core.errors import InvalidLength
from GolayCode.utils.device import get_device


def bytes_to_message_batch(
    data: bytes,
    device: Optional[torch.device] = None,
    width: int = MESSAGE_BITS,
) -> torch.Tensor:
    """
    Converts bytes to a tensor of zero-padded bit rows.

    Args:
        data: Input bytes
        device: Target device for tensor (default: auto-detect)
        width: Bits per row, at least 8 (default: 12)

    Returns:
        Tensor of shape (len(data), width) holding 0.0/1.0, LSB first
    """
    if width < BYTE_BITS:
        raise InvalidLength(f"Rows must be at least {BYTE_BITS} bits wide to hold a byte")
    if device is None:
        device = get_device()

    raw = np.frombuffer(bytes(data), dtype=np.uint8)
    bits = np.unpackbits(raw[:, None], axis=1, bitorder="little")

    messages = np.zeros((len(raw), width), dtype=np.float32)
    messages[:, :BYTE_BITS] = bits
    return torch.tensor(messages, dtype=torch.float32, device=device)

def message_batch_to_bytes(messages: torch.Tensor) -> bytes:
    """
    Converts the first 8 bits of each row back to a byte.

    Args:
        messages: Tensor of shape (batch_size, >= 8)

    Returns:
        One byte per row
    """
    bits = messages[:, :BYTE_BITS].detach().cpu().numpy() > 0.5
    return np.packbits(bits.astype(np.uint8), axis=1, bitorder="little").reshape(-1).tobytes()

def encode_batch(messages: torch.Tensor, generator: np.ndarray) -> torch.Tensor:
    """
    Encodes every row of a message batch.

    Args:
        messages: Tensor of shape (batch_size, 12)
        generator: 12x23 generator matrix

    Returns:
        Tensor of shape (batch_size, 23) holding 0.0/1.0
    """
    if messages.dim() != 2 or messages.shape[1] != generator.shape[0]:
        raise InvalidLength(f"Messages must have shape (batch_size, {generator.shape[0]})")

    g = torch.tensor(generator, dtype=torch.float32, device=messages.device)
    return torch.remainder(messages @ g, 2.0)

def transmit_batch(
    bits: torch.Tensor,
    probability: float,
    generator: Optional[torch.Generator] = None,
) -> torch.Tensor:
    """
    Flips each bit independently with the given probability.

    Args:
        bits: Tensor of 0.0/1.0 values
        probability: Per-bit error probability in [0, 1]
        generator: Random generator on the same device as bits

    Returns:
        Noisy tensor of the same shape
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Error probability must be between 0 and 1, got {probability}")

    if probability == 0.0:
        return bits.clone()

    samples = torch.rand(bits.shape, generator=generator, device=bits.device, dtype=torch.float64)
    flips = (samples <= probability).to(bits.dtype)
    return torch.abs(bits - flips)

def batch_to_vectors(bits: torch.Tensor) -> List[BitVector]:
    """Converts each row of a 0/1 tensor to a BitVector."""
    rows = bits.detach().cpu().numpy() > 0.5
    return [BitVector.from_numpy(row) for row in rows]

def vectors_to_batch(
    vectors: List[BitVector],
    device: Optional[torch.device] = None,
) -> torch.Tensor:
    """Stacks equal-length vectors into a (len(vectors), length) tensor."""
    if device is None:
        device = get_device()
    if len({len(v) for v in vectors}) > 1:
        raise InvalidLength("All vectors in a batch must have the same length")

    rows = np.array([v.to_numpy() for v in vectors], dtype=np.float32)
    return torch.tensor(rows, dtype=torch.float32, device=device)
