"""
Bit, byte and text conversions for GolayCode.
"""

from GolayCode.encoding.codec import (
    vector_to_string,
    string_to_vector,
    byte_to_vector,
    vector_to_byte,
    message_to_byte,
    bytes_to_vectors,
    text_to_bytes,
    bytes_to_text,
)
from GolayCode.encoding.batch import (
    bytes_to_message_batch,
    message_batch_to_bytes,
    encode_batch,
    transmit_batch,
    batch_to_vectors,
    vectors_to_batch,
)

__all__ = [
    "vector_to_string",
    "string_to_vector",
    "byte_to_vector",
    "vector_to_byte",
    "message_to_byte",
    "bytes_to_vectors",
    "text_to_bytes",
    "bytes_to_text",
    "bytes_to_message_batch",
    "message_batch_to_bytes",
    "encode_batch",
    "transmit_batch",
    "batch_to_vectors",
    "vectors_to_batch",
]
