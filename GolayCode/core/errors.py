"""
Error types raised by the Golay coding core.
"""


class GolayError(Exception):
    """Base class for errors that occur in Golay code processing."""


class InvalidLength(GolayError, ValueError):
    """A vector does not have the length an operation requires."""


class InvalidFormat(GolayError, ValueError):
    """Input text or data is not in the expected binary format."""


class DecodingFailure(GolayError):
    """
    No correctable error pattern matches the received word.

    The unit has to be discarded and sent again.
    """

    def __init__(self, message: str = "Failed to decode. Retransmission is required."):
        super().__init__(message)
