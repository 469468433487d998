from GolayCode.channel.noisy import NoisyChannel, count_errors, error_positions

__all__ = [
    "NoisyChannel",
    "count_errors",
    "error_positions",
]
