"""
Visualizer for GolayCode transmissions.
"""

from typing import Optional, Dict, Any, List
from dataclasses import dataclass

from GolayCode.core.bitvector import BitVector
from GolayCode.utils.timing import Timer
from GolayCode.utils.logging import get_logger

RED = "\033[31m"
RESET = "\033[0m"


@dataclass
class OperationLog:
    """Log entry for a coding scenario."""
    operation: str
    details: Dict[str, Any]
    duration: float = 0.0


def render_errors(sent: BitVector, received: BitVector, color: bool = True) -> str:
    """
    Renders the received vector with flipped bits highlighted.

    Args:
        sent: Vector before the channel
        received: Vector after the channel
        color: Wrap flipped bits in red ANSI codes; otherwise in brackets

    Returns:
        Bit string of the received vector
    """
    parts = []
    for before, after in zip(sent, received):
        char = "1" if after else "0"
        if before != after:
            char = f"{RED}{char}{RESET}" if color else f"[{char}]"
        parts.append(char)
    return "".join(parts)


class TransmissionVisualizer:
    """
    Logs what each coding scenario does.

    Shows vectors at every stage and the bits the channel flipped, for
    demonstration and debugging purposes.
    """

    def __init__(self, verbose: bool = True, color: bool = True):
        self.verbose = verbose
        self.color = color
        self.logs: List[OperationLog] = []
        self.timer = Timer("Visualizer")
        self.logger = get_logger("Visualizer")

    def start_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Starts timing and logging an operation."""
        self.timer.start()
        if self.verbose:
            self.logger.info(f"[START {operation}]")
            if details:
                for k, v in details.items():
                    self.logger.info(f"  {k}: {v}")

    def end_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Ends timing and logging an operation."""
        duration = self.timer.stop()
        self.logs.append(OperationLog(operation=operation, details=details or {}, duration=duration))

        if self.verbose:
            if details:
                for k, v in details.items():
                    self.logger.info(f"  {k}: {v}")
            self.logger.info(f"  Duration: {duration:.3f}s")

    def log_vector(self, report) -> None:
        """Logs every stage of a vector scenario."""
        if not self.verbose:
            return
        self.logger.info(f"Vector is: {report.original}")
        self.logger.info(f"Encoded vector is: {report.encoded}")
        self.logger.info(
            f"After sending through noisy channel ({len(report.error_positions)} errors): "
            f"{render_errors(report.encoded, report.transmitted, self.color)}"
        )
        if report.received != report.transmitted:
            self.logger.info(f"Vector changed before decoding to: {report.received}")
        self.logger.info(f"Decoded vector is: {report.decoded}")

    def log_string(self, report) -> None:
        """Logs both results of a text scenario."""
        if not self.verbose:
            return
        self.logger.info(f"String is: {report.text}")
        self.logger.info("After sending string through noisy channel:")
        self.logger.info(f"String without coding: {report.without_coding}")
        self.logger.info(f"String with Golay coding: {report.with_coding}")

    def summary(self) -> None:
        """Logs a summary of the recorded operations."""
        self.logger.info("OPERATION SUMMARY")
        self.logger.info(f"Total operations: {len(self.logs)}")

        by_type: Dict[str, List[OperationLog]] = {}
        for log in self.logs:
            by_type.setdefault(log.operation, []).append(log)

        for op_type, logs in by_type.items():
            total_time = sum(l.duration for l in logs)
            self.logger.info(f"  {op_type}: {len(logs)} ops, {total_time:.3f}s total")
