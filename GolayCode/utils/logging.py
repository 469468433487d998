import logging
import sys
from typing import Dict, Union


class GolayLogger:
    def __init__(self, name: str = "GolayCode", level: Union[int, str] = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)

        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: Union[int, str]) -> None:
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def transmission_summary(
        self,
        label: str,
        units: int,
        flipped_bits: int,
        **kwargs,
    ) -> None:
        msg = f"{label} | Units: {units} | Flipped bits: {flipped_bits}"
        for k, v in kwargs.items():
            if isinstance(v, float):
                msg += f" | {k}: {v:.4f}"
            else:
                msg += f" | {k}: {v}"
        self.info(msg)


_loggers: Dict[str, GolayLogger] = {}

def get_logger(name: str = "GolayCode") -> GolayLogger:
    if name not in _loggers:
        _loggers[name] = GolayLogger(name)
    return _loggers[name]
