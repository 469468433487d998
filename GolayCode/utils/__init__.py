from GolayCode.utils.device import get_device, set_device, DeviceContext
from GolayCode.utils.logging import get_logger, GolayLogger
from GolayCode.utils.io import read_bytes, write_bytes, ensure_dir
from GolayCode.utils.timing import Timer, timed, timing_context

__all__ = [
    "get_device",
    "set_device",
    "DeviceContext",
    "get_logger",
    "GolayLogger",
    "read_bytes",
    "write_bytes",
    "ensure_dir",
    "Timer",
    "timed",
    "timing_context",
]
