"""
GolayCode interface module.
"""

from GolayCode.interface.golay import Golay, VectorReport, StringReport, BitmapReport
from GolayCode.interface.framer import FrameProcessor, FrameStats
from GolayCode.interface.visualizer import TransmissionVisualizer, render_errors

__all__ = [
    "Golay",
    "VectorReport",
    "StringReport",
    "BitmapReport",
    "FrameProcessor",
    "FrameStats",
    "TransmissionVisualizer",
    "render_errors",
]
