from GolayCode.simulation.config import SimulationConfig
from GolayCode.simulation.evaluation import ChannelStatistics, evaluate_channel

__all__ = [
    "SimulationConfig",
    "ChannelStatistics",
    "evaluate_channel",
]
